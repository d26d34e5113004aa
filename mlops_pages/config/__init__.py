"""Build and validate the MLOps Training site configuration.

This subpackage holds the typed, read-only model of the site configuration
(:class:`SiteConfig` with its navigation, sidebar tree, footer, edit link,
timestamp, search, markdown, and bundler settings) together with two ways of
producing it: :func:`load_config` returns one of the baked-in snapshots, and
:func:`load_site_config` reads the same shape from a YAML file. Both go
through :func:`build_site_config`, which reports every invalid entry in a
single :class:`SiteConfigError`.

Examples
--------
>>> from mlops_pages.config import load_config
>>> site = load_config("default")
>>> site.search.provider
<SearchProvider.LOCAL: 'local'>
>>> site.sidebar["/"][0].text
'Getting Started'
"""

from .loader import build_site_config, load_site_config
from .models import (
    DATE_STYLES,
    BuildOptions,
    EditLinkConfig,
    FooterConfig,
    LastUpdatedConfig,
    MarkdownConfig,
    MarkdownHook,
    NavItem,
    SearchConfig,
    SearchProvider,
    SidebarGroup,
    SidebarItem,
    SidebarLink,
    SidebarTree,
    SiteConfig,
    SiteConfigError,
    SiteMeta,
    SocialLink,
)
from .presets import VARIANTS, load_config

__all__ = [
    "DATE_STYLES",
    "VARIANTS",
    "BuildOptions",
    "EditLinkConfig",
    "FooterConfig",
    "LastUpdatedConfig",
    "MarkdownConfig",
    "MarkdownHook",
    "NavItem",
    "SearchConfig",
    "SearchProvider",
    "SidebarGroup",
    "SidebarItem",
    "SidebarLink",
    "SidebarTree",
    "SiteConfig",
    "SiteConfigError",
    "SiteMeta",
    "SocialLink",
    "build_site_config",
    "load_config",
    "load_site_config",
]
