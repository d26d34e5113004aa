"""Load site configuration mappings and YAML files into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import (
    _IssueCollector,
    _optional_bool,
    _optional_list,
    _optional_mapping,
    _require_text,
)
from .models import (
    BuildOptions,
    MarkdownConfig,
    SiteConfig,
)
from .sidebar import _build_nav, _build_sidebar_tree
from .theme import (
    _build_edit_link_config,
    _build_footer_config,
    _build_last_updated_config,
    _build_search_config,
    _build_social_links,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .models import MarkdownHook


def load_site_config(
    path: Path, *, markdown_hook: MarkdownHook | None = None
) -> SiteConfig:
    """Load a YAML file laid out like a VitePress configuration object.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``site.yaml``).
    markdown_hook : MarkdownHook, optional
        Callable applied to the markdown processor; YAML cannot express
        callables so the hook is supplied here.

    Returns
    -------
    SiteConfig
        Fully populated, read-only site configuration.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If any entry is missing or invalid; every problem is listed.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from mlops_pages.config import load_site_config
    >>> site = load_site_config(Path("site.yaml"))  # doctest: +SKIP
    >>> site.nav[0].text  # doctest: +SKIP
    'Home'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return build_site_config(loaded, markdown_hook=markdown_hook)


def build_site_config(
    raw: cabc.Mapping[str, typ.Any], *, markdown_hook: MarkdownHook | None = None
) -> SiteConfig:
    """Validate ``raw`` and build the site configuration from it.

    Construction is all-or-nothing: problems are collected across the whole
    mapping and reported in one :class:`SiteConfigError`, so a partially
    populated tree is never returned.
    """
    issues = _IssueCollector()
    payload = dict(raw)

    title = _require_text(payload, "title", "", issues)
    description = payload.get("description")
    if description is None:
        description = ""
    if not isinstance(description, str):
        issues.add("description", f"must be a string, got {description!r}")
        description = ""
    clean_urls = _optional_bool(payload, "cleanUrls", "", issues, default=False)
    ignore_dead_links = _optional_bool(
        payload, "ignoreDeadLinks", "", issues, default=False
    )

    theme = _optional_mapping(payload, "themeConfig", "", issues) or {}
    nav = _build_nav(
        _optional_list(theme, "nav", "themeConfig", issues), "themeConfig.nav", issues
    )
    sidebar = _build_sidebar_tree(
        theme.get("sidebar"), "themeConfig.sidebar", issues
    )
    social_links = _build_social_links(
        _optional_list(theme, "socialLinks", "themeConfig", issues),
        "themeConfig.socialLinks",
        issues,
    )
    footer = _build_footer_config(
        _optional_mapping(theme, "footer", "themeConfig", issues),
        "themeConfig.footer",
        issues,
    )
    edit_link = _build_edit_link_config(
        _optional_mapping(theme, "editLink", "themeConfig", issues),
        "themeConfig.editLink",
        issues,
    )
    last_updated = _build_last_updated_config(
        _optional_mapping(theme, "lastUpdated", "themeConfig", issues),
        "themeConfig.lastUpdated",
        issues,
    )
    search = _build_search_config(
        _optional_mapping(theme, "search", "themeConfig", issues),
        "themeConfig.search",
        issues,
    )
    markdown = _build_markdown_config(
        _optional_mapping(payload, "markdown", "", issues),
        markdown_hook,
        issues,
    )
    build_options = _build_build_options(
        _optional_mapping(payload, "vite", "", issues), issues
    )

    issues.raise_if_any()
    return SiteConfig(
        title=title,
        description=description,
        clean_urls=bool(clean_urls),
        ignore_dead_links=bool(ignore_dead_links),
        nav=nav,
        sidebar=sidebar,
        social_links=social_links,
        footer=footer,
        edit_link=edit_link,
        last_updated=last_updated,
        search=search,
        markdown=markdown,
        build_options=build_options,
    )


def _build_markdown_config(
    payload: cabc.Mapping[str, typ.Any] | None,
    hook: MarkdownHook | None,
    issues: _IssueCollector,
) -> MarkdownConfig:
    line_numbers = _optional_bool(
        payload or {}, "lineNumbers", "markdown", issues, default=False
    )
    if hook is None:
        return MarkdownConfig(line_numbers=bool(line_numbers))
    if not callable(hook):
        issues.add("markdown.config", "hook must be callable")
        return MarkdownConfig(line_numbers=bool(line_numbers))
    return MarkdownConfig(line_numbers=bool(line_numbers), config=hook)


def _build_build_options(
    payload: cabc.Mapping[str, typ.Any] | None, issues: _IssueCollector
) -> BuildOptions:
    """Read ``vite.build.chunkSizeWarningLimit`` when present."""
    base = BuildOptions()
    build = _optional_mapping(payload or {}, "build", "vite", issues) or {}
    limit = build.get("chunkSizeWarningLimit", base.chunk_size_warning_limit)
    match limit:
        case bool():
            pass
        case int() if limit >= 0:
            return BuildOptions(chunk_size_warning_limit=limit)
    issues.add(
        "vite.build.chunkSizeWarningLimit",
        f"must be a non-negative integer, got {limit!r}",
    )
    return base


__all__ = ["build_site_config", "load_site_config"]
