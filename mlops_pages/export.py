"""Export the site configuration for the external site renderer.

The renderer (VitePress) reads its configuration from
``docs/.vitepress/config.mjs``. This module turns a
:class:`~mlops_pages.config.SiteConfig` back into that shape, either as a
JavaScript module rendered from a Jinja template or as plain JSON for tooling
that cannot evaluate JavaScript. The markdown ``config`` hook is a Python
callable, so the exported module always carries the identity hook.

Typical usage mirrors the CLI:

>>> from pathlib import Path
>>> from mlops_pages.config import load_config
>>> writer = VitePressConfigWriter(load_config())
>>> writer.run(Path("docs/.vitepress/config.mjs"))  # doctest: +SKIP
PosixPath('docs/.vitepress/config.mjs')
"""

from __future__ import annotations

import datetime as dt
import json
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from mlops_pages.config import SidebarGroup

if typ.TYPE_CHECKING:
    from mlops_pages.config import SidebarItem, SiteConfig

EXPORT_FORMATS = ("mjs", "json")
TEMPLATE_NAME = "config.mjs.jinja"


def to_vitepress_mapping(site: SiteConfig) -> dict[str, typ.Any]:
    """Return ``site`` laid out like a VitePress configuration object."""
    theme: dict[str, typ.Any] = {
        "nav": [{"text": item.text, "link": item.link} for item in site.nav],
        "sidebar": {
            prefix: [_sidebar_entry(group) for group in groups]
            for prefix, groups in site.sidebar.items()
        },
        "socialLinks": [
            {"icon": social.icon, "link": social.link} for social in site.social_links
        ],
    }
    if site.footer:
        theme["footer"] = {
            "message": site.footer.message,
            "copyright": site.footer.copyright,
        }
    if site.edit_link:
        theme["editLink"] = {
            "pattern": site.edit_link.pattern,
            "text": site.edit_link.text,
        }
    if site.last_updated:
        theme["lastUpdated"] = {
            "text": site.last_updated.text,
            "formatOptions": {
                "dateStyle": site.last_updated.date_style,
                "timeStyle": site.last_updated.time_style,
            },
        }
    theme["search"] = {"provider": site.search.provider.value}
    return {
        "title": site.title,
        "description": site.description,
        "cleanUrls": site.clean_urls,
        "ignoreDeadLinks": site.ignore_dead_links,
        "themeConfig": theme,
        "markdown": {"lineNumbers": site.markdown.line_numbers},
        "vite": {
            "build": {
                "chunkSizeWarningLimit": site.build_options.chunk_size_warning_limit
            }
        },
    }


def _sidebar_entry(item: SidebarItem) -> dict[str, typ.Any]:
    if not isinstance(item, SidebarGroup):
        return {"text": item.text, "link": item.link}
    entry: dict[str, typ.Any] = {"text": item.text}
    if item.collapsed is not None:
        entry["collapsed"] = item.collapsed
    entry["items"] = [_sidebar_entry(child) for child in item.items]
    return entry


def _js_literal(value: object) -> str:
    """Render a scalar as a JavaScript literal."""
    return json.dumps(value, ensure_ascii=False)


def _is_sidebar_group(value: object) -> bool:
    return isinstance(value, SidebarGroup)


class VitePressConfigWriter:
    """Render and write the renderer configuration for a site."""

    def __init__(self, site: SiteConfig, *, templates_dir: Path | None = None) -> None:
        """Initialize the writer and its Jinja environment.

        Parameters
        ----------
        site : SiteConfig
            Configuration to export.
        templates_dir : Path, optional
            Directory containing ``config.mjs.jinja``; defaults to the
            package templates.
        """
        self.site = site
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["js"] = _js_literal
        self.env.tests["sidebar_group"] = _is_sidebar_group
        self.template = self.env.get_template(TEMPLATE_NAME)

    def render(self, fmt: str = "mjs") -> str:
        """Return the exported configuration text in ``fmt``.

        Raises
        ------
        ValueError
            If ``fmt`` is not one of :data:`EXPORT_FORMATS`.
        """
        match fmt:
            case "mjs":
                return self.template.render(
                    site=self.site, generated_at=dt.datetime.now(dt.UTC)
                )
            case "json":
                payload = json.dumps(
                    to_vitepress_mapping(self.site), indent=2, ensure_ascii=False
                )
                return f"{payload}\n"
        allowed = ", ".join(EXPORT_FORMATS)
        msg = f"Unknown export format '{fmt}'. Expected one of: {allowed}"
        raise ValueError(msg)

    def run(self, output: Path, fmt: str = "mjs") -> Path:
        """Render and write the configuration, returning the output path."""
        text = self.render(fmt)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
        return output


def render_vitepress_config(site: SiteConfig) -> str:
    """Return the ``config.mjs`` module text for ``site``."""
    return VitePressConfigWriter(site).render("mjs")


__all__ = [
    "EXPORT_FORMATS",
    "VitePressConfigWriter",
    "render_vitepress_config",
    "to_vitepress_mapping",
]
