"""Resolve navigation links to public URLs, source files, and edit links.

Site links are written as clean paths (``/module-01/git/git-basics``). The
renderer maps each one to a markdown file under the docs root and, when clean
URLs are disabled, publishes it with an ``.html`` suffix. These helpers apply
the same mapping so dead links can be reported before a build and edit links
can be previewed.

Examples
--------
>>> from mlops_pages.links import page_href, source_path
>>> page_href("/module-01/README", clean_urls=False)
'/module-01/README.html'
>>> source_path("/module-01/git/git-basics#setup")
'module-01/git/git-basics.md'
>>> source_path("/")
'index.md'
"""

from __future__ import annotations

import dataclasses as dc
import posixpath
import typing as typ
from urllib.parse import urlsplit

from mlops_pages.navigation import iter_site_links

if typ.TYPE_CHECKING:
    from pathlib import Path

    from mlops_pages.config import SiteConfig
    from mlops_pages.navigation import LinkOccurrence

EXTERNAL_PREFIXES = ("http://", "https://", "mailto:", "tel:", "//")

# Suffixes that already name a published file; any other dot is part of the slug.
FILE_EXTENSIONS = frozenset(
    (".css", ".gif", ".htm", ".html", ".jpeg", ".jpg", ".js", ".json", ".md")
    + (".pdf", ".png", ".svg", ".txt", ".webp", ".xml", ".zip")
)


class DeadLinkError(RuntimeError):
    """Raised when navigation points at pages that do not exist."""

    def __init__(self, dead_links: list[DeadLink]) -> None:
        self.dead_links = tuple(dead_links)
        lines = "\n".join(f"- {entry.describe()}" for entry in self.dead_links)
        super().__init__(f"Found {len(self.dead_links)} dead link(s):\n{lines}")


@dc.dataclass(frozen=True, slots=True)
class DeadLink:
    """A navigation entry whose markdown source is missing."""

    occurrence: LinkOccurrence
    expected: str

    def describe(self) -> str:
        """Return a one-line human readable summary."""
        where = " > ".join((self.occurrence.origin, *self.occurrence.trail))
        return (
            f"{where}: '{self.occurrence.text}' -> {self.occurrence.link} "
            f"(missing {self.expected})"
        )


def is_external(link: str) -> bool:
    """Return True when ``link`` leaves the site."""
    return link.lower().startswith(EXTERNAL_PREFIXES)


def page_href(link: str, *, clean_urls: bool) -> str:
    """Return the public URL the renderer publishes for ``link``."""
    if is_external(link) or clean_urls:
        return link
    parts = urlsplit(link)
    path = parts.path
    extension = posixpath.splitext(path)[1].lower()
    if not path or path.endswith("/") or extension in FILE_EXTENSIONS:
        return link
    href = f"{path}.html"
    if parts.query:
        href = f"{href}?{parts.query}"
    if parts.fragment:
        href = f"{href}#{parts.fragment}"
    return href


def source_path(link: str) -> str | None:
    """Return the markdown file, relative to the docs root, behind ``link``.

    External links and bare fragments have no source file and return
    ``None``.
    """
    if is_external(link):
        return None
    path = urlsplit(link).path
    if not path:
        return None
    relative = path.lstrip("/")
    if not relative or relative.endswith("/"):
        return f"{relative}index.md"
    stem, extension = posixpath.splitext(relative)
    if extension == ".html":
        return f"{stem}.md"
    if extension == ".md":
        return relative
    return f"{relative}.md"


def edit_url(site: SiteConfig, link: str) -> str | None:
    """Return the "edit this page" URL for ``link``, if one is configured."""
    if site.edit_link is None:
        return None
    relative = source_path(link)
    if relative is None:
        return None
    return site.edit_link.url_for(relative)


def find_dead_links(site: SiteConfig, docs_root: Path) -> list[DeadLink]:
    """Return every internal nav or sidebar link without a markdown source."""
    dead: list[DeadLink] = []
    for occurrence in iter_site_links(site):
        relative = source_path(occurrence.link)
        if relative is None:
            continue
        if not (docs_root / relative).is_file():
            dead.append(DeadLink(occurrence=occurrence, expected=relative))
    return dead


def check_dead_links(site: SiteConfig, docs_root: Path) -> list[DeadLink]:
    """Fail on dead links unless the site tolerates them.

    Returns
    -------
    list[DeadLink]
        The dead links found; only non-empty when ``ignore_dead_links`` is
        set on the site.

    Raises
    ------
    DeadLinkError
        If dead links exist and the site does not ignore them.
    """
    dead = find_dead_links(site, docs_root)
    if dead and not site.ignore_dead_links:
        raise DeadLinkError(dead)
    return dead


__all__ = [
    "EXTERNAL_PREFIXES",
    "FILE_EXTENSIONS",
    "DeadLink",
    "DeadLinkError",
    "check_dead_links",
    "edit_url",
    "find_dead_links",
    "is_external",
    "page_href",
    "source_path",
]
