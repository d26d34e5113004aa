"""Walk navigation bars and sidebar trees in declaration order.

The sidebar is a tree of :class:`~mlops_pages.config.SidebarGroup` nodes whose
children are rendered top to bottom exactly as declared. The helpers here
traverse that tree depth-first without reordering anything, so callers can
list links, measure nesting, or spot links that appear more than once.

Examples
--------
>>> from mlops_pages.config import load_config
>>> from mlops_pages.navigation import iter_sidebar_links, sidebar_depth
>>> site = load_config()
>>> trail, link = next(iter_sidebar_links(site.sidebar["/"]))
>>> trail, link.link
(('Getting Started',), '/README')
>>> sidebar_depth(site.sidebar["/"])
3
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from mlops_pages.config import SidebarGroup, SidebarLink

if typ.TYPE_CHECKING:
    from mlops_pages.config import SiteConfig


@dc.dataclass(frozen=True, slots=True)
class LinkOccurrence:
    """Where a navigation link was declared."""

    origin: str
    trail: tuple[str, ...]
    text: str
    link: str


def iter_sidebar_links(
    groups: cabc.Iterable[SidebarGroup], trail: tuple[str, ...] = ()
) -> cabc.Iterator[tuple[tuple[str, ...], SidebarLink]]:
    """Yield ``(trail, link)`` pairs depth-first in declaration order.

    ``trail`` holds the texts of the groups enclosing the link, outermost
    first.
    """
    for group in groups:
        group_trail = (*trail, group.text)
        for item in group.items:
            match item:
                case SidebarGroup():
                    yield from iter_sidebar_links((item,), group_trail)
                case SidebarLink():
                    yield group_trail, item


def iter_sidebar_groups(
    groups: cabc.Iterable[SidebarGroup],
) -> cabc.Iterator[SidebarGroup]:
    """Yield every group depth-first, parents before their children."""
    for group in groups:
        yield group
        yield from iter_sidebar_groups(
            item for item in group.items if isinstance(item, SidebarGroup)
        )


def sidebar_depth(groups: cabc.Iterable[SidebarGroup]) -> int:
    """Return the deepest group nesting level; top-level groups count as 1."""
    deepest = 0
    for group in groups:
        nested = [item for item in group.items if isinstance(item, SidebarGroup)]
        deepest = max(deepest, 1 + sidebar_depth(nested))
    return deepest


def find_group(
    groups: cabc.Iterable[SidebarGroup], *trail: str
) -> SidebarGroup | None:
    """Return the group reached by following group texts in ``trail``."""
    if not trail:
        return None
    head, *rest = trail
    for group in groups:
        if group.text != head:
            continue
        if not rest:
            return group
        nested = [item for item in group.items if isinstance(item, SidebarGroup)]
        return find_group(nested, *rest)
    return None


def iter_site_links(site: SiteConfig) -> cabc.Iterator[LinkOccurrence]:
    """Yield every nav and sidebar link of ``site``.

    Nav items come first with origin ``"nav"``; sidebar links follow with the
    origin set to their sidebar prefix.
    """
    for item in site.nav:
        yield LinkOccurrence(origin="nav", trail=(), text=item.text, link=item.link)
    for prefix, groups in site.sidebar.items():
        for trail, link in iter_sidebar_links(groups):
            yield LinkOccurrence(
                origin=prefix, trail=trail, text=link.text, link=link.link
            )


def find_duplicate_links(site: SiteConfig) -> dict[str, list[LinkOccurrence]]:
    """Map each sidebar link declared more than once to its occurrences.

    Duplicates are allowed; this only reports them. Nav items are excluded
    because they routinely repeat sidebar entries.
    """
    seen: dict[str, list[LinkOccurrence]] = {}
    for occurrence in iter_site_links(site):
        if occurrence.origin == "nav":
            continue
        seen.setdefault(occurrence.link, []).append(occurrence)
    return {link: found for link, found in seen.items() if len(found) > 1}


__all__ = [
    "LinkOccurrence",
    "find_duplicate_links",
    "find_group",
    "iter_sidebar_groups",
    "iter_sidebar_links",
    "iter_site_links",
    "sidebar_depth",
]
