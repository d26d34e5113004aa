"""Navigation and sidebar configuration builders."""

from __future__ import annotations

import typing as typ

from .helpers import (
    _IssueCollector,
    _optional_bool,
    _require_link,
    _require_text,
)
from .models import NavItem, SidebarGroup, SidebarItem, SidebarLink, SidebarTree

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def _build_nav(
    entries: list[typ.Any], location: str, issues: _IssueCollector
) -> tuple[NavItem, ...]:
    """Build the top navigation bar entries."""
    items: list[NavItem] = []
    for index, entry in enumerate(entries):
        entry_location = f"{location}[{index}]"
        match entry:
            case dict():
                pass
            case _:
                issues.add(entry_location, "navigation entries must be mappings")
                continue
        text = _require_text(entry, "text", entry_location, issues)
        link = _require_link(entry, entry_location, issues)
        items.append(NavItem(text=text, link=link))
    return tuple(items)


def _build_sidebar_tree(
    payload: cabc.Mapping[str, typ.Any] | list[typ.Any] | None,
    location: str,
    issues: _IssueCollector,
) -> SidebarTree:
    """Build the prefix-keyed sidebar mapping.

    A bare list is accepted as shorthand for a sidebar registered under
    ``"/"``.
    """
    match payload:
        case None:
            return SidebarTree()
        case list():
            prefixed: cabc.Mapping[str, typ.Any] = {"/": payload}
        case dict():
            prefixed = payload
        case _:
            issues.add(location, "sidebar must be a mapping of path prefixes")
            return SidebarTree()

    tree: list[tuple[str, tuple[SidebarGroup, ...]]] = []
    for prefix, groups in prefixed.items():
        prefix_location = f"{location}[{prefix!r}]"
        if not isinstance(prefix, str) or not prefix.startswith("/"):
            issues.add(prefix_location, "sidebar prefixes must start with '/'")
            continue
        if not isinstance(groups, list):
            issues.add(prefix_location, "sidebar groups must be a list")
            continue
        built: list[SidebarGroup] = []
        for index, group in enumerate(groups):
            group_location = f"{prefix_location}[{index}]"
            item = _build_sidebar_item(group, group_location, issues, active=set())
            match item:
                case SidebarGroup():
                    built.append(item)
                case SidebarLink():
                    issues.add(group_location, "top-level sidebar entries must be groups")
                case None:
                    continue
        if not built:
            issues.add(prefix_location, "sidebar must contain at least one group")
        tree.append((prefix, tuple(built)))
    return SidebarTree(tree)


def _build_sidebar_item(
    payload: object,
    location: str,
    issues: _IssueCollector,
    *,
    active: set[int],
) -> SidebarItem | None:
    """Build a group (when ``items`` is present) or a leaf link."""
    match payload:
        case dict():
            pass
        case _:
            issues.add(location, "sidebar entries must be mappings")
            return None

    if "items" not in payload:
        text = _require_text(payload, "text", location, issues)
        link = _require_link(payload, location, issues)
        return SidebarLink(text=text, link=link)

    if id(payload) in active:
        issues.add(location, "sidebar groups must not contain themselves")
        return None
    active.add(id(payload))
    try:
        return _build_sidebar_group(payload, location, issues, active=active)
    finally:
        active.discard(id(payload))


def _build_sidebar_group(
    payload: cabc.Mapping[str, typ.Any],
    location: str,
    issues: _IssueCollector,
    *,
    active: set[int],
) -> SidebarGroup:
    text = _require_text(payload, "text", location, issues)
    collapsed = _optional_bool(payload, "collapsed", location, issues, default=None)
    children = payload.get("items")
    if not isinstance(children, list):
        issues.add(f"{location}.items", "must be a list")
        children = []
    items: list[SidebarItem] = []
    for index, child in enumerate(children):
        item = _build_sidebar_item(
            child, f"{location}.items[{index}]", issues, active=active
        )
        if item is not None:
            items.append(item)
    return SidebarGroup(text=text, items=tuple(items), collapsed=collapsed)


__all__ = ["_build_nav", "_build_sidebar_tree"]
