"""Unit tests for sidebar traversal and sidebar lookup helpers."""

from __future__ import annotations

from mlops_pages.config import (
    NavItem,
    SidebarGroup,
    SidebarLink,
    SidebarTree,
    SiteConfig,
    load_config,
)
from mlops_pages.navigation import (
    find_duplicate_links,
    find_group,
    iter_sidebar_groups,
    iter_sidebar_links,
    iter_site_links,
    sidebar_depth,
)


def _sample_groups() -> tuple[SidebarGroup, ...]:
    return (
        SidebarGroup(
            text="Outer",
            collapsed=False,
            items=(
                SidebarLink(text="First", link="/first"),
                SidebarGroup(
                    text="Inner",
                    collapsed=True,
                    items=(SidebarLink(text="Deep", link="/inner/deep"),),
                ),
                SidebarLink(text="Last", link="/last"),
            ),
        ),
        SidebarGroup(text="Second", items=(SidebarLink(text="Solo", link="/first"),)),
    )


def test_iter_sidebar_links_is_depth_first_in_declaration_order() -> None:
    """Links come out in render order with the trail of enclosing groups."""
    pairs = [(trail, link.text) for trail, link in iter_sidebar_links(_sample_groups())]
    assert pairs == [
        (("Outer",), "First"),
        (("Outer", "Inner"), "Deep"),
        (("Outer",), "Last"),
        (("Second",), "Solo"),
    ], f"unexpected traversal {pairs!r}"


def test_iter_sidebar_groups_visits_parents_first() -> None:
    """Groups are yielded before their nested groups."""
    names = [group.text for group in iter_sidebar_groups(_sample_groups())]
    assert names == ["Outer", "Inner", "Second"], f"unexpected groups {names!r}"


def test_sidebar_depth_counts_group_levels() -> None:
    """Depth counts nested groups, not links."""
    assert sidebar_depth(_sample_groups()) == 2, "expected two group levels"
    assert sidebar_depth(()) == 0, "expected zero depth for empty sidebars"
    assert sidebar_depth(load_config().sidebar["/"]) == 3, (
        "expected three group levels in the default sidebar"
    )


def test_find_group_follows_trail() -> None:
    """Nested groups are located by their text trail."""
    inner = find_group(_sample_groups(), "Outer", "Inner")
    assert inner is not None, "expected to find the Inner group"
    assert inner.collapsed is True, "expected Inner to start collapsed"
    assert find_group(_sample_groups(), "Outer", "Missing") is None, (
        "expected None for unknown groups"
    )


def test_duplicate_links_are_reported_but_nav_is_ignored() -> None:
    """Sidebar duplicates are reported; nav repeats are expected."""
    site = SiteConfig(
        title="Site",
        description="",
        nav=(NavItem(text="First", link="/first"),),
        sidebar=SidebarTree({"/": _sample_groups()}),
    )
    duplicates = find_duplicate_links(site)
    assert list(duplicates) == ["/first"], f"unexpected duplicates {duplicates!r}"
    origins = [(hit.origin, hit.trail) for hit in duplicates["/first"]]
    assert origins == [("/", ("Outer",)), ("/", ("Second",))], (
        f"unexpected occurrences {origins!r}"
    )
    assert find_duplicate_links(load_config()) == {}, (
        "expected the default sidebar to have unique links"
    )


def test_iter_site_links_lists_nav_first() -> None:
    """Nav entries precede sidebar entries."""
    occurrences = list(iter_site_links(load_config()))
    assert [hit.origin for hit in occurrences[:4]] == ["nav"] * 4, (
        "expected nav entries first"
    )
    assert occurrences[4].origin == "/", "expected sidebar entries after nav"


def test_sidebar_tree_resolves_longest_prefix() -> None:
    """Pages use the sidebar registered under their longest matching prefix."""
    root = (SidebarGroup(text="Root"),)
    guide = (SidebarGroup(text="Guide"),)
    tree = SidebarTree({"/": root, "/guide/": guide})
    assert tree.for_path("/guide/setup") == guide, "expected the guide sidebar"
    assert tree.for_path("/other") == root, "expected the root sidebar"
    assert SidebarTree({"/guide/": guide}).for_path("/other") == (), (
        "expected no sidebar when nothing matches"
    )


def test_sidebar_tree_is_read_only() -> None:
    """The tree exposes no mutation API and compares by ordered content."""
    tree = SidebarTree({"/": (SidebarGroup(text="Root"),)})
    assert not hasattr(tree, "__setitem__"), "expected no item assignment"
    assert tree == SidebarTree([("/", [SidebarGroup(text="Root")])]), (
        "expected equal trees from mapping and pairs"
    )
