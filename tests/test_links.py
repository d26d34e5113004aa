"""Unit tests for link resolution and dead-link checks."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import pytest

from mlops_pages.config import (
    EditLinkConfig,
    NavItem,
    SidebarGroup,
    SidebarLink,
    SidebarTree,
    SiteConfig,
    load_config,
)
from mlops_pages.links import (
    DeadLinkError,
    check_dead_links,
    edit_url,
    find_dead_links,
    page_href,
    source_path,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.mark.parametrize(
    ("link", "expected"),
    [
        ("/", "index.md"),
        ("/README", "README.md"),
        ("/module-01/", "module-01/index.md"),
        ("/module-01/git/git-basics#setup", "module-01/git/git-basics.md"),
        ("/guide/page.html", "guide/page.md"),
        ("/guide/page.md", "guide/page.md"),
        ("https://github.com/example", None),
        ("#anchor", None),
    ],
)
def test_source_path(link: str, expected: str | None) -> None:
    """Links map to markdown sources relative to the docs root."""
    assert source_path(link) == expected, f"unexpected source for {link!r}"


@pytest.mark.parametrize(
    ("link", "clean_urls", "expected"),
    [
        ("/module-01/README", True, "/module-01/README"),
        ("/module-01/README", False, "/module-01/README.html"),
        ("/guide/page#top", False, "/guide/page.html#top"),
        ("/", False, "/"),
        ("/assets/file.pdf", False, "/assets/file.pdf"),
        ("/release-1.2", False, "/release-1.2.html"),
        ("/notes/v2.0#changes", False, "/notes/v2.0.html#changes"),
        ("https://example.invalid/x", False, "https://example.invalid/x"),
    ],
)
def test_page_href(link: str, clean_urls: bool, expected: str) -> None:  # noqa: FBT001
    """Without clean URLs page links gain the .html suffix."""
    assert page_href(link, clean_urls=clean_urls) == expected, (
        f"unexpected href for {link!r}"
    )


def test_edit_url_uses_source_path() -> None:
    """Edit links point at the markdown file behind the page."""
    site = load_config()
    assert edit_url(site, "/module-01/git/git-basics") == (
        "https://github.com/yourusername/mlops-training/edit/main/docs/"
        "module-01/git/git-basics.md"
    ), "unexpected edit URL"
    assert edit_url(site, "https://example.invalid") is None, (
        "expected no edit URL for external links"
    )
    bare = dc.replace(site, edit_link=None)
    assert edit_url(bare, "/README") is None, "expected None without edit link"


def test_edit_link_rejects_patterns_without_single_placeholder() -> None:
    """Directly built edit links enforce the placeholder invariant."""
    with pytest.raises(ValueError, match="exactly one"):
        EditLinkConfig(pattern="https://example.invalid/:path/:path")


def _site(*, ignore_dead_links: bool) -> SiteConfig:
    return SiteConfig(
        title="Site",
        description="",
        ignore_dead_links=ignore_dead_links,
        nav=(
            NavItem(text="Home", link="/"),
            NavItem(text="Repo", link="https://example.invalid/repo"),
        ),
        sidebar=SidebarTree(
            {
                "/": (
                    SidebarGroup(
                        text="Guide",
                        items=(
                            SidebarLink(text="Present", link="/guide/present"),
                            SidebarLink(text="Missing", link="/guide/missing"),
                        ),
                    ),
                )
            }
        ),
    )


def _docs(tmp_path: Path) -> Path:
    root = tmp_path / "docs"
    (root / "guide").mkdir(parents=True)
    (root / "index.md").write_text("# Home\n", encoding="utf-8")
    (root / "guide" / "present.md").write_text("# Present\n", encoding="utf-8")
    return root


def test_find_dead_links_reports_missing_sources(tmp_path: Path) -> None:
    """Only internal links without markdown files are reported."""
    dead = find_dead_links(_site(ignore_dead_links=False), _docs(tmp_path))
    assert [entry.occurrence.link for entry in dead] == ["/guide/missing"], (
        f"unexpected dead links {dead!r}"
    )
    assert dead[0].expected == "guide/missing.md", "unexpected expected path"
    assert "Guide" in dead[0].describe(), "expected the group trail in the summary"


def test_check_dead_links_raises_when_not_ignored(tmp_path: Path) -> None:
    """Dead links fail the check unless the site tolerates them."""
    with pytest.raises(DeadLinkError) as excinfo:
        check_dead_links(_site(ignore_dead_links=False), _docs(tmp_path))
    assert len(excinfo.value.dead_links) == 1, "expected one dead link"
    assert "/guide/missing" in str(excinfo.value), "expected link in message"


def test_check_dead_links_returns_tolerated_links(tmp_path: Path) -> None:
    """Ignored dead links are returned instead of raised."""
    dead = check_dead_links(_site(ignore_dead_links=True), _docs(tmp_path))
    assert len(dead) == 1, f"expected one tolerated dead link, got {dead!r}"
