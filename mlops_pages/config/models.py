"""Typed dataclasses describing the training site configuration."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import enum
import typing as typ
from urllib.parse import quote

from mlops_pages._constants import PATH_PLACEHOLDER

if typ.TYPE_CHECKING:
    from markdown import Markdown


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete.

    Every problem found while building the configuration is collected into
    ``issues`` so a single error lists all invalid entries.
    """

    def __init__(self, issues: cabc.Iterable[str]) -> None:
        self.issues = tuple(issues)
        lines = "\n".join(f"- {issue}" for issue in self.issues)
        super().__init__(f"Invalid site configuration:\n{lines}")


class SearchProvider(enum.StrEnum):
    """Client-side search backends understood by the renderer."""

    LOCAL = "local"


DATE_STYLES = ("full", "long", "medium", "short")


def _identity_hook(md: Markdown) -> Markdown:
    """Return the markdown processor unchanged."""
    return md


@dc.dataclass(frozen=True, slots=True)
class SiteMeta:
    """Site identity and routing flags."""

    title: str
    description: str
    clean_urls: bool = False
    ignore_dead_links: bool = False


@dc.dataclass(frozen=True, slots=True)
class NavItem:
    """Top navigation entry."""

    text: str
    link: str


@dc.dataclass(frozen=True, slots=True)
class SidebarLink:
    """Leaf entry of a sidebar tree."""

    text: str
    link: str


@dc.dataclass(frozen=True, slots=True)
class SidebarGroup:
    """Titled sidebar group holding ordered links and nested groups.

    ``collapsed`` is the default state of a collapsible group; ``None`` marks
    a group that cannot be collapsed at all.
    """

    text: str
    items: tuple[SidebarItem, ...] = ()
    collapsed: bool | None = None

    @property
    def children(self) -> tuple[SidebarItem, ...]:
        """Alias for ``items``."""
        return self.items


SidebarItem = SidebarGroup | SidebarLink


class SidebarTree(cabc.Mapping[str, tuple[SidebarGroup, ...]]):
    """Read-only mapping of URL path prefixes to top-level sidebar groups."""

    __slots__ = ("_entries",)

    def __init__(
        self,
        entries: cabc.Mapping[str, cabc.Iterable[SidebarGroup]]
        | cabc.Iterable[tuple[str, cabc.Iterable[SidebarGroup]]] = (),
    ) -> None:
        pairs = entries.items() if isinstance(entries, cabc.Mapping) else entries
        self._entries: dict[str, tuple[SidebarGroup, ...]] = {
            prefix: tuple(groups) for prefix, groups in pairs
        }

    def __getitem__(self, prefix: str) -> tuple[SidebarGroup, ...]:
        return self._entries[prefix]

    def __iter__(self) -> cabc.Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SidebarTree):
            return list(self._entries.items()) == list(other._entries.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._entries.items()))

    def __repr__(self) -> str:
        return f"SidebarTree({self._entries!r})"

    def for_path(self, path: str) -> tuple[SidebarGroup, ...]:
        """Return the sidebar whose prefix is the longest match for ``path``.

        Parameters
        ----------
        path : str
            Site path of the page being rendered, for example
            ``"/module-01/git/git-basics"``.

        Returns
        -------
        tuple[SidebarGroup, ...]
            Groups registered under the best matching prefix, or an empty
            tuple when no prefix matches.
        """
        target = path if path.startswith("/") else f"/{path}"
        best: str | None = None
        for prefix in self._entries:
            normalized = prefix if prefix.startswith("/") else f"/{prefix}"
            if not target.startswith(normalized):
                continue
            if best is None or len(normalized) > len(best):
                best = prefix
        if best is None:
            return ()
        return self._entries[best]


@dc.dataclass(frozen=True, slots=True)
class SocialLink:
    """Icon link shown in the site header."""

    icon: str
    link: str


@dc.dataclass(frozen=True, slots=True)
class FooterConfig:
    """Footer copy rendered on every page."""

    message: str
    copyright: str


@dc.dataclass(frozen=True, slots=True)
class EditLinkConfig:
    """Template for the "edit this page" link."""

    pattern: str
    text: str = "Edit this page"

    def __post_init__(self) -> None:
        count = self.pattern.count(PATH_PLACEHOLDER)
        if count != 1:
            msg = (
                f"Edit link pattern must contain exactly one '{PATH_PLACEHOLDER}' "
                f"placeholder, found {count}."
            )
            raise ValueError(msg)

    def url_for(self, relative_path: str) -> str:
        """Substitute the percent-encoded ``relative_path`` into the pattern."""
        encoded = quote(relative_path.lstrip("/"), safe="/")
        return self.pattern.replace(PATH_PLACEHOLDER, encoded)


@dc.dataclass(frozen=True, slots=True)
class LastUpdatedConfig:
    """Label and Intl-style format options for page timestamps."""

    text: str = "Last updated"
    date_style: str = "short"
    time_style: str = "short"


@dc.dataclass(frozen=True, slots=True)
class SearchConfig:
    """Search backend selection."""

    provider: SearchProvider = SearchProvider.LOCAL


MarkdownHook = cabc.Callable[["Markdown"], "Markdown"]


@dc.dataclass(frozen=True, slots=True)
class MarkdownConfig:
    """Options handed to the markdown processor.

    ``config`` is a customization seam: it receives the configured processor
    and returns the processor to use. The default returns it unchanged.
    """

    line_numbers: bool = False
    config: MarkdownHook = _identity_hook


@dc.dataclass(frozen=True, slots=True)
class BuildOptions:
    """Options passed through to the bundler."""

    chunk_size_warning_limit: int = 500


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """The complete site configuration consumed by the renderer."""

    title: str
    description: str
    clean_urls: bool = False
    ignore_dead_links: bool = False
    nav: tuple[NavItem, ...] = ()
    sidebar: SidebarTree = dc.field(default_factory=SidebarTree)
    social_links: tuple[SocialLink, ...] = ()
    footer: FooterConfig | None = None
    edit_link: EditLinkConfig | None = None
    last_updated: LastUpdatedConfig | None = None
    search: SearchConfig = dc.field(default_factory=SearchConfig)
    markdown: MarkdownConfig = dc.field(default_factory=MarkdownConfig)
    build_options: BuildOptions = dc.field(default_factory=BuildOptions)

    @property
    def meta(self) -> SiteMeta:
        """Return the site identity and routing flags."""
        return SiteMeta(
            title=self.title,
            description=self.description,
            clean_urls=self.clean_urls,
            ignore_dead_links=self.ignore_dead_links,
        )


__all__ = [
    "DATE_STYLES",
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
]
