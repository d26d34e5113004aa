"""Cyclopts CLI entrypoint for exporting and checking the site configuration.

The ``pages`` console script defined here writes the renderer configuration
(``docs/.vitepress/config.mjs`` or JSON), checks navigation for duplicate and
dead links against the docs tree, and prints an outline of the navigation.
Every command works on one of the built-in configuration variants or on a
YAML file passed with ``--config``.

Examples
--------
Export the default variant:

>>> from mlops_pages.cli import main
>>> main()  # doctest: +SKIP

Check the Kubernetes variant against a local docs tree:

>>> from mlops_pages.cli import app
>>> app.run(["check", "--variant", "kubernetes", "--docs-root", "docs"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_DOCS_ROOT, DEFAULT_OUTPUT, DEFAULT_VARIANT
from .config import SidebarGroup, load_config, load_site_config
from .export import VitePressConfigWriter
from .links import check_dead_links, page_href
from .navigation import find_duplicate_links

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import SidebarItem, SiteConfig

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_site(variant: str | None, config: Path | None) -> SiteConfig:
    """Load the requested variant or YAML file."""
    if variant and config:
        msg = "Pass either --variant or --config, not both."
        raise ValueError(msg)
    if config:
        return load_site_config(config)
    return load_config(variant or DEFAULT_VARIANT)


@app.command(help="Write the renderer configuration for a site variant.")
def export(
    *,
    variant: typ.Annotated[
        str | None, Parameter(help="Built-in configuration variant")
    ] = None,
    config: typ.Annotated[
        Path | None, Parameter(help="YAML site configuration file")
    ] = None,
    output: typ.Annotated[
        Path, Parameter(help="Where to write the exported configuration")
    ] = DEFAULT_OUTPUT,
    fmt: typ.Annotated[
        typ.Literal["mjs", "json"], Parameter(name="--format", help="Output format")
    ] = "mjs",
) -> None:
    """Export the site configuration for the site renderer.

    Parameters
    ----------
    variant : str or None, optional
        Built-in configuration variant; defaults to ``"default"`` when neither
        ``variant`` nor ``config`` is given.
    config : Path or None, optional
        YAML file holding the configuration instead of a built-in variant.
    output : Path, optional
        Destination of the exported file.
    fmt : {"mjs", "json"}, optional
        ``mjs`` writes a VitePress ``config.mjs`` module, ``json`` writes the
        same structure as JSON.

    Raises
    ------
    ValueError
        If both ``variant`` and ``config`` are supplied.
    """
    site = _resolve_site(variant, config)
    written = VitePressConfigWriter(site).run(output, fmt)
    print(f"wrote {_format_path(written)}")


@app.command(help="Report duplicate and dead navigation links.")
def check(
    *,
    variant: typ.Annotated[
        str | None, Parameter(help="Built-in configuration variant")
    ] = None,
    config: typ.Annotated[
        Path | None, Parameter(help="YAML site configuration file")
    ] = None,
    docs_root: typ.Annotated[
        Path, Parameter(help="Directory holding the markdown sources")
    ] = DEFAULT_DOCS_ROOT,
) -> None:
    """Validate the configuration and its links against ``docs_root``.

    Duplicate sidebar links are reported but tolerated. Dead links are
    reported as warnings when the site ignores them and raise otherwise.

    Raises
    ------
    DeadLinkError
        If dead links exist and the site does not ignore them.
    """
    site = _resolve_site(variant, config)
    for link, occurrences in find_duplicate_links(site).items():
        print(f"duplicate {link} ({len(occurrences)} entries)")
    tolerated = check_dead_links(site, docs_root)
    for dead in tolerated:
        print(f"dead link {dead.describe()}")
    if not tolerated:
        print("ok")


@app.command(help="Print the navigation bar and sidebar outline.")
def tree(
    *,
    variant: typ.Annotated[
        str | None, Parameter(help="Built-in configuration variant")
    ] = None,
    config: typ.Annotated[
        Path | None, Parameter(help="YAML site configuration file")
    ] = None,
) -> None:
    """Print an indented outline of the navigation with resolved hrefs."""
    site = _resolve_site(variant, config)
    print(site.title)
    print("nav")
    for item in site.nav:
        print(f"  {item.text} -> {page_href(item.link, clean_urls=site.clean_urls)}")
    for prefix, groups in site.sidebar.items():
        print(f"sidebar {prefix}")
        for line in _outline(groups, depth=1, clean_urls=site.clean_urls):
            print(line)


def _outline(
    items: cabc.Iterable[SidebarItem], *, depth: int, clean_urls: bool
) -> cabc.Iterator[str]:
    pad = "  " * depth
    for item in items:
        match item:
            case SidebarGroup(collapsed=None):
                yield f"{pad}{item.text}"
            case SidebarGroup(collapsed=True):
                yield f"{pad}[+] {item.text}"
            case SidebarGroup():
                yield f"{pad}[-] {item.text}"
            case _:
                href = page_href(item.link, clean_urls=clean_urls)
                yield f"{pad}{item.text} -> {href}"
                continue
        yield from _outline(item.items, depth=depth + 1, clean_urls=clean_urls)


def main() -> None:
    """Invoke the Cyclopts application that powers the `pages` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
