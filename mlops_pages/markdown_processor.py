"""Build the markdown processor described by a site's markdown settings.

The site configuration carries two markdown options: whether highlighted code
blocks show line numbers, and a ``config`` hook that receives the processor
and returns the one to use. :func:`build_markdown` assembles a
Python-Markdown instance with Pygments highlighting and then hands it to the
hook, so extensions can be registered without touching this module.

Examples
--------
>>> from mlops_pages.config import MarkdownConfig
>>> from mlops_pages.markdown_processor import render_markdown
>>> render_markdown("Hello *world*", MarkdownConfig())
'<p>Hello <em>world</em></p>'
"""

from __future__ import annotations

import re
import typing as typ

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

if typ.TYPE_CHECKING:
    from mlops_pages.config import MarkdownConfig

FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
DEFAULT_PYGMENTS_STYLE = "monokai"


def build_markdown(
    config: MarkdownConfig, *, pygments_style: str = DEFAULT_PYGMENTS_STYLE
) -> Markdown:
    """Return a processor configured from ``config`` and passed through its hook.

    Parameters
    ----------
    config : MarkdownConfig
        Markdown settings from the site configuration.
    pygments_style : str, optional
        Name of the Pygments style used for highlighted code blocks.

    Returns
    -------
    Markdown
        Whatever the configured hook returns; the identity hook returns the
        processor built here.

    Raises
    ------
    TypeError
        If the hook returns something other than a ``Markdown`` instance.
    """
    md = Markdown(
        extensions=["fenced_code", "codehilite", "tables", "sane_lists"],
        extension_configs={
            "codehilite": {
                "linenums": config.line_numbers,
                "guess_lang": False,
                "css_class": "codehilite",
                "pygments_style": pygments_style,
            }
        },
    )
    processed = config.config(md)
    if not isinstance(processed, Markdown):
        msg = (
            "Markdown hook must return a Markdown instance, "
            f"got {type(processed).__name__}."
        )
        raise TypeError(msg)
    return processed


def render_markdown(
    text: str,
    config: MarkdownConfig,
    *,
    pygments_style: str = DEFAULT_PYGMENTS_STYLE,
) -> str:
    """Render ``text`` to HTML with a fresh processor built from ``config``."""
    normalized = FENCED_INDENT_PATTERN.sub(r"\1", text)
    if not normalized.strip():
        return ""
    return build_markdown(config, pygments_style=pygments_style).convert(normalized)


def highlight_stylesheet(pygments_style: str = DEFAULT_PYGMENTS_STYLE) -> str:
    """Return the CSS used for highlighted code blocks."""
    return HtmlFormatter(style=pygments_style).get_style_defs(".codehilite")


__all__ = [
    "DEFAULT_PYGMENTS_STYLE",
    "build_markdown",
    "highlight_stylesheet",
    "render_markdown",
]
