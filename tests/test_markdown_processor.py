"""Tests for the markdown processor seam.

The processor honours the ``lineNumbers`` option and is always handed to the
configured hook before use. Rendered HTML is inspected with BeautifulSoup.
"""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup
from markdown import Markdown

from mlops_pages.config import MarkdownConfig, load_config
from mlops_pages.markdown_processor import (
    build_markdown,
    highlight_stylesheet,
    render_markdown,
)

if typ.TYPE_CHECKING:
    from pytest_mock import MockerFixture

CODE_SAMPLE = "Intro.\n\n```python\nprint('hi')\nprint('there')\n```\n"


def test_identity_hook_returns_built_processor() -> None:
    """The default hook leaves the processor untouched."""
    md = build_markdown(MarkdownConfig())
    assert isinstance(md, Markdown), "expected a Markdown instance"


def test_hook_receives_processor(mocker: MockerFixture) -> None:
    """The configured hook is called once with the processor it replaces."""
    hook = mocker.Mock(side_effect=lambda md: md)
    md = build_markdown(MarkdownConfig(config=hook))
    hook.assert_called_once_with(md)


def test_hook_must_return_processor() -> None:
    """Hooks that drop the processor are rejected."""
    config = MarkdownConfig(config=lambda md: None)  # type: ignore[arg-type, return-value]
    with pytest.raises(TypeError, match="Markdown instance"):
        build_markdown(config)


def test_line_numbers_follow_configuration() -> None:
    """Code blocks carry line numbers only when enabled."""
    numbered = render_markdown(CODE_SAMPLE, MarkdownConfig(line_numbers=True))
    plain = render_markdown(CODE_SAMPLE, MarkdownConfig(line_numbers=False))

    numbered_soup = BeautifulSoup(numbered, "html.parser")
    plain_soup = BeautifulSoup(plain, "html.parser")
    assert numbered_soup.select_one(".linenos") is not None, (
        "expected line numbers when lineNumbers is enabled"
    )
    assert plain_soup.select_one(".linenos") is None, (
        "expected no line numbers when lineNumbers is disabled"
    )
    assert plain_soup.select_one(".codehilite") is not None, (
        "expected highlighted code block"
    )


def test_site_markdown_settings_enable_line_numbers() -> None:
    """The shipped variants turn line numbers on."""
    html = render_markdown(CODE_SAMPLE, load_config().markdown)
    assert "linenos" in html, "expected line numbers for the default variant"


def test_blank_text_renders_empty() -> None:
    """Whitespace-only input renders to an empty string."""
    assert render_markdown("   \n", MarkdownConfig()) == "", "expected empty output"


def test_stylesheet_targets_codehilite() -> None:
    """Highlight CSS is scoped to code blocks."""
    assert ".codehilite" in highlight_stylesheet(), "expected scoped CSS rules"
