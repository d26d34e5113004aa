"""Tests for the ``pages`` command functions.

The Cyclopts command decorators return the plain functions, so the commands
are invoked directly and their printed output captured with ``capsys``.
"""

from __future__ import annotations

import json
import typing as typ
from textwrap import dedent

import pytest

from mlops_pages import cli
from mlops_pages.links import DeadLinkError

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_export_writes_module(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """``pages export`` writes config.mjs and reports the path."""
    output = tmp_path / "docs" / ".vitepress" / "config.mjs"
    cli.export(variant="compact", output=output)
    assert output.exists(), "expected the exported module to be written"
    assert "example-org/mlops-training" in output.read_text(encoding="utf-8"), (
        "expected the compact variant repository"
    )
    assert capsys.readouterr().out.strip().startswith("wrote "), "expected wrote line"


def test_export_json_from_yaml_config(tmp_path: Path) -> None:
    """A YAML file can replace the built-in variants."""
    config = tmp_path / "site.yaml"
    config.write_text(
        dedent(
            """
            title: Handbook
            themeConfig:
              nav:
                - text: Home
                  link: /
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    output = tmp_path / "site.json"
    cli.export(config=config, output=output, fmt="json")
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["title"] == "Handbook", f"unexpected title {payload['title']!r}"
    assert payload["themeConfig"]["nav"] == [{"text": "Home", "link": "/"}], (
        "expected nav from the YAML file"
    )


def test_variant_and_config_are_exclusive(tmp_path: Path) -> None:
    """Passing both sources is an error."""
    with pytest.raises(ValueError, match="either --variant or --config"):
        cli.export(variant="default", config=tmp_path / "site.yaml")


def test_check_reports_tolerated_dead_links(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """The shipped variants ignore dead links, so they are only reported."""
    docs_root = tmp_path / "docs"
    docs_root.mkdir()
    (docs_root / "index.md").write_text("# Home\n", encoding="utf-8")
    cli.check(variant="default", docs_root=docs_root)
    lines = capsys.readouterr().out.splitlines()
    assert lines, "expected report lines"
    assert all(line.startswith("dead link ") for line in lines), (
        f"expected only dead link lines, got {lines[:3]!r}"
    )
    assert not any("-> / " in line for line in lines), "expected index.md to resolve"


def test_check_fails_on_dead_links_when_not_ignored(tmp_path: Path) -> None:
    """Sites that do not ignore dead links fail the check."""
    config = tmp_path / "site.yaml"
    config.write_text(
        dedent(
            """
            title: Strict
            themeConfig:
              sidebar:
                /:
                  - text: Docs
                    items:
                      - text: Missing
                        link: /missing
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    with pytest.raises(DeadLinkError, match="/missing"):
        cli.check(config=config, docs_root=tmp_path)


def test_check_prints_ok_for_complete_docs(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A docs tree covering every link passes cleanly."""
    config = tmp_path / "site.yaml"
    config.write_text(
        dedent(
            """
            title: Strict
            themeConfig:
              sidebar:
                /:
                  - text: Docs
                    items:
                      - text: Present
                        link: /present
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    (tmp_path / "present.md").write_text("# Present\n", encoding="utf-8")
    cli.check(config=config, docs_root=tmp_path)
    assert capsys.readouterr().out.strip() == "ok", "expected ok output"


def test_tree_prints_outline(capsys: pytest.CaptureFixture[str]) -> None:
    """The outline marks collapse state and shows resolved hrefs."""
    cli.tree(variant="default")
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "MLOps Training", f"unexpected heading {lines[0]!r}"
    assert "  Home -> /" in lines, "expected nav entry"
    assert "sidebar /" in lines, "expected sidebar heading"
    assert "  Getting Started" in lines, "expected non-collapsible group"
    assert "  [-] Module 1: Infrastructure & Prerequisites" in lines, (
        "expected expanded module group"
    )
    assert "      [+] Branching Strategies" in lines, "expected collapsed nested group"
    assert "    Study Guide -> /README" in lines, "expected clean URL href"
