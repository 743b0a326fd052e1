"""Tests for the CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from outliner.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_store(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("OUTLINER_ENV_FILE", raising=False)
    monkeypatch.setenv("OUTLINER_STORE_BACKEND", "file")
    monkeypatch.setenv("OUTLINER_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("OUTLINER_LOG_LEVEL", "WARNING")


def _run(*args: str) -> str:
    result = runner.invoke(app, list(args))
    assert result.exit_code == 0, result.output
    return result.output.strip()


def test_build_outline_and_navigate() -> None:
    """It should add, indent and navigate items in a stored document."""

    first = _run("add", "--text", "Groceries")
    second = _run("add", first, "--text", "Milk")

    moved = _run("indent", second)
    assert moved != second

    assert _run("breadcrumb", moved) == "Groceries > Milk"
    assert _run("next", first) == moved
    assert _run("prev", moved) == first

    shown = _run("show")
    assert "Groceries" in shown
    assert "Milk" in shown


def test_collapsed_children_are_hidden_from_show() -> None:
    """It should hide children of a collapsed item unless --all is passed."""

    parent = _run("add", "--text", "Parent")
    child = _run("add", parent, "--text", "Hidden child")
    _run("indent", child)

    _run("toggle", parent)

    assert "Hidden child" not in _run("show")
    assert "Hidden child" in _run("show", "--all")


def test_delete_parent_requires_force() -> None:
    """It should keep an item with children unless --force is given."""

    parent = _run("add", "--text", "Parent")
    child = _run("add", parent, "--text", "Child")
    _run("indent", child)

    _run("delete", parent)
    assert "Parent" in _run("show")

    _run("delete", parent, "--force")
    assert _run("show") == "(empty)"


def test_missing_item_exits_with_error() -> None:
    """It should exit with code 1 for unknown ids."""

    result = runner.invoke(app, ["breadcrumb", "nope"])

    assert result.exit_code == 1
    assert "nope" in result.output


def test_import_and_export(tmp_path: Path) -> None:
    """It should load a JSON file and print the stored document back."""

    items = [{"id": "a", "symbol": "dot", "text": "imported", "children": [], "isExpanded": True}]
    path = tmp_path / "items.json"
    path.write_text(json.dumps(items), encoding="utf-8")

    assert _run("import", str(path)) == "imported 1 items"
    assert json.loads(_run("export")) == items
