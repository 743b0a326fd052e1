"""CLI entrypoints for Outliner."""

from __future__ import annotations

import contextlib
from collections.abc import Iterator, Sequence
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from outliner.commands import EditCommand, apply_command
from outliner.config import load_settings
from outliner.logging import configure_logging, document_context, get_logger
from outliner.models.codec import dumps_forest, loads_forest
from outliner.models.item import Item, new_item
from outliner.storage import ROOT_ID, ForestStore, get_store, save_items
from outliner.tree.errors import ItemNotFoundError
from outliner.tree.locator import get_breadcrumb
from outliner.tree.mutator import update_text
from outliner.tree.traversal import find_next_id, find_prev_id
from outliner.utils.ids import new_item_id

app = typer.Typer(add_completion=False, help="Outliner: edit outline documents from the terminal")
logger = get_logger(__name__)
console = Console()

SYMBOL_GLYPHS = {
    "dot": "•",
    "naraba": "→",
    "therefore": "∴",
    "because": "∵",
    "equal": "=",
    "notEqual": "≠",
}

OwnerOption = typer.Option("me", "--owner", "-u", help="Document owner")


@contextlib.contextmanager
def _exit_on_missing() -> Iterator[None]:
    try:
        yield
    except ItemNotFoundError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc


def _store() -> ForestStore:
    settings = load_settings()
    configure_logging(settings.log_level)
    return get_store(settings)


def _label(item: Item, show_ids: bool) -> str:
    label = f"{SYMBOL_GLYPHS[item.symbol]} {escape(item.text)}"
    if item.children and not item.is_expanded:
        label += f" [dim](+{len(item.children)})[/dim]"
    if show_ids:
        label += f" [dim]{item.id}[/dim]"
    return label


def build_tree(forest: Sequence[Item], show_collapsed: bool = False, show_ids: bool = False) -> Tree:
    """Render a forest as a rich tree, hiding collapsed children unless asked."""

    root = Tree("[bold]outline[/bold]", hide_root=True)

    def attach(branch: Tree, items: Sequence[Item]) -> None:
        for item in items:
            node = branch.add(_label(item, show_ids))
            if item.is_expanded or show_collapsed:
                attach(node, item.children)

    attach(root, forest)
    return root


def _edit(owner: str, command: EditCommand) -> None:
    store = _store()
    with document_context(owner=owner, item_id=command.target_id):
        outcome = apply_command(store.load(owner), command)
        if outcome.changed:
            store.save(owner, outcome.forest)
        else:
            logger.info("Nothing changed (%s)", outcome.refused or "no-op")
    typer.echo(outcome.focus_id)


@app.command()
def show(
    owner: str = OwnerOption,
    show_collapsed: bool = typer.Option(False, "--all", "-a", help="Also show children of collapsed items"),
    ids: bool = typer.Option(False, "--ids", help="Print item ids"),
) -> None:
    """Print the owner's outline."""

    forest = _store().load(owner)
    if not forest:
        typer.echo("(empty)")
        return
    console.print(build_tree(forest, show_collapsed=show_collapsed, show_ids=ids))


@app.command()
def add(
    target: str | None = typer.Argument(None, help="Item to press Enter on; omit to append a root item"),
    text: str = typer.Option("", "--text", "-t", help="Text for the new item"),
    owner: str = OwnerOption,
) -> None:
    """Insert a new item after TARGET (or as its first child when it is expanded)."""

    store = _store()
    forest = store.load(owner)
    new_id = new_item_id()
    if target is None:
        forest = (*forest, new_item(new_id))
    else:
        outcome = apply_command(forest, EditCommand(op="add", target_id=target, new_id=new_id))
        if not outcome.changed:
            console.print(f"[red]Item with ID {escape(target)} not found[/red]")
            raise typer.Exit(code=1)
        forest = outcome.forest
    if text:
        forest = update_text(forest, new_id, text)
    store.save(owner, forest)
    typer.echo(new_id)


@app.command("text")
def set_text(target: str, text: str, owner: str = OwnerOption) -> None:
    """Replace the text of TARGET."""

    _edit(owner, EditCommand(op="update_text", target_id=target, text=text))


@app.command()
def delete(
    target: str,
    force: bool = typer.Option(False, "--force", "-f", help="Delete even if the item has children"),
    owner: str = OwnerOption,
) -> None:
    """Delete TARGET. Items with children are kept unless --force is given."""

    _edit(owner, EditCommand(op="delete", target_id=target, force=force))


@app.command()
def toggle(target: str, owner: str = OwnerOption) -> None:
    """Expand or collapse TARGET."""

    _edit(owner, EditCommand(op="toggle_expanded", target_id=target))


@app.command()
def indent(target: str, owner: str = OwnerOption) -> None:
    """Make TARGET the last child of its previous sibling."""

    _edit(owner, EditCommand(op="indent", target_id=target))


@app.command()
def outdent(target: str, owner: str = OwnerOption) -> None:
    """Move TARGET out to follow its parent."""

    _edit(owner, EditCommand(op="outdent", target_id=target))


@app.command("swap-up")
def swap_up(target: str, owner: str = OwnerOption) -> None:
    """Swap TARGET with its previous sibling."""

    _edit(owner, EditCommand(op="swap_up", target_id=target))


@app.command()
def breadcrumb(target: str, owner: str = OwnerOption) -> None:
    """Print the path from the root down to TARGET."""

    with _exit_on_missing():
        crumbs = get_breadcrumb(_store().load(owner), target)
    typer.echo(" > ".join(c.text or c.id for c in crumbs))


@app.command("next")
def next_item(target: str, owner: str = OwnerOption) -> None:
    """Print the id of the item shown below TARGET."""

    with _exit_on_missing():
        typer.echo(find_next_id(_store().load(owner), target))


@app.command("prev")
def prev_item(target: str, owner: str = OwnerOption) -> None:
    """Print the id of the item shown above TARGET."""

    with _exit_on_missing():
        typer.echo(find_prev_id(_store().load(owner), target))


@app.command("export")
def export_items(owner: str = OwnerOption) -> None:
    """Print the owner's outline as JSON."""

    typer.echo(dumps_forest(_store().load(owner)))


@app.command("import")
def import_items(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file with a list of items"),
    under: str = typer.Option(ROOT_ID, "--under", help="Attach as children of this item instead of replacing"),
    owner: str = OwnerOption,
) -> None:
    """Load items from a JSON file into the owner's outline."""

    items = loads_forest(path.read_text(encoding="utf-8"))
    with document_context(owner=owner, item_id=under):
        save_items(_store(), owner, under, items)
    typer.echo(f"imported {len(items)} items")


if __name__ == "__main__":
    app()
