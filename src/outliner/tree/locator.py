"""Positional lookups over a forest.

None of these look at `is_expanded`: collapsed subtrees are searched like any other.
"""

from __future__ import annotations

from collections.abc import Sequence

from outliner.models.item import Crumb, Item
from outliner.tree.errors import ItemNotFoundError
from outliner.tree.traversal import find_prev, iter_layer_ids


def find(forest: Sequence[Item], target_id: str) -> Item:
    """Find an item anywhere in the forest (pre-order).

    Raises:
        ItemNotFoundError: If no item has `target_id`.
    """

    found = _find(forest, target_id)
    if found is None:
        raise ItemNotFoundError(target_id)
    return found


def _find(items: Sequence[Item], target_id: str) -> Item | None:
    for item in items:
        if item.id == target_id:
            return item
        found = _find(item.children, target_id)
        if found is not None:
            return found
    return None


def find_parent(forest: Sequence[Item], target_id: str) -> str:
    """Return the id of the item whose direct children contain `target_id`.

    Raises:
        ItemNotFoundError: If `target_id` is top-level or absent.
    """

    parent_id = _find_parent(forest, target_id)
    if parent_id is None:
        raise ItemNotFoundError(target_id, f"Parent of {target_id} not found")
    return parent_id


def _find_parent(items: Sequence[Item], target_id: str) -> str | None:
    for item in items:
        if any(child.id == target_id for child in item.children):
            return item.id
        found = _find_parent(item.children, target_id)
        if found is not None:
            return found
    return None


def find_layer_prev(forest: Sequence[Item], target_id: str) -> str:
    """Return the sibling immediately before `target_id` in its own layer.

    The current list is scanned flat first; only then are the children of each item
    searched.

    Raises:
        ItemNotFoundError: If `target_id` is first in its layer or absent.
    """

    try:
        return find_prev(iter_layer_ids(forest), target_id)
    except ItemNotFoundError:
        pass

    for item in forest:
        try:
            return find_layer_prev(item.children, target_id)
        except ItemNotFoundError:
            continue

    raise ItemNotFoundError(target_id, f"Previous item of {target_id} not found in the same layer")


def get_breadcrumb(forest: Sequence[Item], target_id: str) -> list[Crumb]:
    """Build the root-first `{id, text}` path down to and including `target_id`.

    Raises:
        ItemNotFoundError: If `target_id` is absent.
    """

    path = _find_path(forest, target_id, [])
    if path is None:
        raise ItemNotFoundError(target_id)
    return path


def _find_path(items: Sequence[Item], target_id: str, path: list[Crumb]) -> list[Crumb] | None:
    for item in items:
        current = [*path, Crumb(id=item.id, text=item.text)]
        if item.id == target_id:
            return current
        found = _find_path(item.children, target_id, current)
        if found is not None:
            return found
    return None
