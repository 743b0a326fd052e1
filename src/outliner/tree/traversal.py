"""Lazy traversal of a forest.

Generators are created per call, so a traversal never shares cursor state with another
and `find_prev` / `find_next` only pull ids up to the target.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from outliner.models.item import Item
from outliner.tree.errors import ItemNotFoundError


def iter_visible_ids(items: Sequence[Item]) -> Iterator[str]:
    """Yield ids in pre-order, skipping the children of collapsed items."""

    for item in items:
        yield item.id
        if item.is_expanded:
            yield from iter_visible_ids(item.children)


def iter_layer_ids(items: Sequence[Item]) -> Iterator[str]:
    """Yield the ids of one sibling list without descending."""

    for item in items:
        yield item.id


def find_prev(ids: Iterable[str], target_id: str) -> str:
    """Return the id right before the first occurrence of `target_id`.

    Raises:
        ItemNotFoundError: If the target is first or absent.
    """

    prev: str | None = None
    for item_id in ids:
        if item_id == target_id:
            if prev is None:
                break
            return prev
        prev = item_id
    raise ItemNotFoundError(target_id, f"Previous item of {target_id} not found")


def find_next(ids: Iterable[str], target_id: str) -> str:
    """Return the id right after the first occurrence of `target_id`.

    Raises:
        ItemNotFoundError: If the target is last or absent.
    """

    matched = False
    for item_id in ids:
        if matched:
            return item_id
        if item_id == target_id:
            matched = True
    raise ItemNotFoundError(target_id, f"Next item of {target_id} not found")


def find_prev_id(forest: Sequence[Item], target_id: str) -> str:
    """Visible-order predecessor of `target_id` (the item above it on screen)."""

    return find_prev(iter_visible_ids(forest), target_id)


def find_next_id(forest: Sequence[Item], target_id: str) -> str:
    """Visible-order successor of `target_id` (the item below it on screen)."""

    return find_next(iter_visible_ids(forest), target_id)


def find_prev_id_for_delete(forest: Sequence[Item], target_id: str) -> str:
    """Pick the id to focus after `target_id` is deleted.

    Falls back to the first root id, or an empty string for an empty forest.
    """

    try:
        return find_prev_id(forest, target_id)
    except ItemNotFoundError:
        return forest[0].id if forest else ""
