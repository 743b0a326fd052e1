"""Copy-on-write edits over a forest.

Every edit is an instance of one primitive, `apply_at`, which rebuilds the path from the
root down to the target and replaces the target with whatever the transform returns: one
item, nothing (delete) or several items (insert after).

Public edits return only the resulting forest and never raise for an inapplicable edit.
An absent id, indenting the first item of a layer, outdenting a top-level item or deleting
an item that still has children all return the input unchanged. The `try_*` variants
return an `EditResult` that says why an edit was refused.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Literal

from outliner.logging import get_logger
from outliner.models.item import Forest, Item, has_children, new_item
from outliner.tree.errors import ItemNotFoundError
from outliner.tree.locator import find, find_layer_prev, find_parent

logger = get_logger(__name__)

RefusalReason = Literal["not_found", "has_children", "first_in_layer", "top_level"]

Transform = Callable[[Item], Item | Sequence[Item]]


@dataclass(frozen=True)
class Applied:
    """The edit reached its target."""

    forest: Forest

    @property
    def applied(self) -> bool:
        return True


@dataclass(frozen=True)
class Refused:
    """The edit did not apply; `forest` is the input, unchanged."""

    reason: RefusalReason
    forest: Forest

    @property
    def applied(self) -> bool:
        return False


EditResult = Applied | Refused


def _as_forest(items: Sequence[Item]) -> Forest:
    return items if isinstance(items, tuple) else tuple(items)


def _refuse(reason: RefusalReason, forest: Sequence[Item], op: str, target_id: str) -> Refused:
    logger.debug("%s refused for %s: %s", op, target_id, reason)
    return Refused(reason=reason, forest=_as_forest(forest))


def _contains(forest: Sequence[Item], target_id: str) -> bool:
    try:
        find(forest, target_id)
    except ItemNotFoundError:
        return False
    return True


# ----------------------------------------------------------------------------
# Primitive


def _walk(items: Sequence[Item], target_id: str, transform: Transform) -> tuple[Forest, bool]:
    out: list[Item] = []
    hit = False
    for item in items:
        if item.id == target_id:
            replaced = transform(item)
            if isinstance(replaced, Item):
                out.append(replaced)
            else:
                out.extend(replaced)
            hit = True
        elif has_children(item):
            children, child_hit = _walk(item.children, target_id, transform)
            out.append(item.model_copy(update={"children": children}))
            hit = hit or child_hit
        else:
            out.append(item)
    return tuple(out), hit


def apply_at(forest: Sequence[Item], target_id: str, transform: Transform) -> EditResult:
    """Replace the item `target_id` with `transform(item)`.

    Args:
        forest: Input forest; never modified.
        target_id: Id of the item to replace.
        transform: Returns a single item, or a sequence of items to splice in its place.

    Returns:
        `Applied` with the new forest, or `Refused("not_found")` with the input.
    """

    updated, hit = _walk(forest, target_id, transform)
    if not hit:
        return _refuse("not_found", forest, "update", target_id)
    return Applied(forest=updated)


def update_at(forest: Sequence[Item], target_id: str, transform: Transform) -> Forest:
    """Same as `apply_at`, returning only the forest."""

    return apply_at(forest, target_id, transform).forest


# ----------------------------------------------------------------------------
# Field edits


def try_update_text(forest: Sequence[Item], target_id: str, new_text: str) -> EditResult:
    return apply_at(forest, target_id, lambda item: item.model_copy(update={"text": new_text}))


def update_text(forest: Sequence[Item], target_id: str, new_text: str) -> Forest:
    """Replace the text of `target_id`."""

    return try_update_text(forest, target_id, new_text).forest


def try_toggle_expanded(forest: Sequence[Item], target_id: str) -> EditResult:
    return apply_at(
        forest,
        target_id,
        lambda item: item.model_copy(update={"is_expanded": not item.is_expanded}),
    )


def toggle_expanded(forest: Sequence[Item], target_id: str) -> Forest:
    """Flip the expanded flag of `target_id`."""

    return try_toggle_expanded(forest, target_id).forest


def update_children(forest: Sequence[Item], target_id: str, children: Sequence[Item]) -> Forest:
    """Replace the children of `target_id` wholesale (e.g. with a persisted subtree)."""

    new_children = _as_forest(children)
    return update_at(forest, target_id, lambda item: item.model_copy(update={"children": new_children}))


# ----------------------------------------------------------------------------
# Insert / delete


def try_delete_item(forest: Sequence[Item], target_id: str, force: bool = False) -> EditResult:
    """Delete `target_id` unless it has children and `force` is not set."""

    try:
        target = find(forest, target_id)
    except ItemNotFoundError:
        return _refuse("not_found", forest, "delete", target_id)
    if has_children(target) and not force:
        return _refuse("has_children", forest, "delete", target_id)
    return apply_at(forest, target_id, lambda _item: ())


def delete_item(forest: Sequence[Item], target_id: str, force: bool = False) -> Forest:
    """Delete `target_id`; with `force`, its whole subtree goes with it."""

    return try_delete_item(forest, target_id, force).forest


def try_add_item(forest: Sequence[Item], target_id: str, new_id: str) -> EditResult:
    """Insert a fresh item as if Enter was pressed on `target_id`.

    - Expanded item with children: the new item becomes its first child.
    - Otherwise: the new item is placed right after it.
    """

    def insert(item: Item) -> Item | Sequence[Item]:
        if has_children(item) and item.is_expanded:
            return item.model_copy(update={"children": (new_item(new_id), *item.children)})
        return (item, new_item(new_id))

    return apply_at(forest, target_id, insert)


def add_item(forest: Sequence[Item], target_id: str, new_id: str) -> Forest:
    """Same as `try_add_item`, returning only the forest."""

    return try_add_item(forest, target_id, new_id).forest


def add_after_item(forest: Sequence[Item], target_id: str, item: Item) -> Forest:
    """Insert an existing `item` right after `target_id` in the same layer."""

    return update_at(forest, target_id, lambda target: (target, item))


def add_as_last_child(forest: Sequence[Item], parent_id: str, item: Item) -> Forest:
    """Append `item` to the children of `parent_id`."""

    return update_at(
        forest,
        parent_id,
        lambda parent: parent.model_copy(update={"children": (*parent.children, item)}),
    )


# ----------------------------------------------------------------------------
# Moves
#
# Moved items are re-issued under a caller-supplied id so the UI can refocus them.


def try_indent_item(forest: Sequence[Item], target_id: str, new_id: str) -> EditResult:
    """Move `target_id` to be the last child of its previous sibling."""

    try:
        prev_id = find_layer_prev(forest, target_id)
    except ItemNotFoundError:
        reason: RefusalReason = "first_in_layer" if _contains(forest, target_id) else "not_found"
        return _refuse(reason, forest, "indent", target_id)

    moved = find(forest, target_id).model_copy(update={"id": new_id})
    updated = delete_item(forest, target_id, force=True)
    return Applied(forest=add_as_last_child(updated, prev_id, moved))


def indent_item(forest: Sequence[Item], target_id: str, new_id: str) -> Forest:
    """Indent `target_id` under its previous sibling, renaming it to `new_id`.

    Example:
        - A                - A
        - B   (indent B)     - B'
        - C                - C
    """

    return try_indent_item(forest, target_id, new_id).forest


def try_outdent_item(forest: Sequence[Item], target_id: str, new_id: str) -> EditResult:
    """Move `target_id` to sit right after its parent."""

    try:
        parent_id = find_parent(forest, target_id)
    except ItemNotFoundError:
        reason: RefusalReason = "top_level" if _contains(forest, target_id) else "not_found"
        return _refuse(reason, forest, "outdent", target_id)

    moved = find(forest, target_id).model_copy(update={"id": new_id})
    updated = delete_item(forest, target_id, force=True)
    return Applied(forest=add_after_item(updated, parent_id, moved))


def outdent_item(forest: Sequence[Item], target_id: str, new_id: str) -> Forest:
    """Outdent `target_id` to follow its parent, renaming it to `new_id`."""

    return try_outdent_item(forest, target_id, new_id).forest


def _swap(items: Forest, target_id: str, new_id: str) -> tuple[Forest, bool]:
    for index, item in enumerate(items):
        if item.id == target_id and index > 0:
            swapped = list(items)
            swapped[index - 1] = item.model_copy(update={"id": new_id})
            swapped[index] = items[index - 1]
            return tuple(swapped), True

    out: list[Item] = []
    hit = False
    for item in items:
        if not hit and has_children(item):
            children, hit = _swap(item.children, target_id, new_id)
            if hit:
                item = item.model_copy(update={"children": children})
        out.append(item)
    return tuple(out), hit


def try_swap_with_previous(forest: Sequence[Item], target_id: str, new_id: str) -> EditResult:
    """Exchange `target_id` with its previous sibling (sibling order, not visible order)."""

    swapped, hit = _swap(_as_forest(forest), target_id, new_id)
    if not hit:
        reason: RefusalReason = "first_in_layer" if _contains(forest, target_id) else "not_found"
        return _refuse(reason, forest, "swap", target_id)
    return Applied(forest=swapped)


def swap_with_previous(forest: Sequence[Item], target_id: str, new_id: str) -> Forest:
    """Move `target_id` up one place among its siblings, renaming it to `new_id`."""

    return try_swap_with_previous(forest, target_id, new_id).forest
