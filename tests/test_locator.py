"""Tests for find, find_parent, find_layer_prev and get_breadcrumb."""

from __future__ import annotations

import pytest

from outliner.models.item import Crumb, Item
from outliner.tree.errors import ItemNotFoundError
from outliner.tree.locator import find, find_layer_prev, find_parent, get_breadcrumb


def _item(item_id: str, *children: Item, expanded: bool = True) -> Item:
    return Item(id=item_id, text=f"text {item_id}", children=children, is_expanded=expanded)


# A
#   A1
#   A2 (collapsed)
#     A2a
#     A2b
# B
FOREST = (
    _item("A", _item("A1"), _item("A2", _item("A2a"), _item("A2b"), expanded=False)),
    _item("B"),
)


def test_find_searches_collapsed_subtrees() -> None:
    """It should find items regardless of the expanded flag."""

    found = find(FOREST, "A2b")
    assert found.id == "A2b"
    assert found.text == "text A2b"


def test_find_missing_raises_lookup_error() -> None:
    """It should raise ItemNotFoundError, a LookupError."""

    with pytest.raises(LookupError):
        find(FOREST, "nope")


def test_find_parent() -> None:
    """It should return the id of the direct parent."""

    assert find_parent(FOREST, "A1") == "A"
    assert find_parent(FOREST, "A2a") == "A2"


@pytest.mark.parametrize("target", ["A", "B", "nope"])
def test_find_parent_fails_for_top_level_and_missing(target: str) -> None:
    """It should raise for top-level items and unknown ids."""

    with pytest.raises(ItemNotFoundError):
        find_parent(FOREST, target)


def test_find_layer_prev() -> None:
    """It should return the previous sibling within the same layer."""

    assert find_layer_prev(FOREST, "B") == "A"
    assert find_layer_prev(FOREST, "A2") == "A1"
    assert find_layer_prev(FOREST, "A2b") == "A2a"


@pytest.mark.parametrize("target", ["A", "A1", "A2a", "nope"])
def test_find_layer_prev_fails_for_first_sibling(target: str) -> None:
    """It should raise when the item is first in its layer, even if something is above it."""

    with pytest.raises(ItemNotFoundError):
        find_layer_prev(FOREST, target)


def test_breadcrumb_is_root_first() -> None:
    """It should return depth + 1 crumbs ending at the target."""

    crumbs = get_breadcrumb(FOREST, "A2b")

    assert crumbs == [
        Crumb(id="A", text="text A"),
        Crumb(id="A2", text="text A2"),
        Crumb(id="A2b", text="text A2b"),
    ]


def test_breadcrumb_for_top_level_item() -> None:
    """It should return a single crumb for a root item."""

    assert [c.id for c in get_breadcrumb(FOREST, "B")] == ["B"]


def test_breadcrumb_missing_raises() -> None:
    """It should raise ItemNotFoundError for unknown ids."""

    with pytest.raises(ItemNotFoundError):
        get_breadcrumb(FOREST, "nope")
