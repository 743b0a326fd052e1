"""Tests for visible-order traversal and neighbour lookup."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from outliner.models.item import Item
from outliner.tree.errors import ItemNotFoundError
from outliner.tree.mutator import toggle_expanded
from outliner.tree.traversal import (
    find_next,
    find_next_id,
    find_prev,
    find_prev_id,
    find_prev_id_for_delete,
    iter_layer_ids,
    iter_visible_ids,
)


def _item(item_id: str, *children: Item, expanded: bool = True) -> Item:
    return Item(id=item_id, text=f"text {item_id}", children=children, is_expanded=expanded)


FOREST = (
    _item("A", _item("B")),
    _item("C"),
)


def test_next_descends_into_expanded_item() -> None:
    """It should walk into the children of an expanded item, then on to the next root."""

    assert find_next_id(FOREST, "A") == "B"
    assert find_next_id(FOREST, "B") == "C"


def test_next_skips_children_of_collapsed_item() -> None:
    """It should jump over the children of a collapsed item."""

    collapsed = toggle_expanded(FOREST, "A")

    assert find_next_id(collapsed, "A") == "C"
    assert find_prev_id(collapsed, "C") == "A"


def test_prev_comes_from_deepest_visible_item() -> None:
    """It should return the last visible descendant of the item above."""

    forest = (_item("A", _item("B", _item("B1"))), _item("C"))

    assert find_prev_id(forest, "C") == "B1"
    assert find_prev_id(forest, "B") == "A"


@pytest.mark.parametrize(
    ("func", "target"),
    [
        (find_prev_id, "A"),
        (find_next_id, "C"),
        (find_prev_id, "missing"),
        (find_next_id, "missing"),
    ],
)
def test_boundaries_raise_not_found(func, target: str) -> None:
    """It should raise ItemNotFoundError at the ends and for unknown ids."""

    with pytest.raises(ItemNotFoundError) as exc_info:
        func(FOREST, target)
    assert exc_info.value.item_id == target


def test_hidden_item_is_not_navigable() -> None:
    """It should treat an item under a collapsed parent as absent from visible order."""

    collapsed = toggle_expanded(FOREST, "A")

    with pytest.raises(ItemNotFoundError):
        find_next_id(collapsed, "B")


def test_visible_ids_are_lazy_and_restartable() -> None:
    """It should produce a fresh generator per call."""

    first = iter_visible_ids(FOREST)
    assert isinstance(first, Iterator)
    assert next(first) == "A"

    assert list(iter_visible_ids(FOREST)) == ["A", "B", "C"]
    assert list(iter_visible_ids(FOREST)) == ["A", "B", "C"]


def test_layer_ids_do_not_descend() -> None:
    """It should list only the ids of the given list."""

    assert list(iter_layer_ids(FOREST)) == ["A", "C"]


def test_scan_stops_at_target() -> None:
    """It should not pull ids past what it needs."""

    def ids() -> Iterator[str]:
        yield "a"
        yield "b"
        yield "c"
        raise AssertionError("scanned too far")

    assert find_prev(ids(), "b") == "a"
    assert find_next(ids(), "b") == "c"


def test_prev_for_delete_falls_back_to_first_root() -> None:
    """It should prefer the visible predecessor, then the first root, then an empty id."""

    assert find_prev_id_for_delete(FOREST, "C") == "B"
    assert find_prev_id_for_delete(FOREST, "A") == "A"
    assert find_prev_id_for_delete((), "A") == ""
