"""Outline item models.

An outline is a forest: an ordered tuple of root items, each owning its children
exclusively. Items are frozen; edits build new items with `model_copy` and leave the
input forest untouched.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


Symbol = Literal["dot", "naraba", "therefore", "because", "equal", "notEqual"]


class Item(BaseModel):
    """A single outline line.

    `is_expanded` only controls visible-order traversal. Collapsed items are still found,
    listed in breadcrumbs and edited like any other item.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    symbol: Symbol = "dot"
    text: str = ""
    children: tuple["Item", ...] = Field(default_factory=tuple)
    is_expanded: bool = Field(default=True, alias="isExpanded")


class Crumb(BaseModel):
    """One breadcrumb entry."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str


Forest = tuple[Item, ...]


def new_item(new_id: str) -> Item:
    """Create an empty, expanded item with a dot symbol.

    Args:
        new_id: Caller-assigned id. The engine never invents ids.

    Returns:
        The new item.
    """

    return Item(id=new_id, symbol="dot", text="", children=(), is_expanded=True)


def has_children(item: Item) -> bool:
    """Return True if the item has at least one child."""

    return len(item.children) > 0
