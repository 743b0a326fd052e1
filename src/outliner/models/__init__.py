"""Pydantic models used across the project."""

from __future__ import annotations

from outliner.models.codec import dump_forest, dumps_forest, load_forest, loads_forest
from outliner.models.item import Crumb, Forest, Item, Symbol, has_children, new_item

__all__ = [
    "Crumb",
    "Forest",
    "Item",
    "Symbol",
    "dump_forest",
    "dumps_forest",
    "has_children",
    "load_forest",
    "loads_forest",
    "new_item",
]
