"""Wire codec for forests.

The persisted form is a JSON array of `{id, symbol, text, children, isExpanded}` records,
nested through `children`. Decoding and re-encoding an untouched forest reproduces the
same fields, nesting and order.
"""

from __future__ import annotations

from typing import Any, Sequence

from pydantic import TypeAdapter

from outliner.models.item import Forest, Item

_FOREST_ADAPTER: TypeAdapter[Forest] = TypeAdapter(Forest)


def load_forest(data: Any) -> Forest:
    """Validate plain Python data (lists and dicts) into a forest.

    Raises:
        pydantic.ValidationError: On unknown symbols, missing fields or wrong types.
    """

    return _FOREST_ADAPTER.validate_python(data)


def loads_forest(text: str | bytes) -> Forest:
    """Decode a JSON document into a forest."""

    return _FOREST_ADAPTER.validate_json(text)


def dump_forest(forest: Sequence[Item]) -> list[dict[str, Any]]:
    """Encode a forest into JSON-compatible Python data using wire field names."""

    return [item.model_dump(mode="json", by_alias=True) for item in forest]


def dumps_forest(forest: Sequence[Item]) -> str:
    """Encode a forest as a JSON string."""

    return _FOREST_ADAPTER.dump_json(tuple(forest), by_alias=True).decode("utf-8")
