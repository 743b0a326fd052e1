"""Errors raised by tree lookups."""

from __future__ import annotations


class ItemNotFoundError(LookupError):
    """Raised when a lookup cannot produce a result for `item_id`.

    Covers both an absent id and a positional boundary (no previous item, no parent).
    """

    def __init__(self, item_id: str, message: str | None = None) -> None:
        self.item_id = item_id
        super().__init__(message or f"Item with ID {item_id} not found")
