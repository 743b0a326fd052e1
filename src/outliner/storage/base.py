"""Storage interface for outline documents."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from outliner.models.item import Forest, Item


class StoreError(RuntimeError):
    """Persisted data could not be read back as a forest."""


class ForestStore(ABC):
    """One forest per owner. Last write wins; there is no merging."""

    @abstractmethod
    def load(self, owner: str) -> Forest:
        """Load the owner's forest; an unknown owner has an empty forest."""

    @abstractmethod
    def save(self, owner: str, forest: Sequence[Item]) -> None:
        """Replace the owner's forest."""
