"""Redis-based forest store.

Useful for multi-instance deployments where documents must not live on local disk. Each
owner's forest is a single JSON string under `<prefix>:items:<owner>`.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import redis
from pydantic import ValidationError

from outliner.models.codec import dumps_forest, loads_forest
from outliner.models.item import Forest, Item
from outliner.storage.base import ForestStore, StoreError


@dataclass
class RedisForestStore(ForestStore):
    """Key-value store keeping one forest per owner."""

    redis_url: str
    key_prefix: str
    client: Any = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.client is None:
            self.client = redis.Redis.from_url(self.redis_url, decode_responses=True)

    def key_for(self, owner: str) -> str:
        return f"{self.key_prefix}:items:{owner}"

    def load(self, owner: str) -> Forest:
        raw = self.client.get(self.key_for(owner))
        if raw is None:
            return ()
        try:
            return loads_forest(raw)
        except ValidationError as exc:
            raise StoreError(f"stored items for {owner!r} are invalid") from exc

    def save(self, owner: str, forest: Sequence[Item]) -> None:
        self.client.set(self.key_for(owner), dumps_forest(forest))
