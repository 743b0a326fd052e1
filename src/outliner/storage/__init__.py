"""Persistence for outline documents."""

from __future__ import annotations

from outliner.storage.base import ForestStore, StoreError
from outliner.storage.documents import ROOT_ID, get_store, load_or_seed, save_items, zoom
from outliner.storage.file_store import FileForestStore
from outliner.storage.redis_store import RedisForestStore

__all__ = [
    "ROOT_ID",
    "FileForestStore",
    "ForestStore",
    "RedisForestStore",
    "StoreError",
    "get_store",
    "load_or_seed",
    "save_items",
    "zoom",
]
