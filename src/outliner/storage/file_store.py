"""File-based forest store.

Each owner gets one JSON file under `root_dir`, written atomically via a temp file.
"""

from __future__ import annotations

import hashlib
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from outliner.logging import get_logger
from outliner.models.codec import dumps_forest, loads_forest
from outliner.models.item import Forest, Item
from outliner.storage.base import ForestStore, StoreError

logger = get_logger(__name__)

_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_.-]+")


@dataclass
class FileForestStore(ForestStore):
    """JSON file per owner."""

    root_dir: Path

    def __post_init__(self) -> None:
        self.root_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, owner: str) -> Path:
        """Return the file backing `owner`'s document."""

        # owners are often emails; keep the name readable but collision-free
        digest = hashlib.sha256(owner.encode("utf-8")).hexdigest()[:12]
        stem = _UNSAFE_RE.sub("_", owner).strip("_")[:48] or "owner"
        return self.root_dir / f"items_{stem}_{digest}.json"

    def load(self, owner: str) -> Forest:
        path = self.path_for(owner)
        if not path.exists():
            return ()
        try:
            forest = loads_forest(path.read_text(encoding="utf-8"))
        except ValidationError as exc:
            raise StoreError(f"stored items for {owner!r} are invalid: {path}") from exc
        logger.debug("Loaded %d root items from %s", len(forest), path)
        return forest

    def save(self, owner: str, forest: Sequence[Item]) -> None:
        path = self.path_for(owner)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(dumps_forest(forest), encoding="utf-8")
        tmp.replace(path)
        logger.debug("Saved %d root items to %s", len(forest), path)
