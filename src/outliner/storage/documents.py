"""Document-level operations on top of a forest store."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from outliner.config import Settings
from outliner.logging import get_logger
from outliner.models.item import Forest, Item, new_item
from outliner.storage.base import ForestStore
from outliner.storage.file_store import FileForestStore
from outliner.storage.redis_store import RedisForestStore
from outliner.tree.locator import find
from outliner.tree.mutator import update_children
from outliner.utils.ids import new_item_id

logger = get_logger(__name__)

# Saving under this id replaces the whole document rather than one item's children.
ROOT_ID = "root"


def get_store(settings: Settings) -> ForestStore:
    """Build the configured store."""

    if settings.store_backend == "redis":
        return RedisForestStore(redis_url=settings.redis_url, key_prefix=settings.redis_key_prefix)
    return FileForestStore(root_dir=settings.data_dir)


def save_items(store: ForestStore, owner: str, item_id: str, items: Sequence[Item]) -> Forest:
    """Persist an editor's items.

    An editor zoomed into `item_id` only holds that item's children, so they are re-attached
    under `item_id` in the stored document. `ROOT_ID` replaces the whole document.

    Returns:
        The forest that was written.
    """

    if item_id == ROOT_ID:
        forest = tuple(items)
    else:
        forest = update_children(store.load(owner), item_id, items)
    store.save(owner, forest)
    logger.info("Saved items under %s (%d root items)", item_id, len(forest))
    return forest


def load_or_seed(store: ForestStore, owner: str, id_factory: Callable[[], str] = new_item_id) -> Forest:
    """Load a document, giving an empty one a single blank item to start typing in.

    The seeded item is not persisted until the caller saves.
    """

    forest = store.load(owner)
    if not forest:
        return (new_item(id_factory()),)
    return forest


def zoom(forest: Sequence[Item], item_id: str, id_factory: Callable[[], str] = new_item_id) -> Item:
    """Return `item_id` as the root of a zoomed-in editor.

    A childless item gets one blank child so the editor has a line to type into.

    Raises:
        ItemNotFoundError: If `item_id` is absent.
    """

    item = find(forest, item_id)
    if not item.children:
        item = item.model_copy(update={"children": (new_item(id_factory()),)})
    return item
