"""Tests for forest stores and document helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from outliner.config import Settings
from outliner.models.item import Item, new_item
from outliner.storage import (
    ROOT_ID,
    FileForestStore,
    RedisForestStore,
    StoreError,
    get_store,
    load_or_seed,
    save_items,
    zoom,
)
from outliner.tree.errors import ItemNotFoundError
from outliner.tree.locator import find


class FakeRedis:
    """Minimal in-memory stand-in for the redis client."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


def _forest() -> tuple[Item, ...]:
    return (
        Item(id="a", text="first", children=(Item(id="a1", text="child"),)),
        Item(id="b", text="second", symbol="equal", is_expanded=False),
    )


def test_file_store_round_trip(tmp_path: Path) -> None:
    """It should persist and reload a forest per owner."""

    store = FileForestStore(tmp_path / "docs")

    assert store.load("alice@example.com") == ()

    store.save("alice@example.com", _forest())

    assert store.load("alice@example.com") == _forest()
    assert store.load("bob@example.com") == ()
    assert store.path_for("alice@example.com") != store.path_for("alice_example.com")


def test_file_store_rejects_corrupt_file(tmp_path: Path) -> None:
    """It should raise StoreError for undecodable data."""

    store = FileForestStore(tmp_path)
    store.path_for("alice").write_text('[{"id": 1}]', encoding="utf-8")

    with pytest.raises(StoreError):
        store.load("alice")


def test_redis_store_round_trip() -> None:
    """It should keep one JSON value per owner under the key prefix."""

    client = FakeRedis()
    store = RedisForestStore(redis_url="redis://unused", key_prefix="test", client=client)

    store.save("alice", _forest())

    assert set(client.data) == {"test:items:alice"}
    assert store.load("alice") == _forest()
    assert store.load("bob") == ()


def test_save_items_under_root_replaces_document(tmp_path: Path) -> None:
    """It should overwrite the whole document for the root id."""

    store = FileForestStore(tmp_path)
    store.save("alice", _forest())

    save_items(store, "alice", ROOT_ID, [new_item("z")])

    assert store.load("alice") == (new_item("z"),)


def test_save_items_under_item_reattaches_children(tmp_path: Path) -> None:
    """It should replace only the children of the zoomed-in item."""

    store = FileForestStore(tmp_path)
    store.save("alice", _forest())

    save_items(store, "alice", "a", [new_item("x"), new_item("y")])

    stored = store.load("alice")
    assert [c.id for c in find(stored, "a").children] == ["x", "y"]
    assert find(stored, "a").text == "first"
    assert stored[1] == _forest()[1]


def test_load_or_seed_gives_empty_document_one_item(tmp_path: Path) -> None:
    """It should seed an empty document without saving it."""

    store = FileForestStore(tmp_path)

    seeded = load_or_seed(store, "alice", id_factory=lambda: "seed")

    assert seeded == (new_item("seed"),)
    assert store.load("alice") == ()


def test_zoom_adds_blank_child_to_leaf() -> None:
    """It should give a childless item one blank line to type into."""

    zoomed = zoom(_forest(), "b", id_factory=lambda: "blank")

    assert zoomed.children == (new_item("blank"),)
    assert zoom(_forest(), "a").children == _forest()[0].children

    with pytest.raises(ItemNotFoundError):
        zoom(_forest(), "nope")


def test_get_store_uses_settings(tmp_path: Path) -> None:
    """It should build the file store by default."""

    store = get_store(Settings(data_dir=tmp_path / "data"))

    assert isinstance(store, FileForestStore)
    assert store.root_dir == tmp_path / "data"
