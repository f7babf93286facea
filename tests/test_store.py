"""Unit tests for the local and in-memory stores.

No network required -- filesystem stores use a temporary directory.
"""

from __future__ import annotations

import pytest

from kubepanel.store import (
    KeyValueStore,
    LocalKeyValueStore,
    LocalRecordStore,
    MemoryKeyValueStore,
    MemoryRecordStore,
    RecordStore,
)


@pytest.fixture
def kv(tmp_path) -> LocalKeyValueStore:
    return LocalKeyValueStore(tmp_path)


@pytest.fixture
def record(tmp_path) -> LocalRecordStore:
    return LocalRecordStore(tmp_path, "session")


def test_implementations_satisfy_protocols(tmp_path) -> None:
    assert isinstance(LocalKeyValueStore(tmp_path), KeyValueStore)
    assert isinstance(MemoryKeyValueStore(), KeyValueStore)
    assert isinstance(LocalRecordStore(tmp_path, "session"), RecordStore)
    assert isinstance(MemoryRecordStore(), RecordStore)


# ---------------------------------------------------------------------------
# Key/value
# ---------------------------------------------------------------------------


async def test_kv_get_missing(kv: LocalKeyValueStore) -> None:
    assert await kv.get("template-pods") is None


async def test_kv_set_and_get(kv: LocalKeyValueStore, tmp_path) -> None:
    await kv.set("template-pods", "kind: Pod\n")

    assert await kv.get("template-pods") == "kind: Pod\n"
    assert (tmp_path / "storage" / "template-pods").read_text(encoding="utf-8") == "kind: Pod\n"


async def test_kv_last_writer_wins(kv: LocalKeyValueStore) -> None:
    await kv.set("template-pods", "one")
    await kv.set("template-pods", "two")
    assert await kv.get("template-pods") == "two"


async def test_kv_delete(kv: LocalKeyValueStore) -> None:
    await kv.set("template-pods", "kind: Pod\n")
    await kv.delete("template-pods")
    assert await kv.get("template-pods") is None

    # Delete non-existent is a no-op.
    await kv.delete("template-pods")


async def test_kv_survives_new_instance(tmp_path) -> None:
    """Entries outlive the store object, as they must across restarts."""
    await LocalKeyValueStore(tmp_path).set("template-secrets", "kind: Secret\n")
    assert await LocalKeyValueStore(tmp_path).get("template-secrets") == "kind: Secret\n"


async def test_kv_prefix_isolated(tmp_path) -> None:
    alice = LocalKeyValueStore(tmp_path, prefix="alice")
    bob = LocalKeyValueStore(tmp_path, prefix="bob")
    await alice.set("template-pods", "alice")

    assert await bob.get("template-pods") is None
    assert (tmp_path / "alice" / "storage" / "template-pods").exists()


@pytest.mark.parametrize("key", ["../escape", "a/b", "", "template pods"])
async def test_kv_rejects_unsafe_keys(kv: LocalKeyValueStore, key: str) -> None:
    with pytest.raises(ValueError, match="Invalid storage key"):
        await kv.set(key, "x")


# ---------------------------------------------------------------------------
# Record
# ---------------------------------------------------------------------------


async def test_record_load_missing(record: LocalRecordStore) -> None:
    assert await record.load() is None


async def test_record_save_and_load(record: LocalRecordStore, tmp_path) -> None:
    await record.save({"kubeconfig": "", "locale": "fr", "user": {"id": "u1"}})

    assert record.path == tmp_path / "session.json"
    assert await record.load() == {"kubeconfig": "", "locale": "fr", "user": {"id": "u1"}}


async def test_record_delete(record: LocalRecordStore) -> None:
    await record.save({"locale": "en"})
    await record.delete()
    assert await record.load() is None
    await record.delete()


async def test_record_prefix(tmp_path) -> None:
    store = LocalRecordStore(tmp_path, "session", prefix="alice")
    await store.save({"locale": "en"})
    assert (tmp_path / "alice" / "session.json").exists()


# ---------------------------------------------------------------------------
# Memory
# ---------------------------------------------------------------------------


async def test_memory_record_copies() -> None:
    """Mutating a loaded record must not leak back into the store."""
    store = MemoryRecordStore()
    await store.save({"user": {"id": "u1"}})

    loaded = await store.load()
    loaded["user"]["id"] = "changed"

    assert await store.load() == {"user": {"id": "u1"}}


async def test_memory_kv_roundtrip() -> None:
    store = MemoryKeyValueStore({"template-pods": "cached"})
    assert await store.get("template-pods") == "cached"
    await store.delete("template-pods")
    assert await store.get("template-pods") is None
