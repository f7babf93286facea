"""Persistent stores for the template cache and the session record."""

from kubepanel.store.base import KeyValueStore, RecordStore
from kubepanel.store.local import LocalKeyValueStore, LocalRecordStore
from kubepanel.store.memory import MemoryKeyValueStore, MemoryRecordStore

__all__ = [
    "KeyValueStore",
    "LocalKeyValueStore",
    "LocalRecordStore",
    "MemoryKeyValueStore",
    "MemoryRecordStore",
    "RecordStore",
]
