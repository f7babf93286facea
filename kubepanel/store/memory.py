"""In-memory stores for tests and ephemeral runs.  Nothing survives the process."""

from __future__ import annotations

import copy
from typing import Any


class MemoryKeyValueStore:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.data[key] = value

    async def delete(self, key: str) -> None:
        self.data.pop(key, None)


class MemoryRecordStore:
    def __init__(self, record: dict[str, Any] | None = None) -> None:
        self.record = copy.deepcopy(record) if record is not None else None

    async def load(self) -> dict[str, Any] | None:
        return copy.deepcopy(self.record) if self.record is not None else None

    async def save(self, record: dict[str, Any]) -> None:
        self.record = copy.deepcopy(record)

    async def delete(self) -> None:
        self.record = None
