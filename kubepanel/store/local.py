"""Local filesystem stores.

Layout under a unified data root with optional namespace prefix::

    {data_root}/{prefix}/storage/{key}      key/value entries (template cache)
    {data_root}/{prefix}/{name}.json        named records (session)

When prefix is None, the prefix segment is dropped.

Uses ``anyio.to_thread.run_sync`` for non-blocking file I/O.  Writes are
atomic: data goes to a temporary file in the same directory, which is then
renamed over the target, so a crash mid-write never leaves a torn entry.
"""

from __future__ import annotations

import contextlib
import json
import os
import re
import tempfile
from functools import partial
from pathlib import Path
from typing import Any

from anyio import to_thread

_SAFE_KEY = re.compile(r"[A-Za-z0-9._-]+")


def _base_dir(data_root: str | Path, prefix: str | None) -> Path:
    base = Path(data_root)
    if prefix:
        base = base / prefix
    return base


class LocalKeyValueStore:
    """Filesystem implementation of the KeyValueStore protocol (one file per key)."""

    def __init__(self, data_root: str | Path, prefix: str | None = None) -> None:
        self._base = _base_dir(data_root, prefix) / "storage"

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY.fullmatch(key) or key in {".", ".."}:
            msg = f"Invalid storage key: {key!r}"
            raise ValueError(msg)
        return self._base / key

    async def get(self, key: str) -> str | None:
        path = self._path(key)
        return await to_thread.run_sync(partial(_read_optional, path))

    async def set(self, key: str, value: str) -> None:
        path = self._path(key)
        await to_thread.run_sync(partial(_atomic_write, path, value))

    async def delete(self, key: str) -> None:
        path = self._path(key)
        await to_thread.run_sync(partial(_unlink, path))


class LocalRecordStore:
    """Filesystem implementation of the RecordStore protocol.

    The record is stored as pretty-printed JSON at ``{base}/{name}.json``.
    """

    def __init__(self, data_root: str | Path, name: str, prefix: str | None = None) -> None:
        self._path = _base_dir(data_root, prefix) / f"{name}.json"

    @property
    def path(self) -> Path:
        return self._path

    async def load(self) -> dict[str, Any] | None:
        raw = await to_thread.run_sync(partial(_read_optional, self._path))
        if raw is None:
            return None
        return json.loads(raw)

    async def save(self, record: dict[str, Any]) -> None:
        data = json.dumps(record, indent=2, ensure_ascii=False)
        await to_thread.run_sync(partial(_atomic_write, self._path, data))

    async def delete(self) -> None:
        await to_thread.run_sync(partial(_unlink, self._path))


# -- Sync helpers (run in thread pool) -----------------------------------------


def _atomic_write(path: Path, data: str) -> None:
    """Write data atomically: temp file + rename."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(data)
        os.replace(tmp_path, path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        raise


def _read_optional(path: Path) -> str | None:
    """Read file contents, or ``None`` if the file does not exist."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None


def _unlink(path: Path) -> None:
    path.unlink(missing_ok=True)
