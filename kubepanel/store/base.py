"""Storage interfaces for the template cache and the session record.

Both stores are process-wide, unscoped and last-writer-wins.  The interface
is async so that file-backed implementations can keep blocking I/O off the
event loop.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Persistent text key/value storage.

    Keys are flat strings such as ``template-ingresses``.  There is no expiry.
    """

    async def get(self, key: str) -> str | None:
        """Return the stored text, or ``None`` if the key is absent."""
        ...

    async def set(self, key: str, value: str) -> None: ...

    async def delete(self, key: str) -> None:
        """Remove a key.  No-op if absent."""
        ...


@runtime_checkable
class RecordStore(Protocol):
    """Whole-object storage for a single named record."""

    async def load(self) -> dict[str, Any] | None:
        """Return the stored record, or ``None`` if nothing was saved."""
        ...

    async def save(self, record: dict[str, Any]) -> None: ...

    async def delete(self) -> None:
        """Remove the record.  No-op if absent."""
        ...
