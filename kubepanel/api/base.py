"""Interfaces of the remote panel endpoints consumed by the managers."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from kubepanel.models.creation import CreationResponse
from kubepanel.models.enums import ResourceKind


@runtime_checkable
class TemplateSource(Protocol):
    async def fetch_template(self, kind: ResourceKind) -> str:
        """Return the template text for ``kind``.  Raises on transport or server error."""
        ...


@runtime_checkable
class ResourceCreator(Protocol):
    async def create_resource(self, content: str, kind: ResourceKind) -> CreationResponse:
        """Submit a manifest.  Transport errors propagate; server rejections are returned."""
        ...
