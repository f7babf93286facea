"""Template cache -- resolves a resource kind to template text.

Write-through cache over a persistent key/value store, keyed
``template-<kind>``.  A cached entry is never refreshed from the network;
``evict`` is the only way to force a re-fetch.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from kubepanel.api.base import TemplateSource
    from kubepanel.models.enums import ResourceKind
    from kubepanel.store.base import KeyValueStore


def cache_key(kind: ResourceKind) -> str:
    return f"template-{kind}"


class TemplateCache:
    """Local-first template lookup with remote fallback."""

    def __init__(self, store: KeyValueStore, source: TemplateSource) -> None:
        self._store = store
        self._source = source

    async def resolve(self, kind: ResourceKind) -> str:
        """Return the template for ``kind``.

        Served from the store when present; otherwise fetched and stored
        before returning.  A failed fetch caches nothing and propagates
        (``TemplateFetchError`` from the bundled client).
        """
        key = cache_key(kind)
        cached = await self._store.get(key)
        if cached is not None:
            logger.debug("Template cache hit: {}", key)
            return cached

        logger.debug("Template cache miss: {}, fetching", key)
        template = await self._source.fetch_template(kind)
        await self._store.set(key, template)
        logger.info("Cached template for {}", kind)
        return template

    async def evict(self, kind: ResourceKind) -> None:
        """Drop the cached entry for ``kind``.  No-op if absent."""
        await self._store.delete(cache_key(kind))
        logger.info("Evicted cached template for {}", kind)
