"""Panel container -- owns the process-wide client state.

Built once at startup and torn down at shutdown::

    async with Panel.open(settings) as panel:
        dialog = panel.open_create_dialog()
        ...

The container holds the template cache, the session store, the API client
and the notifier, and hands them to dialogs by reference.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from loguru import logger

from kubepanel.api.client import PanelApiClient
from kubepanel.dialog import CreateResourceDialog
from kubepanel.managers.session import SessionStore
from kubepanel.managers.templates import TemplateCache
from kubepanel.notices import Notifier
from kubepanel.settings import KubepanelSettings, get_settings
from kubepanel.store.local import LocalKeyValueStore, LocalRecordStore

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    import httpx


class Panel:
    def __init__(
        self,
        *,
        settings: KubepanelSettings,
        templates: TemplateCache,
        sessions: SessionStore,
        api: PanelApiClient,
        notifier: Notifier,
    ) -> None:
        self.settings = settings
        self.templates = templates
        self.sessions = sessions
        self.api = api
        self.notifier = notifier

    @classmethod
    @asynccontextmanager
    async def open(
        cls,
        settings: KubepanelSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> AsyncIterator[Panel]:
        """Load persisted state, yield the container, then close the API client."""
        settings = settings or get_settings()
        logger.debug("Panel starting (api={}, data_root={})", settings.api_url, settings.data_root)

        sessions = await SessionStore.load(
            LocalRecordStore(settings.data_root, settings.session_name, prefix=settings.data_prefix)
        )
        api = PanelApiClient(
            settings.api_url,
            token_provider=sessions.get_bearer_token,
            timeout=settings.request_timeout,
            client=http_client,
        )
        templates = TemplateCache(LocalKeyValueStore(settings.data_root, prefix=settings.data_prefix), api)

        panel = cls(settings=settings, templates=templates, sessions=sessions, api=api, notifier=Notifier())
        try:
            yield panel
        finally:
            await api.aclose()
            logger.debug("Panel stopped")

    def open_create_dialog(self) -> CreateResourceDialog:
        return CreateResourceDialog(self.templates, self.api, self.notifier)

    async def logout(self) -> None:
        await self.sessions.clear()
