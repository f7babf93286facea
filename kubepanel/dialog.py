"""Create-resource dialog -- binds a workspace to a creation orchestrator.

Lives for one open/close cycle of the dialog.  The "Create" action is enabled
only while a kind is selected and no submission is in flight.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from kubepanel.managers.creation import CreationOrchestrator
from kubepanel.managers.workspace import Workspace

if TYPE_CHECKING:
    from collections.abc import Sequence

    from kubepanel.api.base import ResourceCreator
    from kubepanel.managers.templates import TemplateCache
    from kubepanel.models.creation import CreationResult
    from kubepanel.models.workspace import WorkspaceState
    from kubepanel.notices import Notifier


class CreateResourceDialog:
    def __init__(self, templates: TemplateCache, creator: ResourceCreator, notifier: Notifier) -> None:
        self.notifier = notifier
        self.workspace = Workspace(templates, notifier)
        self.orchestrator = CreationOrchestrator(creator, notifier)

    @property
    def create_enabled(self) -> bool:
        return self.workspace.editable and not self.orchestrator.in_flight

    async def select(self, path: Sequence[str] | None) -> WorkspaceState:
        return await self.workspace.select(path)

    def edit(self, text: str) -> None:
        self.workspace.edit(text)

    async def create(self) -> CreationResult | None:
        """Submit the current workspace text.

        Returns ``None`` without submitting when the action is disabled.
        """
        kind = self.workspace.selected_kind
        if not self.create_enabled or kind is None:
            logger.debug("Create ignored: action disabled")
            return None
        return await self.orchestrator.submit(self.workspace.content, kind)
