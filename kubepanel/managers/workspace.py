"""Workspace -- the editable manifest text of one create-resource dialog.

Selection changes bump a generation counter.  A template resolution is only
applied if its generation is still current, so the latest selection always
wins and a slow fetch for an abandoned kind can never overwrite the text.
Superseded resolutions are discarded, not cancelled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from kubepanel.catalog import resolve_kind
from kubepanel.models.workspace import PLACEHOLDER_TEMPLATE, WorkspaceState

if TYPE_CHECKING:
    from collections.abc import Sequence

    from kubepanel.managers.templates import TemplateCache
    from kubepanel.models.enums import ResourceKind
    from kubepanel.notices import Notifier


class WorkspaceReadOnlyError(RuntimeError):
    """Raised when editing while no resource kind is selected."""


class Workspace:
    def __init__(self, templates: TemplateCache, notifier: Notifier) -> None:
        self._templates = templates
        self._notifier = notifier
        self._state = WorkspaceState()
        self._generation = 0

    # -- Query -----------------------------------------------------------------

    @property
    def state(self) -> WorkspaceState:
        """Snapshot of the current state."""
        return self._state.model_copy()

    @property
    def selected_kind(self) -> ResourceKind | None:
        return self._state.selected_kind

    @property
    def editable(self) -> bool:
        return self._state.editable

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def content(self) -> str:
        """Current text, read on demand at submission time."""
        return self._state.template_text

    # -- Mutation --------------------------------------------------------------

    async def select(self, path: Sequence[str] | None) -> WorkspaceState:
        """Apply a selector change and load the template for the new kind.

        ``path`` is the cascading selector value (category, kind); an empty
        path clears the selection.  Raises ``UnknownResourceKindError`` for a
        path that does not end in a resource kind, before any state changes.
        """
        kind = resolve_kind(path)
        self._generation += 1
        generation = self._generation

        if kind is None:
            self._state = WorkspaceState(template_text=PLACEHOLDER_TEMPLATE)
            logger.debug("Workspace selection cleared")
            return self.state

        self._state = self._state.model_copy(update={"selected_kind": kind, "editable": True, "is_loading": True})

        try:
            template = await self._templates.resolve(kind)
        except Exception:
            if generation != self._generation:
                logger.debug("Discarding failed template load for superseded selection {}", kind)
                return self.state
            # TODO: offer a retry action instead of requiring a re-selection
            logger.opt(exception=True).warning("Template load failed for {}", kind)
            self._notifier.warning("Failed to fetch template")
            self._state = self._state.model_copy(update={"is_loading": False})
            return self.state

        if generation != self._generation:
            logger.debug("Discarding template for superseded selection {}", kind)
            return self.state

        self._state = self._state.model_copy(update={"template_text": template, "is_loading": False})
        return self.state

    def edit(self, text: str) -> None:
        """Replace the edited text.  Raises ``WorkspaceReadOnlyError`` if not editable."""
        if not self._state.editable:
            msg = "Workspace is read-only until a resource kind is selected"
            raise WorkspaceReadOnlyError(msg)
        self._state = self._state.model_copy(update={"template_text": text})
