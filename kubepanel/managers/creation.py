"""Creation orchestrator -- submits a manifest and interprets the answer.

One submission at a time: while a request is in flight, further submits are
rejected rather than queued.  Every outcome becomes a user notice; failures
never escape, so the dialog stays open for correction and resubmission.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from kubepanel.models.creation import CreationResult

if TYPE_CHECKING:
    from kubepanel.api.base import ResourceCreator
    from kubepanel.models.enums import ResourceKind
    from kubepanel.notices import Notifier


class SubmissionInProgressError(RuntimeError):
    """Raised when submitting while a previous submission is unresolved."""


class CreationOrchestrator:
    def __init__(self, creator: ResourceCreator, notifier: Notifier) -> None:
        self._creator = creator
        self._notifier = notifier
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def submit(self, content: str, kind: ResourceKind) -> CreationResult:
        """Send ``content`` for ``kind`` and return the interpreted result.

        Status 201 is the only success.  Any other status, or a transport
        error (``status_code=None``), is a failure.  The in-flight flag is
        released on every path.
        """
        if self._in_flight:
            msg = f"A submission is already in progress (requested {kind})"
            raise SubmissionInProgressError(msg)

        self._in_flight = True
        try:
            try:
                response = await self._creator.create_resource(content, kind)
            except Exception as exc:
                logger.opt(exception=True).warning("Create {} failed before a response", kind)
                self._notifier.error(f"Failed to create resource: {exc}")
                return CreationResult(status_code=None, message=str(exc))

            result = CreationResult(status_code=response.status_code, message=response.data.message)
            if result.succeeded:
                logger.info("Created {} resource", kind)
                self._notifier.success("Successfully created resource")
            else:
                logger.warning("Create {} rejected: status={} message={}", kind, result.status_code, result.message)
                self._notifier.error(f"Failed to create resource: {result.message}")
            return result
        finally:
            self._in_flight = False
