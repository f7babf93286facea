"""User-visible notices.

Stands in for the panel's toast/message area: managers post notices here
instead of raising when an async operation fails at a user boundary.  Every
notice is also logged.  Front ends subscribe with ``add_listener``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from kubepanel.models.enums import NoticeLevel
from kubepanel.models.notice import Notice

if TYPE_CHECKING:
    from collections.abc import Callable

_LOG_LEVELS = {
    NoticeLevel.SUCCESS: "SUCCESS",
    NoticeLevel.INFO: "INFO",
    NoticeLevel.WARNING: "WARNING",
    NoticeLevel.ERROR: "ERROR",
}


class Notifier:
    """Collects notices in order and fans them out to listeners."""

    def __init__(self) -> None:
        self._notices: list[Notice] = []
        self._listeners: list[Callable[[Notice], None]] = []

    def add_listener(self, listener: Callable[[Notice], None]) -> None:
        self._listeners.append(listener)

    def post(self, level: NoticeLevel, text: str) -> Notice:
        notice = Notice(level=level, text=text)
        self._notices.append(notice)
        logger.log(_LOG_LEVELS[level], "Notice: {}", text)
        for listener in self._listeners:
            listener(notice)
        return notice

    def success(self, text: str) -> Notice:
        return self.post(NoticeLevel.SUCCESS, text)

    def warning(self, text: str) -> Notice:
        return self.post(NoticeLevel.WARNING, text)

    def error(self, text: str) -> Notice:
        return self.post(NoticeLevel.ERROR, text)

    @property
    def notices(self) -> list[Notice]:
        """Snapshot of all notices posted so far."""
        return list(self._notices)

    def latest(self) -> Notice | None:
        return self._notices[-1] if self._notices else None
