"""User-visible notice model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from kubepanel.models.enums import NoticeLevel


class Notice(BaseModel):
    level: NoticeLevel
    text: str
    timestamp: datetime = Field(default_factory=datetime.now)
