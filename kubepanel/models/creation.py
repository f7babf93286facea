"""Creation request / result models."""

from __future__ import annotations

from pydantic import BaseModel, Field

CREATED_STATUS = 201


class CreationData(BaseModel):
    message: str | None = None


class CreationResponse(BaseModel):
    """Raw answer of the creation endpoint, before interpretation."""

    status_code: int
    data: CreationData = Field(default_factory=CreationData)


class CreationResult(BaseModel):
    """Interpreted outcome of one submission.

    ``status_code`` is ``None`` when no response was received (transport error).
    """

    status_code: int | None = None
    message: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.status_code == CREATED_STATUS
