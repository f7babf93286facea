"""Wire envelope returned by the panel backend endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ApiEnvelope(BaseModel):
    """``{code, message, data}`` envelope used by ``/api/template`` and ``/api/create``."""

    code: int | None = None
    message: str | None = None
    data: Any = None
