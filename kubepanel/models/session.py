"""Session data model.

The session record is open: fields the panel backend adds beyond the ones
declared here are kept and persisted untouched.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SessionUser(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    name: str | None = None
    avatar: str | None = None
    k8s_username: str | None = None
    ns_uid: str | None = None


class Session(BaseModel):
    """Authenticated session persisted as one record."""

    model_config = ConfigDict(extra="allow")

    user: SessionUser | None = None
    kubeconfig: str = ""
    locale: str = "en"
    token: str = ""
