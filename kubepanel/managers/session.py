"""Session store -- persisted authentication state.

The store is constructed explicitly (``await SessionStore.load(record_store)``)
when the panel starts and passed to whoever needs it.  Every mutation is
saved immediately; the record survives process restarts until ``clear``.

The bearer token is never stored separately: ``derive_token`` parses the
kubeconfig on every call, so a malformed document is reported when the token
is read, not when the session is set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import yaml
from loguru import logger
from pydantic import ValidationError

from kubepanel.models.session import Session

if TYPE_CHECKING:
    from kubepanel.store.base import RecordStore


class KubeconfigError(ValueError):
    """Raised when the session kubeconfig cannot yield a user token."""


def derive_token(session: Session) -> str:
    """Return ``users[0].user.token`` from the session kubeconfig.

    An empty kubeconfig means no session and yields ``""`` without parsing.
    An unquoted numeric token is returned as its text.  Malformed YAML, or a
    document without a first user carrying a string or integer token, raises
    ``KubeconfigError``.
    """
    if session.kubeconfig == "":
        return ""

    try:
        doc = yaml.safe_load(session.kubeconfig)
    except yaml.YAMLError as exc:
        msg = f"Kubeconfig is not valid YAML: {exc}"
        raise KubeconfigError(msg) from exc

    users = doc.get("users") if isinstance(doc, dict) else None
    if not isinstance(users, list) or not users:
        msg = "Kubeconfig has no users"
        raise KubeconfigError(msg)

    first = users[0] if isinstance(users[0], dict) else {}
    user = first.get("user")
    token = user.get("token") if isinstance(user, dict) else None
    if isinstance(token, int) and not isinstance(token, bool):
        token = str(token)
    if not isinstance(token, str):
        msg = "First kubeconfig user has no token"
        raise KubeconfigError(msg)
    return token


class SessionStore:
    """Process-wide session state with save-on-mutate persistence."""

    def __init__(self, store: RecordStore, session: Session | None = None) -> None:
        self._store = store
        self._session = session or Session()

    @classmethod
    async def load(cls, store: RecordStore) -> SessionStore:
        """Create the store from the persisted record (empty session if none)."""
        try:
            record = await store.load()
            if record is None:
                return cls(store)
            session = Session.model_validate(record)
        except (ValueError, ValidationError):
            logger.warning("Discarding unreadable persisted session")
            session = Session()
        return cls(store, session)

    # -- Query -----------------------------------------------------------------

    @property
    def session(self) -> Session:
        """Copy of the current record; change it through the mutation methods."""
        return self._session.model_copy(deep=True)

    def get_session(self) -> Session:
        return self.session

    def is_user_login(self) -> bool:
        return self._session.user is not None and self._session.user.id is not None

    def get_bearer_token(self) -> str:
        """Derive the bearer token from the current kubeconfig (see ``derive_token``)."""
        return derive_token(self._session)

    # -- Mutation --------------------------------------------------------------

    async def set_session(self, session: Session) -> None:
        """Replace the whole record with a copy of ``session``."""
        self._session = session.model_copy(deep=True)
        await self._persist()
        logger.info("Session set (user={})", session.user.id if session.user else None)

    async def set_session_prop(self, key: str, value: Any) -> None:
        """Update one named field, leaving every other field untouched.

        Raises ``pydantic.ValidationError`` (and keeps the old record) if the
        value does not fit the field.
        """
        data = self._session.model_dump()
        data[key] = value
        self._session = Session.model_validate(data)
        await self._persist()
        logger.debug("Session field updated: {}", key)

    async def clear(self) -> None:
        """Forget the session and delete the persisted record (logout)."""
        self._session = Session()
        await self._store.delete()
        logger.info("Session cleared")

    async def _persist(self) -> None:
        await self._store.save(self._session.model_dump(mode="json"))
