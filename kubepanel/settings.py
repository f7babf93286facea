"""Client configuration loaded from KUBEPANEL_* environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class KubepanelSettings(BaseSettings):
    """Kubepanel client settings.

    All fields are read from environment variables with the ``KUBEPANEL_``
    prefix.  For example, ``KUBEPANEL_API_URL=https://panel.example`` maps to
    ``api_url``.
    """

    model_config = SettingsConfigDict(
        env_prefix="KUBEPANEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # -- Logging ---------------------------------------------------------------
    log_level: str = "INFO"

    # -- Remote panel ----------------------------------------------------------
    api_url: str = "http://localhost:3000"
    """Base URL of the panel backend serving ``/api/template`` and ``/api/create``."""

    request_timeout: float | None = None
    """Per-request timeout in seconds.

    Unset means no client-side timeout: a hung request keeps the caller
    waiting until the transport gives up.  When set, a timeout surfaces as an
    ordinary transport failure.
    """

    # -- Local storage ---------------------------------------------------------
    data_root: str = "./data"
    """Root directory for the template cache and the persisted session."""

    data_prefix: str | None = None
    """Optional namespace inserted into all data paths (``{data_root}/{data_prefix}/...``)."""

    session_name: str = "session"
    """Fixed record name the session is persisted under."""


def get_settings() -> KubepanelSettings:
    """Return a cached settings instance.

    Call ``_get_settings_cached.cache_clear()`` in tests to force a re-read
    after overriding env vars.
    """
    return _get_settings_cached()


@lru_cache(maxsize=1)
def _get_settings_cached() -> KubepanelSettings:
    return KubepanelSettings()
