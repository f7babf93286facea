"""Shared enumerations used across kubepanel."""

from __future__ import annotations

from enum import StrEnum

# -- Resources ---------------------------------------------------------------


class ResourceKind(StrEnum):
    """Creatable resource kinds, named by their kubectl plural."""

    PODS = "pods"
    DEPLOYMENTS = "deployments"
    STATEFUL_SETS = "statefulsets"
    INGRESSES = "ingresses"
    CONFIG_MAPS = "configmaps"
    SECRETS = "secrets"
    PERSISTENT_VOLUME_CLAIMS = "persistentvolumeclaims"


# -- Notices -----------------------------------------------------------------


class NoticeLevel(StrEnum):
    """Severity of a user-visible notice."""

    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
