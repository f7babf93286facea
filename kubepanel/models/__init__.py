"""Data models for kubepanel."""

from kubepanel.models.api import ApiEnvelope
from kubepanel.models.catalog import CatalogNode
from kubepanel.models.creation import CREATED_STATUS, CreationData, CreationResponse, CreationResult
from kubepanel.models.enums import NoticeLevel, ResourceKind
from kubepanel.models.notice import Notice
from kubepanel.models.session import Session, SessionUser
from kubepanel.models.workspace import PLACEHOLDER_TEMPLATE, WorkspaceState

__all__ = [
    "CREATED_STATUS",
    "PLACEHOLDER_TEMPLATE",
    # API
    "ApiEnvelope",
    # Catalog
    "CatalogNode",
    # Creation
    "CreationData",
    "CreationResponse",
    "CreationResult",
    # Notices
    "Notice",
    # Enums
    "NoticeLevel",
    "ResourceKind",
    # Session
    "Session",
    "SessionUser",
    # Workspace
    "WorkspaceState",
]
