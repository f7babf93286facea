"""Workspace state for the create-resource dialog."""

from __future__ import annotations

from pydantic import BaseModel

from kubepanel.models.enums import ResourceKind

PLACEHOLDER_TEMPLATE = "Please select a template first."


class WorkspaceState(BaseModel):
    """Text being edited plus the selection it was loaded for.

    ``editable`` is true iff ``selected_kind`` is set.
    """

    selected_kind: ResourceKind | None = None
    template_text: str = PLACEHOLDER_TEMPLATE
    editable: bool = False
    is_loading: bool = False
