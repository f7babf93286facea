"""Catalog tree model for the cascading resource-kind selector."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CatalogNode(BaseModel):
    """One node of the two-level catalog (category -> resource kind).

    Only leaves carry a ``ResourceKind`` value; category values are labels
    for the selector and are never submitted.
    """

    model_config = ConfigDict(frozen=True)

    value: str
    label: str
    children: tuple[CatalogNode, ...] | None = None

    @property
    def is_leaf(self) -> bool:
        return not self.children
