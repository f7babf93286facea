"""Static catalog of creatable resource kinds.

Two-level tree used to populate the cascading selector: a category node
holds the concrete kinds below it.  Only leaf values are resource kinds.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kubepanel.models.catalog import CatalogNode
from kubepanel.models.enums import ResourceKind

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


class UnknownResourceKindError(LookupError):
    """Raised when a selector path does not end in a catalog leaf."""


_CATALOG: tuple[CatalogNode, ...] = (
    CatalogNode(
        value="workload",
        label="Workload",
        children=(
            CatalogNode(value=ResourceKind.PODS, label="Pod"),
            CatalogNode(value=ResourceKind.DEPLOYMENTS, label="Deployment"),
            CatalogNode(value=ResourceKind.STATEFUL_SETS, label="Stateful Set"),
        ),
    ),
    CatalogNode(
        value="network",
        label="Network",
        children=(CatalogNode(value=ResourceKind.INGRESSES, label="Ingress"),),
    ),
    CatalogNode(
        value="config",
        label="Config",
        children=(
            CatalogNode(value=ResourceKind.CONFIG_MAPS, label="Config Map"),
            CatalogNode(value=ResourceKind.SECRETS, label="Secret"),
        ),
    ),
    CatalogNode(
        value="storage",
        label="Storage",
        children=(CatalogNode(value=ResourceKind.PERSISTENT_VOLUME_CLAIMS, label="Persistent Volume Claim"),),
    ),
)


def list_catalog() -> list[CatalogNode]:
    """Return the category nodes in display order."""
    return list(_CATALOG)


def iter_kinds() -> Iterator[tuple[str, str, ResourceKind]]:
    """Yield ``(category label, kind label, kind)`` for every leaf."""
    for category in _CATALOG:
        for leaf in category.children or ():
            yield category.label, leaf.label, ResourceKind(leaf.value)


def resolve_kind(path: Sequence[str] | None) -> ResourceKind | None:
    """Map a selector value path to its leaf kind.

    An empty path means the selection was cleared and returns ``None``.
    A bare kind (``["ingresses"]``) is accepted as well as the full
    ``["network", "ingresses"]`` path.  Raises ``UnknownResourceKindError``
    if the path does not end in a leaf.
    """
    if not path:
        return None

    nodes: Sequence[CatalogNode] = _CATALOG
    if len(path) == 1:
        nodes = [leaf for category in _CATALOG for leaf in category.children or ()]
    node: CatalogNode | None = None
    for value in path:
        node = next((n for n in nodes if n.value == value), None)
        if node is None:
            msg = f"Unknown catalog path: {'/'.join(path)}"
            raise UnknownResourceKindError(msg)
        nodes = node.children or ()

    if node is None or not node.is_leaf:
        msg = f"Catalog path does not select a resource kind: {'/'.join(path)}"
        raise UnknownResourceKindError(msg)
    return ResourceKind(node.value)
