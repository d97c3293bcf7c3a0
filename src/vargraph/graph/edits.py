"""Editor operations over Graph values.

Each operation takes a graph and returns the updated graph; the input is
never modified. Operations that target an absent node return the input
unchanged.
"""

from __future__ import annotations

from vargraph.graph.attributes import NodeAttributes
from vargraph.graph.node_id import NodeId
from vargraph.graph.store import Graph


def adopt_variant(target: Graph, node_id: NodeId, source: Graph) -> Graph:
    """Copy a node's attributes (or its absence) from another variant."""
    return target.set_node_attributes(node_id, source.get_node_attributes(node_id))


def rename_node(graph: Graph, node_id: NodeId, label: str) -> Graph:
    attrs = graph.get_node_attributes(node_id)
    if attrs is None:
        return graph
    return graph.set_node_attributes(node_id, attrs.with_label(label))


def set_extract(graph: Graph, node_id: NodeId, extract: NodeId | None) -> Graph:
    """Point a node's reference at ``extract`` (None clears it)."""
    attrs = graph.get_node_attributes(node_id)
    if attrs is None:
        return graph
    return graph.set_node_attributes(node_id, attrs.with_extract(extract))


def create_node(graph: Graph, label: str) -> tuple[Graph, NodeId]:
    """Add a brand new node with no reference.

    Returns:
        Tuple of (updated graph, new node id).
    """
    node_id = NodeId.create_unique()
    return graph.set_node_attributes(node_id, NodeAttributes(label=label)), node_id


def include_node(
    graph: Graph,
    node_id: NodeId,
    attributes: NodeAttributes | None = None,
) -> Graph:
    """Add an existing node (typically known from another variant).

    Args:
        graph: Graph to extend.
        node_id: Node to include.
        attributes: Attributes to use; defaults to an empty label and no
            reference.
    """
    if attributes is None:
        attributes = NodeAttributes(label="")
    return graph.set_node_attributes(node_id, attributes)


def remove_node(graph: Graph, node_id: NodeId) -> Graph:
    return graph.set_node_attributes(node_id, None)


__all__ = [
    "adopt_variant",
    "create_node",
    "include_node",
    "remove_node",
    "rename_node",
    "set_extract",
]
