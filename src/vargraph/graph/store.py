"""Graph - Immutable mapping from NodeId to NodeAttributes.

A node exists exactly when it has an entry. Every update returns a new
Graph and leaves the receiver untouched, so a Graph value can be shared
freely between variants and callers.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from vargraph.graph.attributes import NodeAttributes
from vargraph.graph.node_id import NodeId


class Graph:
    """One variant's full node state.

    Example:
        >>> g = Graph.empty()
        >>> a = NodeId("a")
        >>> g2 = g.set_node_attributes(a, NodeAttributes("x"))
        >>> g.get_node_attributes(a) is None
        True
        >>> g2.get_node_attributes(a).label
        'x'
    """

    __slots__ = ("_nodes",)

    def __init__(self, nodes: Mapping[NodeId, NodeAttributes] | None = None) -> None:
        """Initialize from a mapping, which is copied.

        Args:
            nodes: Initial node entries.
        """
        self._nodes: Mapping[NodeId, NodeAttributes] = MappingProxyType(dict(nodes or {}))

    @classmethod
    def empty(cls) -> Graph:
        """Return the zero-node graph."""
        return _EMPTY

    def node_ids(self) -> list[NodeId]:
        """Return the ids of all present nodes.

        Order follows insertion and is only meant for display.
        """
        return list(self._nodes)

    def get_node_attributes(self, node_id: NodeId) -> NodeAttributes | None:
        """Return the attributes for ``node_id``, or None if it is absent."""
        return self._nodes.get(node_id)

    def set_node_attributes(
        self,
        node_id: NodeId,
        attributes: NodeAttributes | None,
    ) -> Graph:
        """Insert, overwrite or remove a node.

        Args:
            node_id: Node to update.
            attributes: New attributes, or None to remove the node.
                Removing an absent node is a no-op.

        Returns:
            A new Graph; this graph is unaffected.
        """
        nodes = dict(self._nodes)
        if attributes is None:
            nodes.pop(node_id, None)
        else:
            nodes[node_id] = attributes
        return Graph(nodes)

    def to_json_object(self) -> dict[str, Any]:
        """Encode as a JSON-compatible dict keyed by node-id text."""
        return {node_id.value: attrs.to_dict() for node_id, attrs in self._nodes.items()}

    @classmethod
    def from_json_object(cls, data: object) -> Graph | None:
        """Decode the output of :meth:`to_json_object`.

        Args:
            data: Decoded JSON value.

        Returns:
            The Graph, or None if ``data`` does not match the encoding.
        """
        if not isinstance(data, dict):
            return None
        nodes: dict[NodeId, NodeAttributes] = {}
        for key, value in data.items():
            node_id = NodeId.parse(key)
            attrs = NodeAttributes.from_dict(value)
            if node_id is None or attrs is None:
                return None
            nodes[node_id] = attrs
        return cls(nodes)

    def is_equivalent(self, other: Graph) -> bool:
        """Same node-id set and attribute-equal values for every node."""
        if set(self._nodes) != set(other._nodes):
            return False
        return all(attrs == other._nodes[node_id] for node_id, attrs in self._nodes.items())

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[NodeId]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Graph({len(self._nodes)} nodes)"


_EMPTY = Graph()


__all__ = ["Graph"]
