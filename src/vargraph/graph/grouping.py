"""Grouping engine - Partition active variants per node by attribute equality.

For every node present in any active variant, the variants are split into
subgroups that agree on the node's attributes (absence included). This is
what drives diff rendering: one subgroup means all variants agree, more
subgroups mean they disagree in that many distinct ways.

Subgroups come out in first-encounter order over the color list. That
order is a presentation convention only.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from vargraph.graph.attributes import NodeAttributes, optional_attributes_equal
from vargraph.graph.colors import GraphColor
from vargraph.graph.node_id import NodeId, is_equal
from vargraph.graph.store import Graph

GraphByColor = Callable[[GraphColor], Graph]


@dataclass(frozen=True)
class AttributeGroup:
    """Variants sharing one attributes-or-absent value for a node.

    Attributes:
        attributes: Representative value; None when the node is absent.
        colors: Variants in this subgroup, in input order.
    """

    attributes: NodeAttributes | None
    colors: tuple[GraphColor, ...]

    def includes(self, color: GraphColor) -> bool:
        return any(c == color for c in self.colors)

    @property
    def is_absent(self) -> bool:
        return self.attributes is None


@dataclass(frozen=True)
class NodeGrouping:
    """Partition of the active variants for one node."""

    node_id: NodeId
    groups: tuple[AttributeGroup, ...]

    @property
    def is_unanimous(self) -> bool:
        """True when every variant agrees on this node."""
        return len(self.groups) == 1

    def group_for(self, color: GraphColor) -> AttributeGroup | None:
        for group in self.groups:
            if group.includes(color):
                return group
        return None


def union_node_ids(
    colors: Sequence[GraphColor],
    graph_by_color: GraphByColor,
) -> list[NodeId]:
    """Ids present in any of the variants, deduplicated by NodeId equality.

    Args:
        colors: Active variants.
        graph_by_color: Lookup from variant to its graph.

    Returns:
        Ids in first-encounter order.
    """
    result: list[NodeId] = []
    for color in colors:
        for node_id in graph_by_color(color).node_ids():
            if not any(is_equal(node_id, seen) for seen in result):
                result.append(node_id)
    return result


def group_node(
    node_id: NodeId,
    colors: Sequence[GraphColor],
    graph_by_color: GraphByColor,
) -> NodeGrouping:
    """Partition ``colors`` by their attributes for ``node_id``.

    Every color lands in exactly one subgroup, and two colors share a
    subgroup iff their values are equal under the null-aware attribute
    comparator.

    Args:
        node_id: Node to group.
        colors: Active variants.
        graph_by_color: Lookup from variant to its graph.

    Returns:
        NodeGrouping with non-empty, disjoint subgroups.
    """
    values = [graph_by_color(color).get_node_attributes(node_id) for color in colors]

    unique_values: list[NodeAttributes | None] = []
    for value in values:
        if not any(optional_attributes_equal(value, seen) for seen in unique_values):
            unique_values.append(value)

    groups = tuple(
        AttributeGroup(
            attributes=unique,
            colors=tuple(
                color
                for color, value in zip(colors, values)
                if optional_attributes_equal(unique, value)
            ),
        )
        for unique in unique_values
    )
    return NodeGrouping(node_id=node_id, groups=groups)


def group_variants(
    colors: Sequence[GraphColor],
    graph_by_color: GraphByColor,
) -> list[NodeGrouping]:
    """Group every node present in any active variant.

    Args:
        colors: Active variants.
        graph_by_color: Lookup from variant to its graph.

    Returns:
        One NodeGrouping per union node id.
    """
    return [
        group_node(node_id, colors, graph_by_color)
        for node_id in union_node_ids(colors, graph_by_color)
    ]


__all__ = [
    "AttributeGroup",
    "GraphByColor",
    "NodeGrouping",
    "group_node",
    "group_variants",
    "union_node_ids",
]
