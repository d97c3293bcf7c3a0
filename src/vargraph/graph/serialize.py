"""Graph Serialization - JSON-compatible views of diff and suggestion data.

Used by the REST, MCP and CLI layers. The lossless per-graph encoding
lives on Graph itself (``to_json_object`` / ``from_json_object``).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from vargraph.graph.attributes import NodeAttributes
from vargraph.graph.colors import GraphColor, swatch_colors
from vargraph.graph.grouping import NodeGrouping
from vargraph.graph.suggest import Suggestion


def serialize_attributes(attributes: NodeAttributes | None) -> dict[str, Any] | None:
    if attributes is None:
        return None
    return attributes.to_dict()


def serialize_grouping(
    grouping: NodeGrouping,
    colors: Sequence[GraphColor],
    current_color: GraphColor | None = None,
) -> dict[str, Any]:
    """Serialize one node's partition.

    Args:
        grouping: The node grouping.
        colors: Active variants, for swatch computation.
        current_color: Variant being edited; its subgroup is flagged
            ``editable``.

    Returns:
        Dict with node id, unanimity flag and subgroups.
    """
    groups = []
    for group in grouping.groups:
        groups.append(
            {
                "attributes": serialize_attributes(group.attributes),
                "colors": [c.name for c in group.colors],
                "swatches": [c.name for c in swatch_colors(colors, group.includes)],
                "editable": current_color is not None and group.includes(current_color),
            }
        )
    return {
        "node_id": grouping.node_id.value,
        "unanimous": grouping.is_unanimous,
        "groups": groups,
    }


def serialize_suggestion(suggestion: Suggestion) -> dict[str, Any]:
    return {
        "node_id": suggestion.node_id.value,
        "label": suggestion.label,
        "display_label": suggestion.display_label,
        "distance": suggestion.distance,
        "colors": [c.name for c in suggestion.colors],
    }


__all__ = [
    "serialize_attributes",
    "serialize_grouping",
    "serialize_suggestion",
]
