"""Graph module - Variant graph data model, diff grouping and suggestions.

Exports:
- NodeId: Opaque node identity
- NodeAttributes: Label plus optional reference
- Graph: Immutable node mapping with copy-on-write updates
- GraphColor: Variant tag, with SAMPLES palette and DEFAULT tag
- NodeGrouping / AttributeGroup: Per-node partition of variants
- Suggestion: Ranked reference-target candidate
"""

from vargraph.graph.attributes import (
    NodeAttributes,
    attributes_equal,
    equals_manage_null,
    optional_attributes_equal,
)
from vargraph.graph.colors import DEFAULT, SAMPLES, GraphColor, allocate_diff_color
from vargraph.graph.grouping import AttributeGroup, NodeGrouping, group_node, group_variants
from vargraph.graph.node_id import NodeId, is_equal, stringify
from vargraph.graph.store import Graph
from vargraph.graph.suggest import (
    Candidate,
    Suggestion,
    levenshtein_distance,
    rank_candidates,
    suggest_targets,
)

__all__ = [
    "NodeId",
    "stringify",
    "is_equal",
    "NodeAttributes",
    "attributes_equal",
    "equals_manage_null",
    "optional_attributes_equal",
    "Graph",
    "GraphColor",
    "SAMPLES",
    "DEFAULT",
    "allocate_diff_color",
    "AttributeGroup",
    "NodeGrouping",
    "group_node",
    "group_variants",
    "Candidate",
    "Suggestion",
    "levenshtein_distance",
    "rank_candidates",
    "suggest_targets",
]
