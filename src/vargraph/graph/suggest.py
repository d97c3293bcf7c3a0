"""Suggestion ranker - Fuzzy matching of reference targets.

Ranks candidate nodes against a partially typed label using Levenshtein
edit distance, nearest first, ties broken by label. All operations are
pure; suggestions are returned as data, not applied.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

from vargraph.graph.attributes import NodeAttributes
from vargraph.graph.colors import GraphColor
from vargraph.graph.grouping import GraphByColor, union_node_ids
from vargraph.graph.node_id import NodeId, stringify


@dataclass(frozen=True)
class Candidate:
    """A (node, label) pair offered as a reference target.

    Attributes:
        node_id: Candidate node.
        label: Label the node shows in ``colors``.
        colors: Variants showing this label ("" where the node is absent).
    """

    node_id: NodeId
    label: str
    colors: tuple[GraphColor, ...] = ()


@dataclass(frozen=True)
class Suggestion:
    """A ranked candidate."""

    node_id: NodeId
    label: str
    distance: int
    colors: tuple[GraphColor, ...] = field(default=())

    @property
    def display_label(self) -> str:
        """Label, falling back to the node id text for unlabeled nodes."""
        return self.label or stringify(self.node_id)

    def resolve_attributes(self, graph_by_color: GraphByColor) -> NodeAttributes | None:
        """Attributes of the node in the first variant showing this label."""
        if not self.colors:
            return None
        return graph_by_color(self.colors[0]).get_node_attributes(self.node_id)


def levenshtein_distance(a: str, b: str) -> int:
    """Edit distance with unit cost for insertion, deletion and substitution.

    Example:
        >>> levenshtein_distance("kitten", "sitting")
        3
    """
    dp = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        dp[i][0] = i
    for j in range(len(b) + 1):
        dp[0][j] = j
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            if a[i - 1] == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(dp[i - 1][j - 1], dp[i - 1][j], dp[i][j - 1])
    return dp[len(a)][len(b)]


def rank_candidates(query: str, candidates: Iterable[Candidate]) -> list[Suggestion]:
    """Rank candidates by distance to ``query``, then by label.

    An empty query ranks by label length, then label. Equal keys keep
    their input order.

    Args:
        query: Text typed so far.
        candidates: Candidate multiset.

    Returns:
        Suggestions nearest first.
    """
    scored = [
        Suggestion(
            node_id=c.node_id,
            label=c.label,
            distance=levenshtein_distance(query, c.label),
            colors=c.colors,
        )
        for c in candidates
    ]
    scored.sort(key=lambda s: (s.distance, s.label))
    return scored


def collect_candidates(
    colors: Sequence[GraphColor],
    graph_by_color: GraphByColor,
    predicate: Callable[[NodeId], bool] | None = None,
) -> list[Candidate]:
    """One candidate per distinct label of each node across the variants.

    Args:
        colors: Active variants.
        graph_by_color: Lookup from variant to its graph.
        predicate: Optional filter on node ids, e.g. excluding nodes the
            target variant already holds.

    Returns:
        Candidates in node first-encounter order.
    """
    candidates: list[Candidate] = []
    for node_id in union_node_ids(colors, graph_by_color):
        if predicate is not None and not predicate(node_id):
            continue
        by_label: dict[str, list[GraphColor]] = {}
        for color in colors:
            attrs = graph_by_color(color).get_node_attributes(node_id)
            label = attrs.label if attrs is not None else ""
            by_label.setdefault(label, []).append(color)
        for label, label_colors in by_label.items():
            candidates.append(Candidate(node_id=node_id, label=label, colors=tuple(label_colors)))
    return candidates


def suggest_targets(
    query: str,
    colors: Sequence[GraphColor],
    graph_by_color: GraphByColor,
    predicate: Callable[[NodeId], bool] | None = None,
    limit: int | None = None,
) -> list[Suggestion]:
    """Rank the active variants' nodes as reference targets for ``query``.

    Args:
        query: Text typed so far.
        colors: Active variants.
        graph_by_color: Lookup from variant to its graph.
        predicate: Optional node filter.
        limit: Maximum suggestions to return.

    Returns:
        Suggestions nearest first.
    """
    ranked = rank_candidates(query, collect_candidates(colors, graph_by_color, predicate))
    if limit is not None:
        return ranked[:limit]
    return ranked


__all__ = [
    "Candidate",
    "Suggestion",
    "collect_candidates",
    "levenshtein_distance",
    "rank_candidates",
    "suggest_targets",
]
