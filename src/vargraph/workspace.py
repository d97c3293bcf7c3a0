"""Workspace - Host state for a collection of graph variants.

Holds the named graphs, which graph is being edited and which graphs are
shown as diff variants. A Workspace is immutable: every operation returns
a new Workspace, leaving Graph values shared between old and new.

Active variants are derived, not stored: the graphs with a diff color
assigned, plus the current graph under the default tag when it has no
diff color of its own.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from uuid import uuid4

from vargraph.graph.colors import DEFAULT, SAMPLES, GraphColor, allocate_diff_color
from vargraph.graph.store import Graph


@dataclass(frozen=True)
class Variant:
    """An active graph and the tag it is compared under."""

    name: str
    color: GraphColor


@dataclass(frozen=True)
class Workspace:
    """Named graphs plus editing and diff selection.

    Attributes:
        graphs: Graph name -> Graph. Never mutated in place.
        current: Name of the graph being edited, if any.
        diff_colors: Graph name -> assigned diff color.
        default_color: Tag for the current graph when it has no diff color.
    """

    graphs: Mapping[str, Graph] = field(default_factory=dict)
    current: str | None = None
    diff_colors: Mapping[str, GraphColor] = field(default_factory=dict)
    default_color: GraphColor = DEFAULT

    # ─────────────────────────────────────────────────────────────────
    # Graph collection
    # ─────────────────────────────────────────────────────────────────

    def names(self) -> list[str]:
        return list(self.graphs)

    def get_graph(self, name: str) -> Graph:
        """Return the named graph.

        Raises:
            KeyError: If no graph has that name.
        """
        if name not in self.graphs:
            raise KeyError(f"Graph {name!r} not found")
        return self.graphs[name]

    def add_graph(self, name: str | None = None, graph: Graph | None = None) -> Workspace:
        """Add a graph and make it current.

        Args:
            name: Graph name; a random one is generated when omitted.
            graph: Initial content; empty by default.

        Raises:
            ValueError: If the name is not a non-empty string or is already taken.
        """
        if name is None:
            name = str(uuid4())
        if not isinstance(name, str) or not name:
            raise ValueError("Graph name must be a non-empty string")
        if name in self.graphs:
            raise ValueError(f"Graph {name!r} already exists")
        graphs = dict(self.graphs)
        graphs[name] = graph if graph is not None else Graph.empty()
        return replace(self, graphs=graphs, current=name)

    def duplicate_graph(self, name: str | None = None, new_name: str | None = None) -> Workspace:
        """Copy a graph (the current one by default) under a new name.

        The copy shares the same immutable Graph value and becomes current.

        Raises:
            KeyError: If the source graph does not exist.
            ValueError: If ``new_name`` is empty or already taken.
        """
        source = self._resolve(name)
        return self.add_graph(new_name, self.get_graph(source))

    def delete_graph(self, name: str | None = None) -> Workspace:
        """Remove a graph (the current one by default).

        Its diff color is released and the current selection cleared when
        it pointed at the deleted graph.

        Raises:
            KeyError: If the graph does not exist.
        """
        target = self._resolve(name)
        self.get_graph(target)
        graphs = {k: v for k, v in self.graphs.items() if k != target}
        diff_colors = {k: v for k, v in self.diff_colors.items() if k != target}
        current = None if self.current == target else self.current
        return replace(self, graphs=graphs, diff_colors=diff_colors, current=current)

    def select(self, name: str) -> Workspace:
        """Make ``name`` the graph being edited.

        Raises:
            KeyError: If the graph does not exist.
        """
        self.get_graph(name)
        return replace(self, current=name)

    # ─────────────────────────────────────────────────────────────────
    # Diff variants
    # ─────────────────────────────────────────────────────────────────

    def toggle_diff(self, name: str, samples: Sequence[GraphColor] = SAMPLES) -> Workspace:
        """Add or remove ``name`` as a diff variant.

        A newly added variant gets the first free color from ``samples``.
        When the palette is exhausted the request is ignored.

        Raises:
            KeyError: If the graph does not exist.
        """
        self.get_graph(name)
        diff_colors = dict(self.diff_colors)
        if name in diff_colors:
            del diff_colors[name]
        else:
            color = allocate_diff_color(diff_colors.values(), samples)
            if color is None:
                return self
            diff_colors[name] = color
        return replace(self, diff_colors=diff_colors)

    def active_variants(self) -> list[Variant]:
        """Variants currently compared, diff variants first."""
        variants = [
            Variant(name=name, color=color)
            for name, color in self.diff_colors.items()
            if name in self.graphs
        ]
        if self.current is not None and self.current not in self.diff_colors:
            variants.append(Variant(name=self.current, color=self.default_color))
        return variants

    def active_colors(self) -> list[GraphColor]:
        return [variant.color for variant in self.active_variants()]

    def current_color(self) -> GraphColor:
        """Tag of the graph being edited."""
        if self.current is not None and self.current in self.diff_colors:
            return self.diff_colors[self.current]
        return self.default_color

    def name_by_color(self, color: GraphColor) -> str | None:
        for variant in self.active_variants():
            if variant.color == color:
                return variant.name
        return None

    def graph_by_color(self, color: GraphColor) -> Graph:
        """Graph an active tag points at; empty when unmapped or deleted."""
        name = self.name_by_color(color)
        if name is None:
            return Graph.empty()
        return self.graphs.get(name, Graph.empty())

    def with_graph_change(self, color: GraphColor, graph: Graph) -> Workspace:
        """Replace the graph an active tag points at.

        Raises:
            KeyError: If no active variant carries ``color``.
        """
        name = self.name_by_color(color)
        if name is None:
            raise KeyError(f"No active variant for color {color.name!r}")
        graphs = dict(self.graphs)
        graphs[name] = graph
        return replace(self, graphs=graphs)

    def _resolve(self, name: str | None) -> str:
        if name is not None:
            return name
        if self.current is None:
            raise KeyError("No current graph selected")
        return self.current


__all__ = ["Variant", "Workspace"]
