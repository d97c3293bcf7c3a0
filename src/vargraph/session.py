"""Session - Mutable holder that swaps in new Workspace values.

The only mutable object in the stack. Each update computes a new
Workspace from the current one, swaps the reference and, when the graph
collection changed, writes it through the store.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from vargraph.graph.colors import DEFAULT, SAMPLES, GraphColor
from vargraph.graph.store import Graph
from vargraph.storage import GraphStore
from vargraph.workspace import Workspace


class Session:
    """Current workspace plus its storage.

    Attributes:
        workspace: Latest Workspace value.
        store: Where graph changes are persisted (None keeps them in memory).
        samples: Palette used for diff color allocation.
    """

    def __init__(
        self,
        workspace: Workspace | None = None,
        store: GraphStore | None = None,
        samples: Sequence[GraphColor] = SAMPLES,
    ) -> None:
        self.workspace = workspace if workspace is not None else Workspace()
        self.store = store
        self.samples = tuple(samples)

    @classmethod
    def open(
        cls,
        store: GraphStore,
        samples: Sequence[GraphColor] = SAMPLES,
        default_color: GraphColor = DEFAULT,
    ) -> Session:
        """Load the stored collection; nothing is selected initially."""
        workspace = Workspace(graphs=store.load(), default_color=default_color)
        return cls(workspace=workspace, store=store, samples=samples)

    def apply(self, update: Callable[[Workspace], Workspace]) -> Workspace:
        """Compute and swap in a new workspace.

        Args:
            update: Function from the current workspace to the next one.
                Exceptions propagate and leave the session unchanged.

        Returns:
            The new workspace.
        """
        previous = self.workspace
        workspace = update(previous)
        self.workspace = workspace
        if self.store is not None and workspace.graphs is not previous.graphs:
            self.store.save(workspace.graphs)
        return workspace

    def edit_current(self, edit: Callable[[Graph], Graph]) -> Workspace:
        """Apply a graph edit to the graph being edited.

        Raises:
            KeyError: If no graph is selected.
        """

        def update(workspace: Workspace) -> Workspace:
            color = workspace.current_color()
            if workspace.current is None:
                raise KeyError("No current graph selected")
            return workspace.with_graph_change(color, edit(workspace.graph_by_color(color)))

        return self.apply(update)


__all__ = ["Session"]
