"""File-backed storage for the graph collection.

The host's transport for the persistence blob: one JSON file holding
every named graph. A missing or undecodable file falls back to the
caller's initial collection instead of failing.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from vargraph.graph.store import Graph
from vargraph.persistence import decode_collection, encode_collection


class GraphStore:
    """Load and save a named graph collection at ``path``."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self, initial: Mapping[str, Graph] | None = None) -> dict[str, Graph]:
        """Read the collection.

        Args:
            initial: Collection to return when nothing usable is stored.

        Returns:
            Stored graphs, or a copy of ``initial`` (empty by default).
        """
        fallback = dict(initial or {})
        try:
            blob = self.path.read_text(encoding="utf-8")
        except OSError:
            return fallback
        graphs = decode_collection(blob)
        if graphs is None:
            return fallback
        return graphs

    def save(self, graphs: Mapping[str, Graph]) -> None:
        """Write the collection, creating parent directories as needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(encode_collection(graphs), encoding="utf-8")

    @classmethod
    def from_config(cls, config: dict, base_dir: Path | None = None) -> GraphStore:
        """Build a store from the ``[storage]`` config section.

        Relative paths resolve against ``base_dir`` (default: cwd).
        """
        path = Path(config.get("storage", {}).get("path", ".vargraph/graphs.json"))
        if not path.is_absolute():
            path = (base_dir or Path.cwd()) / path
        return cls(path)


__all__ = ["GraphStore"]
