"""Persistence adapter - encode/decode a named collection of graphs.

The blob is a JSON object keyed by graph name whose values are per-graph
encodings (see ``Graph.to_json_object``). Decoding never raises: any
parse or schema failure yields None and the caller substitutes a default
collection.

Public API
----------
- ``encode_collection`` - named graphs to a text blob
- ``decode_collection`` - text blob to named graphs, or None
"""

from __future__ import annotations

import json
from collections.abc import Mapping

from vargraph.graph.store import Graph


def encode_collection(graphs: Mapping[str, Graph]) -> str:
    """Serialize named graphs into one text blob.

    Args:
        graphs: Mapping of graph name to Graph.

    Returns:
        JSON text.
    """
    return json.dumps({name: graph.to_json_object() for name, graph in graphs.items()})


def decode_collection(blob: str | bytes) -> dict[str, Graph] | None:
    """Parse a blob produced by :func:`encode_collection`.

    Args:
        blob: JSON text.

    Returns:
        Mapping of graph name to Graph, or None when the blob is not valid
        JSON or any graph fails to decode.
    """
    try:
        data = json.loads(blob)
    except (ValueError, TypeError):
        return None
    if not isinstance(data, dict):
        return None

    graphs: dict[str, Graph] = {}
    for name, encoded in data.items():
        graph = Graph.from_json_object(encoded)
        if graph is None:
            return None
        graphs[name] = graph
    return graphs


__all__ = ["encode_collection", "decode_collection"]
