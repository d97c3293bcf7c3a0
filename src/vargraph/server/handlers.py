"""vargraph.server.handlers - Request handlers shared by REST, MCP and CLI.

Each handler takes a Session, performs one read or update and returns a
JSON-compatible dict. Host errors (unknown graphs, bad arguments) are
caught here and reported as ``{"success": False, "error": ...}``.
"""

from __future__ import annotations

from typing import Any

from vargraph.graph import edits
from vargraph.graph.grouping import group_variants
from vargraph.graph.node_id import NodeId
from vargraph.graph.serialize import serialize_grouping, serialize_suggestion
from vargraph.graph.suggest import suggest_targets
from vargraph.session import Session
from vargraph.workspace import Workspace

NO_COLOR_AVAILABLE = "No diff color available"

# ─────────────────────────────────────────────────────────────────────────────
# Serialization helpers
# ─────────────────────────────────────────────────────────────────────────────


def _serialize_workspace(workspace: Workspace) -> dict[str, Any]:
    return {
        "graphs": [
            {
                "name": name,
                "node_count": len(graph),
                "current": name == workspace.current,
                "diff_color": (
                    workspace.diff_colors[name].name if name in workspace.diff_colors else None
                ),
            }
            for name, graph in workspace.graphs.items()
        ],
        "current": workspace.current,
        "current_color": workspace.current_color().name,
        "active": [
            {"name": variant.name, "color": variant.color.name}
            for variant in workspace.active_variants()
        ],
    }


def _parse_node_id(text: str | None) -> NodeId:
    node_id = NodeId.parse(text)
    if node_id is None:
        raise ValueError(f"Invalid node id: {text!r}")
    return node_id


def _check_label(label: object) -> None:
    if not isinstance(label, str):
        raise ValueError(f"Label must be a string, got {type(label).__name__}")


# ─────────────────────────────────────────────────────────────────────────────
# Read-only handlers
# ─────────────────────────────────────────────────────────────────────────────


def _get_workspace(session: Session) -> dict[str, Any]:
    """Graph list, selection and active variants."""
    return _serialize_workspace(session.workspace)


def _get_diff(session: Session) -> dict[str, Any]:
    """Per-node partitions of the active variants."""
    workspace = session.workspace
    colors = workspace.active_colors()
    current_color = workspace.current_color() if workspace.current is not None else None
    groupings = group_variants(colors, workspace.graph_by_color)
    return {
        "colors": [c.name for c in colors],
        "current_color": current_color.name if current_color is not None else None,
        "nodes": [serialize_grouping(g, colors, current_color) for g in groupings],
    }


def _suggest(
    session: Session,
    query: str,
    missing_only: bool = False,
    limit: int | None = None,
) -> list[dict[str, Any]]:
    """Rank reference targets for ``query`` across the active variants.

    Args:
        session: Current session.
        query: Text typed so far.
        missing_only: Only offer nodes the current graph does not hold.
        limit: Maximum number of suggestions.
    """
    workspace = session.workspace
    colors = workspace.active_colors()
    predicate = None
    if missing_only:
        current_graph = workspace.graph_by_color(workspace.current_color())

        def predicate(node_id: NodeId) -> bool:
            return current_graph.get_node_attributes(node_id) is None

    suggestions = suggest_targets(query, colors, workspace.graph_by_color, predicate, limit)
    return [serialize_suggestion(s) for s in suggestions]


# ─────────────────────────────────────────────────────────────────────────────
# Workspace mutations
# ─────────────────────────────────────────────────────────────────────────────


def _create_graph(session: Session, name: str | None = None) -> dict[str, Any]:
    try:
        workspace = session.apply(lambda ws: ws.add_graph(name))
        return {"success": True, "name": workspace.current, "message": "Created graph"}
    except (ValueError, KeyError) as e:
        return _failure(e)


def _duplicate_graph(
    session: Session,
    name: str | None = None,
    new_name: str | None = None,
) -> dict[str, Any]:
    try:
        workspace = session.apply(lambda ws: ws.duplicate_graph(name, new_name))
        return {"success": True, "name": workspace.current, "message": "Duplicated graph"}
    except (ValueError, KeyError) as e:
        return _failure(e)


def _delete_graph(session: Session, name: str | None = None) -> dict[str, Any]:
    try:
        session.apply(lambda ws: ws.delete_graph(name))
        return {"success": True, "message": f"Deleted graph {name or ''}".strip()}
    except (ValueError, KeyError) as e:
        return _failure(e)


def _select_graph(session: Session, name: str) -> dict[str, Any]:
    try:
        session.apply(lambda ws: ws.select(name))
        return {"success": True, "current": name}
    except (ValueError, KeyError) as e:
        return _failure(e)


def _toggle_diff(session: Session, name: str) -> dict[str, Any]:
    """Add or remove a diff variant; reports when the palette is exhausted."""
    try:
        before = session.workspace
        after = session.apply(lambda ws: ws.toggle_diff(name, session.samples))
    except (ValueError, KeyError) as e:
        return _failure(e)
    color = after.diff_colors.get(name)
    if after is before:
        return {"success": False, "error": NO_COLOR_AVAILABLE, "not_found": False}
    return {"success": True, "name": name, "diff_color": color.name if color else None}


# ─────────────────────────────────────────────────────────────────────────────
# Node mutations (current graph)
# ─────────────────────────────────────────────────────────────────────────────


def _create_node(session: Session, label: str) -> dict[str, Any]:
    created: list[NodeId] = []

    def edit(graph):
        graph, node_id = edits.create_node(graph, label)
        created.append(node_id)
        return graph

    try:
        _check_label(label)
        session.edit_current(edit)
        return {"success": True, "node_id": created[0].value}
    except (ValueError, KeyError) as e:
        return _failure(e)


def _include_node(session: Session, node_id: str) -> dict[str, Any]:
    """Add an existing node, taking its attributes from the first variant holding it."""
    try:
        nid = _parse_node_id(node_id)
        workspace = session.workspace
        attrs = None
        for color in workspace.active_colors():
            attrs = workspace.graph_by_color(color).get_node_attributes(nid)
            if attrs is not None:
                break
        session.edit_current(lambda graph: edits.include_node(graph, nid, attrs))
        return {"success": True, "node_id": nid.value}
    except (ValueError, KeyError) as e:
        return _failure(e)


def _set_node(
    session: Session,
    node_id: str,
    label: str | None = None,
    extract: str | None = None,
    clear_extract: bool = False,
) -> dict[str, Any]:
    """Update label and/or reference of a node in the current graph."""
    try:
        nid = _parse_node_id(node_id)
        if label is not None:
            _check_label(label)
        current = session.workspace.graph_by_color(session.workspace.current_color())
        if current.get_node_attributes(nid) is None:
            raise KeyError(f"Node {node_id} not in current graph")
        target = None
        if not clear_extract and extract is not None:
            target = _parse_node_id(extract)

        def edit(graph):
            if label is not None:
                graph = edits.rename_node(graph, nid, label)
            if clear_extract or target is not None:
                graph = edits.set_extract(graph, nid, target)
            return graph

        session.edit_current(edit)
        return {"success": True, "node_id": nid.value}
    except (ValueError, KeyError) as e:
        return _failure(e)


def _remove_node(session: Session, node_id: str) -> dict[str, Any]:
    try:
        nid = _parse_node_id(node_id)
        session.edit_current(lambda graph: edits.remove_node(graph, nid))
        return {"success": True, "node_id": nid.value}
    except (ValueError, KeyError) as e:
        return _failure(e)


def _adopt_node(session: Session, node_id: str, color: str) -> dict[str, Any]:
    """Copy a node's state from the variant tagged ``color`` into the current graph."""
    try:
        nid = _parse_node_id(node_id)
        workspace = session.workspace
        source_color = next((c for c in workspace.active_colors() if c.name == color), None)
        if source_color is None:
            raise KeyError(f"No active variant for color {color!r}")
        source = workspace.graph_by_color(source_color)
        session.edit_current(lambda graph: edits.adopt_variant(graph, nid, source))
        return {"success": True, "node_id": nid.value}
    except (ValueError, KeyError) as e:
        return _failure(e)


def _failure(error: Exception) -> dict[str, Any]:
    """Failure result; KeyError marks a missing graph, node or variant."""
    # KeyError wraps its message in quotes
    if isinstance(error, KeyError) and error.args:
        message = str(error.args[0])
    else:
        message = str(error)
    return {"success": False, "error": message, "not_found": isinstance(error, KeyError)}


__all__ = [
    "NO_COLOR_AVAILABLE",
    "_adopt_node",
    "_create_graph",
    "_create_node",
    "_delete_graph",
    "_duplicate_graph",
    "_get_diff",
    "_get_workspace",
    "_include_node",
    "_remove_node",
    "_select_graph",
    "_set_node",
    "_suggest",
    "_toggle_diff",
]
