"""vargraph.mcp.server - MCP server implementation.

A pure interface layer: every tool delegates to a handler in
``vargraph.server.handlers`` over the shared Session.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from vargraph.server.handlers import (
    _adopt_node,
    _create_graph,
    _create_node,
    _delete_graph,
    _duplicate_graph,
    _get_diff,
    _get_workspace,
    _include_node,
    _remove_node,
    _select_graph,
    _set_node,
    _suggest,
    _toggle_diff,
)
from vargraph.session import Session

MCP_SERVER_INSTRUCTIONS = """\
vargraph keeps several named copies ("variants") of a small labeled graph.
Each node has a label and an optional reference to another node.

Typical flow:
1. get_workspace() to see graphs, the current graph and active variants.
2. toggle_diff(name) to compare more graphs; get_diff() shows, per node,
   which variants agree.
3. suggest(query) to find reference targets; set_node() to edit the
   current graph.
"""


def create_server(session: Session, suggest_limit: int = 20) -> FastMCP:
    """Create the MCP server with all tools registered.

    Args:
        session: Session holding the workspace and its store.
        suggest_limit: Default maximum for suggestion results.

    Returns:
        FastMCP server instance.
    """
    mcp = FastMCP("vargraph", instructions=MCP_SERVER_INSTRUCTIONS)

    @mcp.tool()
    def get_workspace() -> dict[str, Any]:
        """List graphs, the current graph and the active diff variants."""
        return _get_workspace(session)

    @mcp.tool()
    def get_diff() -> dict[str, Any]:
        """Group every node by which active variants agree on its attributes."""
        return _get_diff(session)

    @mcp.tool()
    def suggest(query: str, missing_only: bool = False, limit: int = 0) -> list[dict[str, Any]]:
        """Rank nodes as reference targets by edit distance to ``query``.

        Args:
            query: Partially typed label.
            missing_only: Only nodes the current graph does not hold yet.
            limit: Maximum results (0 or less uses the configured default).
        """
        return _suggest(
            session,
            query,
            missing_only=missing_only,
            limit=limit if limit > 0 else suggest_limit,
        )

    @mcp.tool()
    def create_graph(name: str = "") -> dict[str, Any]:
        """Create an empty graph and make it current."""
        return _create_graph(session, name or None)

    @mcp.tool()
    def duplicate_graph(name: str = "", new_name: str = "") -> dict[str, Any]:
        """Copy a graph (default: current) under a new name."""
        return _duplicate_graph(session, name or None, new_name or None)

    @mcp.tool()
    def delete_graph(name: str) -> dict[str, Any]:
        return _delete_graph(session, name)

    @mcp.tool()
    def select_graph(name: str) -> dict[str, Any]:
        """Make ``name`` the graph being edited."""
        return _select_graph(session, name)

    @mcp.tool()
    def toggle_diff(name: str) -> dict[str, Any]:
        """Add or remove ``name`` as a compared diff variant."""
        return _toggle_diff(session, name)

    @mcp.tool()
    def create_node(label: str) -> dict[str, Any]:
        """Add a new node to the current graph."""
        return _create_node(session, label)

    @mcp.tool()
    def include_node(node_id: str) -> dict[str, Any]:
        """Add a node known from another variant to the current graph."""
        return _include_node(session, node_id)

    @mcp.tool()
    def set_node(
        node_id: str,
        label: str | None = None,
        extract: str | None = None,
        clear_extract: bool = False,
    ) -> dict[str, Any]:
        """Change a node's label and/or reference in the current graph."""
        return _set_node(session, node_id, label, extract, clear_extract)

    @mcp.tool()
    def remove_node(node_id: str) -> dict[str, Any]:
        return _remove_node(session, node_id)

    @mcp.tool()
    def adopt_node(node_id: str, color: str) -> dict[str, Any]:
        """Copy the node's state from the variant tagged ``color``."""
        return _adopt_node(session, node_id, color)

    return mcp


def run_server(session: Session, suggest_limit: int = 20, transport: str = "stdio") -> None:
    """Create and run the MCP server."""
    create_server(session, suggest_limit).run(transport=transport)
