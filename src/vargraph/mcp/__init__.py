"""vargraph.mcp - Agent access to the variant workspace over MCP.

Tools mirror the REST API: workspace listing, per-node diff groupings,
reference suggestions and current-graph edits, all over one shared
Session. The ``mcp`` package is optional; ``MCP_AVAILABLE`` reports
whether the tools can be served.

Usage:
    vargraph mcp                 # serve the configured store on stdio
    python -m vargraph.mcp
"""

try:
    from mcp.server.fastmcp import FastMCP  # noqa: F401

    MCP_AVAILABLE = True
except ImportError:
    MCP_AVAILABLE = False

_MISSING = "MCP dependencies not installed. Install with: pip install vargraph[mcp]"


def create_server(*args, **kwargs):
    """Build the FastMCP server for a Session (see ``vargraph.mcp.server``).

    Raises:
        ImportError: If the ``mcp`` extra is not installed.
    """
    if not MCP_AVAILABLE:
        raise ImportError(_MISSING)
    from vargraph.mcp.server import create_server as _create

    return _create(*args, **kwargs)


def run_server(*args, **kwargs):
    """Serve a Session's workspace until the transport closes.

    Raises:
        ImportError: If the ``mcp`` extra is not installed.
    """
    if not MCP_AVAILABLE:
        raise ImportError(_MISSING)
    from vargraph.mcp.server import run_server as _run

    return _run(*args, **kwargs)


__all__ = [
    "MCP_AVAILABLE",
    "create_server",
    "run_server",
]
