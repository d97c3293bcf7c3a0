"""Entry point for running the vargraph MCP server directly.

Usage:
    python -m vargraph.mcp
"""

from vargraph.config import get_config
from vargraph.graph.colors import palette_from_config
from vargraph.mcp import run_server
from vargraph.session import Session
from vargraph.storage import GraphStore

if __name__ == "__main__":
    config = get_config()
    samples, default = palette_from_config(config)
    session = Session.open(GraphStore.from_config(config), samples, default)
    run_server(session, int(config["suggest"]["limit"]))
