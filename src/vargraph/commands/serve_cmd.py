"""
vargraph.commands.serve_cmd - Run the REST API server.

Usage:
    vargraph serve                    # Host/port from config
    vargraph serve --port 8080
"""

from __future__ import annotations

import argparse
import sys


def run(args: argparse.Namespace) -> int:
    """Run the serve command.

    Args:
        args: Parsed CLI arguments.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    try:
        from vargraph.server.app import create_app
    except ImportError:
        print(
            "Error: server dependencies not installed. Install with: pip install vargraph[server]",
            file=sys.stderr,
        )
        return 1

    from vargraph.commands.common import open_session

    session, config = open_session(args)
    host = args.host or config["server"]["host"]
    port = args.port or int(config["server"]["port"])

    app = create_app(session, config)
    if not getattr(args, "quiet", False):
        print(f"Serving {len(session.workspace.graphs)} graph(s) on http://{host}:{port}")
    app.run(host=host, port=port)
    return 0
