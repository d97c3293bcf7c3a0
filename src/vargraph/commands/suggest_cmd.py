"""
vargraph.commands.suggest_cmd - Rank reference targets for a typed label.

Usage:
    vargraph suggest cat --graph main                  # Nearest labels first
    vargraph suggest cat --graph main --graph draft    # Across variants
    vargraph suggest cat --graph main --missing-only   # Nodes main lacks
    vargraph suggest "" --graph main --format json
"""

from __future__ import annotations

import argparse
import json
import sys

from vargraph.commands.common import activate_variants, open_session
from vargraph.server.handlers import _suggest


def run(args: argparse.Namespace) -> int:
    """Run the suggest command.

    Args:
        args: Parsed CLI arguments.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    session, config = open_session(args)
    error = activate_variants(session, list(args.graph or []))
    if error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    limit = args.limit if args.limit is not None else int(config["suggest"]["limit"])
    suggestions = _suggest(session, args.query, missing_only=args.missing_only, limit=limit)

    if getattr(args, "format", "text") == "json":
        print(json.dumps(suggestions, indent=2))
        return 0

    if not suggestions:
        print("No suggestions found.")
        return 0
    for s in suggestions:
        print(f"{s['distance']:>3}  {s['display_label']}  [{','.join(s['colors'])}]  {s['node_id']}")
    return 0
