"""
vargraph.commands.node_cmd - Edit nodes of a stored graph.

Usage:
    vargraph node add main "Kitchen"                       # New node, prints its id
    vargraph node set main NODE_ID --label "Cellar"
    vargraph node set main NODE_ID --extract OTHER_ID
    vargraph node set main NODE_ID --clear-extract
    vargraph node remove main NODE_ID
    vargraph node adopt main NODE_ID --from draft          # Take draft's version
    vargraph node include main NODE_ID --from draft        # Copy a node main lacks
"""

from __future__ import annotations

import argparse
import sys

from vargraph.commands.common import activate_variants, open_session, report
from vargraph.server.handlers import (
    _adopt_node,
    _create_node,
    _include_node,
    _remove_node,
    _set_node,
)


def run(args: argparse.Namespace) -> int:
    """Run the node command.

    Args:
        args: Parsed CLI arguments.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    action = getattr(args, "node_action", None)
    if action is None:
        print("Error: missing node action (add, set, remove, adopt, include)", file=sys.stderr)
        return 1

    source = getattr(args, "source", None)
    if source is not None and source == args.graph:
        print(f"Error: --from must name a graph other than {args.graph}", file=sys.stderr)
        return 1

    session, _config = open_session(args)
    names = [args.graph]
    if source:
        names.append(source)
    error = activate_variants(session, names)
    if error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    if action == "add":
        result = _create_node(session, args.label)
        return report(result, args, str(result.get("node_id")))
    if action == "set":
        if args.label is None and args.extract is None and not args.clear_extract:
            print("Error: nothing to change (use --label, --extract or --clear-extract)", file=sys.stderr)
            return 1
        result = _set_node(
            session,
            args.node_id,
            label=args.label,
            extract=args.extract,
            clear_extract=args.clear_extract,
        )
        return report(result, args, f"Updated {args.node_id}")
    if action == "remove":
        return report(_remove_node(session, args.node_id), args, f"Removed {args.node_id}")
    if action == "adopt":
        color = session.workspace.diff_colors[source]
        result = _adopt_node(session, args.node_id, color.name)
        return report(result, args, f"Adopted {args.node_id} from {source}")
    if action == "include":
        result = _include_node(session, args.node_id)
        return report(result, args, f"Included {args.node_id}")

    print(f"Unknown node action: {action}", file=sys.stderr)
    return 1
