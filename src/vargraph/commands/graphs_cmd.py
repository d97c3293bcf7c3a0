"""
vargraph.commands.graphs_cmd - Manage the named graph collection.

Usage:
    vargraph graphs list
    vargraph graphs new [NAME]
    vargraph graphs duplicate SOURCE [NEW_NAME]
    vargraph graphs delete NAME
    vargraph graphs show NAME
"""

from __future__ import annotations

import argparse
import json
import sys

from vargraph.commands.common import open_session, report
from vargraph.graph.node_id import stringify
from vargraph.server.handlers import _create_graph, _delete_graph, _duplicate_graph


def run(args: argparse.Namespace) -> int:
    """Run the graphs command.

    Args:
        args: Parsed CLI arguments.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    action = getattr(args, "graphs_action", None) or "list"
    session, _config = open_session(args)

    if action == "list":
        return _list(session, args)
    if action == "new":
        result = _create_graph(session, args.name)
        return report(result, args, f"Created graph {result.get('name')}")
    if action == "duplicate":
        result = _duplicate_graph(session, args.source, args.new_name)
        return report(result, args, f"Duplicated {args.source} as {result.get('name')}")
    if action == "delete":
        return report(_delete_graph(session, args.name), args, f"Deleted graph {args.name}")
    if action == "show":
        return _show(session, args)

    print(f"Unknown graphs action: {action}", file=sys.stderr)
    return 1


def _list(session, args: argparse.Namespace) -> int:
    graphs = session.workspace.graphs
    if getattr(args, "format", "text") == "json":
        print(json.dumps([{"name": n, "node_count": len(g)} for n, g in graphs.items()], indent=2))
        return 0
    if not graphs:
        print("No graphs stored.")
        return 0
    for name, graph in graphs.items():
        print(f"{name}  ({len(graph)} nodes)")
    return 0


def _show(session, args: argparse.Namespace) -> int:
    try:
        graph = session.workspace.get_graph(args.name)
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 1

    if getattr(args, "format", "text") == "json":
        print(json.dumps(graph.to_json_object(), indent=2))
        return 0

    for node_id in graph.node_ids():
        attrs = graph.get_node_attributes(node_id)
        line = f"{stringify(node_id)}  {attrs.label!r}"
        if attrs.extract is not None:
            target = graph.get_node_attributes(attrs.extract)
            if target is None:
                line += f" = {stringify(attrs.extract)} (dangling)"
            else:
                line += f" = {target.label or stringify(attrs.extract)!r}"
        print(line)
    return 0
