"""
vargraph.cli - Command-line interface.

Main entry point for the vargraph CLI tool.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from vargraph import __version__
from vargraph.commands import diff_cmd, graphs_cmd, node_cmd, serve_cmd, suggest_cmd


def _non_negative_int(text: str) -> int:
    """argparse type for counts that must be 0 or more."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return value


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="vargraph",
        description="Named graph variants with node-by-node diffing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  vargraph graphs new main              # Create an empty graph
  vargraph node add main "Kitchen"      # Add a node, prints its id
  vargraph graphs duplicate main draft  # Copy main as draft
  vargraph diff main draft              # Which nodes differ, and how
  vargraph suggest kit --graph main     # Fuzzy reference-target lookup
  vargraph serve                        # REST API for editors

Configuration:
  .vargraph.toml in the working directory or a parent, e.g.
    [storage]
    path = ".vargraph/graphs.json"

For detailed command help: vargraph <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"vargraph {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "--store",
        type=Path,
        help="Override graph collection file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # graphs command
    graphs_parser = subparsers.add_parser(
        "graphs",
        help="List, create, duplicate, delete and show graphs",
    )
    graphs_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format for list/show (default: text)",
    )
    graphs_sub = graphs_parser.add_subparsers(dest="graphs_action")
    graphs_sub.add_parser("list", help="List stored graphs")
    new_parser = graphs_sub.add_parser("new", help="Create an empty graph")
    new_parser.add_argument("name", nargs="?", help="Graph name (default: random)")
    dup_parser = graphs_sub.add_parser("duplicate", help="Copy a graph")
    dup_parser.add_argument("source", help="Graph to copy")
    dup_parser.add_argument("new_name", nargs="?", help="Name of the copy (default: random)")
    del_parser = graphs_sub.add_parser("delete", help="Delete a graph")
    del_parser.add_argument("name", help="Graph to delete")
    show_parser = graphs_sub.add_parser("show", help="Show a graph's nodes")
    show_parser.add_argument("name", help="Graph to show")

    # diff command
    diff_parser = subparsers.add_parser(
        "diff",
        help="Group nodes by which variants agree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  vargraph diff main draft              # All nodes, disagreements starred
  vargraph diff main draft --changed    # Only disagreements
  vargraph diff main a b c -f json      # Machine-readable
""",
    )
    diff_parser.add_argument("graphs", nargs="+", help="Graphs to compare (first is edited)")
    diff_parser.add_argument(
        "--changed",
        action="store_true",
        help="Only show nodes the variants disagree on",
    )
    diff_parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )

    # suggest command
    suggest_parser = subparsers.add_parser(
        "suggest",
        help="Rank nodes as reference targets for a typed label",
    )
    suggest_parser.add_argument("query", help="Partially typed label (may be empty)")
    suggest_parser.add_argument(
        "-g",
        "--graph",
        action="append",
        required=True,
        help="Graph to search (repeatable; the first is the edited graph)",
        metavar="NAME",
    )
    suggest_parser.add_argument(
        "--missing-only",
        action="store_true",
        help="Only nodes the first graph does not hold",
    )
    suggest_parser.add_argument(
        "-n",
        "--limit",
        type=_non_negative_int,
        help="Maximum suggestions (default: from config)",
    )
    suggest_parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )

    # node command
    node_parser = subparsers.add_parser("node", help="Edit nodes of a graph")
    node_sub = node_parser.add_subparsers(dest="node_action")
    add_parser = node_sub.add_parser("add", help="Add a new node")
    add_parser.add_argument("graph", help="Graph to edit")
    add_parser.add_argument("label", help="Node label")
    set_parser = node_sub.add_parser("set", help="Change a node's label or reference")
    set_parser.add_argument("graph", help="Graph to edit")
    set_parser.add_argument("node_id", help="Node to change")
    set_parser.add_argument("--label", help="New label")
    extract_group = set_parser.add_mutually_exclusive_group()
    extract_group.add_argument("--extract", help="Referenced node id", metavar="NODE_ID")
    extract_group.add_argument(
        "--clear-extract",
        action="store_true",
        help="Remove the reference",
    )
    remove_parser = node_sub.add_parser("remove", help="Remove a node")
    remove_parser.add_argument("graph", help="Graph to edit")
    remove_parser.add_argument("node_id", help="Node to remove")
    adopt_parser = node_sub.add_parser("adopt", help="Take another graph's version of a node")
    adopt_parser.add_argument("graph", help="Graph to edit")
    adopt_parser.add_argument("node_id", help="Node to adopt")
    adopt_parser.add_argument("--from", dest="source", required=True, help="Graph to copy from")
    include_parser = node_sub.add_parser("include", help="Copy a node from another graph")
    include_parser.add_argument("graph", help="Graph to edit")
    include_parser.add_argument("node_id", help="Node to include")
    include_parser.add_argument("--from", dest="source", required=True, help="Graph holding it")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Run the REST API server")
    serve_parser.add_argument("--host", help="Bind address (default: from config)")
    serve_parser.add_argument("--port", type=int, help="Port (default: from config)")

    # mcp command
    subparsers.add_parser("mcp", help="Run the MCP server on stdio")

    # version command
    subparsers.add_parser("version", help="Show version")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    # Install with: pip install vargraph[completion]
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "graphs":
            return graphs_cmd.run(args)
        elif args.command == "diff":
            return diff_cmd.run(args)
        elif args.command == "suggest":
            return suggest_cmd.run(args)
        elif args.command == "node":
            return node_cmd.run(args)
        elif args.command == "serve":
            return serve_cmd.run(args)
        elif args.command == "mcp":
            return mcp_command(args)
        elif args.command == "version":
            print(f"vargraph {__version__}")
            return 0
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


def mcp_command(args: argparse.Namespace) -> int:
    """Handle mcp command - serve the workspace over MCP stdio."""
    from vargraph.mcp import MCP_AVAILABLE

    if not MCP_AVAILABLE:
        print("Error: MCP dependencies not installed. Install with: pip install vargraph[mcp]", file=sys.stderr)
        return 1

    from vargraph.commands.common import open_session
    from vargraph.mcp import run_server

    session, config = open_session(args)
    run_server(session, int(config["suggest"]["limit"]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
