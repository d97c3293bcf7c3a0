"""
vargraph.commands.diff_cmd - Compare graph variants node by node.

Usage:
    vargraph diff main draft              # Text report
    vargraph diff main draft --changed    # Only nodes the variants disagree on
    vargraph diff main draft --format json
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from vargraph.commands.common import activate_variants, open_session
from vargraph.server.handlers import _get_diff


def run(args: argparse.Namespace) -> int:
    """Run the diff command.

    Args:
        args: Parsed CLI arguments.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    session, _config = open_session(args)
    error = activate_variants(session, list(args.graphs))
    if error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    diff = _get_diff(session)
    if getattr(args, "changed", False):
        diff["nodes"] = [n for n in diff["nodes"] if not n["unanimous"]]

    if getattr(args, "format", "text") == "json":
        print(json.dumps(diff, indent=2))
        return 0

    print(format_diff(diff, dict(_legend(session))))
    return 0


def _legend(session) -> list[tuple[str, str]]:
    return [(v.color.name, v.name) for v in session.workspace.active_variants()]


def format_diff(diff: dict[str, Any], legend: dict[str, str]) -> str:
    """Render a serialized diff as text.

    Args:
        diff: Output of the diff handler.
        legend: Color name -> graph name.

    Returns:
        Multi-line report.
    """
    lines = ["Variants: " + ", ".join(f"{name} [{color}]" for color, name in legend.items())]
    labels = _labels(diff)
    if not diff["nodes"]:
        lines.append("No nodes.")
    for node in diff["nodes"]:
        if node["unanimous"]:
            group = node["groups"][0]
            lines.append(f"  {node['node_id']}  {_describe(group['attributes'], labels)}")
            continue
        lines.append(f"* {node['node_id']}")
        for group in node["groups"]:
            tags = ",".join(group["colors"])
            lines.append(f"    [{tags}] {_describe(group['attributes'], labels)}")
    return "\n".join(lines)


def _labels(diff: dict[str, Any]) -> dict[str, str]:
    # First label seen per node, used to render references
    labels: dict[str, str] = {}
    for node in diff["nodes"]:
        for group in node["groups"]:
            if group["attributes"] is not None and group["attributes"]["label"]:
                labels.setdefault(node["node_id"], group["attributes"]["label"])
    return labels


def _describe(attributes: dict[str, Any] | None, labels: dict[str, str]) -> str:
    if attributes is None:
        return "(absent)"
    text = repr(attributes["label"])
    extract = attributes["extract"]
    if extract is not None:
        text += f" = {labels.get(extract, extract)}"
    return text
