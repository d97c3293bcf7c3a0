"""
vargraph.commands.common - Shared setup for CLI commands.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from vargraph.config import get_config
from vargraph.graph.colors import palette_from_config
from vargraph.session import Session
from vargraph.storage import GraphStore


def load_configuration(args: argparse.Namespace) -> dict[str, Any]:
    """Resolve configuration from ``--config`` or discovery."""
    return get_config(config_path=getattr(args, "config", None))


def open_session(args: argparse.Namespace) -> tuple[Session, dict[str, Any]]:
    """Open the stored collection named by ``--store`` or the config.

    Returns:
        Tuple of (session, config).
    """
    config = load_configuration(args)
    store_path: Path | None = getattr(args, "store", None)
    store = GraphStore(store_path) if store_path else GraphStore.from_config(config)
    samples, default = palette_from_config(config)
    return Session.open(store, samples, default), config


def report(result: dict[str, Any], args: argparse.Namespace, success_text: str) -> int:
    """Print a handler result and return an exit code."""
    if not result.get("success"):
        print(f"Error: {result.get('error', 'unknown error')}", file=sys.stderr)
        return 1
    if not getattr(args, "quiet", False):
        print(success_text)
    return 0


def activate_variants(session: Session, names: list[str]) -> str | None:
    """Compare ``names`` as diff variants, the first one being edited.

    Returns:
        Error message, or None on success.
    """
    if not names:
        return "At least one graph is required"
    try:
        session.apply(lambda ws: ws.select(names[0]))
    except KeyError as e:
        return str(e.args[0])
    for name in names:
        before = session.workspace
        try:
            after = session.apply(lambda ws: ws.toggle_diff(name, session.samples))
        except KeyError as e:
            return str(e.args[0])
        if after is before:
            return f"Too many graphs: the palette has {len(session.samples)} colors"
    return None
