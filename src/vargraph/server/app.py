"""vargraph.server.app - Flask app factory and REST API routes.

This is a THIN REST wrapper: all logic delegates to the handlers in
``vargraph.server.handlers``, which operate on the shared Session.
"""

from __future__ import annotations

from typing import Any

from flask import Flask, abort, jsonify, request
from flask_cors import CORS

from vargraph.server.handlers import (
    NO_COLOR_AVAILABLE,
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


def create_app(session: Session, config: dict[str, Any]) -> Flask:
    """Create the Flask application with REST API routes.

    Args:
        session: Session holding the workspace and its store.
        config: vargraph configuration dict.

    Returns:
        Configured Flask application.
    """
    app = Flask(__name__)
    CORS(app)

    default_limit = int(config.get("suggest", {}).get("limit", 20))

    def _respond(result: dict[str, Any]):
        if result.get("success", True):
            return jsonify(result)
        if result.get("error") == NO_COLOR_AVAILABLE:
            return jsonify(result), 409
        return jsonify(result), 404 if result.get("not_found") else 400

    def _body() -> dict[str, Any]:
        body = request.get_json(silent=True)
        if body is None:
            return {}
        if not isinstance(body, dict):
            abort(400, description="Request body must be a JSON object")
        return body

    @app.errorhandler(400)
    def bad_request(error):
        return jsonify({"success": False, "error": error.description, "not_found": False}), 400

    # ─────────────────────────────────────────────────────────────────
    # Read-only GET endpoints
    # ─────────────────────────────────────────────────────────────────

    @app.route("/api/workspace")
    def api_workspace():
        """GET /api/workspace - Graph list, selection and active variants."""
        return jsonify(_get_workspace(session))

    @app.route("/api/diff")
    def api_diff():
        """GET /api/diff - Per-node grouping of the active variants."""
        return jsonify(_get_diff(session))

    @app.route("/api/suggest")
    def api_suggest():
        """GET /api/suggest?q=...&missing_only=1&limit=N - Ranked reference targets."""
        query = request.args.get("q", "")
        missing_only = request.args.get("missing_only", "").lower() in ("1", "true", "yes")
        try:
            limit = int(request.args.get("limit", default_limit))
        except ValueError:
            abort(400, description="limit must be an integer")
        if limit < 0:
            abort(400, description="limit must not be negative")
        return jsonify(_suggest(session, query, missing_only=missing_only, limit=limit))

    # ─────────────────────────────────────────────────────────────────
    # Graph collection endpoints
    # ─────────────────────────────────────────────────────────────────

    @app.route("/api/graphs", methods=["POST"])
    def api_create_graph():
        """POST /api/graphs {"name": optional} - Create an empty graph."""
        return _respond(_create_graph(session, _body().get("name")))

    @app.route("/api/graphs/<name>/duplicate", methods=["POST"])
    def api_duplicate_graph(name: str):
        """POST /api/graphs/<name>/duplicate {"new_name": optional}."""
        return _respond(_duplicate_graph(session, name, _body().get("new_name")))

    @app.route("/api/graphs/<name>", methods=["DELETE"])
    def api_delete_graph(name: str):
        return _respond(_delete_graph(session, name))

    @app.route("/api/graphs/<name>/select", methods=["POST"])
    def api_select_graph(name: str):
        return _respond(_select_graph(session, name))

    @app.route("/api/graphs/<name>/diff", methods=["POST"])
    def api_toggle_diff(name: str):
        """POST /api/graphs/<name>/diff - Toggle the graph as a diff variant."""
        return _respond(_toggle_diff(session, name))

    # ─────────────────────────────────────────────────────────────────
    # Node endpoints (current graph)
    # ─────────────────────────────────────────────────────────────────

    @app.route("/api/nodes", methods=["POST"])
    def api_create_node():
        """POST /api/nodes {"label": str} or {"node_id": str} - Add a node.

        With ``node_id`` an existing node from another variant is included.
        """
        body = _body()
        if body.get("node_id"):
            return _respond(_include_node(session, body["node_id"]))
        return _respond(_create_node(session, body.get("label", "")))

    @app.route("/api/nodes/<node_id>", methods=["PATCH"])
    def api_set_node(node_id: str):
        """PATCH /api/nodes/<node_id> {"label"?, "extract"?: id | null}."""
        body = _body()
        clear_extract = "extract" in body and body["extract"] is None
        return _respond(
            _set_node(
                session,
                node_id,
                label=body.get("label"),
                extract=body.get("extract"),
                clear_extract=clear_extract,
            )
        )

    @app.route("/api/nodes/<node_id>", methods=["DELETE"])
    def api_remove_node(node_id: str):
        return _respond(_remove_node(session, node_id))

    @app.route("/api/nodes/<node_id>/adopt", methods=["POST"])
    def api_adopt_node(node_id: str):
        """POST /api/nodes/<node_id>/adopt {"color": str} - Take another variant's state."""
        return _respond(_adopt_node(session, node_id, str(_body().get("color", ""))))

    return app
