"""Tests for the request handlers shared by REST, MCP and CLI."""

import pytest

from vargraph.graph import GraphColor
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


@pytest.fixture
def session():
    return Session(samples=(GraphColor("red"), GraphColor("green")))


@pytest.fixture
def ids(session):
    """Graph "base" with nodes "kitchen" and "hall", copied as "draft"."""
    _create_graph(session, "base")
    kitchen = _create_node(session, "kitchen")["node_id"]
    hall = _create_node(session, "hall")["node_id"]
    _duplicate_graph(session, "base", "draft")
    return {"kitchen": kitchen, "hall": hall}


def _groups_for(diff, node_id):
    return next(n for n in diff["nodes"] if n["node_id"] == node_id)["groups"]


def _groups_by_colors(diff, node_id):
    return {tuple(g["colors"]): g for g in _groups_for(diff, node_id)}


class TestWorkspaceHandlers:
    """Tests for graph collection handlers."""

    def test_get_workspace(self, session, ids):
        data = _get_workspace(session)
        assert [g["name"] for g in data["graphs"]] == ["base", "draft"]
        assert data["current"] == "draft"
        assert data["current_color"] == "transparent"
        assert data["active"] == [{"name": "draft", "color": "transparent"}]

    def test_create_duplicate_name_fails(self, session, ids):
        result = _create_graph(session, "base")
        assert result["success"] is False
        assert "already exists" in result["error"]
        assert result["not_found"] is False

    def test_select_missing_graph(self, session, ids):
        result = _select_graph(session, "missing")
        assert result == {
            "success": False,
            "error": "Graph 'missing' not found",
            "not_found": True,
        }

    def test_delete_graph(self, session, ids):
        assert _delete_graph(session, "base")["success"] is True
        assert [g["name"] for g in _get_workspace(session)["graphs"]] == ["draft"]

    def test_toggle_diff_allocates_and_exhausts(self, session, ids):
        _create_graph(session, "third")
        assert _toggle_diff(session, "base")["diff_color"] == "red"
        assert _toggle_diff(session, "draft")["diff_color"] == "green"
        result = _toggle_diff(session, "third")
        assert result["success"] is False
        assert result["error"] == NO_COLOR_AVAILABLE

    def test_toggle_diff_off(self, session, ids):
        _toggle_diff(session, "base")
        result = _toggle_diff(session, "base")
        assert result == {"success": True, "name": "base", "diff_color": None}


class TestDiffAndSuggest:
    """Tests for _get_diff() and _suggest()."""

    def test_unanimous_when_copies_agree(self, session, ids):
        _toggle_diff(session, "base")
        diff = _get_diff(session)
        assert diff["colors"] == ["red", "transparent"]
        assert all(node["unanimous"] for node in diff["nodes"])

    def test_edit_splits_group(self, session, ids):
        _toggle_diff(session, "base")
        _set_node(session, ids["kitchen"], label="galley")

        groups = _groups_by_colors(_get_diff(session), ids["kitchen"])
        assert set(groups) == {("red",), ("transparent",)}
        assert groups[("transparent",)]["attributes"]["label"] == "galley"
        assert groups[("transparent",)]["editable"] is True
        assert groups[("red",)]["editable"] is False

    def test_removed_node_is_absent_group(self, session, ids):
        _toggle_diff(session, "base")
        _remove_node(session, ids["hall"])
        groups = _groups_by_colors(_get_diff(session), ids["hall"])
        assert groups[("transparent",)] == {
            "attributes": None,
            "colors": ["transparent"],
            "swatches": ["transparent"],
            "editable": True,
        }

    def test_suggest_ranks_labels(self, session, ids):
        results = _suggest(session, "kitchn")
        assert results[0]["label"] == "kitchen"
        assert results[0]["distance"] == 1

    def test_suggest_missing_only(self, session, ids):
        _toggle_diff(session, "base")
        _remove_node(session, ids["hall"])
        results = _suggest(session, "", missing_only=True)
        assert {r["node_id"] for r in results} == {ids["hall"]}

    def test_suggest_limit(self, session, ids):
        assert len(_suggest(session, "", limit=1)) == 1


class TestNodeHandlers:
    """Tests for node editing handlers."""

    def test_set_extract_and_clear(self, session, ids):
        kitchen, hall = ids["kitchen"], ids["hall"]
        _set_node(session, kitchen, extract=hall)
        graph = session.workspace.get_graph("draft")
        [node] = [n for n in graph.node_ids() if n.value == kitchen]
        assert graph.get_node_attributes(node).extract.value == hall

        _set_node(session, kitchen, clear_extract=True)
        assert session.workspace.get_graph("draft").get_node_attributes(node).extract is None

    def test_set_missing_node(self, session, ids):
        result = _set_node(session, "nope", label="x")
        assert result["success"] is False
        assert result["not_found"] is True

    def test_invalid_node_id(self, session, ids):
        result = _remove_node(session, "")
        assert result["success"] is False
        assert result["not_found"] is False

    def test_include_takes_attributes_from_variant(self, session, ids):
        _toggle_diff(session, "base")
        _remove_node(session, ids["hall"])
        assert _include_node(session, ids["hall"])["success"] is True
        groups = _groups_for(_get_diff(session), ids["hall"])
        assert len(groups) == 1
        assert groups[0]["attributes"]["label"] == "hall"

    def test_adopt_node(self, session, ids):
        _toggle_diff(session, "base")
        _set_node(session, ids["kitchen"], label="galley")
        assert _adopt_node(session, ids["kitchen"], "red")["success"] is True
        assert len(_groups_for(_get_diff(session), ids["kitchen"])) == 1

    def test_adopt_unknown_color(self, session, ids):
        result = _adopt_node(session, ids["kitchen"], "purple")
        assert result["not_found"] is True

    def test_node_edit_without_selection(self, session, ids):
        _delete_graph(session)
        result = _create_node(session, "x")
        assert result["success"] is False
        assert result["error"] == "No current graph selected"


class TestValueTypes:
    """Handlers reject values the stored encoding cannot carry."""

    @pytest.mark.parametrize("label", [5, None, ["x"]])
    def test_create_node_non_string_label(self, session, ids, label):
        result = _create_node(session, label)
        assert result["success"] is False
        assert "Label must be a string" in result["error"]

    def test_set_node_non_string_label(self, session, ids):
        before = session.workspace
        result = _set_node(session, ids["kitchen"], label=5)
        assert result == {
            "success": False,
            "error": "Label must be a string, got int",
            "not_found": False,
        }
        assert session.workspace is before

    @pytest.mark.parametrize("extract", [5, "", ["x"]])
    def test_set_node_bad_extract(self, session, ids, extract):
        result = _set_node(session, ids["kitchen"], extract=extract)
        assert result["success"] is False
        assert result["not_found"] is False

    def test_create_graph_non_string_name(self, session, ids):
        result = _create_graph(session, 5)
        assert result["success"] is False
        assert "non-empty string" in result["error"]
