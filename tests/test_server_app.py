"""Tests for the Flask REST API server."""

import pytest

pytest.importorskip("flask")

from vargraph.config import DEFAULT_CONFIG  # noqa: E402
from vargraph.server.app import create_app  # noqa: E402
from vargraph.session import Session  # noqa: E402
from vargraph.storage import GraphStore  # noqa: E402

# ─────────────────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def session(tmp_path):
    return Session(store=GraphStore(tmp_path / "graphs.json"))


@pytest.fixture
def client(session):
    app = create_app(session, DEFAULT_CONFIG)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def populated(client):
    """Graph "base" with a "kitchen" node, duplicated to "draft" and diffed."""
    client.post("/api/graphs", json={"name": "base"})
    node_id = client.post("/api/nodes", json={"label": "kitchen"}).get_json()["node_id"]
    client.post("/api/graphs/base/duplicate", json={"new_name": "draft"})
    client.post("/api/graphs/base/diff")
    return node_id


# ─────────────────────────────────────────────────────────────────────────────
# Read endpoints
# ─────────────────────────────────────────────────────────────────────────────


class TestReadEndpoints:
    """GET endpoints."""

    def test_empty_workspace(self, client):
        data = client.get("/api/workspace").get_json()
        assert data["graphs"] == []
        assert data["current"] is None

    def test_cors_header(self, client):
        response = client.get("/api/workspace", headers={"Origin": "http://example.com"})
        assert response.headers.get("Access-Control-Allow-Origin") == "*"

    def test_diff(self, client, populated):
        data = client.get("/api/diff").get_json()
        assert data["colors"] == ["red", "transparent"]
        assert data["nodes"][0]["node_id"] == populated
        assert data["nodes"][0]["unanimous"] is True

    def test_suggest(self, client, populated):
        data = client.get("/api/suggest?q=kitchen").get_json()
        assert data[0]["node_id"] == populated
        assert data[0]["distance"] == 0

    def test_suggest_bad_limit(self, client):
        assert client.get("/api/suggest?limit=abc").status_code == 400


# ─────────────────────────────────────────────────────────────────────────────
# Mutation endpoints
# ─────────────────────────────────────────────────────────────────────────────


class TestMutationEndpoints:
    """POST/PATCH/DELETE endpoints."""

    def test_create_graph_persists(self, client, session):
        assert client.post("/api/graphs", json={"name": "g"}).status_code == 200
        assert "g" in session.store.load()

    def test_duplicate_name_is_400(self, client):
        client.post("/api/graphs", json={"name": "g"})
        assert client.post("/api/graphs", json={"name": "g"}).status_code == 400

    def test_select_missing_is_404(self, client):
        assert client.post("/api/graphs/missing/select").status_code == 404

    def test_palette_exhausted_is_409(self, tmp_path):
        from vargraph.graph import GraphColor

        session = Session(samples=(GraphColor("red"),))
        client = create_app(session, DEFAULT_CONFIG).test_client()
        client.post("/api/graphs", json={"name": "a"})
        client.post("/api/graphs", json={"name": "b"})
        client.post("/api/graphs/a/diff")
        assert client.post("/api/graphs/b/diff").status_code == 409

    def test_patch_node_splits_diff(self, client, populated):
        response = client.patch(f"/api/nodes/{populated}", json={"label": "galley"})
        assert response.status_code == 200
        node = client.get("/api/diff").get_json()["nodes"][0]
        assert node["unanimous"] is False

    def test_patch_null_extract_clears(self, client, populated):
        client.patch(f"/api/nodes/{populated}", json={"extract": populated})
        client.patch(f"/api/nodes/{populated}", json={"extract": None})
        node = client.get("/api/diff").get_json()["nodes"][0]
        assert node["unanimous"] is True

    def test_adopt_restores_agreement(self, client, populated):
        client.patch(f"/api/nodes/{populated}", json={"label": "galley"})
        client.post(f"/api/nodes/{populated}/adopt", json={"color": "red"})
        assert client.get("/api/diff").get_json()["nodes"][0]["unanimous"] is True

    def test_delete_then_include_node(self, client, populated):
        assert client.delete(f"/api/nodes/{populated}").status_code == 200
        assert client.post("/api/nodes", json={"node_id": populated}).status_code == 200
        assert client.get("/api/diff").get_json()["nodes"][0]["unanimous"] is True

    def test_delete_graph(self, client, populated):
        assert client.delete("/api/graphs/draft").status_code == 200
        assert client.delete("/api/graphs/draft").status_code == 404


# ─────────────────────────────────────────────────────────────────────────────
# Request validation
# ─────────────────────────────────────────────────────────────────────────────


class TestRequestValidation:
    """Malformed requests are rejected and leave the stored collection readable."""

    @pytest.fixture
    def stored(self, client):
        """Graph "keep" with one node, plus an empty current graph "main"."""
        client.post("/api/graphs", json={"name": "keep"})
        client.post("/api/nodes", json={"label": "kitchen"})
        client.post("/api/graphs", json={"name": "main"})
        node_id = client.post("/api/nodes", json={"label": "hall"}).get_json()["node_id"]
        return node_id

    def _reloaded(self, session):
        return GraphStore(session.store.path).load()

    @pytest.mark.parametrize(
        "body",
        [{"label": 5}, {"label": None, "extract": 5}, {"extract": ["x"]}],
    )
    def test_bad_patch_values(self, client, session, stored, body):
        response = client.patch(f"/api/nodes/{stored}", json=body)
        assert response.status_code == 400
        assert response.get_json()["success"] is False
        assert set(self._reloaded(session)) == {"keep", "main"}

    def test_bad_label_on_create(self, client, session, stored):
        assert client.post("/api/nodes", json={"label": 5}).status_code == 400
        assert len(self._reloaded(session)["main"]) == 1

    def test_bad_graph_name(self, client, session, stored):
        assert client.post("/api/graphs", json={"name": 5}).status_code == 400
        assert set(self._reloaded(session)) == {"keep", "main"}

    @pytest.mark.parametrize(
        "method, url",
        [
            ("post", "/api/graphs"),
            ("post", "/api/nodes"),
            ("patch", "/api/nodes/{node}"),
            ("post", "/api/nodes/{node}/adopt"),
            ("post", "/api/graphs/main/duplicate"),
        ],
    )
    def test_non_object_body(self, client, session, stored, method, url):
        response = getattr(client, method)(url.format(node=stored), json=["x"])
        assert response.status_code == 400
        assert response.get_json() == {
            "success": False,
            "error": "Request body must be a JSON object",
            "not_found": False,
        }
        assert set(self._reloaded(session)) == {"keep", "main"}

    def test_valid_edits_reload(self, client, session, stored):
        client.patch(f"/api/nodes/{stored}", json={"label": "galley", "extract": stored})
        reloaded = self._reloaded(session)
        assert reloaded["main"].is_equivalent(session.workspace.get_graph("main"))

    def test_negative_limit(self, client, stored):
        response = client.get("/api/suggest?limit=-1")
        assert response.status_code == 400
        assert response.get_json()["error"] == "limit must not be negative"
