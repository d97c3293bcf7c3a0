"""Pytest fixtures for graph core tests."""

import pytest

from vargraph.graph import Graph, GraphColor, NodeAttributes, NodeId


@pytest.fixture
def node_a():
    return NodeId("node-a")


@pytest.fixture
def node_b():
    return NodeId("node-b")


@pytest.fixture
def node_c():
    return NodeId("node-c")


@pytest.fixture
def red():
    return GraphColor("red")


@pytest.fixture
def blue():
    return GraphColor("blue")


@pytest.fixture
def green():
    return GraphColor("green")


@pytest.fixture
def build_graph():
    """Factory: build a Graph from (NodeId, label, extract) triples."""

    def _build(*entries):
        graph = Graph.empty()
        for node_id, label, extract in entries:
            graph = graph.set_node_attributes(node_id, NodeAttributes(label=label, extract=extract))
        return graph

    return _build
