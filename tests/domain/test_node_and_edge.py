# tests/domain/test_node_and_edge.py
import math

import pytest

from wd_graph.domain.entities.geography import Point
from wd_graph.domain.entities.graph import Edge, Node


@pytest.fixture
def node() -> Node:
    return Node.at("Main Test Node", 100.0, 100.0)


@pytest.fixture
def other() -> Node:
    return Node.at("Test Node 2", 200.0, 200.0)


# ---------- Edge


def test_edge_initialization(node: Node, other: Node):
    e = Edge(node, other)
    assert e.source is node
    assert e.destination is other
    assert e.weight >= 0
    assert abs(e.weight - math.hypot(100.0, 100.0)) < 1e-9
    assert e.edge_id == "Main Test Node->Test Node 2"


def test_edge_weight_is_fixed_at_construction(node: Node, other: Node):
    e = Edge(node, other)
    w = e.weight
    other.position = Point(1_000.0, 1_000.0)
    assert e.weight == w


def test_self_edge_has_zero_weight(node: Node):
    assert Edge(node, node).weight == 0.0


# ---------- Node


def test_node_initialization(node: Node):
    assert node.name == "Main Test Node"
    assert node.position == Point(100.0, 100.0)
    assert node.edge_count() == 0


def test_nodes_compare_by_identity():
    a, b = Node.at("A", 0, 0), Node.at("A", 0, 0)
    assert a != b
    assert len({a, b}) == 2


def test_adding_same_edge_twice_keeps_one(node: Node, other: Node):
    e = Edge(node, other)
    node.add_edge(e)
    node.add_edge(e)
    assert node.edge_count() == 1


def test_adding_foreign_edge_is_ignored(node: Node, other: Node):
    node.add_edge(Edge(other, node))
    assert node.edge_count() == 0


def test_removing_edge(node: Node, other: Node):
    e = Edge(node, other)
    node.add_edge(e)
    node.remove_edge(e)
    assert node.edge_count() == 0
    node.remove_edge(e)  # absent: no-op
    assert node.edge_count() == 0


def test_remove_edge_matches_identity_not_endpoints(node: Node, other: Node):
    kept = node.add_edge_to(other)
    node.remove_edge(Edge(node, other))
    assert node.edges == (kept,)


def test_add_edge_to_and_lookup(node: Node, other: Node):
    node.add_edge_to(other)
    e = node.edge_to(other)
    assert e is not None
    assert e.destination is other
    assert e.weight == node.position.distance(other.position)
    assert node.edge_to_name("Test Node 2") is e
    assert node.edge_to_name("Missing") is None
    assert node.edge_to(Node.at("Test Node 2", 200.0, 200.0)) is None


def test_remove_edge_to_without_edges(node: Node, other: Node):
    node.remove_edge_to(other)
    assert node.edge_count() == 0


def test_remove_edge_to_drops_every_match(node: Node, other: Node):
    node.add_edge_to(other)
    node.add_edge_to(other)
    third = Node.at("Test Node 3", 300.0, 300.0)
    node.add_edge_to(third)
    node.remove_edge_to(other)
    assert node.edge_count() == 1
    assert node.edges[0].destination is third


def test_edge_count(node: Node):
    others = [Node.at(f"Test Node {i}", 100.0 * i, 100.0 * i) for i in range(2, 6)]
    for n in others:
        node.add_edge_to(n)
    node.remove_edge_to(others[2])
    node.remove_edge_to(others[3])
    assert node.edge_count() == 2
    assert [e.destination.name for e in node.edges] == ["Test Node 2", "Test Node 3"]
