# tests/domain/test_graph.py
import pytest

from wd_graph.domain.entities.geography import Point
from wd_graph.domain.entities.graph import Edge, Node, WeightedDirectionalGraph


@pytest.fixture
def graph() -> WeightedDirectionalGraph:
    return WeightedDirectionalGraph()


@pytest.fixture
def three(graph: WeightedDirectionalGraph) -> tuple[Node, Node, Node]:
    nodes = tuple(Node.at(f"Node {i}", 100.0 * i, 100.0 * i) for i in (1, 2, 3))
    for n in nodes:
        graph.add_node(n)
    return nodes


def test_adding_nodes_replaces_by_name_in_place(graph, three):
    update = Node.at("Node 2", 500.0, 500.0)
    graph.add_node(update)
    assert graph.node_count() == 3
    assert graph.node_named("Node 2") is update
    assert graph.node_named("Node 2").position.x == 500.0
    assert [n.name for n in graph.nodes] == ["Node 1", "Node 2", "Node 3"]
    assert graph.nodes[1] is update


def test_replacement_drops_old_edges(graph, three):
    n1, n2, _ = three
    graph.add_edge_named("Node 2", "Node 1")
    assert graph.edge_count() == 1
    graph.add_node(Node.at("Node 2", 0.0, 0.0))
    assert graph.edge_count() == 0


def test_removing_node_by_object(graph, three):
    n1, n2, n3 = three
    graph.remove_node(n2)
    assert graph.node_count() == 2
    assert graph.nodes[0] is n1 and graph.nodes[-1] is n3


def test_removing_node_by_object_needs_identity(graph, three):
    graph.remove_node(Node.at("Node 2", 200.0, 200.0))
    assert graph.node_count() == 3


def test_removing_node_by_name(graph, three):
    n1, n2, n3 = three
    graph.remove_node_named(n2.name)
    graph.remove_node_named("Ghost")
    assert graph.node_count() == 2
    assert graph.nodes[0] is n1 and graph.nodes[-1] is n3


def test_getting_nodes(graph, three):
    n1, n2, n3 = three
    graph.remove_node_named("Node 2")
    assert graph.node_named("Node 1") is n1
    assert graph.node_named("Node 2") is None
    assert graph.node_named("Node 3") is n3


def test_adding_edges_as_objects(graph, three):
    n1, n2, n3 = three
    for e in (Edge(n1, n2), Edge(n2, n3), Edge(n3, n1)):
        graph.add_edge(e)
    assert graph.edge_count() == 3


def test_edge_with_absent_source_is_discarded(graph, three):
    outsider = Node.at("Outsider", 0.0, 0.0)
    graph.add_edge(Edge(outsider, three[0]))
    assert graph.edge_count() == 0
    assert outsider.edge_count() == 0


def test_edge_to_absent_destination_is_kept(graph, three):
    outsider = Node.at("Outsider", 0.0, 0.0)
    graph.add_edge(Edge(three[0], outsider))
    assert graph.edge_count() == 1
    assert graph.node_named("Outsider") is None


def test_adding_edges_by_name(graph, three):
    graph.add_edge_named("Node 1", "Node 2")
    graph.add_edge_named("Node 2", "Node 3")
    graph.add_edge_named("Node 3", "Node 1")
    assert graph.edge_count() == 3
    e = three[0].edge_to(three[1])
    assert e is not None and e.weight == three[0].position.distance(three[1].position)


def test_adding_edge_by_unknown_name_is_noop(graph, three):
    graph.add_edge_named("Node 1", "Ghost")
    graph.add_edge_named("Ghost", "Node 1")
    assert graph.edge_count() == 0


def test_removing_edge_as_object(graph, three):
    e = Edge(three[0], three[1])
    graph.add_edge(e)
    graph.remove_edge(e)
    assert graph.edge_count() == 0


def test_removing_edge_by_name(graph, three):
    graph.add_edge(Edge(three[0], three[1]))
    graph.remove_edge_named("Node 1", "Node 2")
    graph.remove_edge_named("Node 2", "Node 1")
    graph.remove_edge_named("Ghost", "Node 1")
    assert graph.edge_count() == 0


def test_node_count(graph, three):
    n4 = Node.at("Node 4", 400.0, 400.0)
    graph.add_node(n4)
    graph.remove_node(three[2])
    assert graph.node_count() == 3
    assert len(graph) == 3


def test_edge_count_includes_self_loops(graph, three):
    graph.add_node(Node.at("Node 4", 400.0, 400.0))
    graph.add_edge_named("Node 1", "Node 1")
    graph.add_edge_named("Node 2", "Node 3")
    graph.add_edge_named("Node 3", "Node 4")
    graph.add_edge_named("Node 4", "Node 1")
    assert graph.edge_count() == 4
    assert [e.edge_id for e in graph.edges()] == [
        "Node 1->Node 1",
        "Node 2->Node 3",
        "Node 3->Node 4",
        "Node 4->Node 1",
    ]


def test_nearest_node(graph, three):
    assert graph.nearest_node(Point(190.0, 210.0)) is three[1]
    assert graph.nearest_node(Point(-5.0, -5.0)) is three[0]
    # equidistant: first in node order wins
    assert graph.nearest_node(Point(150.0, 150.0)) is three[0]
    assert WeightedDirectionalGraph().nearest_node(Point(0.0, 0.0)) is None
