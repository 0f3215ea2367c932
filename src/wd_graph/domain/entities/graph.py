from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np

from wd_graph.domain.entities.geography import Point


# Nodes and edges compare (and hash) by identity: two handles are the same
# vertex only if they are the same object, whatever their names.
@dataclass(eq=False)
class Node:
    name: str
    position: Point
    _edges: list[Edge] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def at(cls, name: str, x: float, y: float) -> Node:
        return cls(name, Point(float(x), float(y)))

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    def add_edge(self, edge: Edge) -> None:
        """Attach ``edge`` if it starts here; foreign or repeated edges are ignored."""
        if edge.source is not self:
            return
        if any(e is edge for e in self._edges):
            return
        self._edges.append(edge)

    def remove_edge(self, edge: Edge) -> None:
        for i, e in enumerate(self._edges):
            if e is edge:
                del self._edges[i]
                return

    def add_edge_to(self, destination: Node) -> Edge:
        edge = Edge(self, destination)
        self._edges.append(edge)
        return edge

    def remove_edge_to(self, destination: Node) -> None:
        self._edges = [e for e in self._edges if e.destination is not destination]

    def edge_to(self, destination: Node) -> Edge | None:
        return next((e for e in self._edges if e.destination is destination), None)

    def edge_to_name(self, name: str) -> Edge | None:
        return next((e for e in self._edges if e.destination.name == name), None)

    def edge_count(self) -> int:
        return len(self._edges)


@dataclass(eq=False, frozen=True)
class Edge:
    source: Node
    destination: Node
    weight: float = field(init=False)

    def __post_init__(self):
        # fixed at construction; moving an endpoint later does not re-weigh the edge
        object.__setattr__(self, "weight", self.source.position.distance(self.destination.position))

    @property
    def edge_id(self) -> str:
        return f"{self.source.name}->{self.destination.name}"


class WeightedDirectionalGraph:
    """
    Ordered collection of uniquely named nodes; edges live on their source node.

    Missing names and foreign nodes never raise: lookups return None and
    mutations become no-ops.
    """

    def __init__(self, nodes: list[Node] | None = None):
        self._nodes: list[Node] = []
        for n in nodes or ():
            self.add_node(n)

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(tuple(self._nodes))

    def __len__(self) -> int:
        return len(self._nodes)

    # ------------------- nodes ---------------------------

    def add_node(self, node: Node) -> None:
        # same name => the new node takes the old one's slot (edges and all)
        for i, n in enumerate(self._nodes):
            if n.name == node.name:
                self._nodes[i] = node
                return
        self._nodes.append(node)

    def remove_node(self, node: Node) -> None:
        self._nodes = [n for n in self._nodes if n is not node]

    def remove_node_named(self, name: str) -> None:
        self._nodes = [n for n in self._nodes if n.name != name]

    def node_named(self, name: str) -> Node | None:
        return next((n for n in self._nodes if n.name == name), None)

    def nearest_node(self, p: Point) -> Node | None:
        if not self._nodes:
            return None
        xy = np.array([(n.position.x, n.position.y) for n in self._nodes], dtype=float)
        d = np.hypot(xy[:, 0] - p.x, xy[:, 1] - p.y)
        return self._nodes[int(np.argmin(d))]  # argmin keeps the first of equal distances

    # ------------------- edges ---------------------------

    def add_edge(self, edge: Edge) -> None:
        for n in self._nodes:
            if n is edge.source:
                n.add_edge(edge)

    def add_edge_named(self, source: str, destination: str) -> None:
        src, dst = self.node_named(source), self.node_named(destination)
        if src is None or dst is None:
            return
        self.add_edge(Edge(src, dst))

    def remove_edge(self, edge: Edge) -> None:
        for n in self._nodes:
            n.remove_edge(edge)

    def remove_edge_named(self, source: str, destination: str) -> None:
        src, dst = self.node_named(source), self.node_named(destination)
        if src is None or dst is None:
            return
        src.remove_edge_to(dst)

    def edges(self) -> Iterator[Edge]:
        for n in tuple(self._nodes):
            yield from n.edges

    # ------------------- counts ---------------------------

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return sum(n.edge_count() for n in self._nodes)
