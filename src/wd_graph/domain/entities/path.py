from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from wd_graph.domain.entities.geography import Point, Route, Segment
from wd_graph.domain.entities.graph import Edge, Node


@dataclass(frozen=True, eq=False)
class Path:
    """
    Backward-linked traversal record: the node reached, the path taken before
    it and the total weight so far. Walk ``previous`` to recover the route.
    """

    node: Node
    previous: Path | None = None
    cumulative_weight: float = 0.0

    @classmethod
    def via(cls, node: Node, edge: Edge | None = None, previous: Path | None = None) -> Path:
        # weight only accumulates when both the prefix and the edge taken are known
        if edge is not None and previous is not None:
            w = previous.cumulative_weight + edge.weight
        else:
            w = 0.0
        return cls(node=node, previous=previous, cumulative_weight=w)

    def extend(self, edge: Edge) -> Path:
        return Path.via(edge.destination, edge, self)

    def walk_back(self) -> Iterator[Path]:
        p: Path | None = self
        while p is not None:
            yield p
            p = p.previous

    def nodes(self) -> list[Node]:
        return [p.node for p in self.walk_back()][::-1]

    def names(self) -> list[str]:
        return [n.name for n in self.nodes()]

    def points(self) -> list[Point]:
        return [n.position for n in self.nodes()]

    def hops(self) -> int:
        return sum(1 for _ in self.walk_back()) - 1

    def to_route(self) -> Route:
        segs = []
        for p in self.walk_back():
            if p.previous is None:
                break
            u, v = p.previous.node, p.node
            # the weight the search paid for this hop, not a fresh distance
            length = p.cumulative_weight - p.previous.cumulative_weight
            segs.append(Segment(u.position, v.position, length, edge_id=f"{u.name}->{v.name}"))
        segs.reverse()
        return Route(segs, self.cumulative_weight, origin=self.nodes()[0].position)
