import math

from wd_graph.app.protocols import RoutePlanner, RouteRenderer
from wd_graph.domain.entities.geography import Point, Route
from wd_graph.domain.entities.graph import WeightedDirectionalGraph
from wd_graph.search.dijkstra import ShortestPathSearch


class GraphRoutePlanner(RoutePlanner):
    """Snaps free points to their nearest graph nodes and routes between them."""

    def __init__(self, graph: WeightedDirectionalGraph, search: ShortestPathSearch | None = None):
        self.G = graph
        self.search = search or ShortestPathSearch(graph)

    def route(self, a: Point, b: Point) -> Route | None:
        na, nb = self.G.nearest_node(a), self.G.nearest_node(b)
        if na is None or nb is None:
            return None
        return self.route_named(na.name, nb.name)

    def route_named(self, start: str, end: str) -> Route | None:
        return self.search.route(start, end)

    def distance_m(self, a: Point, b: Point) -> float:
        r = self.route(a, b)
        return r.total_length_m if r is not None else math.inf

    def draw(self, a: Point, b: Point, renderer: RouteRenderer) -> Route | None:
        # hand the ordered points to whoever renders them; nothing is drawn here
        r = self.route(a, b)
        if r is not None:
            renderer.draw(r.points())
        return r
