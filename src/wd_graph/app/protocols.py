from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from wd_graph.domain.entities.geography import Point, Route


@runtime_checkable
class RoutePlanner(Protocol):
    """
    Responsibilities:
      • Compute a route between two planar points over the graph.
      • Compute the network distance between points.
    Units: meters in the projected CRS the nodes were placed in.
    """

    def route(self, a: Point, b: Point) -> Route | None: ...
    def distance_m(self, a: Point, b: Point) -> float: ...


@runtime_checkable
class RouteRenderer(Protocol):
    """Draws an ordered sequence of points (e.g. a polyline overlay on a map view)."""

    def draw(self, points: Sequence[Point]) -> None: ...
