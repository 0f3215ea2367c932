import math
from dataclasses import dataclass


# Core geometry types; coordinates are planar (projected CRS, meters)
@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def distance(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    length_m: float
    edge_id: str | None = None  # "source->destination" when taken from a graph edge


@dataclass
class Route:
    """Forward-ordered legs of a path, the shape renderers consume."""

    segments: list[Segment]
    total_length_m: float
    origin: Point | None = None  # keeps zero-length routes drawable as a single point

    def points(self) -> list[Point]:
        if not self.segments:
            return [self.origin] if self.origin is not None else []
        return [self.segments[0].start, *(s.end for s in self.segments)]
