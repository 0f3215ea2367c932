# wd_graph/io/route_events.py

from dataclasses import dataclass


# Base type for analytics events emitted once per search
@dataclass
class RouteEvent:
    run_id: str
    seq: int  # search sequence number within the run
    name: str  # stable event name
    start: str
    end: str
    expanded: int


@dataclass
class RouteFound(RouteEvent):
    weight: float
    hops: int
    nodes: list[str]


@dataclass
class RouteNotFound(RouteEvent):
    reason: str  # "unknown_node" | "unreachable" | "search_aborted"
