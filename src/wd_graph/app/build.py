# wd_graph/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from wd_graph.config.models import GraphModel, RoutingModel
from wd_graph.domain.entities.graph import Node, WeightedDirectionalGraph
from wd_graph.io.recorder import MemorySink, Recorder
from wd_graph.io.search_logging import SearchLogging
from wd_graph.mechanics.routers import GraphRoutePlanner
from wd_graph.search.dijkstra import ShortestPathSearch
from wd_graph.search.hooks import NoopHooks, SearchHooks


@dataclass
class App:
    graph: WeightedDirectionalGraph
    search: ShortestPathSearch
    planner: GraphRoutePlanner
    hooks: SearchHooks
    recorder: Recorder | None = None


def build_graph(model: GraphModel) -> WeightedDirectionalGraph:
    graph = WeightedDirectionalGraph()
    for n in model.nodes:
        graph.add_node(Node.at(n.name, n.x, n.y))  # repeated names replace in place
    for e in model.edges:
        graph.add_edge_named(e.source, e.destination)  # unknown names are dropped
    return graph


def build(cfg: RoutingModel | Mapping, *, use_logging: bool = True) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, RoutingModel) else RoutingModel.model_validate(cfg)

    # 1) Graph
    graph = build_graph(model.graph)

    # 2) Hooks (route events kept in memory for callers to inspect)
    recorder = None
    if use_logging:
        recorder = Recorder(MemorySink())
        hooks: SearchHooks = SearchLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            recorder=recorder,
        )
    else:
        hooks = NoopHooks()

    # 3) Search & planner
    search = ShortestPathSearch(
        graph,
        frontier=model.search.frontier,
        mark_visited=model.search.mark_visited,
        max_expansions=model.search.max_expansions,
        hooks=hooks,
    )
    planner = GraphRoutePlanner(graph, search)

    return App(graph, search, planner, hooks, recorder)
