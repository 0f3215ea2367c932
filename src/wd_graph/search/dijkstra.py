# search/dijkstra.py
from wd_graph.domain.entities.geography import Route
from wd_graph.domain.entities.graph import Node, WeightedDirectionalGraph
from wd_graph.domain.entities.path import Path
from wd_graph.runtime.registries import make_frontier
from wd_graph.search.hooks import NoopHooks, SearchHooks


class ShortestPathSearch:
    """
    Dijkstra's algorithm over a WeightedDirectionalGraph.

    1. Pop the cheapest path off the frontier.
    2. Skip it if its node is already settled; return it if it reached the end.
    3. Otherwise settle the node and push one extended path per edge to an
       unsettled neighbour.

    Frontier and visited set are per-call state kept on the instance, so one
    instance must not run two searches at once.

    mark_visited=False keeps the legacy behaviour of never settling nodes;
    on graphs with cycles that only ends when the target is found, so bound
    it with max_expansions.
    """

    def __init__(
        self,
        graph: WeightedDirectionalGraph,
        *,
        frontier: str = "resort",
        mark_visited: bool = True,
        max_expansions: int | None = None,
        hooks: SearchHooks | None = None,
    ):
        if max_expansions is not None and max_expansions <= 0:
            raise ValueError(f"max_expansions must be positive, got {max_expansions}")
        self.graph = graph
        self.frontier_kind = frontier
        self.mark_visited = mark_visited
        self.max_expansions = max_expansions
        self._frontier = make_frontier(frontier)
        self._visited: set[Node] = set()
        self._hooks = hooks or NoopHooks()

    def shortest_path(self, start: str, end: str) -> Path | None:
        self._frontier.clear()
        self._visited = set()
        self._hooks.search_start(
            start=start, end=end, frontier=self.frontier_kind, mark_visited=self.mark_visited
        )

        start_node = self.graph.node_named(start)
        end_node = self.graph.node_named(end)
        if start_node is None or end_node is None:
            self._hooks.error(
                reason="unknown_node",
                start=start,
                end=end,
                missing=[n for n, v in ((start, start_node), (end, end_node)) if v is None],
            )
            return self._done(start, end, None, 0)

        self._frontier.push(Path.via(start_node))
        expanded = 0
        while self._frontier:
            shortest = self._frontier.pop()

            if shortest.node in self._visited:
                self._hooks.dequeue(shortest, qsize=len(self._frontier), skipped=True)
                continue
            self._hooks.dequeue(shortest, qsize=len(self._frontier), skipped=False)

            if shortest.node is end_node:
                return self._done(start, end, shortest, expanded)

            if self.max_expansions is not None and expanded >= self.max_expansions:
                self._hooks.error(
                    reason="search_aborted",
                    start=start,
                    end=end,
                    expanded=expanded,
                    max_expansions=self.max_expansions,
                )
                return self._done(start, end, None, expanded)

            if self.mark_visited:
                self._visited.add(shortest.node)
            pushed = 0
            for edge in shortest.node.edges:
                if edge.destination not in self._visited:
                    self._frontier.push(shortest.extend(edge))
                    pushed += 1
            expanded += 1
            self._hooks.expand(shortest, pushed=pushed, qsize=len(self._frontier))

        return self._done(start, end, None, expanded)

    def route(self, start: str, end: str) -> Route | None:
        path = self.shortest_path(start, end)
        return path.to_route() if path is not None else None

    def _done(self, start: str, end: str, path: Path | None, expanded: int) -> Path | None:
        self._hooks.search_end(
            start=start, end=end, path=path, expanded=expanded, visited=len(self._visited)
        )
        return path
