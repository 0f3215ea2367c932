# runtime/registries.py
from collections.abc import Callable

from wd_graph.search.frontier import Frontier, HeapFrontier, SortedFrontier

FrontierFactory = Callable[[], Frontier]

_frontier_registry: dict[str, FrontierFactory] = {}


# ------------------- Frontier registries ---------------------------


def register_frontier(kind: str):
    def deco(fn: FrontierFactory):
        _frontier_registry[kind] = fn
        return fn

    return deco


def make_frontier(kind: str) -> Frontier:
    try:
        factory = _frontier_registry[kind]
    except KeyError:
        raise ValueError(f"Unknown frontier kind {kind!r}") from None
    return factory()


def frontier_kinds() -> list[str]:
    return sorted(_frontier_registry)


@register_frontier("resort")
def _make_sorted():
    return SortedFrontier()


@register_frontier("heap")
def _make_heap():
    return HeapFrontier()
