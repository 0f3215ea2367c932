import heapq
from operator import attrgetter
from typing import Protocol, runtime_checkable

from wd_graph.domain.entities.path import Path

_by_weight = attrgetter("cumulative_weight")


@runtime_checkable
class Frontier(Protocol):
    """
    Working set of candidate paths, popped cheapest first.
    Equal weights come out in insertion order.
    """

    def push(self, path: Path) -> None: ...
    def pop(self) -> Path: ...
    def clear(self) -> None: ...
    def __len__(self) -> int: ...


class SortedFrontier(Frontier):
    """Plain list kept sorted by a stable re-sort after every push."""

    def __init__(self):
        self._paths: list[Path] = []

    def push(self, path: Path) -> None:
        self._paths.append(path)
        self._paths.sort(key=_by_weight)

    def pop(self) -> Path:
        return self._paths.pop(0)

    def clear(self) -> None:
        self._paths = []

    def __len__(self) -> int:
        return len(self._paths)


class HeapFrontier(Frontier):
    # (weight, seq) keys give the same FIFO tie-break as the stable re-sort
    def __init__(self):
        self._q: list[tuple[float, int, Path]] = []
        self._seq = 0

    def push(self, path: Path) -> None:
        self._seq += 1
        heapq.heappush(self._q, (path.cumulative_weight, self._seq, path))

    def pop(self) -> Path:
        return heapq.heappop(self._q)[2]

    def clear(self) -> None:
        self._q = []
        self._seq = 0

    def __len__(self) -> int:
        return len(self._q)
