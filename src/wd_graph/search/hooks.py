# search/hooks.py
from typing import Protocol

from wd_graph.domain.entities.path import Path


class SearchHooks(Protocol):
    def search_start(self, *, start: str, end: str, frontier: str, mark_visited: bool): ...
    def search_end(
        self, *, start: str, end: str, path: Path | None, expanded: int, visited: int
    ): ...
    def dequeue(self, path: Path, *, qsize: int, skipped: bool): ...
    def expand(self, path: Path, *, pushed: int, qsize: int): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def search_end(self, **_):
        pass

    def dequeue(self, *_, **__):
        pass

    def expand(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
