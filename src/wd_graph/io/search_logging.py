# io/search_logging.py
import json
import logging
import sys

from wd_graph.domain.entities.path import Path
from wd_graph.io.recorder import Recorder
from wd_graph.io.route_events import RouteFound, RouteNotFound
from wd_graph.search.hooks import NoopHooks


def _default_json_logger(name="wd_graph", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)  # re-applied so a later build can change it
    return logger


class SearchLogging(NoopHooks):
    """
    One place to shape and emit structured logs and route events for searches.
    Per-step dequeue/expand records are only produced with debug=True.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.recorder = recorder
        # debug=True implies DEBUG, otherwise the step records would be filtered out
        self.log = logger or _default_json_logger(level="DEBUG" if debug else level)
        self._seq = 0
        self._reason: str | None = None

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, "seq": self._seq}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    @staticmethod
    def _shape_path(path: Path) -> dict:
        return {"node": path.node.name, "weight": path.cumulative_weight}

    # --------------------------------------------------------

    def search_start(self, *, start: str, end: str, frontier: str, mark_visited: bool):
        self._seq += 1
        self._reason = None
        self._emit(
            "INFO", "search_start", start=start, end=end, frontier=frontier, mark_visited=mark_visited
        )

    def search_end(self, *, start: str, end: str, path: Path | None, expanded: int, visited: int):
        found = path is not None
        extra = {"start": start, "end": end, "found": found, "expanded": expanded, "visited": visited}
        if found:
            extra.update(weight=path.cumulative_weight, hops=path.hops())
        self._emit("INFO", "search_end", **extra)

        if self.recorder:
            if found:
                ev = RouteFound(
                    run_id=self.run_id,
                    seq=self._seq,
                    name="RouteFound",
                    start=start,
                    end=end,
                    expanded=expanded,
                    weight=path.cumulative_weight,
                    hops=path.hops(),
                    nodes=path.names(),
                )
            else:
                ev = RouteNotFound(
                    run_id=self.run_id,
                    seq=self._seq,
                    name="RouteNotFound",
                    start=start,
                    end=end,
                    expanded=expanded,
                    reason=self._reason or "unreachable",
                )
            self.recorder.emit(ev)

    def dequeue(self, path: Path, *, qsize: int, skipped: bool):
        if self.debug:
            self._emit("DEBUG", "dequeue", **self._shape_path(path), qsize=qsize, skipped=skipped)

    def expand(self, path: Path, *, pushed: int, qsize: int):
        if self.debug:
            self._emit("DEBUG", "expand", **self._shape_path(path), pushed=pushed, qsize=qsize)

    def error(self, *, reason: str, **extra):
        self._reason = reason
        self._emit("WARNING", reason, **extra)
