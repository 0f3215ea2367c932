from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False  # also lowers the default logger to DEBUG so step records are emitted


# ----------------- SEARCH ---------------------


class SearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    frontier: Literal["resort", "heap"] = "resort"
    # False => legacy behaviour, nodes are never settled (may not terminate on cycles)
    mark_visited: bool = True
    max_expansions: int | None = None

    @field_validator("max_expansions")
    @classmethod
    def _positive(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            raise ValueError("max_expansions must be > 0")
        return v


# ----------------- GRAPH ---------------------


class NodeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    x: float  # meters in projected CRS
    y: float


class EdgeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    source: str
    destination: str

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, v):
        # YAML/JSON shorthand: ["A", "B"]
        if isinstance(v, (list, tuple)):
            if len(v) != 2:
                raise ValueError(f"edge pair must have 2 names, got {len(v)}")
            return {"source": v[0], "destination": v[1]}
        return v


class GraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    nodes: list[NodeModel] = Field(default_factory=list)
    edges: list[EdgeModel] = Field(default_factory=list)


# ------------------------------------------------------------------


class RoutingModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    log: LogModel = LogModel()
    search: SearchModel = SearchModel()
    graph: GraphModel = GraphModel()
