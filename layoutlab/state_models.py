from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Tuple


@dataclass(frozen=True)
class Vertex:
    id: str
    x: float
    y: float

    @property
    def pos(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def moved_to(self, x: float, y: float) -> "Vertex":
        return Vertex(id=self.id, x=float(x), y=float(y))

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "x": float(self.x), "y": float(self.y)}


@dataclass(frozen=True)
class Edge:
    """Undirected, unweighted. (source, target) order carries no meaning."""

    source: str
    target: str

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target

    def shares_endpoint(self, other: "Edge") -> bool:
        return bool({self.source, self.target} & {other.source, other.target})

    def to_dict(self) -> Dict[str, str]:
        return {"source": self.source, "target": self.target}


@dataclass(frozen=True)
class Graph:
    vertices: Tuple[Vertex, ...] = ()
    edges: Tuple[Edge, ...] = ()

    @property
    def ids(self) -> List[str]:
        return [v.id for v in self.vertices]


@dataclass(frozen=True)
class LayoutMetrics:
    crossings: int
    average_distance: float
    min_distance: float

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly view; the +inf sentinel becomes None."""
        md = float(self.min_distance)
        return {
            "crossings": int(self.crossings),
            "average_distance": float(self.average_distance),
            "min_distance": md if math.isfinite(md) else None,
        }


@dataclass(frozen=True)
class MetricsPair:
    before: LayoutMetrics
    after: LayoutMetrics


@dataclass(frozen=True)
class OptimizationResult:
    original_vertices: Tuple[Vertex, ...]
    optimized_vertices: Tuple[Vertex, ...]
    edges: Tuple[Edge, ...]
    metrics: MetricsPair
    options: Mapping[str, Any] = field(default_factory=dict)


def build_graph(
    *,
    vertices: Iterable[Any],
    edges: Iterable[Any] = (),
) -> Graph:
    """Build a Graph from Vertex/Edge objects, dicts or plain tuples.

    vertices: Vertex | {"id","x","y"} | (id, x, y)
    edges:    Edge | {"source","target"} | (source, target)
    """
    vs = tuple(_as_vertex(v) for v in vertices)
    es = tuple(_as_edge(e) for e in edges)
    return Graph(vertices=vs, edges=es)


def _as_vertex(v: Any) -> Vertex:
    if isinstance(v, Vertex):
        return v
    if isinstance(v, Mapping):
        return Vertex(id=str(v["id"]), x=float(v["x"]), y=float(v["y"]))
    vid, x, y = v
    return Vertex(id=str(vid), x=float(x), y=float(y))


def _as_edge(e: Any) -> Edge:
    if isinstance(e, Edge):
        return e
    if isinstance(e, Mapping):
        return Edge(source=str(e["source"]), target=str(e["target"]))
    s, t = e
    return Edge(source=str(s), target=str(t))
