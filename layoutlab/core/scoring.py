from __future__ import annotations

from typing import Any, Dict, Sequence

from ..state_models import Edge, LayoutMetrics, Vertex
from .geometry import average_edge_length, count_crossings, min_pairwise_distance


def calculate_layout_metrics(vertices: Sequence[Vertex], edges: Sequence[Edge]) -> LayoutMetrics:
    return LayoutMetrics(
        crossings=int(count_crossings(vertices, edges)),
        average_distance=float(average_edge_length(vertices, edges)),
        min_distance=float(min_pairwise_distance(vertices)),
    )


def _delta(new: float, old: float) -> float:
    # inf - inf: оба без пар вершин, изменения нет
    if new == old:
        return 0.0
    return float(new - old)


def compare_metrics(before: LayoutMetrics, after: LayoutMetrics) -> Dict[str, Any]:
    """Differences after - before; crossing_reduction is before - after."""
    return {
        "crossing_reduction": int(before.crossings - after.crossings),
        "distance_improvement": _delta(after.average_distance, before.average_distance),
        "min_distance_improvement": _delta(after.min_distance, before.min_distance),
    }
