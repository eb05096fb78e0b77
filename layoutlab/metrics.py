from __future__ import annotations

from .core.geometry import (
    average_edge_length,
    count_crossings,
    edges_cross,
    min_pairwise_distance,
    segments_cross,
)
from .core.layout import optimize_layout
from .core.scoring import calculate_layout_metrics, compare_metrics

__all__ = [
    "optimize_layout",
    "calculate_layout_metrics",
    "compare_metrics",
    "count_crossings",
    "edges_cross",
    "segments_cross",
    "average_edge_length",
    "min_pairwise_distance",
]
