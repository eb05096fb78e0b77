"""
Метрики качества укладки: пересечения рёбер, средняя длина ребра,
минимальное расстояние между вершинами.

All functions are pure and recompute from scratch on every call.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
from scipy.spatial.distance import pdist

from ..state_models import Edge, Vertex
from ..utils import index_by_id, positions_array, resolve_edges

Point = Tuple[float, float]


# -----------------------------
# Edge crossings
# -----------------------------
def segments_cross(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """Strict crossing of segments p1-p2 and p3-p4.

    Touching, collinear overlap and shared endpoints are not crossings.
    """
    x1, y1 = p1
    x2, y2 = p2
    x3, y3 = p3
    x4, y4 = p4

    d1 = (x1 - x3) * (y4 - y3) - (y1 - y3) * (x4 - x3)
    d2 = (x2 - x3) * (y4 - y3) - (y2 - y3) * (x4 - x3)
    d3 = (x3 - x1) * (y2 - y1) - (y3 - y1) * (x2 - x1)
    d4 = (x4 - x1) * (y2 - y1) - (y4 - y1) * (x2 - x1)

    return (d1 * d2 < 0) and (d3 * d4 < 0)


def edges_cross(vertices: Sequence[Vertex], e1: Edge, e2: Edge) -> bool:
    """Crossing test for two edges of a layout.

    Edges sharing an endpoint never cross; unresolved endpoints give False.
    """
    if e1.shares_endpoint(e2):
        return False
    idx = index_by_id(vertices)
    try:
        a, b = vertices[idx[e1.source]], vertices[idx[e1.target]]
        c, d = vertices[idx[e2.source]], vertices[idx[e2.target]]
    except KeyError:
        return False
    return segments_cross(a.pos, b.pos, c.pos, d.pos)


def count_crossings(vertices: Sequence[Vertex], edges: Sequence[Edge]) -> int:
    """Number of crossing pairs over all unordered pairs of distinct edges. O(E^2)."""
    src, dst, _ = resolve_edges(vertices, edges)
    m = src.size
    if m < 2:
        return 0

    pos = positions_array(vertices)
    a = pos[src]  # (m, 2) first endpoint
    b = pos[dst]  # (m, 2) second endpoint

    # строки i = ребро e1, столбцы j = ребро e2
    ax, ay = a[:, 0][:, None], a[:, 1][:, None]
    bx, by = b[:, 0][:, None], b[:, 1][:, None]
    cx, cy = a[:, 0][None, :], a[:, 1][None, :]
    dx, dy = b[:, 0][None, :], b[:, 1][None, :]

    d1 = (ax - cx) * (dy - cy) - (ay - cy) * (dx - cx)
    d2 = (bx - cx) * (dy - cy) - (by - cy) * (dx - cx)
    d3 = (cx - ax) * (by - ay) - (cy - ay) * (bx - ax)
    d4 = (dx - ax) * (by - ay) - (dy - ay) * (bx - ax)

    crossing = (d1 * d2 < 0) & (d3 * d4 < 0)

    s_i, t_i = src[:, None], dst[:, None]
    s_j, t_j = src[None, :], dst[None, :]
    shared = (s_i == s_j) | (s_i == t_j) | (t_i == s_j) | (t_i == t_j)

    crossing &= ~shared
    return int(np.triu(crossing, k=1).sum())


# -----------------------------
# Distances
# -----------------------------
def average_edge_length(vertices: Sequence[Vertex], edges: Sequence[Edge]) -> float:
    """Mean Euclidean length of resolvable edges; 0.0 if there are none."""
    src, dst, _ = resolve_edges(vertices, edges)
    if src.size == 0:
        return 0.0
    pos = positions_array(vertices)
    lengths = np.hypot(*(pos[src] - pos[dst]).T)
    return float(lengths.mean())


def min_pairwise_distance(vertices: Sequence[Vertex]) -> float:
    """Minimum distance over all vertex pairs; +inf with fewer than two vertices."""
    if len(vertices) < 2:
        return float("inf")
    return float(pdist(positions_array(vertices)).min())
