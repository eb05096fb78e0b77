from __future__ import annotations

from typing import Dict, Sequence, Tuple

import numpy as np

from .state_models import Edge, Vertex


def index_by_id(vertices: Sequence[Vertex]) -> Dict[str, int]:
    # при повторе id побеждает последний, как в Map
    return {v.id: i for i, v in enumerate(vertices)}


def positions_array(vertices: Sequence[Vertex]) -> np.ndarray:
    """(N, 2) float array of vertex positions, in input order."""
    if not vertices:
        return np.zeros((0, 2), dtype=float)
    return np.asarray([(float(v.x), float(v.y)) for v in vertices], dtype=float)


def resolve_edges(
    vertices: Sequence[Vertex],
    edges: Sequence[Edge],
) -> Tuple[np.ndarray, np.ndarray, int]:
    """Map edges to (src_idx, dst_idx) arrays.

    Edges with an endpoint that is not among the vertices are skipped;
    the third value is how many were skipped.
    """
    idx = index_by_id(vertices)
    src: list[int] = []
    dst: list[int] = []
    dangling = 0
    for e in edges:
        s = idx.get(e.source)
        t = idx.get(e.target)
        if s is None or t is None:
            dangling += 1
            continue
        src.append(s)
        dst.append(t)
    return np.asarray(src, dtype=int), np.asarray(dst, dtype=int), dangling


def clamp01(a: np.ndarray) -> np.ndarray:
    return np.clip(a, 0.0, 1.0)
