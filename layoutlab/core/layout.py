from __future__ import annotations

import logging
from typing import List

import numpy as np

from ..options import LayoutOptions
from ..state_models import Graph, Vertex
from ..utils import clamp01, positions_array, resolve_edges
from .forces import apply_center, apply_charge, apply_collide, apply_link, link_bias

logger = logging.getLogger(__name__)


def optimize_layout(graph: Graph, options: LayoutOptions | None = None) -> List[Vertex]:
    """Run a fixed-length force simulation and return repositioned vertices.

    The result has the same ids in the same order as graph.vertices, with
    every coordinate clamped into [0, 1]. The input graph is not modified.
    Edges with an unknown endpoint are skipped (and logged); self-loops are
    ignored by the link force.
    """
    opts = (options or LayoutOptions()).validate()
    vertices = graph.vertices
    n = len(vertices)
    if n == 0:
        return []

    size = np.array([float(opts.width), float(opts.height)])
    start = positions_array(vertices)
    bad = ~np.isfinite(start)
    if bad.any():
        logger.warning("%d non-finite coordinate(s) reset to 0.5", int(bad.sum()))
        start[bad] = 0.5
    pos = start * size
    overflow = ~np.isfinite(pos)
    if overflow.any():
        logger.warning("%d coordinate(s) overflow the workspace, reset to its center", int(overflow.sum()))
        pos[overflow] = (0.5 * np.broadcast_to(size, pos.shape))[overflow]
    vel = np.zeros_like(pos)

    src, dst, dangling = resolve_edges(vertices, graph.edges)
    if dangling:
        logger.warning("skipping %d edge(s) with unknown endpoints", dangling)
    keep = src != dst
    src, dst = src[keep], dst[keep]
    bias = link_bias(src, dst, n)

    rng = np.random.default_rng(int(opts.seed))
    cx, cy = opts.center
    alpha = float(opts.alpha)
    drag = 1.0 - float(opts.velocity_decay)

    logger.debug(
        "layout: n=%d links=%d iterations=%d alpha=%.4g",
        n,
        src.size,
        opts.iterations,
        alpha,
    )

    for _ in range(int(opts.iterations)):
        alpha *= 1.0 - float(opts.alpha_decay)

        apply_link(
            pos,
            vel,
            src,
            dst,
            bias,
            distance=float(opts.link_distance),
            strength=float(opts.link_strength),
            alpha=alpha,
            rng=rng,
        )
        apply_charge(
            pos,
            vel,
            strength=float(opts.charge_strength),
            distance_min=float(opts.distance_min),
            alpha=alpha,
            rng=rng,
        )
        apply_center(pos, cx=cx, cy=cy, strength=float(opts.center_strength))
        apply_collide(pos, vel, radius=float(opts.collision_radius), rng=rng)

        vel *= drag
        pos += vel

    logger.debug("layout: final alpha=%.4g", alpha)

    out = clamp01(np.nan_to_num(pos / size, nan=0.5, posinf=1.0, neginf=0.0))
    return [v.moved_to(x, y) for v, (x, y) in zip(vertices, out)]
