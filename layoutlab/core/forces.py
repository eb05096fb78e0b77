"""
Силы симуляции. Каждая функция правит массивы pos/vel на месте.

pos, vel: (N, 2) float arrays in workspace units.
Semantics follow d3-force (link, manyBody, center, collide) with exact
O(N^2) pair sums instead of a Barnes-Hut quadtree.
"""

from __future__ import annotations

import numpy as np

from ..config import EPS_JIGGLE


def jiggle(rng: np.random.Generator, shape) -> np.ndarray:
    return (rng.random(shape) - 0.5) * EPS_JIGGLE


def link_bias(src: np.ndarray, dst: np.ndarray, n: int) -> np.ndarray:
    """Share of each link correction taken by the target endpoint.

    count(source) / (count(source) + count(target)); the busier endpoint moves less.
    """
    if src.size == 0:
        return np.zeros(0, dtype=float)
    count = np.bincount(np.concatenate([src, dst]), minlength=n).astype(float)
    return count[src] / (count[src] + count[dst])


def apply_link(
    pos: np.ndarray,
    vel: np.ndarray,
    src: np.ndarray,
    dst: np.ndarray,
    bias: np.ndarray,
    *,
    distance: float,
    strength: float,
    alpha: float,
    rng: np.random.Generator,
) -> None:
    # последовательно по рёбрам: каждое следующее видит уже обновлённые скорости
    for k in range(src.size):
        s = src[k]
        t = dst[k]
        d = (pos[t] + vel[t]) - (pos[s] + vel[s])
        if d[0] == 0.0:
            d[0] = jiggle(rng, ())
        if d[1] == 0.0:
            d[1] = jiggle(rng, ())
        length = float(np.hypot(d[0], d[1]))
        d *= (length - distance) / length * alpha * strength
        b = bias[k]
        vel[t] -= d * b
        vel[s] += d * (1.0 - b)


def apply_charge(
    pos: np.ndarray,
    vel: np.ndarray,
    *,
    strength: float,
    distance_min: float,
    alpha: float,
    rng: np.random.Generator,
) -> None:
    n = pos.shape[0]
    if n < 2 or strength == 0.0:
        return
    delta = pos[None, :, :] - pos[:, None, :]  # [i, j] = x_j - x_i
    off_diag = ~np.eye(n, dtype=bool)
    coincident = (delta == 0.0) & off_diag[..., None]
    if coincident.any():
        delta = np.where(coincident, jiggle(rng, delta.shape), delta)

    l2 = np.einsum("ijk,ijk->ij", delta, delta)
    dmin2 = distance_min * distance_min
    soft = l2 < dmin2
    if soft.any():
        l2 = np.where(soft, np.sqrt(dmin2 * l2), l2)
    np.fill_diagonal(l2, np.inf)

    w = strength * alpha / l2
    vel += np.einsum("ijk,ij->ik", delta, w)


def apply_center(pos: np.ndarray, *, cx: float, cy: float, strength: float) -> None:
    if pos.shape[0] == 0:
        return
    shift = (pos.mean(axis=0) - np.array([cx, cy])) * strength
    pos -= shift


def apply_collide(
    pos: np.ndarray,
    vel: np.ndarray,
    *,
    radius: float,
    strength: float = 1.0,
    rng: np.random.Generator,
) -> None:
    n = pos.shape[0]
    if n < 2 or radius <= 0:
        return
    p = pos + vel
    delta = p[:, None, :] - p[None, :, :]  # [i, j] = p_i - p_j
    upper = np.triu(np.ones((n, n), dtype=bool), k=1)
    coincident = (delta == 0.0) & upper[..., None]
    if coincident.any():
        delta = np.where(coincident, jiggle(rng, delta.shape), delta)

    reach = 2.0 * radius
    l2 = np.einsum("ijk,ijk->ij", delta, delta)
    overlap = upper & (l2 < reach * reach)
    if not overlap.any():
        return

    length = np.sqrt(np.where(overlap, l2, 1.0))
    scale = np.where(overlap, (reach - length) / length * strength, 0.0)
    push = delta * scale[..., None]
    # равные радиусы: поправка делится пополам
    vel += 0.5 * push.sum(axis=1)
    vel -= 0.5 * push.sum(axis=0)
