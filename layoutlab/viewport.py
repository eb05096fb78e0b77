from __future__ import annotations

import math
from typing import Dict, Optional, Sequence, Tuple

from .config import settings
from .state_models import Vertex


def to_canvas(
    vertices: Sequence[Vertex],
    width: float,
    height: float,
    padding: float = settings.VIEWPORT_PADDING,
) -> Dict[str, Tuple[float, float]]:
    """Map unit-square positions to canvas pixels: [0, 1] -> [padding, size - padding]."""
    sx = float(width) - 2.0 * padding
    sy = float(height) - 2.0 * padding
    return {v.id: (padding + v.x * sx, padding + v.y * sy) for v in vertices}


def hit_test(
    vertices: Sequence[Vertex],
    px: float,
    py: float,
    width: float,
    height: float,
    radius: float = settings.NODE_RADIUS,
    padding: float = settings.VIEWPORT_PADDING,
) -> Optional[str]:
    """Id of the vertex whose disc contains canvas point (px, py), or None.

    Overlapping discs resolve to the nearest centre; ties go to the earlier vertex.
    """
    best_id: Optional[str] = None
    best_d = math.inf
    for vid, (cx, cy) in to_canvas(vertices, width, height, padding).items():
        d = math.hypot(px - cx, py - cy)
        if d <= radius and d < best_d:
            best_id, best_d = vid, d
    return best_id
