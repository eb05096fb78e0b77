from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Any, Mapping

from .config import settings


class LayoutConfigError(ValueError):
    """Raised when layout options cannot produce finite arithmetic."""


@dataclass(frozen=True)
class LayoutOptions:
    """Parameters of one force simulation run.

    width/height describe the simulation workspace only; results are always
    reported in the unit square. charge_strength < 0 repels, > 0 attracts.
    """

    width: float = settings.WIDTH
    height: float = settings.HEIGHT
    iterations: int = settings.ITERATIONS
    alpha: float = settings.ALPHA
    alpha_decay: float = settings.ALPHA_DECAY
    velocity_decay: float = settings.VELOCITY_DECAY
    charge_strength: float = settings.CHARGE_STRENGTH
    link_distance: float = settings.LINK_DISTANCE
    link_strength: float = settings.LINK_STRENGTH
    collision_radius: float = settings.COLLISION_RADIUS
    center_strength: float = settings.CENTER_STRENGTH
    distance_min: float = settings.CHARGE_DISTANCE_MIN
    seed: int = settings.DEFAULT_SEED

    def validate(self) -> "LayoutOptions":
        """Fail fast on values that would break the rescaling or the step loop."""
        for name in ("width", "height"):
            v = float(getattr(self, name))
            if not math.isfinite(v) or v <= 0:
                raise LayoutConfigError(f"{name} must be finite and >0, got {v!r}")
        if int(self.iterations) < 0:
            raise LayoutConfigError(f"iterations must be >=0, got {self.iterations!r}")
        for name in ("alpha_decay", "velocity_decay"):
            v = float(getattr(self, name))
            if not 0.0 <= v <= 1.0:
                raise LayoutConfigError(f"{name} must lie in [0, 1], got {v!r}")
        for name in (
            "alpha",
            "charge_strength",
            "link_distance",
            "link_strength",
            "collision_radius",
            "center_strength",
            "distance_min",
        ):
            v = float(getattr(self, name))
            if not math.isfinite(v):
                raise LayoutConfigError(f"{name} must be finite, got {v!r}")
        if self.collision_radius < 0 or self.distance_min < 0:
            raise LayoutConfigError("collision_radius and distance_min must be >=0")
        return self

    @property
    def center(self) -> tuple[float, float]:
        return float(self.width) / 2.0, float(self.height) / 2.0


def option_names() -> tuple[str, ...]:
    return tuple(f.name for f in dataclasses.fields(LayoutOptions))


def options_from_settings(**overrides: Any) -> LayoutOptions:
    """Create LayoutOptions from settings values, overriding a subset."""
    return with_overrides(LayoutOptions(), overrides)


def with_overrides(base: LayoutOptions, overrides: Mapping[str, Any]) -> LayoutOptions:
    """Return a copy of base with the given fields replaced. None values are ignored."""
    known = set(option_names())
    clean = {k: v for k, v in overrides.items() if v is not None}
    unknown = sorted(set(clean) - known)
    if unknown:
        raise LayoutConfigError(f"unknown layout options: {unknown}")
    ints = {"iterations", "seed"}
    typed = {}
    for k, v in clean.items():
        try:
            typed[k] = int(v) if k in ints else float(v)
        except (TypeError, ValueError) as exc:
            raise LayoutConfigError(f"layout option {k} is not numeric: {v!r}") from exc
    return dataclasses.replace(base, **typed)
