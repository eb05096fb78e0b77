"""
дефолтные настройки приложения

"""

from __future__ import annotations

from dataclasses import dataclass

# =========================
# Numerical stability
# =========================
EPS_JIGGLE: float = 1e-6     # amplitude of the random nudge for coincident vertices

# =========================
# Force simulation (d3-force compatible defaults)
# =========================
LAYOUT_WIDTH: float = 800.0
LAYOUT_HEIGHT: float = 600.0
LAYOUT_ITERATIONS: int = 300
LAYOUT_ALPHA: float = 0.3
LAYOUT_ALPHA_DECAY: float = 0.0228
LAYOUT_VELOCITY_DECAY: float = 0.4
CHARGE_STRENGTH: float = -30.0
CHARGE_DISTANCE_MIN: float = 1.0
LINK_DISTANCE: float = 100.0
LINK_STRENGTH: float = 1.0
CENTER_STRENGTH: float = 1.0
COLLISION_RADIUS: float = 20.0


@dataclass(frozen=True)
class Settings:
    # Расчёты
    DEFAULT_SEED: int = 42

    WIDTH: float = LAYOUT_WIDTH
    HEIGHT: float = LAYOUT_HEIGHT
    ITERATIONS: int = LAYOUT_ITERATIONS
    ALPHA: float = LAYOUT_ALPHA
    ALPHA_DECAY: float = LAYOUT_ALPHA_DECAY
    VELOCITY_DECAY: float = LAYOUT_VELOCITY_DECAY
    CHARGE_STRENGTH: float = CHARGE_STRENGTH
    CHARGE_DISTANCE_MIN: float = CHARGE_DISTANCE_MIN
    LINK_DISTANCE: float = LINK_DISTANCE
    LINK_STRENGTH: float = LINK_STRENGTH
    CENTER_STRENGTH: float = CENTER_STRENGTH
    COLLISION_RADIUS: float = COLLISION_RADIUS

    # Отчёт
    REPORT_DECIMALS: int = 4
    JSON_INDENT: int = 2

    # Визуал (для внешнего рендера)
    VIEWPORT_PADDING: float = 50.0
    NODE_RADIUS: float = 8.0


settings = Settings()
