"""Layout options from a YAML file.

    layout:
      iterations: 500
      charge_strength: -60
"""

from __future__ import annotations

from pathlib import Path

import yaml

from .options import LayoutConfigError, LayoutOptions, with_overrides


def _project_root() -> Path:
    return Path(__file__).resolve().parents[1]


def default_config_path() -> Path:
    return _project_root() / "config" / "layout.yaml"


def load_layout_options(path: Path | None = None, base: LayoutOptions | None = None) -> LayoutOptions:
    """Overlay the file's `layout:` mapping on base (defaults when omitted).

    A missing file gives base unchanged.
    """
    base = base or LayoutOptions()
    path = Path(path) if path is not None else default_config_path()
    if not path.exists():
        return base
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise LayoutConfigError(f"{path}: expected a mapping at top level")
    section = data.get("layout", {}) or {}
    if not isinstance(section, dict):
        raise LayoutConfigError(f"{path}: 'layout' must be a mapping")
    return with_overrides(base, section).validate()
