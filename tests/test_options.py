import pytest

from layoutlab.config import settings
from layoutlab.config_loader import load_layout_options
from layoutlab.options import LayoutConfigError, LayoutOptions, options_from_settings, with_overrides


def test_defaults_follow_settings():
    """Defaults match the application settings."""
    opts = LayoutOptions()
    assert opts.width == settings.WIDTH
    assert opts.iterations == settings.ITERATIONS
    assert opts.charge_strength < 0
    assert opts.center == (settings.WIDTH / 2, settings.HEIGHT / 2)


def test_with_overrides_ignores_none_and_casts():
    """None leaves a field alone; ints stay ints."""
    opts = with_overrides(LayoutOptions(), {"iterations": "50", "alpha": None, "width": 1000})
    assert opts.iterations == 50
    assert opts.alpha == settings.ALPHA
    assert opts.width == 1000.0


def test_with_overrides_rejects_unknown_and_non_numeric():
    """Unknown keys and junk values are configuration errors."""
    with pytest.raises(LayoutConfigError):
        options_from_settings(gravity=9.8)
    with pytest.raises(LayoutConfigError):
        options_from_settings(width="wide")


def test_options_are_immutable():
    """LayoutOptions is frozen."""
    with pytest.raises(AttributeError):
        LayoutOptions().width = 10  # type: ignore[misc]


def test_load_layout_options_from_yaml(tmp_path):
    """The layout: section overrides defaults."""
    p = tmp_path / "layout.yaml"
    p.write_text("layout:\n  iterations: 42\n  charge_strength: -60\n", encoding="utf-8")
    opts = load_layout_options(p)
    assert opts.iterations == 42
    assert opts.charge_strength == -60.0
    assert opts.link_distance == settings.LINK_DISTANCE


def test_load_layout_options_missing_file(tmp_path):
    """No file -> base options unchanged."""
    base = LayoutOptions(iterations=7)
    assert load_layout_options(tmp_path / "absent.yaml", base) == base


def test_load_layout_options_validates(tmp_path):
    """Invalid values in YAML fail on load."""
    p = tmp_path / "layout.yaml"
    p.write_text("layout:\n  width: 0\n", encoding="utf-8")
    with pytest.raises(LayoutConfigError):
        load_layout_options(p)
    p.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(LayoutConfigError):
        load_layout_options(p)
