from layoutlab.state_models import Vertex
from layoutlab.viewport import hit_test, to_canvas


def test_to_canvas_uses_padding():
    """Unit square maps onto [padding, size - padding]."""
    pts = to_canvas([Vertex("A", 0.0, 0.0), Vertex("B", 1.0, 1.0)], 800, 600)
    assert pts["A"] == (50.0, 50.0)
    assert pts["B"] == (750.0, 550.0)


def test_hit_test():
    """Point inside a disc returns its id, outside returns None."""
    vs = [Vertex("A", 0.0, 0.0), Vertex("B", 0.5, 0.5)]
    assert hit_test(vs, 52, 53, 800, 600, radius=8) == "A"
    assert hit_test(vs, 400, 300, 800, 600, radius=8) == "B"
    assert hit_test(vs, 200, 200, 800, 600, radius=8) is None


def test_hit_test_prefers_nearest():
    """Overlapping discs resolve to the closest centre."""
    vs = [Vertex("A", 0.5, 0.5), Vertex("B", 0.51, 0.5)]
    # A at x=400, B at x=407
    assert hit_test(vs, 406, 300, 800, 600, radius=10) == "B"
    assert hit_test(vs, 401, 300, 800, 600, radius=10) == "A"
