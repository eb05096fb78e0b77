import itertools
import math

import numpy as np
import pytest

from layoutlab.metrics import (
    average_edge_length,
    count_crossings,
    edges_cross,
    min_pairwise_distance,
    segments_cross,
)
from layoutlab.state_models import Edge, Vertex


def _v(*rows):
    return [Vertex(i, float(x), float(y)) for i, x, y in rows]


def test_unit_square_diagonals_cross_once():
    """Diagonals of the unit square cross exactly once."""
    vs = _v(("A", 0, 0), ("B", 1, 1), ("C", 1, 0), ("D", 0, 1))
    es = [Edge("A", "B"), Edge("C", "D")]
    assert count_crossings(vs, es) == 1


def test_parallel_horizontal_edges_do_not_cross():
    """Two horizontal edges never cross."""
    vs = _v(("A", 0, 0), ("B", 1, 0), ("C", 0, 1), ("D", 1, 1))
    es = [Edge("A", "B"), Edge("C", "D")]
    assert count_crossings(vs, es) == 0


def test_shared_endpoint_is_not_a_crossing():
    """Edges meeting at a vertex are excluded, including duplicates."""
    vs = _v(("A", 0.1, 0.1), ("B", 0.9, 0.1), ("C", 0.5, 0.5))
    es = [Edge("A", "B"), Edge("A", "C"), Edge("B", "C"), Edge("B", "A")]
    assert count_crossings(vs, es) == 0
    assert not edges_cross(vs, es[0], es[0])
    assert not edges_cross(vs, es[0], es[3])


def test_touching_and_collinear_segments_are_not_crossings():
    """T-junctions and collinear overlap fail the strict test."""
    assert not segments_cross((0, 0), (2, 0), (1, 0), (1, 1))
    assert not segments_cross((0, 0), (2, 0), (1, 0), (3, 0))
    assert segments_cross((0, 0), (2, 2), (0, 2), (2, 0))


def test_crossing_is_symmetric():
    """crosses(e1, e2) == crosses(e2, e1) for every pair."""
    rng = np.random.default_rng(7)
    vs = [Vertex(str(i), *rng.random(2)) for i in range(10)]
    es = [Edge(str(a), str(b)) for a, b in itertools.combinations(range(10), 2)][:25]
    for e1, e2 in itertools.combinations(es, 2):
        assert edges_cross(vs, e1, e2) == edges_cross(vs, e2, e1)


def test_count_matches_pairwise_checks():
    """Vectorized count agrees with the scalar pair test."""
    rng = np.random.default_rng(3)
    vs = [Vertex(str(i), *rng.random(2)) for i in range(12)]
    pairs = rng.choice(12, size=(20, 2))
    es = [Edge(str(a), str(b)) for a, b in pairs]
    expected = sum(edges_cross(vs, e1, e2) for e1, e2 in itertools.combinations(es, 2))
    assert count_crossings(vs, es) == expected


def test_dangling_edges_are_skipped():
    """Edges referencing unknown ids do not count anywhere."""
    vs = _v(("A", 0, 0), ("B", 1, 1), ("C", 1, 0), ("D", 0, 1))
    es = [Edge("A", "B"), Edge("C", "D"), Edge("A", "Z")]
    assert count_crossings(vs, es) == 1
    assert average_edge_length(vs, es) == pytest.approx(math.sqrt(2.0))
    assert not edges_cross(vs, es[1], es[2])


def test_average_distance_scenario():
    """Two unit-length edges average to 1."""
    vs = _v(("A", 0, 0), ("B", 1, 0), ("C", 0, 1))
    es = [Edge("A", "B"), Edge("A", "C")]
    assert average_edge_length(vs, es) == pytest.approx(1.0, abs=1e-6)


def test_average_distance_empty_and_self_loop():
    """No edges -> 0.0; a self-loop has length 0 but counts."""
    vs = _v(("A", 0, 0), ("B", 1, 1))
    assert average_edge_length(vs, []) == 0.0
    assert average_edge_length([], [Edge("A", "B")]) == 0.0
    assert average_edge_length(vs, [Edge("A", "A"), Edge("A", "B")]) == pytest.approx(math.sqrt(2) / 2)


def test_min_distance():
    """Minimum over all pairs, adjacency ignored."""
    vs = _v(("A", 0, 0), ("B", 0.5, 0.5), ("C", 1, 1))
    assert min_pairwise_distance(vs) == pytest.approx(math.sqrt(0.5), abs=1e-9)


def test_min_distance_sentinel():
    """Fewer than two vertices -> +inf."""
    assert min_pairwise_distance([]) == math.inf
    assert min_pairwise_distance(_v(("A", 0.5, 0.5))) == math.inf


def test_empty_inputs_are_defined():
    """No vertices and no edges is not an error."""
    assert count_crossings([], []) == 0
    assert count_crossings(_v(("A", 0, 0)), [Edge("A", "B")]) == 0
