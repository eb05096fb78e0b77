import pytest

from layoutlab.state_models import build_graph


@pytest.fixture
def square_cycle():
    """4-cycle A-B-C-D with C placed on the A-B segment."""
    return build_graph(
        vertices=[("A", 0.1, 0.1), ("B", 0.9, 0.9), ("C", 0.5, 0.5), ("D", 0.2, 0.8)],
        edges=[("A", "B"), ("B", "C"), ("C", "D"), ("A", "D")],
    )


@pytest.fixture
def tangled_graph():
    """Small district-like graph laid out with several crossings."""
    return build_graph(
        vertices=[
            ("Chitipa", 0.9, 0.1),
            ("Karonga", 0.1, 0.9),
            ("Rumphi", 0.8, 0.8),
            ("Mzimba", 0.2, 0.2),
            ("Nkhata Bay", 0.5, 0.1),
            ("Likoma", 0.5, 0.9),
            ("Kasungu", 0.1, 0.5),
            ("Nkhotakota", 0.9, 0.5),
        ],
        edges=[
            ("Chitipa", "Karonga"),
            ("Karonga", "Rumphi"),
            ("Rumphi", "Mzimba"),
            ("Mzimba", "Nkhata Bay"),
            ("Nkhata Bay", "Likoma"),
            ("Mzimba", "Kasungu"),
            ("Kasungu", "Nkhotakota"),
            ("Nkhata Bay", "Nkhotakota"),
            ("Chitipa", "Rumphi"),
        ],
    )
