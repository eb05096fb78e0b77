from __future__ import annotations

import dataclasses
import logging
from typing import Any, Dict, Iterable, Sequence

from ..core.layout import optimize_layout
from ..core.scoring import calculate_layout_metrics, compare_metrics
from ..options import LayoutOptions
from ..state_models import Edge, Graph, MetricsPair, OptimizationResult, Vertex

logger = logging.getLogger(__name__)


def all_within_unit_square(vertices: Iterable[Vertex]) -> bool:
    """True iff every x and y lies in [0, 1]; True for no vertices."""
    return all(0.0 <= v.x <= 1.0 and 0.0 <= v.y <= 1.0 for v in vertices)


class Optimizer:
    """Metrics on the input, force layout, metrics on the output."""

    def __init__(self, options: LayoutOptions | None = None) -> None:
        self.options = (options or LayoutOptions()).validate()

    def run(self, graph: Graph) -> OptimizationResult:
        before = calculate_layout_metrics(graph.vertices, graph.edges)
        optimized = optimize_layout(graph, self.options)
        after = calculate_layout_metrics(optimized, graph.edges)

        logger.info(
            "crossings %d -> %d, avg edge %.4f -> %.4f",
            before.crossings,
            after.crossings,
            before.average_distance,
            after.average_distance,
        )

        return OptimizationResult(
            original_vertices=tuple(graph.vertices),
            optimized_vertices=tuple(optimized),
            edges=tuple(graph.edges),
            metrics=MetricsPair(before=before, after=after),
            options=dataclasses.asdict(self.options),
        )

    @staticmethod
    def compare_layouts(
        original: Sequence[Vertex],
        optimized: Sequence[Vertex],
        edges: Sequence[Edge],
    ) -> Dict[str, Any]:
        return compare_metrics(
            calculate_layout_metrics(original, edges),
            calculate_layout_metrics(optimized, edges),
        )

    @staticmethod
    def validate_coordinates(vertices: Iterable[Vertex]) -> bool:
        return all_within_unit_square(vertices)
