"""
Текстовый и JSON отчёт по одному OptimizationResult.

Both outputs read the same metrics objects; nothing is recomputed here.
"""

from __future__ import annotations

import json
import math
from typing import Any, Dict

from .config import settings
from .core.scoring import compare_metrics
from .services.optimizer_service import all_within_unit_square
from .state_models import OptimizationResult


def _fmt(x: float, nd: int) -> str:
    return f"{x:.{nd}f}" if math.isfinite(x) else str(x)


def format_results(result: OptimizationResult, decimals: int = settings.REPORT_DECIMALS) -> str:
    before = result.metrics.before
    after = result.metrics.after
    diff = compare_metrics(before, after)

    reduction = diff["crossing_reduction"]
    reduction_pct = f"{reduction / before.crossings * 100:.1f}" if before.crossings > 0 else "0"
    valid = all_within_unit_square(result.optimized_vertices)

    lines = [
        "Graph Optimization Results:",
        "==========================",
        "",
        "Edge Crossings:",
        f"- Original: {before.crossings}",
        f"- Optimized: {after.crossings}",
        f"- Reduction: {reduction} ({reduction_pct}%)",
        "",
        "Average Distance Between Connected Nodes:",
        f"- Original: {_fmt(before.average_distance, decimals)}",
        f"- Optimized: {_fmt(after.average_distance, decimals)}",
        f"- Change: {_fmt(diff['distance_improvement'], decimals)}",
        "",
        "Minimum Distance Between Any Two Nodes:",
        f"- Original: {_fmt(before.min_distance, decimals)}",
        f"- Optimized: {_fmt(after.min_distance, decimals)}",
        f"- Change: {_fmt(diff['min_distance_improvement'], decimals)}",
        "",
        f"Coordinate Validation: {'PASS' if valid else 'FAIL'}",
    ]
    return "\n".join(lines)


def format_positions(result: OptimizationResult, decimals: int = settings.REPORT_DECIMALS) -> str:
    rows = ["Optimized Node Positions:", "=========================="]
    for v in result.optimized_vertices:
        rows.append(f"{v.id}: ({v.x:.{decimals}f}, {v.y:.{decimals}f})")
    return "\n".join(rows)


def result_payload(result: OptimizationResult) -> Dict[str, Any]:
    """{nodes, edges, metrics} view of a run. Non-finite floats become None."""
    return {
        "nodes": [v.to_dict() for v in result.optimized_vertices],
        "edges": [e.to_dict() for e in result.edges],
        "metrics": {
            "before": result.metrics.before.to_dict(),
            "after": result.metrics.after.to_dict(),
        },
    }


def export_layout_json(result: OptimizationResult, indent: int = settings.JSON_INDENT) -> str:
    return json.dumps(result_payload(result), ensure_ascii=False, indent=indent, allow_nan=False)
