from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config_loader import load_layout_options
from .graph_build import graph_summary
from .io_load import load_graph
from .options import LayoutConfigError, with_overrides
from .report import export_layout_json, format_positions, format_results
from .services.optimizer_service import Optimizer

logger = logging.getLogger(__name__)

_OPTION_FLAGS = (
    ("--width", float, "width"),
    ("--height", float, "height"),
    ("--iterations", int, "iterations"),
    ("--alpha", float, "alpha"),
    ("--alpha-decay", float, "alpha_decay"),
    ("--velocity-decay", float, "velocity_decay"),
    ("--charge-strength", float, "charge_strength"),
    ("--link-distance", float, "link_distance"),
    ("--link-strength", float, "link_strength"),
    ("--collision-radius", float, "collision_radius"),
    ("--seed", int, "seed"),
)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="layoutlab",
        description="Force-directed layout optimizer: before/after crossings and distances.",
    )
    p.add_argument("input", type=str, help="Graph JSON, or CSV/Excel node table (id,x,y)")
    p.add_argument("--edges", type=str, default=None, help="CSV/Excel edge table (source,target)")
    p.add_argument("--config", type=str, default=None, help="YAML file with a 'layout:' section")
    for flag, typ, dest in _OPTION_FLAGS:
        p.add_argument(flag, type=typ, default=None, dest=dest)
    p.add_argument("--out", type=str, default=None, help="Write layout JSON here ('-' for stdout)")
    p.add_argument("--positions", action="store_true", help="Print optimized coordinates")
    p.add_argument("--summary", action="store_true", help="Print graph summary before optimizing")
    g = p.add_mutually_exclusive_group()
    g.add_argument("-v", "--verbose", action="store_true")
    g.add_argument("-q", "--quiet", action="store_true")
    return p


def main(argv: list[str] | None = None) -> int:
    """Optimize one graph layout and report metrics."""
    p = _build_parser()
    args = p.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        options = load_layout_options(Path(args.config) if args.config else None)
        overrides = {dest: getattr(args, dest) for _, _, dest in _OPTION_FLAGS}
        options = with_overrides(options, overrides).validate()
        graph = load_graph(Path(args.input), Path(args.edges) if args.edges else None)
    except (LayoutConfigError, ValueError, OSError) as exc:
        print(f"layoutlab: error: {exc}", file=sys.stderr)
        return 2

    if args.summary:
        print(graph_summary(graph))

    result = Optimizer(options).run(graph)

    if args.out == "-":
        print(export_layout_json(result))
        return 0

    print(format_results(result))
    if args.positions:
        print()
        print(format_positions(result))
    if args.out:
        Path(args.out).write_text(export_layout_json(result), encoding="utf-8")
        logger.info("layout written to %s", args.out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
