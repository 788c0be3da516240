"""Command-line interface."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from spatialgraph.analysis.graph import Graph
from spatialgraph.config import SAMPLE_SKILLS_PATH, LayoutSettings, load_settings
from spatialgraph.controller.graph_builder import build_graph
from spatialgraph.controller.placement import place_on_ring
from spatialgraph.dev import timer
from spatialgraph.errors import SpatialGraphError
from spatialgraph.logging_config import setup_logging
from spatialgraph.model.io import export_scene, load_records, scene_to_dict
from spatialgraph.solvers.eades import EadesForceModel
from spatialgraph.solvers.layout import ErrorMetric, LayoutResult, SpringEmbedderLayout

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spatialgraph",
        description="Lay out a skill graph in 3D with an Eades spring embedder.",
    )
    parser.add_argument("records", nargs="?", default=None,
                        help="JSON array of {primaryItem, relatedItems} records (default: bundled sample)")
    parser.add_argument("-o", "--output", default=None, help="Scene JSON output path (default: stdout)")
    parser.add_argument("--settings", default=None, help="JSON file with layout settings")
    parser.add_argument("--repulsion", type=float, default=None)
    parser.add_argument("--attraction", type=float, default=None)
    parser.add_argument("--ideal-length", type=float, default=None)
    parser.add_argument("--cool-down", type=float, default=None)
    parser.add_argument("--error-threshold", type=float, default=None,
                        help="Per-node convergence threshold (default: 0.1 for signed, 1e-4 for magnitude)")
    parser.add_argument("--max-iterations", type=int, default=None)
    parser.add_argument("--metric", choices=[m.value for m in ErrorMetric], default=None,
                        help="Convergence error metric")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the tie-breaking jitter")
    parser.add_argument("--no-ring", action="store_true",
                        help="Start every node at the origin instead of on a ring")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None)
    return parser


def resolve_settings(args: argparse.Namespace) -> LayoutSettings:
    settings = load_settings(args.settings) if args.settings else LayoutSettings()
    return settings.updated(
        repulsion=args.repulsion,
        attraction=args.attraction,
        ideal_length=args.ideal_length,
        cool_down=args.cool_down,
        error_threshold=args.error_threshold,
        max_iterations=args.max_iterations,
        error_metric=args.metric,
        seed=args.seed,
    )


def run_layout(graph: Graph, settings: LayoutSettings, ring: bool = True) -> LayoutResult:
    """Lay out ``graph`` in place with the given settings."""
    if ring:
        place_on_ring(graph.nodes, radius=settings.ring_radius)
    force_model = EadesForceModel(
        repulsion=settings.repulsion,
        attraction=settings.attraction,
        ideal_length=settings.ideal_length,
        seed=settings.seed,
    )
    engine = SpringEmbedderLayout(
        force_model=force_model,
        cool_down=settings.cool_down,
        error_threshold=settings.error_threshold,
        max_iterations=settings.max_iterations,
        error_metric=settings.error_metric,
    )
    logger.info(f"Running {engine!r}")
    return engine.layout(graph.nodes)


@timer
def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    try:
        settings = resolve_settings(args)
        records = load_records(args.records or SAMPLE_SKILLS_PATH)
        graph = build_graph(records)
        result = run_layout(graph, settings, ring=not args.no_ring)

        if args.output:
            export_scene(graph, args.output, result)
        else:
            json.dump(scene_to_dict(graph, result), sys.stdout, indent=2)
            sys.stdout.write("\n")
    except (SpatialGraphError, ValueError, OSError) as e:
        logger.error(f"Layout failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
