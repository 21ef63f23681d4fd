import argparse
import json
import logging
import math
import sys
from pathlib import Path
from typing import Optional, Sequence

from roadgraph import (
    GridGenerationError,
    OptionsError,
    PipelineOptions,
    build_road_graph,
    extract_graph,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _load_segments(path: str) -> list:
    with open(path, encoding="utf-8") as fin:
        data = json.load(fin)
    if isinstance(data, dict):
        data = data.get("lines", data.get("segments"))
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON list of [x1, y1, x2, y2] segments")
    return data


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Build a road graph from detected line segments")
    parser.add_argument("path", help="JSON file holding a list of [x1, y1, x2, y2] segments")
    parser.add_argument("--output", help="Write the graph JSON here instead of stdout")
    parser.add_argument(
        "--road",
        action="store_true",
        help="Emit the road graph (grid nodes and connector lines) instead of the extracted graph",
    )
    parser.add_argument(
        "--distance-threshold",
        type=float,
        default=10.0,
        help="Endpoint merge radius in pixels (default: 10)",
    )
    parser.add_argument(
        "--line-distance-threshold",
        type=float,
        default=5.0,
        help="Midpoint distance for duplicate segments in pixels (default: 5)",
    )
    parser.add_argument(
        "--angle-threshold",
        type=float,
        default=2.5,
        help="Angle tolerance for duplicate segments in degrees (default: 2.5)",
    )
    parser.add_argument(
        "--max-contain",
        type=int,
        default=0,
        help="Number of enclosing quadrilaterals a grid node may sit in (default: 0)",
    )
    parser.add_argument("--num-x", type=int, default=15, help="Grid columns (default: 15)")
    parser.add_argument("--num-y", type=int, help="Grid rows (default: same as --num-x)")
    parser.add_argument(
        "--spacing-reference",
        choices=["graph", "grid"],
        default="graph",
        help="Node set used for road spacing statistics (default: graph)",
    )
    parser.add_argument(
        "--omit-nodes-list",
        action="store_true",
        help="Leave the pre-densification nodesList out of the output",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    options = PipelineOptions(
        distance_threshold=args.distance_threshold,
        line_distance_threshold=args.line_distance_threshold,
        angle_threshold=math.radians(args.angle_threshold),
        max_contain_count=args.max_contain,
        num_x=args.num_x,
        num_y=args.num_y,
        spacing_reference=args.spacing_reference,
    )
    logger.info(
        "Dedup within %.3g px and %.3g deg, merge within %.3g px",
        options.line_distance_threshold,
        options.angle_threshold_degrees,
        options.distance_threshold,
    )

    try:
        segments = _load_segments(args.path)
        logger.info("Loaded %d segment(s) from %s", len(segments), args.path)
        graph = extract_graph(segments, options)
        if args.road:
            graph = build_road_graph(graph, options)
    except (OptionsError, GridGenerationError, ValueError) as exc:
        logger.error("Failed to build graph from %s: %s", args.path, exc)
        raise SystemExit(1) from exc

    document = json.dumps(graph.to_dict(include_nodes_list=not args.omit_nodes_list), indent=2)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document + "\n", encoding="utf-8")
        print(f"Graph written to {output_path}")
    else:
        print(document)

    print(f"Nodes: {len(graph.nodes)}", file=sys.stderr)
    print(f"Lines: {len(graph.lines)}", file=sys.stderr)


if __name__ == "__main__":
    main(sys.argv[1:])
