"""
Command-line interface for grid pathfinding and road distances.

Usage:
    python -m shortestpath path                       # input/input.png -> output/output.png
    python -m shortestpath path maze.png --start 10,10 --goal 200,150
    python -m shortestpath road                       # input/original.jpg -> output/output2.png
    python -m shortestpath --help
"""

import argparse
from typing import List, Optional

import numpy as np

from .config import PathConfig, RoadConfig, parse_point
from .grid import PixelGrid, find_path
from .image_io import load_image, save_image
from .moves import MOVE_SETS
from .road import default_road
from .visualization import draw_path, draw_road, annotate_road_distances


def run_path(config: PathConfig) -> int:
    """Find a path on the configured image and render it. Returns exit code."""
    print("=" * 60)
    print("Shortest Path")
    print("=" * 60)

    print(f"Loading: {config.input_path}")
    image = load_image(config.input_path)
    height, width = image.shape[:2]
    print(f"  Size: {width}x{height}")

    grid = PixelGrid.from_image(
        image,
        MOVE_SETS[config.moves],
        min_red=config.min_red,
        max_green=config.max_green,
        max_blue=config.max_blue
    )
    print(f"  Blocked pixels: {int(grid.blocking_mask.sum())}")
    print(f"  Moves: {config.moves}")

    result = find_path(
        grid, config.start, config.goal,
        stop_at_first_target=config.stop_at_first_target
    )
    print()
    print(result.summary())

    if not result.success:
        print("no path")
        return 1

    rendered = draw_path(image, result.path, dot_size=config.dot_size)
    save_image(rendered, config.output_path, timestamp=config.timestamp)
    return 0


def run_road(config: RoadConfig) -> int:
    """Draw the default road and label random nearby points with distances."""
    print("=" * 60)
    print("Road Distances")
    print("=" * 60)

    print(f"Loading: {config.input_path}")
    image = load_image(config.input_path)

    road = default_road()
    rng = np.random.default_rng(config.seed)

    rendered = draw_road(image, road)
    rendered = annotate_road_distances(
        rendered, road,
        samples_per_segment=config.samples_per_segment,
        jitter=config.jitter,
        rng=rng
    )
    save_image(rendered, config.output_path, timestamp=config.timestamp)
    return 0


def _point_arg(text: str):
    try:
        return parse_point(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _positive_int_arg(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected an integer, got {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    path_defaults = PathConfig()
    road_defaults = RoadConfig()

    parser = argparse.ArgumentParser(
        prog="shortestpath",
        description="Shortest paths around red obstacles in images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m shortestpath path
  python -m shortestpath path maze.png --start 10,10 --goal 200,150 --moves 8
  python -m shortestpath road --seed 7
        """
    )
    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("path", help="Find and draw the shortest path")
    p.add_argument(
        "input", nargs="?", default=path_defaults.input_path,
        help=f"Input image (default: {path_defaults.input_path})"
    )
    p.add_argument(
        "--output", "-o", default=path_defaults.output_path,
        help=f"Output image (default: {path_defaults.output_path})"
    )
    p.add_argument(
        "--start", "-s", type=_point_arg, default=path_defaults.start,
        help="Start pixel as x,y; use --start=x,y when x is negative (default: 570,100)"
    )
    p.add_argument(
        "--goal", "-g", type=_point_arg, default=path_defaults.goal,
        help="Goal pixel as x,y; use --goal=x,y when x is negative (default: 320,300)"
    )
    p.add_argument(
        "--moves", "-m", choices=sorted(MOVE_SETS), default=path_defaults.moves,
        help="Move set: 4, 8 or 16 with knight moves (default: 16)"
    )
    p.add_argument(
        "--early-exit", action="store_true",
        help="Stop searching once the goal is settled"
    )
    p.add_argument(
        "--dot-size", type=_positive_int_arg, default=path_defaults.dot_size,
        help=f"Path dot diameter (default: {path_defaults.dot_size})"
    )
    p.add_argument(
        "--timestamp", action="store_true",
        help="Add a timestamp to the output filename"
    )

    r = sub.add_parser("road", help="Label points near a road with their distance")
    r.add_argument(
        "input", nargs="?", default=road_defaults.input_path,
        help=f"Input image (default: {road_defaults.input_path})"
    )
    r.add_argument(
        "--output", "-o", default=road_defaults.output_path,
        help=f"Output image (default: {road_defaults.output_path})"
    )
    r.add_argument(
        "--samples", type=int, default=road_defaults.samples_per_segment,
        help="Points per segment (default: 3)"
    )
    r.add_argument(
        "--jitter", type=float, default=road_defaults.jitter,
        help="Max offset from the road (default: 10.0)"
    )
    r.add_argument("--seed", type=int, default=None, help="Random seed")
    r.add_argument(
        "--timestamp", action="store_true",
        help="Add a timestamp to the output filename"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "path":
        config = PathConfig(
            input_path=args.input,
            output_path=args.output,
            start=args.start,
            goal=args.goal,
            moves=args.moves,
            stop_at_first_target=args.early_exit,
            timestamp=args.timestamp,
            dot_size=args.dot_size
        )
        return run_path(config)
    elif args.command == "road":
        config = RoadConfig(
            input_path=args.input,
            output_path=args.output,
            samples_per_segment=args.samples,
            jitter=args.jitter,
            seed=args.seed,
            timestamp=args.timestamp
        )
        return run_road(config)
    else:
        parser.print_help()
        print("\nRun 'path' to find a path, or 'road' for road distances")
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
