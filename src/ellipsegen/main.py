"""
main.py - Entry point for the ellipse point-set demo.

With no arguments: 100 points, semi-major axis drawn from [10, 20), semi-minor
axis from [1, 3), random rotation on a coin flip, unit-square bounding box.
Each point is printed as "(x, y)" on its own line in generation order.
"""

import sys
import logging
import argparse
from dataclasses import asdict, replace
from pathlib import Path
from typing import Optional, Sequence

import matplotlib
matplotlib.use("Agg")  # headless; the demo only ever saves to file
import matplotlib.pyplot as plt

from .config import DemoConfig
from .ellipse import BoundingBox
from .errors import EllipseGenError
from .sampler import EllipseSampler
from .utils.logging_utils import configure_logging
from .utils.rng import RNG

LOGGER_NAME = "ellipsegen"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ellipsegen",
        description="Generate random ellipse points fitted into a bounding box.",
    )
    parser.add_argument("--points", type=int, default=None,
                        help="Number of points (default: 100)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for a reproducible run")
    rot = parser.add_mutually_exclusive_group()
    rot.add_argument("--rotate", dest="rotate", action="store_true", default=None,
                     help="Always rotate the ellipse by a random angle")
    rot.add_argument("--no-rotate", dest="rotate", action="store_false",
                     help="Never rotate the ellipse")
    parser.set_defaults(rotate=None)
    parser.add_argument("--box", type=float, nargs=4, default=None,
                        metavar=("XMIN", "XMAX", "YMIN", "YMAX"),
                        help="Bounding box (default: 0 1 0 1)")
    parser.add_argument("--plot", type=Path, default=None, metavar="PATH",
                        help="Also save a PNG rendering of the points")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--log-dir", type=Path, default=None,
                        help="Additionally write a rotating log file here")
    return parser


def config_from_args(args: argparse.Namespace) -> DemoConfig:
    config = DemoConfig()
    overrides = {
        "logger_level": getattr(logging, args.log_level),
        "log_dir": args.log_dir,
        "rotate": args.rotate,
        "seed": args.seed,
        "plot_path": args.plot,
    }
    if args.points is not None:
        overrides["number_of_points"] = args.points
    if args.box is not None:
        overrides["box"] = tuple(args.box)
    return replace(config, **overrides)


def save_plot(sampler: EllipseSampler, box: BoundingBox, path: Path) -> Path:
    """Render the points and the target box into a PNG file."""
    fig, ax = plt.subplots(figsize=(6, 6))
    try:
        sampler.draw(ax, edgecolor="steelblue", linewidth=1.5)
        xs, ys = sampler.points.T
        ax.scatter(xs, ys, s=6, color="tomato", zorder=3)
        ax.add_patch(plt.Rectangle((box.x_min, box.y_min), box.width, box.height,
                                   fill=False, linestyle="--", edgecolor="gray"))
        ax.set_aspect("equal")
        ax.autoscale_view()
        path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(path, dpi=100)
    finally:
        plt.close(fig)
    return path


def run(config: DemoConfig) -> EllipseSampler:
    """Draw demo parameters from `config` and generate the point set."""
    logger = logging.getLogger(LOGGER_NAME)
    rng = RNG(seed=config.seed)

    lo, hi = config.semi_major_range
    semi_major_axis = rng.uniform(lo, hi)
    lo, hi = config.semi_minor_range
    semi_minor_axis = rng.uniform(lo, hi)
    rotate = rng.coin() if config.rotate is None else config.rotate

    logger.info(f"a={semi_major_axis:.6f}, b={semi_minor_axis:.6f}, rotate={rotate}")
    return EllipseSampler().make_geometry(
        config.number_of_points, semi_major_axis, semi_minor_axis,
        rotate=rotate, box=config.box, rng=rng,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)

    configure_logging(level=config.logger_level, log_dir=config.log_dir,
                      name=LOGGER_NAME, run_prefix="ellipsegen")
    logger = logging.getLogger(LOGGER_NAME)
    logger.debug(f"DemoConfig: {asdict(config)}")

    try:
        sampler = run(config)
    except EllipseGenError as e:
        logger.critical(str(e))
        return 2

    logger.debug(f"Transform metadata: {sampler.json}")
    for x, y in sampler.iter_points():
        print(f"({x}, {y})")

    if config.plot_path is not None:
        path = save_plot(sampler, BoundingBox(*config.box), config.plot_path)
        logger.info(f"Plot written: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
