#!/usr/bin/env python3
"""
Render Poisson disk samples and sampler progress with matplotlib.

Running the module drives a sampler the way an animation loop would, a
fixed number of steps per frame until it converges, and saves the result
as an image.
"""

from pathlib import Path
from typing import Optional, Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from matplotlib.collections import PatchCollection
from matplotlib.colors import ListedColormap
from matplotlib.patches import Circle
import structlog

from .config import Settings, settings as default_settings
from .core.alea_prng import AleaPRNG
from .core.sampler import PoissonDisk
from .core.sampling_analysis import analyze_samples
from .core.status_map import CellStatus
from .utils.setup_logging import configure_logging

logger = structlog.get_logger()

# Indexed by CellStatus value
STATUS_COLORS = ListedColormap(["#ffffff", "#9e9e9e", "#d62728"])


def render_samples(sampler: PoissonDisk, ax=None, draw_radius: bool = False):
    """
    Plot every accepted sample as a dot.

    Args:
        sampler: Sampler to draw
        ax: Axes to draw into, a new figure is created when omitted
        draw_radius: Also outline each sample's exclusion circle

    Returns:
        The axes drawn into
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8 * sampler.height / sampler.width))

    points = sampler.points()
    if len(points):
        ax.scatter(points[:, 0], points[:, 1], s=2, c="#000000", marker=".")

    if draw_radius and len(points):
        circles = [Circle((x, y), sampler.radius) for x, y in points]
        ax.add_collection(
            PatchCollection(circles, facecolor="none", edgecolor="#1f77b4", linewidth=0.3)
        )

    ax.set_xlim(0, sampler.width)
    # Image coordinates: y grows downwards
    ax.set_ylim(sampler.height, 0)
    ax.set_aspect("equal")
    ax.set_title(f"{sampler.num_points()} samples, r={sampler.radius}")
    return ax


def render_status_map(sampler: PoissonDisk, ax=None):
    """Show the EMPTY / DEAD / ACTIVE status of every domain location."""
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8 * sampler.height / sampler.width))

    ax.imshow(
        sampler.status.as_array(),
        cmap=STATUS_COLORS,
        vmin=CellStatus.EMPTY,
        vmax=CellStatus.ACTIVE,
        interpolation="nearest",
    )
    ax.set_title(f"Frontier: {sampler.frontier_size} active")
    return ax


def save_visualization(
    sampler: PoissonDisk, output: Path, draw_radius: bool = False, dpi: int = 150
) -> Path:
    """Save samples and status map side by side to ``output``."""
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)

    fig, (ax_samples, ax_status) = plt.subplots(1, 2, figsize=(16, 8))
    try:
        render_samples(sampler, ax=ax_samples, draw_radius=draw_radius)
        render_status_map(sampler, ax=ax_status)
        fig.tight_layout()
        fig.savefig(output, dpi=dpi)
    finally:
        plt.close(fig)

    logger.info("Visualization saved", path=str(output))
    return output


def generate(
    sampler: PoissonDisk, steps_per_frame: int, max_frames: Optional[int] = None
) -> int:
    """
    Advance ``sampler`` frame by frame until it converges.

    Returns:
        Number of frames run
    """
    frames = 0
    while max_frames is None or frames < max_frames:
        frames += 1
        if not sampler.tick(steps_per_frame):
            break
    logger.info(
        "Generation finished",
        frames=frames,
        num_points=sampler.num_points(),
        converged=sampler.is_converged,
    )
    return frames


def main(argv: Optional[Sequence[str]] = None, settings: Optional[Settings] = None) -> int:
    """Command line entry point."""
    import argparse

    settings = settings or default_settings

    parser = argparse.ArgumentParser(description="Generate and render a Poisson disk sample set")
    parser.add_argument("--width", type=int, default=settings.default_width)
    parser.add_argument("--height", type=int, default=settings.default_height)
    parser.add_argument("--radius", type=int, default=settings.default_radius)
    parser.add_argument(
        "--num-samples",
        type=int,
        default=settings.default_num_samples,
        help="Candidates tried around the chosen point per step",
    )
    parser.add_argument("--seed", default="default", help="Seed for the Alea PRNG")
    parser.add_argument("--steps-per-frame", type=int, default=settings.steps_per_frame)
    parser.add_argument("--max-frames", type=int, default=None)
    parser.add_argument("--draw-radius", action="store_true", help="Outline exclusion circles")
    parser.add_argument("--output", type=Path, default=Path("poisson_disk.png"))

    args = parser.parse_args(argv)

    configure_logging(settings)

    sampler = PoissonDisk(
        args.width,
        args.height,
        args.radius,
        args.num_samples,
        rng=AleaPRNG(args.seed),
        settings=settings,
    )
    generate(sampler, args.steps_per_frame, args.max_frames)

    stats = analyze_samples(sampler)
    print(f"Samples: {stats.num_points}")
    print(f"Minimum distance: {stats.min_distance:.3f}")
    print(f"Points on the domain edge: {stats.edge_fraction:.1%}")

    save_visualization(sampler, args.output, draw_radius=args.draw_radius)
    print(f"Saved {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
