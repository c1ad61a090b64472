"""
Statistics over a generated sample set.

Used to check the minimum-distance guarantee after a run and to summarise
how densely the domain was filled.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import numpy as np
import structlog
from scipy.spatial import cKDTree
from scipy.spatial.distance import pdist

from .sampler import PoissonDisk
from .status_map import CellStatus

logger = structlog.get_logger()


@dataclass
class SampleStatistics:
    """Summary of a sampler's current point set."""

    num_points: int
    min_distance: float
    violations: List[Tuple[int, int, float]]
    edge_fraction: float
    density: float  # Samples per unit area
    status_counts: Dict[CellStatus, int] = field(default_factory=dict)
    converged: bool = False

    @property
    def is_valid(self) -> bool:
        return not self.violations


def min_pairwise_distance(points: np.ndarray) -> float:
    """Smallest Euclidean distance between two points, ``inf`` for fewer than two."""
    points = np.asarray(points, dtype=np.float64)
    if len(points) < 2:
        return float("inf")
    return float(pdist(points).min())


def find_violations(points: np.ndarray, radius: float) -> List[Tuple[int, int, float]]:
    """
    Find every pair of points closer than or exactly at ``radius``.

    Returns:
        Sorted list of ``(i, j, distance)`` with ``i < j``
    """
    points = np.asarray(points, dtype=np.float64)
    if len(points) < 2:
        return []

    tree = cKDTree(points)
    pairs = tree.query_pairs(r=radius)
    violations = []
    for i, j in sorted(pairs):
        distance = float(np.linalg.norm(points[i] - points[j]))
        violations.append((i, j, distance))
    return violations


def edge_points(points: np.ndarray, width: int, height: int) -> np.ndarray:
    """Boolean mask of points lying on the domain border, where clamping lands."""
    points = np.asarray(points)
    if len(points) == 0:
        return np.zeros(0, dtype=bool)
    xs, ys = points[:, 0], points[:, 1]
    return (xs == 0) | (ys == 0) | (xs == width - 1) | (ys == height - 1)


def analyze_samples(sampler: PoissonDisk) -> SampleStatistics:
    """Compute :class:`SampleStatistics` for ``sampler``'s current state."""
    points = sampler.points()
    violations = find_violations(points, sampler.radius)
    on_edge = edge_points(points, sampler.width, sampler.height)

    stats = SampleStatistics(
        num_points=len(points),
        min_distance=min_pairwise_distance(points),
        violations=violations,
        edge_fraction=float(on_edge.mean()) if len(points) else 0.0,
        density=len(points) / float(sampler.width * sampler.height),
        status_counts=sampler.status.counts(),
        converged=sampler.is_converged,
    )

    if violations:
        logger.warning("Minimum distance violated", count=len(violations), radius=sampler.radius)
    logger.info(
        "Sample set analyzed",
        num_points=stats.num_points,
        min_distance=stats.min_distance,
        edge_fraction=round(stats.edge_fraction, 4),
    )
    return stats
