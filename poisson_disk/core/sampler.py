"""
Incremental Poisson disk sampling on a rectangular integer domain.

The sampler follows Bridson's dart-throwing scheme:

1. Seed one uniformly random point and put it on the frontier.
2. Each step picks a frontier point and throws up to ``num_samples``
   candidates into the annulus ``[radius, 2 * radius)`` around it.
3. Candidates far enough from every existing sample (checked through the
   background grid) are accepted and join the frontier.
4. A frontier point that produces no sample is retired.

A host calls :meth:`PoissonDisk.step` once per frame (or :meth:`tick` for a
batch) and reads points back with :meth:`PoissonDisk.point_at`.
"""

import math
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Protocol

import numpy as np
import structlog

from ..config import Settings, settings as default_settings
from ..exceptions import ConfigurationError, DomainTooLargeError, PointIndexError
from ..utils.random import get_prng
from .spatial_grid import BackgroundGrid
from .status_map import CellStatus, StatusMap

logger = structlog.get_logger()


class RandomSource(Protocol):
    """Anything producing independent uniform draws in [0, 1)."""

    def random(self) -> float:
        ...


class Point(NamedTuple):
    """Integer sample location."""

    x: int
    y: int


@dataclass(frozen=True)
class SamplerConfig:
    """Configuration for a sampler instance."""

    width: int
    height: int
    radius: int
    num_samples: int

    def __post_init__(self):
        for name in ("width", "height", "radius", "num_samples"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive, got {value}")
            # numpy scalars would wrap around in area products
            object.__setattr__(self, name, int(value))

    @property
    def area(self) -> int:
        return self.width * self.height

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "SamplerConfig":
        """Build a configuration from the default generation settings."""
        settings = settings or default_settings
        return cls(
            width=settings.default_width,
            height=settings.default_height,
            radius=settings.default_radius,
            num_samples=settings.default_num_samples,
        )


class PoissonDisk:
    """
    Step-driven Poisson disk sampler.

    Args:
        width: Domain width; x coordinates lie in [0, width)
        height: Domain height; y coordinates lie in [0, height)
        radius: Minimum distance between any two samples
        num_samples: Candidates thrown around the chosen point per step
        rng: Random source with a ``random()`` method, defaults to the
            shared Alea PRNG
        settings: Settings providing ``max_domain_area``

    Raises:
        ConfigurationError: If any size argument is not a positive integer
        DomainTooLargeError: If ``width * height`` exceeds the area limit
    """

    def __init__(
        self,
        width: int,
        height: int,
        radius: int,
        num_samples: int,
        rng: Optional[RandomSource] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or default_settings
        self.config = SamplerConfig(width, height, radius, num_samples)
        if self.config.area > settings.max_domain_area:
            raise DomainTooLargeError(
                self.config.width, self.config.height, settings.max_domain_area
            )

        self._rng = rng if rng is not None else get_prng()
        self._max_steps = settings.max_steps

        self.grid = BackgroundGrid(self.config.width, self.config.height, self.config.radius)
        self.status = StatusMap(self.config.width, self.config.height)
        self._active: List[Point] = []
        self._samples: List[Point] = []

        self._seed()
        logger.info(
            "Poisson disk sampler created",
            width=width,
            height=height,
            radius=radius,
            num_samples=num_samples,
            seed_point=tuple(self._samples[0]),
        )

    @classmethod
    def from_config(
        cls,
        config: SamplerConfig,
        rng: Optional[RandomSource] = None,
        settings: Optional[Settings] = None,
    ) -> "PoissonDisk":
        return cls(
            config.width,
            config.height,
            config.radius,
            config.num_samples,
            rng=rng,
            settings=settings,
        )

    # Configuration echo

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def radius(self) -> int:
        return self.config.radius

    @property
    def num_samples(self) -> int:
        return self.config.num_samples

    # State queries

    @property
    def frontier_size(self) -> int:
        return len(self._active)

    @property
    def is_converged(self) -> bool:
        """True once no frontier point is left to spawn candidates."""
        return not self._active

    def num_points(self) -> int:
        return len(self._samples)

    def point_at(self, index: int) -> Point:
        """
        Return the ``index``-th accepted sample in generation order.

        Raises:
            PointIndexError: If ``index`` is negative or not below ``num_points()``
        """
        if index < 0 or index >= len(self._samples):
            raise PointIndexError(index, len(self._samples))
        return self._samples[index]

    def points(self) -> np.ndarray:
        """All accepted samples as an ``(n, 2)`` integer array of ``(x, y)``."""
        return np.array(self._samples, dtype=np.int64)

    # Generation

    def reset(self) -> None:
        """Discard all samples and reseed; configuration is kept."""
        self._active.clear()
        self._samples.clear()
        self.grid.clear()
        self.status.clear()
        self._seed()
        logger.info("Poisson disk sampler reset", seed_point=tuple(self._samples[0]))

    def step(self) -> bool:
        """
        Run one round of candidate generation.

        Returns:
            False if the frontier was already empty, True otherwise
        """
        if not self._active:
            return False

        idx = int(self._rng.random() * len(self._active))
        origin = self._active[idx]

        found = False
        for _ in range(self.config.num_samples):
            candidate = self._new_point(origin)
            if self.grid.is_valid(candidate):
                self._insert_point(candidate)
                found = True

        if not found:
            self._retire(idx)
            if not self._active:
                logger.info("Poisson disk sampler converged", num_points=len(self._samples))

        return True

    def tick(self, steps: int) -> bool:
        """
        Run up to ``steps`` steps, stopping early once converged.

        Returns:
            True if the sampler may still make progress
        """
        for _ in range(steps):
            if not self.step():
                return False
        return not self.is_converged

    def run(self, max_steps: Optional[int] = None) -> int:
        """
        Step until convergence or until ``max_steps`` steps have run.

        Args:
            max_steps: Step cap, defaults to ``Settings.max_steps``

        Returns:
            Number of steps taken
        """
        limit = self._max_steps if max_steps is None else max_steps
        steps = 0
        while steps < limit and self.step():
            steps += 1

        if not self.is_converged:
            logger.warning(
                "Step limit reached before convergence",
                max_steps=limit,
                num_points=len(self._samples),
                frontier=len(self._active),
            )
        return steps

    def _seed(self) -> None:
        point = Point(
            int(self._rng.random() * self.config.width),
            int(self._rng.random() * self.config.height),
        )
        self._insert_point(point)

    def _insert_point(self, point: Point) -> None:
        self.grid.insert(point)
        self.status.set(point, CellStatus.ACTIVE)
        self._active.append(point)
        self._samples.append(point)

    def _retire(self, idx: int) -> None:
        # Frontier order is irrelevant, so swap the last point into the hole
        point = self._active[idx]
        last = self._active.pop()
        if idx < len(self._active):
            self._active[idx] = last
        self.status.set(point, CellStatus.DEAD)
        logger.debug("Frontier point retired", point=tuple(point), frontier=len(self._active))

    def _new_point(self, origin: Point) -> Point:
        """Random candidate in the annulus [radius, 2 * radius) around ``origin``.

        Coordinates falling outside the domain are clamped onto its edge.
        """
        theta = 2.0 * math.pi * self._rng.random()
        rho = self.config.radius * (self._rng.random() + 1.0)
        new_x = origin.x + rho * math.cos(theta)
        new_y = origin.y + rho * math.sin(theta)

        return Point(
            int(min(max(new_x, 0.0), self.config.width - 1)),
            int(min(max(new_y, 0.0), self.config.height - 1)),
        )

    def __repr__(self) -> str:
        return (
            f"PoissonDisk(width={self.width}, height={self.height}, "
            f"radius={self.radius}, num_samples={self.num_samples}, "
            f"points={len(self._samples)}, frontier={len(self._active)})"
        )
