"""Errors raised by the Poisson disk sampler."""


class PoissonDiskError(Exception):
    """Base class for all sampler errors."""


class ConfigurationError(PoissonDiskError, ValueError):
    """Invalid sampler configuration (non-positive size, radius or sample count)."""


class DomainTooLargeError(ConfigurationError):
    """Requested domain area exceeds the configured allocation limit."""

    def __init__(self, width: int, height: int, max_area: int):
        self.width = width
        self.height = height
        self.max_area = max_area
        super().__init__(
            f"Domain {width}x{height} ({width * height} cells) exceeds "
            f"max_domain_area={max_area}"
        )


class PointIndexError(PoissonDiskError, IndexError):
    """``point_at`` called with an index outside the sample registry."""

    def __init__(self, index: int, num_points: int):
        self.index = index
        self.num_points = num_points
        super().__init__(
            f"Point index {index} out of range for {num_points} samples"
        )
