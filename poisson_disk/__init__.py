"""
Step-driven Poisson disk (blue noise) point sampling on a 2D grid.
"""

from .core import AleaPRNG, CellStatus, Point, PoissonDisk, SamplerConfig
from .exceptions import (
    ConfigurationError,
    DomainTooLargeError,
    PoissonDiskError,
    PointIndexError,
)

__version__ = "0.1.0"

__all__ = ['AleaPRNG', 'CellStatus', 'Point', 'PoissonDisk', 'SamplerConfig',
           'ConfigurationError', 'DomainTooLargeError', 'PoissonDiskError', 'PointIndexError']
