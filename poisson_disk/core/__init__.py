"""
Core sampling functionality.
"""

from .alea_prng import AleaPRNG
from .spatial_grid import BackgroundGrid
from .status_map import CellStatus, StatusMap
from .sampler import Point, PoissonDisk, SamplerConfig
from .sampling_analysis import SampleStatistics, analyze_samples, find_violations, min_pairwise_distance

__all__ = ['AleaPRNG', 'BackgroundGrid', 'CellStatus', 'StatusMap',
           'Point', 'PoissonDisk', 'SamplerConfig',
           'SampleStatistics', 'analyze_samples', 'find_violations', 'min_pairwise_distance']
