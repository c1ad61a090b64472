"""
Per-pixel status tags for visualising sampler progress.

The status map records, for every integer location of the domain, whether
an accepted sample sits there and whether it can still spawn children.
The sampling algorithm never reads it back.
"""

from enum import IntEnum
from typing import Dict, Tuple

import numpy as np


class CellStatus(IntEnum):
    """Status of a single domain location."""

    EMPTY = 0  # No sample at this location
    DEAD = 1  # Sample no longer on the frontier
    ACTIVE = 2  # Sample on the frontier, used to generate more points


class StatusMap:
    """Dense ``(height, width)`` array of :class:`CellStatus` values."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._cells = np.full((height, width), CellStatus.EMPTY, dtype=np.uint8)

    def set(self, point: Tuple[int, int], status: CellStatus) -> None:
        x, y = point
        self._cells[y, x] = status

    def get(self, point: Tuple[int, int]) -> CellStatus:
        x, y = point
        return CellStatus(int(self._cells[y, x]))

    def counts(self) -> Dict[CellStatus, int]:
        """Number of locations in each status."""
        values = np.bincount(self._cells.ravel(), minlength=len(CellStatus))
        return {status: int(values[status]) for status in CellStatus}

    def clear(self) -> None:
        self._cells.fill(CellStatus.EMPTY)

    def as_array(self) -> np.ndarray:
        """Read-only view of the underlying array, indexed ``[y, x]``."""
        view = self._cells.view()
        view.flags.writeable = False
        return view
