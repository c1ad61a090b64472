"""
Background grid used to accelerate minimum-distance checks.

Cells are ``radius / sqrt(2)`` wide, so the diagonal of a cell equals the
radius and two accepted samples can never share one. Testing a candidate
then only needs the 5x5 block of cells around it, whatever the number of
samples already placed.
"""

import math
from typing import List, Optional, Tuple

import numpy as np
import structlog

logger = structlog.get_logger()

EMPTY = -1
# Cells on each side of the candidate's cell that can hold a point within radius
NEIGHBORHOOD = 2


class BackgroundGrid:
    """
    Uniform grid holding at most one sample per cell.

    Args:
        width: Domain width
        height: Domain height
        radius: Minimum separation between samples
    """

    def __init__(self, width: int, height: int, radius: float):
        if radius <= 0:
            raise ValueError("radius must be positive")

        self.width = width
        self.height = height
        self.radius = float(radius)
        self.cell_size = self.radius / math.sqrt(2)
        self.cols = int(math.ceil(width / self.cell_size)) + 1
        self.rows = int(math.ceil(height / self.cell_size)) + 1

        # cells[row, col] = (x, y) of the stored sample, or (-1, -1)
        self._cells = np.full((self.rows, self.cols, 2), EMPTY, dtype=np.int32)
        self._count = 0

        logger.debug(
            "Background grid allocated",
            cols=self.cols,
            rows=self.rows,
            cell_size=round(self.cell_size, 4),
        )

    def cell_of(self, point: Tuple[int, int]) -> Tuple[int, int]:
        """Return the ``(col, row)`` of the cell containing ``point``."""
        x, y = point
        return int(math.floor(x / self.cell_size)), int(math.floor(y / self.cell_size))

    def get(self, cell: Tuple[int, int]) -> Optional[Tuple[int, int]]:
        """Return the sample stored in ``cell`` or None."""
        col, row = cell
        x, y = self._cells[row, col]
        if x == EMPTY:
            return None
        return int(x), int(y)

    def insert(self, point: Tuple[int, int]) -> Tuple[int, int]:
        """
        Store ``point`` in its cell.

        Returns:
            The ``(col, row)`` the point was stored in

        Raises:
            ValueError: If the cell already holds a sample
        """
        col, row = self.cell_of(point)
        if self._cells[row, col, 0] != EMPTY:
            raise ValueError(
                f"Grid cell ({col}, {row}) already holds {self.get((col, row))}"
            )
        self._cells[row, col] = point
        self._count += 1
        return col, row

    def is_valid(self, candidate: Tuple[int, int]) -> bool:
        """
        Check that no stored sample lies within ``radius`` of ``candidate``.

        The full 5x5 neighbourhood is scanned, clamped to the grid edges.
        """
        col, row = self.cell_of(candidate)
        col0 = max(col - NEIGHBORHOOD, 0)
        col1 = min(col + NEIGHBORHOOD, self.cols - 1) + 1
        row0 = max(row - NEIGHBORHOOD, 0)
        row1 = min(row + NEIGHBORHOOD, self.rows - 1) + 1

        block = self._cells[row0:row1, col0:col1].reshape(-1, 2)
        neighbours = block[block[:, 0] != EMPTY]
        if len(neighbours) == 0:
            return True

        offsets = neighbours.astype(np.int64) - np.asarray(candidate, dtype=np.int64)
        dist_sq = np.einsum("ij,ij->i", offsets, offsets)
        return not np.any(dist_sq <= self.radius * self.radius)

    def occupied_points(self) -> List[Tuple[int, int]]:
        """All stored samples in row-major cell order."""
        flat = self._cells.reshape(-1, 2)
        return [(int(x), int(y)) for x, y in flat[flat[:, 0] != EMPTY]]

    def clear(self) -> None:
        self._cells.fill(EMPTY)
        self._count = 0

    def __len__(self) -> int:
        return self._count
