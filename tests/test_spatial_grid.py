"""Tests for the background grid spatial index."""

import math

import pytest
from poisson_disk.core.spatial_grid import BackgroundGrid


class TestGridGeometry:
    """Test grid sizing."""

    def test_cell_size(self):
        """Test that cells are radius / sqrt(2) wide."""
        grid = BackgroundGrid(100, 100, 10)

        assert grid.cell_size == pytest.approx(10 / math.sqrt(2))
        assert grid.cols == math.ceil(100 / grid.cell_size) + 1
        assert grid.rows == math.ceil(100 / grid.cell_size) + 1

    def test_non_square_domain(self):
        """Test that columns follow width and rows follow height."""
        grid = BackgroundGrid(200, 50, 5)

        assert grid.cols > grid.rows

    def test_cell_of(self):
        """Test mapping points to cells."""
        grid = BackgroundGrid(100, 100, 10)

        assert grid.cell_of((0, 0)) == (0, 0)
        assert grid.cell_of((15, 15)) == (2, 2)
        assert grid.cell_of((99, 0)) == (14, 0)

    def test_invalid_radius(self):
        """Test that a zero radius is rejected."""
        with pytest.raises(ValueError):
            BackgroundGrid(10, 10, 0)


class TestInsert:
    """Test storing samples."""

    def test_insert_and_get(self):
        """Test that inserted points can be read back from their cell."""
        grid = BackgroundGrid(100, 100, 10)
        cell = grid.insert((15, 15))

        assert cell == (2, 2)
        assert grid.get(cell) == (15, 15)
        assert grid.get((0, 0)) is None
        assert len(grid) == 1

    def test_one_point_per_cell(self):
        """Test that a second point in an occupied cell is refused."""
        grid = BackgroundGrid(100, 100, 10)
        grid.insert((15, 15))

        with pytest.raises(ValueError):
            grid.insert((16, 16))

    def test_occupied_points_and_clear(self):
        """Test listing and clearing stored points."""
        grid = BackgroundGrid(100, 100, 10)
        grid.insert((5, 5))
        grid.insert((90, 90))

        assert sorted(grid.occupied_points()) == [(5, 5), (90, 90)]

        grid.clear()
        assert len(grid) == 0
        assert grid.occupied_points() == []
        assert grid.is_valid((5, 5))


class TestIsValid:
    """Test minimum-distance queries."""

    @pytest.fixture
    def grid(self):
        grid = BackgroundGrid(100, 100, 10)
        grid.insert((50, 50))
        return grid

    def test_empty_grid(self):
        """Test that any point is valid on an empty grid."""
        assert BackgroundGrid(100, 100, 10).is_valid((50, 50))

    def test_too_close(self, grid):
        """Test that a nearby candidate is rejected."""
        assert not grid.is_valid((55, 55))

    def test_exactly_radius_is_rejected(self, grid):
        """Test that a candidate exactly one radius away is rejected."""
        assert not grid.is_valid((60, 50))

    def test_just_outside_radius(self, grid):
        """Test that a candidate beyond the radius is accepted."""
        assert grid.is_valid((61, 50))
        assert grid.is_valid((50, 38))

    def test_second_ring_is_scanned(self):
        """Test conflicts two cells away are detected."""
        grid = BackgroundGrid(100, 100, 10)
        grid.insert((56, 50))
        candidate = (64, 50)

        stored_col, _ = grid.cell_of((56, 50))
        candidate_col, _ = grid.cell_of(candidate)
        assert candidate_col - stored_col == 2
        assert not grid.is_valid(candidate)

    def test_far_edge_of_grid_is_scanned(self):
        """Test conflicts in the last row two cells away near the grid edge."""
        grid = BackgroundGrid(20, 20, 5)
        grid.insert((19, 19))
        candidate = (19, 14)

        _, stored_row = grid.cell_of((19, 19))
        _, candidate_row = grid.cell_of(candidate)
        assert stored_row - candidate_row == 2
        assert not grid.is_valid(candidate)

    def test_origin_corner(self):
        """Test queries clamped at the top-left corner."""
        grid = BackgroundGrid(50, 50, 5)
        grid.insert((0, 0))

        assert not grid.is_valid((3, 4))
        assert grid.is_valid((4, 4))

    def test_wide_domain_distances(self):
        """Test distance checks far from the origin of a long strip."""
        grid = BackgroundGrid(100000, 1, 2)
        grid.insert((99990, 0))

        assert not grid.is_valid((99991, 0))
        assert grid.is_valid((99999, 0))
        assert grid.get(grid.cell_of((99990, 0))) == (99990, 0)
