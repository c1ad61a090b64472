"""Tests for sample set statistics."""

import math

import numpy as np
import pytest
from poisson_disk import AleaPRNG, CellStatus, PoissonDisk
from poisson_disk.core.sampling_analysis import (
    analyze_samples,
    edge_points,
    find_violations,
    min_pairwise_distance,
)


class TestDistanceHelpers:
    """Test pairwise distance helpers."""

    def test_min_pairwise_distance(self):
        """Test the closest pair distance."""
        points = np.array([[0, 0], [3, 4], [10, 0]])

        assert min_pairwise_distance(points) == pytest.approx(5.0)

    def test_min_distance_too_few_points(self):
        """Test that a single point has no pairwise distance."""
        assert math.isinf(min_pairwise_distance(np.array([[1, 1]])))
        assert math.isinf(min_pairwise_distance(np.empty((0, 2))))

    def test_violations_include_exact_radius(self):
        """Test that pairs exactly at the radius count as violations."""
        points = np.array([[0, 0], [3, 4], [10, 0]])
        violations = find_violations(points, 5)

        assert len(violations) == 1
        i, j, distance = violations[0]
        assert (i, j) == (0, 1)
        assert distance == pytest.approx(5.0)

    def test_no_violations(self):
        """Test a well separated set."""
        points = np.array([[0, 0], [3, 4], [10, 0]])

        assert find_violations(points, 4.9) == []
        assert find_violations(points[:1], 100) == []

    def test_edge_points(self):
        """Test detection of points on the domain border."""
        points = np.array([[0, 5], [5, 5], [9, 2], [4, 0], [3, 7]])
        mask = edge_points(points, width=10, height=8)

        np.testing.assert_array_equal(mask, [True, False, True, True, True])
        assert edge_points(np.empty((0, 2)), 10, 8).size == 0


class TestAnalyzeSamples:
    """Test the summary of a sampler run."""

    def test_converged_run(self):
        """Test statistics of a fully converged sampler."""
        sampler = PoissonDisk(80, 60, 6, 20, rng=AleaPRNG("analysis"))
        sampler.run()
        stats = analyze_samples(sampler)

        assert stats.converged
        assert stats.is_valid
        assert stats.num_points == sampler.num_points()
        assert stats.min_distance > 6
        assert 0.0 <= stats.edge_fraction <= 1.0
        assert stats.density == pytest.approx(stats.num_points / (80 * 60))
        assert sum(stats.status_counts.values()) == 80 * 60
        assert stats.status_counts[CellStatus.DEAD] == stats.num_points

    def test_fresh_sampler(self):
        """Test statistics right after seeding."""
        sampler = PoissonDisk(40, 40, 5, 5, rng=AleaPRNG("fresh"))
        stats = analyze_samples(sampler)

        assert stats.num_points == 1
        assert math.isinf(stats.min_distance)
        assert stats.violations == []
        assert not stats.converged
        assert stats.status_counts[CellStatus.ACTIVE] == 1
