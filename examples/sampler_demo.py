#!/usr/bin/env python3
"""
Simple demo script showing step-driven Poisson disk sampling.
"""

import numpy as np
from scipy.spatial import cKDTree
from poisson_disk import AleaPRNG, CellStatus, PoissonDisk
from poisson_disk.core import analyze_samples


def main():
    """Demonstrate incremental sampling and reset."""
    print("Poisson Disk Sampling Demo")
    print("=" * 40)

    width, height = 200, 120
    radii = [4, 8, 16]

    for radius in radii:
        print(f"\nRadius {radius}:")
        print("-" * 30)

        sampler = PoissonDisk(width, height, radius, 30, rng=AleaPRNG(f"demo_{radius}"))

        # Drive it like an animation loop, 10 steps per frame
        frames = 0
        while sampler.tick(10):
            frames += 1
            if frames % 50 == 0:
                print(f"  frame {frames}: {sampler.num_points()} samples, "
                      f"{sampler.frontier_size} on frontier")

        stats = analyze_samples(sampler)
        print(f"  Frames: {frames}")
        print(f"  Samples: {stats.num_points}")
        print(f"  Min distance: {stats.min_distance:.2f}")
        print(f"  Edge points: {stats.edge_fraction:.1%}")
        print(f"  Retired points: {stats.status_counts[CellStatus.DEAD]}")

        # Nearest-neighbour spacing histogram
        points = sampler.points()
        distances, _ = cKDTree(points).query(points, k=2)
        nearest = distances[:, 1]
        bins = np.linspace(radius, 2 * radius, 6)
        hist, _ = np.histogram(nearest, bins=bins)
        print("  Nearest neighbour spacing:")
        for i in range(len(bins) - 1):
            bar = '#' * int(hist[i] / max(max(hist), 1) * 20)
            print(f"    {bins[i]:5.1f}-{bins[i+1]:5.1f}: {bar} ({hist[i]})")

    print("\n\nReset Example:")
    print("-" * 30)
    sampler = PoissonDisk(50, 50, 5, 1, rng=AleaPRNG("reset_demo"))
    sampler.run()
    print(f"  Before reset: {sampler.num_points()} samples")
    sampler.reset()
    print(f"  After reset: {sampler.num_points()} sample at {sampler.point_at(0)}")


if __name__ == "__main__":
    main()
