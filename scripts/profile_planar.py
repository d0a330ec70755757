"""
Profiling script for planar-geometry performance analysis.

This script times the permutation engine, dual graph construction and the
brute-force Delaunay triangulation across different input sizes.
"""

import argparse
import cProfile
import fnmatch
import io
import json
import pstats
import random
import sys
import time
from pathlib import Path
from pstats import SortKey

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np


def grid_rotation(rows, cols):
    """Counterclockwise rotation system of a rows x cols grid graph."""
    rotation = {}
    for i in range(rows):
        for j in range(cols):
            nbrs = []
            if j + 1 < cols:
                nbrs.append(i * cols + j + 1)
            if i + 1 < rows:
                nbrs.append((i + 1) * cols + j)
            if j > 0:
                nbrs.append(i * cols + j - 1)
            if i > 0:
                nbrs.append((i - 1) * cols + j)
            rotation[i * cols + j] = nbrs
    return rotation


def random_cycles(n, seed=42):
    """Partition 0..n-1 into random cycles."""
    rng = np.random.default_rng(seed)
    items = rng.permutation(n).tolist()
    cuts = sorted(rng.choice(np.arange(1, n), size=min(n - 1, n // 10), replace=False).tolist())
    return [items[a:b] for a, b in zip([0] + cuts, cuts + [n])]


# =============================================================================
# Permutation Profiles
# =============================================================================

def profile_from_cycles():
    """Profile from_cycles: 200k elements."""
    from planar_geometry.permutation import from_cycles

    p = from_cycles(random_cycles(200_000))
    for x in range(0, 200_000, 7):
        p.apply(x)


def profile_from_function():
    """Profile from_function: 200k elements."""
    from planar_geometry.permutation import from_function

    n = 200_000
    from_function(list(range(n)), lambda x: (x + 3) % n)


# =============================================================================
# Planar Graph Profiles
# =============================================================================

def profile_grid_dual():
    """Profile dual construction: 100 x 100 grid."""
    from planar_geometry.planar import from_rotation_system

    g = from_rotation_system(grid_rotation(100, 100))
    h = g.dual()
    assert h.vertex_count == g.face_count


def profile_grid_verify():
    """Profile embedding validation: 100 x 100 grid."""
    from planar_geometry.planar import from_rotation_system

    assert from_rotation_system(grid_rotation(100, 100)).verify()


# =============================================================================
# Delaunay Profiles
# =============================================================================

def profile_delaunay_small():
    """Profile Delaunay triangulation: 20 points."""
    from planar_geometry.delaunay import delaunay_triangulation

    random.seed(42)
    points = [(random.uniform(0, 500), random.uniform(0, 500)) for _ in range(20)]
    delaunay_triangulation(points).to_planar_graph()


def profile_delaunay_medium():
    """Profile Delaunay triangulation: 40 points."""
    from planar_geometry.delaunay import delaunay_triangulation

    random.seed(42)
    points = [(random.uniform(0, 500), random.uniform(0, 500)) for _ in range(40)]
    delaunay_triangulation(points).to_planar_graph()


# =============================================================================
# Timing
# =============================================================================

SCENARIOS = {
    "from_cycles": profile_from_cycles,
    "from_function": profile_from_function,
    "grid_dual": profile_grid_dual,
    "grid_verify": profile_grid_verify,
    "delaunay_20": profile_delaunay_small,
    "delaunay_40": profile_delaunay_medium,
}


def time_scenario(func, repeat):
    """Best wall time over ``repeat`` runs."""
    best = float("inf")
    for _ in range(repeat):
        start = time.perf_counter()
        func()
        best = min(best, time.perf_counter() - start)
    return best


def print_profile(func, limit=12):
    """Run once under cProfile and print the most expensive functions."""
    profiler = cProfile.Profile()
    profiler.runcall(func)
    out = io.StringIO()
    pstats.Stats(profiler, stream=out).sort_stats(SortKey.TIME).print_stats(limit)
    print(out.getvalue())


def main():
    parser = argparse.ArgumentParser(description="Time planar-geometry operations")
    parser.add_argument("--only", default="*", help="Scenario name pattern (e.g., 'grid_*')")
    parser.add_argument("--repeat", type=int, default=3, help="Runs per scenario; best is kept")
    parser.add_argument("--profile", action="store_true", help="Print cProfile stats per scenario")
    parser.add_argument("--output", help="Output JSON file for results")

    args = parser.parse_args()

    names = [n for n in SCENARIOS if fnmatch.fnmatch(n, args.only)]
    if not names:
        print(f"No scenario matches {args.only!r}; choose from {', '.join(SCENARIOS)}")
        return

    results = {}
    print(f"{'Scenario':<20} {'Best':>10}")
    print("-" * 31)
    for name in names:
        elapsed = time_scenario(SCENARIOS[name], args.repeat)
        results[name] = elapsed
        print(f"{name:<20} {elapsed:>9.3f}s")
        if args.profile:
            print_profile(SCENARIOS[name])

    if args.output:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2)
        print(f"\nResults saved to {args.output}")


if __name__ == "__main__":
    main()
