"""
Nearest-seed classification (brute force).

This module provides:
    • closest_seed(seeds, point)
    • closest_seed_index(seeds, point)
    • nearest_seed_indices(positions, xs, ys)

Tie-break: a later seed replaces the running best only when it is strictly
closer, so on equal distances the lowest index wins. Both the scalar scan
and the numpy kernel follow this rule.
"""

import numpy as np

from models.point import Point2D
from models.seed import Seed, SeedSet


class EmptySeedSetError(ValueError):
    """Raised when a nearest-seed query is made against an empty seed set."""

    def __init__(self, message="Seed set is empty; at least one seed is required."):
        super().__init__(message)


# ========================================================================
# 1. SCALAR QUERY
# ========================================================================

def closest_seed_index(seeds: SeedSet, point: Point2D) -> int:
    """
    Index of the seed nearest to `point`.

    Raises
    ------
    EmptySeedSetError
        If `seeds` is empty.
    """
    if len(seeds) == 0:
        raise EmptySeedSetError()

    best = 0
    best_dist = seeds[0].position.distance(point)

    for i in range(1, len(seeds)):
        d = seeds[i].position.distance(point)
        if d < best_dist:
            best = i
            best_dist = d

    return best


def closest_seed(seeds: SeedSet, point: Point2D) -> Seed:
    """Seed nearest to `point` (first one on exact ties)."""
    return seeds[closest_seed_index(seeds, point)]


# ========================================================================
# 2. VECTORIZED QUERY (one block of sample rows at a time)
# ========================================================================

def nearest_seed_indices(positions: np.ndarray, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    """
    Nearest-seed index for every sample point of the grid ys x xs.

    Runs the same left-to-right fold as closest_seed_index, one seed at a
    time over the whole block, so memory stays O(len(ys) * len(xs)).

    Parameters
    ----------
    positions : np.ndarray
        (n, 2) float64 seed positions, n >= 1.
    xs : np.ndarray
        (w,) sample x coordinates.
    ys : np.ndarray
        (h,) sample y coordinates.

    Returns
    -------
    np.ndarray
        (h, w) intp array of seed indices.
    """
    if len(positions) == 0:
        raise EmptySeedSetError()

    gx = xs[np.newaxis, :]
    gy = ys[:, np.newaxis]

    def dist_to(i):
        # same operation order as Point2D.distance(seed, sample)
        dx = gx - positions[i, 0]
        dy = gy - positions[i, 1]
        return np.sqrt(dx * dx + dy * dy)

    best_dist = dist_to(0)
    best_idx = np.zeros(best_dist.shape, dtype=np.intp)

    for i in range(1, len(positions)):
        d = dist_to(i)
        closer = d < best_dist
        best_dist = np.where(closer, d, best_dist)
        best_idx[closer] = i

    return best_idx
