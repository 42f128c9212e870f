"""
Seed set generation.

This module provides:
    • generate_seeds(count, rng)
    • make_rng(seed)
"""

import random

from models.point import Point2D
from models.color import Color
from models.seed import Seed, SeedSet


def make_rng(seed=None) -> random.Random:
    """
    Build an explicit random source. seed=None draws fresh OS entropy.
    """
    return random.Random(seed)


def generate_seeds(count: int, rng) -> SeedSet:
    """
    Generates `count` seeds with uniform positions in [0, 1)^2 and random colors.

    Parameters
    ----------
    count : int
        Number of seeds. 0 is allowed and yields an empty (unqueryable) set.
    rng :
        Any object with a random() method returning floats in [0, 1).
        Called exactly 5 * count times, per seed in the order x, y, r, g, b.

    Returns
    -------
    SeedSet
        Seeds in draw order.
    """
    if count < 0:
        raise ValueError(f"seed count must be >= 0, got {count}")

    seeds = []
    for _ in range(count):
        x = rng.random()
        y = rng.random()
        seeds.append(Seed(Point2D(x, y), Color.random(rng)))

    return SeedSet(seeds)
