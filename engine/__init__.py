"""
Voronoi Engine

Contains the seed generation and classification modules:
- Seed set generation
- Nearest-seed lookup (scalar and vectorized)
- Raster fill
"""

from .seed_generator import generate_seeds, make_rng
from .nearest_seed import (
    EmptySeedSetError,
    closest_seed,
    closest_seed_index,
    nearest_seed_indices,
)
from .rasterizer import render, classify_pixels, row_bands

__all__ = [
    "generate_seeds",
    "make_rng",
    "EmptySeedSetError",
    "closest_seed",
    "closest_seed_index",
    "nearest_seed_indices",
    "render",
    "classify_pixels",
    "row_bands",
]
