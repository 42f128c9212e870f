"""
Visualization Tools

Provides output utilities for:
- 8-bit conversion of the rendered buffer
- Seed site markers
- Saving all artifacts of a render
"""

from .draw_seeds import draw_seeds, seed_pixel
from .save_outputs import (
    to_bgr8,
    save_raster,
    save_seed_overlay,
    save_all_outputs,
)

__all__ = [
    "draw_seeds",
    "seed_pixel",
    "to_bgr8",
    "save_raster",
    "save_seed_overlay",
    "save_all_outputs",
]
