"""
Centralized output-saving utilities for the Voronoi generator.

This module provides:
    • to_bgr8(buffer)
    • save_raster(path, buffer)
    • save_seed_overlay(path, buffer, seeds)
    • save_all_outputs(...)

Uses draw_seeds to visualize and utils.image_io for filesystem handling.
"""

from typing import List

import cv2
import numpy as np

from models.raster import RasterBuffer
from models.seed import SeedSet
from visualization.draw_seeds import draw_seeds
from utils.image_io import save_image, suffixed_path
from config import SEED_IMAGE_SUFFIX


# -------------------------------------------------------------------------
#   Conversion
# -------------------------------------------------------------------------

def to_bgr8(buffer: RasterBuffer) -> np.ndarray:
    """
    Quantizes the float RGB buffer to uint8 and reorders channels for OpenCV.
    """
    return cv2.cvtColor(buffer.to_rgb8(), cv2.COLOR_RGB2BGR)


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_raster(path: str, buffer: RasterBuffer):
    """
    Writes the rendered diagram to disk (format from the extension).
    """
    save_image(path, to_bgr8(buffer))


def save_seed_overlay(path: str, buffer: RasterBuffer, seeds: SeedSet):
    """
    Draws the seed sites on a copy of the diagram and saves the result.
    """
    vis = to_bgr8(buffer)
    draw_seeds(vis, seeds)
    save_image(path, vis)


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(
    output: str,
    buffer: RasterBuffer,
    seeds: SeedSet,
    mark_seeds: bool = False
) -> List[str]:
    """
    Saves every output artifact for one render and returns the written paths.

    Example output:
        voronoi.png
        voronoi_seeds.png   (only with mark_seeds)
    """
    written = []

    save_raster(output, buffer)
    written.append(output)

    if mark_seeds:
        overlay_path = suffixed_path(output, SEED_IMAGE_SUFFIX)
        save_seed_overlay(overlay_path, buffer, seeds)
        written.append(overlay_path)

    return written
