"""
Visualization utilities for marking seed sites on a rendered image.

This module provides:
    • seed_pixel(seed, width, height)
    • draw_seeds(img, seeds)

Used by:
    - visualization.save_outputs
"""

from typing import Tuple

import cv2

from models.seed import Seed, SeedSet
from config import get_active_params


def seed_pixel(seed: Seed, width: int, height: int) -> Tuple[int, int]:
    """
    Pixel (px, py) whose sample point is nearest below the seed position,
    i.e. the inverse of px / width.
    """
    px = min(int(seed.position.x * width), width - 1)
    py = min(int(seed.position.y * height), height - 1)
    return px, py


def draw_seeds(image, seeds: SeedSet):
    """
    Draws every seed site onto the given BGR image (modified in-place).

    For each seed:
      • draw an outline ring (SEED_MARKER_OUTLINE)
      • draw a filled center (SEED_MARKER_COLOR)
    """
    params = get_active_params()
    radius = params["SEED_MARKER_RADIUS"]
    h, w = image.shape[:2]

    for s in seeds:
        center = seed_pixel(s, w, h)

        cv2.circle(
            image,
            center,
            radius + 1,
            params["SEED_MARKER_OUTLINE"],
            thickness=-1
        )

        cv2.circle(
            image,
            center,
            radius,
            params["SEED_MARKER_COLOR"],
            thickness=-1
        )

    return image
