"""
This module provides:
    - distance
    - sample_point
    - sample_axes
"""

from typing import Tuple

import numpy as np

from models.point import Point2D


# ----------------------------------------------------------------------
#  EUCLIDEAN DISTANCE
# ----------------------------------------------------------------------

def distance(a: Point2D, b: Point2D) -> float:
    """
    sqrt((b.x - a.x)^2 + (b.y - a.y)^2)

    NaN / inf inputs propagate under IEEE rules.
    """
    return a.distance(b)


# ----------------------------------------------------------------------
#  PIXEL -> NORMALIZED SAMPLE COORDINATES
# ----------------------------------------------------------------------

def sample_point(px: int, py: int, width: int, height: int) -> Point2D:
    """
    Normalized sample point of pixel (px, py).

    Divides by the dimension (not dimension - 1), so the largest sample is
    ((W-1)/W, (H-1)/H) and never reaches 1.0.
    """
    return Point2D(px / width, py / height)


def sample_axes(width: int, height: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Vectorized sample_point: returns (xs, ys) with xs[px] == px / width and
    ys[py] == py / height, as float64.
    """
    xs = np.arange(width, dtype=np.float64) / width
    ys = np.arange(height, dtype=np.float64) / height
    return xs, ys
