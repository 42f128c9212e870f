"""
Image I/O utilities for the Voronoi generator.

This module provides:
    • ensure_output_dir(path)
    • save_image(path, image)
    • suffixed_path(path, suffix)

Handles all filesystem interaction in a consistent, testable way.
"""

import os

import cv2
import numpy as np


class OutputError(OSError):
    """The encoder could not write the output image."""


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def suffixed_path(path: str, suffix: str) -> str:
    """
    Insert a suffix before the file extension.

    Example:
        'out/voronoi.png', '_seeds' → 'out/voronoi_seeds.png'
    """
    stem, ext = os.path.splitext(path)
    return f"{stem}{suffix}{ext}"


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists. An empty path means the
    current directory.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Save a BGR (or grayscale) uint8 image to disk, ensuring the directory exists.

    The format is chosen by OpenCV from the file extension.

    Raises:
        OutputError if the directory cannot be created or OpenCV fails to write.
    """
    try:
        ensure_output_dir(os.path.dirname(path))
        ok = cv2.imwrite(path, image)
    except (OSError, cv2.error) as exc:
        raise OutputError(f"Could not save output image {path!r}: {exc}") from exc

    if not ok:
        raise OutputError(f"Could not save output image {path!r}.")
