"""
Raster fill for the Voronoi diagram.

This module provides:
    • render(seeds, width, height, workers=None, band_rows=None)
    • row_bands(height, band_rows)
    • classify_pixels(seeds, width, height, ...)

Rows are split into contiguous bands; each band is classified by exactly one
worker and written into its own slice of the label grid.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import List, Tuple

import numpy as np

from models.seed import SeedSet
from models.raster import RasterBuffer
from engine.nearest_seed import EmptySeedSetError, nearest_seed_indices
from utils.geometry import sample_axes
from config import get_active_params


def row_bands(height: int, band_rows: int) -> List[Tuple[int, int]]:
    """
    Partition [0, height) into half-open (start, stop) row ranges of at most
    band_rows rows each. Ranges are disjoint and cover every row once.
    """
    if band_rows < 1:
        raise ValueError(f"band_rows must be >= 1, got {band_rows}")
    return [(y0, min(y0 + band_rows, height)) for y0 in range(0, height, band_rows)]


def _check_dimensions(width: int, height: int):
    for name, value in (("width", width), ("height", height)):
        if int(value) != value or value < 1:
            raise ValueError(f"{name} must be a positive integer, got {value!r}")


def classify_pixels(
    seeds: SeedSet,
    width: int,
    height: int,
    workers: int = None,
    band_rows: int = None,
) -> np.ndarray:
    """
    Nearest-seed index for every pixel.

    Returns
    -------
    np.ndarray
        (height, width) intp array; labels[py, px] is the index into `seeds`
        of the seed closest to (px / width, py / height).
    """
    _check_dimensions(width, height)
    if len(seeds) == 0:
        raise EmptySeedSetError()

    params = get_active_params()
    if workers is None:
        workers = params["MAX_WORKERS"]
    if band_rows is None:
        band_rows = params["BAND_ROWS"]
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    xs, ys = sample_axes(width, height)
    positions = seeds.positions
    labels = np.empty((height, width), dtype=np.intp)
    bands = row_bands(height, band_rows)

    def fill(band):
        y0, y1 = band
        labels[y0:y1] = nearest_seed_indices(positions, xs, ys[y0:y1])

    if workers == 1 or len(bands) == 1:
        for band in bands:
            fill(band)
    else:
        with ThreadPoolExecutor(max_workers=min(workers, len(bands))) as pool:
            # list() re-raises the first worker exception, if any
            list(pool.map(fill, bands))

    return labels


def render(
    seeds: SeedSet,
    width: int,
    height: int,
    workers: int = None,
    band_rows: int = None,
) -> RasterBuffer:
    """
    Renders the Voronoi diagram of `seeds` into a width x height buffer.

    Each pixel (px, py) gets the color of closest_seed(seeds, (px/width, py/height)).
    The result depends only on the seeds and the dimensions, not on
    workers / band_rows.

    Raises
    ------
    EmptySeedSetError
        If `seeds` is empty (no buffer is produced).
    ValueError
        If width or height is not a positive integer.
    """
    labels = classify_pixels(seeds, width, height, workers=workers, band_rows=band_rows)
    pixels = seeds.colors[labels]
    return RasterBuffer(width=width, height=height, pixels=pixels)
