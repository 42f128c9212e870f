"""
Configuration file for the Voronoi raster generator.

Holds the CLI defaults, the render tuning parameters and the parsing helpers
for user-supplied values. Modules should read render values using the
get_active_params() function.
"""

import os
from dataclasses import dataclass
from typing import Optional, Tuple


# ---------------------------------------------------------------
# CLI DEFAULTS
# ---------------------------------------------------------------

DEFAULT_SEED_COUNT = 10
DEFAULT_SIZE = (256, 256)          # width, height
DEFAULT_OUTPUT = "voronoi.png"


# ---------------------------------------------------------------
# RENDER PARAMETERS
# ---------------------------------------------------------------

BAND_ROWS = 32                     # rows classified per worker task
MAX_WORKERS = os.cpu_count() or 1


# ---------------------------------------------------------------
# SEED MARKERS (--mark-seeds)
# ---------------------------------------------------------------

SEED_MARKER_RADIUS = 3
SEED_MARKER_COLOR = (0, 0, 0)          # fill, BGR
SEED_MARKER_OUTLINE = (255, 255, 255)  # ring, BGR
SEED_IMAGE_SUFFIX = "_seeds"


# ---------------------------------------------------------------
# RUN CONFIGURATION
# ---------------------------------------------------------------

class ConfigError(ValueError):
    """Malformed user configuration (size, count, workers)."""


@dataclass
class Config:
    seed_count: int = DEFAULT_SEED_COUNT
    width: int = DEFAULT_SIZE[0]
    height: int = DEFAULT_SIZE[1]
    output: str = DEFAULT_OUTPUT
    rng_seed: Optional[int] = None
    workers: int = MAX_WORKERS
    mark_seeds: bool = False


def _positive_int(text: str, what: str) -> int:
    try:
        value = int(text.strip())
    except ValueError:
        raise ConfigError(f"Invalid parameter for {what}: {text!r} is not an integer.") from None
    if value < 1:
        raise ConfigError(f"Invalid parameter for {what}: {value} must be positive.")
    return value


def parse_size(text: str) -> Tuple[int, int]:
    """
    Parses "W,H" into (width, height).

    Example: "320,200" → (320, 200)
    """
    parts = text.split(",")
    if len(parts) != 2:
        raise ConfigError("Size requires two comma-separated positive integers.")
    return _positive_int(parts[0], "--size"), _positive_int(parts[1], "--size")


def parse_count(text: str) -> int:
    return _positive_int(text, "--count")


def parse_workers(text: str) -> int:
    return _positive_int(text, "--workers")


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the render parameters as one dictionary, so the engine only
    imports this function.
    """
    return {
        "BAND_ROWS": BAND_ROWS,
        "MAX_WORKERS": MAX_WORKERS,
        "SEED_MARKER_RADIUS": SEED_MARKER_RADIUS,
        "SEED_MARKER_COLOR": SEED_MARKER_COLOR,
        "SEED_MARKER_OUTLINE": SEED_MARKER_OUTLINE,
    }
