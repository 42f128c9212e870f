"""
Utility Functions

Provides geometry helpers and image I/O utilities used across the engine
and the output code.
"""

from .geometry import distance, sample_point, sample_axes
from .image_io import OutputError, ensure_output_dir, save_image, suffixed_path

__all__ = [
    "distance",
    "sample_point",
    "sample_axes",
    "OutputError",
    "ensure_output_dir",
    "save_image",
    "suffixed_path",
]
