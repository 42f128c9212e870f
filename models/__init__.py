"""
Data Models

Defines the core data structures:
- Point2D
- Color
- Seed / SeedSet
- RasterBuffer
"""

from .point import Point2D
from .color import Color
from .seed import Seed, SeedSet
from .raster import RasterBuffer

__all__ = ["Point2D", "Color", "Seed", "SeedSet", "RasterBuffer"]
