"""
Voronoi Raster Package

This package renders a brute-force raster Voronoi diagram, including:

- Seed generation from an explicit random source
- Nearest-seed classification
- Parallel raster fill
- 8-bit conversion and image output
"""
__all__ = [
    "config",
    "main",
    "engine",
    "models",
    "utils",
    "visualization",
]
