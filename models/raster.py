from dataclasses import dataclass

import numpy as np

from models.color import Color


@dataclass(eq=False)
class RasterBuffer:
    """
    Rendered Voronoi image.

    pixels: float64 array of shape (height, width, 3), RGB channel order,
    indexed as pixels[py, px] like any OpenCV / numpy image.
    """

    width: int
    height: int
    pixels: np.ndarray

    def __post_init__(self):
        expected = (self.height, self.width, 3)
        if self.pixels.shape != expected:
            raise ValueError(
                f"pixel array has shape {self.pixels.shape}, expected {expected}"
            )

    def color_at(self, px: int, py: int) -> Color:
        r, g, b = self.pixels[py, px]
        return Color(float(r), float(g), float(b))

    def to_rgb8(self) -> np.ndarray:
        """
        Quantize to uint8 RGB: clamp to [0, 1], scale by 255, round to nearest.
        """
        scaled = np.clip(self.pixels, 0.0, 1.0) * 255.0
        return np.rint(scaled).astype(np.uint8)

    def tobytes(self) -> bytes:
        return self.pixels.tobytes()
