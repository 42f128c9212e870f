from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Color:
    """
    RGB color with float channels, nominally in [0, 1].

    Channels are not clamped here; clamping happens only when the buffer
    is quantized to 8 bits (see RasterBuffer.to_rgb8).
    """

    r: float
    g: float
    b: float

    @classmethod
    def random(cls, rng) -> "Color":
        """
        Draw r, g, b (in that order) from rng.random().
        """
        r = rng.random()
        g = rng.random()
        b = rng.random()
        return cls(r, g, b)

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.r, self.g, self.b

    def to_rgb8(self) -> Tuple[int, int, int]:
        """Same clamp-scale-round policy as the raster conversion."""
        return tuple(int(round(min(max(c, 0.0), 1.0) * 255)) for c in self.as_tuple())
