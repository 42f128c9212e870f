import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point2D:
    """
    A 2D coordinate pair.

    Used for seed positions and for pixel sample points, both living in the
    normalized unit square [0, 1) x [0, 1).
    """

    x: float
    y: float

    def distance(self, other: "Point2D") -> float:
        """
        Euclidean distance to another point.

        Written as a plain sum of squares so the numpy kernel in
        engine.nearest_seed produces the same float64 value.
        """
        dx = other.x - self.x
        dy = other.y - self.y
        return math.sqrt(dx * dx + dy * dy)

    def as_tuple(self):
        return self.x, self.y

    def __repr__(self):
        return f"Point2D(x={self.x:.4f}, y={self.y:.4f})"
