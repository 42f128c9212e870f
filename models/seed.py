from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

import numpy as np

from models.point import Point2D
from models.color import Color


@dataclass(frozen=True)
class Seed:
    """A Voronoi site: a position in the unit square plus its cell color."""

    position: Point2D
    color: Color


class SeedSet:
    """
    Ordered, read-only collection of seeds.

    Notes:
      • Order is insertion order and is the tie-break order for
        nearest-seed queries (lowest index wins).
      • An empty set can be built, but querying it is an error
        (see engine.nearest_seed.EmptySeedSetError).
      • positions / colors are numpy views cached for the raster kernel.
    """

    def __init__(self, seeds: Iterable[Seed] = ()):
        self._seeds: Tuple[Seed, ...] = tuple(seeds)

        self._positions = np.array(
            [s.position.as_tuple() for s in self._seeds], dtype=np.float64
        ).reshape(-1, 2)
        self._colors = np.array(
            [s.color.as_tuple() for s in self._seeds], dtype=np.float64
        ).reshape(-1, 3)
        self._positions.setflags(write=False)
        self._colors.setflags(write=False)

    # ------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._seeds)

    def __iter__(self) -> Iterator[Seed]:
        return iter(self._seeds)

    def __getitem__(self, index: int) -> Seed:
        return self._seeds[index]

    def __bool__(self) -> bool:
        return bool(self._seeds)

    def __eq__(self, other):
        if not isinstance(other, SeedSet):
            return NotImplemented
        return self._seeds == other._seeds

    __hash__ = None

    # ------------------------------------------------------------
    # Array views for the vectorized kernel
    # ------------------------------------------------------------
    @property
    def positions(self) -> np.ndarray:
        """(n, 2) float64 array of (x, y), in seed order."""
        return self._positions

    @property
    def colors(self) -> np.ndarray:
        """(n, 3) float64 array of (r, g, b), in seed order."""
        return self._colors

    def __repr__(self):
        return f"SeedSet(n={len(self._seeds)})"
