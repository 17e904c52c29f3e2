"""
Sampled Points
==============
Immutable containers for the pixel colors plotted inside the unit RGB cube.

Classes:
    Point3D: One sampled color, x/y/z = normalized R/G/B.
    PointSet: Ordered, read-only collection of points backed by a numpy array.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, TYPE_CHECKING

import numpy as np

from colorcube import config

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point3D:
    """A single color in the unit cube."""
    x: float  # red
    y: float  # green
    z: float  # blue

    @property
    def rgb255(self) -> tuple[int, int, int]:
        return round(self.x * 255), round(self.y * 255), round(self.z * 255)

    @property
    def luminance(self) -> float:
        """Perceived brightness in [0, 1]."""
        wr, wg, wb = config.LUMINANCE_WEIGHTS
        return wr * self.x + wg * self.y + wb * self.z


class PointSet:
    """
    Read-only sequence of sampled points.

    The set is never edited in place; a new image or sampling step produces a
    new instance. Draw order is decided by the renderer, not by the order here.
    """

    __slots__ = ("_coords",)

    def __init__(self, coords: npt.ArrayLike | None = None) -> None:
        if coords is None:
            arr = np.empty((0, 3), dtype=np.float64)
        else:
            arr = np.array(coords, dtype=np.float64).reshape(-1, 3)
        arr.setflags(write=False)
        self._coords = arr

    @classmethod
    def from_points(cls, points: Iterable[Point3D]) -> PointSet:
        return cls([(p.x, p.y, p.z) for p in points])

    @classmethod
    def empty(cls) -> PointSet:
        return cls()

    @property
    def coords(self) -> npt.NDArray[np.float64]:
        """(N, 3) read-only array of normalized R, G, B."""
        return self._coords

    @property
    def rgb255(self) -> npt.NDArray[np.int_]:
        """(N, 3) channel values rounded to 0-255."""
        return np.rint(self._coords * 255).astype(np.int_)

    @property
    def luminance(self) -> npt.NDArray[np.float64]:
        return self._coords @ np.asarray(config.LUMINANCE_WEIGHTS, dtype=np.float64)

    def __len__(self) -> int:
        return int(self._coords.shape[0])

    def __iter__(self) -> Iterator[Point3D]:
        for x, y, z in self._coords.tolist():
            yield Point3D(x, y, z)

    def __getitem__(self, index: int) -> Point3D:
        x, y, z = self._coords[index].tolist()
        return Point3D(x, y, z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointSet):
            return NotImplemented
        return np.array_equal(self._coords, other._coords)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PointSet(n={len(self)})"
