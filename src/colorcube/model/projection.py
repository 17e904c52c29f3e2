"""
Orthographic projection of cube coordinates onto the screen.

The cube is centered on (0.5, 0.5, 0.5), rotated by yaw (about the vertical
axis) and then pitch (about the horizontal axis), and scaled without any
perspective divide: a point's on-screen size never depends on its depth.
All values are in logical pixels; the device pixel ratio is applied later by
the viewport.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import TYPE_CHECKING

import numpy as np

from colorcube import config
from colorcube.model.points import Point3D
from colorcube.model.state import ViewState

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class ProjectedPoint:
    sx: float
    sy: float
    depth: float  # post-rotation z, draw ordering only
    base: float  # pixels per cube unit


def base_scale(view: ViewState, width: float, height: float) -> float:
    """Pixels per cube unit for the current zoom and viewport (at least 1)."""
    return max(1.0, min(width, height) * config.VIEWPORT_FILL * view.zoom)


def _rotate(
    x: float | npt.NDArray[np.float64],
    y: float | npt.NDArray[np.float64],
    z: float | npt.NDArray[np.float64],
    view: ViewState,
):
    sin_x, cos_x = math.sin(view.rx), math.cos(view.rx)
    sin_y, cos_y = math.sin(view.ry), math.cos(view.ry)

    # yaw
    x1 = cos_y * x + sin_y * z
    z1 = -sin_y * x + cos_y * z
    # pitch
    y1 = cos_x * y - sin_x * z1
    z2 = sin_x * y + cos_x * z1
    return x1, y1, z2


def project(point: Point3D, view: ViewState, width: float, height: float) -> ProjectedPoint:
    """
    Project one cube point to screen coordinates.

    Args:
        point: Point with x, y, z in [0, 1].
        view: Orbit and zoom.
        width: Logical viewport width.
        height: Logical viewport height.

    Returns:
        Screen position (origin top-left, y down), depth and base scale.
    """
    c = config.CUBE_CENTER
    x1, y1, z2 = _rotate(point.x - c, point.y - c, point.z - c, view)
    base = base_scale(view, width, height)
    return ProjectedPoint(
        sx=x1 * base + width / 2,
        sy=height / 2 - y1 * base,
        depth=z2,
        base=base,
    )


def project_array(
    coords: npt.ArrayLike,
    view: ViewState,
    width: float,
    height: float,
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64], npt.NDArray[np.float64], float]:
    """
    Vectorized form of `project` for an (N, 3) array.

    Returns:
        (sx, sy, depth, base) where the first three are length-N arrays.
    """
    pts = np.asarray(coords, dtype=np.float64).reshape(-1, 3) - config.CUBE_CENTER
    x1, y1, z2 = _rotate(pts[:, 0], pts[:, 1], pts[:, 2], view)
    base = base_scale(view, width, height)
    sx = x1 * base + width / 2
    sy = height / 2 - y1 * base
    return sx, sy, z2, base
