"""
Pixel sampling: RGBA buffer -> PointSet.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

import numpy as np

from colorcube import config
from colorcube.model.points import PointSet

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

Buffer = Union[bytes, bytearray, memoryview, "npt.NDArray[np.uint8]"]


def sample_pixels(buffer: Buffer, width: int, height: int, step: int) -> PointSet:
    """
    Walk the image on a step x step grid and turn visible pixels into points.

    Rows are visited top to bottom and pixels left to right, starting at
    (0, 0). Pixels whose alpha is below 1% of full scale are skipped.

    Args:
        buffer: Tightly packed RGBA8888 data, at least width*height*4 bytes.
        width: Image width in pixels.
        height: Image height in pixels.
        step: Grid spacing, >= 1.

    Returns:
        PointSet with x=R/255, y=G/255, z=B/255.

    Raises:
        ValueError: If step < 1, a dimension is negative, or the buffer is too small.
    """
    if step < 1:
        raise ValueError(f"Sampling step must be >= 1, got {step}.")
    if width < 0 or height < 0:
        raise ValueError(f"Invalid image size {width}x{height}.")

    n_bytes = width * height * 4
    if n_bytes == 0:
        return PointSet.empty()

    if isinstance(buffer, np.ndarray):
        flat = np.asarray(buffer, dtype=np.uint8).reshape(-1)
    else:
        flat = np.frombuffer(buffer, dtype=np.uint8)
    if flat.size < n_bytes:
        raise ValueError(f"Buffer holds {flat.size} bytes, expected {n_bytes} for {width}x{height} RGBA.")

    pixels = flat[:n_bytes].reshape(height, width, 4)[::step, ::step].reshape(-1, 4)
    alpha = pixels[:, 3].astype(np.float64) / 255.0
    visible = pixels[alpha >= config.ALPHA_THRESHOLD]

    point_set = PointSet(visible[:, :3].astype(np.float64) / 255.0)
    logger.debug("Sampled %d of %d grid pixels (step=%d).", len(point_set), pixels.shape[0], step)
    return point_set
