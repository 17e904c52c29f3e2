"""
Image Loading
=============
Obtains tightly packed RGBA pixel data for the sampler.

Decoding is left entirely to QImage; this module only converts between
QImage and numpy so the rest of the application deals in plain arrays.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import TYPE_CHECKING

import numpy as np
from PySide6.QtGui import QImage, QImageReader

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class ImageLoadError(Exception):
    """Raised when an image file cannot be read or decoded."""


@dataclass(frozen=True)
class RgbaImage:
    """Decoded image as an (H, W, 4) uint8 array."""
    name: str
    pixels: npt.NDArray[np.uint8]

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])


def supported_suffixes() -> list[str]:
    """Lower-case file suffixes QImageReader can decode, e.g. ['bmp', 'png']."""
    return sorted({bytes(fmt.data()).decode("ascii").lower() for fmt in QImageReader.supportedImageFormats()})


def qimage_to_array(image: QImage) -> npt.NDArray[np.uint8]:
    """
    Copy a QImage into a contiguous (H, W, 4) RGBA8888 array.

    Scan lines in a QImage may be padded, so rows are sliced to width*4 bytes.
    """
    rgba = image.convertToFormat(QImage.Format.Format_RGBA8888)
    w, h = rgba.width(), rgba.height()
    if w == 0 or h == 0:
        return np.zeros((h, w, 4), dtype=np.uint8)

    stride = rgba.bytesPerLine()
    raw = np.frombuffer(rgba.constBits(), dtype=np.uint8, count=stride * h)
    return raw.reshape(h, stride)[:, : w * 4].reshape(h, w, 4).copy()


def array_to_qimage(pixels: npt.NDArray[np.uint8]) -> QImage:
    """Wrap an (H, W, 4) RGBA array in a QImage that owns its own copy."""
    arr = np.ascontiguousarray(pixels, dtype=np.uint8)
    if arr.ndim != 3 or arr.shape[2] != 4:
        raise ValueError(f"Expected shape (H, W, 4), got {arr.shape}.")
    h, w, _ = arr.shape
    image = QImage(arr.data, w, h, 4 * w, QImage.Format.Format_RGBA8888)
    # QImage does not own `arr`; detach before it goes out of scope
    return image.copy()


def load_rgba(path: str) -> RgbaImage:
    """
    Decode an image file.

    Raises:
        ImageLoadError: If the file does not exist or Qt cannot decode it.
    """
    if not os.path.isfile(path):
        raise ImageLoadError(f"Image file not found: {path}")

    reader = QImageReader(path)
    reader.setAutoTransform(True)
    image = reader.read()
    if image.isNull():
        raise ImageLoadError(f"Could not decode '{path}': {reader.errorString()}")

    pixels = qimage_to_array(image)
    logger.info(f"Loaded image {path} ({image.width()}x{image.height()})")
    return RgbaImage(name=os.path.basename(path), pixels=pixels)
