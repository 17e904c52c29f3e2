"""
Built-in test images.

Each preset is generated on demand as an (N, N, 4) uint8 RGBA array so the
application ships without image files. Names and order match the preset menu.
"""
from __future__ import annotations

from typing import Callable, TYPE_CHECKING

import numpy as np

from colorcube import config

if TYPE_CHECKING:
    import numpy.typing as npt

RGB = tuple[int, int, int]

RED: RGB = (255, 0, 0)
GREEN: RGB = (0, 255, 0)
BLUE: RGB = (0, 0, 255)
WHITE: RGB = (255, 255, 255)
BLACK: RGB = (0, 0, 0)
CYAN: RGB = (0, 255, 255)
MAGENTA: RGB = (255, 0, 255)
YELLOW: RGB = (255, 255, 0)
GRAY: RGB = (128, 128, 128)


def _rgba(rgb: npt.NDArray[np.float64]) -> npt.NDArray[np.uint8]:
    h, w, _ = rgb.shape
    out = np.empty((h, w, 4), dtype=np.uint8)
    out[..., :3] = np.clip(np.rint(rgb), 0, 255).astype(np.uint8)
    out[..., 3] = 255
    return out


def solid(color: RGB, size: int) -> npt.NDArray[np.uint8]:
    rgb = np.broadcast_to(np.asarray(color, dtype=np.float64), (size, size, 3))
    return _rgba(rgb)


def gradient(start: RGB, end: RGB, size: int) -> npt.NDArray[np.uint8]:
    """Linear left-to-right blend from `start` to `end`."""
    t = np.linspace(0.0, 1.0, size)[None, :, None]
    row = (1.0 - t) * np.asarray(start, dtype=np.float64) + t * np.asarray(end, dtype=np.float64)
    return _rgba(np.broadcast_to(row, (size, size, 3)))


def checkerboard(a: RGB, b: RGB, size: int, cells: int = 8) -> npt.NDArray[np.uint8]:
    cell = max(1, size // cells)
    yy, xx = np.indices((size, size))
    mask = ((yy // cell + xx // cell) % 2 == 0)[..., None]
    rgb = np.where(mask, np.asarray(a, dtype=np.float64), np.asarray(b, dtype=np.float64))
    return _rgba(rgb)


def shades(color: RGB, size: int) -> npt.NDArray[np.uint8]:
    """Top-to-bottom ramp from black to `color`."""
    t = np.linspace(0.0, 1.0, size)[:, None, None]
    col = t * np.asarray(color, dtype=np.float64)
    return _rgba(np.broadcast_to(col, (size, size, 3)))


_PRESETS: dict[str, Callable[[int], npt.NDArray[np.uint8]]] = {
    "solid_red": lambda n: solid(RED, n),
    "solid_green": lambda n: solid(GREEN, n),
    "solid_blue": lambda n: solid(BLUE, n),
    "solid_white": lambda n: solid(WHITE, n),
    "solid_black": lambda n: solid(BLACK, n),
    "gradient_red_to_blue": lambda n: gradient(RED, BLUE, n),
    "gradient_red_to_green": lambda n: gradient(RED, GREEN, n),
    "gradient_green_to_blue": lambda n: gradient(GREEN, BLUE, n),
    "checkerboard_red_green": lambda n: checkerboard(RED, GREEN, n),
    "checkerboard_blue_yellow": lambda n: checkerboard(BLUE, YELLOW, n),
    "checkerboard_black_white": lambda n: checkerboard(BLACK, WHITE, n),
    "shades_red": lambda n: shades(RED, n),
    "shades_green": lambda n: shades(GREEN, n),
    "shades_blue": lambda n: shades(BLUE, n),
    "shades_gray": lambda n: shades(WHITE, n),
    "solid_cyan": lambda n: solid(CYAN, n),
    "solid_magenta": lambda n: solid(MAGENTA, n),
    "solid_yellow": lambda n: solid(YELLOW, n),
}


def preset_names() -> list[str]:
    return list(_PRESETS)


def make_preset(name: str, size: int = config.PRESET_SIZE) -> npt.NDArray[np.uint8]:
    """
    Build a preset image.

    Raises:
        KeyError: If `name` is not a known preset.
    """
    try:
        factory = _PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown preset '{name}'.") from None
    return np.ascontiguousarray(factory(size))
