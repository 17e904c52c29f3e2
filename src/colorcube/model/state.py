"""
View State (Data Model)
=======================
This module defines the small value objects the projection and rendering read.

Why is this file needed?
------------------------
1. State Management: ViewState is the single mutable value of the viewer
   (orbit angles and zoom). It is passed explicitly to the projector and the
   renderer instead of living in a global, so several views, or a headless
   render, can coexist.
2. Invariants: Pitch and zoom clamping live next to the data they protect.

Classes:
    ViewState: Pitch / yaw / zoom of the orbiting camera.
    Viewport: Logical drawing size plus device pixel ratio.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math

from colorcube import config

logger = logging.getLogger(__name__)


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def clamp_pitch(rx: float) -> float:
    """Keep pitch inside the open interval that avoids flipping through a pole."""
    limit = math.nextafter(config.PITCH_LIMIT, 0.0)
    return clamp(rx, -limit, limit)


def clamp_zoom(zoom: float) -> float:
    return clamp(zoom, config.ZOOM_MIN, config.ZOOM_MAX)


@dataclass
class ViewState:
    """
    Orbit parameters of the cube view.

    rx: pitch in radians, rotation about the horizontal screen axis.
    ry: yaw in radians, rotation about the vertical axis. Unbounded.
    zoom: scale multiplier, always positive.
    """
    rx: float = config.DEFAULT_RX
    ry: float = config.DEFAULT_RY
    zoom: float = config.DEFAULT_ZOOM

    def reset(self) -> None:
        """Restore the default orbit."""
        self.rx = config.DEFAULT_RX
        self.ry = config.DEFAULT_RY
        self.zoom = config.DEFAULT_ZOOM
        logger.info("View state has been reset.")

    def orbit(self, d_yaw: float, d_pitch: float) -> None:
        self.ry += d_yaw
        self.rx = clamp_pitch(self.rx + d_pitch)

    def scale_zoom(self, factor: float) -> None:
        self.zoom = clamp_zoom(self.zoom * factor)

    def set_zoom(self, zoom: float) -> None:
        self.zoom = clamp_zoom(zoom)


@dataclass(frozen=True)
class Viewport:
    """Drawing area in logical (device independent) pixels."""
    width: float
    height: float
    ratio: float = field(default=1.0)

    @property
    def short_side(self) -> float:
        """Smaller dimension, never below 1 so it is safe to divide by."""
        return max(1.0, min(self.width, self.height))

    @property
    def buffer_size(self) -> tuple[int, int]:
        """Physical size of the backing buffer."""
        return round(self.width * self.ratio), round(self.height * self.ratio)
