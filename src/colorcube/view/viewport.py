"""
Backing buffer management for high-DPI displays.

The renderer always works in logical pixels. This module is the only place
that knows about the device pixel ratio: it sizes the physical buffer and
hands out painters whose transform maps one logical unit to `ratio` pixels.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QImage, QPainter

from colorcube.model.state import Viewport

logger = logging.getLogger(__name__)


class ViewportManager:
    def __init__(self, request_redraw: Optional[Callable[[], None]] = None) -> None:
        self._request_redraw = request_redraw
        self._viewport: Viewport = Viewport(0, 0, 1.0)
        self._buffer: QImage = QImage()

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def buffer(self) -> QImage:
        """Physical-resolution image the renderer paints into."""
        return self._buffer

    def resize(
        self,
        logical_width: float,
        logical_height: float,
        ratio: float = 1.0,
        notify: bool = True,
    ) -> bool:
        """
        Match the backing buffer to a new logical size and pixel ratio.

        Args:
            logical_width: Width in device independent pixels.
            logical_height: Height in device independent pixels.
            ratio: Device pixel ratio; non-positive values fall back to 1.
            notify: Request a redraw when the buffer changes.

        Returns:
            True if the buffer was reallocated,
            False when nothing changed.
        """
        ratio = ratio if ratio and ratio > 0 else 1.0
        new_viewport = Viewport(float(logical_width), float(logical_height), float(ratio))
        if new_viewport == self._viewport and not self._buffer.isNull():
            return False

        buf_w, buf_h = new_viewport.buffer_size
        self._viewport = new_viewport
        self._buffer = QImage(max(1, buf_w), max(1, buf_h), QImage.Format.Format_ARGB32_Premultiplied)
        self._buffer.fill(Qt.GlobalColor.transparent)
        logger.debug(
            "Viewport %gx%g @%gx -> buffer %dx%d",
            logical_width, logical_height, ratio, self._buffer.width(), self._buffer.height(),
        )

        if notify and self._request_redraw is not None:
            self._request_redraw()
        return True

    def begin(self) -> QPainter:
        """
        Open a painter on the buffer with the logical-to-physical scale applied.

        The caller must call `end()` on the returned painter.
        """
        painter = QPainter(self._buffer)
        painter.scale(self._viewport.ratio, self._viewport.ratio)
        return painter
