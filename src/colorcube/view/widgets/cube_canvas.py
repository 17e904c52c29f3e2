"""
RGB Cube Canvas (QWidget)
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QEvent, QRectF, Qt, Signal
from PySide6.QtGui import (
    QFocusEvent, QHideEvent, QImage, QMouseEvent, QPainter, QPaintEvent, QResizeEvent, QWheelEvent,
)
from PySide6.QtWidgets import QSizePolicy, QWidget

from colorcube.controller.interaction import InteractionController
from colorcube.model.autofit import compute_fit_zoom
from colorcube.model.points import PointSet
from colorcube.model.state import ViewState
from colorcube.view.renderer import render
from colorcube.view.viewport import ViewportManager

logger = logging.getLogger(__name__)

MOUSE_POINTER_ID = 0


class CubeCanvas(QWidget):
    """
    Interactive view of a PointSet inside the RGB cube.

      - left-drag orbits (yaw / pitch),
      - the wheel zooms,
      - resizes and device pixel ratio changes reallocate the backing buffer.

    Every change re-renders the buffer synchronously; paintEvent only blits it.
    """
    point_count_changed = Signal(int)
    view_changed = Signal(object)

    def __init__(self, parent: Optional[QWidget] = None, view: Optional[ViewState] = None) -> None:
        super().__init__(parent)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(200, 150)
        self.setMouseTracking(False)
        self.setFocusPolicy(Qt.FocusPolicy.ClickFocus)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent, True)

        self._point_set: PointSet = PointSet.empty()
        self._controller = InteractionController(
            view=view if view is not None else ViewState(),
            request_redraw=self.redraw,
            capture_pointer=self._capture_pointer,
            release_pointer=self._release_pointer,
        )
        self._viewport_manager = ViewportManager(request_redraw=self.redraw)
        self._frames_rendered: int = 0

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def view(self) -> ViewState:
        return self._controller.view

    @property
    def controller(self) -> InteractionController:
        return self._controller

    @property
    def viewport_manager(self) -> ViewportManager:
        return self._viewport_manager

    @property
    def point_set(self) -> PointSet:
        return self._point_set

    @property
    def frames_rendered(self) -> int:
        return self._frames_rendered

    def rebuild(self, point_set: PointSet) -> None:
        """
        Show a new point set: fit the zoom once, then redraw.
        """
        self._sync_viewport(redraw=False)
        self._point_set = point_set
        zoom = compute_fit_zoom(point_set, self.view, self._viewport_manager.viewport)
        self._controller.set_zoom(zoom)
        logger.info(f"Rebuilt cube view with {len(point_set)} points (zoom={self.view.zoom:.3f}).")
        self.redraw()
        self.point_count_changed.emit(len(point_set))

    def reset_view(self) -> None:
        """Restore the default orbit and zoom."""
        self._controller.reset_view()

    def redraw(self) -> None:
        """Render the current state into the backing buffer and schedule a repaint."""
        if self._viewport_manager.buffer.isNull():
            return
        painter = self._viewport_manager.begin()
        try:
            render(painter, self._point_set, self.view, self._viewport_manager.viewport)
        finally:
            painter.end()
        self._frames_rendered += 1
        self.view_changed.emit(self.view)
        self.update()

    def grab_frame(self) -> QImage:
        """Copy of the last rendered frame at physical resolution."""
        self._sync_viewport()
        return self._viewport_manager.buffer.copy()

    # ------------------------------------------------------------------------------
    # Internal: viewport
    # ------------------------------------------------------------------------------

    def _sync_viewport(self, redraw: bool = True) -> bool:
        return self._viewport_manager.resize(
            self.width(), self.height(), self.devicePixelRatioF(), notify=redraw
        )

    # ------------------------------------------------------------------------------
    # Internal: pointer capture
    # ------------------------------------------------------------------------------

    def _capture_pointer(self, pointer_id: int) -> None:
        self.grabMouse()
        self.setCursor(Qt.CursorShape.ClosedHandCursor)

    def _release_pointer(self, pointer_id: int) -> None:
        self.releaseMouse()
        self.unsetCursor()

    # ------------------------------------------------------------------------------
    # Qt event handlers
    # ------------------------------------------------------------------------------

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        pos = event.position()
        self._controller.pointer_down(MOUSE_POINTER_ID, pos.x(), pos.y())
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        if self._controller.pointer_move(pos.x(), pos.y()):
            event.accept()
        else:
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mouseReleaseEvent(event)
            return
        self._controller.pointer_up(MOUSE_POINTER_ID)
        event.accept()

    def wheelEvent(self, event: QWheelEvent) -> None:
        # Qt reports positive y when scrolling away from the user
        if self._controller.wheel(-event.angleDelta().y()):
            event.accept()
        else:
            event.ignore()

    def focusOutEvent(self, event: QFocusEvent) -> None:
        self._controller.pointer_cancel(MOUSE_POINTER_ID)
        super().focusOutEvent(event)

    def hideEvent(self, event: QHideEvent) -> None:
        self._controller.pointer_cancel(MOUSE_POINTER_ID)
        super().hideEvent(event)

    def event(self, event: QEvent) -> bool:
        if event.type() == QEvent.Type.UngrabMouse:
            # another widget or a popup took the grab
            self._controller.pointer_cancel(MOUSE_POINTER_ID)
        elif event.type() == QEvent.Type.DevicePixelRatioChange:
            self._sync_viewport()
        return super().event(event)

    def resizeEvent(self, event: QResizeEvent) -> None:
        self._sync_viewport()
        super().resizeEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        self._sync_viewport()
        viewport = self._viewport_manager.viewport
        painter = QPainter(self)
        try:
            painter.drawImage(QRectF(0, 0, viewport.width, viewport.height), self._viewport_manager.buffer)
        finally:
            painter.end()
