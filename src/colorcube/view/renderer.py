"""
Cube Renderer (QPainter)
========================
Draws the RGB axes and the depth-sorted point cloud onto any QPainter.

Why is this file needed?
------------------------
1. Separation: The widget only owns input and buffers; everything that is
   painted comes from here, so the same code renders on screen and headless.
2. Ordering: Points are drawn far-to-near (painter's algorithm). Points are
   zero-thickness markers, so sorting by depth is enough to make nearer
   points cover farther ones.

Functions:
    render: Paint one frame.
    draw_order: Stable back-to-front index order for a point set.
    render_to_image: Paint one frame into a new QImage.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QImage, QPainter, QPen

from colorcube import config
from colorcube.model.points import Point3D, PointSet
from colorcube.model.projection import project, project_array
from colorcube.model.state import ViewState, Viewport
from colorcube.view.viewport import ViewportManager

if TYPE_CHECKING:
    import numpy.typing as npt

# (corner, marker color, label); line colors come from config.AXIS_COLORS
_AXES: tuple[tuple[Point3D, tuple[int, int, int], str], ...] = (
    (Point3D(1.0, 0.0, 0.0), (255, 0, 0), "R (1,0,0)"),
    (Point3D(0.0, 1.0, 0.0), (0, 255, 0), "G (0,1,0)"),
    (Point3D(0.0, 0.0, 1.0), (0, 0, 255), "B (0,0,1)"),
)
_ORIGIN = Point3D(0.0, 0.0, 0.0)


def _qcolor(rgba: tuple[int, int, int, float]) -> QColor:
    r, g, b, a = rgba
    color = QColor(r, g, b)
    color.setAlphaF(a)
    return color


def point_radius(base: float, viewport: Viewport) -> float:
    """Marker radius: grows with zoom, never below the minimum visible size."""
    return max(config.POINT_MIN_RADIUS, config.POINT_RADIUS_COEFF * base / viewport.short_side)


def draw_order(point_set: PointSet, view: ViewState, viewport: Viewport) -> npt.NDArray[np.intp]:
    """Indices of `point_set` sorted by ascending depth; ties keep input order."""
    if len(point_set) == 0:
        return np.empty(0, dtype=np.intp)
    _, _, depth, _ = project_array(point_set.coords, view, viewport.width, viewport.height)
    return np.argsort(depth, kind="stable")


def _draw_background(painter: QPainter, viewport: Viewport) -> None:
    painter.save()
    painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Source)
    painter.fillRect(QRectF(0, 0, viewport.width, viewport.height), QColor(config.BACKGROUND_COLOR))
    painter.restore()


def _draw_axes(painter: QPainter, view: ViewState, viewport: Viewport) -> None:
    w, h = viewport.width, viewport.height
    origin = project(_ORIGIN, view, w, h)
    corners = [project(corner, view, w, h) for corner, _, _ in _AXES]

    painter.save()
    painter.setBrush(Qt.BrushStyle.NoBrush)
    for pr, line_rgba in zip(corners, config.AXIS_COLORS):
        painter.setPen(QPen(_qcolor(line_rgba), config.AXIS_LINE_WIDTH))
        painter.drawLine(QPointF(origin.sx, origin.sy), QPointF(pr.sx, pr.sy))

    painter.setPen(Qt.PenStyle.NoPen)
    r = config.CORNER_MARKER_RADIUS
    for pr, (_, marker_rgb, _) in zip(corners, _AXES):
        painter.setBrush(QColor(*marker_rgb))
        painter.drawEllipse(QPointF(pr.sx, pr.sy), r, r)

    font = QFont(config.LABEL_FONT_FAMILY)
    font.setStyleHint(QFont.StyleHint.SansSerif)
    font.setPixelSize(config.LABEL_PIXEL_SIZE)
    painter.setFont(font)
    painter.setPen(_qcolor(config.LABEL_COLOR))
    dx, dy = config.LABEL_OFFSET
    for pr, (_, _, label) in zip(corners, _AXES):
        painter.drawText(QPointF(pr.sx + dx, pr.sy + dy), label)
    painter.restore()


def _draw_points(painter: QPainter, point_set: PointSet, view: ViewState, viewport: Viewport) -> None:
    if len(point_set) == 0:
        return

    sx, sy, depth, base = project_array(point_set.coords, view, viewport.width, viewport.height)
    order = np.argsort(depth, kind="stable")
    radius = point_radius(base, viewport)

    # every point shares one radius, so both outline pens are built once
    outline_width = max(1.0, radius * config.POINT_OUTLINE_RATIO)
    dark_pen = QPen(_qcolor(config.OUTLINE_DARK), outline_width)
    light_pen = QPen(_qcolor(config.OUTLINE_LIGHT), outline_width)

    rgb = point_set.rgb255
    is_bright = point_set.luminance > config.LUMINANCE_THRESHOLD
    fill = QColor()

    painter.save()
    painter.setOpacity(config.POINT_OPACITY)
    for i in order.tolist():
        r, g, b = rgb[i]
        fill.setRgb(int(r), int(g), int(b))
        fill.setAlphaF(config.POINT_ALPHA)
        painter.setBrush(QBrush(fill))
        painter.setPen(dark_pen if is_bright[i] else light_pen)
        painter.drawEllipse(QPointF(float(sx[i]), float(sy[i])), radius, radius)
    painter.restore()


def render(painter: QPainter, point_set: PointSet, view: ViewState, viewport: Viewport) -> None:
    """
    Paint one complete frame.

    Args:
        painter: Active painter whose transform maps logical units to the device.
        point_set: Points to plot; may be empty (axes only).
        view: Orbit and zoom, read only.
        viewport: Logical size the frame is laid out for.
    """
    painter.save()
    painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
    painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, True)
    _draw_background(painter, viewport)
    _draw_axes(painter, view, viewport)
    _draw_points(painter, point_set, view, viewport)
    painter.restore()


def render_to_image(
    point_set: PointSet,
    view: ViewState,
    width: int,
    height: int,
    ratio: float = 1.0,
) -> QImage:
    """Render a frame headlessly; the returned image is width*ratio x height*ratio pixels."""
    manager = ViewportManager()
    manager.resize(width, height, ratio)
    painter = manager.begin()
    try:
        render(painter, point_set, view, manager.viewport)
    finally:
        painter.end()
    return manager.buffer.copy()
