"""
Zoom-to-fit for a freshly sampled point set.
"""
from __future__ import annotations

from dataclasses import replace
import logging

from colorcube import config
from colorcube.model.points import PointSet
from colorcube.model.projection import project_array
from colorcube.model.state import ViewState, Viewport, clamp_zoom

logger = logging.getLogger(__name__)


def compute_fit_zoom(point_set: PointSet, view: ViewState, viewport: Viewport) -> float:
    """
    Choose a zoom so the projected points cover about 70% of the short side.

    The points are projected at zoom 1 with the current orientation; the
    larger side of their screen bounding box is then scaled to the target.
    Call it once per new point set, not per frame. `view` is left untouched.

    Args:
        point_set: Points to fit.
        view: Current orientation; only rx and ry are used.
        viewport: Logical drawing size.

    Returns:
        The fitted zoom, clamped to [ZOOM_MIN, ZOOM_MAX]. Degenerate sets
        (zero or one point) get FIT_DEGENERATE_ZOOM.
    """
    if len(point_set) < 2:
        logger.debug("Auto-fit skipped for %d point(s).", len(point_set))
        return config.FIT_DEGENERATE_ZOOM

    unit_view = replace(view, zoom=config.FIT_EVAL_ZOOM)
    sx, sy, _, _ = project_array(point_set.coords, unit_view, viewport.width, viewport.height)

    span_x = max(1.0, float(sx.max() - sx.min()))
    span_y = max(1.0, float(sy.max() - sy.min()))
    span = max(span_x, span_y)
    target = min(viewport.width, viewport.height) * config.FIT_FRACTION

    fitted = clamp_zoom(target / span)
    logger.debug("Auto-fit: span=%.1fpx target=%.1fpx zoom=%.3f", span, target, fitted)
    return fitted
