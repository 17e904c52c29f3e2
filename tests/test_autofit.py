from __future__ import annotations

from dataclasses import replace

import numpy as np
import pytest

from colorcube import config
from colorcube.model.autofit import compute_fit_zoom
from colorcube.model.points import PointSet
from colorcube.model.projection import project_array
from colorcube.model.state import ViewState, Viewport


def _span(point_set: PointSet, view: ViewState, viewport: Viewport) -> float:
    sx, sy, _, _ = project_array(point_set.coords, view, viewport.width, viewport.height)
    return max(sx.max() - sx.min(), sy.max() - sy.min())


def test_pure_corners_fill_seventy_percent(corners: PointSet, default_view: ViewState, viewport: Viewport) -> None:
    zoom = compute_fit_zoom(corners, default_view, viewport)
    fitted = replace(default_view, zoom=zoom)
    assert config.ZOOM_MIN <= zoom <= config.ZOOM_MAX
    assert _span(corners, fitted, viewport) == pytest.approx(420.0)


def test_fit_does_not_mutate_view(corners: PointSet, default_view: ViewState, viewport: Viewport) -> None:
    compute_fit_zoom(corners, default_view, viewport)
    assert default_view == ViewState()


def test_fit_ignores_current_zoom(corners: PointSet, viewport: Viewport) -> None:
    a = compute_fit_zoom(corners, ViewState(zoom=0.3), viewport)
    b = compute_fit_zoom(corners, ViewState(zoom=5.0), viewport)
    assert a == pytest.approx(b)


@pytest.mark.parametrize("coords", [[], [(0.2, 0.4, 0.6)]])
def test_degenerate_sets_get_unit_zoom(coords, default_view: ViewState, viewport: Viewport) -> None:
    assert compute_fit_zoom(PointSet(coords), default_view, viewport) == 1.0


def test_identical_points_clamp_to_max_zoom(default_view: ViewState, viewport: Viewport) -> None:
    # span collapses to the 1px minimum, so the raw zoom is far above the limit
    ps = PointSet([(0.3, 0.3, 0.3)] * 10)
    assert compute_fit_zoom(ps, default_view, viewport) == config.ZOOM_MAX


def test_full_cube_stays_in_range(default_view: ViewState) -> None:
    rng = np.random.default_rng(3)
    ps = PointSet(rng.random((500, 3)))
    for vp in (Viewport(800, 600), Viewport(50, 4000), Viewport(0, 0)):
        zoom = compute_fit_zoom(ps, default_view, vp)
        assert config.ZOOM_MIN <= zoom <= config.ZOOM_MAX
