from __future__ import annotations

import math

import pytest

from colorcube import config
from colorcube.model.state import ViewState, Viewport, clamp_pitch, clamp_zoom


def test_defaults() -> None:
    view = ViewState()
    assert (view.rx, view.ry, view.zoom) == (-0.9, 0.6, 1.6)


def test_reset_restores_defaults() -> None:
    view = ViewState(rx=0.3, ry=12.0, zoom=4.0)
    view.reset()
    assert view == ViewState()


def test_orbit_clamps_pitch_but_not_yaw() -> None:
    view = ViewState(rx=0.0, ry=0.0)
    view.orbit(d_yaw=50.0, d_pitch=10.0)
    assert view.ry == pytest.approx(50.0)
    assert view.rx == pytest.approx(math.pi / 2 - 0.01)
    assert view.rx < config.PITCH_LIMIT
    view.orbit(d_yaw=0.0, d_pitch=-20.0)
    assert view.rx == pytest.approx(-(math.pi / 2 - 0.01))
    assert view.rx > -config.PITCH_LIMIT


def test_clamp_helpers() -> None:
    assert clamp_pitch(0.25) == 0.25
    assert clamp_zoom(100.0) == config.ZOOM_MAX
    assert clamp_zoom(0.0) == config.ZOOM_MIN


def test_scale_zoom_stays_in_range() -> None:
    view = ViewState(zoom=5.9)
    view.scale_zoom(2.0)
    assert view.zoom == config.ZOOM_MAX


def test_viewport_buffer_size_and_short_side() -> None:
    vp = Viewport(400, 300, 2.0)
    assert vp.buffer_size == (800, 600)
    assert vp.short_side == 300
    assert Viewport(0, 0).short_side == 1.0
