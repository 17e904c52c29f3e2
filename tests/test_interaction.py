from __future__ import annotations

import math

import numpy as np
import pytest

from colorcube import config
from colorcube.controller.interaction import DragState, InteractionController
from colorcube.model.state import ViewState


class _Recorder:
    def __init__(self) -> None:
        self.redraws = 0
        self.captured: list[int] = []
        self.released: list[int] = []

    def redraw(self) -> None:
        self.redraws += 1

    def controller(self, view: ViewState | None = None) -> InteractionController:
        return InteractionController(
            view=view,
            request_redraw=self.redraw,
            capture_pointer=self.captured.append,
            release_pointer=self.released.append,
        )


@pytest.fixture
def rec() -> _Recorder:
    return _Recorder()


def test_pointer_down_captures_and_starts_drag(rec: _Recorder) -> None:
    ctl = rec.controller()
    assert ctl.state is DragState.IDLE
    ctl.pointer_down(3, 10.0, 20.0)
    assert ctl.state is DragState.DRAGGING
    assert rec.captured == [3]
    assert ctl.last_position == (10.0, 20.0)
    assert rec.redraws == 0


def test_move_while_idle_is_ignored(rec: _Recorder) -> None:
    ctl = rec.controller()
    assert ctl.pointer_move(50.0, 50.0) is False
    assert ctl.view == ViewState()
    assert rec.redraws == 0


def test_drag_adds_scaled_delta_to_yaw_and_pitch(rec: _Recorder) -> None:
    ctl = rec.controller(ViewState(rx=0.0, ry=0.0))
    ctl.pointer_down(1, 100.0, 100.0)
    assert ctl.pointer_move(110.0, 95.0) is True
    assert ctl.view.ry == pytest.approx(10 * 0.006)
    assert ctl.view.rx == pytest.approx(-5 * 0.006)
    assert ctl.last_position == (110.0, 95.0)
    assert rec.redraws == 1

    # deltas are taken from the last move, not the press position
    ctl.pointer_move(120.0, 95.0)
    assert ctl.view.ry == pytest.approx(20 * 0.006)


def test_pitch_stays_clamped_for_long_drags(rec: _Recorder) -> None:
    ctl = rec.controller()
    rng = np.random.default_rng(11)
    ctl.pointer_down(1, 0.0, 0.0)
    x = y = 0.0
    limit = math.pi / 2 - 0.01
    for dx, dy in rng.normal(0.0, 400.0, size=(200, 2)):
        x, y = x + dx, y + dy
        ctl.pointer_move(x, y)
        assert -limit < ctl.view.rx < limit
    assert ctl.view.ry == pytest.approx(config.DEFAULT_RY + x * 0.006)


@pytest.mark.parametrize("finish", ["pointer_up", "pointer_cancel"])
def test_drag_end_releases_capture(rec: _Recorder, finish: str) -> None:
    ctl = rec.controller()
    ctl.pointer_down(7, 0.0, 0.0)
    getattr(ctl, finish)(7)
    assert ctl.state is DragState.IDLE
    assert ctl.last_position is None
    assert rec.released == [7]

    # a second end event does not release twice
    getattr(ctl, finish)(7)
    assert rec.released == [7]
    assert ctl.pointer_move(5.0, 5.0) is False


def test_repeated_pointer_down_does_not_leak_capture(rec: _Recorder) -> None:
    ctl = rec.controller()
    ctl.pointer_down(1, 0.0, 0.0)
    ctl.pointer_down(2, 0.0, 0.0)
    assert rec.captured == [1, 2]
    assert rec.released == [1]
    ctl.pointer_up(2)
    assert rec.released == [1, 2]


def test_wheel_direction_and_redraw(rec: _Recorder) -> None:
    ctl = rec.controller(ViewState(zoom=1.0))
    assert ctl.wheel(120) is True
    assert ctl.view.zoom == pytest.approx(1.04)
    assert ctl.wheel(-120) is True
    assert ctl.view.zoom == pytest.approx(1.04 * 0.96)
    assert rec.redraws == 2


def test_zero_wheel_delta_is_consumed_without_zooming(rec: _Recorder) -> None:
    ctl = rec.controller(ViewState(zoom=1.0))
    assert ctl.wheel(0) is True
    assert ctl.view.zoom == 1.0
    assert rec.redraws == 0


def test_wheel_works_while_dragging(rec: _Recorder) -> None:
    ctl = rec.controller(ViewState(zoom=1.0))
    ctl.pointer_down(1, 0.0, 0.0)
    ctl.wheel(1)
    assert ctl.is_dragging
    assert ctl.view.zoom == pytest.approx(1.04)


def test_zoom_stays_in_range_for_any_wheel_sequence(rec: _Recorder) -> None:
    ctl = rec.controller()
    for _ in range(200):
        ctl.wheel(1)
    assert ctl.view.zoom == config.ZOOM_MAX
    for _ in range(400):
        ctl.wheel(-1)
    assert ctl.view.zoom == config.ZOOM_MIN


def test_reset_view_restores_defaults_and_redraws(rec: _Recorder) -> None:
    ctl = rec.controller(ViewState(rx=0.2, ry=9.0, zoom=3.0))
    ctl.reset_view()
    assert ctl.view == ViewState()
    assert rec.redraws == 1


def test_set_zoom_clamps_without_redraw(rec: _Recorder) -> None:
    ctl = rec.controller()
    ctl.set_zoom(100.0)
    assert ctl.view.zoom == config.ZOOM_MAX
    assert rec.redraws == 0


def test_pitch_never_reaches_the_pole(rec: _Recorder) -> None:
    ctl = rec.controller()
    ctl.pointer_down(1, 0.0, 0.0)
    ctl.pointer_move(0.0, 10000.0)
    assert ctl.view.rx < config.PITCH_LIMIT
    ctl.pointer_move(0.0, -10000.0)
    assert ctl.view.rx > -config.PITCH_LIMIT


@pytest.mark.parametrize("finish", ["pointer_up", "pointer_cancel"])
def test_other_pointer_does_not_end_drag(rec: _Recorder, finish: str) -> None:
    ctl = rec.controller()
    ctl.pointer_down(4, 0.0, 0.0)
    getattr(ctl, finish)(9)
    assert ctl.state is DragState.DRAGGING
    assert rec.released == []

    # without an id any end event stops the drag
    getattr(ctl, finish)()
    assert ctl.state is DragState.IDLE
    assert rec.released == [4]
