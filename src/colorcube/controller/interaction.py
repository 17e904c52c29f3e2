"""
Orbit & Zoom Controller
=======================
Turns pointer and wheel input into ViewState changes.

Why is this file needed?
------------------------
1. Ownership: It is the only writer of the ViewState. Widgets forward raw
   input here and never touch the orbit angles themselves.
2. Testability: It knows nothing about Qt. Pointer capture, release and
   redraw are injected callables, so the state machine runs headless.

States:
    IDLE -> DRAGGING on pointer_down (capture pointer, remember position)
    DRAGGING -> DRAGGING on pointer_move (orbit, redraw)
    DRAGGING -> IDLE on pointer_up / pointer_cancel (release pointer)
Wheel input is handled in either state.
"""
from __future__ import annotations

from enum import Enum, auto
import logging
from typing import Callable, Optional

from colorcube import config
from colorcube.model.state import ViewState

logger = logging.getLogger(__name__)


def _noop(*_args) -> None:
    return None


class DragState(Enum):
    IDLE = auto()
    DRAGGING = auto()


class InteractionController:
    """Synchronous drag-to-orbit / wheel-to-zoom state machine."""

    def __init__(
        self,
        view: Optional[ViewState] = None,
        request_redraw: Callable[[], None] = _noop,
        capture_pointer: Callable[[int], None] = _noop,
        release_pointer: Callable[[int], None] = _noop,
        sensitivity: float = config.DRAG_SENSITIVITY,
    ) -> None:
        self.view: ViewState = view if view is not None else ViewState()
        self._request_redraw = request_redraw
        self._capture_pointer = capture_pointer
        self._release_pointer = release_pointer
        self._sensitivity = sensitivity

        self._state: DragState = DragState.IDLE
        self._pointer_id: Optional[int] = None
        self._last: Optional[tuple[float, float]] = None

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def is_dragging(self) -> bool:
        return self._state is DragState.DRAGGING

    @property
    def last_position(self) -> Optional[tuple[float, float]]:
        return self._last

    # ------------------------------------------------------------------------------
    # Pointer input
    # ------------------------------------------------------------------------------

    def pointer_down(self, pointer_id: int, x: float, y: float) -> None:
        if self.is_dragging:
            # a second press without a release; drop the stale capture first
            self._end_drag()
        self._capture_pointer(pointer_id)
        self._pointer_id = pointer_id
        self._last = (x, y)
        self._state = DragState.DRAGGING
        logger.debug("Drag started at (%.1f, %.1f).", x, y)

    def pointer_move(self, x: float, y: float) -> bool:
        """
        Orbit by the distance moved since the last event.

        Returns:
            True if the view changed (a redraw was requested).
        """
        if not self.is_dragging or self._last is None:
            return False

        last_x, last_y = self._last
        self.view.orbit(
            d_yaw=(x - last_x) * self._sensitivity,
            d_pitch=(y - last_y) * self._sensitivity,
        )
        self._last = (x, y)
        self._request_redraw()
        return True

    def pointer_up(self, pointer_id: Optional[int] = None) -> None:
        if self._owns(pointer_id):
            self._end_drag()

    def pointer_cancel(self, pointer_id: Optional[int] = None) -> None:
        if self._owns(pointer_id):
            logger.debug("Drag cancelled.")
            self._end_drag()

    def _owns(self, pointer_id: Optional[int]) -> bool:
        """True while dragging and `pointer_id` is the captured pointer (or not given)."""
        if not self.is_dragging:
            return False
        return pointer_id is None or pointer_id == self._pointer_id

    def _end_drag(self) -> None:
        pointer_id = self._pointer_id
        self._state = DragState.IDLE
        self._pointer_id = None
        self._last = None
        if pointer_id is not None:
            self._release_pointer(pointer_id)

    # ------------------------------------------------------------------------------
    # Wheel input
    # ------------------------------------------------------------------------------

    def wheel(self, delta_y: float) -> bool:
        """
        Zoom by one notch.

        Args:
            delta_y: Scroll amount, positive when scrolling toward the user.

        Returns:
            True when the event was consumed; the caller must suppress the
            default scroll behavior.
        """
        if delta_y == 0:
            return True
        factor = config.WHEEL_ZOOM_IN if delta_y > 0 else config.WHEEL_ZOOM_OUT
        self.view.scale_zoom(factor)
        self._request_redraw()
        return True

    # ------------------------------------------------------------------------------
    # Explicit actions
    # ------------------------------------------------------------------------------

    def set_zoom(self, zoom: float) -> None:
        """Apply a zoom chosen by auto-fit. Does not redraw."""
        self.view.set_zoom(zoom)

    def reset_view(self) -> None:
        self.view.reset()
        self._request_redraw()
