"""Pointer gesture state machines for the two picker layouts.

The hex grid only reports a click when the press and the release land on
the same color. The bar reports a click for every completed tap or drag,
wherever it ends, but it only starts dragging once the pointer has moved
past the drag slop when it sits inside a scrolling container.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass

from .types import Color

ColorCallback = Callable[[Color], None]


class Action(enum.Enum):
    DOWN = "down"
    MOVE = "move"
    UP = "up"
    CANCEL = "cancel"


@dataclass(frozen=True)
class PointerEvent:
    x: float
    y: float
    action: Action


def _noop(_color: Color) -> None:
    pass


class HexTouchTracker:
    """Press/release latch for the hex grid."""

    def __init__(self) -> None:
        self.pressed_color: Color | None = None

    def handle(
        self,
        event: PointerEvent,
        color: Color | None,
        on_touch: ColorCallback | None = None,
        on_click: ColorCallback | None = None,
    ) -> bool:
        """Process one event whose hit color is ``color``.

        Returns True if the event landed on a cell.
        """
        on_touch = on_touch or _noop
        on_click = on_click or _noop

        if event.action is Action.CANCEL:
            self.pressed_color = None
            return False
        if color is None:
            if event.action is Action.UP:
                self.pressed_color = None
            return False

        on_touch(color)
        if event.action is Action.DOWN:
            self.pressed_color = color
        elif event.action is Action.UP:
            if color == self.pressed_color:
                on_click(color)
            self.pressed_color = None
        return True


class BarDragTracker:
    """Tap/drag recognition for the color bar.

    ``track`` is called for every pointer sample that should resolve a
    color; the tracker only decides when.
    """

    def __init__(
        self, drag_slop: float, in_scrolling_container: bool = False
    ) -> None:
        self.drag_slop = drag_slop
        self.in_scrolling_container = in_scrolling_container
        self.dragging = False
        self.touch_down_x = 0.0

    def handle(
        self, event: PointerEvent, track: Callable[[PointerEvent], None]
    ) -> bool:
        action = event.action
        if action is Action.DOWN:
            if self.in_scrolling_container:
                self.touch_down_x = event.x
            else:
                self._start_drag(event, track)
        elif action is Action.MOVE:
            if self.dragging:
                track(event)
            elif abs(event.x - self.touch_down_x) > self.drag_slop:
                self._start_drag(event, track)
        elif action is Action.UP:
            if not self.dragging:
                self.dragging = True
            track(event)
            self.dragging = False
        elif action is Action.CANCEL:
            self.dragging = False
        return True

    def _start_drag(
        self, event: PointerEvent, track: Callable[[PointerEvent], None]
    ) -> None:
        self.dragging = True
        track(event)
