"""Mouse state and a bounded event queue."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum


class MouseEventType(Enum):
    L_PRESS = "l_press"
    L_RELEASE = "l_release"
    R_PRESS = "r_press"
    R_RELEASE = "r_release"
    WHEEL_UP = "wheel_up"
    WHEEL_DOWN = "wheel_down"
    MOVE = "move"
    INVALID = "invalid"


@dataclass(frozen=True)
class MouseEvent:
    """Snapshot of the mouse state at the moment of an event."""

    type: MouseEventType = MouseEventType.INVALID
    left_is_pressed: bool = False
    right_is_pressed: bool = False
    x: int = 0
    y: int = 0

    @property
    def is_valid(self) -> bool:
        return self.type is not MouseEventType.INVALID

    @property
    def pos(self) -> tuple[int, int]:
        return (self.x, self.y)


class Mouse:
    """Tracks pointer position and buttons and keeps the most recent events."""

    BUFFER_SIZE = 4

    def __init__(self):
        self.x = 0
        self.y = 0
        self.left_is_pressed = False
        self.right_is_pressed = False
        self.is_in_window = False
        self._buffer: deque[MouseEvent] = deque(maxlen=self.BUFFER_SIZE)

    def pos(self) -> tuple[int, int]:
        return (self.x, self.y)

    def read(self) -> MouseEvent:
        """Pop the oldest event, or return an invalid event when none is queued."""
        return self._buffer.popleft() if self._buffer else MouseEvent()

    def is_empty(self) -> bool:
        return not self._buffer

    def flush(self) -> None:
        self._buffer.clear()

    def _push(self, kind: MouseEventType) -> None:
        self._buffer.append(
            MouseEvent(kind, self.left_is_pressed, self.right_is_pressed, self.x, self.y)
        )

    def on_mouse_move(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self._push(MouseEventType.MOVE)

    def on_mouse_leave(self) -> None:
        self.is_in_window = False

    def on_mouse_enter(self) -> None:
        self.is_in_window = True

    def on_left_pressed(self, x: int, y: int) -> None:
        self.left_is_pressed = True
        self._push(MouseEventType.L_PRESS)

    def on_left_released(self, x: int, y: int) -> None:
        self.left_is_pressed = False
        self._push(MouseEventType.L_RELEASE)

    def on_right_pressed(self, x: int, y: int) -> None:
        self.right_is_pressed = True
        self._push(MouseEventType.R_PRESS)

    def on_right_released(self, x: int, y: int) -> None:
        self.right_is_pressed = False
        self._push(MouseEventType.R_RELEASE)

    def on_wheel_up(self, x: int, y: int) -> None:
        self._push(MouseEventType.WHEEL_UP)

    def on_wheel_down(self, x: int, y: int) -> None:
        self._push(MouseEventType.WHEEL_DOWN)