"""Keyboard state and bounded event queues."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum


class KeyEventType(Enum):
    PRESS = "press"
    RELEASE = "release"
    INVALID = "invalid"


@dataclass(frozen=True)
class KeyEvent:
    """A key press or release; the default event is invalid."""

    type: KeyEventType = KeyEventType.INVALID
    code: int = 0

    @property
    def is_press(self) -> bool:
        return self.type is KeyEventType.PRESS

    @property
    def is_release(self) -> bool:
        return self.type is KeyEventType.RELEASE

    @property
    def is_valid(self) -> bool:
        return self.type is not KeyEventType.INVALID


class Keyboard:
    """Tracks pressed keys and keeps the most recent key and character events."""

    KEY_COUNT = 256
    BUFFER_SIZE = 4

    def __init__(self):
        self._key_states = [False] * self.KEY_COUNT
        self._key_buffer: deque[KeyEvent] = deque(maxlen=self.BUFFER_SIZE)
        self._char_buffer: deque[str] = deque(maxlen=self.BUFFER_SIZE)
        self._autorepeat = False

    @classmethod
    def _code(cls, keycode) -> int:
        code = ord(keycode) if isinstance(keycode, str) else int(keycode)
        if not 0 <= code < cls.KEY_COUNT:
            raise ValueError(f"key code {code} out of range")
        return code

    def key_is_pressed(self, keycode) -> bool:
        return self._key_states[self._code(keycode)]

    def read_key(self) -> KeyEvent:
        """Pop the oldest key event, or return an invalid event when none is queued."""
        return self._key_buffer.popleft() if self._key_buffer else KeyEvent()

    def key_is_empty(self) -> bool:
        return not self._key_buffer

    def read_char(self) -> str | None:
        """Pop the oldest typed character, or None when none is queued."""
        return self._char_buffer.popleft() if self._char_buffer else None

    def char_is_empty(self) -> bool:
        return not self._char_buffer

    def flush_key(self) -> None:
        self._key_buffer.clear()

    def flush_char(self) -> None:
        self._char_buffer.clear()

    def flush(self) -> None:
        self.flush_key()
        self.flush_char()

    def enable_autorepeat(self) -> None:
        self._autorepeat = True

    def disable_autorepeat(self) -> None:
        self._autorepeat = False

    def autorepeat_is_enabled(self) -> bool:
        return self._autorepeat

    def on_key_pressed(self, keycode) -> None:
        code = self._code(keycode)
        self._key_states[code] = True
        self._key_buffer.append(KeyEvent(KeyEventType.PRESS, code))

    def on_key_released(self, keycode) -> None:
        code = self._code(keycode)
        self._key_states[code] = False
        self._key_buffer.append(KeyEvent(KeyEventType.RELEASE, code))

    def on_char(self, character: str) -> None:
        self._char_buffer.append(character)