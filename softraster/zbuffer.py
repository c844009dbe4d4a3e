"""Depth buffer used for hidden surface removal."""

from __future__ import annotations

import math


class ZBuffer:
    """Per-pixel depth store; smaller depth means closer."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._depths = [0.0] * (width * height)

    def clear(self) -> None:
        """Reset every depth to infinity."""
        self._depths = [math.inf] * (self.width * self.height)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        return y * self.width + x

    def at(self, x: int, y: int) -> float:
        return self._depths[self._offset(x, y)]

    def test_and_set(self, x: int, y: int, depth: float) -> bool:
        """Store ``depth`` if it is closer than the stored one; report whether it was."""
        offset = self._offset(x, y)
        if depth < self._depths[offset]:
            self._depths[offset] = depth
            return True
        return False