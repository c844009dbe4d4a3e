"""Colors and a pitched pixel surface to render into."""

from __future__ import annotations

from dataclasses import dataclass

from .vector import Vector3


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel color; ``x`` is the unused fourth byte."""

    r: int = 0
    g: int = 0
    b: int = 0
    x: int = 255

    def __post_init__(self):
        for name in ("r", "g", "b", "x"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name}={value} outside 0..255")

    @property
    def dword(self) -> int:
        """The color packed as 0xXXRRGGBB."""
        return (self.x << 24) | (self.r << 16) | (self.g << 8) | self.b

    @classmethod
    def from_vector(cls, vector) -> Color:
        """Build from a vector whose components are channel values in 0..255."""
        r, g, b = (int(c) for c in vector)
        return cls(r, g, b)

    def to_vector(self) -> Vector3:
        """Return the channels as a float vector in 0..255."""
        return Vector3(float(self.r), float(self.g), float(self.b))


class Surface:
    """A grid of colors whose rows are ``pitch`` pixels apart."""

    def __init__(self, width: int, height: int, pitch: int | None = None):
        if pitch is None:
            pitch = width
        if width < 0 or height < 0 or pitch < width:
            raise ValueError("surface needs non-negative size and pitch >= width")
        self.width = width
        self.height = height
        self.pitch = pitch
        self._pixels = [Color()] * (pitch * height)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} surface")
        return y * self.pitch + x

    def clear(self, fill: Color) -> None:
        self._pixels = [fill] * (self.pitch * self.height)

    def present(self) -> list[list[Color]]:
        """Return the visible rows, each ``width`` pixels long, without padding."""
        return [
            self._pixels[y * self.pitch : y * self.pitch + self.width]
            for y in range(self.height)
        ]

    def put_pixel(self, x: int, y: int, color: Color) -> None:
        self._pixels[self._offset(x, y)] = color

    def get_pixel(self, x: int, y: int) -> Color:
        return self._pixels[self._offset(x, y)]

    @staticmethod
    def aligned_pitch(width: int, byte_alignment: int) -> int:
        """Pixel pitch needed for rows aligned to ``byte_alignment`` bytes (a multiple of 4)."""
        if byte_alignment <= 0 or byte_alignment % 4:
            raise ValueError("byte alignment must be a positive multiple of 4")
        pixel_alignment = byte_alignment // 4
        return width + (pixel_alignment - width % pixel_alignment) % pixel_alignment