"""Vertex types, shaders and the effects that bundle them for the pipeline."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field, replace
from numbers import Real
from typing import ClassVar

from .matrix3 import Matrix3
from .surface import Color
from .vector import Vector3


class _Interpolant:
    """Arithmetic over the attributes that are interpolated across a triangle.

    Fields named in ``INTERPOLATED`` take part in the arithmetic; every other
    field is carried over unchanged from the left-hand operand.
    """

    INTERPOLATED: tuple[str, ...] = ("pos",)

    def _paired(self, other, op) -> dict:
        return {name: op(getattr(self, name), getattr(other, name)) for name in self.INTERPOLATED}

    def _scaled(self, scalar, op) -> dict:
        return {name: op(getattr(self, name), scalar) for name in self.INTERPOLATED}

    def _assign(self, values: dict):
        for name, value in values.items():
            setattr(self, name, value)
        return self

    def __add__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return replace(self, **self._paired(other, operator.add))

    def __iadd__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._assign(self._paired(other, operator.add))

    def __sub__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return replace(self, **self._paired(other, operator.sub))

    def __isub__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._assign(self._paired(other, operator.sub))

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return replace(self, **self._scaled(scalar, operator.mul))

    def __imul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return self._assign(self._scaled(scalar, operator.mul))

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return replace(self, **self._scaled(scalar, operator.truediv))

    def __itruediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return self._assign(self._scaled(scalar, operator.truediv))

    def with_pos(self, pos: Vector3):
        """Return a copy placed at ``pos`` with all other attributes kept."""
        return replace(self, pos=pos)


@dataclass
class PositionVertex(_Interpolant):
    """A vertex that carries only a position."""

    pos: Vector3 = field(default_factory=Vector3)


@dataclass
class NormalVertex(_Interpolant):
    """A vertex with a position and a normal, both interpolated."""

    pos: Vector3 = field(default_factory=Vector3)
    n: Vector3 = field(default_factory=Vector3)

    INTERPOLATED = ("pos", "n")


@dataclass
class ColorVertex(_Interpolant):
    """A vertex with a position and a flat color that is not interpolated."""

    pos: Vector3 = field(default_factory=Vector3)
    color: Color = field(default_factory=Color)


@dataclass
class Triangle:
    """Three vertices in drawing order."""

    v0: object
    v1: object
    v2: object

    def __iter__(self) -> Iterator:
        return iter((self.v0, self.v1, self.v2))


class DefaultVertexShader:
    """Rotates and translates positions and leaves every other attribute alone."""

    def __init__(self):
        self.rotation = Matrix3()
        self.translation = Vector3()

    def bind_rotation(self, rotation: Matrix3) -> None:
        self.rotation = rotation.copy()

    def bind_translation(self, translation: Vector3) -> None:
        self.translation = translation.copy()

    def __call__(self, vertex):
        return vertex.with_pos(vertex.pos * self.rotation + self.translation)


class DefaultGeometryShader:
    """Passes the three vertices through as a triangle."""

    def __call__(self, v0, v1, v2, triangle_index: int) -> Triangle:
        return Triangle(v0, v1, v2)


class SolidGeometryShader:
    """Colors each triangle from a table; every two triangles share one entry."""

    def __init__(self):
        self._colors: list[Color] = []

    def bind_colors(self, colors: Sequence[Color]) -> None:
        self._colors = list(colors)

    def __call__(self, v0, v1, v2, triangle_index: int) -> Triangle:
        color = self._colors[triangle_index // 2]
        return Triangle(
            ColorVertex(v0.pos, color),
            ColorVertex(v1.pos, color),
            ColorVertex(v2.pos, color),
        )


class ColorPixelShader:
    """Returns the color attribute of the interpolated input."""

    def __call__(self, attributes) -> Color:
        return attributes.color


class FlatVertexShader:
    """Lights each vertex from its normal and a directional light, then transforms it."""

    def __init__(self):
        self.rotation = Matrix3()
        self.translation = Vector3()
        self.direction = Vector3(0.0, 0.0, 1.0)
        self.diffuse = Vector3(1.0, 1.0, 1.0)
        self.ambient = Vector3(0.1, 0.1, 0.1)
        self.color = Vector3(0.8, 0.85, 1.0)

    def bind_rotation(self, rotation: Matrix3) -> None:
        self.rotation = rotation.copy()

    def bind_translation(self, translation: Vector3) -> None:
        self.translation = translation.copy()

    def set_diffuse_light(self, color: Vector3) -> None:
        self.diffuse = Vector3(color[0], color[1], color[2])

    def set_ambient_light(self, color: Vector3) -> None:
        self.ambient = Vector3(color[0], color[1], color[2])

    def set_light_direction(self, direction: Vector3) -> None:
        if direction.magnitude_squared() < 0.001:
            raise ValueError("light direction is too short to normalise")
        self.direction = direction.normalized()

    def set_material_color(self, color: Color) -> None:
        """Use ``color`` as the material, scaled to the 0..1 range."""
        self.color = color.to_vector() / 255.0

    def __call__(self, vertex) -> ColorVertex:
        intensity = max(0.0, -(vertex.n * self.rotation) * self.direction)
        diffuse = self.diffuse * intensity
        lit = self.color.hadamard(diffuse + self.ambient).saturate() * 255.0
        return ColorVertex(vertex.pos * self.rotation + self.translation, Color.from_vector(lit))


@dataclass
class Effect:
    """The vertex, geometry and pixel stages a pipeline runs."""

    vs: Callable
    gs: Callable
    ps: Callable

    vertex: ClassVar[type] = PositionVertex


@dataclass
class SolidGeometryEffect(Effect):
    """Solid color per pair of triangles, taken from a table in the geometry stage."""

    vs: DefaultVertexShader = field(default_factory=DefaultVertexShader)
    gs: SolidGeometryShader = field(default_factory=SolidGeometryShader)
    ps: ColorPixelShader = field(default_factory=ColorPixelShader)

    vertex: ClassVar[type] = PositionVertex


@dataclass
class VertexFlatEffect(Effect):
    """Flat shading computed per vertex from vertex normals."""

    vs: FlatVertexShader = field(default_factory=FlatVertexShader)
    gs: DefaultGeometryShader = field(default_factory=DefaultGeometryShader)
    ps: ColorPixelShader = field(default_factory=ColorPixelShader)

    vertex: ClassVar[type] = NormalVertex