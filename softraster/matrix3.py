"""Row-major 3x3 matrix used for rotations and scaling."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from numbers import Real


def _format_number(value) -> str:
    try:
        return format(value, "g")
    except (TypeError, ValueError):
        return str(value)


def _product(a: list, b: list) -> list:
    m00, m01, m02, m10, m11, m12, m20, m21, m22 = a
    n00, n01, n02, n10, n11, n12, n20, n21, n22 = b
    return [
        m00 * n00 + m01 * n10 + m02 * n20,
        m00 * n01 + m01 * n11 + m02 * n21,
        m00 * n02 + m01 * n12 + m02 * n22,
        m10 * n00 + m11 * n10 + m12 * n20,
        m10 * n01 + m11 * n11 + m12 * n21,
        m10 * n02 + m11 * n12 + m12 * n22,
        m20 * n00 + m21 * n10 + m22 * n20,
        m20 * n01 + m21 * n11 + m22 * n21,
        m20 * n02 + m21 * n12 + m22 * n22,
    ]


class Matrix3:
    """A 3x3 matrix stored row-major; vectors multiply it from the left."""

    __slots__ = ("_elements",)

    def __init__(self, *args):
        """Build from nothing (all zeros), nine numbers, or one iterable of nine."""
        if not args:
            elements = [0.0] * 9
        elif len(args) == 1:
            elements = list(args[0])
        else:
            elements = list(args)
        if len(elements) != 9:
            raise ValueError(f"Matrix3 needs 9 elements, got {len(elements)}")
        self._elements = elements

    # Factories

    @classmethod
    def identity(cls) -> Matrix3:
        return cls(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)

    @classmethod
    def scaling(cls, factor) -> Matrix3:
        return cls(factor, 0.0, 0.0, 0.0, factor, 0.0, 0.0, 0.0, factor)

    @classmethod
    def rotation_x(cls, theta) -> Matrix3:
        s, c = math.sin(theta), math.cos(theta)
        return cls(1.0, 0.0, 0.0, 0.0, c, s, 0.0, -s, c)

    @classmethod
    def rotation_y(cls, theta) -> Matrix3:
        s, c = math.sin(theta), math.cos(theta)
        return cls(c, 0.0, -s, 0.0, 1.0, 0.0, s, 0.0, c)

    @classmethod
    def rotation_z(cls, theta) -> Matrix3:
        s, c = math.sin(theta), math.cos(theta)
        return cls(c, s, 0.0, -s, c, 0.0, 0.0, 0.0, 1.0)

    # Access

    @staticmethod
    def _flat_index(index) -> int:
        if isinstance(index, tuple):
            row, col = index
            if not (0 <= row < 3 and 0 <= col < 3):
                raise IndexError(f"matrix position {index} out of range")
            return row * 3 + col
        return index

    def __getitem__(self, index):
        return self._elements[self._flat_index(index)]

    def __setitem__(self, index, value) -> None:
        self._elements[self._flat_index(index)] = value

    def __iter__(self) -> Iterator:
        return iter(self._elements)

    def __len__(self) -> int:
        return 9

    def __eq__(self, other):
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self._elements == other._elements

    def __repr__(self) -> str:
        return f"Matrix3({', '.join(map(repr, self._elements))})"

    def __str__(self) -> str:
        e = [_format_number(v) for v in self._elements]
        return f"[{e[0]}, {e[1]}, {e[2]}\n {e[3]}, {e[4]}, {e[5]}\n {e[6]}, {e[7]}, {e[8]}]"

    # Arithmetic

    def __mul__(self, other):
        if isinstance(other, Matrix3):
            return Matrix3(_product(self._elements, other._elements))
        if isinstance(other, Real):
            return Matrix3(e * other for e in self._elements)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Matrix3(e * other for e in self._elements)
        return NotImplemented

    def __imul__(self, other):
        if isinstance(other, Matrix3):
            self._elements = _product(self._elements, other._elements)
            return self
        if isinstance(other, Real):
            self._elements = [e * other for e in self._elements]
            return self
        return NotImplemented

    # Conversions

    def cast(self, kind: Callable) -> Matrix3:
        """Return a matrix with every element converted by ``kind``."""
        return Matrix3(kind(e) for e in self._elements)

    def copy(self) -> Matrix3:
        return Matrix3(self._elements)

    # Derived matrices

    def determinant(self):
        m00, m01, m02, m10, m11, m12, m20, m21, m22 = self._elements
        return (
            m00 * (m11 * m22 - m12 * m21)
            - m01 * (m10 * m22 - m12 * m20)
            + m02 * (m10 * m21 - m11 * m20)
        )

    def inverse(self) -> Matrix3:
        """Return the inverse, or an unchanged copy when the matrix is singular."""
        m00, m01, m02, m10, m11, m12, m20, m21, m22 = self._elements
        t00 = m22 * m11 - m21 * m12
        t01 = m21 * m02 - m22 * m01
        t02 = m12 * m01 - m11 * m02
        d = m00 * t00 + m10 * t01 + m20 * t02
        if d == 0:
            return self.copy()
        di = 1 / d
        return Matrix3(
            t00 * di,
            t01 * di,
            t02 * di,
            (m20 * m12 - m22 * m10) * di,
            (m22 * m00 - m20 * m02) * di,
            (m10 * m02 - m12 * m00) * di,
            (m21 * m10 - m20 * m11) * di,
            (m20 * m01 - m21 * m00) * di,
            (m11 * m00 - m10 * m01) * di,
        )

    def transposed(self) -> Matrix3:
        e = self._elements
        return Matrix3(e[0], e[3], e[6], e[1], e[4], e[7], e[2], e[5], e[8])

    # In-place forms

    def set_identity(self) -> Matrix3:
        self._elements = Matrix3.identity()._elements
        return self

    def invert(self) -> Matrix3:
        self._elements = self.inverse()._elements
        return self

    def transpose(self) -> Matrix3:
        self._elements = self.transposed()._elements
        return self