"""Three- and four-component vectors."""

from __future__ import annotations

import copy as _copy
import math
from collections.abc import Callable, Iterator
from numbers import Real

from .matrix3 import Matrix3


def _format_number(value) -> str:
    try:
        return format(value, "g")
    except (TypeError, ValueError):
        return str(value)


class Vector3:
    """A three-component vector; multiplying by a Matrix3 treats it as a row vector."""

    __slots__ = ("_elements",)

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self._elements = [x, y, z]

    # Access

    def __getitem__(self, index):
        return self._elements[index]

    def __setitem__(self, index, value) -> None:
        self._elements[index] = value

    def __iter__(self) -> Iterator:
        return iter(self._elements)

    def __len__(self) -> int:
        return 3

    def __repr__(self) -> str:
        return f"Vector3({', '.join(map(repr, self._elements))})"

    def __str__(self) -> str:
        return "[" + ", ".join(_format_number(v) for v in self._elements) + "]"

    # Comparison

    def __eq__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self._elements == other._elements

    def __lt__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self._elements < other._elements

    def __le__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self._elements <= other._elements

    def __gt__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self._elements > other._elements

    def __ge__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self._elements >= other._elements

    # Arithmetic

    def __add__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(*(a + b for a, b in zip(self, other)))

    def __iadd__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        self._elements = [a + b for a, b in zip(self, other)]
        return self

    def __sub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(*(a - b for a, b in zip(self, other)))

    def __isub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        self._elements = [a - b for a, b in zip(self, other)]
        return self

    def __mul__(self, other):
        """Dot product with a vector, row transform by a matrix, or scaling."""
        if isinstance(other, Vector3):
            return self.dot(other)
        if isinstance(other, Matrix3):
            return self.transform(other)
        if isinstance(other, Real):
            return Vector3(*(c * other for c in self))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Vector3(*(c * other for c in self))
        return NotImplemented

    def __imul__(self, other):
        if isinstance(other, Matrix3):
            self._elements = list(self.transform(other))
            return self
        if isinstance(other, Real):
            self._elements = [c * other for c in self]
            return self
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3(*(c / scalar for c in self))

    def __itruediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        self._elements = [c / scalar for c in self]
        return self

    def __neg__(self) -> Vector3:
        return Vector3(*(-c for c in self))

    # Conversions

    def copy(self) -> Vector3:
        """Return a deep copy, so nested vectors are duplicated too."""
        return _copy.deepcopy(self)

    def cast(self, kind: Callable) -> Vector3:
        return Vector3(*(kind(c) for c in self))

    # Products and distances

    def distance(self, other: Vector3):
        return math.sqrt(self.distance_squared(other))

    def distance_squared(self, other: Vector3):
        return (self - other).magnitude_squared()

    def dot(self, other: Vector3):
        return sum(a * b for a, b in zip(self, other))

    def cross(self, other: Vector3) -> Vector3:
        ax, ay, az = self
        bx, by, bz = other
        return Vector3(ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)

    def hadamard(self, other: Vector3) -> Vector3:
        return Vector3(*(a * b for a, b in zip(self, other)))

    def lerp(self, other: Vector3, alpha) -> Vector3:
        return self + (other - self) * alpha

    def transform(self, matrix: Matrix3) -> Vector3:
        x, y, z = self
        m = list(matrix)
        return Vector3(
            x * m[0] + y * m[3] + z * m[6],
            x * m[1] + y * m[4] + z * m[7],
            x * m[2] + y * m[5] + z * m[8],
        )

    # Magnitude

    def magnitude_squared(self):
        return self.dot(self)

    def magnitude(self):
        return math.sqrt(self.magnitude_squared())

    def normalized(self) -> Vector3:
        return self / self.magnitude()

    def normalize(self) -> Vector3:
        self._elements = list(self.normalized())
        return self

    def negate(self) -> Vector3:
        self._elements = [-c for c in self]
        return self

    def saturate(self) -> Vector3:
        """Clamp every component to [0, 1] in place."""
        self._elements = [min(max(c, 0.0), 1.0) for c in self]
        return self


class Vector4:
    """A four-component vector whose w defaults to 1."""

    __slots__ = ("_elements",)

    def __init__(self, x=0.0, y=0.0, z=0.0, w=1.0):
        self._elements = [x, y, z, w]

    @classmethod
    def from_vector3(cls, vector: Vector3, w=1.0) -> Vector4:
        x, y, z = vector
        return cls(x, y, z, w)

    def __getitem__(self, index):
        return self._elements[index]

    def __setitem__(self, index, value) -> None:
        self._elements[index] = value

    def __iter__(self) -> Iterator:
        return iter(self._elements)

    def __len__(self) -> int:
        return 4

    def __eq__(self, other):
        if not isinstance(other, Vector4):
            return NotImplemented
        return self._elements == other._elements

    def __repr__(self) -> str:
        return f"Vector4({', '.join(map(repr, self._elements))})"

    def __str__(self) -> str:
        return "[" + ", ".join(_format_number(v) for v in self._elements) + "]"

    def __add__(self, other):
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other):
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(*(a - b for a, b in zip(self, other)))

    def __mul__(self, other):
        """Component-wise product with a Vector4, or scaling by a number."""
        if isinstance(other, Vector4):
            return Vector4(*(a * b for a, b in zip(self, other)))
        if isinstance(other, Real):
            return Vector4(*(c * other for c in self))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Vector4(*(c * other for c in self))
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vector4):
            return Vector4(*(a / b for a, b in zip(self, other)))
        if isinstance(other, Real):
            return Vector4(*(c / other for c in self))
        return NotImplemented

    def __neg__(self) -> Vector4:
        return Vector4(*(-c for c in self))

    def cast(self, kind: Callable) -> Vector4:
        return Vector4(*(kind(c) for c in self))

    def negate(self) -> Vector4:
        self._elements = [-c for c in self]
        return self