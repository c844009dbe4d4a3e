"""Indexed triangle lists, OBJ loading and minimal bounding spheres."""

from __future__ import annotations

import math
import random
from collections.abc import Callable, Sequence
from pathlib import Path

from .vector import Vector3

_EPS = 1e-9


def _sub(a, b):
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _dot(a, b):
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a, b):
    return (a[1] * b[2] - a[2] * b[1], a[2] * b[0] - a[0] * b[2], a[0] * b[1] - a[1] * b[0])


def _dist(a, b):
    return math.sqrt(_dot(_sub(a, b), _sub(a, b)))


def _inside(ball, p) -> bool:
    if ball is None:
        return False
    center, radius = ball
    return _dist(center, p) <= radius * (1 + 1e-7) + _EPS


def _sphere_two(a, b):
    center = tuple((x + y) / 2 for x, y in zip(a, b))
    return center, _dist(center, a)


def _covering(candidates, points):
    valid = [b for b in candidates if all(_inside(b, p) for p in points)]
    return min(valid, key=lambda b: b[1]) if valid else max(candidates, key=lambda b: b[1])


def _sphere_three(a, b, c):
    u, v = _sub(a, c), _sub(b, c)
    w = _cross(u, v)
    ww = _dot(w, w)
    if ww < _EPS:
        return _covering([_sphere_two(a, b), _sphere_two(a, c), _sphere_two(b, c)], (a, b, c))
    num = _cross(
        tuple(_dot(u, u) * vb - _dot(v, v) * ua for ua, vb in zip(u, v)), w
    )
    center = tuple(ci + n / (2 * ww) for ci, n in zip(c, num))
    return center, _dist(center, a)


def _sphere_four(a, b, c, d):
    rows = [_sub(p, a) for p in (b, c, d)]
    rhs = [(_dot(p, p) - _dot(a, a)) / 2 for p in (b, c, d)]
    det = _dot(rows[0], _cross(rows[1], rows[2]))
    if abs(det) < _EPS:
        pts = (a, b, c, d)
        return _covering(
            [_sphere_three(*(pts[j] for j in range(4) if j != i)) for i in range(4)], pts
        )
    # Cramer's rule on rows . center = rhs
    cols = list(zip(*rows))
    center = []
    for k in range(3):
        replaced = [list(col) for col in cols]
        replaced[k] = rhs
        m = list(zip(*replaced))
        center.append(_dot(m[0], _cross(m[1], m[2])) / det)
    center = tuple(center)
    return center, _dist(center, a)


def _sphere_through(support):
    if not support:
        return None
    if len(support) == 1:
        return tuple(support[0]), 0.0
    if len(support) == 2:
        return _sphere_two(*support)
    if len(support) == 3:
        return _sphere_three(*support)
    return _sphere_four(*support)


def _ball_with(points, support):
    ball = _sphere_through(support)
    for i, p in enumerate(points):
        if not _inside(ball, p):
            if len(support) == 3:
                ball = _sphere_through(support + [p])
            else:
                ball = _ball_with(points[:i], support + [p])
    return ball


def minimum_bounding_sphere(points) -> tuple[Vector3, float]:
    """Return (center, radius) of the smallest sphere enclosing the 3D points."""
    pts = [tuple(float(c) for c in p) for p in points]
    if not pts:
        raise ValueError("cannot bound an empty point set")
    random.Random(0).shuffle(pts)
    ball = _ball_with(pts, [])
    center, radius = ball
    return Vector3(*center), radius


class IndexedTriangleList:
    """Vertices plus a flat index list, three indices per triangle."""

    def __init__(self, vertices: Sequence, indices: Sequence[int]):
        vertices = list(vertices)
        indices = list(indices)
        if len(vertices) <= 2:
            raise ValueError("a triangle list needs more than two vertices")
        if len(indices) % 3:
            raise ValueError("index count must be a multiple of three")
        self.vertices = vertices
        self.indices = indices

    @classmethod
    def load(cls, filename, vertex_factory: Callable) -> IndexedTriangleList:
        """Load the first object of an OBJ file; a 'ccw' first line reverses winding."""
        path = Path(filename)
        lines = path.read_text().splitlines()
        is_ccw = bool(lines) and "ccw" in lines[0].lower()

        positions: list[Vector3] = []
        faces: list[list[int]] = []
        shapes_seen = 0
        collecting = True
        for raw in lines:
            parts = raw.split("#", 1)[0].split()
            if not parts:
                continue
            tag, args = parts[0], parts[1:]
            if tag == "v":
                if len(args) < 3:
                    raise ValueError(f"LoadObj returned error: bad vertex line File:{filename}")
                positions.append(Vector3(*(float(a) for a in args[:3])))
            elif tag in ("o", "g"):
                if faces:
                    collecting = False
            elif tag == "f":
                if not faces:
                    shapes_seen += 1
                if not collecting:
                    shapes_seen += 1
                    continue
                refs = []
                for token in args:
                    idx = int(token.split("/")[0])
                    refs.append(idx - 1 if idx > 0 else len(positions) + idx)
                faces.append(refs)

        if not faces:
            raise ValueError(f"LoadObj object file had no shapes  File:{filename}")

        indices: list[int] = []
        for number, face in enumerate(faces):
            if len(face) != 3:
                raise ValueError(f"LoadObj error face #{number} has {len(face)} vertices")
            if is_ccw:
                face = [face[0], face[2], face[1]]
            indices.extend(face)

        return cls([vertex_factory(p) for p in positions], indices)

    def adjust_to_true_center(self) -> None:
        """Move vertices so the minimal bounding sphere is centred on the origin."""
        center, _ = minimum_bounding_sphere(v.pos for v in self.vertices)
        for v in self.vertices:
            v.pos = v.pos - center

    def radius(self) -> float:
        """Largest distance of any vertex from the origin."""
        return max(v.pos.magnitude() for v in self.vertices)