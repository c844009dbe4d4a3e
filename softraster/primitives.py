"""Procedural cube and plane meshes."""

from __future__ import annotations

from collections.abc import Callable

from .mesh import IndexedTriangleList
from .vector import Vector3


def _cube_positions(side: float) -> list[Vector3]:
    return [
        Vector3(x, y, z)
        for z in (-side, side)
        for y in (-side, side)
        for x in (-side, side)
    ]


_CUBE_INDICES = [
    0, 2, 1, 2, 3, 1, 1, 3, 5, 3, 7, 5, 2, 6, 3, 3, 6, 7,
    4, 5, 7, 4, 7, 6, 0, 4, 2, 2, 4, 6, 0, 1, 4, 1, 5, 4,
]

_FACE_INDICES = [
    0, 2, 1, 2, 3, 1, 4, 5, 7, 4, 7, 6, 8, 10, 9, 10, 11, 9,
    12, 13, 15, 12, 15, 14, 16, 17, 18, 18, 17, 19, 20, 23, 21, 20, 22, 23,
]

_SKIN_INDICES = [
    0, 2, 1, 2, 3, 1, 4, 8, 5, 5, 8, 9, 2, 6, 3, 3, 6, 7,
    4, 5, 7, 4, 7, 6, 2, 10, 11, 2, 11, 6, 12, 3, 7, 12, 7, 13,
]

_FACE_NORMALS = [
    Vector3(0.0, 0.0, -1.0),
    Vector3(0.0, 0.0, 1.0),
    Vector3(-1.0, 0.0, 0.0),
    Vector3(1.0, 0.0, 0.0),
    Vector3(0.0, -1.0, 0.0),
    Vector3(0.0, 1.0, 0.0),
]


def cube_plain(vertex_factory: Callable, size: float = 1.0) -> IndexedTriangleList:
    """Eight shared corners, twelve triangles."""
    side = size / 2.0
    return IndexedTriangleList(
        [vertex_factory(p) for p in _cube_positions(side)], list(_CUBE_INDICES)
    )


def cube_plain_independent_faces(vertex_factory: Callable, size: float = 1.0) -> IndexedTriangleList:
    """Four separate vertices per face: near, far, left, right, bottom, top."""
    s = size / 2.0
    faces = [
        [(-s, -s, -s), (s, -s, -s), (-s, s, -s), (s, s, -s)],
        [(-s, -s, s), (s, -s, s), (-s, s, s), (s, s, s)],
        [(-s, -s, -s), (-s, s, -s), (-s, -s, s), (-s, s, s)],
        [(s, -s, -s), (s, s, -s), (s, -s, s), (s, s, s)],
        [(-s, -s, -s), (s, -s, -s), (-s, -s, s), (s, -s, s)],
        [(-s, s, -s), (s, s, -s), (-s, s, s), (s, s, s)],
    ]
    vertices = [vertex_factory(Vector3(*p)) for face in faces for p in face]
    return IndexedTriangleList(vertices, list(_FACE_INDICES))


def cube_independent_faces_normals(vertex_factory: Callable, size: float = 1.0) -> IndexedTriangleList:
    """Independent-face cube whose vertices carry their face normal in ``n``."""
    cube = cube_plain_independent_faces(vertex_factory, size)
    for i, vertex in enumerate(cube.vertices):
        vertex.n = _FACE_NORMALS[i // 4].copy()
    return cube


def _cube_tex(u: float, v: float) -> tuple[float, float]:
    return ((u + 1.0) / 3.0, v / 4.0)


def cube_skinned(vertex_factory: Callable, size: float = 1.0) -> IndexedTriangleList:
    """Fourteen-vertex cube with texture coordinates in ``t`` for a cross-shaped skin."""
    s = size / 2.0
    layout = [
        ((-s, -s, -s), (1.0, 0.0)),
        ((s, -s, -s), (0.0, 0.0)),
        ((-s, s, -s), (1.0, 1.0)),
        ((s, s, -s), (0.0, 1.0)),
        ((-s, -s, s), (1.0, 3.0)),
        ((s, -s, s), (0.0, 3.0)),
        ((-s, s, s), (1.0, 2.0)),
        ((s, s, s), (0.0, 2.0)),
        ((-s, -s, -s), (1.0, 4.0)),
        ((s, -s, -s), (0.0, 4.0)),
        ((-s, -s, -s), (2.0, 1.0)),
        ((-s, -s, s), (2.0, 2.0)),
        ((s, -s, -s), (-1.0, 1.0)),
        ((s, -s, s), (-1.0, 2.0)),
    ]
    vertices = []
    for pos, (u, v) in layout:
        vertex = vertex_factory(Vector3(*pos))
        vertex.t = _cube_tex(u, v)
        vertices.append(vertex)
    return IndexedTriangleList(vertices, list(_SKIN_INDICES))


def plane_plain(vertex_factory: Callable, divisions: int = 7, size: float = 1.0) -> IndexedTriangleList:
    """A square grid in the z=0 plane centred on the origin."""
    if divisions < 1:
        raise ValueError("a plane needs at least one division")
    per_side = divisions + 1
    side = size / 2.0
    step = size / divisions
    bottom_left = Vector3(-side, -side, 0.0)
    vertices = [
        vertex_factory(bottom_left + Vector3(x * step, y * step, 0.0))
        for y in range(per_side)
        for x in range(per_side)
    ]

    def at(x: int, y: int) -> int:
        return y * per_side + x

    indices: list[int] = []
    for y in range(divisions):
        for x in range(divisions):
            a, b, c, d = at(x, y), at(x + 1, y), at(x, y + 1), at(x + 1, y + 1)
            indices.extend((a, c, b, b, c, d))
    return IndexedTriangleList(vertices, indices)


def plane_skinned(vertex_factory: Callable, divisions: int = 7, size: float = 1.0) -> IndexedTriangleList:
    """A plane whose vertices carry texture coordinates in ``t`` spanning the unit square."""
    plane = plane_plain(vertex_factory, divisions, size)
    per_side = divisions + 1
    step = 1.0 / divisions
    for i, vertex in enumerate(plane.vertices):
        y, x = divmod(i, per_side)
        vertex.t = (x * step, 1.0 - y * step)
    return plane