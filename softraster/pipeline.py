"""Triangle rasterisation pipeline with programmable shading stages."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

from .effects import Effect, Triangle
from .mesh import IndexedTriangleList
from .vector import Vector3
from .zbuffer import ZBuffer


class _PerspectiveScreenTransform:
    """Perspective divide to normalised coordinates, then map to pixel space.

    The depth slot receives ``1 / z`` so that it interpolates linearly in
    screen space; the other interpolated attributes are divided by ``z`` too.
    """

    def __init__(self, width: int, height: int):
        self.x_factor = width / 2.0
        self.y_factor = height / 2.0

    def __call__(self, vertex):
        z_inv = 1.0 / vertex.pos[2]
        out = vertex * z_inv
        out.pos = Vector3(
            (out.pos[0] + 1.0) * self.x_factor,
            (-out.pos[1] + 1.0) * self.y_factor,
            z_inv,
        )
        return out


def _lerp(a, b, alpha):
    return a + (b - a) * alpha


class Pipeline:
    """Runs an effect over indexed triangles and draws them into a target surface."""

    def __init__(self, target, effect: Effect, screen_transform: Callable | None = None):
        self.target = target
        self.effect = effect
        self.zbuffer = ZBuffer(target.width, target.height)
        self.screen_transform = screen_transform or _PerspectiveScreenTransform(
            target.width, target.height
        )

    def begin_frame(self) -> None:
        """Reset the depth buffer; call before drawing each frame."""
        self.zbuffer.clear()

    def draw(self, triangle_list: IndexedTriangleList) -> None:
        transformed = [self.effect.vs(v) for v in triangle_list.vertices]
        self._assemble(transformed, triangle_list.indices)

    def _assemble(self, vertices: list, indices: Sequence[int]) -> None:
        for number, (a, b, c) in enumerate(zip(*[iter(indices)] * 3)):
            v0, v1, v2 = vertices[a], vertices[b], vertices[c]
            # Back-face culling
            if (v1.pos - v0.pos).cross(v2.pos - v0.pos) * v0.pos <= 0.0:
                triangle = self.effect.gs(v0, v1, v2, number)
                self._draw_triangle(
                    Triangle(*(self.screen_transform(v) for v in triangle))
                )

    def _draw_triangle(self, triangle: Triangle) -> None:
        p0, p1, p2 = sorted(triangle, key=lambda v: v.pos[1])

        if p0.pos[1] == p1.pos[1]:
            if p1.pos[0] < p0.pos[0]:
                p0, p1 = p1, p0
            self._draw_flat_top(p0, p1, p2)
        elif p1.pos[1] == p2.pos[1]:
            if p2.pos[0] < p1.pos[0]:
                p1, p2 = p2, p1
            self._draw_flat_bottom(p0, p1, p2)
        else:
            alpha = (p1.pos[1] - p0.pos[1]) / (p2.pos[1] - p0.pos[1])
            split = _lerp(p0, p2, alpha)
            if p1.pos[0] < split.pos[0]:
                self._draw_flat_bottom(p0, p1, split)
                self._draw_flat_top(p1, split, p2)
            else:
                self._draw_flat_bottom(p0, split, p1)
                self._draw_flat_top(split, p1, p2)

    def _draw_flat_top(self, it0, it1, it2) -> None:
        dy = it2.pos[1] - it0.pos[1]
        if dy == 0:
            return
        self._draw_flat(it0, it2, (it2 - it0) / dy, (it2 - it1) / dy, it1)

    def _draw_flat_bottom(self, it0, it1, it2) -> None:
        dy = it2.pos[1] - it0.pos[1]
        if dy == 0:
            return
        self._draw_flat(it0, it2, (it1 - it0) / dy, (it2 - it0) / dy, it0)

    def _draw_flat(self, it0, it2, dv0, dv1, edge1) -> None:
        y_start = math.ceil(it0.pos[1] - 0.5)
        y_end = math.ceil(it2.pos[1] - 0.5)

        prestep = y_start + 0.5 - it0.pos[1]
        edge0 = it0 + dv0 * prestep
        edge1 = edge1 + dv1 * prestep

        for y in range(y_start, y_end):
            x_start = math.ceil(edge0.pos[0] - 0.5)
            x_end = math.ceil(edge1.pos[0] - 0.5)
            if x_start < x_end:
                self._draw_span(y, x_start, x_end, edge0, edge1)
            edge0 = edge0 + dv0
            edge1 = edge1 + dv1

    def _draw_span(self, y: int, x_start: int, x_end: int, edge0, edge1) -> None:
        dx = edge1.pos[0] - edge0.pos[0]
        step = (edge1 - edge0) / dx
        line = edge0 + step * (x_start + 0.5 - edge0.pos[0])
        for x in range(x_start, x_end):
            z = 1.0 / line.pos[2]
            if self.zbuffer.test_and_set(x, y, z):
                attributes = line * z
                self.target.put_pixel(x, y, self.effect.ps(attributes))
            line = line + step