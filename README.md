# softraster

A small software rasterizer in pure Python with no third-party
dependencies. It draws indexed triangle meshes into an in-memory pixel
surface through a programmable pipeline: vertex shader, back-face
culling, geometry shader, perspective screen transform, scanline
rasterization with perspective-correct interpolation, early depth
testing and a pixel shader.

## Installation

```
pip install softraster
```

To run the tests:

```
pip install "softraster[test]"
pytest
```

## Modules

- `softraster.vector` – `Vector3` and `Vector4`. `Vector3` supports
  addition, subtraction, scaling and division, unary minus, component-wise
  ordering comparisons, `dot`, `cross`, `hadamard`, `lerp`, `distance`,
  `distance_squared`, `magnitude`, `normalized`/`normalize`, `negate`,
  `saturate` (clamps to 0..1 in place), `cast` and `copy`. `vector * vector`
  is the dot product and `vector * matrix` transforms it as a row vector.
  `Vector4` has a `w` that defaults to 1 and can be built with
  `Vector4.from_vector3`.
- `softraster.matrix3` – `Matrix3`, a row-major 3x3 matrix with
  `identity`, `scaling`, `rotation_x`, `rotation_y` and `rotation_z`
  constructors, matrix and scalar multiplication, `determinant`,
  `inverse` (a singular matrix is returned unchanged), `transposed`, the
  in-place `set_identity`, `invert` and `transpose`, `cast` and `copy`.
  Elements are reached by flat index (`m[4]`) or by `(row, col)`.
- `softraster.zbuffer` – `ZBuffer`, a depth buffer. `clear` fills it with
  infinity and `test_and_set(x, y, depth)` stores a closer depth and
  reports whether it did.
- `softraster.surface` – `Color` (8-bit `r`, `g`, `b` and a fourth byte
  `x`, with `dword`, `from_vector` and `to_vector`) and `Surface`, a pixel
  grid with an optional row `pitch`. `present` returns the visible rows
  without padding; `Surface.aligned_pitch` computes a pitch for a byte
  alignment.
- `softraster.mesh` – `IndexedTriangleList`, a vertex list plus a flat
  index list. `IndexedTriangleList.load(filename, vertex_factory)` reads
  the vertex positions and triangular faces of the first object in an OBJ
  file, reversing the winding when the first line contains "ccw".
  `adjust_to_true_center` moves the mesh so its minimal bounding sphere is
  centred on the origin, and `radius` gives the largest vertex distance
  from the origin. `minimum_bounding_sphere(points)` returns a
  `(center, radius)` pair.
- `softraster.primitives` – `cube_plain`, `cube_plain_independent_faces`,
  `cube_independent_faces_normals` (sets `n` on each vertex),
  `cube_skinned` (sets `t`), `plane_plain` and `plane_skinned`. Each takes
  a `vertex_factory` that builds a vertex from a `Vector3` position.
- `softraster.effects` – the vertex types `PositionVertex`,
  `NormalVertex` and `ColorVertex`; `Triangle`; the shaders
  `DefaultVertexShader`, `DefaultGeometryShader`, `SolidGeometryShader`
  (one color from a bound table for every two triangles),
  `FlatVertexShader` (diffuse plus ambient lighting from vertex normals)
  and `ColorPixelShader`; and the effects `Effect`,
  `SolidGeometryEffect` and `VertexFlatEffect`, each with `vs`, `gs`, `ps`
  and a `vertex` class for its input vertices.
- `softraster.pipeline` – `Pipeline(target, effect, screen_transform=None)`
  draws an `IndexedTriangleList` into any target that has `width`,
  `height` and `put_pixel`, such as a `Surface`.
- `softraster.keyboard` – `Keyboard`, `KeyEvent`, `KeyEventType`: key
  states plus key and character queues that keep the last four entries.
  Reading an empty queue gives an invalid `KeyEvent` or `None`.
- `softraster.mouse` – `Mouse`, `MouseEvent`, `MouseEventType`: pointer
  position, button states and an event queue that keeps the last four
  events.

## Example

```python
import math

from softraster.effects import VertexFlatEffect
from softraster.matrix3 import Matrix3
from softraster.pipeline import Pipeline
from softraster.primitives import cube_independent_faces_normals
from softraster.surface import Surface
from softraster.vector import Vector3

surface = Surface(320, 240)
effect = VertexFlatEffect()
pipeline = Pipeline(surface, effect)

cube = cube_independent_faces_normals(effect.vertex, 1.0)

pipeline.begin_frame()
effect.vs.bind_rotation(Matrix3.rotation_x(0.4) * Matrix3.rotation_y(math.pi / 5))
effect.vs.bind_translation(Vector3(0.0, 0.0, 2.0))
pipeline.draw(cube)

rows = surface.present()
```

Call `begin_frame` before each frame so the depth buffer starts empty.

## What it does not do

The package renders only into memory. It opens no window, has no main
loop or command-line program, and does not read or write image files;
`Keyboard` and `Mouse` hold state that you feed through their `on_*`
methods rather than reading real devices. OBJ loading reads positions
and triangle faces only, and no effect samples textures, even though the
skinned primitives carry texture coordinates.