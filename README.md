# elite2d

A small, dependency-free 2D math library for game-AI experiments.

## Modules

- `elite2d.mathutils`: scalar helpers: `are_equal` (tolerance defaults to
  single-precision epsilon), `inv_sqrt`, `inv_sqrt_fast`, `square`, `to_radians`,
  `to_degrees`, `clamped_angle`, `clamp`, `random_int`, `random_float`,
  `random_binomial`, `lerp`, `smooth_step` and `sign`.
- `elite2d.vector2`: the mutable `Vector2` with arithmetic operators, `dot`, `cross`,
  `magnitude`, `normalize` / `normalized`, `distance`, `clamped`, plus
  `random_vector2`, `orientation_to_vector`, `vector_to_orientation` and
  `angle_between`. Equality compares components within single-precision epsilon.
- `elite2d.vector3`: the mutable `Vector3` with the same kind of operators, a
  vector `cross`, `project`, `reject` and `Vector3.from_vector2`.
- `elite2d.mat22`: the row-major 2x2 matrix `Mat22`, with `determinant`, `inverse`
  (the identity when the matrix is singular) and multiplication by matrices,
  vectors and scalars.
- `elite2d.matrix2x3`: the affine transform `Matrix2x3`: `transform`,
  `determinant`, `inverse`, `equals`, composition with `*` (the right-hand
  transform is applied first), the in-place `set_as_*` methods and the
  constructors `identity`, `rotation` (degrees), `scaling` and `translation`.
- `elite2d.fmatrix`: `FMatrix`, a resizable dense float matrix stored column-major,
  with element access (out-of-range indices raise `IndexError`), element-wise
  arithmetic over the overlapping region, `matrix_multiply`, `sigmoid`, `sum`,
  `dot`, `max`, `max_of_row` and `format`.
- `elite2d.physics_types`: `PhysicsFlags`, `ForceMode`, `RigidBodyType`,
  `ShapeType`, `Transform`, `RigidBodyUserData`, `RigidBodyDefine`,
  `RaycastHitPoint`, `CircleShape`, `BoxShape`, `PolygonShape` and
  `FixedTimestep`, whose `advance(elapsed)` returns how many fixed 60 Hz steps are
  due (elapsed time is capped at 0.25 s).
- `elite2d.rendering_types`: `Color` and `Vertex`; `Vertex.at_depth` places a 2D
  point at a depth (default -0.5).
- `elite2d.camera`: `Camera2D` converts between screen and world coordinates,
  builds a column-major 4x4 projection matrix, pans with `begin_drag` / `drag` /
  `end_drag` and zooms with `scroll`; both can be locked.
- `elite2d.tessellation`: `circle_points`, `polygon_edges` (closed outline) and
  `fan_triangles` (triangle fan for convex polygons).

## Installation

```
pip install .
```

## Example

```python
from elite2d.vector2 import Vector2
from elite2d.matrix2x3 import Matrix2x3
from elite2d.camera import Camera2D
from elite2d.physics_types import FixedTimestep
from elite2d.tessellation import circle_points, polygon_edges

transform = Matrix2x3.translation(5.0, 0.0) * Matrix2x3.rotation(90.0)
print(transform.transform(Vector2(1.0, 0.0)))   # approximately (5, 1)

camera = Camera2D(1280, 720)
world = camera.screen_to_world(Vector2(640.0, 360.0))   # the camera centre

outline = polygon_edges(circle_points(world, 2.0))       # 16 segments

timestep = FixedTimestep()
steps = timestep.advance(0.05)                            # 3 steps at 60 Hz
```

## What this package does not do

It draws nothing. There is no window, graphics backend, physics engine or input
handling: the camera is driven by calling its drag and scroll methods, the
physics types only describe bodies and shapes, and `FixedTimestep` only counts
steps. The tessellation functions return geometry for a caller to render with a
library of its own choosing.

## Tests

```
pip install .[test]
pytest
```