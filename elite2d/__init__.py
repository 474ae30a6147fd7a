"""2D vectors, matrices, a camera, physics data types and shape tessellation."""

__version__ = "0.1.0"

__all__ = [
    "mathutils",
    "vector2",
    "vector3",
    "mat22",
    "matrix2x3",
    "fmatrix",
    "physics_types",
    "rendering_types",
    "camera",
    "tessellation",
]