"""Two-dimensional geometric primitives shared by spatial algorithms.

This package defines the closed vocabulary of 2D shapes consumed by
collision queries, rendering bounds and layout code, together with the
invariants each representation guarantees (unit-length directions,
fixed vertex counts).

Subpackages:
    core: Host-side vector helpers, kernel vector functions and Direction2d
    geometry: Primitive shape types and the Primitive2d capability marker
    kernel: Taichi struct layouts and device vertex buffers for the shapes

Example:
    >>> from primitives2d import Direction2d, LineSegment2d, Polyline2d
    >>> seg = LineSegment2d(Direction2d.from_vector((3.0, 4.0)), 0.0, 5.0)
    >>> path = Polyline2d[3]([(0, 0), (1, 0), (1, 1)])
"""

from .core.direction import Direction2d
from .errors import (
    InvalidDirectionError,
    MalformedVertexError,
    PrimitiveError,
    VertexCountError,
)
from .geometry import (
    BoxedPolygon,
    BoxedPolyline2d,
    Circle,
    Line2d,
    LineSegment2d,
    Plane2d,
    Polygon,
    Polyline2d,
    Primitive2d,
    Quad,
    Ray2d,
    Rectangle,
    RegularPolygon,
    Triangle,
    is_primitive,
    registered_primitives,
)

__version__ = "0.1.0"

__all__ = [
    "Direction2d",
    "PrimitiveError",
    "InvalidDirectionError",
    "VertexCountError",
    "MalformedVertexError",
    "Primitive2d",
    "registered_primitives",
    "is_primitive",
    "Ray2d",
    "Plane2d",
    "Line2d",
    "LineSegment2d",
    "Circle",
    "RegularPolygon",
    "Polyline2d",
    "BoxedPolyline2d",
    "Polygon",
    "BoxedPolygon",
    "Triangle",
    "Rectangle",
    "Quad",
]
