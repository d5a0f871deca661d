"""Taichi struct layouts for fixed-size 2D primitives.

Every fixed-size primitive has a ``@ti.dataclass`` counterpart so that
algorithm kernels can take shapes by value. Directions are stored as plain
``vec2`` members; they are unit length because the host Direction2d they
are packed from is.

Fixed-count polylines and polygons use a struct per vertex count holding an
N x 2 matrix, so the vertices live inline in the struct with the count
fixed when the kernel is compiled. Runtime-count (boxed) shapes have no
struct; they are uploaded as a VertexBuffer instead.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from primitives2d import Circle
    >>> s = to_struct(Circle(radius=2.0))
    >>> s.radius
    2.0
"""

import functools

import taichi as ti
import taichi.math as tm

from primitives2d.config import DEVICE_DTYPE
from primitives2d.geometry.circle import Circle, RegularPolygon
from primitives2d.geometry.lines import Line2d, LineSegment2d, Plane2d, Ray2d
from primitives2d.geometry.polygons import Polygon, Polyline2d, Rectangle, Triangle

# Type alias for 2D vectors using Taichi's math module
vec2 = tm.vec2


@ti.dataclass
class CircleStruct:
    """A circle centered at the origin.

    Attributes:
        radius: The radius of the circle.
    """

    radius: ti.f32


@ti.dataclass
class Ray2dStruct:
    """A half-line from the origin.

    Attributes:
        direction: Unit direction of the ray (vec2).
    """

    direction: vec2


@ti.dataclass
class Plane2dStruct:
    """A plane through the origin.

    Attributes:
        normal: Unit normal of the plane (vec2).
    """

    normal: vec2


@ti.dataclass
class Line2dStruct:
    """An infinite line through the origin.

    Attributes:
        direction: Unit direction of the line (vec2).
    """

    direction: vec2


@ti.dataclass
class LineSegment2dStruct:
    """A segment covering offsets [start, end] along a direction.

    Attributes:
        direction: Unit direction of the supporting line (vec2).
        start: Offset where the segment starts.
        end: Offset where the segment ends.
    """

    direction: vec2
    start: ti.f32
    end: ti.f32


@ti.dataclass
class TriangleStruct:
    """A triangle with three vertices, no winding order implied."""

    a: vec2
    b: vec2
    c: vec2


@ti.dataclass
class RectangleStruct:
    """An axis-aligned rectangle centered at the origin."""

    half_width: ti.f32
    half_height: ti.f32


@ti.dataclass
class RegularPolygonStruct:
    """A regular polygon inscribed in a circle of the given radius.

    Attributes:
        radius: Radius of the circumcircle.
        n_vertices: Number of vertices.
    """

    radius: ti.f32
    n_vertices: ti.i32


@functools.lru_cache(maxsize=None)
def polyline_struct(n: int):
    """Struct type for an open path of exactly n vertices.

    The vertices member is an n x 2 matrix; row i is vertex i.

    Raises:
        ValueError: If n < 1. Taichi matrices cannot have zero rows.
    """
    if n < 1:
        raise ValueError(f"A polyline struct needs at least 1 vertex, got {n}")
    return ti.types.struct(vertices=ti.types.matrix(n, 2, DEVICE_DTYPE))


@functools.lru_cache(maxsize=None)
def polygon_struct(n: int):
    """Struct type for a closed polygon of exactly n vertices.

    Same vertex layout as polyline_struct(n) plus a closed flag that is
    always 1, so kernels can tell open and closed paths apart.
    """
    if n < 1:
        raise ValueError(f"A polygon struct needs at least 1 vertex, got {n}")
    return ti.types.struct(vertices=ti.types.matrix(n, 2, DEVICE_DTYPE), closed=ti.i32)


# =============================================================================
# Kernel-side constructors and accessors
# =============================================================================


@ti.func
def make_circle(radius: ti.f32) -> CircleStruct:
    return CircleStruct(radius=radius)


@ti.func
def make_ray(direction: vec2) -> Ray2dStruct:
    """Create a ray; direction must already be unit length."""
    return Ray2dStruct(direction=direction)


@ti.func
def make_plane(normal: vec2) -> Plane2dStruct:
    """Create a plane; normal must already be unit length."""
    return Plane2dStruct(normal=normal)


@ti.func
def make_line(direction: vec2) -> Line2dStruct:
    """Create a line; direction must already be unit length."""
    return Line2dStruct(direction=direction)


@ti.func
def make_segment(direction: vec2, start: ti.f32, end: ti.f32) -> LineSegment2dStruct:
    """Create a segment; direction must already be unit length."""
    return LineSegment2dStruct(direction=direction, start=start, end=end)


@ti.func
def make_triangle(a: vec2, b: vec2, c: vec2) -> TriangleStruct:
    return TriangleStruct(a=a, b=b, c=c)


@ti.func
def make_rectangle(half_width: ti.f32, half_height: ti.f32) -> RectangleStruct:
    return RectangleStruct(half_width=half_width, half_height=half_height)


@ti.func
def make_regular_polygon(radius: ti.f32, n_vertices: ti.i32) -> RegularPolygonStruct:
    return RegularPolygonStruct(radius=radius, n_vertices=n_vertices)


@ti.func
def ray_at(ray: Ray2dStruct, t: ti.f32) -> vec2:
    """The point t units along the ray from the origin."""
    return t * ray.direction


@ti.func
def segment_start(segment: LineSegment2dStruct) -> vec2:
    """The point where the segment starts."""
    return segment.start * segment.direction


@ti.func
def segment_end(segment: LineSegment2dStruct) -> vec2:
    """The point where the segment ends."""
    return segment.end * segment.direction


# =============================================================================
# Host-to-kernel packing (Python scope)
# =============================================================================


@functools.singledispatch
def to_struct(shape):
    """Pack a fixed-size host primitive into its Taichi struct.

    Must be called from Python scope after Taichi is initialized.

    Raises:
        TypeError: For boxed shapes (use VertexBuffer) and non-primitives.
    """
    raise TypeError(
        f"No struct layout for {type(shape).__name__}; "
        "boxed shapes are uploaded with VertexBuffer.from_shape()"
    )


@to_struct.register
def _(shape: Circle):
    return CircleStruct(radius=shape.radius)


@to_struct.register
def _(shape: Ray2d):
    return Ray2dStruct(direction=vec2(shape.direction.x, shape.direction.y))


@to_struct.register
def _(shape: Plane2d):
    return Plane2dStruct(normal=vec2(shape.normal.x, shape.normal.y))


@to_struct.register
def _(shape: Line2d):
    return Line2dStruct(direction=vec2(shape.direction.x, shape.direction.y))


@to_struct.register
def _(shape: LineSegment2d):
    return LineSegment2dStruct(
        direction=vec2(shape.direction.x, shape.direction.y),
        start=shape.start,
        end=shape.end,
    )


@to_struct.register
def _(shape: Triangle):
    return TriangleStruct(a=vec2(*shape.a), b=vec2(*shape.b), c=vec2(*shape.c))


@to_struct.register
def _(shape: Rectangle):
    return RectangleStruct(half_width=shape.half_width, half_height=shape.half_height)


@to_struct.register
def _(shape: RegularPolygon):
    return RegularPolygonStruct(radius=shape.circumcircle.radius, n_vertices=shape.n_vertices)


@to_struct.register
def _(shape: Polyline2d):
    return polyline_struct(shape.N)(vertices=[list(v) for v in shape.vertices])


@to_struct.register
def _(shape: Polygon):
    return polygon_struct(shape.N)(vertices=[list(v) for v in shape.vertices], closed=1)
