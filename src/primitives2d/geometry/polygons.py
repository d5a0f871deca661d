"""Vertex-list primitives: polylines, polygons, triangles and rectangles.

Polylines (open paths) and polygons (closed by an implicit edge from the
last vertex back to the first) come in two families with identical field
semantics:

- Fixed-count: ``Polyline2d[N]`` and ``Polygon[N]``. The vertex count is
  part of the type, vertices are stored inline as an immutable tuple of
  ``(x, y)`` pairs, and constructing with any other count raises
  VertexCountError. Each ``[N]`` maps to a Taichi struct holding an
  N x 2 matrix (see ``primitives2d.kernel.structs``).
- Boxed: ``BoxedPolyline2d`` and ``BoxedPolygon``. Any number of vertices
  (including zero) in an owned, read-only NumPy buffer whose length never
  changes. These map to a device VertexBuffer instead.

Vertices are kept in the order given. Whether the path is open or closed is
only a flag for consumers; no edge is added or checked here.

Example:
    >>> path = Polyline2d[3]([(0, 0), (1, 0), (1, 1)])
    >>> path.vertices
    ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0))
    >>> BoxedPolygon([]).is_degenerate()
    True
"""

from __future__ import annotations

import math
import types
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar

import numpy as np

from primitives2d.core.vector import Vec2Like, as_vec2, as_vertices
from primitives2d.errors import VertexCountError

from .base import Primitive2d

Point = tuple[float, float]

_fixed_classes: dict[tuple[type, int], type] = {}


def _as_points(array: np.ndarray) -> tuple[Point, ...]:
    return tuple((float(x), float(y)) for x, y in array)


# =============================================================================
# Fixed-count family
# =============================================================================


class _FixedVertexShape(Primitive2d, register=False):
    """Shared storage for ``Polyline2d[N]`` and ``Polygon[N]``."""

    __slots__ = ("_vertices",)

    N: ClassVar[int | None] = None
    closed: ClassVar[bool]
    _min_vertices: ClassVar[int]
    _family: ClassVar[type]

    def __class_getitem__(cls, n: int) -> type:
        if cls.N is not None:
            raise TypeError(f"{cls.__name__} already has a vertex count")
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise TypeError(f"{cls.__name__}[N] requires a non-negative int, got {n!r}")

        key = (cls, n)
        if key not in _fixed_classes:
            name = f"{cls.__name__}[{n}]"
            fixed = types.new_class(
                name,
                (cls,),
                {"register": False},
                lambda ns: ns.update({"N": n, "__module__": cls.__module__, "__slots__": ()}),
            )
            fixed.__qualname__ = name
            _fixed_classes[key] = fixed
        return _fixed_classes[key]

    def __init__(self, vertices: Iterable[Vec2Like]) -> None:
        if self.N is None:
            family = type(self).__name__
            raise TypeError(f"{family} needs a vertex count: use {family}[N](vertices)")
        points = as_vertices(vertices)
        if len(points) != self.N:
            raise VertexCountError(type(self).__name__, self.N, len(points))
        object.__setattr__(self, "_vertices", _as_points(points))

    @property
    def vertices(self) -> tuple[Point, ...]:
        """The N vertices in path order."""
        return self._vertices

    def to_numpy(self) -> np.ndarray:
        """Writeable (N, 2) float64 copy of the vertices."""
        return np.array(self._vertices, dtype=np.float64).reshape(self.N, 2)

    def is_degenerate(self) -> bool:
        return self.N < self._min_vertices

    def __len__(self) -> int:
        return self.N

    def __iter__(self) -> Iterator[Point]:
        return iter(self._vertices)

    def __getitem__(self, index):
        return self._vertices[index]

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _FixedVertexShape):
            return NotImplemented
        return type(self) is type(other) and self._vertices == other._vertices

    def __hash__(self) -> int:
        return hash((type(self), self._vertices))

    def __reduce__(self):
        return (_rebuild_fixed, (type(self).__mro__[1], self.N, self._vertices))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._vertices)!r})"


def _rebuild_fixed(family: type, n: int, vertices: tuple[Point, ...]) -> _FixedVertexShape:
    return family[n](vertices)


class Polyline2d(_FixedVertexShape):
    """An open path of exactly N vertices. Use as ``Polyline2d[N](vertices)``.

    For a version whose count is only known at run time: BoxedPolyline2d.
    """

    __slots__ = ()
    closed = False
    _min_vertices = 2


class Polygon(_FixedVertexShape):
    """A closed polygon of exactly N vertices. Use as ``Polygon[N](vertices)``.

    For a version whose count is only known at run time: BoxedPolygon.
    """

    __slots__ = ()
    closed = True
    _min_vertices = 3


# =============================================================================
# Boxed (runtime-count) family
# =============================================================================


class _BoxedVertexShape(Primitive2d, register=False):
    """Shared storage for BoxedPolyline2d and BoxedPolygon."""

    __slots__ = ("_vertices",)

    closed: ClassVar[bool]
    _min_vertices: ClassVar[int]
    _fixed_family: ClassVar[type]

    def __init__(self, vertices: Iterable[Vec2Like]) -> None:
        # as_vertices always copies, so the buffer is never shared with the caller
        object.__setattr__(self, "_vertices", as_vertices(vertices))

    @classmethod
    def from_fixed(cls, shape: _FixedVertexShape):
        """Copy a fixed-count shape of the same family into a boxed one."""
        if not isinstance(shape, cls._fixed_family):
            raise TypeError(
                f"{cls.__name__}.from_fixed() expects a {cls._fixed_family.__name__}[N], "
                f"got {type(shape).__name__}"
            )
        return cls(shape.vertices)

    def to_fixed(self) -> _FixedVertexShape:
        """Convert to the fixed-count class for the current vertex count."""
        return self._fixed_family[len(self)](self._vertices)

    @property
    def vertices(self) -> np.ndarray:
        """Read-only (k, 2) view of the vertices in path order."""
        view = self._vertices.view()
        view.flags.writeable = False
        return view

    def to_numpy(self) -> np.ndarray:
        """Writeable (k, 2) float64 copy of the vertices."""
        return self._vertices.copy()

    def is_degenerate(self) -> bool:
        return len(self) < self._min_vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(_as_points(self._vertices))

    def __getitem__(self, index):
        if isinstance(index, slice):
            return _as_points(self._vertices[index])
        x, y = self._vertices[index]
        return (float(x), float(y))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _BoxedVertexShape):
            return NotImplemented
        return type(self) is type(other) and np.array_equal(self._vertices, other._vertices)

    def __hash__(self) -> int:
        # tuples of floats hash -0.0 and 0.0 alike, matching np.array_equal
        return hash((type(self), _as_points(self._vertices)))

    def __reduce__(self):
        return (type(self), (self.to_numpy(),))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({_as_points(self._vertices)!r})"


class BoxedPolyline2d(_BoxedVertexShape):
    """An open path with a vertex count chosen at run time.

    For a version with the count fixed in the type: Polyline2d[N].
    """

    __slots__ = ()
    closed = False
    _min_vertices = 2
    _fixed_family = Polyline2d


class BoxedPolygon(_BoxedVertexShape):
    """A closed polygon with a vertex count chosen at run time.

    For a version with the count fixed in the type: Polygon[N].
    """

    __slots__ = ()
    closed = True
    _min_vertices = 3
    _fixed_family = Polygon


# =============================================================================
# Convenience shapes
# =============================================================================


@dataclass(frozen=True)
class Triangle(Primitive2d):
    """A triangle with three named vertices.

    Semantically a Polygon[3]; no winding order is enforced.

    Attributes:
        a: First vertex.
        b: Second vertex.
        c: Third vertex.
    """

    closed: ClassVar[bool] = True

    a: Point
    b: Point
    c: Point

    def __post_init__(self) -> None:
        for name in ("a", "b", "c"):
            x, y = as_vec2(getattr(self, name))
            object.__setattr__(self, name, (float(x), float(y)))

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vec2Like]) -> Triangle:
        """Build from a sequence of exactly 3 vertices.

        Raises:
            VertexCountError: If the sequence does not hold 3 vertices.
        """
        points = as_vertices(vertices)
        if len(points) != 3:
            raise VertexCountError(cls.__name__, 3, len(points))
        return cls(*_as_points(points))

    @property
    def vertices(self) -> tuple[Point, Point, Point]:
        return (self.a, self.b, self.c)

    def to_polygon(self) -> Polygon:
        """The same vertices as a Polygon[3]."""
        return Polygon[3](self.vertices)


@dataclass(frozen=True)
class Rectangle(Primitive2d):
    """An axis-aligned rectangle centered at the origin.

    The rectangle spans x in [-half_width, half_width] and y in
    [-half_height, half_height]. Both halves are expected positive.

    Attributes:
        half_width: Half of the rectangle's width.
        half_height: Half of the rectangle's height.
    """

    half_width: float
    half_height: float

    @classmethod
    def from_size(cls, width: float, height: float) -> Rectangle:
        """Build from the full width and height."""
        return cls(width / 2.0, height / 2.0)

    def size(self) -> tuple[float, float]:
        """Full (width, height)."""
        return (2.0 * self.half_width, 2.0 * self.half_height)

    def is_degenerate(self) -> bool:
        """True if either half extent is not a positive finite number."""
        return not all(math.isfinite(h) and h > 0.0 for h in (self.half_width, self.half_height))


# An alias for Rectangle
Quad = Rectangle
