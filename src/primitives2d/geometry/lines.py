"""Direction-based primitives: rays, planes, lines and line segments.

Each of these shapes is anchored at the coordinate origin and stores only a
Direction2d plus, for segments, two scalar offsets along it. Callers that
need an offset origin compose a translation externally.

The direction field only accepts Direction2d values, so every instance
carries a unit-length direction. The convenience constructors normalize a
raw vector first:

    >>> Line2d.through((0.0, 2.0)).direction
    Direction2d(0.0, 1.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from primitives2d.core.direction import Direction2d
from primitives2d.core.vector import Vec2Like

from .base import Primitive2d


def _require_direction(owner: str, field_name: str, value: object) -> None:
    if not isinstance(value, Direction2d):
        raise TypeError(
            f"{owner}.{field_name} must be a Direction2d, got {type(value).__name__}. "
            "Use Direction2d.from_vector() to normalize a raw vector."
        )


@dataclass(frozen=True)
class Ray2d:
    """An infinite half-line starting at the origin.

    Not a Primitive2d: a ray is a query object for algorithms (casting,
    picking), not a shape.

    Attributes:
        direction: The direction the ray points in.
    """

    direction: Direction2d

    def __post_init__(self) -> None:
        _require_direction("Ray2d", "direction", self.direction)

    @classmethod
    def towards(cls, vector: Vec2Like) -> Ray2d:
        """Ray pointing along vector, normalized.

        Raises:
            InvalidDirectionError: If vector is zero or non-finite.
        """
        return cls(Direction2d.from_vector(vector))

    def point_at(self, t: float) -> np.ndarray:
        """The point t units along the ray from the origin."""
        return self.direction * t


@dataclass(frozen=True)
class Plane2d(Primitive2d):
    """An unbounded plane through the origin.

    In 2D this is the half-space boundary perpendicular to the normal.

    Attributes:
        normal: The direction in which the plane points.
    """

    normal: Direction2d

    def __post_init__(self) -> None:
        _require_direction("Plane2d", "normal", self.normal)

    @classmethod
    def facing(cls, normal: Vec2Like) -> Plane2d:
        """Plane whose normal points along the given vector, normalized."""
        return cls(Direction2d.from_vector(normal))


@dataclass(frozen=True)
class Line2d(Primitive2d):
    """An infinite line through the origin along a direction.

    For a finite line, see LineSegment2d.

    Attributes:
        direction: The direction of the line.
    """

    direction: Direction2d

    def __post_init__(self) -> None:
        _require_direction("Line2d", "direction", self.direction)

    @classmethod
    def through(cls, vector: Vec2Like) -> Line2d:
        """Line through the origin and the given point, normalized."""
        return cls(Direction2d.from_vector(vector))


@dataclass(frozen=True)
class LineSegment2d(Primitive2d):
    """A section of a line along a direction.

    The segment covers the offsets [start, end] measured along direction
    from the origin. start > end is stored as given; it describes an empty
    or reversed segment and it is up to the consumer to treat it as such.

    Attributes:
        direction: The direction of the line.
        start: Offset along direction where the segment starts.
        end: Offset along direction where the segment ends.
    """

    direction: Direction2d
    start: float
    end: float

    def __post_init__(self) -> None:
        _require_direction("LineSegment2d", "direction", self.direction)

    def length(self) -> float:
        """Signed length end - start. Negative for a reversed segment."""
        return self.end - self.start

    def start_point(self) -> np.ndarray:
        return self.direction * self.start

    def end_point(self) -> np.ndarray:
        return self.direction * self.end

    def is_degenerate(self) -> bool:
        """True if the bounds are reversed or not finite."""
        if not (math.isfinite(self.start) and math.isfinite(self.end)):
            return True
        return self.start > self.end
