"""Round primitives: circles and regular polygons.

Both shapes are centered at the origin and described purely by
parameters; no vertices are stored. Degenerate values (a non-positive
radius, fewer than three vertices) are accepted verbatim and reported by
``is_degenerate()`` so the consumer can reject them.

Example:
    >>> hexagon = RegularPolygon.new(radius=1.0, n_vertices=6)
    >>> hexagon.circumcircle.radius
    1.0
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from .base import Primitive2d


@dataclass(frozen=True)
class Circle(Primitive2d):
    """A circle centered at the origin.

    Attributes:
        radius: The radius of the circle (expected positive, not enforced).
    """

    radius: float

    def is_degenerate(self) -> bool:
        """True if the radius is not a positive finite number."""
        return not (math.isfinite(self.radius) and self.radius > 0.0)


@dataclass(frozen=True)
class RegularPolygon(Primitive2d):
    """A polygon whose vertices lie equally spaced on a circumscribed circle.

    Attributes:
        circumcircle: The circle on which all vertices lie.
        n_vertices: The number of vertices (expected >= 3, not enforced).
    """

    circumcircle: Circle
    n_vertices: int

    def __post_init__(self) -> None:
        if not isinstance(self.circumcircle, Circle):
            raise TypeError(
                f"RegularPolygon.circumcircle must be a Circle, got {type(self.circumcircle).__name__}"
            )
        # bool is an int subclass but never a meaningful vertex count
        if isinstance(self.n_vertices, bool) or not isinstance(self.n_vertices, numbers.Integral):
            raise TypeError(
                f"RegularPolygon.n_vertices must be an integer, got {type(self.n_vertices).__name__}"
            )

    @classmethod
    def new(cls, radius: float, n_vertices: int) -> RegularPolygon:
        """Build from the circumradius and vertex count."""
        return cls(Circle(radius), n_vertices)

    def is_degenerate(self) -> bool:
        """True for fewer than 3 vertices or a degenerate circumcircle."""
        return self.n_vertices < 3 or self.circumcircle.is_degenerate()
