"""Geometry module for 2D primitive shapes.

This module provides the closed vocabulary of 2D primitives consumed by
collision, rendering and layout code:

Components:
    base: Primitive2d capability marker and registry
    lines: Ray2d, Plane2d, Line2d and LineSegment2d (direction-based)
    circle: Circle and RegularPolygon (parameter-based)
    polygons: Polyline2d[N], Polygon[N], their boxed runtime-count
        counterparts, Triangle and Rectangle (vertex-based)

Every shape except Ray2d subclasses Primitive2d. Shapes are immutable
values; geometric algorithms (area, intersection, containment) live in
consumer code, not here.
"""

from .base import Primitive2d, is_primitive, registered_primitives
from .circle import Circle, RegularPolygon
from .lines import Line2d, LineSegment2d, Plane2d, Ray2d
from .polygons import (
    BoxedPolygon,
    BoxedPolyline2d,
    Polygon,
    Polyline2d,
    Quad,
    Rectangle,
    Triangle,
)

__all__ = [
    "Primitive2d",
    "is_primitive",
    "registered_primitives",
    "Circle",
    "RegularPolygon",
    "Ray2d",
    "Plane2d",
    "Line2d",
    "LineSegment2d",
    "Polyline2d",
    "BoxedPolyline2d",
    "Polygon",
    "BoxedPolygon",
    "Triangle",
    "Rectangle",
    "Quad",
]
