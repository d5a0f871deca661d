"""Kernel-side representation of 2D primitives.

This module exposes the shapes to Taichi kernels:

Components:
    vector: vec2 helpers callable from kernels (@ti.func)
    structs: @ti.dataclass layouts for fixed-size primitives, make_*
        constructors, and to_struct() host-to-kernel packing
    buffers: VertexBuffer, device storage for runtime-count shapes

Taichi must be initialized (see primitives2d.config.init_taichi) before
packing shapes or allocating buffers.
"""

from .buffers import VertexBuffer
from .structs import (
    CircleStruct,
    Line2dStruct,
    LineSegment2dStruct,
    Plane2dStruct,
    Ray2dStruct,
    RectangleStruct,
    RegularPolygonStruct,
    TriangleStruct,
    make_circle,
    make_line,
    make_plane,
    make_ray,
    make_rectangle,
    make_regular_polygon,
    make_segment,
    make_triangle,
    polygon_struct,
    polyline_struct,
    ray_at,
    segment_end,
    segment_start,
    to_struct,
)
from .vector import dot, length, length_squared, near_zero, normalize, perp, perp_dot, vec2

__all__ = [
    "VertexBuffer",
    "CircleStruct",
    "Ray2dStruct",
    "Plane2dStruct",
    "Line2dStruct",
    "LineSegment2dStruct",
    "TriangleStruct",
    "RectangleStruct",
    "RegularPolygonStruct",
    "polyline_struct",
    "polygon_struct",
    "make_circle",
    "make_ray",
    "make_plane",
    "make_line",
    "make_segment",
    "make_triangle",
    "make_rectangle",
    "make_regular_polygon",
    "ray_at",
    "segment_start",
    "segment_end",
    "to_struct",
    "vec2",
    "length",
    "length_squared",
    "normalize",
    "dot",
    "perp_dot",
    "perp",
    "near_zero",
]
