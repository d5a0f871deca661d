"""Core vector types shared by every primitive.

Components:
    vector: Host-side 2D vector helpers on read-only NumPy arrays
    direction: Direction2d, a unit-length vector with enforced invariant

Kernel-side vector helpers live in ``primitives2d.kernel.vector`` so that
importing the host types never requires an initialized Taichi runtime.
"""

from .direction import Direction2d
from .vector import (
    Vec2Like,
    as_vec2,
    as_vertices,
    dot,
    is_finite,
    length,
    length_squared,
    normalize_or_none,
    perp_dot,
)

__all__ = [
    "Direction2d",
    "Vec2Like",
    "as_vec2",
    "as_vertices",
    "dot",
    "is_finite",
    "length",
    "length_squared",
    "normalize_or_none",
    "perp_dot",
]
