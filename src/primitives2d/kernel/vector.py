"""Vector utilities for 2D primitives inside Taichi kernels.

These are the kernel-side counterparts of ``primitives2d.core.vector``.
All functions are ``@ti.func`` and can only be called from Taichi scope.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> @ti.kernel
    ... def k() -> ti.f32:
    ...     return length(vec2(3.0, 4.0))
"""

import taichi as ti
import taichi.math as tm

# Type alias for 2D vectors using Taichi's math module
vec2 = tm.vec2


@ti.func
def length(v: vec2) -> ti.f32:
    """Compute the length (magnitude) of a vector.

    Args:
        v: The input vector.

    Returns:
        The Euclidean length of the vector.
    """
    return tm.length(v)


@ti.func
def length_squared(v: vec2) -> ti.f32:
    """Compute the squared length of a vector.

    Cheaper than length() when only comparing magnitudes.
    """
    return tm.dot(v, v)


@ti.func
def normalize(v: vec2) -> vec2:
    """Normalize a vector to unit length.

    Kernels cannot report failure, so zero input is not guarded here.
    Directions reaching a kernel were validated when built on the host.
    """
    return tm.normalize(v)


@ti.func
def dot(a: vec2, b: vec2) -> ti.f32:
    """Compute the dot product a . b."""
    return tm.dot(a, b)


@ti.func
def perp_dot(a: vec2, b: vec2) -> ti.f32:
    """Compute the 2D cross product (z component of a x b).

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        Positive if b is counter-clockwise from a, negative if clockwise,
        zero if parallel.
    """
    return a.x * b.y - a.y * b.x


@ti.func
def perp(v: vec2) -> vec2:
    """Rotate a vector 90 degrees counter-clockwise."""
    return vec2(-v.y, v.x)


@ti.func
def near_zero(v: vec2) -> ti.i32:
    """Check if a vector is near zero in both components.

    Returns:
        1 if all components are near zero, 0 otherwise.
    """
    s = 1e-8
    return ti.abs(v.x) < s and ti.abs(v.y) < s
