"""Host-side 2D vector helpers.

Host vectors are NumPy arrays of shape (2,) in float64, always handed out
read-only so a shape's stored data cannot be changed through a reference.
The kernel-side counterparts live in ``primitives2d.kernel.vector``.

Example:
    >>> v = as_vec2((3.0, 4.0))
    >>> length(v)
    5.0
    >>> normalize_or_none((0.0, 0.0)) is None
    True
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Union

import numpy as np
import numpy.typing as npt

from primitives2d.config import HOST_DTYPE, ZERO_LENGTH_SQUARED
from primitives2d.errors import MalformedVertexError

Vec2Like = Union[Sequence[float], npt.ArrayLike]


# =============================================================================
# Host-side helpers
# =============================================================================


def _readonly(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


def as_vec2(value: Vec2Like) -> np.ndarray:
    """Copy a 2-component value into a read-only float64 array.

    Args:
        value: Any 2-element sequence or array (tuple, list, ndarray,
            Direction2d).

    Returns:
        A new read-only array of shape (2,).

    Raises:
        MalformedVertexError: If the value does not have exactly 2 components.
    """
    try:
        array = np.array(value, dtype=HOST_DTYPE)
    except (TypeError, ValueError) as exc:
        raise MalformedVertexError(f"Cannot read {value!r} as a 2D vector") from exc
    if array.shape != (2,):
        raise MalformedVertexError(f"Expected 2 components, got shape {array.shape}")
    return _readonly(array)


def as_vertices(values: Iterable[Vec2Like]) -> np.ndarray:
    """Copy a vertex sequence into a read-only (k, 2) float64 array.

    An empty sequence yields an array of shape (0, 2).

    Raises:
        MalformedVertexError: If any vertex is not a 2-component value.
    """
    if isinstance(values, np.ndarray):
        if values.ndim != 2 or values.shape[1] != 2:
            raise MalformedVertexError(f"Vertices must have shape (k, 2), got {values.shape}")
        points = values
    else:
        points = list(values)
    if len(points) == 0:
        return _readonly(np.empty((0, 2), dtype=HOST_DTYPE))
    try:
        array = np.array(points, dtype=HOST_DTYPE)
    except (TypeError, ValueError) as exc:
        raise MalformedVertexError("Vertices must be 2-component points") from exc
    if array.ndim != 2 or array.shape[1] != 2:
        raise MalformedVertexError(f"Vertices must have shape (k, 2), got {array.shape}")
    return _readonly(array)


def length_squared(v: Vec2Like) -> float:
    """Squared Euclidean length, avoiding the square root."""
    a = np.asarray(v, dtype=HOST_DTYPE)
    return float(a[0] * a[0] + a[1] * a[1])


def length(v: Vec2Like) -> float:
    """Euclidean length of a vector."""
    a = np.asarray(v, dtype=HOST_DTYPE)
    return math.hypot(float(a[0]), float(a[1]))


def dot(a: Vec2Like, b: Vec2Like) -> float:
    """Dot product a . b."""
    x = np.asarray(a, dtype=HOST_DTYPE)
    y = np.asarray(b, dtype=HOST_DTYPE)
    return float(x[0] * y[0] + x[1] * y[1])


def perp_dot(a: Vec2Like, b: Vec2Like) -> float:
    """2D cross product (z component of a x b).

    Positive when b is counter-clockwise from a.
    """
    x = np.asarray(a, dtype=HOST_DTYPE)
    y = np.asarray(b, dtype=HOST_DTYPE)
    return float(x[0] * y[1] - x[1] * y[0])


def is_finite(v: Vec2Like) -> bool:
    """True if every component is finite (no NaN or infinity)."""
    return bool(np.all(np.isfinite(np.asarray(v, dtype=HOST_DTYPE))))


def normalize_or_none(v: Vec2Like) -> np.ndarray | None:
    """Normalize a vector, or return None if it has no direction.

    Zero, near-zero (squared length below ZERO_LENGTH_SQUARED) and
    non-finite inputs return None instead of a NaN-bearing vector.

    Returns:
        A read-only unit vector of shape (2,), or None.
    """
    a = as_vec2(v)
    if not is_finite(a):
        return None
    len_sq = length_squared(a)
    if len_sq < ZERO_LENGTH_SQUARED or not math.isfinite(len_sq):
        return None
    return _readonly(a / math.sqrt(len_sq))

