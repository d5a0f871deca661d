"""Unit-length direction vectors in 2D.

A Direction2d wraps a read-only NumPy vector whose length is 1 for the
lifetime of the value. It can be built two ways:

- ``Direction2d(v)`` / ``Direction2d.from_vector(v)`` normalize ``v`` and
  raise InvalidDirectionError when ``v`` is zero, near-zero or non-finite.
  A NaN-bearing direction is never produced.
- ``Direction2d.from_normalized(v)`` stores ``v`` verbatim without checking
  it, for callers that already hold a unit vector and want to skip the
  normalization cost. Passing a non-unit vector breaks every consumer that
  relies on unit length; nothing downstream re-validates it.

The wrapped vector's read-only interface is available directly on the
direction (components, indexing, dot products, NumPy attributes), but no
operation that could change its length is exposed.

Example:
    >>> d = Direction2d.from_vector((3.0, 4.0))
    >>> d.x, d.y
    (0.6, 0.8)
    >>> d.dot((1.0, 0.0))
    0.6
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from typing import Any

import numpy as np

from primitives2d.config import HOST_DTYPE, NORMALIZED_TOLERANCE
from primitives2d.core.vector import (
    Vec2Like,
    as_vec2,
    dot,
    is_finite,
    length,
    length_squared,
    normalize_or_none,
    perp_dot,
)
from primitives2d.errors import InvalidDirectionError

logger = logging.getLogger(__name__)


class Direction2d:
    """A normalized vector pointing in a direction in 2D space.

    Instances are immutable, hashable and compare equal when their
    components are equal.
    """

    __slots__ = ("_vector",)

    X: Direction2d
    Y: Direction2d
    NEG_X: Direction2d
    NEG_Y: Direction2d

    def __init__(self, value: Vec2Like) -> None:
        object.__setattr__(self, "_vector", _normalized_or_raise(value))

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_vector(cls, value: Vec2Like) -> Direction2d:
        """Normalize a vector into a direction.

        Args:
            value: Any non-zero, finite 2-component vector.

        Returns:
            A direction of unit length pointing the same way as value.

        Raises:
            InvalidDirectionError: If value is zero, near-zero or non-finite.
        """
        return cls._from_unit(_normalized_or_raise(value))

    @classmethod
    def try_from_vector(cls, value: Vec2Like) -> Direction2d | None:
        """Normalize a vector into a direction, or return None if it has none."""
        unit = normalize_or_none(value)
        if unit is None:
            return None
        return cls._from_unit(unit)

    @classmethod
    def from_normalized(cls, value: Vec2Like) -> Direction2d:
        """Wrap a vector that is already unit length.

        No normalization and no check is performed; the components are
        stored exactly as given.
        """
        return cls._from_unit(as_vec2(value))

    @classmethod
    def from_angle(cls, radians: float) -> Direction2d:
        """Direction at the given angle, counter-clockwise from +x."""
        return cls._from_unit(as_vec2((math.cos(radians), math.sin(radians))))

    @classmethod
    def _from_unit(cls, unit: np.ndarray) -> Direction2d:
        direction = cls.__new__(cls)
        object.__setattr__(direction, "_vector", unit)
        return direction

    # -------------------------------------------------------------------------
    # Read-only access to the wrapped vector
    # -------------------------------------------------------------------------

    @property
    def vector(self) -> np.ndarray:
        """Read-only view of the underlying unit vector."""
        view = self._vector.view()
        view.flags.writeable = False
        return view

    @property
    def x(self) -> float:
        return float(self._vector[0])

    @property
    def y(self) -> float:
        return float(self._vector[1])

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_numpy(self) -> np.ndarray:
        """Writeable copy of the components; changing it does not affect self."""
        return self._vector.copy()

    def length(self) -> float:
        return length(self._vector)

    def length_squared(self) -> float:
        return length_squared(self._vector)

    def is_normalized(self) -> bool:
        """True if the stored length is within NORMALIZED_TOLERANCE of 1."""
        return abs(self.length() - 1.0) < NORMALIZED_TOLERANCE

    def dot(self, other: Vec2Like) -> float:
        return dot(self._vector, other)

    def perp_dot(self, other: Vec2Like) -> float:
        return perp_dot(self._vector, other)

    def angle(self) -> float:
        """Angle in radians counter-clockwise from +x, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def perp(self) -> Direction2d:
        """This direction rotated 90 degrees counter-clockwise."""
        return self._from_unit(as_vec2((-self.y, self.x)))

    def __neg__(self) -> Direction2d:
        return self._from_unit(as_vec2((-self.x, -self.y)))

    # Arithmetic yields plain vectors: the result is generally not unit length.
    def __add__(self, other: Any) -> np.ndarray:
        return self._vector + np.asarray(other, dtype=HOST_DTYPE)

    def __radd__(self, other: Any) -> np.ndarray:
        return np.asarray(other, dtype=HOST_DTYPE) + self._vector

    def __sub__(self, other: Any) -> np.ndarray:
        return self._vector - np.asarray(other, dtype=HOST_DTYPE)

    def __rsub__(self, other: Any) -> np.ndarray:
        return np.asarray(other, dtype=HOST_DTYPE) - self._vector

    def __mul__(self, scalar: float) -> np.ndarray:
        return self._vector * scalar

    def __rmul__(self, scalar: float) -> np.ndarray:
        return scalar * self._vector

    def __truediv__(self, scalar: float) -> np.ndarray:
        return self._vector / scalar

    def __getitem__(self, index: int) -> float:
        return float(self._vector[index])

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    def __len__(self) -> int:
        return 2

    def __array__(self, dtype: Any = None, copy: Any = None) -> np.ndarray:
        if copy:
            return np.array(self._vector, dtype=dtype)
        if dtype is None:
            return self.vector
        return self._vector.astype(dtype)

    def __getattr__(self, name: str) -> Any:
        # Remaining NumPy attributes resolve against the read-only view, so
        # in-place methods such as fill() fail with NumPy's read-only error.
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self.vector, name)

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Direction2d):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __copy__(self) -> Direction2d:
        return self

    def __deepcopy__(self, memo: dict) -> Direction2d:
        return self

    def __reduce__(self):
        return (Direction2d.from_normalized, (self.to_tuple(),))

    def __repr__(self) -> str:
        return f"Direction2d({self.x!r}, {self.y!r})"


def _normalized_or_raise(value: Vec2Like) -> np.ndarray:
    unit = normalize_or_none(value)
    if unit is None:
        components = tuple(float(c) for c in as_vec2(value))
        reason = "non-finite component" if not is_finite(components) else "zero length"
        logger.debug("Rejected direction %s: %s", components, reason)
        raise InvalidDirectionError(components, reason)
    return unit


Direction2d.X = Direction2d.from_normalized((1.0, 0.0))
Direction2d.Y = Direction2d.from_normalized((0.0, 1.0))
Direction2d.NEG_X = Direction2d.from_normalized((-1.0, 0.0))
Direction2d.NEG_Y = Direction2d.from_normalized((0.0, -1.0))
