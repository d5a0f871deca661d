"""Capability marker for 2D primitive shapes.

Primitive2d carries no data and no methods. Subclassing it is how a shape
declares that it belongs to the 2D primitive vocabulary, so generic code
can constrain a parameter to "any 2D primitive" without forcing a common
data layout:

    def bounds(shape: Primitive2d) -> ...

The set is open: a downstream package may add its own primitive by
subclassing Primitive2d, and it is registered the same way as the built-in
shapes.
"""

from __future__ import annotations

from abc import ABC
from typing import Any

_registry: list[type] = []


class Primitive2d(ABC):
    """Marker base class for every 2D primitive shape."""

    __slots__ = ()

    def __init_subclass__(cls, register: bool = True, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if register and cls not in _registry:
            _registry.append(cls)


def registered_primitives() -> tuple[type, ...]:
    """All classes that declared themselves 2D primitives, in definition order.

    Parameterized fixed-count classes such as ``Polyline2d[3]`` are not
    listed individually; their generic family is.
    """
    return tuple(_registry)


def is_primitive(obj: Any) -> bool:
    """True if obj is a 2D primitive instance or class."""
    if isinstance(obj, type):
        return issubclass(obj, Primitive2d)
    return isinstance(obj, Primitive2d)
