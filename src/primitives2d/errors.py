"""Typed errors raised by the primitives package.

Only two failure classes exist at construction time: normalizing a vector
that has no direction, and handing a fixed-count shape the wrong number of
vertices. Geometric degeneracy (zero radius, reversed segments, polygons
with fewer than three vertices) is never raised; shapes report it through
``is_degenerate()`` and consumers decide what to do with it.
"""

from __future__ import annotations


class PrimitiveError(Exception):
    """Base error for the primitives package."""


class InvalidDirectionError(PrimitiveError, ValueError):
    """A zero, near-zero or non-finite vector was normalized into a direction.

    Attributes:
        vector: The rejected input as a tuple of floats.
    """

    def __init__(self, vector: tuple[float, ...], reason: str = "zero length") -> None:
        self.vector = tuple(vector)
        self.reason = reason
        super().__init__(f"Cannot build a direction from {self.vector}: {reason}")


class VertexCountError(PrimitiveError, ValueError):
    """A fixed-count shape received the wrong number of vertices.

    Attributes:
        expected: The vertex count fixed by the shape type.
        actual: The number of vertices supplied.
    """

    def __init__(self, shape_name: str, expected: int, actual: int) -> None:
        self.shape_name = shape_name
        self.expected = expected
        self.actual = actual
        super().__init__(f"{shape_name} requires exactly {expected} vertices, got {actual}")


class MalformedVertexError(PrimitiveError, ValueError):
    """Vertex data could not be read as 2-component points."""
