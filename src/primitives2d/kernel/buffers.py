"""Device buffers for runtime-count vertex shapes.

Boxed polylines and polygons have no fixed struct layout, so they are
uploaded into a dedicated Taichi vector field. Each VertexBuffer owns its
field; nothing else writes to it after upload.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from primitives2d import BoxedPolygon
    >>> buf = VertexBuffer.from_shape(BoxedPolygon([(0, 0), (1, 0), (0, 1)]))
    >>> buf.count, buf.closed
    (3, True)
"""

from __future__ import annotations

import logging

import numpy as np
import taichi as ti

from primitives2d.config import DEVICE_DTYPE, DEVICE_NP_DTYPE, HOST_DTYPE
from primitives2d.geometry.polygons import _BoxedVertexShape, _FixedVertexShape

logger = logging.getLogger(__name__)


class VertexBuffer:
    """Vertices of one shape in a Taichi ``Vector.field(2)``.

    Attributes:
        field: The device field. Entries [0, count) hold the vertices in
            path order. Its shape is at least 1 because Taichi fields cannot
            be empty; a zero-vertex shape has count == 0 and one unused slot.
        count: Number of valid vertices.
        closed: True if the shape is a polygon (implicit closing edge).
    """

    def __init__(self, vertices: np.ndarray, closed: bool) -> None:
        vertices = np.asarray(vertices, dtype=DEVICE_NP_DTYPE).reshape(-1, 2)
        self.count = len(vertices)
        self.closed = closed
        self.field = ti.Vector.field(2, dtype=DEVICE_DTYPE, shape=max(self.count, 1))
        if self.count > 0:
            self.field.from_numpy(np.ascontiguousarray(vertices))
        logger.debug("Allocated vertex buffer: %d vertices, closed=%s", self.count, closed)

    @classmethod
    def from_shape(cls, shape: _BoxedVertexShape | _FixedVertexShape) -> VertexBuffer:
        """Upload a boxed or fixed-count polyline/polygon.

        Raises:
            TypeError: If shape is not a vertex-list polyline or polygon.
        """
        if not isinstance(shape, (_BoxedVertexShape, _FixedVertexShape)):
            raise TypeError(f"Cannot upload {type(shape).__name__} as a vertex buffer")
        return cls(shape.to_numpy(), closed=shape.closed)

    def to_numpy(self) -> np.ndarray:
        """Read the valid vertices back as a (count, 2) float64 array."""
        return self.field.to_numpy()[: self.count].astype(HOST_DTYPE)

    def __len__(self) -> int:
        return self.count
