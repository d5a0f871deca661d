"""Package-wide numeric settings and Taichi initialization.

Host-side shapes keep their data in float64 NumPy arrays; kernel-side
layouts use float32 like the rest of the Taichi code. Tolerances can be
overridden through environment variables, read once at import.
"""

from __future__ import annotations

import logging
import os

import numpy as np
import taichi as ti

logger = logging.getLogger(__name__)

# Maximum |length - 1| accepted by is_normalized() checks
NORMALIZED_TOLERANCE = float(os.environ.get("PRIMITIVES2D_NORMALIZED_TOLERANCE", "1e-5"))

# Squared length below which a vector has no usable direction
ZERO_LENGTH_SQUARED = 1e-12

HOST_DTYPE = np.float64
DEVICE_DTYPE = ti.f32
DEVICE_NP_DTYPE = np.float32

DEFAULT_ARCH = os.environ.get("PRIMITIVES2D_ARCH", "cpu")

_ARCHS = {
    "cpu": ti.cpu,
    "gpu": ti.gpu,
    "cuda": ti.cuda,
    "vulkan": ti.vulkan,
    "metal": ti.metal,
    "opengl": ti.opengl,
}

_initialized = False


def init_taichi(arch: str | None = None, **kwargs) -> None:
    """Initialize the Taichi runtime for kernel-side primitives.

    Only the first call initializes Taichi; later calls are no-ops, so
    fields allocated in between survive. Calling ti.init() again would
    reset every field already allocated.

    Only calls made through this function are tracked. If the application
    has already called ti.init() itself, do not call init_taichi() as well:
    it would initialize Taichi a second time and reset those fields.

    Args:
        arch: Backend name (cpu, gpu, cuda, vulkan, metal, opengl).
            Defaults to DEFAULT_ARCH.
        **kwargs: Extra keyword arguments forwarded to ti.init().

    Raises:
        ValueError: If the backend name is unknown.
    """
    global _initialized
    name = (arch or DEFAULT_ARCH).lower()
    if name not in _ARCHS:
        raise ValueError(f"Unknown Taichi arch '{name}'. Expected one of: {', '.join(_ARCHS)}")
    if _initialized:
        return
    ti.init(arch=_ARCHS[name], **kwargs)
    _initialized = True
    logger.debug("Taichi initialized on %s", name)
