"""Numba kernel for the fused 2D affine builder."""

from __future__ import annotations

import math

import numpy as np
from numba import njit
from numpy.typing import NDArray


@njit(cache=True, nogil=True, error_model="numpy")
def transformation_numba(
    x: float,
    y: float,
    theta: float,
    sx: float,
    sy: float,
    ox: float,
    oy: float,
    kx: float,
    ky: float,
    n: int,
    out: NDArray[np.float64],
) -> None:
    """Write ``Move * Rotate * Scale * Skew * Origin`` into an n x n buffer.

    The product is expanded in closed form; only the upper-left 2x2 block
    and the translation column differ from identity.
    """
    c = math.cos(theta)
    s = math.sin(theta)

    a = c * sx - ky * s * sy
    b = s * sx + ky * c * sy
    cc = kx * c * sx - s * sy
    d = kx * s * sx + c * sy

    for i in range(n * n):
        out[i] = 0.0
    for i in range(2, n):
        out[i * n + i] = 1.0

    out[0] = a
    out[1] = b
    out[n] = cc
    out[n + 1] = d

    base = (n - 1) * n
    out[base] = x - ox * a - oy * cc
    out[base + 1] = y - ox * b - oy * d


def warmup_transform_kernels() -> None:
    """Trigger JIT compilation of the transform kernel."""
    transformation_numba(0.0, 0.0, 0.0, 1.0, 1.0, 0.0, 0.0, 0.0, 0.0, 3, np.zeros(9))
    transformation_numba(0.0, 0.0, 0.0, 1.0, 1.0, 0.0, 0.0, 0.0, 0.0, 4, np.zeros(16))
