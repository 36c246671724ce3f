"""
Numba-compiled kernels for fixed-size vector operations.

All kernels operate on flat float64 buffers and write their result into a
caller-supplied ``out`` buffer. Inputs are read into locals before ``out``
is written, so ``out`` may alias any input.
"""

from __future__ import annotations

import math

import numpy as np
from numba import njit
from numpy.typing import NDArray

from xformkit.scalar import equal

# ============================================================================
# Length / dot
# ============================================================================


@njit(cache=True, nogil=True, error_model="numpy")
def length_squared_numba(v: NDArray[np.float64]) -> float:
    """Sum of squared components, accumulated left to right."""
    s = 0.0
    for i in range(v.shape[0]):
        s += v[i] * v[i]
    return s


@njit(cache=True, nogil=True, error_model="numpy")
def dot_numba(a: NDArray[np.float64], b: NDArray[np.float64]) -> float:
    """Dot product, accumulated left to right."""
    s = 0.0
    for i in range(a.shape[0]):
        s += a[i] * b[i]
    return s


@njit(cache=True, nogil=True, error_model="numpy")
def normalize_numba(v: NDArray[np.float64], length: float) -> float:
    """
    Rescale ``v`` in place to ``length``.

    Returns the original length. A zero-length vector is left unchanged.
    """
    ls = math.sqrt(length_squared_numba(v))
    if not equal(ls, 0.0):
        k = length / ls
        for i in range(v.shape[0]):
            v[i] = v[i] * k
    return ls


# ============================================================================
# Cross products
# ============================================================================


@njit(cache=True, nogil=True, error_model="numpy")
def vec2_cross_numba(a: NDArray[np.float64], b: NDArray[np.float64]) -> float:
    """Scalar 2D cross product ``ax*by - ay*bx``."""
    return a[0] * b[1] - a[1] * b[0]


@njit(cache=True, nogil=True, error_model="numpy")
def vec3_cross_numba(
    a: NDArray[np.float64], b: NDArray[np.float64], out: NDArray[np.float64]
) -> None:
    """3D cross product ``a x b``."""
    ax, ay, az = a[0], a[1], a[2]
    bx, by, bz = b[0], b[1], b[2]

    out[0] = ay * bz - az * by
    out[1] = az * bx - ax * bz
    out[2] = ax * by - ay * bx


# ============================================================================
# Rotations
# ============================================================================


@njit(cache=True, nogil=True, error_model="numpy")
def vec2_rotate_numba(v: NDArray[np.float64], theta: float, out: NDArray[np.float64]) -> None:
    """Rotate a 2D vector counter-clockwise by ``theta`` radians."""
    c = math.cos(theta)
    s = math.sin(theta)
    x, y = v[0], v[1]

    out[0] = x * c - y * s
    out[1] = x * s + y * c


@njit(cache=True, nogil=True, error_model="numpy")
def vec3_rotate_x_numba(v: NDArray[np.float64], theta: float, out: NDArray[np.float64]) -> None:
    """Rotate about the X axis (right-handed)."""
    c = math.cos(theta)
    s = math.sin(theta)
    x, y, z = v[0], v[1], v[2]

    out[0] = x
    out[1] = y * c - z * s
    out[2] = y * s + z * c


@njit(cache=True, nogil=True, error_model="numpy")
def vec3_rotate_y_numba(v: NDArray[np.float64], theta: float, out: NDArray[np.float64]) -> None:
    """Rotate about the Y axis (right-handed)."""
    c = math.cos(theta)
    s = math.sin(theta)
    x, y, z = v[0], v[1], v[2]

    out[0] = z * s + x * c
    out[1] = y
    out[2] = z * c - x * s


@njit(cache=True, nogil=True, error_model="numpy")
def vec3_rotate_z_numba(v: NDArray[np.float64], theta: float, out: NDArray[np.float64]) -> None:
    """Rotate about the Z axis (right-handed)."""
    c = math.cos(theta)
    s = math.sin(theta)
    x, y, z = v[0], v[1], v[2]

    out[0] = x * c - y * s
    out[1] = x * s + y * c
    out[2] = z


def warmup_vector_kernels() -> None:
    """Trigger JIT compilation of the vector kernels."""
    v2 = np.ones(2, dtype=np.float64)
    v3 = np.ones(3, dtype=np.float64)
    v4 = np.ones(4, dtype=np.float64)
    out2 = np.zeros(2, dtype=np.float64)
    out3 = np.zeros(3, dtype=np.float64)

    for v in (v2, v3, v4):
        length_squared_numba(v)
        dot_numba(v, v)
        normalize_numba(v.copy(), 1.0)

    vec2_cross_numba(v2, v2)
    vec3_cross_numba(v3, v3, out3)
    vec2_rotate_numba(v2, 0.5, out2)
    vec3_rotate_x_numba(v3, 0.5, out3)
    vec3_rotate_y_numba(v3, 0.5, out3)
    vec3_rotate_z_numba(v3, 0.5, out3)
