"""Numba kernels for 4x4 projection and view matrices (column-major)."""

from __future__ import annotations

import math

import numpy as np
from numba import njit
from numpy.typing import NDArray


@njit(cache=True, nogil=True, error_model="numpy")
def ortho_numba(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float,
    out: NDArray[np.float64],
) -> None:
    """Orthographic projection of the box [l, r] x [b, t] x [-n, -f] to the unit cube."""
    rl = right - left
    tb = top - bottom
    fn = far - near

    for i in range(16):
        out[i] = 0.0

    out[0] = 2.0 / rl
    out[5] = 2.0 / tb
    out[10] = -2.0 / fn
    out[12] = -(right + left) / rl
    out[13] = -(top + bottom) / tb
    out[14] = -(far + near) / fn
    out[15] = 1.0


@njit(cache=True, nogil=True, error_model="numpy")
def frustum_numba(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float,
    out: NDArray[np.float64],
) -> None:
    """Perspective projection of an off-axis frustum (glFrustum layout)."""
    rl = right - left
    tb = top - bottom
    fn = far - near

    for i in range(16):
        out[i] = 0.0

    out[0] = 2.0 * near / rl
    out[5] = 2.0 * near / tb
    out[8] = (right + left) / rl
    out[9] = (top + bottom) / tb
    out[10] = -(far + near) / fn
    out[11] = -1.0
    out[14] = -2.0 * far * near / fn


@njit(cache=True, nogil=True, error_model="numpy")
def look_at_numba(
    eye: NDArray[np.float64],
    target: NDArray[np.float64],
    up: NDArray[np.float64],
    out: NDArray[np.float64],
) -> None:
    """View matrix placing the camera at ``eye`` looking toward ``target``.

    Degenerate input (``eye == target`` or ``up`` parallel to the view
    direction) yields NaN elements.
    """
    ex, ey, ez = eye[0], eye[1], eye[2]
    ux, uy, uz = up[0], up[1], up[2]

    fx = target[0] - ex
    fy = target[1] - ey
    fz = target[2] - ez
    inv = 1.0 / math.sqrt(fx * fx + fy * fy + fz * fz)
    fx *= inv
    fy *= inv
    fz *= inv

    # s = f x up
    sx = fy * uz - fz * uy
    sy = fz * ux - fx * uz
    sz = fx * uy - fy * ux
    inv = 1.0 / math.sqrt(sx * sx + sy * sy + sz * sz)
    sx *= inv
    sy *= inv
    sz *= inv

    # u = s x f
    vx = sy * fz - sz * fy
    vy = sz * fx - sx * fz
    vz = sx * fy - sy * fx

    out[0] = sx
    out[4] = sy
    out[8] = sz
    out[1] = vx
    out[5] = vy
    out[9] = vz
    out[2] = -fx
    out[6] = -fy
    out[10] = -fz
    out[3] = 0.0
    out[7] = 0.0
    out[11] = 0.0

    out[12] = -(sx * ex + sy * ey + sz * ez)
    out[13] = -(vx * ex + vy * ey + vz * ez)
    out[14] = fx * ex + fy * ey + fz * ez
    out[15] = 1.0


def warmup_projection_kernels() -> None:
    """Trigger JIT compilation of the projection kernels."""
    out = np.zeros(16, dtype=np.float64)
    eye = np.array([0.0, 0.0, 1.0])
    target = np.zeros(3, dtype=np.float64)
    up = np.array([0.0, 1.0, 0.0])

    ortho_numba(-1.0, 1.0, -1.0, 1.0, 0.1, 10.0, out)
    frustum_numba(-1.0, 1.0, -1.0, 1.0, 0.1, 10.0, out)
    look_at_numba(eye, target, up, out)
