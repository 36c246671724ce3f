"""
Numba-compiled quaternion kernels.

Quaternion Convention: (w, x, y, z) - scalar first
Euler Convention: X-Y-Z intrinsic, R = Rx(x) @ Ry(y) @ Rz(z)

Rotation matrices are flat 3x3 column-major buffers (see xformkit.matrix).
"""

from __future__ import annotations

import math

import numpy as np
from numba import njit
from numpy.typing import NDArray

from xformkit.scalar import EPSILON, clamp, equal


@njit(cache=True, nogil=True, error_model="numpy")
def quat_multiply_numba(
    q1: NDArray[np.float64], q2: NDArray[np.float64], out: NDArray[np.float64]
) -> None:
    """Hamilton product ``q1 * q2``."""
    w1, x1, y1, z1 = q1[0], q1[1], q1[2], q1[3]
    w2, x2, y2, z2 = q2[0], q2[1], q2[2], q2[3]

    out[0] = w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2
    out[1] = w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2
    out[2] = w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2
    out[3] = w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2


@njit(cache=True, nogil=True, error_model="numpy")
def quat_slerp_numba(
    q1: NDArray[np.float64], q2: NDArray[np.float64], t: float, out: NDArray[np.float64]
) -> None:
    """Spherical linear interpolation from ``q1`` (t=0) to ``q2`` (t=1).

    Nearly identical inputs fall back to linear weights. The result is not
    renormalized and no shortest-arc sign flip is applied.
    """
    dot = q1[0] * q2[0] + q1[1] * q2[1] + q1[2] * q2[2] + q1[3] * q2[3]

    if (1.0 - dot) > EPSILON:
        omega = math.acos(dot)
        s = math.sin(omega)
        scale_from = math.sin((1.0 - t) * omega) / s
        scale_to = math.sin(t * omega) / s
    else:
        scale_from = 1.0 - t
        scale_to = t

    w = q1[0] * scale_from + q2[0] * scale_to
    x = q1[1] * scale_from + q2[1] * scale_to
    y = q1[2] * scale_from + q2[2] * scale_to
    z = q1[3] * scale_from + q2[3] * scale_to

    out[0] = w
    out[1] = x
    out[2] = y
    out[3] = z


@njit(cache=True, nogil=True, error_model="numpy")
def quat_rotate_numba(
    q: NDArray[np.float64], v: NDArray[np.float64], out: NDArray[np.float64]
) -> None:
    """Rotate vector ``v`` by unit quaternion ``q``: ``q * (0, v) * conj(q)``."""
    qw, qx, qy, qz = q[0], q[1], q[2], q[3]
    vx, vy, vz = v[0], v[1], v[2]

    # t = q * (0, v)
    tw = -qx * vx - qy * vy - qz * vz
    tx = qw * vx + qy * vz - qz * vy
    ty = qw * vy + qz * vx - qx * vz
    tz = qw * vz + qx * vy - qy * vx

    # t * conj(q), vector part only
    out[0] = tx * qw - tw * qx - ty * qz + tz * qy
    out[1] = ty * qw - tw * qy - tz * qx + tx * qz
    out[2] = tz * qw - tw * qz - tx * qy + ty * qx


@njit(cache=True, nogil=True, error_model="numpy")
def quat_to_matrix_numba(q: NDArray[np.float64], out: NDArray[np.float64]) -> None:
    """Unit quaternion to 3x3 column-major rotation matrix."""
    w, x, y, z = q[0], q[1], q[2], q[3]
    xx = x * x
    yy = y * y
    zz = z * z
    xy = x * y
    xz = x * z
    yz = y * z
    wx = w * x
    wy = w * y
    wz = w * z

    out[0] = 1.0 - 2.0 * (yy + zz)
    out[3] = 2.0 * (xy - wz)
    out[6] = 2.0 * (xz + wy)

    out[1] = 2.0 * (xy + wz)
    out[4] = 1.0 - 2.0 * (xx + zz)
    out[7] = 2.0 * (yz - wx)

    out[2] = 2.0 * (xz - wy)
    out[5] = 2.0 * (yz + wx)
    out[8] = 1.0 - 2.0 * (xx + yy)


@njit(cache=True, nogil=True, error_model="numpy")
def quat_from_matrix_numba(m: NDArray[np.float64], out: NDArray[np.float64]) -> None:
    """3x3 column-major rotation matrix to unit quaternion.

    Uses the trace when positive, otherwise the largest diagonal element,
    to keep the square root argument away from zero.
    """
    r00, r10, r20 = m[0], m[1], m[2]
    r01, r11, r21 = m[3], m[4], m[5]
    r02, r12, r22 = m[6], m[7], m[8]

    trace = r00 + r11 + r22

    if trace > 0:
        s = 0.5 / math.sqrt(trace + 1.0)
        w = 0.25 / s
        x = (r21 - r12) * s
        y = (r02 - r20) * s
        z = (r10 - r01) * s
    elif r00 > r11 and r00 > r22:
        s = 2.0 * math.sqrt(1.0 + r00 - r11 - r22)
        w = (r21 - r12) / s
        x = 0.25 * s
        y = (r01 + r10) / s
        z = (r02 + r20) / s
    elif r11 > r22:
        s = 2.0 * math.sqrt(1.0 + r11 - r00 - r22)
        w = (r02 - r20) / s
        x = (r01 + r10) / s
        y = 0.25 * s
        z = (r12 + r21) / s
    else:
        s = 2.0 * math.sqrt(1.0 + r22 - r00 - r11)
        w = (r10 - r01) / s
        x = (r02 + r20) / s
        y = (r12 + r21) / s
        z = 0.25 * s

    norm = math.sqrt(w * w + x * x + y * y + z * z)
    out[0] = w / norm
    out[1] = x / norm
    out[2] = y / norm
    out[3] = z / norm


@njit(cache=True, nogil=True, error_model="numpy")
def quat_to_euler_numba(q: NDArray[np.float64], out: NDArray[np.float64]) -> None:
    """Unit quaternion to X-Y-Z intrinsic Euler angles (radians).

    The pitch ``asin`` argument is clamped to [-1, 1] so gimbal lock
    (pitch = +/-90 deg) does not produce NaN.
    """
    w, x, y, z = q[0], q[1], q[2], q[3]
    xx = x * x
    yy = y * y
    zz = z * z
    xz = x * z
    xy = x * y
    yz = y * z
    wx = w * x
    wy = w * y
    wz = w * z
    ty = 2.0 * (xz + wy)

    out[0] = math.atan2(2.0 * (wx - yz), 1.0 - 2.0 * (xx + yy))
    out[1] = math.asin(clamp(ty, -1.0, 1.0))
    out[2] = math.atan2(2.0 * (wz - xy), 1.0 - 2.0 * (yy + zz))


@njit(cache=True, nogil=True, error_model="numpy")
def quat_from_euler_numba(v: NDArray[np.float64], out: NDArray[np.float64]) -> None:
    """X-Y-Z intrinsic Euler angles (radians) to quaternion."""
    hx = v[0] * 0.5
    hy = v[1] * 0.5
    hz = v[2] * 0.5

    sx = math.sin(hx)
    sy = math.sin(hy)
    sz = math.sin(hz)

    cx = math.cos(hx)
    cy = math.cos(hy)
    cz = math.cos(hz)

    out[0] = cx * cy * cz - sx * sy * sz
    out[1] = sx * cy * cz + cx * sy * sz
    out[2] = cx * sy * cz - sx * cy * sz
    out[3] = cx * cy * sz + sx * sy * cz


@njit(cache=True, nogil=True, error_model="numpy")
def quat_from_angle_axis_numba(
    axis: NDArray[np.float64], theta: float, out: NDArray[np.float64]
) -> None:
    """Rotation of ``theta`` radians about ``axis`` (normalized here).

    A zero-length axis yields the identity quaternion.
    """
    x, y, z = axis[0], axis[1], axis[2]
    ls = math.sqrt(x * x + y * y + z * z)

    if equal(ls, 0.0):
        out[0] = 1.0
        out[1] = 0.0
        out[2] = 0.0
        out[3] = 0.0
    else:
        inv = 1.0 / ls
        ht = theta * 0.5
        s = math.sin(ht)

        out[0] = math.cos(ht)
        out[1] = s * x * inv
        out[2] = s * y * inv
        out[3] = s * z * inv


def warmup_quaternion_kernels() -> None:
    """Trigger JIT compilation of the quaternion kernels."""
    q = np.array([1.0, 0.0, 0.0, 0.0], dtype=np.float64)
    v = np.ones(3, dtype=np.float64)
    m = np.zeros(9, dtype=np.float64)
    out = np.zeros(4, dtype=np.float64)
    out3 = np.zeros(3, dtype=np.float64)

    quat_multiply_numba(q, q, out)
    quat_slerp_numba(q, q, 0.5, out)
    quat_rotate_numba(q, v, out3)
    quat_to_matrix_numba(q, m)
    quat_from_matrix_numba(m, out)
    quat_to_euler_numba(q, out3)
    quat_from_euler_numba(v, out)
    quat_from_angle_axis_numba(v, 0.5, out)
