"""
Quaternion utilities.

Quaternion Convention: (w, x, y, z) - scalar first

Quaternions are flat float64 arrays of 4 elements. Arithmetic (add,
subtract, negate, conjugate) and the length/dot family are valid for any
quaternion; rotation-producing operations (``quat_rotate``,
``quat_to_matrix``, ``quat_to_euler``) assume a unit quaternion and do not
renormalize. Call :func:`quat_normalize` first if the input was built by
addition or subtraction.

Every function accepting ``out`` allocates a fresh array when it is omitted
and otherwise writes into (and returns) the caller's buffer.
"""

from __future__ import annotations

import logging

import numpy as np

from xformkit.quaternion.kernels import (
    quat_from_angle_axis_numba,
    quat_from_euler_numba,
    quat_from_matrix_numba,
    quat_multiply_numba,
    quat_rotate_numba,
    quat_slerp_numba,
    quat_to_euler_numba,
    quat_to_matrix_numba,
)
from xformkit.scalar import equal
from xformkit.shared.buffers import as_buffer, inplace_buffer, out_buffer
from xformkit.types import Buffer, Matrix, Quaternion, Vector3
from xformkit.vector.kernels import dot_numba, length_squared_numba, normalize_numba

logger = logging.getLogger(__name__)


def quat(w: float = 1.0, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> Buffer:
    """Create a quaternion; defaults to the identity rotation."""
    return np.array([w, x, y, z], dtype=np.float64)


def quat_identity(out: Buffer | None = None) -> Buffer:
    """Return identity quaternion ``(1, 0, 0, 0)``."""
    out = out_buffer(out, 4)
    out[:] = (1.0, 0.0, 0.0, 0.0)
    return out


def quat_length_squared(q: Quaternion) -> float:
    """``w*w + x*x + y*y + z*z``."""
    return float(length_squared_numba(as_buffer(q, 4, "q")))


def quat_length(q: Quaternion) -> float:
    return float(np.sqrt(quat_length_squared(q)))


def quat_dot(a: Quaternion, b: Quaternion) -> float:
    """4D dot product."""
    return float(dot_numba(as_buffer(a, 4, "a"), as_buffer(b, 4, "b")))


def quat_add(a: Quaternion, b: Quaternion, out: Buffer | None = None) -> Buffer:
    a = as_buffer(a, 4, "a")
    b = as_buffer(b, 4, "b")
    out = out_buffer(out, 4)
    np.add(a, b, out=out)
    return out


def quat_subtract(a: Quaternion, b: Quaternion, out: Buffer | None = None) -> Buffer:
    a = as_buffer(a, 4, "a")
    b = as_buffer(b, 4, "b")
    out = out_buffer(out, 4)
    np.subtract(a, b, out=out)
    return out


def quat_negate(q: Quaternion, out: Buffer | None = None) -> Buffer:
    """Negate all four components (same rotation, opposite hemisphere)."""
    q = as_buffer(q, 4, "q")
    out = out_buffer(out, 4)
    np.negative(q, out=out)
    return out


def quat_conjugate(q: Quaternion, out: Buffer | None = None) -> Buffer:
    """Negate the vector part: ``(w, -x, -y, -z)``."""
    q = as_buffer(q, 4, "q")
    out = out_buffer(out, 4)
    w = q[0]
    np.negative(q, out=out)
    out[0] = w
    return out


def quat_multiply(a: Quaternion, b: Quaternion, out: Buffer | None = None) -> Buffer:
    """Multiply quaternions (Hamilton product).

    Not commutative: ``quat_multiply(a, b)`` applies ``b`` first, then ``a``,
    when used to compose rotations.

    :param a: First quaternion [4] (w, x, y, z)
    :param b: Second quaternion [4] (w, x, y, z)
    :param out: Optional output buffer [4], may alias ``a`` or ``b``
    :returns: Product quaternion

    Example:
        >>> q1 = quat()  # Identity
        >>> q2 = [0.707, 0, 0.707, 0]  # ~90 deg Y rotation
        >>> result = quat_multiply(q1, q2)
    """
    a = as_buffer(a, 4, "a")
    b = as_buffer(b, 4, "b")
    out = out_buffer(out, 4)
    quat_multiply_numba(a, b, out)
    return out


def quat_normalize(q: Buffer, length: float = 1.0) -> float:
    """Rescale ``q`` in place to ``length``.

    :param q: float64 ndarray [4], modified in place
    :param length: Target length
    :returns: Original length; a zero quaternion is left unchanged
    """
    q = inplace_buffer(q, 4, "q")
    ls = float(normalize_numba(q, float(length)))
    if equal(ls, 0.0):
        logger.debug("Normalize of zero-length quaternion left unchanged")
    return ls


def quat_equal(a: Quaternion, b: Quaternion) -> bool:
    """Componentwise equality within machine epsilon.

    ``q`` and ``-q`` represent the same rotation but compare unequal.
    """
    a = as_buffer(a, 4, "a")
    b = as_buffer(b, 4, "b")
    return all(equal(float(a[i]), float(b[i])) for i in range(4))


def quat_slerp(a: Quaternion, b: Quaternion, t: float, out: Buffer | None = None) -> Buffer:
    """Spherical linear interpolation.

    When ``1 - dot(a, b) <= EPSILON`` the weights fall back to ``(1 - t, t)``.
    The result is not renormalized.

    :param a: Start quaternion [4] (t = 0)
    :param b: End quaternion [4] (t = 1)
    :param t: Interpolation parameter, normally in [0, 1]
    :param out: Optional output buffer [4]
    :returns: Interpolated quaternion
    """
    a = as_buffer(a, 4, "a")
    b = as_buffer(b, 4, "b")
    out = out_buffer(out, 4)
    quat_slerp_numba(a, b, float(t), out)
    return out


def quat_rotate(q: Quaternion, v: Vector3, out: Buffer | None = None) -> Buffer:
    """Rotate a 3D vector by a unit quaternion.

    :param q: Unit quaternion [4]
    :param v: Vector [3]
    :param out: Optional output buffer [3], may alias ``v``
    :returns: Rotated vector
    """
    q = as_buffer(q, 4, "q")
    v = as_buffer(v, 3, "v")
    out = out_buffer(out, 3)
    quat_rotate_numba(q, v, out)
    return out


def quat_to_matrix(q: Quaternion, out: Buffer | None = None) -> Buffer:
    """Convert unit quaternion to 3x3 column-major rotation matrix.

    Example:
        >>> import math
        >>> q = quat_from_angle_axis([0, 0, 1], math.pi / 2)
        >>> R = quat_to_matrix(q)  # equals mat33_rotate_z(pi / 2)
    """
    q = as_buffer(q, 4, "q")
    out = out_buffer(out, 9)
    quat_to_matrix_numba(q, out)
    return out


def quat_from_matrix(m: Matrix, out: Buffer | None = None) -> Buffer:
    """Convert 3x3 column-major rotation matrix to unit quaternion.

    Inverse of :func:`quat_to_matrix` for proper rotations (up to the sign
    of the quaternion).
    """
    m = as_buffer(m, 9, "m")
    out = out_buffer(out, 4)
    quat_from_matrix_numba(m, out)
    return out


def quat_to_euler(q: Quaternion, out: Buffer | None = None) -> Buffer:
    """Convert unit quaternion to Euler angles.

    :param q: Unit quaternion [4] (w, x, y, z)
    :param out: Optional output buffer [3]
    :returns: Euler angles [3] (x, y, z) in radians, X-Y-Z intrinsic order
    """
    q = as_buffer(q, 4, "q")
    out = out_buffer(out, 3)
    quat_to_euler_numba(q, out)
    return out


def quat_from_euler(v: Vector3, out: Buffer | None = None) -> Buffer:
    """Convert Euler angles to quaternion.

    :param v: Euler angles [3] (x, y, z) in radians, X-Y-Z intrinsic order
    :param out: Optional output buffer [4]
    :returns: Unit quaternion
    """
    v = as_buffer(v, 3, "v")
    out = out_buffer(out, 4)
    quat_from_euler_numba(v, out)
    return out


def quat_from_angle_axis(axis: Vector3, theta: float, out: Buffer | None = None) -> Buffer:
    """Quaternion rotating ``theta`` radians about ``axis``.

    The axis is normalized internally. A zero-length axis yields the
    identity quaternion.
    """
    axis = as_buffer(axis, 3, "axis")
    out = out_buffer(out, 4)
    quat_from_angle_axis_numba(axis, float(theta), out)
    return out
