"""
Fixed-size vector operations (2, 3 and 4 components).

Vectors are flat float64 arrays addressed positionally as (x, y[, z][, w]).
Elementwise arithmetic is delegated to NumPy ufuncs writing into ``out``;
cross products, rotations and normalization use the Numba kernels.

Every function accepting ``out`` allocates a fresh array when it is omitted
and otherwise writes into (and returns) the caller's buffer. ``out`` may
alias any input.
"""

from __future__ import annotations

import logging

import numpy as np

from xformkit.scalar import equal
from xformkit.shared.buffers import as_buffer, inplace_buffer, out_buffer
from xformkit.types import ArrayLike, Buffer, Vector2, Vector3, Vector4
from xformkit.vector.kernels import (
    dot_numba,
    length_squared_numba,
    normalize_numba,
    vec2_cross_numba,
    vec2_rotate_numba,
    vec3_cross_numba,
    vec3_rotate_x_numba,
    vec3_rotate_y_numba,
    vec3_rotate_z_numba,
)

logger = logging.getLogger(__name__)

# ============================================================================
# Size-generic helpers
# ============================================================================


def _zero(n: int, out: Buffer | None) -> Buffer:
    out = out_buffer(out, n)
    out.fill(0.0)
    return out


def _negate(v: ArrayLike, n: int, out: Buffer | None) -> Buffer:
    v = as_buffer(v, n, "v")
    out = out_buffer(out, n)
    np.negative(v, out=out)
    return out


def _binary(ufunc, a: ArrayLike, b: ArrayLike, n: int, out: Buffer | None) -> Buffer:
    a = as_buffer(a, n, "a")
    b = as_buffer(b, n, "b")
    out = out_buffer(out, n)
    ufunc(a, b, out=out)
    return out


def _scale(v: ArrayLike, s: float, n: int, out: Buffer | None) -> Buffer:
    v = as_buffer(v, n, "v")
    out = out_buffer(out, n)
    np.multiply(v, float(s), out=out)
    return out


def _length_squared(v: ArrayLike, n: int) -> float:
    return float(length_squared_numba(as_buffer(v, n, "v")))


def _length(v: ArrayLike, n: int) -> float:
    return float(np.sqrt(_length_squared(v, n)))


def _dot(a: ArrayLike, b: ArrayLike, n: int) -> float:
    return float(dot_numba(as_buffer(a, n, "a"), as_buffer(b, n, "b")))


def _normalize(v: Buffer, length: float, n: int) -> float:
    v = inplace_buffer(v, n, "v")
    ls = float(normalize_numba(v, float(length)))
    if equal(ls, 0.0):
        logger.debug("Normalize of zero-length vector%d left unchanged", n)
    return ls


def _equal(a: ArrayLike, b: ArrayLike, n: int) -> bool:
    a = as_buffer(a, n, "a")
    b = as_buffer(b, n, "b")
    return all(equal(float(a[i]), float(b[i])) for i in range(n))


# ============================================================================
# Vector2
# ============================================================================


def vec2(x: float = 0.0, y: float = 0.0) -> Buffer:
    """Create a 2D vector."""
    return np.array([x, y], dtype=np.float64)


def vec2_zero(out: Buffer | None = None) -> Buffer:
    """Set all components to zero."""
    return _zero(2, out)


def vec2_length_squared(v: Vector2) -> float:
    """``x*x + y*y``."""
    return _length_squared(v, 2)


def vec2_length(v: Vector2) -> float:
    """``sqrt(x*x + y*y)``."""
    return _length(v, 2)


def vec2_dot(a: Vector2, b: Vector2) -> float:
    """``ax*bx + ay*by``."""
    return _dot(a, b, 2)


def vec2_cross(a: Vector2, b: Vector2) -> float:
    """Scalar 2D cross product ``ax*by - ay*bx``."""
    return float(vec2_cross_numba(as_buffer(a, 2, "a"), as_buffer(b, 2, "b")))


def vec2_negate(v: Vector2, out: Buffer | None = None) -> Buffer:
    return _negate(v, 2, out)


def vec2_add(a: Vector2, b: Vector2, out: Buffer | None = None) -> Buffer:
    return _binary(np.add, a, b, 2, out)


def vec2_subtract(a: Vector2, b: Vector2, out: Buffer | None = None) -> Buffer:
    return _binary(np.subtract, a, b, 2, out)


def vec2_multiply(a: Vector2, b: Vector2, out: Buffer | None = None) -> Buffer:
    """Componentwise product."""
    return _binary(np.multiply, a, b, 2, out)


def vec2_divide(a: Vector2, b: Vector2, out: Buffer | None = None) -> Buffer:
    """Componentwise quotient (IEEE-754 on zero divisors)."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return _binary(np.divide, a, b, 2, out)


def vec2_scale(v: Vector2, s: float, out: Buffer | None = None) -> Buffer:
    return _scale(v, s, 2, out)


def vec2_normalize(v: Buffer, length: float = 1.0) -> float:
    """Rescale ``v`` in place to ``length``.

    :param v: float64 ndarray [2], modified in place
    :param length: Target length
    :returns: Original length; zero-length vectors are left unchanged
    """
    return _normalize(v, length, 2)


def vec2_rotate(v: Vector2, theta: float, out: Buffer | None = None) -> Buffer:
    """Rotate counter-clockwise by ``theta`` radians.

    ``(x*cos - y*sin, x*sin + y*cos)``
    """
    v = as_buffer(v, 2, "v")
    out = out_buffer(out, 2)
    vec2_rotate_numba(v, float(theta), out)
    return out


def vec2_equal(a: Vector2, b: Vector2) -> bool:
    """Componentwise equality within machine epsilon."""
    return _equal(a, b, 2)


# ============================================================================
# Vector3
# ============================================================================


def vec3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> Buffer:
    """Create a 3D vector."""
    return np.array([x, y, z], dtype=np.float64)


def vec3_zero(out: Buffer | None = None) -> Buffer:
    """Set all components to zero."""
    return _zero(3, out)


def vec3_length_squared(v: Vector3) -> float:
    """``x*x + y*y + z*z``."""
    return _length_squared(v, 3)


def vec3_length(v: Vector3) -> float:
    """``sqrt(x*x + y*y + z*z)``."""
    return _length(v, 3)


def vec3_dot(a: Vector3, b: Vector3) -> float:
    """``ax*bx + ay*by + az*bz``."""
    return _dot(a, b, 3)


def vec3_cross(a: Vector3, b: Vector3, out: Buffer | None = None) -> Buffer:
    """Cross product ``a x b``.

    :param a: First vector [3]
    :param b: Second vector [3]
    :param out: Optional output buffer [3], may alias ``a`` or ``b``
    :returns: ``(ay*bz - az*by, az*bx - ax*bz, ax*by - ay*bx)``

    Example:
        >>> vec3_cross([1, 0, 0], [0, 1, 0])
        array([0., 0., 1.])
    """
    a = as_buffer(a, 3, "a")
    b = as_buffer(b, 3, "b")
    out = out_buffer(out, 3)
    vec3_cross_numba(a, b, out)
    return out


def vec3_negate(v: Vector3, out: Buffer | None = None) -> Buffer:
    return _negate(v, 3, out)


def vec3_add(a: Vector3, b: Vector3, out: Buffer | None = None) -> Buffer:
    return _binary(np.add, a, b, 3, out)


def vec3_subtract(a: Vector3, b: Vector3, out: Buffer | None = None) -> Buffer:
    return _binary(np.subtract, a, b, 3, out)


def vec3_multiply(a: Vector3, b: Vector3, out: Buffer | None = None) -> Buffer:
    """Componentwise product."""
    return _binary(np.multiply, a, b, 3, out)


def vec3_divide(a: Vector3, b: Vector3, out: Buffer | None = None) -> Buffer:
    """Componentwise quotient (IEEE-754 on zero divisors)."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return _binary(np.divide, a, b, 3, out)


def vec3_scale(v: Vector3, s: float, out: Buffer | None = None) -> Buffer:
    return _scale(v, s, 3, out)


def vec3_normalize(v: Buffer, length: float = 1.0) -> float:
    """Rescale ``v`` in place to ``length``.

    :param v: float64 ndarray [3], modified in place
    :param length: Target length
    :returns: Original length; zero-length vectors are left unchanged
    """
    return _normalize(v, length, 3)


def vec3_rotate_x(v: Vector3, theta: float, out: Buffer | None = None) -> Buffer:
    """Rotate about the X axis by ``theta`` radians."""
    v = as_buffer(v, 3, "v")
    out = out_buffer(out, 3)
    vec3_rotate_x_numba(v, float(theta), out)
    return out


def vec3_rotate_y(v: Vector3, theta: float, out: Buffer | None = None) -> Buffer:
    """Rotate about the Y axis by ``theta`` radians."""
    v = as_buffer(v, 3, "v")
    out = out_buffer(out, 3)
    vec3_rotate_y_numba(v, float(theta), out)
    return out


def vec3_rotate_z(v: Vector3, theta: float, out: Buffer | None = None) -> Buffer:
    """Rotate about the Z axis by ``theta`` radians."""
    v = as_buffer(v, 3, "v")
    out = out_buffer(out, 3)
    vec3_rotate_z_numba(v, float(theta), out)
    return out


def vec3_equal(a: Vector3, b: Vector3) -> bool:
    """Componentwise equality within machine epsilon."""
    return _equal(a, b, 3)


# ============================================================================
# Vector4
# ============================================================================


def vec4(x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0) -> Buffer:
    """Create a 4D vector."""
    return np.array([x, y, z, w], dtype=np.float64)


def vec4_zero(out: Buffer | None = None) -> Buffer:
    """Set all components to zero."""
    return _zero(4, out)


def vec4_length_squared(v: Vector4) -> float:
    """``x*x + y*y + z*z + w*w``."""
    return _length_squared(v, 4)


def vec4_length(v: Vector4) -> float:
    """``sqrt(x*x + y*y + z*z + w*w)``."""
    return _length(v, 4)


def vec4_dot(a: Vector4, b: Vector4) -> float:
    return _dot(a, b, 4)


def vec4_negate(v: Vector4, out: Buffer | None = None) -> Buffer:
    return _negate(v, 4, out)


def vec4_add(a: Vector4, b: Vector4, out: Buffer | None = None) -> Buffer:
    return _binary(np.add, a, b, 4, out)


def vec4_subtract(a: Vector4, b: Vector4, out: Buffer | None = None) -> Buffer:
    return _binary(np.subtract, a, b, 4, out)


def vec4_multiply(a: Vector4, b: Vector4, out: Buffer | None = None) -> Buffer:
    return _binary(np.multiply, a, b, 4, out)


def vec4_divide(a: Vector4, b: Vector4, out: Buffer | None = None) -> Buffer:
    with np.errstate(divide="ignore", invalid="ignore"):
        return _binary(np.divide, a, b, 4, out)


def vec4_scale(v: Vector4, s: float, out: Buffer | None = None) -> Buffer:
    return _scale(v, s, 4, out)


def vec4_normalize(v: Buffer, length: float = 1.0) -> float:
    """Rescale ``v`` in place to ``length``; returns the original length."""
    return _normalize(v, length, 4)


def vec4_equal(a: Vector4, b: Vector4) -> bool:
    return _equal(a, b, 4)
