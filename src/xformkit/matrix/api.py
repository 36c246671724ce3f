"""
Square matrices (2x2, 3x3, 4x4) stored as flat column-major float64 arrays.

Layout: element (row i, column j) of an N x N matrix lives at index
``j*N + i``. Use :func:`get_element` / :func:`set_element`, :func:`row`,
:func:`column` or :func:`to_rows` instead of indexing by hand; reading the
flat buffer as row-major silently transposes every product.

Functions:

- ``matNN_zero/identity/equal/add/subtract/multiply/scale_scalar``
- ``matNN_determinant/inverse/transpose``: exact cofactor formulas.
  ``inverse`` of a singular matrix returns inf/NaN elements, it never raises.
- ``matNN_transform*``: apply a matrix to 2, 3 or 4 component vectors.
- Named constructors: translate, scale, shear, rotate_x/y/z, rotate_axis.

Every function accepting ``out`` allocates a fresh array when it is omitted
and otherwise writes into (and returns) the caller's buffer. ``out`` may
alias any input, including for multiply, inverse and transpose.
"""

from __future__ import annotations

import logging

import numpy as np

from xformkit.matrix.kernels import (
    identity_into_numba,
    mat22_determinant_numba,
    mat22_inverse_numba,
    mat22_multiply_numba,
    mat22_rotate_numba,
    mat22_transform_numba,
    mat33_determinant_numba,
    mat33_inverse_numba,
    mat33_multiply_numba,
    mat33_transform2_numba,
    mat33_transform3_numba,
    mat44_determinant_numba,
    mat44_inverse_numba,
    mat44_multiply_numba,
    mat44_transform2_numba,
    mat44_transform3_numba,
    mat44_transform4_numba,
    rotate_axis_numba,
    rotate_x_numba,
    rotate_y_numba,
    rotate_z_numba,
    transpose_numba,
)
from xformkit.scalar import REAL, equal
from xformkit.shared.buffers import as_buffer, out_buffer
from xformkit.types import ArrayLike, Buffer, Matrix, Vector2, Vector3, Vector4

logger = logging.getLogger(__name__)

_SIZES = {4: 2, 9: 3, 16: 4}

# ============================================================================
# Layout accessors
# ============================================================================


def index(row: int, col: int, n: int) -> int:
    """Flat index of (row, col) in an n x n column-major matrix."""
    if not (0 <= row < n and 0 <= col < n):
        raise IndexError(f"({row}, {col}) out of range for {n}x{n} matrix")
    return col * n + row


def dimension(m: Matrix) -> int:
    """Return N for a flat N x N matrix buffer.

    :raises ValueError: If the buffer does not hold 4, 9 or 16 elements
    """
    size = np.shape(m)
    if len(size) != 1 or size[0] not in _SIZES:
        raise ValueError(f"expected flat matrix of 4, 9 or 16 elements, got shape {size}")
    return _SIZES[size[0]]


def get_element(m: Matrix, row: int, col: int) -> float:
    """Element at (row, col)."""
    n = dimension(m)
    return float(m[index(row, col, n)])


def set_element(m: Buffer, row: int, col: int, value: float) -> None:
    """Write the element at (row, col) in place."""
    n = dimension(m)
    m[index(row, col, n)] = value


def row(m: Matrix, i: int) -> Buffer:
    """Copy of row ``i``."""
    n = dimension(m)
    m = as_buffer(m, n * n, "m")
    return m[index(i, 0, n) :: n].copy()


def column(m: Matrix, j: int) -> Buffer:
    """Copy of column ``j``."""
    n = dimension(m)
    m = as_buffer(m, n * n, "m")
    start = index(0, j, n)
    return m[start : start + n].copy()


def to_rows(m: Matrix) -> np.ndarray:
    """Return an (N, N) array indexed ``[row, col]``.

    Useful for interop with ``numpy.linalg`` and printing.
    """
    n = dimension(m)
    m = as_buffer(m, n * n, "m")
    return m.reshape((n, n), order="F").copy()


def from_rows(rows: ArrayLike) -> Buffer:
    """Build a flat column-major buffer from an (N, N) ``[row, col]`` array."""
    arr = np.asarray(rows, dtype=REAL)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1] or arr.shape[0] not in (2, 3, 4):
        raise ValueError(f"expected square 2x2, 3x3 or 4x4 array, got shape {arr.shape}")
    return arr.flatten(order="F")


# ============================================================================
# Size-generic helpers
# ============================================================================


def _zero(n: int, out: Buffer | None) -> Buffer:
    out = out_buffer(out, n * n)
    out.fill(0.0)
    return out


def _identity(n: int, out: Buffer | None) -> Buffer:
    out = out_buffer(out, n * n)
    identity_into_numba(out, n)
    return out


def _equal(a: Matrix, b: Matrix, n: int) -> bool:
    a = as_buffer(a, n * n, "a")
    b = as_buffer(b, n * n, "b")
    return all(equal(float(a[k]), float(b[k])) for k in range(n * n))


def _binary(ufunc, a: Matrix, b: Matrix, n: int, out: Buffer | None) -> Buffer:
    a = as_buffer(a, n * n, "a")
    b = as_buffer(b, n * n, "b")
    out = out_buffer(out, n * n)
    ufunc(a, b, out=out)
    return out


def _scale_scalar(m: Matrix, s: float, n: int, out: Buffer | None) -> Buffer:
    m = as_buffer(m, n * n, "m")
    out = out_buffer(out, n * n)
    np.multiply(m, float(s), out=out)
    return out


def _multiply(kernel, a: Matrix, b: Matrix, n: int, out: Buffer | None) -> Buffer:
    a = as_buffer(a, n * n, "a")
    b = as_buffer(b, n * n, "b")
    out = out_buffer(out, n * n)
    kernel(a, b, out)
    return out


def _inverse(kernel, m: Matrix, n: int, out: Buffer | None) -> Buffer:
    m = as_buffer(m, n * n, "m")
    out = out_buffer(out, n * n)
    det = kernel(m, out)
    if det == 0.0:
        logger.debug("Inverse of singular %dx%d matrix produced non-finite elements", n, n)
    return out


def _transpose(m: Matrix, n: int, out: Buffer | None) -> Buffer:
    m = as_buffer(m, n * n, "m")
    out = out_buffer(out, n * n)
    transpose_numba(m, n, out)
    return out


def _apply(kernel, m: Matrix, v: ArrayLike, n: int, size: int, out: Buffer | None) -> Buffer:
    m = as_buffer(m, n * n, "m")
    v = as_buffer(v, size, "v")
    out = out_buffer(out, size)
    kernel(m, v, out)
    return out


def _diagonal(n: int, values: ArrayLike, size: int, out: Buffer | None) -> Buffer:
    values = as_buffer(values, size, "v")
    out = _identity(n, out)
    for k in range(size):
        out[k * n + k] = values[k]
    return out


def _translate(n: int, v: ArrayLike, size: int, out: Buffer | None) -> Buffer:
    v = as_buffer(v, size, "v")
    out = _identity(n, out)
    base = (n - 1) * n
    for k in range(size):
        out[base + k] = v[k]
    return out


def _shear2(n: int, v: ArrayLike, out: Buffer | None) -> Buffer:
    v = as_buffer(v, 2, "v")
    x, y = float(v[0]), float(v[1])
    out = _identity(n, out)
    out[index(1, 0, n)] = x
    out[index(0, 1, n)] = y
    return out


def _shear3(n: int, v: ArrayLike, out: Buffer | None) -> Buffer:
    # Each input value fills both off-diagonal slots of its column
    v = as_buffer(v, 3, "v")
    x, y, z = float(v[0]), float(v[1]), float(v[2])
    out = _identity(n, out)
    out[index(1, 0, n)] = x
    out[index(2, 0, n)] = x
    out[index(0, 1, n)] = y
    out[index(2, 1, n)] = y
    out[index(0, 2, n)] = z
    out[index(1, 2, n)] = z
    return out


def _rotate(kernel, theta: float, n: int, out: Buffer | None) -> Buffer:
    out = out_buffer(out, n * n)
    kernel(float(theta), n, out)
    return out


def _rotate_axis(theta: float, axis: Vector3, n: int, out: Buffer | None) -> Buffer:
    axis = as_buffer(axis, 3, "axis")
    out = out_buffer(out, n * n)
    rotate_axis_numba(float(theta), axis, n, out)
    return out


# ============================================================================
# Matrix22
# ============================================================================


def mat22_zero(out: Buffer | None = None) -> Buffer:
    return _zero(2, out)


def mat22_identity(out: Buffer | None = None) -> Buffer:
    return _identity(2, out)


def mat22_equal(a: Matrix, b: Matrix) -> bool:
    """Componentwise equality within machine epsilon."""
    return _equal(a, b, 2)


def mat22_add(a: Matrix, b: Matrix, out: Buffer | None = None) -> Buffer:
    return _binary(np.add, a, b, 2, out)


def mat22_subtract(a: Matrix, b: Matrix, out: Buffer | None = None) -> Buffer:
    return _binary(np.subtract, a, b, 2, out)


def mat22_scale_scalar(m: Matrix, s: float, out: Buffer | None = None) -> Buffer:
    return _scale_scalar(m, s, 2, out)


def mat22_multiply(a: Matrix, b: Matrix, out: Buffer | None = None) -> Buffer:
    """Matrix product ``a @ b``."""
    return _multiply(mat22_multiply_numba, a, b, 2, out)


def mat22_determinant(m: Matrix) -> float:
    """``m11*m22 - m12*m21``."""
    return float(mat22_determinant_numba(as_buffer(m, 4, "m")))


def mat22_inverse(m: Matrix, out: Buffer | None = None) -> Buffer:
    """Adjugate over determinant; inf/NaN if singular."""
    return _inverse(mat22_inverse_numba, m, 2, out)


def mat22_transpose(m: Matrix, out: Buffer | None = None) -> Buffer:
    return _transpose(m, 2, out)


def mat22_transform(m: Matrix, v: Vector2, out: Buffer | None = None) -> Buffer:
    """Linear transform of a 2D vector."""
    return _apply(mat22_transform_numba, m, v, 2, 2, out)


def mat22_rotate(theta: float, out: Buffer | None = None) -> Buffer:
    """Counter-clockwise rotation by ``theta`` radians."""
    out = out_buffer(out, 4)
    mat22_rotate_numba(float(theta), out)
    return out


def mat22_scale(v: Vector2, out: Buffer | None = None) -> Buffer:
    return _diagonal(2, v, 2, out)


def mat22_shear(v: Vector2, out: Buffer | None = None) -> Buffer:
    """Identity with ``m21 = vx`` and ``m12 = vy``."""
    return _shear2(2, v, out)


# ============================================================================
# Matrix33
# ============================================================================


def mat33_zero(out: Buffer | None = None) -> Buffer:
    return _zero(3, out)


def mat33_identity(out: Buffer | None = None) -> Buffer:
    return _identity(3, out)


def mat33_equal(a: Matrix, b: Matrix) -> bool:
    """Componentwise equality within machine epsilon."""
    return _equal(a, b, 3)


def mat33_add(a: Matrix, b: Matrix, out: Buffer | None = None) -> Buffer:
    return _binary(np.add, a, b, 3, out)


def mat33_subtract(a: Matrix, b: Matrix, out: Buffer | None = None) -> Buffer:
    return _binary(np.subtract, a, b, 3, out)


def mat33_scale_scalar(m: Matrix, s: float, out: Buffer | None = None) -> Buffer:
    return _scale_scalar(m, s, 3, out)


def mat33_multiply(a: Matrix, b: Matrix, out: Buffer | None = None) -> Buffer:
    """Matrix product ``a @ b``.

    :param a: Left matrix [9], column-major
    :param b: Right matrix [9], column-major
    :param out: Optional output buffer [9], may alias ``a`` or ``b``
    :returns: Product matrix
    """
    return _multiply(mat33_multiply_numba, a, b, 3, out)


def mat33_determinant(m: Matrix) -> float:
    """Determinant by cofactor expansion along the first column."""
    return float(mat33_determinant_numba(as_buffer(m, 9, "m")))


def mat33_inverse(m: Matrix, out: Buffer | None = None) -> Buffer:
    """Inverse as adjugate over determinant.

    Singular input is not guarded: every element becomes inf or NaN.
    Check :func:`mat33_determinant` (or ``verification.is_singular``) first.
    """
    return _inverse(mat33_inverse_numba, m, 3, out)


def mat33_transpose(m: Matrix, out: Buffer | None = None) -> Buffer:
    return _transpose(m, 3, out)


def mat33_transform2(m: Matrix, v: Vector2, out: Buffer | None = None) -> Buffer:
    """Apply a 2D affine matrix to a point: linear part plus third column."""
    return _apply(mat33_transform2_numba, m, v, 3, 2, out)


def mat33_transform3(m: Matrix, v: Vector3, out: Buffer | None = None) -> Buffer:
    """Apply a 3D linear matrix to a vector."""
    return _apply(mat33_transform3_numba, m, v, 3, 3, out)


def mat33_translate(v: Vector2, out: Buffer | None = None) -> Buffer:
    """2D affine translation: identity with ``(x, y)`` in the third column."""
    return _translate(3, v, 2, out)


def mat33_scale2(v: Vector2, out: Buffer | None = None) -> Buffer:
    return _diagonal(3, v, 2, out)


def mat33_scale3(v: Vector3, out: Buffer | None = None) -> Buffer:
    return _diagonal(3, v, 3, out)


def mat33_shear2(v: Vector2, out: Buffer | None = None) -> Buffer:
    """Identity with ``m21 = vx`` and ``m12 = vy``."""
    return _shear2(3, v, out)


def mat33_shear3(v: Vector3, out: Buffer | None = None) -> Buffer:
    """Identity with ``m21 = m31 = vx``, ``m12 = m32 = vy``, ``m13 = m23 = vz``."""
    return _shear3(3, v, out)


def mat33_rotate_x(theta: float, out: Buffer | None = None) -> Buffer:
    return _rotate(rotate_x_numba, theta, 3, out)


def mat33_rotate_y(theta: float, out: Buffer | None = None) -> Buffer:
    return _rotate(rotate_y_numba, theta, 3, out)


def mat33_rotate_z(theta: float, out: Buffer | None = None) -> Buffer:
    """Rotation about Z; also the 2D counter-clockwise rotation."""
    return _rotate(rotate_z_numba, theta, 3, out)


def mat33_rotate_axis(theta: float, axis: Vector3, out: Buffer | None = None) -> Buffer:
    """Rodrigues rotation by ``theta`` radians about a unit ``axis``.

    The axis is used as given; a non-unit axis yields a non-rotation matrix.
    """
    return _rotate_axis(theta, axis, 3, out)


def mat33_to_mat44(m: Matrix, out: Buffer | None = None) -> Buffer:
    """Embed a 3x3 linear part in the upper-left of a 4x4 identity."""
    m = as_buffer(m, 9, "m")
    out = _identity(4, out)
    for j in range(3):
        out[j * 4 : j * 4 + 3] = m[j * 3 : j * 3 + 3]
    return out


# ============================================================================
# Matrix44
# ============================================================================


def mat44_zero(out: Buffer | None = None) -> Buffer:
    return _zero(4, out)


def mat44_identity(out: Buffer | None = None) -> Buffer:
    return _identity(4, out)


def mat44_equal(a: Matrix, b: Matrix) -> bool:
    """Componentwise equality within machine epsilon."""
    return _equal(a, b, 4)


def mat44_add(a: Matrix, b: Matrix, out: Buffer | None = None) -> Buffer:
    return _binary(np.add, a, b, 4, out)


def mat44_subtract(a: Matrix, b: Matrix, out: Buffer | None = None) -> Buffer:
    return _binary(np.subtract, a, b, 4, out)


def mat44_scale_scalar(m: Matrix, s: float, out: Buffer | None = None) -> Buffer:
    return _scale_scalar(m, s, 4, out)


def mat44_multiply(a: Matrix, b: Matrix, out: Buffer | None = None) -> Buffer:
    """Matrix product ``a @ b``.

    Composition reads right to left: ``mat44_multiply(T, R)`` rotates first,
    then translates.

    :param a: Left matrix [16], column-major
    :param b: Right matrix [16], column-major
    :param out: Optional output buffer [16], may alias ``a`` or ``b``
    :returns: Product matrix
    """
    return _multiply(mat44_multiply_numba, a, b, 4, out)


def mat44_determinant(m: Matrix) -> float:
    """Determinant by expansion along the bottom row."""
    return float(mat44_determinant_numba(as_buffer(m, 16, "m")))


def mat44_inverse(m: Matrix, out: Buffer | None = None) -> Buffer:
    """Inverse as adjugate over determinant.

    Singular input is not guarded: every element becomes inf or NaN.
    Check :func:`mat44_determinant` (or ``verification.is_singular``) first.
    """
    return _inverse(mat44_inverse_numba, m, 4, out)


def mat44_transpose(m: Matrix, out: Buffer | None = None) -> Buffer:
    return _transpose(m, 4, out)


def mat44_transform2(m: Matrix, v: Vector2, out: Buffer | None = None) -> Buffer:
    """Apply to a 2D point (z = 0, w = 1)."""
    return _apply(mat44_transform2_numba, m, v, 4, 2, out)


def mat44_transform3(m: Matrix, v: Vector3, out: Buffer | None = None) -> Buffer:
    """Apply to a 3D point (w = 1). No perspective divide."""
    return _apply(mat44_transform3_numba, m, v, 4, 3, out)


def mat44_transform4(m: Matrix, v: Vector4, out: Buffer | None = None) -> Buffer:
    """Full homogeneous product ``m @ v``."""
    return _apply(mat44_transform4_numba, m, v, 4, 4, out)


def mat44_translate2(v: Vector2, out: Buffer | None = None) -> Buffer:
    return _translate(4, v, 2, out)


def mat44_translate3(v: Vector3, out: Buffer | None = None) -> Buffer:
    """Identity with ``(x, y, z)`` in the fourth column."""
    return _translate(4, v, 3, out)


def mat44_scale2(v: Vector2, out: Buffer | None = None) -> Buffer:
    return _diagonal(4, v, 2, out)


def mat44_scale3(v: Vector3, out: Buffer | None = None) -> Buffer:
    return _diagonal(4, v, 3, out)


def mat44_shear2(v: Vector2, out: Buffer | None = None) -> Buffer:
    """Identity with ``m21 = vx`` and ``m12 = vy``."""
    return _shear2(4, v, out)


def mat44_shear3(v: Vector3, out: Buffer | None = None) -> Buffer:
    """Identity with ``m21 = m31 = vx``, ``m12 = m32 = vy``, ``m13 = m23 = vz``."""
    return _shear3(4, v, out)


def mat44_rotate_x(theta: float, out: Buffer | None = None) -> Buffer:
    return _rotate(rotate_x_numba, theta, 4, out)


def mat44_rotate_y(theta: float, out: Buffer | None = None) -> Buffer:
    return _rotate(rotate_y_numba, theta, 4, out)


def mat44_rotate_z(theta: float, out: Buffer | None = None) -> Buffer:
    return _rotate(rotate_z_numba, theta, 4, out)


def mat44_rotate_axis(theta: float, axis: Vector3, out: Buffer | None = None) -> Buffer:
    """Rodrigues rotation by ``theta`` radians about a unit ``axis``."""
    return _rotate_axis(theta, axis, 4, out)


def mat44_to_mat33(m: Matrix, out: Buffer | None = None) -> Buffer:
    """Upper-left 3x3 of a 4x4; translation and projection terms are dropped."""
    m = as_buffer(m, 16, "m")
    out = out_buffer(out, 9)
    for j in range(3):
        out[j * 3 : j * 3 + 3] = m[j * 4 : j * 4 + 3]
    return out
