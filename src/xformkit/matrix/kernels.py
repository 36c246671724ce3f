"""
Numba-compiled kernels for 2x2, 3x3 and 4x4 matrices.

Matrices are flat float64 buffers in column-major order: element
(row i, column j) of an N x N matrix is stored at index ``j*N + i``.
Local names follow the same convention, ``mRC`` being row R, column C
(1-based):

    | m11 m12 m13 m14 |     | e0 e4 e8  e12 |
    | m21 m22 m23 m24 |  =  | e1 e5 e9  e13 |
    | m31 m32 m33 m34 |     | e2 e6 e10 e14 |
    | m41 m42 m43 m44 |     | e3 e7 e11 e15 |

Kernels are compiled without fastmath so that the term order of every
expression is kept, and with the NumPy error model so that a zero
determinant yields inf/NaN instead of raising. Every kernel reads all the
inputs it needs before writing ``out``, so ``out`` may alias an input.
"""

from __future__ import annotations

import math

import numpy as np
from numba import njit
from numpy.typing import NDArray

# ============================================================================
# Shared helpers
# ============================================================================


@njit(cache=True, nogil=True)
def identity_into_numba(out: NDArray[np.float64], n: int) -> None:
    """Overwrite ``out`` with the n x n identity."""
    for k in range(n * n):
        out[k] = 0.0
    for k in range(n):
        out[k * n + k] = 1.0


@njit(cache=True, nogil=True)
def transpose_numba(e: NDArray[np.float64], n: int, out: NDArray[np.float64]) -> None:
    """Transpose an n x n matrix. Each symmetric pair is read before written."""
    for j in range(n):
        out[j * n + j] = e[j * n + j]
        for i in range(j + 1, n):
            lower = e[j * n + i]
            upper = e[i * n + j]
            out[j * n + i] = upper
            out[i * n + j] = lower


# ============================================================================
# Matrix22
# ============================================================================


@njit(cache=True, nogil=True, error_model="numpy")
def mat22_multiply_numba(
    a: NDArray[np.float64], b: NDArray[np.float64], out: NDArray[np.float64]
) -> None:
    """``out = a @ b``."""
    a11, a21, a12, a22 = a[0], a[1], a[2], a[3]
    b11, b21, b12, b22 = b[0], b[1], b[2], b[3]

    out[0] = a11 * b11 + a12 * b21
    out[1] = a21 * b11 + a22 * b21
    out[2] = a11 * b12 + a12 * b22
    out[3] = a21 * b12 + a22 * b22


@njit(cache=True, nogil=True, error_model="numpy")
def mat22_determinant_numba(e: NDArray[np.float64]) -> float:
    return e[0] * e[3] - e[2] * e[1]


@njit(cache=True, nogil=True, error_model="numpy")
def mat22_inverse_numba(e: NDArray[np.float64], out: NDArray[np.float64]) -> float:
    """Adjugate over determinant. Returns the determinant."""
    m11, m21, m12, m22 = e[0], e[1], e[2], e[3]
    det = m11 * m22 - m12 * m21
    inv = 1.0 / det

    out[0] = inv * m22
    out[1] = -inv * m21
    out[2] = -inv * m12
    out[3] = inv * m11
    return det


@njit(cache=True, nogil=True, error_model="numpy")
def mat22_transform_numba(
    e: NDArray[np.float64], v: NDArray[np.float64], out: NDArray[np.float64]
) -> None:
    x, y = v[0], v[1]
    out[0] = e[0] * x + e[2] * y
    out[1] = e[1] * x + e[3] * y


@njit(cache=True, nogil=True, error_model="numpy")
def mat22_rotate_numba(theta: float, out: NDArray[np.float64]) -> None:
    c = math.cos(theta)
    s = math.sin(theta)

    out[0] = c
    out[1] = s
    out[2] = -s
    out[3] = c


# ============================================================================
# Matrix33
# ============================================================================


@njit(cache=True, nogil=True, error_model="numpy")
def mat33_multiply_numba(
    a: NDArray[np.float64], b: NDArray[np.float64], out: NDArray[np.float64]
) -> None:
    """``out = a @ b``."""
    a11, a21, a31 = a[0], a[1], a[2]
    a12, a22, a32 = a[3], a[4], a[5]
    a13, a23, a33 = a[6], a[7], a[8]
    b11, b21, b31 = b[0], b[1], b[2]
    b12, b22, b32 = b[3], b[4], b[5]
    b13, b23, b33 = b[6], b[7], b[8]

    out[0] = a11 * b11 + a12 * b21 + a13 * b31
    out[3] = a11 * b12 + a12 * b22 + a13 * b32
    out[6] = a11 * b13 + a12 * b23 + a13 * b33
    out[1] = a21 * b11 + a22 * b21 + a23 * b31
    out[4] = a21 * b12 + a22 * b22 + a23 * b32
    out[7] = a21 * b13 + a22 * b23 + a23 * b33
    out[2] = a31 * b11 + a32 * b21 + a33 * b31
    out[5] = a31 * b12 + a32 * b22 + a33 * b32
    out[8] = a31 * b13 + a32 * b23 + a33 * b33


@njit(cache=True, nogil=True, error_model="numpy")
def mat33_determinant_numba(e: NDArray[np.float64]) -> float:
    """Cofactor expansion along the first column."""
    m11, m21, m31 = e[0], e[1], e[2]
    m12, m22, m32 = e[3], e[4], e[5]
    m13, m23, m33 = e[6], e[7], e[8]

    return (
        m11 * (m22 * m33 - m32 * m23)
        - m21 * (m12 * m33 - m32 * m13)
        + m31 * (m12 * m23 - m22 * m13)
    )


@njit(cache=True, nogil=True, error_model="numpy")
def mat33_inverse_numba(e: NDArray[np.float64], out: NDArray[np.float64]) -> float:
    """Adjugate over determinant. Returns the determinant."""
    det = mat33_determinant_numba(e)
    inv = 1.0 / det

    m11, m21, m31 = e[0], e[1], e[2]
    m12, m22, m32 = e[3], e[4], e[5]
    m13, m23, m33 = e[6], e[7], e[8]

    out[0] = inv * (m22 * m33 - m32 * m23)
    out[1] = -inv * (m21 * m33 - m31 * m23)
    out[2] = inv * (m21 * m32 - m31 * m22)
    out[3] = -inv * (m12 * m33 - m32 * m13)
    out[4] = inv * (m11 * m33 - m31 * m13)
    out[5] = -inv * (m11 * m32 - m31 * m12)
    out[6] = inv * (m12 * m23 - m22 * m13)
    out[7] = -inv * (m11 * m23 - m21 * m13)
    out[8] = inv * (m11 * m22 - m21 * m12)
    return det


@njit(cache=True, nogil=True, error_model="numpy")
def mat33_transform2_numba(
    e: NDArray[np.float64], v: NDArray[np.float64], out: NDArray[np.float64]
) -> None:
    """Affine 2D point transform: linear part plus third column."""
    x, y = v[0], v[1]
    out[0] = e[0] * x + e[3] * y + e[6]
    out[1] = e[1] * x + e[4] * y + e[7]


@njit(cache=True, nogil=True, error_model="numpy")
def mat33_transform3_numba(
    e: NDArray[np.float64], v: NDArray[np.float64], out: NDArray[np.float64]
) -> None:
    """Linear 3D vector transform."""
    x, y, z = v[0], v[1], v[2]
    out[0] = e[0] * x + e[3] * y + e[6] * z
    out[1] = e[1] * x + e[4] * y + e[7] * z
    out[2] = e[2] * x + e[5] * y + e[8] * z


# ============================================================================
# Matrix44
# ============================================================================


@njit(cache=True, nogil=True, error_model="numpy")
def mat44_multiply_numba(
    a: NDArray[np.float64], b: NDArray[np.float64], out: NDArray[np.float64]
) -> None:
    """``out = a @ b``.

    ``a`` is held in locals; column j of the result depends only on column j
    of ``b``, which is read before that column of ``out`` is written.
    """
    a11, a21, a31, a41 = a[0], a[1], a[2], a[3]
    a12, a22, a32, a42 = a[4], a[5], a[6], a[7]
    a13, a23, a33, a43 = a[8], a[9], a[10], a[11]
    a14, a24, a34, a44 = a[12], a[13], a[14], a[15]

    for j in range(4):
        k = j * 4
        b1, b2, b3, b4 = b[k], b[k + 1], b[k + 2], b[k + 3]
        out[k] = a11 * b1 + a12 * b2 + a13 * b3 + a14 * b4
        out[k + 1] = a21 * b1 + a22 * b2 + a23 * b3 + a24 * b4
        out[k + 2] = a31 * b1 + a32 * b2 + a33 * b3 + a34 * b4
        out[k + 3] = a41 * b1 + a42 * b2 + a43 * b3 + a44 * b4


@njit(cache=True, nogil=True, error_model="numpy")
def mat44_determinant_numba(e: NDArray[np.float64]) -> float:
    """Expansion by minors along the bottom row."""
    m11, m21, m31, m41 = e[0], e[1], e[2], e[3]
    m12, m22, m32, m42 = e[4], e[5], e[6], e[7]
    m13, m23, m33, m43 = e[8], e[9], e[10], e[11]
    m14, m24, m34, m44 = e[12], e[13], e[14], e[15]

    return (
        m41
        * (
            m14 * m23 * m32
            - m13 * m24 * m32
            - m14 * m22 * m33
            + m12 * m24 * m33
            + m13 * m22 * m34
            - m12 * m23 * m34
        )
        + m42
        * (
            m11 * m23 * m34
            - m11 * m24 * m33
            + m14 * m21 * m33
            - m13 * m21 * m34
            + m13 * m24 * m31
            - m14 * m23 * m31
        )
        + m43
        * (
            m11 * m24 * m32
            - m11 * m22 * m34
            - m14 * m21 * m32
            + m12 * m21 * m34
            + m14 * m22 * m31
            - m12 * m24 * m31
        )
        + m44
        * (
            -m13 * m22 * m31
            - m11 * m23 * m32
            + m11 * m22 * m33
            + m13 * m21 * m32
            - m12 * m21 * m33
            + m12 * m23 * m31
        )
    )


@njit(cache=True, nogil=True, error_model="numpy")
def mat44_inverse_numba(e: NDArray[np.float64], out: NDArray[np.float64]) -> float:
    """Adjugate over determinant. Returns the determinant."""
    det = mat44_determinant_numba(e)
    inv = 1.0 / det

    m11, m21, m31, m41 = e[0], e[1], e[2], e[3]
    m12, m22, m32, m42 = e[4], e[5], e[6], e[7]
    m13, m23, m33, m43 = e[8], e[9], e[10], e[11]
    m14, m24, m34, m44 = e[12], e[13], e[14], e[15]

    out[0] = inv * (
        m23 * m34 * m42
        - m24 * m33 * m42
        + m24 * m32 * m43
        - m22 * m34 * m43
        - m23 * m32 * m44
        + m22 * m33 * m44
    )
    out[1] = inv * (
        m24 * m33 * m41
        - m23 * m34 * m41
        - m24 * m31 * m43
        + m21 * m34 * m43
        + m23 * m31 * m44
        - m21 * m33 * m44
    )
    out[2] = inv * (
        m22 * m34 * m41
        - m24 * m32 * m41
        + m24 * m31 * m42
        - m21 * m34 * m42
        - m22 * m31 * m44
        + m21 * m32 * m44
    )
    out[3] = inv * (
        m23 * m32 * m41
        - m22 * m33 * m41
        - m23 * m31 * m42
        + m21 * m33 * m42
        + m22 * m31 * m43
        - m21 * m32 * m43
    )
    out[4] = inv * (
        m14 * m33 * m42
        - m13 * m34 * m42
        - m14 * m32 * m43
        + m12 * m34 * m43
        + m13 * m32 * m44
        - m12 * m33 * m44
    )
    out[5] = inv * (
        m13 * m34 * m41
        - m14 * m33 * m41
        + m14 * m31 * m43
        - m11 * m34 * m43
        - m13 * m31 * m44
        + m11 * m33 * m44
    )
    out[6] = inv * (
        m14 * m32 * m41
        - m12 * m34 * m41
        - m14 * m31 * m42
        + m11 * m34 * m42
        + m12 * m31 * m44
        - m11 * m32 * m44
    )
    out[7] = inv * (
        m12 * m33 * m41
        - m13 * m32 * m41
        + m13 * m31 * m42
        - m11 * m33 * m42
        - m12 * m31 * m43
        + m11 * m32 * m43
    )
    out[8] = inv * (
        m13 * m24 * m42
        - m14 * m23 * m42
        + m14 * m22 * m43
        - m12 * m24 * m43
        - m13 * m22 * m44
        + m12 * m23 * m44
    )
    out[9] = inv * (
        m14 * m23 * m41
        - m13 * m24 * m41
        - m14 * m21 * m43
        + m11 * m24 * m43
        + m13 * m21 * m44
        - m11 * m23 * m44
    )
    out[10] = inv * (
        m12 * m24 * m41
        - m14 * m22 * m41
        + m14 * m21 * m42
        - m11 * m24 * m42
        - m12 * m21 * m44
        + m11 * m22 * m44
    )
    out[11] = inv * (
        m13 * m22 * m41
        - m12 * m23 * m41
        - m13 * m21 * m42
        + m11 * m23 * m42
        + m12 * m21 * m43
        - m11 * m22 * m43
    )
    out[12] = inv * (
        m14 * m23 * m32
        - m13 * m24 * m32
        - m14 * m22 * m33
        + m12 * m24 * m33
        + m13 * m22 * m34
        - m12 * m23 * m34
    )
    out[13] = inv * (
        m13 * m24 * m31
        - m14 * m23 * m31
        + m14 * m21 * m33
        - m11 * m24 * m33
        - m13 * m21 * m34
        + m11 * m23 * m34
    )
    out[14] = inv * (
        m14 * m22 * m31
        - m12 * m24 * m31
        - m14 * m21 * m32
        + m11 * m24 * m32
        + m12 * m21 * m34
        - m11 * m22 * m34
    )
    out[15] = inv * (
        m12 * m23 * m31
        - m13 * m22 * m31
        + m13 * m21 * m32
        - m11 * m23 * m32
        - m12 * m21 * m33
        + m11 * m22 * m33
    )
    return det


@njit(cache=True, nogil=True, error_model="numpy")
def mat44_transform2_numba(
    e: NDArray[np.float64], v: NDArray[np.float64], out: NDArray[np.float64]
) -> None:
    x, y = v[0], v[1]
    out[0] = e[0] * x + e[4] * y + e[12]
    out[1] = e[1] * x + e[5] * y + e[13]


@njit(cache=True, nogil=True, error_model="numpy")
def mat44_transform3_numba(
    e: NDArray[np.float64], v: NDArray[np.float64], out: NDArray[np.float64]
) -> None:
    """Affine 3D point transform (w assumed 1, no perspective divide)."""
    x, y, z = v[0], v[1], v[2]
    out[0] = e[0] * x + e[4] * y + e[8] * z + e[12]
    out[1] = e[1] * x + e[5] * y + e[9] * z + e[13]
    out[2] = e[2] * x + e[6] * y + e[10] * z + e[14]


@njit(cache=True, nogil=True, error_model="numpy")
def mat44_transform4_numba(
    e: NDArray[np.float64], v: NDArray[np.float64], out: NDArray[np.float64]
) -> None:
    """Full homogeneous product ``e @ v``."""
    x, y, z, w = v[0], v[1], v[2], v[3]
    out[0] = e[0] * x + e[4] * y + e[8] * z + e[12] * w
    out[1] = e[1] * x + e[5] * y + e[9] * z + e[13] * w
    out[2] = e[2] * x + e[6] * y + e[10] * z + e[14] * w
    out[3] = e[3] * x + e[7] * y + e[11] * z + e[15] * w


# ============================================================================
# Rotations (shared by 3x3 and 4x4, n selects the column stride)
# ============================================================================


@njit(cache=True, nogil=True, error_model="numpy")
def rotate_x_numba(theta: float, n: int, out: NDArray[np.float64]) -> None:
    c = math.cos(theta)
    s = math.sin(theta)

    identity_into_numba(out, n)
    out[n + 1] = c
    out[n + 2] = s
    out[2 * n + 1] = -s
    out[2 * n + 2] = c


@njit(cache=True, nogil=True, error_model="numpy")
def rotate_y_numba(theta: float, n: int, out: NDArray[np.float64]) -> None:
    c = math.cos(theta)
    s = math.sin(theta)

    identity_into_numba(out, n)
    out[0] = c
    out[2] = -s
    out[2 * n] = s
    out[2 * n + 2] = c


@njit(cache=True, nogil=True, error_model="numpy")
def rotate_z_numba(theta: float, n: int, out: NDArray[np.float64]) -> None:
    c = math.cos(theta)
    s = math.sin(theta)

    identity_into_numba(out, n)
    out[0] = c
    out[1] = s
    out[n] = -s
    out[n + 1] = c


@njit(cache=True, nogil=True, error_model="numpy")
def rotate_axis_numba(
    theta: float, axis: NDArray[np.float64], n: int, out: NDArray[np.float64]
) -> None:
    """Rodrigues rotation about a unit ``axis``.

    ``R = c*I + t*axis*axis^T + s*[axis]x`` with ``t = 1 - c``.
    """
    c = math.cos(theta)
    s = math.sin(theta)
    t = 1.0 - c
    x, y, z = axis[0], axis[1], axis[2]
    xx = x * x
    xy = x * y
    xz = x * z
    yy = y * y
    yz = y * z
    zz = z * z
    xs = x * s
    ys = y * s
    zs = z * s

    identity_into_numba(out, n)

    out[0] = xx * t + c
    out[1] = xy * t + zs
    out[2] = xz * t - ys

    out[n] = xy * t - zs
    out[n + 1] = yy * t + c
    out[n + 2] = yz * t + xs

    out[2 * n] = xz * t + ys
    out[2 * n + 1] = yz * t - xs
    out[2 * n + 2] = zz * t + c


def warmup_matrix_kernels() -> None:
    """Trigger JIT compilation of the matrix kernels."""
    m2 = np.eye(2, dtype=np.float64).reshape(-1)
    m3 = np.eye(3, dtype=np.float64).reshape(-1)
    m4 = np.eye(4, dtype=np.float64).reshape(-1)
    v2 = np.ones(2, dtype=np.float64)
    v3 = np.ones(3, dtype=np.float64)
    v4 = np.ones(4, dtype=np.float64)
    out2 = np.zeros(4, dtype=np.float64)
    out3 = np.zeros(9, dtype=np.float64)
    out4 = np.zeros(16, dtype=np.float64)

    for m, n, out in ((m2, 2, out2), (m3, 3, out3), (m4, 4, out4)):
        identity_into_numba(out, n)
        transpose_numba(m, n, out)

    mat22_multiply_numba(m2, m2, out2)
    mat22_inverse_numba(m2, out2)
    mat22_transform_numba(m2, v2, v2.copy())
    mat22_rotate_numba(0.5, out2)

    mat33_multiply_numba(m3, m3, out3)
    mat33_inverse_numba(m3, out3)
    mat33_transform2_numba(m3, v2, v2.copy())
    mat33_transform3_numba(m3, v3, v3.copy())

    mat44_multiply_numba(m4, m4, out4)
    mat44_inverse_numba(m4, out4)
    mat44_transform2_numba(m4, v2, v2.copy())
    mat44_transform3_numba(m4, v3, v3.copy())
    mat44_transform4_numba(m4, v4, v4.copy())

    for n, out in ((3, out3), (4, out4)):
        rotate_x_numba(0.5, n, out)
        rotate_y_numba(0.5, n, out)
        rotate_z_numba(0.5, n, out)
        rotate_axis_numba(0.5, v3, n, out)
