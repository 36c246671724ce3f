"""
2D affine transform builder.

Functions:

- ``mat33_transformation()`` / ``mat44_transformation()``: one-shot
  ``Move * Rotate * Scale * Skew * Origin`` matrix from nine scalars.
- ``compose()``: fuse a chain of matrices into a single matrix.

The closed form matches multiplying the individual factors up to rounding:

    mat33_translate([x, y]) * mat33_rotate_z(theta) * mat33_scale2([sx, sy])
        * mat33_shear2([ky, kx]) * mat33_translate([-ox, -oy])

Note the shear arguments are passed as ``(ky, kx)``: ``mat33_shear2`` puts
its first component below the diagonal, while ``kx`` here shears X by Y.
"""

from __future__ import annotations

import logging

from xformkit.matrix.api import dimension
from xformkit.matrix.kernels import (
    mat22_multiply_numba,
    mat33_multiply_numba,
    mat44_multiply_numba,
)
from xformkit.shared.buffers import as_buffer, out_buffer
from xformkit.transform.kernels import transformation_numba
from xformkit.types import Buffer, Matrix

logger = logging.getLogger(__name__)

_MULTIPLY = {2: mat22_multiply_numba, 3: mat33_multiply_numba, 4: mat44_multiply_numba}


def _transformation(
    n: int,
    x: float,
    y: float,
    theta: float,
    sx: float,
    sy: float,
    ox: float,
    oy: float,
    kx: float,
    ky: float,
    out: Buffer | None,
) -> Buffer:
    out = out_buffer(out, n * n)
    transformation_numba(
        float(x),
        float(y),
        float(theta),
        float(sx),
        float(sy),
        float(ox),
        float(oy),
        float(kx),
        float(ky),
        n,
        out,
    )
    return out


def mat33_transformation(
    x: float = 0.0,
    y: float = 0.0,
    theta: float = 0.0,
    sx: float = 1.0,
    sy: float = 1.0,
    ox: float = 0.0,
    oy: float = 0.0,
    kx: float = 0.0,
    ky: float = 0.0,
    out: Buffer | None = None,
) -> Buffer:
    """Build a 3x3 2D affine matrix.

    Points are first shifted by ``-origin``, then skewed, scaled, rotated
    and finally moved to ``(x, y)``.

    :param x: Translation X
    :param y: Translation Y
    :param theta: Rotation angle in radians
    :param sx: Scale X
    :param sy: Scale Y
    :param ox: Origin (pivot) X
    :param oy: Origin (pivot) Y
    :param kx: Skew factor along X
    :param ky: Skew factor along Y
    :param out: Optional output buffer [9]
    :returns: Column-major 3x3 matrix

    Example:
        >>> import math
        >>> m = mat33_transformation(x=10.0, theta=math.pi / 2, ox=1.0)
        >>> mat33_transform2(m, [1.0, 0.0])  # origin maps to (10, 0)
    """
    return _transformation(3, x, y, theta, sx, sy, ox, oy, kx, ky, out)


def mat44_transformation(
    x: float = 0.0,
    y: float = 0.0,
    theta: float = 0.0,
    sx: float = 1.0,
    sy: float = 1.0,
    ox: float = 0.0,
    oy: float = 0.0,
    kx: float = 0.0,
    ky: float = 0.0,
    out: Buffer | None = None,
) -> Buffer:
    """4x4 variant of :func:`mat33_transformation`; Z passes through."""
    return _transformation(4, x, y, theta, sx, sy, ox, oy, kx, ky, out)


def compose(*matrices: Matrix, out: Buffer | None = None) -> Buffer:
    """Multiply matrices left to right: ``compose(a, b, c) == a * b * c``.

    Applied to a vector, the rightmost matrix acts first.

    :param matrices: One or more flat matrices of the same size
    :param out: Optional output buffer
    :returns: Product matrix
    :raises ValueError: If no matrix is given or the sizes differ
    """
    if not matrices:
        raise ValueError("compose() requires at least one matrix")

    n = dimension(matrices[0])
    size = n * n
    kernel = _MULTIPLY[n]
    result = as_buffer(matrices[0], size, "matrices[0]").copy()
    for i, m in enumerate(matrices[1:], start=1):
        if dimension(m) != n:
            raise ValueError(f"matrices[{i}]: expected {n}x{n} matrix")
        kernel(result, as_buffer(m, size, f"matrices[{i}]"), result)

    logger.debug("Composed %d %dx%d matrices", len(matrices), n, n)

    out = out_buffer(out, size)
    out[:] = result
    return out
