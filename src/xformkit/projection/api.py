"""
Camera projection and view matrices (4x4, column-major, OpenGL clip space).

Functions:

- ``ortho()``: orthographic box to canonical clip cube.
- ``frustum()``: off-center perspective frustum.
- ``perspective()``: symmetric frustum from vertical field of view (degrees).
- ``look_at()``: right-handed view matrix from eye, target and up.

Degenerate inputs (``left == right``, ``near == far``, ``eye == target``)
produce inf/NaN elements rather than raising.
"""

from __future__ import annotations

import math

from xformkit.projection.kernels import frustum_numba, look_at_numba, ortho_numba
from xformkit.scalar import radians
from xformkit.shared.buffers import as_buffer, out_buffer
from xformkit.types import Buffer, Vector3


def ortho(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float,
    out: Buffer | None = None,
) -> Buffer:
    """Build an orthographic projection.

    :param left: Left clipping plane
    :param right: Right clipping plane
    :param bottom: Bottom clipping plane
    :param top: Top clipping plane
    :param near: Near clipping distance
    :param far: Far clipping distance
    :param out: Optional output buffer [16]
    :returns: Column-major 4x4 matrix
    """
    out = out_buffer(out, 16)
    ortho_numba(
        float(left), float(right), float(bottom), float(top), float(near), float(far), out
    )
    return out


def frustum(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float,
    out: Buffer | None = None,
) -> Buffer:
    """Build a perspective projection for the frustum on the near plane.

    The bottom row is ``(0, 0, -1, 0)``, so transformed points need a
    perspective divide by ``w``.
    """
    out = out_buffer(out, 16)
    frustum_numba(
        float(left), float(right), float(bottom), float(top), float(near), float(far), out
    )
    return out


def perspective(
    fovy: float, aspect: float, near: float, far: float, out: Buffer | None = None
) -> Buffer:
    """Build a symmetric perspective projection.

    :param fovy: Vertical field of view in degrees
    :param aspect: Width / height
    :param near: Near clipping distance (> 0)
    :param far: Far clipping distance
    :param out: Optional output buffer [16]
    :returns: Column-major 4x4 matrix

    Example:
        >>> proj = perspective(60.0, 16 / 9, 0.1, 100.0)
    """
    top = near * math.tan(radians(float(fovy)) * 0.5)
    right = top * aspect
    return frustum(-right, right, -top, top, near, far, out=out)


def look_at(
    eye: Vector3, target: Vector3, up: Vector3, out: Buffer | None = None
) -> Buffer:
    """Build a view matrix for a camera at ``eye`` looking at ``target``.

    The camera looks down its local -Z with +Y up; ``up`` need not be
    orthogonal to the view direction.
    """
    eye = as_buffer(eye, 3, "eye")
    target = as_buffer(target, 3, "target")
    up = as_buffer(up, 3, "up")
    out = out_buffer(out, 16)
    look_at_numba(eye, target, up, out)
    return out
