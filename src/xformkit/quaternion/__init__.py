"""
Quaternions (w, x, y, z) with rotation conversions and slerp.

Example:
    >>> import math
    >>> from xformkit.quaternion import quat_from_angle_axis, quat_rotate
    >>> q = quat_from_angle_axis([0, 0, 1], math.pi / 2)
    >>> quat_rotate(q, [1, 0, 0])  # ~ (0, 1, 0)
"""

from xformkit.quaternion.api import (
    quat,
    quat_add,
    quat_conjugate,
    quat_dot,
    quat_equal,
    quat_from_angle_axis,
    quat_from_euler,
    quat_from_matrix,
    quat_identity,
    quat_length,
    quat_length_squared,
    quat_multiply,
    quat_negate,
    quat_normalize,
    quat_rotate,
    quat_slerp,
    quat_subtract,
    quat_to_euler,
    quat_to_matrix,
)

__all__ = [
    "quat",
    "quat_identity",
    "quat_length_squared",
    "quat_length",
    "quat_dot",
    "quat_add",
    "quat_subtract",
    "quat_negate",
    "quat_conjugate",
    "quat_multiply",
    "quat_normalize",
    "quat_equal",
    "quat_slerp",
    "quat_rotate",
    "quat_to_matrix",
    "quat_from_matrix",
    "quat_to_euler",
    "quat_from_euler",
    "quat_from_angle_axis",
]
