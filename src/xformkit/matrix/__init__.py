"""
Square matrices (2x2, 3x3, 4x4) in flat column-major float64 storage.

Example:
    >>> from xformkit.matrix import mat33_rotate_z, mat33_transform2
    >>> import math
    >>> mat33_transform2(mat33_rotate_z(math.pi / 2), [1.0, 0.0])
    array([6.123234e-17, 1.000000e+00])
"""

from xformkit.matrix.api import (
    column,
    dimension,
    from_rows,
    get_element,
    index,
    mat22_add,
    mat22_determinant,
    mat22_equal,
    mat22_identity,
    mat22_inverse,
    mat22_multiply,
    mat22_rotate,
    mat22_scale,
    mat22_scale_scalar,
    mat22_shear,
    mat22_subtract,
    mat22_transform,
    mat22_transpose,
    mat22_zero,
    mat33_add,
    mat33_determinant,
    mat33_equal,
    mat33_identity,
    mat33_inverse,
    mat33_multiply,
    mat33_rotate_axis,
    mat33_rotate_x,
    mat33_rotate_y,
    mat33_rotate_z,
    mat33_scale2,
    mat33_scale3,
    mat33_scale_scalar,
    mat33_shear2,
    mat33_shear3,
    mat33_subtract,
    mat33_to_mat44,
    mat33_transform2,
    mat33_transform3,
    mat33_translate,
    mat33_transpose,
    mat33_zero,
    mat44_add,
    mat44_determinant,
    mat44_equal,
    mat44_identity,
    mat44_inverse,
    mat44_multiply,
    mat44_rotate_axis,
    mat44_rotate_x,
    mat44_rotate_y,
    mat44_rotate_z,
    mat44_scale2,
    mat44_scale3,
    mat44_scale_scalar,
    mat44_shear2,
    mat44_shear3,
    mat44_subtract,
    mat44_to_mat33,
    mat44_transform2,
    mat44_transform3,
    mat44_transform4,
    mat44_translate2,
    mat44_translate3,
    mat44_transpose,
    mat44_zero,
    row,
    set_element,
    to_rows,
)

__all__ = [
    "index",
    "dimension",
    "get_element",
    "set_element",
    "row",
    "column",
    "to_rows",
    "from_rows",
    "mat22_zero",
    "mat22_identity",
    "mat22_equal",
    "mat22_add",
    "mat22_subtract",
    "mat22_scale_scalar",
    "mat22_multiply",
    "mat22_determinant",
    "mat22_inverse",
    "mat22_transpose",
    "mat22_transform",
    "mat22_rotate",
    "mat22_scale",
    "mat22_shear",
    "mat33_zero",
    "mat33_identity",
    "mat33_equal",
    "mat33_add",
    "mat33_subtract",
    "mat33_scale_scalar",
    "mat33_multiply",
    "mat33_determinant",
    "mat33_inverse",
    "mat33_transpose",
    "mat33_transform2",
    "mat33_transform3",
    "mat33_translate",
    "mat33_scale2",
    "mat33_scale3",
    "mat33_shear2",
    "mat33_shear3",
    "mat33_rotate_x",
    "mat33_rotate_y",
    "mat33_rotate_z",
    "mat33_rotate_axis",
    "mat33_to_mat44",
    "mat44_zero",
    "mat44_identity",
    "mat44_equal",
    "mat44_add",
    "mat44_subtract",
    "mat44_scale_scalar",
    "mat44_multiply",
    "mat44_determinant",
    "mat44_inverse",
    "mat44_transpose",
    "mat44_transform2",
    "mat44_transform3",
    "mat44_transform4",
    "mat44_translate2",
    "mat44_translate3",
    "mat44_scale2",
    "mat44_scale3",
    "mat44_shear2",
    "mat44_shear3",
    "mat44_rotate_x",
    "mat44_rotate_y",
    "mat44_rotate_z",
    "mat44_rotate_axis",
    "mat44_to_mat33",
]
