"""
xformkit - Small-matrix linear algebra for 2D/3D graphics

Column-major float64 kernels for vectors, square matrices and quaternions,
compiled with Numba, plus affine and camera matrix builders.

Features:
- Vector2/3/4: length, dot, cross, normalize-to-length, axis rotation
- Matrix 2x2/3x3/4x4: exact cofactor determinant and inverse, transpose,
  translate/scale/shear/rotate constructors
- Quaternions (w, x, y, z): Hamilton product, slerp, matrix and Euler conversion
- 2D affine builder: ``Move * Rotate * Scale * Skew * Origin`` in one call
- Projections: ortho, frustum, perspective, look_at (OpenGL conventions)
- Every operation takes an optional ``out`` buffer that may alias its inputs

Layout: element (row i, column j) of an N x N matrix is at flat index
``j*N + i``. Buffers can be handed to graphics APIs expecting column-major
4x4 matrices unchanged.

Numerical edge cases follow IEEE-754: singular inverses and degenerate
projections produce inf/NaN rather than raising. Use
:class:`~xformkit.verification.MatrixVerifier` to check results.

Example - Matrices:
    >>> import math
    >>> from xformkit import mat33_rotate_z, mat33_transform2
    >>> mat33_transform2(mat33_rotate_z(math.pi / 2), [1.0, 0.0])  # ~ (0, 1)

Example - Camera:
    >>> from xformkit import compose, look_at, perspective
    >>> view = look_at([0, 0, 5], [0, 0, 0], [0, 1, 0])
    >>> view_proj = compose(perspective(60.0, 16 / 9, 0.1, 100.0), view)

Example - Values and presets:
    >>> from xformkit import AffineValues, get_transform_preset
    >>> values = AffineValues.from_translation(10, 0) + get_transform_preset("rotate_90")
    >>> m = values.to_mat33()

Call :func:`warmup_kernels` once at startup to move Numba compilation out of
the first hot call.
"""

__version__ = "0.1.0"

import logging

from xformkit.config import (
    AffineValues,
    CONFIG,
    OperationSpec,
    OrthoValues,
    PROJECTION_CONFIG,
    PerspectiveValues,
    TRANSFORM_CONFIG,
    XformConfig,
    get_ortho_preset,
    get_perspective_preset,
    get_transform_preset,
)
from xformkit.matrix import (
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
)
from xformkit.matrix.kernels import warmup_matrix_kernels
from xformkit.projection import frustum, look_at, ortho, perspective
from xformkit.projection.kernels import warmup_projection_kernels
from xformkit.quaternion import (
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
from xformkit.quaternion.kernels import warmup_quaternion_kernels
from xformkit.scalar import DEG, EPSILON, PI, RAD, REAL, clamp, degrees, equal, radians
from xformkit.transform import compose, mat33_transformation, mat44_transformation
from xformkit.transform.kernels import warmup_transform_kernels
from xformkit.vector import (
    vec2,
    vec2_add,
    vec2_cross,
    vec2_divide,
    vec2_dot,
    vec2_equal,
    vec2_length,
    vec2_length_squared,
    vec2_multiply,
    vec2_negate,
    vec2_normalize,
    vec2_rotate,
    vec2_scale,
    vec2_subtract,
    vec2_zero,
    vec3,
    vec3_add,
    vec3_cross,
    vec3_divide,
    vec3_dot,
    vec3_equal,
    vec3_length,
    vec3_length_squared,
    vec3_multiply,
    vec3_negate,
    vec3_normalize,
    vec3_rotate_x,
    vec3_rotate_y,
    vec3_rotate_z,
    vec3_scale,
    vec3_subtract,
    vec3_zero,
    vec4,
    vec4_add,
    vec4_divide,
    vec4_dot,
    vec4_equal,
    vec4_length,
    vec4_length_squared,
    vec4_multiply,
    vec4_negate,
    vec4_normalize,
    vec4_scale,
    vec4_subtract,
    vec4_zero,
)
from xformkit.vector.kernels import warmup_vector_kernels
from xformkit.verification import MatrixVerifier

logger = logging.getLogger(__name__)


def warmup_kernels() -> None:
    """Compile every Numba kernel now instead of on first use.

    Compiled kernels are cached on disk, so later processes load them
    without recompiling.
    """
    warmup_vector_kernels()
    warmup_matrix_kernels()
    warmup_quaternion_kernels()
    warmup_transform_kernels()
    warmup_projection_kernels()
    logger.debug("xformkit kernels compiled")


__all__ = [
    "__version__",
    "warmup_kernels",
    # Scalar
    "REAL",
    "EPSILON",
    "PI",
    "DEG",
    "RAD",
    "equal",
    "radians",
    "degrees",
    "clamp",
    # Vector
    "vec2",
    "vec2_zero",
    "vec2_length_squared",
    "vec2_length",
    "vec2_dot",
    "vec2_cross",
    "vec2_negate",
    "vec2_add",
    "vec2_subtract",
    "vec2_multiply",
    "vec2_divide",
    "vec2_scale",
    "vec2_normalize",
    "vec2_rotate",
    "vec2_equal",
    "vec3",
    "vec3_zero",
    "vec3_length_squared",
    "vec3_length",
    "vec3_dot",
    "vec3_cross",
    "vec3_negate",
    "vec3_add",
    "vec3_subtract",
    "vec3_multiply",
    "vec3_divide",
    "vec3_scale",
    "vec3_normalize",
    "vec3_rotate_x",
    "vec3_rotate_y",
    "vec3_rotate_z",
    "vec3_equal",
    "vec4",
    "vec4_zero",
    "vec4_length_squared",
    "vec4_length",
    "vec4_dot",
    "vec4_negate",
    "vec4_add",
    "vec4_subtract",
    "vec4_multiply",
    "vec4_divide",
    "vec4_scale",
    "vec4_normalize",
    "vec4_equal",
    # Matrix
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
    # Quaternion
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
    # Builders
    "mat33_transformation",
    "mat44_transformation",
    "compose",
    "ortho",
    "frustum",
    "perspective",
    "look_at",
    # Config
    "OperationSpec",
    "XformConfig",
    "CONFIG",
    "TRANSFORM_CONFIG",
    "PROJECTION_CONFIG",
    "AffineValues",
    "PerspectiveValues",
    "OrthoValues",
    "get_transform_preset",
    "get_perspective_preset",
    "get_ortho_preset",
    # Verification
    "MatrixVerifier",
]
