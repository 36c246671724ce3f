"""
Fixed-size vectors: Vector2, Vector3 and Vector4 as flat float64 arrays.

Example:
    >>> from xformkit.vector import vec3, vec3_cross, vec3_normalize
    >>> v = vec3_cross([1, 0, 0], [0, 1, 0])
    >>> vec3_normalize(v, 2.0)
    1.0
"""

from xformkit.vector.api import (
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

__all__ = [
    # Vector2
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
    # Vector3
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
    # Vector4
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
]
