"""
2D affine transform builder.

Example:
    >>> import math
    >>> from xformkit.transform import compose, mat33_transformation
    >>> m = mat33_transformation(x=5.0, theta=math.pi / 4, sx=2.0, sy=2.0)
    >>> both = compose(m, mat33_transformation(ox=1.0, oy=1.0))
"""

from xformkit.transform.api import compose, mat33_transformation, mat44_transformation

__all__ = [
    "mat33_transformation",
    "mat44_transformation",
    "compose",
]
