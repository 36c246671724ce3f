"""
Projection and view matrix builders.

Example:
    >>> from xformkit.projection import look_at, perspective
    >>> from xformkit.transform import compose
    >>> view = look_at([0, 0, 5], [0, 0, 0], [0, 1, 0])
    >>> view_proj = compose(perspective(60.0, 1.5, 0.1, 100.0), view)
"""

from xformkit.projection.api import frustum, look_at, ortho, perspective

__all__ = [
    "ortho",
    "frustum",
    "perspective",
    "look_at",
]
