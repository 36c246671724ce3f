"""Shared utilities for xformkit.

This module contains buffer coercion and validation helpers used by the
vector, matrix, quaternion, transform and projection APIs.
"""

from xformkit.shared.buffers import as_buffer, inplace_buffer, out_buffer

__all__ = [
    "as_buffer",
    "out_buffer",
    "inplace_buffer",
]
