"""Buffer utilities shared by the public API modules.

Every public operation accepts array-likes for its inputs and an optional
``out`` buffer for its result. These helpers coerce inputs to flat float64
arrays and validate caller-supplied output and in-place targets.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from xformkit.scalar import REAL
from xformkit.types import Buffer


def as_buffer(value: Any, size: int, name: str = "value") -> Buffer:
    """Coerce an array-like to a flat float64 array of ``size`` elements.

    Arrays that already have the right dtype and shape are returned as-is
    (no copy), so aliasing between inputs and ``out`` is preserved.

    :param value: Input sequence or array
    :param size: Required number of elements
    :param name: Parameter name used in error messages
    :returns: float64 array of shape (size,)
    :raises ValueError: If the input does not have exactly ``size`` elements
    """
    arr = np.asarray(value, dtype=REAL)
    if arr.shape != (size,):
        raise ValueError(f"{name}: expected shape ({size},), got {arr.shape}")
    return arr


def out_buffer(out: Buffer | None, size: int, name: str = "out") -> Buffer:
    """Return ``out`` after validation, or allocate a new zeroed buffer.

    :param out: Optional caller-supplied output buffer
    :param size: Required number of elements
    :param name: Parameter name used in error messages
    :returns: Output buffer of shape (size,)
    :raises TypeError: If ``out`` is not a float64 ndarray
    :raises ValueError: If ``out`` has the wrong shape
    """
    if out is None:
        return np.zeros(size, dtype=REAL)
    return inplace_buffer(out, size, name)


def inplace_buffer(value: Any, size: int, name: str = "value") -> Buffer:
    """Validate a buffer that will be modified in place.

    In-place targets cannot be coerced, since a converted copy would hide
    the mutation from the caller.

    :param value: Caller-owned buffer
    :param size: Required number of elements
    :param name: Parameter name used in error messages
    :returns: The same buffer
    :raises TypeError: If ``value`` is not a float64 ndarray
    :raises ValueError: If ``value`` has the wrong shape
    """
    if not isinstance(value, np.ndarray) or value.dtype != REAL:
        raise TypeError(f"{name}: expected float64 ndarray, got {type(value).__name__}")
    if value.shape != (size,):
        raise ValueError(f"{name}: expected shape ({size},), got {value.shape}")
    return value
