"""Scalar type, constants and tolerant comparison.

All arithmetic in xformkit is carried out in IEEE-754 double precision.
Division by zero and out-of-domain trigonometry are never trapped: the
resulting inf/NaN values propagate to the caller.

The helpers here are compiled with Numba so that kernels in the vector,
matrix and quaternion modules can call them directly.
"""

from __future__ import annotations

import math
from math import acos, asin, atan2, cos, sin, sqrt, tan

import numpy as np
from numba import njit

# Scalar dtype used for every vector, matrix and quaternion buffer
REAL = np.float64

# Machine epsilon of REAL, used by every equality predicate
EPSILON: float = float(np.finfo(REAL).eps)

PI: float = math.pi
DEG: float = 180.0 / PI
RAD: float = PI / 180.0


@njit(cache=True, nogil=True)
def equal(a: float, b: float) -> bool:
    """Return True if ``|a - b| < EPSILON``."""
    return abs(a - b) < EPSILON


@njit(cache=True, nogil=True)
def radians(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * RAD


@njit(cache=True, nogil=True)
def degrees(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * DEG


@njit(cache=True, nogil=True)
def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` to ``[low, high]``."""
    if value < low:
        return low
    if value > high:
        return high
    return value


__all__ = [
    "REAL",
    "EPSILON",
    "PI",
    "DEG",
    "RAD",
    "equal",
    "radians",
    "degrees",
    "clamp",
    "sqrt",
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan2",
]
