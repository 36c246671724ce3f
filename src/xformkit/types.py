"""Type aliases for xformkit.

Provides unified type hints for array-like parameters across all modules.
"""

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

# Flat float64 buffer (vector, column-major matrix or quaternion)
Buffer = NDArray[np.float64]

# 2D vector type (point, offset, scale pair, etc.)
Vector2 = tuple[float, float] | Sequence[float] | np.ndarray

# 3D vector type (position, axis, euler angles, etc.)
Vector3 = tuple[float, float, float] | Sequence[float] | np.ndarray

# 4D vector type (homogeneous point)
Vector4 = tuple[float, float, float, float] | Sequence[float] | np.ndarray

# Quaternion type (w, x, y, z)
Quaternion = tuple[float, float, float, float] | Sequence[float] | np.ndarray

# Flat column-major matrix of 4, 9 or 16 elements
Matrix = Sequence[float] | np.ndarray

# General array-like type
ArrayLike = Sequence[float] | np.ndarray
