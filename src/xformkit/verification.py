"""Matrix verification utilities.

Inverse and projection builders never raise on degenerate input; they
return inf/NaN. These helpers check results before relying on them.

Example:
    >>> from xformkit.verification import MatrixVerifier
    >>>
    >>> if MatrixVerifier.is_singular(m):
    ...     raise ValueError("matrix cannot be inverted")
    >>> MatrixVerifier.assert_close(mat33_multiply(m, mat33_inverse(m)), mat33_identity())
"""

from __future__ import annotations

import logging

import numpy as np

from xformkit.matrix.api import dimension, mat22_determinant, mat33_determinant, mat44_determinant
from xformkit.shared.buffers import as_buffer
from xformkit.types import ArrayLike, Matrix

logger = logging.getLogger(__name__)

_DETERMINANT = {2: mat22_determinant, 3: mat33_determinant, 4: mat44_determinant}


class MatrixVerifier:
    """Checks for flat column-major matrices of any supported size."""

    @staticmethod
    def determinant(m: Matrix) -> float:
        """Determinant of a 2x2, 3x3 or 4x4 matrix.

        :raises ValueError: If ``m`` is not a flat square matrix buffer
        """
        return _DETERMINANT[dimension(m)](m)

    @staticmethod
    def is_singular(m: Matrix, tolerance: float = 1e-12) -> bool:
        """True if ``|det(m)| <= tolerance``; such a matrix has no usable inverse.

        :param m: Flat matrix [4, 9 or 16]
        :param tolerance: Absolute determinant threshold
        """
        det = MatrixVerifier.determinant(m)
        return not abs(det) > tolerance

    @staticmethod
    def is_finite(x: ArrayLike) -> bool:
        """True if every element is finite (no inf or NaN)."""
        return bool(np.all(np.isfinite(np.asarray(x, dtype=np.float64))))

    @staticmethod
    def is_rotation(m: Matrix, tolerance: float = 1e-9) -> bool:
        """True if the linear part is orthonormal with determinant +1.

        For 4x4 matrices the upper-left 3x3 block is checked and the
        translation column is ignored.

        :param m: Flat 2x2, 3x3 or 4x4 matrix
        :param tolerance: Absolute tolerance per element
        """
        n = dimension(m)
        rows = as_buffer(m, n * n, "m").reshape((n, n), order="F")
        if n == 4:
            rows = rows[:3, :3]
        k = rows.shape[0]

        if not np.allclose(rows.T @ rows, np.eye(k), rtol=0.0, atol=tolerance):
            return False
        return abs(float(np.linalg.det(rows)) - 1.0) <= tolerance

    @staticmethod
    def assert_close(a: Matrix, b: Matrix, atol: float = 1e-12, rtol: float = 0.0) -> None:
        """Assert two matrices (or vectors) are elementwise close.

        :param a: Actual values
        :param b: Expected values
        :param atol: Absolute tolerance
        :param rtol: Relative tolerance
        :raises AssertionError: If any element differs by more than the tolerance
        """
        a = np.asarray(a, dtype=np.float64)
        b = np.asarray(b, dtype=np.float64)
        if a.shape != b.shape:
            raise AssertionError(f"Shape mismatch: {a.shape} vs {b.shape}")

        np.testing.assert_allclose(
            a, b, rtol=rtol, atol=atol, err_msg="Matrices differ (column-major element order)"
        )
        logger.debug("[MatrixVerifier] %d elements within atol=%g", a.size, atol)


is_singular = MatrixVerifier.is_singular
is_finite = MatrixVerifier.is_finite
is_rotation = MatrixVerifier.is_rotation
assert_matrices_close = MatrixVerifier.assert_close
