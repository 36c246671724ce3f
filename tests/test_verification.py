"""Tests for matrix verification helpers."""

import math

import numpy as np
import pytest

from xformkit import verification
from xformkit.matrix import (
    from_rows,
    mat22_rotate,
    mat33_identity,
    mat33_inverse,
    mat33_rotate_axis,
    mat33_scale3,
    mat33_zero,
    mat44_multiply,
    mat44_rotate_x,
    mat44_scale3,
    mat44_translate3,
)
from xformkit.verification import MatrixVerifier


class TestSingularity:
    """Test determinant based checks."""

    def test_determinant_dispatch(self):
        assert MatrixVerifier.determinant(from_rows([[2, 0], [0, 3]])) == pytest.approx(6.0)
        assert MatrixVerifier.determinant(mat33_identity()) == pytest.approx(1.0)
        assert MatrixVerifier.determinant(mat44_scale3([2, 2, 2])) == pytest.approx(8.0)

    def test_determinant_bad_size(self):
        with pytest.raises(ValueError, match="4, 9 or 16"):
            MatrixVerifier.determinant(np.zeros(25))

    def test_is_singular(self):
        assert MatrixVerifier.is_singular(mat33_zero())
        assert MatrixVerifier.is_singular(from_rows([[1, 2], [2, 4]]))
        assert not MatrixVerifier.is_singular(mat33_identity())

    def test_nan_counts_as_singular(self):
        assert MatrixVerifier.is_singular(np.full(9, np.nan))

    def test_tolerance(self):
        small = mat33_scale3([1e-3, 1e-3, 1e-3])  # det 1e-9
        assert not MatrixVerifier.is_singular(small)
        assert MatrixVerifier.is_singular(small, tolerance=1e-6)

    def test_is_finite(self):
        assert MatrixVerifier.is_finite(mat33_identity())
        assert not MatrixVerifier.is_finite(mat33_inverse(mat33_zero()))
        assert not MatrixVerifier.is_finite([1.0, np.inf])


class TestRotation:
    """Test rotation detection."""

    def test_rotations(self):
        axis = np.array([1.0, 1.0, 1.0]) / math.sqrt(3.0)
        assert MatrixVerifier.is_rotation(mat33_rotate_axis(0.7, axis))
        assert MatrixVerifier.is_rotation(mat22_rotate(0.5))

    def test_4x4_ignores_translation(self):
        m = mat44_multiply(mat44_translate3([1.0, 2.0, 3.0]), mat44_rotate_x(0.3))
        assert MatrixVerifier.is_rotation(m)

    def test_not_rotations(self):
        assert not MatrixVerifier.is_rotation(mat33_scale3([2.0, 1.0, 1.0]))
        assert not MatrixVerifier.is_rotation(mat33_scale3([1.0, 1.0, -1.0]))  # reflection
        assert not MatrixVerifier.is_rotation(mat33_zero())


class TestAssertClose:
    """Test assertion helper."""

    def test_passes(self):
        MatrixVerifier.assert_close(mat33_identity() + 1e-14, mat33_identity())

    def test_fails_on_difference(self):
        with pytest.raises(AssertionError):
            MatrixVerifier.assert_close(mat33_identity(), mat33_zero())

    def test_fails_on_shape(self):
        with pytest.raises(AssertionError, match="Shape mismatch"):
            MatrixVerifier.assert_close(mat33_identity(), np.eye(4).ravel())

    def test_module_aliases(self):
        assert verification.is_singular is MatrixVerifier.is_singular
        assert verification.assert_matrices_close is MatrixVerifier.assert_close
