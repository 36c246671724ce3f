"""Tests for projection and view matrices."""

import math

import numpy as np
import pytest

from xformkit.matrix import mat44_to_mat33, mat44_transform3, mat44_transform4, to_rows
from xformkit.projection import frustum, look_at, ortho, perspective
from xformkit.verification import MatrixVerifier


def _ndc(m, point):
    """Project a 3D point and apply the perspective divide."""
    clip = mat44_transform4(m, [point[0], point[1], point[2], 1.0])
    return clip[:3] / clip[3]


class TestOrtho:
    """Test orthographic projection."""

    def test_unit_cube(self):
        m = ortho(-1.0, 1.0, -1.0, 1.0, -1.0, 1.0)
        np.testing.assert_array_equal(to_rows(m), np.diag([1.0, 1.0, -1.0, 1.0]))

    def test_elements(self):
        m = to_rows(ortho(0.0, 4.0, 0.0, 2.0, 1.0, 5.0))
        assert m[0, 0] == 0.5
        assert m[1, 1] == 1.0
        assert m[2, 2] == -0.5
        np.testing.assert_array_equal(m[:, 3], [-1.0, -1.0, -1.5, 1.0])

    def test_maps_box_to_clip_cube(self):
        m = ortho(0.0, 800.0, 0.0, 600.0, 0.1, 100.0)
        np.testing.assert_allclose(mat44_transform3(m, [0, 0, -0.1]), [-1, -1, -1], atol=1e-12)
        np.testing.assert_allclose(
            mat44_transform3(m, [800, 600, -100.0]), [1, 1, 1], atol=1e-12
        )

    def test_degenerate_is_non_finite(self):
        m = ortho(1.0, 1.0, -1.0, 1.0, -1.0, 1.0)
        assert not np.isfinite(m).all()


class TestFrustum:
    """Test off-center perspective frustum."""

    def test_elements(self):
        m = to_rows(frustum(-1.0, 1.0, -1.0, 1.0, 1.0, 10.0))
        assert m[0, 0] == 1.0
        assert m[1, 1] == 1.0
        assert m[0, 2] == 0.0 and m[1, 2] == 0.0
        assert m[2, 2] == pytest.approx(-11.0 / 9.0)
        assert m[2, 3] == pytest.approx(-20.0 / 9.0)
        np.testing.assert_array_equal(m[3], [0.0, 0.0, -1.0, 0.0])

    def test_off_center(self):
        m = to_rows(frustum(0.0, 2.0, -1.0, 3.0, 1.0, 10.0))
        assert m[0, 2] == 1.0  # (r + l) / (r - l)
        assert m[1, 2] == 0.5  # (t + b) / (t - b)

    def test_near_and_far_planes(self):
        m = frustum(-1.0, 1.0, -1.0, 1.0, 1.0, 10.0)
        np.testing.assert_allclose(_ndc(m, [1.0, 1.0, -1.0]), [1.0, 1.0, -1.0], atol=1e-12)
        np.testing.assert_allclose(_ndc(m, [0.0, 0.0, -10.0]), [0.0, 0.0, 1.0], atol=1e-12)


class TestPerspective:
    """Test field-of-view perspective."""

    def test_delegates_to_frustum(self):
        expected = frustum(-1.0, 1.0, -1.0, 1.0, 1.0, 10.0)
        np.testing.assert_allclose(perspective(90.0, 1.0, 1.0, 10.0), expected, atol=1e-12)

    def test_aspect(self):
        m = to_rows(perspective(60.0, 2.0, 0.1, 100.0))
        f = 1.0 / math.tan(math.radians(30.0))
        assert m[1, 1] == pytest.approx(f)
        assert m[0, 0] == pytest.approx(f / 2.0)

    def test_depth_range(self):
        m = perspective(45.0, 16 / 9, 0.5, 50.0)
        assert _ndc(m, [0.0, 0.0, -0.5])[2] == pytest.approx(-1.0)
        assert _ndc(m, [0.0, 0.0, -50.0])[2] == pytest.approx(1.0)

    def test_top_edge_of_view(self):
        """A point on the top edge of the field of view maps to y = 1."""
        m = perspective(60.0, 1.0, 0.1, 100.0)
        y = 5.0 * math.tan(math.radians(30.0))
        assert _ndc(m, [0.0, y, -5.0])[1] == pytest.approx(1.0)


class TestLookAt:
    """Test view matrices."""

    def test_camera_on_z_axis(self):
        m = look_at([0.0, 0.0, 5.0], [0.0, 0.0, 0.0], [0.0, 1.0, 0.0])
        expected = np.eye(4)
        expected[2, 3] = -5.0
        np.testing.assert_allclose(to_rows(m), expected, atol=1e-15)

    def test_eye_to_origin_target_down_negative_z(self):
        eye = np.array([3.0, 4.0, 5.0])
        target = np.array([1.0, -2.0, 0.5])
        m = look_at(eye, target, [0.0, 1.0, 0.0])
        dist = np.linalg.norm(target - eye)
        np.testing.assert_allclose(mat44_transform3(m, eye), [0, 0, 0], atol=1e-12)
        np.testing.assert_allclose(mat44_transform3(m, target), [0, 0, -dist], atol=1e-12)

    def test_rows_are_orthonormal_basis(self):
        m = look_at([3.0, 4.0, 5.0], [1.0, -2.0, 0.5], [0.0, 1.0, 0.0])
        assert MatrixVerifier.is_rotation(mat44_to_mat33(m))
        np.testing.assert_array_equal(to_rows(m)[3], [0.0, 0.0, 0.0, 1.0])

    def test_up_stays_up(self):
        m = look_at([0.0, 0.0, 5.0], [0.0, 0.0, 0.0], [0.0, 1.0, 0.0])
        np.testing.assert_allclose(mat44_transform3(m, [0, 1, 0]), [0, 1, -5], atol=1e-12)

    def test_degenerate_is_nan(self):
        m = look_at([1.0, 1.0, 1.0], [1.0, 1.0, 1.0], [0.0, 1.0, 0.0])
        assert np.isnan(m).any()
