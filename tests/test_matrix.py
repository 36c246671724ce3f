"""Tests for 2x2, 3x3 and 4x4 column-major matrices."""

import logging
import math

import numpy as np
import pytest

from xformkit.matrix import (
    column,
    dimension,
    from_rows,
    get_element,
    index,
    mat22_determinant,
    mat22_identity,
    mat22_inverse,
    mat22_multiply,
    mat22_rotate,
    mat22_scale,
    mat22_shear,
    mat22_transform,
    mat33_add,
    mat33_determinant,
    mat33_equal,
    mat33_identity,
    mat33_inverse,
    mat33_multiply,
    mat33_rotate_axis,
    mat33_rotate_x,
    mat33_rotate_y,
    mat33_rotate_z,
    mat33_scale2,
    mat33_scale3,
    mat33_scale_scalar,
    mat33_shear2,
    mat33_shear3,
    mat33_subtract,
    mat33_to_mat44,
    mat33_transform2,
    mat33_transform3,
    mat33_translate,
    mat33_transpose,
    mat33_zero,
    mat44_determinant,
    mat44_equal,
    mat44_identity,
    mat44_inverse,
    mat44_multiply,
    mat44_rotate_axis,
    mat44_rotate_z,
    mat44_scale3,
    mat44_shear3,
    mat44_to_mat33,
    mat44_transform2,
    mat44_transform3,
    mat44_transform4,
    mat44_translate2,
    mat44_translate3,
    mat44_transpose,
    mat44_zero,
    row,
    set_element,
    to_rows,
)


@pytest.fixture
def random_mat44():
    """Well-conditioned 4x4 matrix in [row, col] form."""
    rng = np.random.default_rng(42)
    return rng.uniform(-1.0, 1.0, size=(4, 4)) + 4.0 * np.eye(4)


class TestLayout:
    """Test column-major storage and accessors."""

    def test_index_is_column_major(self):
        assert index(0, 0, 3) == 0
        assert index(1, 0, 3) == 1
        assert index(0, 1, 3) == 3
        assert index(2, 3, 4) == 14

    def test_index_out_of_range(self):
        with pytest.raises(IndexError):
            index(3, 0, 3)

    def test_from_rows(self):
        m = from_rows([[1, 2], [3, 4]])
        np.testing.assert_array_equal(m, [1.0, 3.0, 2.0, 4.0])
        assert get_element(m, 0, 1) == 2.0
        assert get_element(m, 1, 0) == 3.0

    def test_to_rows_round_trip(self):
        rows = np.arange(9, dtype=np.float64).reshape(3, 3)
        np.testing.assert_array_equal(to_rows(from_rows(rows)), rows)

    def test_row_and_column(self):
        m = from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        np.testing.assert_array_equal(row(m, 1), [4, 5, 6])
        np.testing.assert_array_equal(column(m, 2), [3, 6, 9])

    def test_set_element(self):
        m = mat33_identity()
        set_element(m, 0, 2, 5.0)
        assert m[6] == 5.0

    def test_dimension(self):
        assert dimension(np.zeros(4)) == 2
        assert dimension(np.zeros(9)) == 3
        assert dimension(np.zeros(16)) == 4
        with pytest.raises(ValueError):
            dimension(np.zeros(5))

    def test_from_rows_rejects_non_square(self):
        with pytest.raises(ValueError):
            from_rows([[1, 2, 3], [4, 5, 6]])


class TestBasics:
    """Test zero, identity, equality and elementwise operations."""

    def test_identity_4x4(self):
        m = mat44_identity()
        for i in range(4):
            for j in range(4):
                assert get_element(m, i, j) == (1.0 if i == j else 0.0)

    def test_zero(self):
        assert not mat44_zero().any()
        assert not mat33_zero().any()

    def test_equal(self):
        assert mat33_equal(mat33_identity(), np.eye(3).reshape(-1))
        assert not mat33_equal(mat33_identity(), mat33_zero())

    def test_add_subtract_scale(self):
        a = from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        b = mat33_identity()
        np.testing.assert_array_equal(to_rows(mat33_add(a, b)), [[2, 2, 3], [4, 6, 6], [7, 8, 10]])
        np.testing.assert_array_equal(mat33_subtract(mat33_add(a, b), b), a)
        np.testing.assert_array_equal(mat33_scale_scalar(a, 2.0), 2.0 * a)

    def test_wrong_out_dtype(self):
        with pytest.raises(TypeError):
            mat33_identity(out=np.zeros(9, dtype=np.float32))

    def test_wrong_input_size(self):
        with pytest.raises(ValueError):
            mat33_multiply(np.zeros(4), np.zeros(9))


class TestMultiply:
    """Test row-by-column products."""

    def test_matches_numpy(self):
        a = np.array([[1, 2, 0], [0, 1, 3], [4, 0, 1]], dtype=np.float64)
        b = np.array([[2, 0, 1], [1, 1, 0], [0, 3, 1]], dtype=np.float64)
        result = mat33_multiply(from_rows(a), from_rows(b))
        np.testing.assert_array_equal(to_rows(result), a @ b)

    def test_matches_numpy_4x4(self, random_mat44):
        b = random_mat44.T.copy()
        result = mat44_multiply(from_rows(random_mat44), from_rows(b))
        np.testing.assert_allclose(to_rows(result), random_mat44 @ b, atol=1e-12)

    def test_not_commutative(self):
        a = from_rows([[1, 1], [0, 1]])
        b = from_rows([[1, 0], [1, 1]])
        assert not np.array_equal(mat22_multiply(a, b), mat22_multiply(b, a))

    @pytest.mark.parametrize("alias", ["a", "b"])
    def test_output_may_alias_input(self, random_mat44, alias):
        a = from_rows(random_mat44)
        b = from_rows(random_mat44.T)
        expected = mat44_multiply(a, b)
        target = a if alias == "a" else b
        mat44_multiply(a, b, out=target)
        np.testing.assert_array_equal(target, expected)

    def test_alias_3x3(self):
        a = from_rows([[1, 2, 0], [0, 1, 3], [4, 0, 1]])
        expected = mat33_multiply(a, a)
        mat33_multiply(a, a, out=a)
        np.testing.assert_array_equal(a, expected)


class TestDeterminantInverse:
    """Test cofactor determinant and adjugate inverse."""

    def test_identity_determinant(self):
        assert mat33_determinant(mat33_identity()) == 1.0
        assert mat44_determinant(mat44_identity()) == 1.0
        assert mat22_determinant(mat22_identity()) == 1.0

    def test_determinant_matches_numpy(self, random_mat44):
        expected = np.linalg.det(random_mat44)
        assert mat44_determinant(from_rows(random_mat44)) == pytest.approx(expected, rel=1e-10)
        sub = random_mat44[:3, :3]
        assert mat33_determinant(from_rows(sub)) == pytest.approx(np.linalg.det(sub), rel=1e-10)

    def test_determinant_2x2(self):
        assert mat22_determinant(from_rows([[1, 2], [3, 4]])) == -2.0

    def test_inverse_exact_3x3(self):
        m = from_rows([[2, 1, 0], [1, 1, 0], [0, 0, 1]])
        expected = [[1, -1, 0], [-1, 2, 0], [0, 0, 1]]
        np.testing.assert_allclose(to_rows(mat33_inverse(m)), expected, atol=1e-15)

    def test_inverse_2x2(self):
        m = from_rows([[4, 7], [2, 6]])
        product = mat22_multiply(m, mat22_inverse(m))
        np.testing.assert_allclose(product, mat22_identity(), atol=1e-12)

    def test_inverse_both_sides_4x4(self, random_mat44):
        m = from_rows(random_mat44)
        inv = mat44_inverse(m)
        np.testing.assert_allclose(mat44_multiply(m, inv), mat44_identity(), atol=1e-12)
        np.testing.assert_allclose(mat44_multiply(inv, m), mat44_identity(), atol=1e-12)
        np.testing.assert_allclose(to_rows(inv), np.linalg.inv(random_mat44), atol=1e-12)

    def test_inverse_of_affine_4x4(self):
        m = mat44_multiply(mat44_translate3([1, 2, 3]), mat44_rotate_z(0.3))
        inv = mat44_inverse(m)
        p = mat44_transform3(m, [0.5, -1.0, 2.0])
        np.testing.assert_allclose(mat44_transform3(inv, p), [0.5, -1.0, 2.0], atol=1e-12)

    def test_inverse_in_place(self, random_mat44):
        m = from_rows(random_mat44)
        expected = mat44_inverse(m)
        mat44_inverse(m, out=m)
        np.testing.assert_array_equal(m, expected)

    def test_singular_inverse_is_non_finite(self, caplog):
        """Singular input yields inf/NaN rather than raising."""
        caplog.set_level(logging.DEBUG, logger="xformkit.matrix.api")
        inv = mat22_inverse(from_rows([[1, 2], [2, 4]]))
        assert not np.isfinite(inv).any()
        assert "singular" in caplog.text

    def test_zero_matrix_inverse_is_nan(self):
        assert np.isnan(mat33_inverse(mat33_zero())).all()


class TestTranspose:
    """Test transpose."""

    def test_double_transpose_is_exact(self, random_mat44):
        m = from_rows(random_mat44)
        np.testing.assert_array_equal(mat44_transpose(mat44_transpose(m)), m)

    def test_transpose_matches_numpy(self):
        rows = np.arange(9, dtype=np.float64).reshape(3, 3)
        np.testing.assert_array_equal(to_rows(mat33_transpose(from_rows(rows))), rows.T)

    def test_transpose_in_place(self, random_mat44):
        m = from_rows(random_mat44)
        mat44_transpose(m, out=m)
        np.testing.assert_array_equal(to_rows(m), random_mat44.T)


class TestTransform:
    """Test applying matrices to vectors."""

    def test_rotate_z_quarter_turn(self):
        """rotate_z(90 deg) maps (1, 0) to (0, 1)."""
        result = mat33_transform2(mat33_rotate_z(math.pi / 2), [1.0, 0.0])
        np.testing.assert_allclose(result, [0.0, 1.0], atol=1e-12)

    def test_mat22(self):
        result = mat22_transform(mat22_rotate(math.pi / 2), [1.0, 0.0])
        np.testing.assert_allclose(result, [0.0, 1.0], atol=1e-12)

    def test_affine_2d(self):
        m = mat33_translate([5.0, -1.0])
        np.testing.assert_array_equal(mat33_transform2(m, [1.0, 1.0]), [6.0, 0.0])

    def test_linear_3d_ignores_translation_column(self):
        m = mat33_scale3([2.0, 3.0, 4.0])
        np.testing.assert_array_equal(mat33_transform3(m, [1.0, 1.0, 1.0]), [2.0, 3.0, 4.0])

    def test_mat44_point(self):
        m = mat44_translate3([1.0, 2.0, 3.0])
        np.testing.assert_array_equal(mat44_transform3(m, [0.0, 0.0, 0.0]), [1.0, 2.0, 3.0])
        np.testing.assert_array_equal(mat44_transform2(m, [1.0, 1.0]), [2.0, 3.0])

    def test_mat44_homogeneous(self):
        m = mat44_translate3([1.0, 2.0, 3.0])
        np.testing.assert_array_equal(mat44_transform4(m, [1, 1, 1, 0]), [1, 1, 1, 0])
        np.testing.assert_array_equal(mat44_transform4(m, [1, 1, 1, 2]), [3, 5, 7, 2])

    def test_transform_in_place(self):
        v = np.array([1.0, 0.0])
        mat33_transform2(mat33_rotate_z(math.pi / 2), v, out=v)
        np.testing.assert_allclose(v, [0.0, 1.0], atol=1e-12)


class TestConstructors:
    """Test translate, scale, shear and rotate constructors."""

    def test_translate(self):
        m = mat44_translate2([1.0, 2.0])
        assert m[12] == 1.0 and m[13] == 2.0 and m[14] == 0.0 and m[15] == 1.0

    def test_scale(self):
        np.testing.assert_array_equal(to_rows(mat22_scale([2, 3])), [[2, 0], [0, 3]])
        np.testing.assert_array_equal(to_rows(mat33_scale2([2, 3])), np.diag([2, 3, 1]))
        np.testing.assert_array_equal(to_rows(mat44_scale3([2, 3, 4])), np.diag([2, 3, 4, 1]))

    def test_shear2(self):
        np.testing.assert_array_equal(to_rows(mat22_shear([2, 3])), [[1, 3], [2, 1]])
        m = mat33_shear2([2.0, 3.0])
        assert get_element(m, 1, 0) == 2.0
        assert get_element(m, 0, 1) == 3.0
        assert get_element(m, 2, 2) == 1.0

    def test_shear3_paired_terms(self):
        """Each value fills both off-diagonal slots of its column."""
        expected = [[1, 2, 3], [1, 1, 3], [1, 2, 1]]
        np.testing.assert_array_equal(to_rows(mat33_shear3([1, 2, 3])), expected)
        m = to_rows(mat44_shear3([1, 2, 3]))
        np.testing.assert_array_equal(m[:3, :3], expected)
        assert m[3, 3] == 1.0

    def test_rotations_are_right_handed(self):
        np.testing.assert_allclose(
            mat33_transform3(mat33_rotate_x(math.pi / 2), [0, 1, 0]), [0, 0, 1], atol=1e-12
        )
        np.testing.assert_allclose(
            mat33_transform3(mat33_rotate_y(math.pi / 2), [0, 0, 1]), [1, 0, 0], atol=1e-12
        )
        np.testing.assert_allclose(
            mat33_transform3(mat33_rotate_z(math.pi / 2), [1, 0, 0]), [0, 1, 0], atol=1e-12
        )

    @pytest.mark.parametrize(
        "axis, rotate",
        [([1, 0, 0], mat33_rotate_x), ([0, 1, 0], mat33_rotate_y), ([0, 0, 1], mat33_rotate_z)],
    )
    def test_rotate_axis_matches_basis_rotations(self, axis, rotate):
        np.testing.assert_allclose(mat33_rotate_axis(0.8, axis), rotate(0.8), atol=1e-12)

    def test_rotate_axis_is_orthonormal(self):
        axis = np.array([1.0, 2.0, 2.0]) / 3.0
        r = to_rows(mat33_rotate_axis(1.1, axis))
        np.testing.assert_allclose(r.T @ r, np.eye(3), atol=1e-12)
        assert np.linalg.det(r) == pytest.approx(1.0)
        np.testing.assert_allclose(r @ axis, axis, atol=1e-12)

    def test_rotate_axis_4x4(self):
        axis = np.array([0.0, 0.6, 0.8])
        m = mat44_rotate_axis(0.4, axis)
        np.testing.assert_allclose(mat44_to_mat33(m), mat33_rotate_axis(0.4, axis), atol=0)
        assert m[15] == 1.0 and m[12] == 0.0 and m[3] == 0.0


class TestConversions:
    """Test 3x3 <-> 4x4 widening and narrowing."""

    def test_widen_then_narrow(self):
        m = from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        np.testing.assert_array_equal(mat44_to_mat33(mat33_to_mat44(m)), m)

    def test_widen_layout(self):
        m = to_rows(mat33_to_mat44(from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])))
        np.testing.assert_array_equal(m[:3, :3], [[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        np.testing.assert_array_equal(m[3], [0, 0, 0, 1])
        np.testing.assert_array_equal(m[:, 3], [0, 0, 0, 1])

    def test_narrow_drops_translation(self):
        m = mat44_multiply(mat44_translate3([1, 2, 3]), mat44_scale3([2, 2, 2]))
        np.testing.assert_array_equal(mat44_to_mat33(m), mat33_scale3([2, 2, 2]))

    def test_equal_4x4(self):
        assert mat44_equal(mat33_to_mat44(mat33_identity()), mat44_identity())
