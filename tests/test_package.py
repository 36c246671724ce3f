"""Tests for the top-level package surface."""

import logging

import xformkit


class TestPackage:
    """Test top-level exports."""

    def test_version(self):
        assert xformkit.__version__ == "0.1.0"

    def test_all_exports_exist(self):
        missing = [name for name in xformkit.__all__ if not hasattr(xformkit, name)]
        assert missing == []

    def test_core_names(self):
        for name in ("mat44_multiply", "quat_slerp", "perspective", "compose", "AffineValues"):
            assert name in xformkit.__all__

    def test_warmup_kernels(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="xformkit"):
            xformkit.warmup_kernels()
        assert "xformkit kernels compiled" in caplog.text

    def test_builders_end_to_end(self):
        model = xformkit.AffineValues.from_rotation(90).to_mat44()
        view = xformkit.look_at([0, 0, 5], [0, 0, 0], [0, 1, 0])
        proj = xformkit.PerspectiveValues().to_matrix()
        mvp = xformkit.compose(model, view, proj)
        assert xformkit.MatrixVerifier.is_finite(mvp)
        # compose multiplies left to right
        expected = xformkit.mat44_multiply(xformkit.mat44_multiply(model, view), proj)
        xformkit.MatrixVerifier.assert_close(mvp, expected)
