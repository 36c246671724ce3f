"""Tests for builder presets and dict/JSON serialization."""

import json
import math

import numpy as np
import pytest

from xformkit.config import (
    DOUBLE_SIZE,
    FLIP_X,
    FLIP_Y,
    HALF_SIZE,
    IDENTITY,
    PERSPECTIVE_PRESETS,
    ROTATE_90,
    ROTATE_180,
    TELEPHOTO,
    TRANSFORM_PRESETS,
    UNIT_ORTHO,
    AffineValues,
    OrthoValues,
    PerspectiveValues,
    affine_from_dict,
    affine_to_dict,
    get_ortho_preset,
    get_perspective_preset,
    get_transform_preset,
    load_affine_json,
    load_ortho_json,
    load_perspective_json,
    ortho_from_dict,
    perspective_from_dict,
    save_affine_json,
    save_ortho_json,
    save_perspective_json,
)
from xformkit.matrix import mat33_transform2


def _apply(values: AffineValues, p):
    return mat33_transform2(values.to_mat33(), p)


class TestPresetLookup:
    """Test preset registries and lookup."""

    def test_case_insensitive(self):
        assert get_transform_preset("FLIP_X") is FLIP_X
        assert get_transform_preset("Rotate_90") is ROTATE_90
        assert get_perspective_preset("Wide_Angle").fovy == 90.0
        assert get_ortho_preset("UNIT") is UNIT_ORTHO

    def test_unknown_preset(self):
        with pytest.raises(KeyError, match="Unknown transform preset"):
            get_transform_preset("spin")
        with pytest.raises(KeyError, match="Unknown perspective preset"):
            get_perspective_preset("fisheye")
        with pytest.raises(KeyError, match="unit"):
            get_ortho_preset("box")

    def test_registry_keys_lowercase(self):
        for registry in (TRANSFORM_PRESETS, PERSPECTIVE_PRESETS):
            assert all(key == key.lower() for key in registry)

    def test_preset_types(self):
        assert all(isinstance(v, AffineValues) for v in TRANSFORM_PRESETS.values())
        assert all(isinstance(v, PerspectiveValues) for v in PERSPECTIVE_PRESETS.values())


class TestPresetGeometry:
    """Test what the affine presets do to points."""

    def test_identity(self):
        assert IDENTITY.is_neutral()
        np.testing.assert_array_equal(_apply(IDENTITY, [3.0, -4.0]), [3.0, -4.0])

    def test_flips(self):
        np.testing.assert_allclose(_apply(FLIP_X, [1.0, 2.0]), [-1.0, 2.0], atol=1e-12)
        np.testing.assert_allclose(_apply(FLIP_Y, [1.0, 2.0]), [1.0, -2.0], atol=1e-12)

    def test_rotations(self):
        np.testing.assert_allclose(_apply(ROTATE_90, [1.0, 0.0]), [0.0, 1.0], atol=1e-12)
        np.testing.assert_allclose(_apply(ROTATE_180, [1.0, 0.0]), [-1.0, 0.0], atol=1e-12)

    def test_sizes_cancel(self):
        np.testing.assert_allclose(_apply(DOUBLE_SIZE, [1.0, 1.0]), [2.0, 2.0])
        assert (DOUBLE_SIZE + HALF_SIZE).is_neutral()

    def test_projection_presets_are_valid(self):
        for values in PERSPECTIVE_PRESETS.values():
            assert values.clamp() == values
        assert TELEPHOTO.near < TELEPHOTO.far


class TestDictConversion:
    """Test dict serialization."""

    def test_direct_fields(self):
        v = affine_from_dict({"x": 5, "angle": 30.0})
        assert v == AffineValues(x=5.0, angle=30.0)
        assert isinstance(v.x, float)

    def test_unknown_keys_ignored(self):
        assert affine_from_dict({"x": 1.0, "bogus": 3.0}) == AffineValues(x=1.0)

    def test_factory_syntax(self):
        assert affine_from_dict({"from_translation": [1, 2]}) == AffineValues(x=1, y=2)
        assert affine_from_dict({"from_rotation": 45}).angle == 45
        assert affine_from_dict({"from_rotation_rad": math.pi}).angle == pytest.approx(180.0)
        assert affine_from_dict({"from_scale": 2.0}) == AffineValues(sx=2.0, sy=2.0)
        assert affine_from_dict({"from_scale": [2.0, 3.0]}) == AffineValues(sx=2.0, sy=3.0)
        assert affine_from_dict({"from_skew": [0.5]}) == AffineValues(kx=0.5)

    def test_affine_round_trip(self):
        v = AffineValues(x=1.5, y=-2.0, angle=33.0, sx=0.5, kx=0.1, ox=4.0)
        d = affine_to_dict(v)
        assert set(d) == {"x", "y", "angle", "sx", "sy", "ox", "oy", "kx", "ky"}
        assert affine_from_dict(d) == v

    def test_perspective_missing_keys_default(self):
        v = perspective_from_dict({"fovy": 45})
        assert v == PerspectiveValues(fovy=45.0)

    def test_ortho_from_size(self):
        v = ortho_from_dict({"from_size": [800, 600]})
        assert v == OrthoValues.from_size(800.0, 600.0)
        assert v.right == 400.0


class TestJson:
    """Test JSON save/load."""

    def test_affine(self, tmp_path):
        path = tmp_path / "affine.json"
        v = AffineValues(x=3.0, angle=-15.0, sy=2.0)
        save_affine_json(v, path)
        assert json.loads(path.read_text())["angle"] == -15.0
        assert load_affine_json(path) == v

    def test_affine_factory_file(self, tmp_path):
        path = tmp_path / "rotate.json"
        path.write_text(json.dumps({"from_rotation": 90}))
        assert load_affine_json(str(path)) == ROTATE_90

    def test_perspective(self, tmp_path):
        path = tmp_path / "perspective.json"
        save_perspective_json(TELEPHOTO, path)
        assert load_perspective_json(path) == TELEPHOTO

    def test_ortho(self, tmp_path):
        path = tmp_path / "ortho.json"
        v = OrthoValues(left=0.0, right=640.0, bottom=480.0, top=0.0)
        save_ortho_json(v, path)
        assert load_ortho_json(path) == v

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_affine_json(tmp_path / "missing.json")
