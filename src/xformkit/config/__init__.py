"""Configuration module for xformkit builders.

This module provides parameter specifications (ranges, defaults, neutral
values) for the affine and projection builders, value dataclasses that turn
parameters into matrices, and named presets.

Usage:
    # Unified access
    from xformkit.config import CONFIG
    CONFIG.transform.angle.neutral  # 0.0
    CONFIG.projection.fovy.default  # 60.0

    # Values and presets
    from xformkit.config import AffineValues, get_transform_preset
    m = (AffineValues.from_scale(2.0) + get_transform_preset("rotate_90")).to_mat33()
"""

from xformkit.config.config import (
    CONFIG,
    PROJECTION_CONFIG,
    TRANSFORM_CONFIG,
    XformConfig,
)
from xformkit.config.operations import OperationSpec
from xformkit.config.presets import (
    DEFAULT_PERSPECTIVE,
    DOUBLE_SIZE,
    FLIP_X,
    FLIP_Y,
    HALF_SIZE,
    IDENTITY,
    ORTHO_PRESETS,
    PERSPECTIVE_PRESETS,
    ROTATE_90,
    ROTATE_180,
    ROTATE_270,
    TELEPHOTO,
    TRANSFORM_PRESETS,
    UNIT_ORTHO,
    WIDE_ANGLE,
    affine_from_dict,
    affine_to_dict,
    get_ortho_preset,
    get_perspective_preset,
    get_transform_preset,
    load_affine_json,
    load_ortho_json,
    load_perspective_json,
    ortho_from_dict,
    ortho_to_dict,
    perspective_from_dict,
    perspective_to_dict,
    save_affine_json,
    save_ortho_json,
    save_perspective_json,
)
from xformkit.config.projection import ProjectionConfig
from xformkit.config.transform import TransformConfig
from xformkit.config.values import AffineValues, OrthoValues, PerspectiveValues

__all__ = [
    # Specs
    "OperationSpec",
    "TransformConfig",
    "ProjectionConfig",
    "XformConfig",
    "CONFIG",
    "TRANSFORM_CONFIG",
    "PROJECTION_CONFIG",
    # Values
    "AffineValues",
    "PerspectiveValues",
    "OrthoValues",
    # Affine presets
    "IDENTITY",
    "FLIP_X",
    "FLIP_Y",
    "ROTATE_90",
    "ROTATE_180",
    "ROTATE_270",
    "DOUBLE_SIZE",
    "HALF_SIZE",
    # Projection presets
    "DEFAULT_PERSPECTIVE",
    "WIDE_ANGLE",
    "TELEPHOTO",
    "UNIT_ORTHO",
    # Registries
    "TRANSFORM_PRESETS",
    "PERSPECTIVE_PRESETS",
    "ORTHO_PRESETS",
    "get_transform_preset",
    "get_perspective_preset",
    "get_ortho_preset",
    # Dict/JSON
    "affine_from_dict",
    "affine_to_dict",
    "perspective_from_dict",
    "perspective_to_dict",
    "ortho_from_dict",
    "ortho_to_dict",
    "load_affine_json",
    "load_perspective_json",
    "load_ortho_json",
    "save_affine_json",
    "save_perspective_json",
    "save_ortho_json",
]
