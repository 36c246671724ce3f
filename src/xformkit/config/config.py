"""Unified xformkit configuration.

This module provides a top-level configuration dataclass that contains the
per-builder configurations (affine transform, projection) as sub-attributes.
"""

from __future__ import annotations

from dataclasses import dataclass

from xformkit.config.operations import OperationSpec
from xformkit.config.projection import ProjectionConfig
from xformkit.config.transform import TransformConfig


@dataclass(frozen=True)
class XformConfig:
    """Top-level configuration containing all builder configurations.

    Provides hierarchical access to all parameter specifications:
        CONFIG.transform.angle
        CONFIG.projection.fovy

    Attributes:
        transform: Affine builder parameter specifications
        projection: Projection builder parameter specifications
    """

    transform: TransformConfig = TransformConfig()
    projection: ProjectionConfig = ProjectionConfig()

    def get_all_specs(self) -> dict[str, dict[str, OperationSpec]]:
        """Get all parameter specs organized by builder.

        :return: Nested dictionary of all specifications
        """
        return {
            "transform": self.transform.get_all_specs(),
            "projection": self.projection.get_all_specs(),
        }


# Main singleton instance
CONFIG = XformConfig()

TRANSFORM_CONFIG = CONFIG.transform
PROJECTION_CONFIG = CONFIG.projection
