"""Projection builder parameter configuration."""

from __future__ import annotations

from dataclasses import dataclass

from xformkit.config.operations import OperationSpec


@dataclass(frozen=True)
class ProjectionConfig:
    """Ranges for camera projection parameters.

    ``fovy`` is capped below 180 degrees, where ``tan(fovy / 2)`` diverges.
    ``extent`` bounds the six planes of an orthographic box.
    """

    fovy: OperationSpec = OperationSpec(
        name="fovy",
        min_value=1.0,
        max_value=179.0,
        default=60.0,
        neutral=60.0,
        composition="additive",
        description="Vertical field of view in degrees",
    )

    aspect: OperationSpec = OperationSpec(
        name="aspect",
        min_value=0.01,
        max_value=100.0,
        default=1.0,
        neutral=1.0,
        composition="multiplicative",
        description="Viewport width / height",
    )

    near: OperationSpec = OperationSpec(
        name="near",
        min_value=1.0e-4,
        max_value=1.0e6,
        default=0.1,
        neutral=0.1,
        composition="multiplicative",
        description="Near clipping distance (must be > 0 for perspective)",
    )

    far: OperationSpec = OperationSpec(
        name="far",
        min_value=1.0e-3,
        max_value=1.0e7,
        default=100.0,
        neutral=100.0,
        composition="multiplicative",
        description="Far clipping distance",
    )

    extent: OperationSpec = OperationSpec(
        name="extent",
        min_value=-1.0e6,
        max_value=1.0e6,
        default=1.0,
        neutral=1.0,
        composition="additive",
        description="Orthographic clipping plane coordinate",
    )

    def get_spec(self, name: str) -> OperationSpec:
        """Get parameter spec by name.

        :raises AttributeError: If the parameter does not exist
        """
        return getattr(self, name)

    def get_all_specs(self) -> dict[str, OperationSpec]:
        return {
            "fovy": self.fovy,
            "aspect": self.aspect,
            "near": self.near,
            "far": self.far,
            "extent": self.extent,
        }
