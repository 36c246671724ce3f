"""Affine builder parameter configuration."""

from __future__ import annotations

from dataclasses import dataclass

from xformkit.config.operations import OperationSpec


@dataclass(frozen=True)
class TransformConfig:
    """Ranges for the parameters of ``mat33_transformation``.

    Scale and skew apply per axis; the same spec bounds both X and Y.
    """

    translation: OperationSpec = OperationSpec(
        name="translation",
        min_value=-1.0e6,
        max_value=1.0e6,
        default=0.0,
        neutral=0.0,
        composition="additive",
        description="Translation along X or Y",
    )

    angle: OperationSpec = OperationSpec(
        name="angle",
        min_value=-360.0,
        max_value=360.0,
        default=0.0,
        neutral=0.0,
        composition="additive",
        description="Counter-clockwise rotation in degrees: 0=no rotation",
    )

    scale: OperationSpec = OperationSpec(
        name="scale",
        min_value=-1000.0,
        max_value=1000.0,
        default=1.0,
        neutral=1.0,
        composition="multiplicative",
        description="Scale factor along X or Y: 1.0=no change, negative mirrors",
    )

    skew: OperationSpec = OperationSpec(
        name="skew",
        min_value=-100.0,
        max_value=100.0,
        default=0.0,
        neutral=0.0,
        composition="additive",
        description="Shear factor along X or Y: 0=no skew",
    )

    origin: OperationSpec = OperationSpec(
        name="origin",
        min_value=-1.0e6,
        max_value=1.0e6,
        default=0.0,
        neutral=0.0,
        composition="additive",
        description="Anchor point: the local point that lands on (x, y)",
    )

    def get_spec(self, name: str) -> OperationSpec:
        """Get parameter spec by name.

        :raises AttributeError: If the parameter does not exist
        """
        return getattr(self, name)

    def get_all_specs(self) -> dict[str, OperationSpec]:
        return {
            "translation": self.translation,
            "angle": self.angle,
            "scale": self.scale,
            "skew": self.skew,
            "origin": self.origin,
        }
