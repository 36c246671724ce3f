"""Parameter specifications for builder configuration.

This module defines the OperationSpec dataclass that specifies the range,
default and composition behavior of a single scalar builder parameter
(an angle, a scale factor, a clipping distance).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class OperationSpec:
    """Specification for one scalar builder parameter.

    Attributes:
        name: Parameter name (e.g., "angle", "fovy")
        min_value: Minimum allowed value
        max_value: Maximum allowed value
        default: Value used when none is given
        neutral: Value that leaves geometry unchanged
        composition: How two values chain ("multiplicative" or "additive")
        description: Human-readable description
    """

    name: str
    min_value: float
    max_value: float
    default: float
    neutral: float
    composition: Literal["multiplicative", "additive"]
    description: str = ""

    def validate(self, value: float) -> float:
        """Clamp value to [min_value, max_value].

        :param value: Value to validate
        :returns: Clamped float
        :raises ValueError: If value is not a number
        """
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ValueError(f"{self.name}: expected number, got {type(value).__name__}")

        return max(self.min_value, min(self.max_value, float(value)))

    def is_neutral(self, value: float, tolerance: float = 1e-6) -> bool:
        """True if ``value`` is within ``tolerance`` of the neutral value."""
        return abs(value - self.neutral) < tolerance

    def combine(self, a: float, b: float) -> float:
        """Chain two values: ``a * b`` or ``a + b - neutral``."""
        if self.composition == "multiplicative":
            return a * b
        return a + b - self.neutral

    def __repr__(self) -> str:
        return (
            f"OperationSpec({self.name}, "
            f"range=[{self.min_value}, {self.max_value}], "
            f"default={self.default}, neutral={self.neutral}, "
            f"{self.composition})"
        )
