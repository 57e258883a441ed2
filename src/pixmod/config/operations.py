"""Operation specifications for adjustment parameters.

This module defines the OperationSpec dataclass that specifies parameter
ranges, defaults, and composition behavior for pipeline operations.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Literal


@dataclass(frozen=True)
class OperationSpec:
    """Specification for an adjustment parameter.

    Attributes:
        name: Parameter name (e.g., "brightness", "blur")
        min_value: Minimum allowed value
        max_value: Maximum allowed value
        default: Default value when not specified
        neutral: Value that causes no change (identity)
        composition: How two values combine ("multiplicative", "additive" or "wrapped")
        description: Human-readable description
    """

    name: str
    min_value: float
    max_value: float
    default: float
    neutral: float
    composition: Literal["multiplicative", "additive", "wrapped"]
    description: str = ""

    def validate(self, value: float) -> float:
        """Clamp value to the allowed range.

        Slider input can overshoot while dragging, so out-of-range numbers are
        clamped rather than rejected. NaN maps to the neutral value.

        :param value: Value to validate
        :returns: Clamped value within [min_value, max_value]
        :raises ValueError: If value is not a number
        """
        if isinstance(value, bool) or not isinstance(value, Real):
            raise ValueError(f"{self.name}: expected number, got {type(value).__name__}")

        value = float(value)
        if math.isnan(value):
            return float(self.neutral)

        return max(self.min_value, min(self.max_value, value))

    def is_neutral(self, value: float, tolerance: float = 1e-6) -> bool:
        """Check if value is effectively neutral (no change).

        :param value: Value to check
        :param tolerance: Tolerance for floating point comparison
        :returns: True if value is within tolerance of neutral
        """
        return abs(value - self.neutral) < tolerance

    def combine(self, a: float, b: float) -> float:
        """Combine two values according to composition rule.

        Multiplicative parameters are percentages, so 120 combined with 150
        gives 180 (1.2 * 1.5 = 1.8).

        :param a: First value
        :param b: Second value
        :returns: Combined value (not clamped)
        """
        if self.composition == "multiplicative":
            return a * b / self.neutral
        if self.composition == "wrapped":
            span = self.max_value - self.min_value
            return (a + b - self.min_value) % span + self.min_value
        return a + b - self.neutral

    def __repr__(self) -> str:
        return (
            f"OperationSpec({self.name}, "
            f"range=[{self.min_value}, {self.max_value}], "
            f"default={self.default}, neutral={self.neutral}, "
            f"{self.composition})"
        )
