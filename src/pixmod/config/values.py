"""Adjustment value dataclass with merge support.

``AdjustmentValues`` is the Python form of an adjustment-parameter record:
one field per slider, each defaulting to its neutral value. Values can be
merged with ``+`` using the composition rule of each parameter.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import Any

from pixmod.config.config import ADJUST_CONFIG


@dataclass(frozen=True)
class AdjustmentValues:
    """Adjustment parameter values.

    Merge semantics:
    - Multiplicative percentages (brightness, contrast, saturation): a * b / 100
    - hue: additive with wrap to [-180, 180]
    - Everything else: a + b

    Example:
        >>> warm = AdjustmentValues(temperature=30, saturation=120)
        >>> bright = AdjustmentValues(brightness=130)
        >>> look = warm + bright
        >>> # temperature=30, brightness=130, saturation=120
    """

    # Per-pixel color pass, in pipeline order
    brightness: float = 100.0
    contrast: float = 100.0
    saturation: float = 100.0
    hue: float = 0.0
    exposure: float = 0.0
    temperature: float = 0.0

    # Spatial effects
    blur: float = 0.0
    sharpen: float = 0.0
    vignette: float = 0.0
    noise: float = 0.0

    def __add__(self, other: AdjustmentValues) -> AdjustmentValues:
        """Merge using composition rules."""
        if not isinstance(other, AdjustmentValues):
            return NotImplemented

        merged = {}
        for name, spec in ADJUST_CONFIG.get_all_specs().items():
            merged[name] = spec.combine(getattr(self, name), getattr(other, name))
        return AdjustmentValues(**merged)

    def __radd__(self, other):
        """Support sum() with initial value 0."""
        if other == 0:
            return self
        return self.__add__(other)

    def clamp(self) -> AdjustmentValues:
        """Clamp all values to valid ranges.

        :returns: New AdjustmentValues with clamped values
        :raises ValueError: If a field is not a number
        """
        return AdjustmentValues(
            **{
                name: spec.validate(getattr(self, name))
                for name, spec in ADJUST_CONFIG.get_all_specs().items()
            }
        )

    def is_neutral(self) -> bool:
        """Check if all values are neutral (no-op).

        :returns: True if applying these values would have no effect
        """
        return all(
            spec.is_neutral(getattr(self, name))
            for name, spec in ADJUST_CONFIG.get_all_specs().items()
        )

    def has_color_pass(self) -> bool:
        """True if any of the per-pixel color parameters is not neutral."""
        specs = ADJUST_CONFIG
        return not (
            specs.brightness.is_neutral(self.brightness)
            and specs.contrast.is_neutral(self.contrast)
            and specs.saturation.is_neutral(self.saturation)
            and specs.hue.is_neutral(self.hue)
            and specs.exposure.is_neutral(self.exposure)
            and specs.temperature.is_neutral(self.temperature)
        )

    def replace(self, **changes: float) -> AdjustmentValues:
        """Return a copy with some fields changed."""
        return AdjustmentValues.from_mapping({**asdict(self), **changes})

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> AdjustmentValues:
        """Build values from a ``{name: number}`` mapping.

        Missing keys take their neutral value.

        :raises ValueError: If the mapping contains an unrecognized key
        """
        valid = {f.name for f in fields(cls)}
        unknown = set(params) - valid
        if unknown:
            raise ValueError(
                f"Unknown adjustment parameter(s) {sorted(unknown)}. Valid: {sorted(valid)}"
            )
        return cls(**dict(params))

    @classmethod
    def coerce(cls, params: AdjustmentValues | Mapping[str, Any] | None) -> AdjustmentValues:
        """Accept values, a mapping or None and return clamped AdjustmentValues."""
        if params is None:
            return cls()
        if not isinstance(params, AdjustmentValues):
            params = cls.from_mapping(params)
        return params.clamp()
