"""Adjustment parameter configuration.

This module defines the standardized parameter specifications for every
slider the adjustment pipeline understands. Multiplicative parameters are
percentages (100 = unchanged); additive ones are offsets (0 = unchanged).
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from pixmod.config.operations import OperationSpec


@dataclass(frozen=True)
class AdjustConfig:
    """Configuration for all adjustment pipeline parameters."""

    brightness: OperationSpec = OperationSpec(
        name="brightness",
        min_value=0.0,
        max_value=200.0,
        default=100.0,
        neutral=100.0,
        composition="multiplicative",
        description="Brightness percentage: 100=no change, 0=black",
    )

    contrast: OperationSpec = OperationSpec(
        name="contrast",
        min_value=0.0,
        max_value=200.0,
        default=100.0,
        neutral=100.0,
        composition="multiplicative",
        description="Contrast percentage around mid-gray 128: 100=no change",
    )

    saturation: OperationSpec = OperationSpec(
        name="saturation",
        min_value=0.0,
        max_value=200.0,
        default=100.0,
        neutral=100.0,
        composition="multiplicative",
        description="Saturation percentage: 0=grayscale, 100=no change",
    )

    hue: OperationSpec = OperationSpec(
        name="hue",
        min_value=-180.0,
        max_value=180.0,
        default=0.0,
        neutral=0.0,
        composition="wrapped",
        description="Hue rotation in degrees",
    )

    exposure: OperationSpec = OperationSpec(
        name="exposure",
        min_value=-100.0,
        max_value=100.0,
        default=0.0,
        neutral=0.0,
        composition="additive",
        description="Exposure in hundredths of a stop: 100=one stop brighter",
    )

    temperature: OperationSpec = OperationSpec(
        name="temperature",
        min_value=-100.0,
        max_value=100.0,
        default=0.0,
        neutral=0.0,
        composition="additive",
        description="Color temperature: negative=cool/blue, positive=warm/orange",
    )

    blur: OperationSpec = OperationSpec(
        name="blur",
        min_value=0.0,
        max_value=20.0,
        default=0.0,
        neutral=0.0,
        composition="additive",
        description="Box blur radius in pixels",
    )

    sharpen: OperationSpec = OperationSpec(
        name="sharpen",
        min_value=0.0,
        max_value=100.0,
        default=0.0,
        neutral=0.0,
        composition="additive",
        description="Sharpen strength: blend between original and sharpened",
    )

    vignette: OperationSpec = OperationSpec(
        name="vignette",
        min_value=0.0,
        max_value=100.0,
        default=0.0,
        neutral=0.0,
        composition="additive",
        description="Edge darkening strength",
    )

    noise: OperationSpec = OperationSpec(
        name="noise",
        min_value=0.0,
        max_value=100.0,
        default=0.0,
        neutral=0.0,
        composition="additive",
        description="Uniform per-channel noise amplitude",
    )

    def get_spec(self, name: str) -> OperationSpec:
        """Get operation spec by name.

        :param name: Parameter name
        :return: OperationSpec for the parameter
        :raises AttributeError: If parameter not found
        """
        return getattr(self, name)

    def get_all_specs(self) -> dict[str, OperationSpec]:
        """Get all parameter specs as a dictionary, in pipeline order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

