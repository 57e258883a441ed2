"""Preset library for adjustment values.

Presets are configuration data: applying one is exactly
``AdjustmentPipeline.apply(buffer, preset)``. Supports loading from dict
and JSON.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pixmod.config.values import AdjustmentValues

logger = logging.getLogger(__name__)

# ============================================================================
# Adjustment Presets - Basic
# ============================================================================

NEUTRAL = AdjustmentValues()

WARM = AdjustmentValues(temperature=30, saturation=105)

COOL = AdjustmentValues(temperature=-30, saturation=95)

VIBRANT = AdjustmentValues(saturation=135, contrast=105, brightness=105)

MUTED = AdjustmentValues(saturation=70, contrast=95)

# ============================================================================
# Adjustment Presets - Looks
# ============================================================================

VINTAGE = AdjustmentValues(
    saturation=70,
    contrast=90,
    temperature=25,
    vignette=35,
    noise=8,
)

DRAMATIC = AdjustmentValues(
    contrast=145,
    saturation=110,
    exposure=-10,
    vignette=45,
    sharpen=30,
)

CINEMATIC = AdjustmentValues(
    contrast=120,
    saturation=85,
    temperature=-15,
    hue=-5,
    vignette=40,
)

FADED = AdjustmentValues(contrast=75, saturation=80, brightness=110)

SOFT_FOCUS = AdjustmentValues(blur=2, brightness=105, contrast=95)

GRITTY = AdjustmentValues(contrast=130, saturation=80, sharpen=60, noise=20)

NOIR = AdjustmentValues(saturation=0, contrast=140, vignette=50)

PRESETS: dict[str, AdjustmentValues] = {
    "neutral": NEUTRAL,
    "warm": WARM,
    "cool": COOL,
    "vibrant": VIBRANT,
    "muted": MUTED,
    "vintage": VINTAGE,
    "dramatic": DRAMATIC,
    "cinematic": CINEMATIC,
    "faded": FADED,
    "soft_focus": SOFT_FOCUS,
    "gritty": GRITTY,
    "noir": NOIR,
}


# ============================================================================
# Loading Functions
# ============================================================================


def get_preset(name: str) -> AdjustmentValues:
    """Get an adjustment preset by name (case-insensitive).

    :param name: Preset name, e.g. "vintage"
    :returns: AdjustmentValues instance
    :raises ValueError: If preset name is not found
    """
    key = name.lower()
    if key not in PRESETS:
        raise ValueError(f"Unknown preset '{name}'. Available: {sorted(PRESETS)}")
    return PRESETS[key]


def values_from_dict(d: dict) -> AdjustmentValues:
    """Create AdjustmentValues from dictionary.

    A ``"preset"`` key selects a base preset which the remaining keys are
    merged onto.

    Example:
        >>> values_from_dict({"brightness": 120, "noise": 10})
        >>> values_from_dict({"preset": "vintage", "vignette": 60})
    """
    d = dict(d)
    base_name = d.pop("preset", None)
    if base_name is None:
        return AdjustmentValues.from_mapping(d)

    base = get_preset(base_name)
    return base.replace(**d)


def values_to_dict(values: AdjustmentValues) -> dict:
    """Convert AdjustmentValues to dictionary.

    :param values: AdjustmentValues instance
    :returns: Dictionary representation
    """
    return values.to_dict()


def load_values_json(path: str | Path) -> AdjustmentValues:
    """Load AdjustmentValues from JSON file.

    :param path: Path to JSON file
    :returns: AdjustmentValues instance
    """
    with open(path) as f:
        d = json.load(f)
    logger.debug("Loaded adjustment values from %s", path)
    return values_from_dict(d)


def save_values_json(values: AdjustmentValues, path: str | Path) -> None:
    """Save AdjustmentValues to JSON file.

    :param values: AdjustmentValues instance
    :param path: Output path
    """
    with open(path, "w") as f:
        json.dump(values_to_dict(values), f, indent=2)
