"""Configuration module for pixmod.

This module provides standardized parameter specifications for every
adjustment, the value dataclass the pipeline consumes, and presets.

Usage:
    from pixmod.config import CONFIG
    CONFIG.adjust.brightness.neutral  # 100.0
    CONFIG.history.max_entries  # 50
"""

from pixmod.config.adjust import AdjustConfig
from pixmod.config.config import (
    ADJUST_CONFIG,
    CONFIG,
    HISTORY_CONFIG,
    HistoryConfig,
    PixmodConfig,
)
from pixmod.config.operations import OperationSpec
from pixmod.config.presets import (
    CINEMATIC,
    COOL,
    DRAMATIC,
    FADED,
    GRITTY,
    MUTED,
    NEUTRAL,
    NOIR,
    PRESETS,
    SOFT_FOCUS,
    VIBRANT,
    VINTAGE,
    WARM,
    get_preset,
    load_values_json,
    save_values_json,
    values_from_dict,
    values_to_dict,
)
from pixmod.config.values import AdjustmentValues

__all__ = [
    # Specs
    "OperationSpec",
    "AdjustConfig",
    "HistoryConfig",
    "PixmodConfig",
    "CONFIG",
    "ADJUST_CONFIG",
    "HISTORY_CONFIG",
    # Values
    "AdjustmentValues",
    # Presets
    "NEUTRAL",
    "WARM",
    "COOL",
    "VIBRANT",
    "MUTED",
    "VINTAGE",
    "DRAMATIC",
    "CINEMATIC",
    "FADED",
    "SOFT_FOCUS",
    "GRITTY",
    "NOIR",
    "PRESETS",
    "get_preset",
    "values_from_dict",
    "values_to_dict",
    "load_values_json",
    "save_values_json",
]
