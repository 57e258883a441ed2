"""Unified pixmod configuration.

This module provides a top-level configuration dataclass that contains the
adjustment parameter specifications and the session-level constants
(history depth) as sub-attributes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pixmod.config.adjust import AdjustConfig


@dataclass(frozen=True)
class HistoryConfig:
    """Undo history limits.

    Attributes:
        max_entries: Snapshots kept before the oldest is evicted
    """

    max_entries: int = 50

    def get_all_specs(self) -> dict[str, Any]:
        return {"max_entries": self.max_entries}


@dataclass(frozen=True)
class PixmodConfig:
    """Top-level configuration.

    Provides hierarchical access:
        CONFIG.adjust.brightness
        CONFIG.history.max_entries

    Attributes:
        adjust: Adjustment parameter specifications
        history: Undo history limits
    """

    adjust: AdjustConfig = AdjustConfig()
    history: HistoryConfig = HistoryConfig()

    def get_all_specs(self) -> dict[str, dict[str, Any]]:
        """Get all specifications organized by section.

        :return: Nested dictionary of all specifications
        """
        return {
            "adjust": self.adjust.get_all_specs(),
            "history": self.history.get_all_specs(),
        }


# Main singleton instance
CONFIG = PixmodConfig()

ADJUST_CONFIG = CONFIG.adjust
HISTORY_CONFIG = CONFIG.history
