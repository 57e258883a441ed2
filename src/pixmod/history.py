"""Bounded undo/redo history of buffer snapshots.

The stack holds at most ``max_entries`` snapshots and a cursor pointing at
the current one. Pushing after an undo discards the redo branch; pushing
past capacity evicts the oldest snapshot.

Example:
    >>> history = HistoryStack()
    >>> history.push(original, "Image Loaded")
    >>> history.push(edited, "Adjustment")
    >>> history.undo() == original
    True
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from pixmod.buffer import PixelBuffer
from pixmod.config.config import HISTORY_CONFIG
from pixmod.exceptions import NoHistoryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    """One snapshot in the history.

    Attributes:
        description: Label shown in a history panel
        buffer: Snapshot owned by the history (treat as read-only)
        index: Monotonic sequence number, never reused
        timestamp: ``time.time()`` at push
    """

    description: str
    buffer: PixelBuffer = field(repr=False)
    index: int
    timestamp: float = field(default_factory=time.time)


class HistoryStack:
    """Undo/redo log of :class:`PixelBuffer` snapshots.

    Buffers are cloned on the way in and on the way out, so callers can
    never alias a stored snapshot.

    :param max_entries: Capacity; defaults to ``CONFIG.history.max_entries``
    """

    def __init__(self, max_entries: int | None = None):
        if max_entries is None:
            max_entries = HISTORY_CONFIG.max_entries
        if max_entries < 1:
            raise ValueError(f"max_entries must be >= 1, got {max_entries}")
        self._max_entries = int(max_entries)
        self._entries: list[HistoryEntry] = []
        self._cursor = -1
        self._next_index = 0

    # ========================================================================
    # Mutation
    # ========================================================================

    def push(self, buffer: PixelBuffer, description: str) -> HistoryEntry:
        """Record ``buffer`` as the new current state.

        :param buffer: State to store (cloned)
        :param description: Label for the history panel
        :returns: The new entry
        """
        # Drop the redo branch
        del self._entries[self._cursor + 1 :]

        entry = HistoryEntry(description, buffer.clone(), self._next_index)
        self._next_index += 1
        self._entries.append(entry)

        overflow = len(self._entries) - self._max_entries
        if overflow > 0:
            del self._entries[:overflow]
            logger.debug("[History] Evicted %d oldest entries", overflow)

        self._cursor = len(self._entries) - 1
        logger.debug("[History] Pushed #%d %r (%d entries)", entry.index, description, len(self))
        return entry

    def undo(self) -> PixelBuffer:
        """Step back one entry.

        :returns: Copy of the now-current snapshot
        :raises NoHistoryError: If the history is empty or already at the oldest entry
        """
        if not self.can_undo:
            raise NoHistoryError("Nothing to undo")
        self._cursor -= 1
        logger.debug("[History] Undo -> %r", self._entries[self._cursor].description)
        return self._entries[self._cursor].buffer.clone()

    def redo(self) -> PixelBuffer:
        """Step forward one entry.

        :returns: Copy of the now-current snapshot
        :raises NoHistoryError: If already at the newest entry
        """
        if not self.can_redo:
            raise NoHistoryError("Nothing to redo")
        self._cursor += 1
        logger.debug("[History] Redo -> %r", self._entries[self._cursor].description)
        return self._entries[self._cursor].buffer.clone()

    def jump_to(self, position: int) -> PixelBuffer:
        """Move the cursor to ``position`` (0 = oldest kept entry).

        The redo branch is kept, so redo still works after jumping back.

        :raises NoHistoryError: If ``position`` is outside ``[0, len)``
        """
        if not 0 <= position < len(self._entries):
            raise NoHistoryError(
                f"No history entry at position {position} (have {len(self._entries)})"
            )
        self._cursor = position
        return self._entries[position].buffer.clone()

    def clear(self) -> None:
        self._entries.clear()
        self._cursor = -1

    # ========================================================================
    # Queries
    # ========================================================================

    def current(self) -> PixelBuffer | None:
        """Copy of the current snapshot, or None when empty."""
        if self._cursor < 0:
            return None
        return self._entries[self._cursor].buffer.clone()

    @property
    def cursor(self) -> int:
        """Position of the current entry, ``-1`` when empty."""
        return self._cursor

    @property
    def max_entries(self) -> int:
        return self._max_entries

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._entries) - 1

    def descriptions(self) -> list[str]:
        """Entry labels, oldest first."""
        return [entry.description for entry in self._entries]

    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"HistoryStack({len(self)}/{self._max_entries}, cursor={self._cursor})"
