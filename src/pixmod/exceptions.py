"""Exception types raised by pixmod.

Every error derives from :class:`PixmodError` and from the builtin exception
that best describes it, so callers can catch either the library-specific
type or the generic one (``except KeyError`` still catches an unknown filter).
"""

from __future__ import annotations


class PixmodError(Exception):
    """Base exception for pixmod operations."""


class OutOfBoundsError(PixmodError, IndexError):
    """Raised when a pixel coordinate or region lies outside a buffer."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(f"Pixel ({x}, {y}) is outside buffer of size {width}x{height}")


class DimensionMismatchError(PixmodError, ValueError):
    """Raised when two buffers (or a buffer and its data) disagree in size."""


class UnknownFilterError(PixmodError, KeyError):
    """Raised when a filter name is not registered in a catalog."""

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        self.available = sorted(available) if available else []
        message = f'Unknown filter "{name}"'
        if self.available:
            message += f". Available filters: {self.available}"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class NoHistoryError(PixmodError, LookupError):
    """Raised when undo/redo/jump has no entry to move to."""
