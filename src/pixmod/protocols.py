"""
Protocol definitions for pixmod interfaces.

Anything that maps a :class:`~pixmod.buffer.PixelBuffer` to a new buffer can
be registered as a filter or chained in a :class:`~pixmod.pipeline.Pipeline`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pixmod.buffer import PixelBuffer


@runtime_checkable
class BufferTransform(Protocol):
    """
    Protocol for one-shot buffer transforms (filters, pipeline steps).

    Implementations must not modify their input and must return a newly
    allocated buffer.
    """

    def __call__(self, buffer: PixelBuffer) -> PixelBuffer:
        """
        Transform a buffer.

        :param buffer: Source buffer (not modified)
        :returns: New buffer
        """
        ...


@runtime_checkable
class BufferSource(Protocol):
    """Protocol for objects that hold a current image (sessions, history)."""

    def current(self) -> PixelBuffer | None:
        """Return a copy of the current image, or None if there is none."""
        ...
