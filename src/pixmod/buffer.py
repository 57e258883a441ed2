"""RGBA pixel buffer.

A :class:`PixelBuffer` owns a ``(height, width, 4)`` ``uint8`` array in R, G, B, A
channel order. Transforms never mutate their input: they read one buffer and
allocate a new one, so a buffer held by the history or by a caller is never
changed behind its owner's back.

Example:
    >>> buf = PixelBuffer.filled(2, 2, (128, 128, 128, 255))
    >>> buf.set(0, 0, 300, -5, 10.6, 255)
    >>> buf.get(0, 0)
    (255, 0, 11, 255)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Self

import numpy as np

from pixmod.exceptions import DimensionMismatchError, OutOfBoundsError

CHANNELS = 4


def _clamp_channel(value: float) -> int:
    """Round to nearest and clamp to [0, 255]."""
    v = float(value)
    if v != v:  # NaN
        return 0
    return int(max(0.0, min(255.0, np.floor(v + 0.5))))


class PixelBuffer:
    """Width x height x 4 RGBA byte buffer with bounds-checked access."""

    __slots__ = ("_width", "_height", "_pixels")

    def __init__(
        self,
        width: int,
        height: int,
        data: bytes | bytearray | Sequence[int] | np.ndarray | None = None,
    ):
        """
        Create a buffer.

        :param width: Width in pixels (>= 0)
        :param height: Height in pixels (>= 0)
        :param data: Optional initial data: flat bytes/sequence of length
            ``width*height*4`` or an array of shape ``(height, width, 4)``.
            Values are rounded half up and clamped to [0, 255]. Omitted
            data gives transparent black.
        :raises ValueError: If width or height is negative
        :raises DimensionMismatchError: If ``data`` has the wrong length or shape
        """
        width = int(width)
        height = int(height)
        if width < 0 or height < 0:
            raise ValueError(f"Buffer dimensions must be non-negative, got {width}x{height}")

        self._width = width
        self._height = height

        if data is None:
            self._pixels = np.zeros((height, width, CHANNELS), dtype=np.uint8)
            return

        if isinstance(data, bytes | bytearray | memoryview):
            flat = np.frombuffer(bytes(data), dtype=np.uint8)
        else:
            arr = np.asarray(data)
            if arr.ndim == 3:
                if arr.shape != (height, width, CHANNELS):
                    raise DimensionMismatchError(
                        f"Array shape {arr.shape} does not match buffer "
                        f"({height}, {width}, {CHANNELS})"
                    )
                self._pixels = np.clip(np.floor(arr + 0.5), 0, 255).astype(np.uint8)
                return
            flat = np.clip(np.floor(arr.reshape(-1) + 0.5), 0, 255).astype(np.uint8)

        expected = width * height * CHANNELS
        if flat.size != expected:
            raise DimensionMismatchError(
                f"Data length {flat.size} does not match {width}x{height}x{CHANNELS}={expected}"
            )
        self._pixels = flat.reshape(height, width, CHANNELS).copy()

    # ========================================================================
    # Constructors
    # ========================================================================

    @classmethod
    def filled(cls, width: int, height: int, rgba: Sequence[float]) -> Self:
        """Create a buffer where every pixel has the same RGBA value."""
        if len(rgba) != CHANNELS:
            raise ValueError(f"Expected 4 channel values, got {len(rgba)}")
        buf = cls(width, height)
        buf._pixels[...] = [_clamp_channel(c) for c in rgba]
        return buf

    @classmethod
    def from_array(cls, array: np.ndarray) -> Self:
        """Create a buffer from an ``(h, w, 4)`` RGBA or ``(h, w, 3)`` RGB array.

        RGB input gets an opaque alpha channel. Float arrays are rounded and clamped.
        """
        arr = np.asarray(array)
        if arr.ndim != 3 or arr.shape[2] not in (3, 4):
            raise DimensionMismatchError(f"Expected (h, w, 3) or (h, w, 4) array, got {arr.shape}")

        if arr.dtype != np.uint8:
            arr = np.clip(np.floor(arr.astype(np.float64) + 0.5), 0, 255).astype(np.uint8)

        height, width = arr.shape[:2]
        if arr.shape[2] == 3:
            rgba = np.empty((height, width, CHANNELS), dtype=np.uint8)
            rgba[..., :3] = arr
            rgba[..., 3] = 255
            arr = rgba

        return cls(width, height, arr)

    @classmethod
    def _wrap(cls, pixels: np.ndarray) -> Self:
        """Adopt an already-allocated uint8 array without copying (internal)."""
        buf = cls.__new__(cls)
        buf._height, buf._width = int(pixels.shape[0]), int(pixels.shape[1])
        buf._pixels = pixels
        return buf

    # ========================================================================
    # Properties
    # ========================================================================

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> tuple[int, int]:
        """``(width, height)``."""
        return (self._width, self._height)

    @property
    def size(self) -> int:
        """Number of pixels."""
        return self._width * self._height

    @property
    def pixels(self) -> np.ndarray:
        """Underlying ``(height, width, 4)`` array. Treat as read-only."""
        return self._pixels

    # ========================================================================
    # Pixel access
    # ========================================================================

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise OutOfBoundsError(x, y, self._width, self._height)

    def get(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Read pixel ``(x, y)``.

        :raises OutOfBoundsError: If the coordinate is outside the buffer
        """
        x, y = int(x), int(y)
        self._check_bounds(x, y)
        r, g, b, a = self._pixels[y, x]
        return (int(r), int(g), int(b), int(a))

    def set(self, x: int, y: int, r: float, g: float, b: float, a: float = 255) -> None:
        """Write pixel ``(x, y)``; each channel is rounded and clamped to [0, 255].

        :raises OutOfBoundsError: If the coordinate is outside the buffer
        """
        x, y = int(x), int(y)
        self._check_bounds(x, y)
        self._pixels[y, x] = (
            _clamp_channel(r),
            _clamp_channel(g),
            _clamp_channel(b),
            _clamp_channel(a),
        )

    # ========================================================================
    # Copy / comparison
    # ========================================================================

    def clone(self) -> Self:
        """Deep copy."""
        return type(self)._wrap(self._pixels.copy())

    def same_shape(self, other: PixelBuffer) -> bool:
        return self._width == other._width and self._height == other._height

    def require_same_shape(self, other: PixelBuffer) -> None:
        """
        :raises DimensionMismatchError: If ``other`` has a different width or height
        """
        if not self.same_shape(other):
            raise DimensionMismatchError(
                f"Buffer sizes differ: {self._width}x{self._height} "
                f"vs {other._width}x{other._height}"
            )

    def to_array(self) -> np.ndarray:
        """Copy of the pixels as a ``(height, width, 4)`` uint8 array."""
        return self._pixels.copy()

    def to_bytes(self) -> bytes:
        """Flat RGBA bytes, row-major."""
        return self._pixels.tobytes()

    def __len__(self) -> int:
        """Length of the flat byte data (``width * height * 4``)."""
        return self._pixels.size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.same_shape(other) and np.array_equal(self._pixels, other._pixels)

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelBuffer({self._width}x{self._height})"
