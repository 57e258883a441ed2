"""Geometry operations: crop, rotate, flip, resize.

All operations allocate a new buffer; the source is never modified.
Positive rotation angles turn the image clockwise, as seen on screen.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np
from numba import njit, prange
from numpy.typing import NDArray

from pixmod.buffer import PixelBuffer, _clamp_channel
from pixmod.exceptions import OutOfBoundsError

logger = logging.getLogger(__name__)


# ============================================================================
# Kernels
# ============================================================================


@njit(parallel=True, cache=True, nogil=True)
def rotate_nearest_numba(
    src: NDArray[np.uint8],
    cos_t: float,
    sin_t: float,
    fill: NDArray[np.uint8],
    out: NDArray[np.uint8],
) -> None:
    """
    Nearest-neighbour rotation by inverse mapping about the image centers.

    Args:
        src: Source pixels [H, W, 4]
        cos_t: Cosine of the clockwise angle
        sin_t: Sine of the clockwise angle
        fill: RGBA written where no source pixel maps [4]
        out: Output pixels [H2, W2, 4] (modified in-place)
    """
    src_h = src.shape[0]
    src_w = src.shape[1]
    out_h = out.shape[0]
    out_w = out.shape[1]
    src_cx = src_w / 2.0
    src_cy = src_h / 2.0
    out_cx = out_w / 2.0
    out_cy = out_h / 2.0

    for y in prange(out_h):
        dy = y + 0.5 - out_cy
        for x in range(out_w):
            dx = x + 0.5 - out_cx
            sx = dx * cos_t + dy * sin_t + src_cx
            sy = -dx * sin_t + dy * cos_t + src_cy
            px = int(math.floor(sx))
            py = int(math.floor(sy))
            if 0 <= px < src_w and 0 <= py < src_h:
                for c in range(4):
                    out[y, x, c] = src[py, px, c]
            else:
                for c in range(4):
                    out[y, x, c] = fill[c]


@njit(parallel=True, cache=True, nogil=True)
def resize_bilinear_numba(src: NDArray[np.uint8], out: NDArray[np.uint8]) -> None:
    """
    Bilinear resampling with pixel centers aligned between source and output.

    Samples outside the source are clamped to the edge pixels. All four
    channels are interpolated.

    Args:
        src: Source pixels [H, W, 4]
        out: Output pixels [H2, W2, 4] (modified in-place)
    """
    src_h = src.shape[0]
    src_w = src.shape[1]
    out_h = out.shape[0]
    out_w = out.shape[1]
    scale_x = src_w / out_w
    scale_y = src_h / out_h

    for y in prange(out_h):
        sy = min(max((y + 0.5) * scale_y - 0.5, 0.0), src_h - 1.0)
        y0 = int(math.floor(sy))
        y1 = min(y0 + 1, src_h - 1)
        fy = sy - y0
        for x in range(out_w):
            sx = min(max((x + 0.5) * scale_x - 0.5, 0.0), src_w - 1.0)
            x0 = int(math.floor(sx))
            x1 = min(x0 + 1, src_w - 1)
            fx = sx - x0
            for c in range(4):
                top = src[y0, x0, c] * (1.0 - fx) + src[y0, x1, c] * fx
                bottom = src[y1, x0, c] * (1.0 - fx) + src[y1, x1, c] * fx
                v = top * (1.0 - fy) + bottom * fy
                out[y, x, c] = min(int(v + 0.5), 255)


# ============================================================================
# Operations
# ============================================================================


def crop(buffer: PixelBuffer, x: int, y: int, width: int, height: int) -> PixelBuffer:
    """Cut out a rectangle.

    Negative ``width``/``height`` select the rectangle backwards from
    ``(x, y)``, as when dragging a crop box up or left. The rectangle is
    intersected with the buffer.

    :returns: New buffer holding the intersection
    :raises OutOfBoundsError: If the rectangle does not overlap the buffer
    """
    x, y, width, height = int(x), int(y), int(width), int(height)
    if width < 0:
        x, width = x + width, -width
    if height < 0:
        y, height = y + height, -height

    x0 = max(x, 0)
    y0 = max(y, 0)
    x1 = min(x + width, buffer.width)
    y1 = min(y + height, buffer.height)
    if x1 <= x0 or y1 <= y0:
        raise OutOfBoundsError(x, y, buffer.width, buffer.height)

    logger.debug("[Geometry] Crop %r to (%d, %d, %d, %d)", buffer, x0, y0, x1 - x0, y1 - y0)
    return PixelBuffer._wrap(buffer.pixels[y0:y1, x0:x1].copy())


def rotate(
    buffer: PixelBuffer,
    degrees: float,
    fill: Sequence[float] = (0, 0, 0, 0),
) -> PixelBuffer:
    """Rotate clockwise, expanding the canvas to hold the whole image.

    Multiples of 90 degrees are exact. Other angles use nearest-neighbour
    sampling and paint uncovered corners with ``fill``.

    :param buffer: Buffer to read
    :param degrees: Clockwise angle
    :param fill: RGBA for uncovered pixels
    :returns: New buffer
    :raises ValueError: If ``degrees`` is not finite or ``fill`` is not RGBA
    """
    degrees = float(degrees)
    if not math.isfinite(degrees):
        raise ValueError(f"Rotation angle must be finite, got {degrees}")
    if degrees % 90.0 == 0.0:
        quarter_turns = int(degrees // 90.0) % 4
        # rot90 turns counter-clockwise for positive k
        pixels = np.ascontiguousarray(np.rot90(buffer.pixels, k=-quarter_turns))
        return PixelBuffer._wrap(pixels.copy() if quarter_turns == 0 else pixels)

    if len(fill) != 4:
        raise ValueError(f"Fill must have 4 channel values, got {len(fill)}")

    theta = math.radians(degrees)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    w, h = buffer.width, buffer.height
    new_w = math.ceil(w * abs(cos_t) + h * abs(sin_t) - 1e-9)
    new_h = math.ceil(w * abs(sin_t) + h * abs(cos_t) - 1e-9)

    out = np.empty((new_h, new_w, 4), dtype=np.uint8)
    if out.size:
        rgba = np.array([_clamp_channel(c) for c in fill], dtype=np.uint8)
        rotate_nearest_numba(buffer.pixels, cos_t, sin_t, rgba, out)

    logger.debug("[Geometry] Rotate %r by %.2f deg -> %dx%d", buffer, degrees, new_w, new_h)
    return PixelBuffer._wrap(out)


def flip(buffer: PixelBuffer, horizontal: bool = True) -> PixelBuffer:
    """Mirror left-right (``horizontal=True``) or top-bottom."""
    axis = 1 if horizontal else 0
    return PixelBuffer._wrap(np.ascontiguousarray(np.flip(buffer.pixels, axis=axis)))


def fit_within(width: int, height: int, max_width: int, max_height: int) -> tuple[int, int]:
    """Largest size with the aspect ratio of ``width x height`` inside the bounds.

    Scales up as well as down. Each side is rounded half up and kept >= 1.

    :raises ValueError: If any dimension is not positive
    """
    if min(width, height, max_width, max_height) <= 0:
        raise ValueError(
            f"Dimensions must be positive, got {width}x{height} into {max_width}x{max_height}"
        )
    ratio = min(max_width / width, max_height / height)
    return max(int(width * ratio + 0.5), 1), max(int(height * ratio + 0.5), 1)


def resize(buffer: PixelBuffer, width: int, height: int | None = None) -> PixelBuffer:
    """Resample to ``width x height`` with bilinear interpolation.

    With ``height=None`` the height follows from ``width`` and the source
    aspect ratio, rounded half up.

    :param buffer: Buffer to read (must not be empty)
    :param width: Target width (>= 1)
    :param height: Target height (>= 1) or None
    :returns: New buffer
    :raises ValueError: If the source is empty or a target side is < 1
    """
    if buffer.size == 0:
        raise ValueError(f"Cannot resize empty buffer {buffer!r}")
    width = int(width)
    if height is None:
        height = max(int(width * buffer.height / buffer.width + 0.5), 1)
    height = int(height)
    if width < 1 or height < 1:
        raise ValueError(f"Resize target must be at least 1x1, got {width}x{height}")

    if (width, height) == (buffer.width, buffer.height):
        return buffer.clone()

    out = np.empty((height, width, 4), dtype=np.uint8)
    resize_bilinear_numba(buffer.pixels, out)
    logger.debug("[Geometry] Resize %r -> %dx%d", buffer, width, height)
    return PixelBuffer._wrap(out)
