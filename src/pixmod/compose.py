"""Buffer compositing and comparison."""

from __future__ import annotations

import numpy as np

from pixmod.buffer import PixelBuffer


def blend(base: PixelBuffer, overlay: PixelBuffer, alpha: float) -> PixelBuffer:
    """Linear mix ``base + (overlay - base) * alpha`` on all four channels.

    :param alpha: Overlay weight, clamped to [0, 1]
    :returns: New buffer
    :raises DimensionMismatchError: If the buffers differ in size
    """
    base.require_same_shape(overlay)
    alpha = max(0.0, min(1.0, float(alpha)))

    a = base.pixels.astype(np.float64)
    mixed = a + (overlay.pixels - a) * alpha
    return PixelBuffer._wrap(np.clip(np.floor(mixed + 0.5), 0, 255).astype(np.uint8))


def max_abs_difference(a: PixelBuffer, b: PixelBuffer) -> int:
    """Largest per-channel absolute difference between two buffers.

    :raises DimensionMismatchError: If the buffers differ in size
    """
    a.require_same_shape(b)
    if a.size == 0:
        return 0
    diff = np.abs(a.pixels.astype(np.int16) - b.pixels.astype(np.int16))
    return int(diff.max())
