"""
Numba-optimized convolution kernels.

Out-of-bounds taps are skipped, never zero-padded or wrapped. Rows are
processed in parallel; each worker writes only its own output row.
"""

from __future__ import annotations

import numpy as np
from numba import njit, prange
from numpy.typing import NDArray

from pixmod.color.ops import to_byte


@njit(parallel=True, cache=True, nogil=True)
def convolve_numba(
    src: NDArray[np.uint8],
    weights: NDArray[np.float64],
    factor: float,
    bias: float,
    normalize: bool,
    include_alpha: bool,
    out: NDArray[np.uint8],
) -> None:
    """
    2D convolution over an RGBA buffer.

    Args:
        src: Source pixels [H, W, 4]
        weights: Square kernel [K, K], K odd
        factor: Scale applied to the weighted sum (ignored when normalize is set)
        bias: Constant added after scaling
        normalize: Divide by the sum of in-bounds weights instead of using factor
        include_alpha: Convolve alpha too; otherwise alpha is copied
        out: Output pixels [H, W, 4] (modified in-place)
    """
    height = src.shape[0]
    width = src.shape[1]
    size = weights.shape[0]
    radius = size // 2

    for y in prange(height):
        for x in range(width):
            sr = 0.0
            sg = 0.0
            sb = 0.0
            sa = 0.0
            wsum = 0.0

            for ky in range(size):
                py = y + ky - radius
                if py < 0 or py >= height:
                    continue
                for kx in range(size):
                    px = x + kx - radius
                    if px < 0 or px >= width:
                        continue
                    w = weights[ky, kx]
                    sr += src[py, px, 0] * w
                    sg += src[py, px, 1] * w
                    sb += src[py, px, 2] * w
                    sa += src[py, px, 3] * w
                    wsum += w

            f = factor
            if normalize:
                f = 1.0 / wsum if wsum != 0.0 else 0.0

            out[y, x, 0] = to_byte(sr * f + bias)
            out[y, x, 1] = to_byte(sg * f + bias)
            out[y, x, 2] = to_byte(sb * f + bias)
            if include_alpha:
                out[y, x, 3] = to_byte(sa * f + bias)
            else:
                out[y, x, 3] = src[y, x, 3]


@njit(parallel=True, cache=True, nogil=True)
def separable_rows_numba(
    src: NDArray[np.uint8],
    weights: NDArray[np.float64],
    out: NDArray[np.float64],
) -> None:
    """
    Horizontal pass of a separable blur over all four channels.

    Each output value is the weighted mean of the in-bounds taps, so edge
    pixels are not darkened by missing neighbours.

    Args:
        src: Source pixels [H, W, 4]
        weights: 1-D weights [2R+1]
        out: Float intermediate [H, W, 4] (modified in-place)
    """
    height = src.shape[0]
    width = src.shape[1]
    radius = weights.shape[0] // 2

    for y in prange(height):
        for x in range(width):
            lo = max(0, x - radius)
            hi = min(width - 1, x + radius)
            wsum = 0.0
            s0 = 0.0
            s1 = 0.0
            s2 = 0.0
            s3 = 0.0
            for px in range(lo, hi + 1):
                w = weights[px - x + radius]
                s0 += src[y, px, 0] * w
                s1 += src[y, px, 1] * w
                s2 += src[y, px, 2] * w
                s3 += src[y, px, 3] * w
                wsum += w
            out[y, x, 0] = s0 / wsum
            out[y, x, 1] = s1 / wsum
            out[y, x, 2] = s2 / wsum
            out[y, x, 3] = s3 / wsum


@njit(parallel=True, cache=True, nogil=True)
def separable_cols_numba(
    src: NDArray[np.float64],
    weights: NDArray[np.float64],
    out: NDArray[np.uint8],
) -> None:
    """
    Vertical pass of a separable blur; rounds and clamps into the output.

    Args:
        src: Float intermediate from the horizontal pass [H, W, 4]
        weights: 1-D weights [2R+1]
        out: Output pixels [H, W, 4] (modified in-place)
    """
    height = src.shape[0]
    width = src.shape[1]
    radius = weights.shape[0] // 2

    for y in prange(height):
        lo = max(0, y - radius)
        hi = min(height - 1, y + radius)
        for x in range(width):
            wsum = 0.0
            s0 = 0.0
            s1 = 0.0
            s2 = 0.0
            s3 = 0.0
            for py in range(lo, hi + 1):
                w = weights[py - y + radius]
                s0 += src[py, x, 0] * w
                s1 += src[py, x, 1] * w
                s2 += src[py, x, 2] * w
                s3 += src[py, x, 3] * w
                wsum += w
            out[y, x, 0] = to_byte(s0 / wsum)
            out[y, x, 1] = to_byte(s1 / wsum)
            out[y, x, 2] = to_byte(s2 / wsum)
            out[y, x, 3] = to_byte(s3 / wsum)
