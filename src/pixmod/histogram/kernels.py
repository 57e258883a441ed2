"""Numba-optimized histogram computation kernels."""

from __future__ import annotations

import numpy as np
from numba import njit
from numpy.typing import NDArray


# Not using parallel=True because histogram accumulation has race conditions
@njit(cache=True, nogil=True)
def histogram_rgb_numba(
    pixels: NDArray[np.uint8],
    n_bins: int,
    out: NDArray[np.int64],
) -> None:
    """Count R, G, B channel values of an RGBA buffer into ``n_bins`` bins.

    Bin ``k`` covers values ``v`` with ``floor((v + 0.5) * n_bins / 256) == k``,
    so with 256 bins every value has its own bin.

    :param pixels: Input pixels [H, W, 4]
    :param n_bins: Number of bins (1..256)
    :param out: Output counts [3, n_bins] (accumulated in-place)
    """
    height = pixels.shape[0]
    width = pixels.shape[1]
    scale = n_bins / 256.0

    for y in range(height):
        for x in range(width):
            for c in range(3):
                idx = int((pixels[y, x, c] + 0.5) * scale)
                if idx >= n_bins:
                    idx = n_bins - 1
                out[c, idx] += 1


# Sequential per-channel stats - not parallelizable
@njit(cache=True, nogil=True)
def compute_stats_rgb_numba(
    pixels: NDArray[np.uint8],
    out_mean: NDArray[np.float64],
    out_std: NDArray[np.float64],
    out_min: NDArray[np.float64],
    out_max: NDArray[np.float64],
) -> None:
    """Compute per-channel statistics of the R, G, B channels.

    Uses Welford's online algorithm for numerical stability.

    :param pixels: Input pixels [H, W, 4]
    :param out_mean: Output mean [3]
    :param out_std: Output population std [3]
    :param out_min: Output min [3]
    :param out_max: Output max [3]
    """
    height = pixels.shape[0]
    width = pixels.shape[1]
    n = height * width
    if n == 0:
        for c in range(3):
            out_mean[c] = 0.0
            out_std[c] = 0.0
            out_min[c] = 0.0
            out_max[c] = 0.0
        return

    for c in range(3):
        mean = 0.0
        m2 = 0.0
        lo = 255.0
        hi = 0.0
        count = 0

        for y in range(height):
            for x in range(width):
                v = float(pixels[y, x, c])
                count += 1
                delta = v - mean
                mean += delta / count
                m2 += delta * (v - mean)
                if v < lo:
                    lo = v
                if v > hi:
                    hi = v

        out_mean[c] = mean
        out_std[c] = np.sqrt(m2 / n)
        out_min[c] = lo
        out_max[c] = hi
