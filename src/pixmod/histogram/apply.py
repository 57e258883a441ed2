"""Histogram computation for pixel buffers."""

from __future__ import annotations

import logging

import numpy as np

from pixmod.buffer import PixelBuffer
from pixmod.histogram.kernels import compute_stats_rgb_numba, histogram_rgb_numba
from pixmod.histogram.result import HistogramResult, make_bin_edges

logger = logging.getLogger(__name__)


def compute_histogram(buffer: PixelBuffer, n_bins: int = 256) -> HistogramResult:
    """Histogram and statistics of the R, G, B channels.

    Alpha is ignored.

    :param buffer: Buffer to analyze
    :param n_bins: Number of bins, 1..256
    :returns: HistogramResult
    :raises ValueError: If ``n_bins`` is outside 1..256

    Example:
        >>> result = compute_histogram(buffer)
        >>> result.counts.shape
        (3, 256)
    """
    n_bins = int(n_bins)
    if not 1 <= n_bins <= 256:
        raise ValueError(f"n_bins must be in [1, 256], got {n_bins}")

    if buffer.size == 0:
        return HistogramResult.empty(n_bins)

    pixels = buffer.pixels
    counts = np.zeros((3, n_bins), dtype=np.int64)
    histogram_rgb_numba(pixels, n_bins, counts)

    mean = np.empty(3, dtype=np.float64)
    std = np.empty(3, dtype=np.float64)
    min_val = np.empty(3, dtype=np.float64)
    max_val = np.empty(3, dtype=np.float64)
    compute_stats_rgb_numba(pixels, mean, std, min_val, max_val)

    logger.debug("[Histogram] %r: %d bins, mean=%s", buffer, n_bins, np.round(mean, 2))
    return HistogramResult(
        counts=counts,
        bin_edges=make_bin_edges(n_bins),
        mean=mean,
        std=std,
        min_val=min_val,
        max_val=max_val,
        n_samples=buffer.size,
    )
