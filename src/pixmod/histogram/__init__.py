"""Histogram and channel statistics of pixel buffers.

Example:
    >>> from pixmod.histogram import compute_histogram
    >>> result = compute_histogram(buffer)
    >>> result.average_rgb()
    (128, 64, 32)
"""

from pixmod.histogram.apply import compute_histogram
from pixmod.histogram.result import HistogramResult

__all__ = ["compute_histogram", "HistogramResult"]
