"""Histogram result dataclass with analysis methods."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

CHANNEL_NAMES = ("r", "g", "b")


@dataclass
class HistogramResult:
    """Per-channel histogram of a buffer with analysis methods.

    Attributes:
        counts: Bin counts, shape [3, n_bins] in R, G, B order
        bin_edges: Bin edges in channel units, shape [n_bins + 1]
        mean: Per-channel mean [3]
        std: Per-channel population standard deviation [3]
        min_val: Per-channel minimum [3]
        max_val: Per-channel maximum [3]
        n_samples: Number of pixels

    Example:
        >>> result = compute_histogram(buffer)
        >>> print(f"Average RGB: {result.average_rgb()}")
        >>> print(f"Red peaks at {result.mode(0)}")
    """

    counts: np.ndarray
    bin_edges: np.ndarray
    mean: np.ndarray
    std: np.ndarray
    min_val: np.ndarray
    max_val: np.ndarray
    n_samples: int

    @property
    def bin_centers(self) -> np.ndarray:
        """Get bin center values.

        :return: Array of bin centers, shape [n_bins]
        """
        return (self.bin_edges[:-1] + self.bin_edges[1:]) / 2

    @property
    def n_bins(self) -> int:
        return len(self.bin_edges) - 1

    @property
    def n_channels(self) -> int:
        return self.counts.shape[0]

    def channel(self, name: str) -> np.ndarray:
        """Counts for ``"r"``, ``"g"`` or ``"b"``."""
        return self.counts[CHANNEL_NAMES.index(name.lower())]

    def percentile(self, p: float, channel: int = 0) -> float:
        """Compute percentile from histogram.

        :param p: Percentile value (0-100)
        :param channel: Channel index (0=R, 1=G, 2=B)
        :return: Bin center at the percentile
        """
        cumsum = np.cumsum(self.counts[channel])
        total = cumsum[-1]
        if total == 0:
            return float(self.bin_centers[0])

        target = total * (p / 100.0)
        idx = np.searchsorted(cumsum, target)
        idx = min(idx, len(self.bin_centers) - 1)
        return float(self.bin_centers[idx])

    def mode(self, channel: int = 0) -> float:
        """Get most frequent value (mode).

        :param channel: Channel index (0=R, 1=G, 2=B)
        :return: Bin center of most frequent bin
        """
        idx = np.argmax(self.counts[channel])
        return float(self.bin_centers[idx])

    def entropy(self, channel: int = 0) -> float:
        """Compute entropy of distribution.

        :param channel: Channel index (0=R, 1=G, 2=B)
        :return: Shannon entropy in bits
        """
        counts = self.counts[channel]
        total = counts.sum()
        if total == 0:
            return 0.0

        probs = counts / total
        # Avoid log(0)
        probs = probs[probs > 0]
        return float(-np.sum(probs * np.log2(probs)))

    def dynamic_range(self, percentile_low: float = 1.0, percentile_high: float = 99.0) -> float:
        """Compute dynamic range using percentiles averaged across channels.

        :param percentile_low: Low percentile (default 1%)
        :param percentile_high: High percentile (default 99%)
        :return: Dynamic range (high - low)
        """
        low = np.mean([self.percentile(percentile_low, c) for c in range(self.n_channels)])
        high = np.mean([self.percentile(percentile_high, c) for c in range(self.n_channels)])
        return float(high - low)

    def average_rgb(self) -> tuple[int, int, int]:
        """Per-channel mean rounded to the nearest integer."""
        r, g, b = (int(np.floor(m + 0.5)) for m in self.mean)
        return (r, g, b)

    def value_range(self) -> dict[str, tuple[int, int]]:
        """``{"r": (min, max), ...}``."""
        return {
            name: (int(self.min_val[c]), int(self.max_val[c]))
            for c, name in enumerate(CHANNEL_NAMES)
        }

    @classmethod
    def empty(cls, n_bins: int = 256) -> HistogramResult:
        """Create empty histogram result.

        :param n_bins: Number of bins
        :return: Empty HistogramResult
        """
        return cls(
            counts=np.zeros((3, n_bins), dtype=np.int64),
            bin_edges=make_bin_edges(n_bins),
            mean=np.zeros(3, dtype=np.float64),
            std=np.zeros(3, dtype=np.float64),
            min_val=np.zeros(3, dtype=np.float64),
            max_val=np.zeros(3, dtype=np.float64),
            n_samples=0,
        )


def make_bin_edges(n_bins: int) -> np.ndarray:
    """Edges spanning the channel range; integer values sit at bin centers when n_bins=256."""
    return np.linspace(-0.5, 255.5, n_bins + 1)
