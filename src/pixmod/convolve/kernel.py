"""Convolution kernel value type and factories."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np


def gaussian_weights_1d(radius: int, sigma: float | None = None) -> np.ndarray:
    """Unnormalized 1-D Gaussian weights for offsets ``-radius..radius``.

    :param radius: Half-width in pixels (>= 0)
    :param sigma: Standard deviation; defaults to ``max(radius / 2, 0.5)``
    """
    radius = int(radius)
    if radius < 0:
        raise ValueError(f"radius must be >= 0, got {radius}")
    if sigma is None:
        sigma = max(radius / 2.0, 0.5)
    if sigma <= 0:
        raise ValueError(f"sigma must be positive, got {sigma}")

    offsets = np.arange(-radius, radius + 1, dtype=np.float64)
    return np.exp(-(offsets**2) / (2.0 * sigma * sigma))


@dataclass(frozen=True, eq=False)
class Kernel:
    """Immutable square convolution kernel.

    The output of a convolution is ``clamp(sum(weight * tap) * factor + bias)``.

    Attributes:
        weights: Square matrix of signed weights with odd side >= 3
        factor: Scalar applied to the weighted sum
        bias: Constant added after scaling
        name: Label used in logs and reprs
    """

    weights: np.ndarray
    factor: float = 1.0
    bias: float = 0.0
    name: str = field(default="custom")

    def __post_init__(self):
        w = np.array(self.weights, dtype=np.float64)
        if w.ndim != 2 or w.shape[0] != w.shape[1]:
            raise ValueError(f"Kernel must be a square matrix, got shape {w.shape}")
        if w.shape[0] < 3 or w.shape[0] % 2 == 0:
            raise ValueError(f"Kernel side must be odd and >= 3, got {w.shape[0]}")
        w.setflags(write=False)
        object.__setattr__(self, "weights", w)
        object.__setattr__(self, "factor", float(self.factor))
        object.__setattr__(self, "bias", float(self.bias))

    @property
    def size(self) -> int:
        """Side length."""
        return self.weights.shape[0]

    @property
    def radius(self) -> int:
        return self.size // 2

    # ========================================================================
    # Factories
    # ========================================================================

    @classmethod
    def from_rows(
        cls, rows: Sequence[Sequence[float]], factor: float = 1.0, bias: float = 0.0
    ) -> Kernel:
        """Build a kernel from nested lists."""
        return cls(np.asarray(rows, dtype=np.float64), factor=factor, bias=bias)

    @classmethod
    def identity(cls, size: int = 3) -> Kernel:
        w = np.zeros((size, size), dtype=np.float64)
        w[size // 2, size // 2] = 1.0
        return cls(w, name="identity")

    @classmethod
    def sharpen(cls) -> Kernel:
        return cls(
            np.array([[0, -1, 0], [-1, 5, -1], [0, -1, 0]], dtype=np.float64),
            name="sharpen",
        )

    @classmethod
    def emboss(cls) -> Kernel:
        """Emboss kernel; bias 128 keeps flat regions mid-gray."""
        return cls(
            np.array([[-2, -1, 0], [-1, 1, 1], [0, 1, 2]], dtype=np.float64),
            bias=128.0,
            name="emboss",
        )

    @classmethod
    def edge_detect(cls) -> Kernel:
        return cls(
            np.array([[-1, -1, -1], [-1, 8, -1], [-1, -1, -1]], dtype=np.float64),
            name="edge_detect",
        )

    @classmethod
    def box(cls, radius: int) -> Kernel:
        """Box kernel of side ``2 * radius + 1``.

        ``factor`` is ``1 / side**2``, which is exact only away from the edges;
        :func:`pixmod.convolve.convolve` with ``normalize=True`` divides by the
        in-bounds tap count per pixel instead.
        """
        radius = int(radius)
        if radius < 1:
            raise ValueError(f"Box kernel radius must be >= 1, got {radius}")
        side = 2 * radius + 1
        return cls(np.ones((side, side), dtype=np.float64), factor=1.0 / (side * side), name="box")

    @classmethod
    def gaussian(cls, radius: int, sigma: float | None = None) -> Kernel:
        """Gaussian kernel of side ``2 * radius + 1`` with weights summing to 1."""
        radius = int(radius)
        if radius < 1:
            raise ValueError(f"Gaussian kernel radius must be >= 1, got {radius}")
        g = gaussian_weights_1d(radius, sigma)
        w = np.outer(g, g)
        return cls(w / w.sum(), name="gaussian")

    def __repr__(self) -> str:
        return (
            f"Kernel({self.name}, {self.size}x{self.size}, "
            f"factor={self.factor}, bias={self.bias})"
        )
