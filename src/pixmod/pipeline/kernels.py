"""Numba kernels for the spatial effects of the adjustment pipeline."""

from __future__ import annotations

import math

import numpy as np
from numba import njit, prange
from numpy.typing import NDArray

from pixmod.color.ops import to_byte


@njit(parallel=True, cache=True, nogil=True)
def vignette_numba(
    src: NDArray[np.uint8],
    strength: float,
    out: NDArray[np.uint8],
) -> None:
    """
    Radial darkening toward the corners.

    The darkening factor grows linearly from 0 at the buffer midpoint to
    ``strength`` at half the longer dimension and stays there beyond it.

    Args:
        src: Source pixels [H, W, 4]
        strength: Darkening at and beyond the radius, in [0, 1]
        out: Output pixels [H, W, 4] (modified in-place)
    """
    height = src.shape[0]
    width = src.shape[1]
    cx = width / 2.0
    cy = height / 2.0
    radius = max(width, height) / 2.0

    for y in prange(height):
        dy = y + 0.5 - cy
        for x in range(width):
            dx = x + 0.5 - cx
            t = math.sqrt(dx * dx + dy * dy) / radius
            if t > 1.0:
                t = 1.0
            keep = 1.0 - strength * t
            out[y, x, 0] = to_byte(src[y, x, 0] * keep)
            out[y, x, 1] = to_byte(src[y, x, 1] * keep)
            out[y, x, 2] = to_byte(src[y, x, 2] * keep)
            out[y, x, 3] = src[y, x, 3]


@njit(parallel=True, cache=True, nogil=True)
def add_noise_numba(
    src: NDArray[np.uint8],
    offsets: NDArray[np.float64],
    out: NDArray[np.uint8],
) -> None:
    """
    Add precomputed per-channel offsets to the color channels.

    Args:
        src: Source pixels [H, W, 4]
        offsets: Offsets for R, G, B [H, W, 3]
        out: Output pixels [H, W, 4] (modified in-place)
    """
    height = src.shape[0]
    width = src.shape[1]

    for y in prange(height):
        for x in range(width):
            for c in range(3):
                out[y, x, c] = to_byte(src[y, x, c] + offsets[y, x, c])
            out[y, x, 3] = src[y, x, 3]
