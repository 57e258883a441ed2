"""
Numba-optimized kernels for per-pixel color operations.

Rows are processed in parallel; each output row depends only on the same
source row, so workers write disjoint regions.
"""

from __future__ import annotations

import numpy as np
from numba import njit, prange
from numpy.typing import NDArray

from pixmod.color.ops import brightness as brightness_op
from pixmod.color.ops import contrast as contrast_op
from pixmod.color.ops import exposure as exposure_op
from pixmod.color.ops import hue_rotate, to_byte
from pixmod.color.ops import saturation as saturation_op
from pixmod.color.ops import temperature as temperature_op


@njit(parallel=True, cache=True, nogil=True)
def color_pass_numba(
    src: NDArray[np.uint8],
    out: NDArray[np.uint8],
    brightness: float,
    contrast: float,
    saturation: float,
    hue: float,
    exposure: float,
    temperature: float,
) -> None:
    """
    Apply brightness -> contrast -> saturation -> hue -> exposure -> temperature.

    Neutral parameters are skipped. Alpha is copied unchanged.

    Args:
        src: Source pixels [H, W, 4]
        out: Output pixels [H, W, 4] (modified in-place)
        brightness: Percentage, 100 = neutral
        contrast: Percentage, 100 = neutral
        saturation: Percentage, 100 = neutral
        hue: Degrees, 0 = neutral
        exposure: Hundredths of a stop, 0 = neutral
        temperature: Warm/cool amount, 0 = neutral
    """
    height = src.shape[0]
    width = src.shape[1]

    do_brightness = brightness != 100.0
    do_contrast = contrast != 100.0
    do_saturation = saturation != 100.0
    do_hue = hue != 0.0
    do_exposure = exposure != 0.0
    do_temperature = temperature != 0.0

    for y in prange(height):
        for x in range(width):
            r = float(src[y, x, 0])
            g = float(src[y, x, 1])
            b = float(src[y, x, 2])

            if do_brightness:
                r = brightness_op(r, brightness)
                g = brightness_op(g, brightness)
                b = brightness_op(b, brightness)

            if do_contrast:
                r = contrast_op(r, contrast)
                g = contrast_op(g, contrast)
                b = contrast_op(b, contrast)

            if do_saturation:
                r, g, b = saturation_op(r, g, b, saturation)

            if do_hue:
                r, g, b = hue_rotate(r, g, b, hue)

            if do_exposure:
                r = exposure_op(r, exposure)
                g = exposure_op(g, exposure)
                b = exposure_op(b, exposure)

            if do_temperature:
                r, g, b = temperature_op(r, g, b, temperature)

            out[y, x, 0] = to_byte(r)
            out[y, x, 1] = to_byte(g)
            out[y, x, 2] = to_byte(b)
            out[y, x, 3] = src[y, x, 3]


@njit(parallel=True, cache=True, nogil=True)
def color_matrix_numba(
    src: NDArray[np.uint8],
    matrix: NDArray[np.float64],
    offset: NDArray[np.float64],
    out: NDArray[np.uint8],
) -> None:
    """
    Apply a 3x3 color matrix plus offset to every pixel.

    ``out_rgb = clamp(matrix @ src_rgb + offset)``; alpha is copied unchanged.

    Args:
        src: Source pixels [H, W, 4]
        matrix: Color matrix [3, 3]
        offset: Per-channel offset [3]
        out: Output pixels [H, W, 4] (modified in-place)
    """
    height = src.shape[0]
    width = src.shape[1]

    for y in prange(height):
        for x in range(width):
            r = float(src[y, x, 0])
            g = float(src[y, x, 1])
            b = float(src[y, x, 2])

            for c in range(3):
                v = matrix[c, 0] * r + matrix[c, 1] * g + matrix[c, 2] * b + offset[c]
                out[y, x, c] = to_byte(v)

            out[y, x, 3] = src[y, x, 3]
