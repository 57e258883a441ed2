"""Buffer-level convolution operations.

Each function allocates a new output buffer and dispatches to the Numba
kernels in :mod:`pixmod.convolve.kernels`. Taps that fall outside the buffer
are skipped; blurs divide by the in-bounds weight so edges keep their
brightness.
"""

from __future__ import annotations

import logging

import numpy as np

from pixmod.buffer import PixelBuffer
from pixmod.convolve.kernel import Kernel, gaussian_weights_1d
from pixmod.convolve.kernels import (
    convolve_numba,
    separable_cols_numba,
    separable_rows_numba,
)

logger = logging.getLogger(__name__)

_SHARPEN = Kernel.sharpen()


def convolve(
    source: PixelBuffer,
    kernel: Kernel,
    factor: float | None = None,
    bias: float | None = None,
    normalize: bool = False,
    include_alpha: bool = False,
) -> PixelBuffer:
    """Convolve every pixel of ``source`` with ``kernel``.

    :param source: Buffer to read
    :param kernel: Odd-sided square kernel
    :param factor: Scale for the weighted sum; defaults to ``kernel.factor``
    :param bias: Constant added after scaling; defaults to ``kernel.bias``
    :param normalize: Divide by the sum of in-bounds weights per pixel
        instead of applying ``factor``
    :param include_alpha: Convolve the alpha channel too (otherwise copied)
    :returns: New buffer
    """
    factor = kernel.factor if factor is None else float(factor)
    bias = kernel.bias if bias is None else float(bias)

    out = np.empty_like(source.pixels)
    if source.size == 0:
        return PixelBuffer._wrap(out)

    convolve_numba(
        source.pixels,
        np.array(kernel.weights, dtype=np.float64),
        factor,
        bias,
        normalize,
        include_alpha,
        out,
    )
    return PixelBuffer._wrap(out)


def _separable(source: PixelBuffer, weights: np.ndarray) -> PixelBuffer:
    out = np.empty_like(source.pixels)
    if source.size == 0:
        return PixelBuffer._wrap(out)
    tmp = np.empty(source.pixels.shape, dtype=np.float64)
    separable_rows_numba(source.pixels, weights, tmp)
    separable_cols_numba(tmp, weights, out)
    return PixelBuffer._wrap(out)


def box_blur(source: PixelBuffer, radius: int) -> PixelBuffer:
    """Box blur averaging the in-bounds ``(2r+1) x (2r+1)`` neighbourhood.

    All four channels are averaged. Computed as two 1-D passes, which is
    exact because the in-bounds neighbourhood is always a rectangle.

    :param source: Buffer to read
    :param radius: Neighbourhood half-width; ``0`` returns a copy
    :returns: New buffer
    """
    radius = int(radius)
    if radius < 0:
        raise ValueError(f"Blur radius must be >= 0, got {radius}")
    if radius == 0:
        return source.clone()

    logger.debug("[Convolve] Box blur radius=%d on %r", radius, source)
    return _separable(source, np.ones(2 * radius + 1, dtype=np.float64))


def gaussian_blur(source: PixelBuffer, radius: int, sigma: float | None = None) -> PixelBuffer:
    """Separable Gaussian blur with in-bounds weight renormalization.

    :param source: Buffer to read
    :param radius: Kernel half-width; ``0`` returns a copy
    :param sigma: Standard deviation, defaults to ``max(radius / 2, 0.5)``
    :returns: New buffer
    """
    radius = int(radius)
    if radius < 0:
        raise ValueError(f"Blur radius must be >= 0, got {radius}")
    if radius == 0:
        return source.clone()

    logger.debug("[Convolve] Gaussian blur radius=%d sigma=%s on %r", radius, sigma, source)
    return _separable(source, gaussian_weights_1d(radius, sigma))


def sharpen(source: PixelBuffer, strength: float = 1.0) -> PixelBuffer:
    """Blend the 3x3 sharpen convolution with the source.

    ``out = src + (sharpened - src) * strength`` per color channel, rounded
    and clamped. Alpha is kept.

    :param source: Buffer to read
    :param strength: Blend amount in [0, 1]; ``0`` returns a copy
    :returns: New buffer
    """
    strength = max(0.0, min(1.0, float(strength)))
    if strength == 0.0:
        return source.clone()

    sharpened = convolve(source, _SHARPEN)
    if strength == 1.0:
        return sharpened

    src = source.pixels.astype(np.float64)
    rgb = src[..., :3] + (sharpened.pixels[..., :3] - src[..., :3]) * strength
    out = source.pixels.copy()
    out[..., :3] = np.clip(np.floor(rgb + 0.5), 0, 255).astype(np.uint8)
    return PixelBuffer._wrap(out)
