"""Apply color operations to whole pixel buffers.

Thin wrappers that allocate the output buffer and dispatch to the Numba
kernels in :mod:`pixmod.color.kernels`. The source buffer is never modified.
"""

from __future__ import annotations

import logging

import numpy as np

from pixmod.buffer import PixelBuffer
from pixmod.color.kernels import color_matrix_numba, color_pass_numba
from pixmod.config.values import AdjustmentValues

logger = logging.getLogger(__name__)

IDENTITY_MATRIX = np.eye(3, dtype=np.float64)

# Luma weights used by the grayscale filter
GRAYSCALE_MATRIX = np.array(
    [
        [0.299, 0.587, 0.114],
        [0.299, 0.587, 0.114],
        [0.299, 0.587, 0.114],
    ],
    dtype=np.float64,
)

# Plain channel mean ("black & white")
MEAN_MATRIX = np.full((3, 3), 1.0 / 3.0, dtype=np.float64)

SEPIA_MATRIX = np.array(
    [
        [0.393, 0.769, 0.189],
        [0.349, 0.686, 0.168],
        [0.272, 0.534, 0.131],
    ],
    dtype=np.float64,
)

INVERT_MATRIX = -IDENTITY_MATRIX
INVERT_OFFSET = np.full(3, 255.0, dtype=np.float64)


def apply_color_pass(source: PixelBuffer, values: AdjustmentValues) -> PixelBuffer:
    """Run the per-pixel adjustment pass (brightness through temperature).

    :param source: Buffer to read
    :param values: Clamped adjustment values; spatial fields are ignored here
    :returns: New buffer
    """
    if not values.has_color_pass():
        return source.clone()

    out = np.empty_like(source.pixels)
    color_pass_numba(
        source.pixels,
        out,
        float(values.brightness),
        float(values.contrast),
        float(values.saturation),
        float(values.hue),
        float(values.exposure),
        float(values.temperature),
    )
    return PixelBuffer._wrap(out)


def apply_color_matrix(
    source: PixelBuffer,
    matrix: np.ndarray,
    offset: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0),
) -> PixelBuffer:
    """Apply ``clamp(matrix @ rgb + offset)`` to every pixel; alpha is kept.

    :param source: Buffer to read
    :param matrix: 3x3 color matrix
    :param offset: Per-channel offset added after the matrix
    :returns: New buffer
    :raises ValueError: If matrix is not 3x3 or offset does not have 3 entries
    """
    matrix = np.ascontiguousarray(matrix, dtype=np.float64)
    offset = np.ascontiguousarray(offset, dtype=np.float64)
    if matrix.shape != (3, 3):
        raise ValueError(f"Color matrix must be 3x3, got {matrix.shape}")
    if offset.shape != (3,):
        raise ValueError(f"Color offset must have 3 entries, got {offset.shape}")

    out = np.empty_like(source.pixels)
    color_matrix_numba(source.pixels, matrix, offset, out)
    return PixelBuffer._wrap(out)


def mix_matrix(matrix: np.ndarray, amount: float) -> np.ndarray:
    """Interpolate between the identity matrix and ``matrix``.

    ``amount=0`` gives identity, ``amount=1`` gives ``matrix``; used for partial
    effects such as 22% sepia.
    """
    amount = max(0.0, min(1.0, float(amount)))
    return IDENTITY_MATRIX + (np.asarray(matrix, dtype=np.float64) - IDENTITY_MATRIX) * amount
