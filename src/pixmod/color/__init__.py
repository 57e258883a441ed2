"""
Color operations: per-channel math, RGB/HSL conversion and buffer-level passes.

Example:
    >>> from pixmod.color import hue_rotate, apply_color_matrix, SEPIA_MATRIX
    >>> hue_rotate(255.0, 0.0, 0.0, 120.0)  # red -> green
    (0.0, 255.0, 0.0)
    >>> sepia = apply_color_matrix(buffer, SEPIA_MATRIX)
"""

from pixmod.color.apply import (
    GRAYSCALE_MATRIX,
    IDENTITY_MATRIX,
    INVERT_MATRIX,
    INVERT_OFFSET,
    MEAN_MATRIX,
    SEPIA_MATRIX,
    apply_color_matrix,
    apply_color_pass,
    mix_matrix,
)
from pixmod.color.ops import (
    brightness,
    clamp_channel,
    contrast,
    exposure,
    hsl_to_rgb,
    hue_rotate,
    luma,
    rgb_to_hsl,
    saturation,
    temperature,
    to_byte,
)

__all__ = [
    # Scalar operations
    "brightness",
    "contrast",
    "exposure",
    "saturation",
    "temperature",
    "hue_rotate",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "luma",
    "clamp_channel",
    "to_byte",
    # Buffer operations
    "apply_color_pass",
    "apply_color_matrix",
    "mix_matrix",
    # Matrices
    "IDENTITY_MATRIX",
    "GRAYSCALE_MATRIX",
    "MEAN_MATRIX",
    "SEPIA_MATRIX",
    "INVERT_MATRIX",
    "INVERT_OFFSET",
]
