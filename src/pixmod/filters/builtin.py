"""Built-in filter transforms.

Every function takes a buffer and returns a new one; none of them can fail.
The Instagram-style composites apply their steps in the listed order, one
color pass per step.
"""

from __future__ import annotations

from pixmod.buffer import PixelBuffer
from pixmod.color.apply import (
    GRAYSCALE_MATRIX,
    INVERT_MATRIX,
    INVERT_OFFSET,
    MEAN_MATRIX,
    SEPIA_MATRIX,
    apply_color_matrix,
    apply_color_pass,
    mix_matrix,
)
from pixmod.config.values import AdjustmentValues
from pixmod.convolve import Kernel, convolve

_EMBOSS = Kernel.emboss()
_SHARPEN = Kernel.sharpen()

# Added to R, G after the sepia matrix
VINTAGE_OFFSET = (10.0, 5.0, 0.0)


def _steps(buffer: PixelBuffer, **steps: float) -> PixelBuffer:
    for name, value in steps.items():
        buffer = apply_color_pass(buffer, AdjustmentValues(**{name: value}))
    return buffer


# ============================================================================
# Simple filters
# ============================================================================


def identity(buffer: PixelBuffer) -> PixelBuffer:
    return buffer.clone()


def grayscale(buffer: PixelBuffer) -> PixelBuffer:
    return apply_color_matrix(buffer, GRAYSCALE_MATRIX)


def black_white(buffer: PixelBuffer) -> PixelBuffer:
    return apply_color_matrix(buffer, MEAN_MATRIX)


def invert(buffer: PixelBuffer) -> PixelBuffer:
    return apply_color_matrix(buffer, INVERT_MATRIX, INVERT_OFFSET)


def sepia(buffer: PixelBuffer) -> PixelBuffer:
    return apply_color_matrix(buffer, SEPIA_MATRIX)


def vintage(buffer: PixelBuffer) -> PixelBuffer:
    """Sepia with a warm red/green lift."""
    return apply_color_matrix(buffer, SEPIA_MATRIX, VINTAGE_OFFSET)


def emboss(buffer: PixelBuffer) -> PixelBuffer:
    return convolve(buffer, _EMBOSS)


def sharpen(buffer: PixelBuffer) -> PixelBuffer:
    return convolve(buffer, _SHARPEN)


# ============================================================================
# Composites
# ============================================================================


def clarendon(buffer: PixelBuffer) -> PixelBuffer:
    return _steps(buffer, brightness=110, contrast=120, saturation=135)


def lark(buffer: PixelBuffer) -> PixelBuffer:
    return _steps(buffer, brightness=110, contrast=90, saturation=110)


def moon(buffer: PixelBuffer) -> PixelBuffer:
    return _steps(grayscale(buffer), contrast=110, brightness=110)


def reyes(buffer: PixelBuffer) -> PixelBuffer:
    toned = apply_color_matrix(buffer, mix_matrix(SEPIA_MATRIX, 0.22))
    return _steps(toned, contrast=85, brightness=110, saturation=75)


def juno(buffer: PixelBuffer) -> PixelBuffer:
    return _steps(buffer, contrast=115, brightness=110, saturation=110, hue=-10)


# name -> (transform, display name, description)
BUILTIN_FILTERS = {
    "none": (identity, "None", "Unmodified copy"),
    "grayscale": (grayscale, "Grayscale", "Luma-weighted gray"),
    "black_white": (black_white, "Black & White", "Plain channel mean"),
    "invert": (invert, "Invert", "255 minus each color channel"),
    "sepia": (sepia, "Sepia", "Classic sepia tone"),
    "vintage": (vintage, "Vintage", "Sepia with a warm lift"),
    "clarendon": (clarendon, "Clarendon", "Brighter, punchy contrast and color"),
    "lark": (lark, "Lark", "Bright and soft"),
    "moon": (moon, "Moon", "Bright monochrome"),
    "reyes": (reyes, "Reyes", "Dusty, faded warmth"),
    "juno": (juno, "Juno", "Contrasty with a cool hue shift"),
    "emboss": (emboss, "Emboss", "Relief effect on mid-gray"),
    "sharpen": (sharpen, "Sharpen", "Full-strength 3x3 sharpen"),
}
