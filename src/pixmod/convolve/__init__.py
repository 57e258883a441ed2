"""Convolution engine: kernels, generic convolution, blurs and sharpen."""

from pixmod.convolve.apply import box_blur, convolve, gaussian_blur, sharpen
from pixmod.convolve.kernel import Kernel, gaussian_weights_1d

__all__ = [
    "Kernel",
    "gaussian_weights_1d",
    "convolve",
    "box_blur",
    "gaussian_blur",
    "sharpen",
]
