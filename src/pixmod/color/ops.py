"""
Per-channel and per-pixel color operations.

Every function takes and returns channel values on the [0, 255] scale. The
arithmetic may leave that range internally; results are clamped before they
are returned. Functions are compiled with Numba so buffer kernels can call
them per pixel, and remain callable from plain Python.

HSL components (hue, saturation, lightness) are on the [0, 1] scale.
"""

from __future__ import annotations

from numba import njit

# ITU-R BT.601 weights
SATURATION_LUMA = (0.2989, 0.5870, 0.1140)
GRAYSCALE_LUMA = (0.299, 0.587, 0.114)


@njit(cache=True, nogil=True)
def clamp_channel(v: float) -> float:
    """Clamp a channel value to [0, 255]."""
    if v < 0.0:
        return 0.0
    if v > 255.0:
        return 255.0
    return v


@njit(cache=True, nogil=True)
def to_byte(v: float) -> int:
    """Clamp and round a channel value to the nearest integer in [0, 255]."""
    return int(clamp_channel(v) + 0.5)


@njit(cache=True, nogil=True)
def brightness(v: float, pct: float) -> float:
    """Scale a channel by ``pct`` percent (100 = unchanged)."""
    return clamp_channel(v * pct / 100.0)


@njit(cache=True, nogil=True)
def contrast(v: float, pct: float) -> float:
    """Stretch a channel around mid-gray 128 by ``pct`` percent (100 = unchanged)."""
    return clamp_channel((v - 128.0) * pct / 100.0 + 128.0)


@njit(cache=True, nogil=True)
def exposure(v: float, stops: float) -> float:
    """Scale a channel by ``2 ** (stops / 100)``; 100 is one stop brighter."""
    return clamp_channel(v * 2.0 ** (stops / 100.0))


@njit(cache=True, nogil=True)
def luma(r: float, g: float, b: float) -> float:
    """Perceptual brightness with 0.299/0.587/0.114 weights."""
    return 0.299 * r + 0.587 * g + 0.114 * b


@njit(cache=True, nogil=True)
def saturation(r: float, g: float, b: float, pct: float) -> tuple[float, float, float]:
    """Blend each channel toward (pct < 100) or away from (pct > 100) the pixel's luma."""
    gray = 0.2989 * r + 0.5870 * g + 0.1140 * b
    factor = pct / 100.0
    return (
        clamp_channel(gray + factor * (r - gray)),
        clamp_channel(gray + factor * (g - gray)),
        clamp_channel(gray + factor * (b - gray)),
    )


@njit(cache=True, nogil=True)
def temperature(r: float, g: float, b: float, amount: float) -> tuple[float, float, float]:
    """Warm/cool shift.

    Warm (amount > 0) lifts red by ``amount * 0.5`` and green by ``amount * 0.3``;
    cool (amount < 0) lifts green by ``|amount| * 0.3`` and blue by ``|amount| * 0.5``.
    The warm side never touches blue.
    """
    nr = r * 1.0
    ng = g * 1.0
    nb = b * 1.0
    if amount > 0.0:
        nr += amount * 0.5
        ng += amount * 0.3
    elif amount < 0.0:
        ng += -amount * 0.3
        nb += -amount * 0.5
    return (clamp_channel(nr), clamp_channel(ng), clamp_channel(nb))


@njit(cache=True, nogil=True)
def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert 0-255 RGB to HSL with all components in [0, 1].

    When all channels are equal, hue and saturation are both 0.
    """
    rn = r / 255.0
    gn = g / 255.0
    bn = b / 255.0
    cmax = max(rn, gn, bn)
    cmin = min(rn, gn, bn)
    lightness = (cmax + cmin) / 2.0

    if cmax == cmin:
        return (0.0, 0.0, lightness)

    d = cmax - cmin
    if lightness > 0.5:
        sat = d / (2.0 - cmax - cmin)
    else:
        sat = d / (cmax + cmin)

    if cmax == rn:
        hue = (gn - bn) / d + (6.0 if gn < bn else 0.0)
    elif cmax == gn:
        hue = (bn - rn) / d + 2.0
    else:
        hue = (rn - gn) / d + 4.0

    return (hue / 6.0, sat, lightness)


@njit(cache=True, nogil=True)
def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


@njit(cache=True, nogil=True)
def hsl_to_rgb(h: float, s: float, lightness: float) -> tuple[float, float, float]:
    """Convert HSL (components in [0, 1]) to 0-255 RGB."""
    if s == 0.0:
        v = lightness * 255.0
        return (v, v, v)

    if lightness < 0.5:
        q = lightness * (1.0 + s)
    else:
        q = lightness + s - lightness * s
    p = 2.0 * lightness - q

    return (
        _hue_to_channel(p, q, h + 1.0 / 3.0) * 255.0,
        _hue_to_channel(p, q, h) * 255.0,
        _hue_to_channel(p, q, h - 1.0 / 3.0) * 255.0,
    )


@njit(cache=True, nogil=True)
def hue_rotate(r: float, g: float, b: float, degrees: float) -> tuple[float, float, float]:
    """Rotate hue by ``degrees`` through HSL space."""
    h, s, lightness = rgb_to_hsl(r, g, b)
    h = (h + degrees / 360.0) % 1.0
    nr, ng, nb = hsl_to_rgb(h, s, lightness)
    return (clamp_channel(nr), clamp_channel(ng), clamp_channel(nb))
