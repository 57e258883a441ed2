"""Fixed-order adjustment pipeline.

:class:`AdjustmentPipeline` turns a source buffer and a set of slider values
into a new buffer. Stages run in this order, each skipped when neutral:

1. color pass: brightness, contrast, saturation, hue, exposure, temperature
2. box blur with radius ``round(blur)``
3. sharpen blended by ``sharpen / 100``
4. vignette with edge darkening ``vignette / 100``
5. uniform noise in ``[-noise / 2, +noise / 2]`` per color channel

Example:
    >>> pipeline = AdjustmentPipeline(seed=0)
    >>> out = pipeline.apply(buffer, {"brightness": 120, "vignette": 40})
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any

import numpy as np

from pixmod.buffer import PixelBuffer
from pixmod.color.apply import apply_color_pass
from pixmod.config.presets import get_preset
from pixmod.config.values import AdjustmentValues
from pixmod.convolve import box_blur, sharpen
from pixmod.pipeline.kernels import add_noise_numba, vignette_numba

logger = logging.getLogger(__name__)

Params = AdjustmentValues | Mapping[str, Any] | None


# ============================================================================
# Spatial effects
# ============================================================================


def apply_vignette(source: PixelBuffer, amount: float) -> PixelBuffer:
    """Darken toward the corners.

    :param source: Buffer to read
    :param amount: Edge darkening in percent, clamped to [0, 100]
    :returns: New buffer
    """
    strength = max(0.0, min(100.0, float(amount))) / 100.0
    if strength == 0.0 or source.size == 0:
        return source.clone()

    out = np.empty_like(source.pixels)
    vignette_numba(source.pixels, strength, out)
    return PixelBuffer._wrap(out)


def apply_noise(source: PixelBuffer, amount: float, rng: np.random.Generator) -> PixelBuffer:
    """Add uniform noise in ``[-amount / 2, +amount / 2]`` to each color channel.

    :param source: Buffer to read
    :param amount: Noise span, clamped to [0, 100]
    :param rng: Random generator the offsets are drawn from
    :returns: New buffer
    """
    amount = max(0.0, min(100.0, float(amount)))
    if amount == 0.0 or source.size == 0:
        return source.clone()

    half = amount / 2.0
    offsets = rng.uniform(-half, half, size=(source.height, source.width, 3))
    out = np.empty_like(source.pixels)
    add_noise_numba(source.pixels, offsets, out)
    return PixelBuffer._wrap(out)


# ============================================================================
# Pipeline
# ============================================================================


class AdjustmentPipeline:
    """Apply slider values to a buffer in a fixed order.

    The pipeline owns the random generator used by the noise stage, so two
    pipelines built with the same ``seed`` produce the same output for the
    same sequence of calls.

    :param seed: Seed for the noise generator; None draws fresh entropy
    """

    def __init__(self, seed: int | None = None):
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def reseed(self, seed: int | None = None) -> None:
        """Restart the noise generator."""
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    def apply(
        self, source: PixelBuffer, params: Params = None, seed: int | None = None
    ) -> PixelBuffer:
        """Render ``source`` with ``params``.

        Out-of-range values are clamped. ``source`` is never modified.

        :param source: Buffer to read
        :param params: AdjustmentValues or ``{name: number}`` mapping; None is neutral
        :param seed: Noise seed for this call only; None uses the pipeline's generator
        :returns: New buffer; pixel-identical to ``source`` when all values are neutral
        :raises ValueError: If ``params`` has an unknown key or a non-numeric value
        """
        values = AdjustmentValues.coerce(params)
        if values.is_neutral():
            logger.debug("[Adjust] Neutral parameters, returning copy of %r", source)
            return source.clone()

        start = time.perf_counter()
        out = source
        stages = []

        if values.has_color_pass():
            out = apply_color_pass(out, values)
            stages.append("color")
            logger.debug(
                "[Adjust] Color pass: brightness=%.1f contrast=%.1f saturation=%.1f "
                "hue=%.1f exposure=%.1f temperature=%.1f",
                values.brightness,
                values.contrast,
                values.saturation,
                values.hue,
                values.exposure,
                values.temperature,
            )

        radius = int(values.blur + 0.5)
        if radius > 0:
            out = box_blur(out, radius)
            stages.append("blur")
            logger.debug("[Adjust] Blur radius=%d", radius)

        if values.sharpen > 0:
            out = sharpen(out, values.sharpen / 100.0)
            stages.append("sharpen")
            logger.debug("[Adjust] Sharpen strength=%.2f", values.sharpen / 100.0)

        if values.vignette > 0:
            out = apply_vignette(out, values.vignette)
            stages.append("vignette")
            logger.debug("[Adjust] Vignette amount=%.1f", values.vignette)

        if values.noise > 0:
            rng = self._rng if seed is None else np.random.default_rng(seed)
            out = apply_noise(out, values.noise, rng)
            stages.append("noise")
            logger.debug("[Adjust] Noise amount=%.1f", values.noise)

        if out is source:
            # Every active value rounded away (e.g. blur < 0.5)
            out = source.clone()

        logger.info(
            "[Adjust] Applied %s to %r in %.1f ms",
            "+".join(stages) or "nothing",
            source,
            (time.perf_counter() - start) * 1000.0,
        )
        return out

    def apply_preset(self, source: PixelBuffer, name: str, seed: int | None = None) -> PixelBuffer:
        """Render ``source`` with a named preset from :mod:`pixmod.config.presets`.

        :raises ValueError: If the preset name is unknown
        """
        return self.apply(source, get_preset(name), seed=seed)

    def __call__(self, source: PixelBuffer, params: Params = None) -> PixelBuffer:
        return self.apply(source, params)

    def __repr__(self) -> str:
        return f"AdjustmentPipeline(seed={self._seed})"
