"""Fluent pipeline for chaining adjustments and filters.

Example:
    >>> from pixmod import Pipeline
    >>>
    >>> pipe = (Pipeline()
    ...     .brightness(110)
    ...     .contrast(120)
    ...     .filter("vintage")
    ...     .vignette(30))
    >>>
    >>> result = pipe(buffer)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pixmod.buffer import PixelBuffer
from pixmod.config.presets import get_preset
from pixmod.config.values import AdjustmentValues
from pixmod.filters.catalog import FilterCatalog
from pixmod.pipeline.adjust import AdjustmentPipeline
from pixmod.protocols import BufferTransform


@dataclass
class Pipeline:
    """Ordered chain of adjustment, filter and custom steps.

    Steps run in the order they were added. Each adjustment step is a full
    :meth:`AdjustmentPipeline.apply`, so ``.brightness(120).brightness(120)``
    applies brightness twice rather than merging the values.

    Attributes:
        catalog: Where ``.filter()`` names are looked up
        adjuster: Runs the adjustment steps (and owns the noise generator)
    """

    catalog: FilterCatalog = field(default_factory=FilterCatalog)
    adjuster: AdjustmentPipeline = field(default_factory=AdjustmentPipeline)
    _operations: list[tuple[str, Any]] = field(default_factory=list)

    # ========================================================================
    # Adjustment Methods
    # ========================================================================

    def _adjust(self, **value: float) -> Pipeline:
        self._operations.append(("adjust", AdjustmentValues(**value)))
        return self

    def brightness(self, percent: float) -> Pipeline:
        """Add brightness adjustment.

        :param percent: Brightness percentage (100 = no change)
        :returns: Self for chaining
        """
        return self._adjust(brightness=percent)

    def contrast(self, percent: float) -> Pipeline:
        """Add contrast adjustment.

        :param percent: Contrast percentage (100 = no change)
        :returns: Self for chaining
        """
        return self._adjust(contrast=percent)

    def saturation(self, percent: float) -> Pipeline:
        """Add saturation adjustment.

        :param percent: Saturation percentage (0 = gray, 100 = no change)
        :returns: Self for chaining
        """
        return self._adjust(saturation=percent)

    def hue(self, degrees: float) -> Pipeline:
        """Add hue rotation.

        :param degrees: Hue shift in degrees (-180 to 180)
        :returns: Self for chaining
        """
        return self._adjust(hue=degrees)

    def exposure(self, amount: float) -> Pipeline:
        """Add exposure adjustment.

        :param amount: Exposure in hundredths of a stop (-100 to 100)
        :returns: Self for chaining
        """
        return self._adjust(exposure=amount)

    def temperature(self, amount: float) -> Pipeline:
        """Add temperature adjustment.

        :param amount: -100 cool to 100 warm, 0 = neutral
        :returns: Self for chaining
        """
        return self._adjust(temperature=amount)

    def blur(self, radius: float) -> Pipeline:
        """Add box blur.

        :param radius: Blur radius in pixels (0 to 20)
        :returns: Self for chaining
        """
        return self._adjust(blur=radius)

    def sharpen(self, amount: float) -> Pipeline:
        """Add sharpening.

        :param amount: Sharpen strength in percent (0 to 100)
        :returns: Self for chaining
        """
        return self._adjust(sharpen=amount)

    def vignette(self, amount: float) -> Pipeline:
        """Add vignette.

        :param amount: Edge darkening in percent (0 to 100)
        :returns: Self for chaining
        """
        return self._adjust(vignette=amount)

    def noise(self, amount: float) -> Pipeline:
        """Add uniform noise.

        :param amount: Noise span (0 to 100)
        :returns: Self for chaining
        """
        return self._adjust(noise=amount)

    def values(self, values: AdjustmentValues) -> Pipeline:
        """Add adjustment values directly.

        :param values: AdjustmentValues to apply
        :returns: Self for chaining
        """
        self._operations.append(("adjust", values))
        return self

    def preset(self, name: str) -> Pipeline:
        """Add a named preset as one adjustment step.

        :raises ValueError: If the preset name is unknown
        """
        return self.values(get_preset(name))

    # ========================================================================
    # Filter Methods
    # ========================================================================

    def filter(self, name: str) -> Pipeline:
        """Add a named filter from the catalog.

        :param name: Filter name
        :returns: Self for chaining
        :raises UnknownFilterError: If the catalog has no such filter
        """
        self.catalog.get(name)
        self._operations.append(("filter", name))
        return self

    def then(self, transform: BufferTransform) -> Pipeline:
        """Add a custom ``PixelBuffer -> PixelBuffer`` step.

        :returns: Self for chaining
        """
        if not isinstance(transform, BufferTransform):
            raise TypeError(f"Step must be callable, got {type(transform).__name__}")
        self._operations.append(("custom", transform))
        return self

    # ========================================================================
    # Execution
    # ========================================================================

    def __call__(self, buffer: PixelBuffer) -> PixelBuffer:
        """Execute pipeline on a buffer.

        :param buffer: Buffer to process (not modified)
        :returns: New buffer
        """
        result = buffer
        for op_type, op_value in self._operations:
            if op_type == "adjust":
                result = self.adjuster.apply(result, op_value)
            elif op_type == "filter":
                result = self.catalog.apply(op_value, result)
            elif op_type == "custom":
                result = op_value(result)

        if result is buffer:
            result = buffer.clone()
        return result

    def reset(self) -> Pipeline:
        """Remove all steps.

        :returns: Self for chaining
        """
        self._operations.clear()
        return self

    def is_neutral(self) -> bool:
        """True if no step would change a buffer."""
        return all(
            op_type == "adjust" and op_value.is_neutral() for op_type, op_value in self._operations
        )

    def __len__(self) -> int:
        return len(self._operations)

    def __repr__(self) -> str:
        steps = ", ".join(
            op_value if op_type == "filter" else op_type for op_type, op_value in self._operations
        )
        return f"Pipeline([{steps}])"
