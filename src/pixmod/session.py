"""Editing session: one image, one pipeline, one catalog, one history.

An :class:`EditSession` keeps two buffers: the original image and the
committed state the user has built up. Slider previews render from the
committed state without touching it; commits replace it and record a
history entry.

Example:
    >>> session = EditSession(PixelBuffer.from_array(rgb))
    >>> preview = session.preview({"brightness": 120})   # nothing recorded
    >>> session.adjust({"brightness": 120})              # recorded
    >>> session.apply_filter("sepia")
    >>> session.history.descriptions()
    ['Image Loaded', 'Adjustment', 'Applied sepia filter']
    >>> session.undo()
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pixmod.buffer import PixelBuffer
from pixmod.config.presets import get_preset
from pixmod.filters.catalog import FilterCatalog
from pixmod.geometry import crop, flip, resize, rotate
from pixmod.history import HistoryStack
from pixmod.pipeline.adjust import AdjustmentPipeline, Params

logger = logging.getLogger(__name__)


class EditSession:
    """Owns the committed image of one editing session.

    Errors from the collaborators (``UnknownFilterError``, ``NoHistoryError``,
    ``OutOfBoundsError``) propagate unchanged and leave the committed image
    as it was.

    :param image: Image to edit (cloned)
    :param pipeline: Adjustment pipeline; a fresh one by default
    :param catalog: Filter catalog; the built-ins by default
    :param history: History stack; a fresh one by default (cleared on load)
    """

    def __init__(
        self,
        image: PixelBuffer,
        pipeline: AdjustmentPipeline | None = None,
        catalog: FilterCatalog | None = None,
        history: HistoryStack | None = None,
    ):
        self.pipeline = pipeline if pipeline is not None else AdjustmentPipeline()
        self.catalog = catalog if catalog is not None else FilterCatalog()
        self.history = history if history is not None else HistoryStack()
        self.load(image)

    # ========================================================================
    # State
    # ========================================================================

    @property
    def image(self) -> PixelBuffer:
        """Copy of the committed image."""
        return self._committed.clone()

    @property
    def original(self) -> PixelBuffer:
        """Copy of the image as loaded."""
        return self._original.clone()

    def current(self) -> PixelBuffer:
        """Copy of the committed image; same as :attr:`image`."""
        return self._committed.clone()

    def load(self, image: PixelBuffer) -> None:
        """Replace the image and restart the history with "Image Loaded"."""
        self._original = image.clone()
        self._committed = image.clone()
        self.history.clear()
        self.history.push(self._committed, "Image Loaded")
        logger.info("[Session] Loaded %r", image)

    def _commit(self, buffer: PixelBuffer, description: str) -> PixelBuffer:
        self._committed = buffer
        self.history.push(buffer, description)
        logger.info("[Session] %s", description)
        return buffer.clone()

    # ========================================================================
    # Edits
    # ========================================================================

    def preview(self, params: Params) -> PixelBuffer:
        """Render ``params`` over the committed image without recording it."""
        return self.pipeline.apply(self._committed, params)

    def adjust(self, params: Params, description: str | None = None) -> PixelBuffer:
        """Render ``params`` over the committed image and commit the result.

        :param params: AdjustmentValues or ``{name: number}`` mapping
        :param description: History label, "Adjustment" by default
        :returns: Copy of the new committed image
        """
        result = self.pipeline.apply(self._committed, params)
        return self._commit(result, description or "Adjustment")

    def apply_preset(self, name: str) -> PixelBuffer:
        """Commit a named preset.

        :raises ValueError: If the preset name is unknown
        """
        values = get_preset(name)
        return self.adjust(values, f"Applied {name.lower()} preset")

    def apply_filter(self, name: str) -> PixelBuffer:
        """Commit a catalog filter.

        :raises UnknownFilterError: If the catalog has no such filter
        """
        result = self.catalog.apply(name, self._committed)
        return self._commit(result, f"Applied {name} filter")

    def crop(self, x: int, y: int, width: int, height: int) -> PixelBuffer:
        """Commit a crop; see :func:`pixmod.geometry.crop`.

        :raises OutOfBoundsError: If the rectangle misses the image
        """
        return self._commit(crop(self._committed, x, y, width, height), "Crop Applied")

    def rotate(self, degrees: float, fill: Sequence[float] = (0, 0, 0, 0)) -> PixelBuffer:
        """Commit a clockwise rotation; see :func:`pixmod.geometry.rotate`."""
        label = f"{degrees:g}"
        return self._commit(rotate(self._committed, degrees, fill), f"Rotated {label}°")

    def flip(self, horizontal: bool = True) -> PixelBuffer:
        """Commit a mirror image."""
        label = "Flipped Horizontal" if horizontal else "Flipped Vertical"
        return self._commit(flip(self._committed, horizontal), label)

    def resize(self, width: int, height: int | None = None) -> PixelBuffer:
        """Commit a resample; see :func:`pixmod.geometry.resize`.

        :raises ValueError: If a target side is < 1
        """
        result = resize(self._committed, width, height)
        return self._commit(result, f"Resized to {result.width}x{result.height}")

    # ========================================================================
    # History
    # ========================================================================

    def undo(self) -> PixelBuffer:
        """:raises NoHistoryError: If there is nothing to undo"""
        self._committed = self.history.undo()
        return self._committed.clone()

    def redo(self) -> PixelBuffer:
        """:raises NoHistoryError: If there is nothing to redo"""
        self._committed = self.history.redo()
        return self._committed.clone()

    def jump_to(self, position: int) -> PixelBuffer:
        """Make history entry ``position`` the committed image.

        :raises NoHistoryError: If ``position`` is out of range
        """
        self._committed = self.history.jump_to(position)
        return self._committed.clone()

    def reset(self) -> PixelBuffer:
        """Return to the original image and restart the history."""
        self.load(self._original)
        return self._committed.clone()

    def __repr__(self) -> str:
        return f"EditSession({self._committed!r}, history={len(self.history)})"
