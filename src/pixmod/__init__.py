"""
pixmod - Pixel Modification

Core of a raster photo editor: RGBA pixel buffers, a fixed-order adjustment
pipeline, a named filter catalog and a bounded undo history.

Features:
- Per-pixel color pass compiled with Numba: brightness, contrast, saturation,
  hue, exposure, temperature
- Spatial effects: edge-aware box blur, blended sharpen, vignette, seeded noise
- Generic odd-kernel convolution (emboss, edge detect, Gaussian)
- Filters: grayscale, black & white, invert, sepia, vintage, clarendon, lark,
  moon, reyes, juno, emboss, sharpen
- Undo/redo history capped at 50 snapshots with redo-branch pruning
- Crop, rotate, flip, blend, histogram and channel statistics

Example - EditSession (Recommended):
    >>> from pixmod import EditSession, PixelBuffer
    >>>
    >>> session = EditSession(PixelBuffer.from_array(rgb))
    >>> session.adjust({"brightness": 115, "saturation": 120})
    >>> session.apply_filter("clarendon")
    >>> session.undo()
    >>> result = session.image.to_array()

Example - Low-level:
    >>> from pixmod import AdjustmentPipeline, FilterCatalog, Pipeline
    >>>
    >>> out = AdjustmentPipeline(seed=0).apply(buffer, {"contrast": 130, "noise": 10})
    >>> out = FilterCatalog().apply("sepia", out)
    >>> out = Pipeline().brightness(110).filter("vintage").vignette(40)(buffer)
"""

__version__ = "0.1.0"

from pixmod.buffer import PixelBuffer
from pixmod.compose import blend, max_abs_difference
from pixmod.config import (
    CINEMATIC,
    CONFIG,
    COOL,
    DRAMATIC,
    FADED,
    GRITTY,
    MUTED,
    NEUTRAL,
    NOIR,
    PRESETS,
    SOFT_FOCUS,
    VIBRANT,
    VINTAGE,
    WARM,
    AdjustmentValues,
    OperationSpec,
    get_preset,
    load_values_json,
    save_values_json,
    values_from_dict,
    values_to_dict,
)
from pixmod.convolve import Kernel, box_blur, convolve, gaussian_blur, sharpen
from pixmod.exceptions import (
    DimensionMismatchError,
    NoHistoryError,
    OutOfBoundsError,
    PixmodError,
    UnknownFilterError,
)
from pixmod.filters import FilterCatalog, FilterDefinition
from pixmod.geometry import crop, fit_within, flip, resize, rotate
from pixmod.histogram import HistogramResult, compute_histogram
from pixmod.history import HistoryEntry, HistoryStack
from pixmod.pipeline import AdjustmentPipeline, Pipeline
from pixmod.protocols import BufferSource, BufferTransform
from pixmod.session import EditSession

__all__ = [
    "__version__",
    # Buffer
    "PixelBuffer",
    # Pipelines
    "AdjustmentPipeline",
    "Pipeline",
    "EditSession",
    # Filters
    "FilterCatalog",
    "FilterDefinition",
    # History
    "HistoryStack",
    "HistoryEntry",
    # Convolution
    "Kernel",
    "convolve",
    "box_blur",
    "gaussian_blur",
    "sharpen",
    # Geometry / compositing
    "crop",
    "rotate",
    "flip",
    "resize",
    "fit_within",
    "blend",
    "max_abs_difference",
    # Analysis
    "compute_histogram",
    "HistogramResult",
    # Config
    "CONFIG",
    "OperationSpec",
    "AdjustmentValues",
    "PRESETS",
    "NEUTRAL",
    "WARM",
    "COOL",
    "VIBRANT",
    "MUTED",
    "VINTAGE",
    "DRAMATIC",
    "CINEMATIC",
    "FADED",
    "SOFT_FOCUS",
    "GRITTY",
    "NOIR",
    "get_preset",
    "values_from_dict",
    "values_to_dict",
    "load_values_json",
    "save_values_json",
    # Protocols
    "BufferTransform",
    "BufferSource",
    # Exceptions
    "PixmodError",
    "OutOfBoundsError",
    "DimensionMismatchError",
    "UnknownFilterError",
    "NoHistoryError",
]
