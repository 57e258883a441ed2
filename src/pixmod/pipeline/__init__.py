"""Adjustment pipeline and fluent step chain."""

from pixmod.pipeline.adjust import AdjustmentPipeline, apply_noise, apply_vignette
from pixmod.pipeline.chain import Pipeline

__all__ = ["AdjustmentPipeline", "Pipeline", "apply_noise", "apply_vignette"]
