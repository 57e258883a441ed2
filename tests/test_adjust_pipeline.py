"""Tests for AdjustmentPipeline."""

import numpy as np
import pytest

from pixmod import AdjustmentPipeline, AdjustmentValues, PixelBuffer, max_abs_difference
from pixmod.color import apply_color_pass
from pixmod.convolve import box_blur, sharpen
from pixmod.pipeline import apply_noise, apply_vignette

NEUTRAL_PARAMS = {
    "brightness": 100,
    "contrast": 100,
    "saturation": 100,
    "hue": 0,
    "exposure": 0,
    "temperature": 0,
    "blur": 0,
    "sharpen": 0,
    "vignette": 0,
    "noise": 0,
}


def create_test_buffer(width: int = 16, height: int = 12, seed: int = 42) -> PixelBuffer:
    """Create a PixelBuffer with random pixels."""
    rng = np.random.default_rng(seed)
    return PixelBuffer.from_array(rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8))


class TestNeutral:
    """Test identity behaviour."""

    def test_all_neutral_is_identity(self):
        """All-neutral parameters return a pixel-identical copy."""
        buf = create_test_buffer()
        out = AdjustmentPipeline().apply(buf, NEUTRAL_PARAMS)
        assert out == buf
        assert out is not buf

    def test_none_and_empty_are_neutral(self):
        """None and {} mean no adjustment."""
        buf = create_test_buffer()
        pipeline = AdjustmentPipeline()
        assert pipeline.apply(buf) == buf
        assert pipeline.apply(buf, {}) == buf
        assert pipeline.apply(buf, AdjustmentValues()) == buf

    def test_neutral_brightness_contrast_idempotent(self):
        """brightness=100 and contrast=100 applied twice change nothing."""
        buf = create_test_buffer()
        pipeline = AdjustmentPipeline()
        once = pipeline.apply(buf, {"brightness": 100, "contrast": 100, "saturation": 50})
        twice = pipeline.apply(once, {"brightness": 100, "contrast": 100})
        assert twice == once

    def test_sub_pixel_blur_is_copy(self):
        """Blur below 0.5 rounds to radius 0."""
        buf = create_test_buffer()
        out = AdjustmentPipeline().apply(buf, {"blur": 0.4})
        assert out == buf
        assert out is not buf

    def test_source_not_modified(self):
        """apply never mutates its input."""
        buf = create_test_buffer()
        before = buf.clone()
        AdjustmentPipeline(seed=1).apply(
            buf,
            {"brightness": 140, "hue": 30, "blur": 2, "sharpen": 50, "vignette": 60, "noise": 30},
        )
        assert buf == before


class TestColorStages:
    """Test the per-pixel stages through the pipeline."""

    def test_brightness(self):
        """brightness=150 scales and clamps."""
        buf = PixelBuffer.filled(2, 2, (100, 150, 200, 255))
        out = AdjustmentPipeline().apply(buf, {"brightness": 150})
        assert out.get(1, 1) == (150, 225, 255, 255)

    def test_contrast_zero_is_mid_gray(self):
        """contrast=0 maps everything to 128."""
        buf = create_test_buffer()
        out = AdjustmentPipeline().apply(buf, {"contrast": 0})
        assert np.all(out.pixels[..., :3] == 128)
        np.testing.assert_array_equal(out.pixels[..., 3], buf.pixels[..., 3])

    def test_saturation_zero_on_red(self):
        """Zero saturation turns pure red into its luma."""
        buf = PixelBuffer.filled(1, 1, (255, 0, 0, 255))
        out = AdjustmentPipeline().apply(buf, {"saturation": 0})
        assert out.get(0, 0) == (76, 76, 76, 255)

    def test_temperature_asymmetry(self):
        """Warm lifts R and G; cool lifts G and B."""
        buf = PixelBuffer.filled(1, 1, (100, 100, 100, 255))
        pipeline = AdjustmentPipeline()
        assert pipeline.apply(buf, {"temperature": 50}).get(0, 0) == (125, 115, 100, 255)
        assert pipeline.apply(buf, {"temperature": -50}).get(0, 0) == (100, 115, 125, 255)

    def test_exposure_one_stop(self):
        """exposure=100 doubles."""
        buf = PixelBuffer.filled(1, 1, (100, 50, 10, 255))
        out = AdjustmentPipeline().apply(buf, {"exposure": 100})
        assert out.get(0, 0) == (200, 100, 20, 255)


class TestClamping:
    """Test out-of-range and invalid input."""

    def test_out_of_range_clamped(self):
        """Values beyond the range behave like the range limit."""
        buf = create_test_buffer()
        pipeline = AdjustmentPipeline()
        assert pipeline.apply(buf, {"brightness": 1000}) == pipeline.apply(buf, {"brightness": 200})
        assert pipeline.apply(buf, {"hue": 500}) == pipeline.apply(buf, {"hue": 180})

    def test_negative_vignette_is_neutral(self):
        """Negative vignette clamps to 0."""
        buf = create_test_buffer()
        assert AdjustmentPipeline().apply(buf, {"vignette": -40}) == buf

    def test_unknown_key_raises(self):
        """Unknown parameter names are programmer errors."""
        with pytest.raises(ValueError, match="gamma"):
            AdjustmentPipeline().apply(create_test_buffer(), {"gamma": 1.2})

    def test_non_numeric_raises(self):
        """Non-numeric values raise ValueError."""
        with pytest.raises(ValueError):
            AdjustmentPipeline().apply(create_test_buffer(), {"brightness": "bright"})

    def test_nan_is_neutral(self):
        """NaN maps to the neutral value."""
        buf = create_test_buffer()
        assert AdjustmentPipeline().apply(buf, {"contrast": float("nan")}) == buf


class TestSpatialStages:
    """Test blur, sharpen, vignette and noise."""

    def test_blur_uniform_unchanged(self):
        """Radius-1 blur of a flat buffer is unchanged."""
        buf = PixelBuffer.filled(6, 4, (12, 34, 56, 255))
        assert AdjustmentPipeline().apply(buf, {"blur": 1}) == buf

    def test_blur_rounds_radius(self):
        """blur=1.6 uses radius 2."""
        from pixmod.convolve import box_blur

        buf = create_test_buffer()
        assert AdjustmentPipeline().apply(buf, {"blur": 1.6}) == box_blur(buf, 2)

    def test_vignette_darkens_corners(self):
        """Corners get darker than the center; alpha is kept."""
        buf = PixelBuffer.filled(9, 9, (200, 200, 200, 180))
        out = AdjustmentPipeline().apply(buf, {"vignette": 100})
        center = out.get(4, 4)
        corner = out.get(0, 0)
        assert center == (200, 200, 200, 180)
        assert corner[0] < center[0]
        assert corner[3] == 180

    def test_vignette_strength_monotonic(self):
        """Stronger vignette darkens more."""
        buf = PixelBuffer.filled(9, 9, (200, 200, 200, 255))
        weak = apply_vignette(buf, 20).get(0, 0)[0]
        strong = apply_vignette(buf, 80).get(0, 0)[0]
        assert strong < weak < 200

    def test_noise_bounded(self):
        """Noise offsets stay within +/- noise/2."""
        buf = PixelBuffer.filled(16, 16, (100, 100, 100, 255))
        out = AdjustmentPipeline(seed=3).apply(buf, {"noise": 50})
        diff = np.abs(out.pixels[..., :3].astype(int) - 100)
        assert diff.max() <= 25
        assert diff.max() > 0
        assert np.all(out.pixels[..., 3] == 255)

    def test_noise_deterministic_with_seed(self):
        """Same seed, same output; different seed, different output."""
        buf = create_test_buffer()
        a = AdjustmentPipeline(seed=7).apply(buf, {"noise": 40})
        b = AdjustmentPipeline(seed=7).apply(buf, {"noise": 40})
        c = AdjustmentPipeline(seed=8).apply(buf, {"noise": 40})
        assert a == b
        assert a != c

    def test_per_call_seed(self):
        """A per-call seed overrides the pipeline generator."""
        buf = create_test_buffer()
        pipeline = AdjustmentPipeline()
        assert pipeline.apply(buf, {"noise": 20}, seed=5) == pipeline.apply(
            buf, {"noise": 20}, seed=5
        )

    def test_reseed(self):
        """reseed restarts the sequence."""
        buf = create_test_buffer()
        pipeline = AdjustmentPipeline(seed=11)
        first = pipeline.apply(buf, {"noise": 30})
        pipeline.reseed(11)
        assert pipeline.apply(buf, {"noise": 30}) == first

    def test_apply_noise_zero_copies(self):
        """Zero noise is a copy."""
        buf = create_test_buffer()
        assert apply_noise(buf, 0, np.random.default_rng(0)) == buf

    def test_sharpen_changes_detail(self):
        """Sharpen alters a textured image."""
        buf = create_test_buffer()
        out = AdjustmentPipeline().apply(buf, {"sharpen": 100})
        assert max_abs_difference(out, buf) > 0


class TestStageOrder:
    """Test that stages compose in a fixed order."""

    def test_stages_run_color_blur_sharpen_vignette(self):
        """Pipeline output equals the stages applied one by one in order."""
        buf = create_test_buffer()
        params = {"brightness": 150, "blur": 1, "sharpen": 60, "vignette": 40}
        out = AdjustmentPipeline().apply(buf, params)

        expected = apply_color_pass(buf, AdjustmentValues(brightness=150))
        expected = box_blur(expected, 1)
        expected = sharpen(expected, 0.6)
        expected = apply_vignette(expected, 40)
        assert out == expected

    def test_vignette_corner_exact(self):
        """Beyond the radius pixels keep 1 - vignette/100 of their value."""
        buf = PixelBuffer.filled(9, 9, (200, 200, 200, 255))
        out = AdjustmentPipeline().apply(buf, {"vignette": 50})
        assert out.get(0, 0) == (100, 100, 100, 255)
        assert out.get(8, 8) == (100, 100, 100, 255)
        assert out.get(4, 4) == (200, 200, 200, 255)


class TestPresets:
    """Test applying presets."""

    def test_apply_preset_equals_values(self):
        """apply_preset is apply with the preset values."""
        buf = create_test_buffer()
        pipeline = AdjustmentPipeline()
        assert pipeline.apply_preset(buf, "warm") == pipeline.apply(
            buf, AdjustmentValues(temperature=30, saturation=105)
        )

    def test_unknown_preset(self):
        """Unknown presets raise ValueError."""
        with pytest.raises(ValueError):
            AdjustmentPipeline().apply_preset(create_test_buffer(), "nope")
