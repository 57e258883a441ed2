"""Tests for geometry and compositing."""

import numpy as np
import pytest

from pixmod import (
    DimensionMismatchError,
    OutOfBoundsError,
    PixelBuffer,
    blend,
    crop,
    fit_within,
    flip,
    max_abs_difference,
    resize,
    rotate,
)


def create_test_buffer(width: int = 4, height: int = 3, seed: int = 42) -> PixelBuffer:
    """Create a PixelBuffer with random pixels."""
    rng = np.random.default_rng(seed)
    return PixelBuffer.from_array(rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8))


class TestCrop:
    """Test crop."""

    def test_basic(self):
        """A rectangle inside the buffer is copied out."""
        buf = create_test_buffer()
        out = crop(buf, 1, 1, 2, 2)
        assert out.shape == (2, 2)
        assert out.get(0, 0) == buf.get(1, 1)
        assert out.get(1, 1) == buf.get(2, 2)

    def test_negative_extent(self):
        """Negative width/height select backwards from (x, y)."""
        buf = create_test_buffer()
        out = crop(buf, 3, 2, -2, -1)
        assert out.shape == (2, 1)
        assert out.get(0, 0) == buf.get(1, 1)

    def test_intersects_with_buffer(self):
        """Rectangles hanging over the edge are clipped."""
        buf = create_test_buffer()
        out = crop(buf, -1, -1, 3, 3)
        assert out.shape == (2, 2)
        assert out.get(0, 0) == buf.get(0, 0)

    @pytest.mark.parametrize("rect", [(10, 10, 2, 2), (0, 0, 0, 3), (-5, 0, 3, 3)])
    def test_empty_raises(self, rect):
        """No overlap raises OutOfBoundsError."""
        with pytest.raises(OutOfBoundsError):
            crop(create_test_buffer(), *rect)

    def test_copy_is_independent(self):
        """The crop does not share memory with the source."""
        buf = create_test_buffer()
        out = crop(buf, 0, 0, 2, 2)
        out.set(0, 0, *[255 - c for c in buf.get(0, 0)])
        assert out.get(0, 0) != buf.get(0, 0)


class TestRotate:
    """Test rotate."""

    def test_quarter_turn_clockwise(self):
        """90 degrees swaps dimensions and turns clockwise."""
        buf = create_test_buffer(3, 2)
        out = rotate(buf, 90)
        assert out.shape == (2, 3)
        # top-left goes to top-right
        assert out.get(1, 0) == buf.get(0, 0)
        # bottom-left goes to top-left
        assert out.get(0, 0) == buf.get(0, 1)

    def test_negative_quarter_turn(self):
        """-90 is counter-clockwise."""
        buf = create_test_buffer(3, 2)
        out = rotate(buf, -90)
        assert out.shape == (2, 3)
        # top-left goes to bottom-left
        assert out.get(0, 2) == buf.get(0, 0)

    def test_full_and_half_turns(self):
        """360 is identity; two half turns are identity."""
        buf = create_test_buffer()
        assert rotate(buf, 360) == buf
        assert rotate(rotate(buf, 180), 180) == buf
        assert rotate(buf, 0) is not buf

    def test_four_quarter_turns(self):
        """Four 90-degree turns return the source."""
        buf = create_test_buffer(5, 3)
        out = buf
        for _ in range(4):
            out = rotate(out, 90)
        assert out == buf

    def test_arbitrary_angle_expands(self):
        """45 degrees expands the canvas and fills the corners."""
        buf = PixelBuffer.filled(10, 10, (200, 100, 50, 255))
        out = rotate(buf, 45, fill=(1, 2, 3, 4))
        assert out.shape == (15, 15)
        assert out.get(0, 0) == (1, 2, 3, 4)
        assert out.get(7, 7) == (200, 100, 50, 255)

    def test_bad_fill(self):
        """Fill must have four channels."""
        with pytest.raises(ValueError):
            rotate(create_test_buffer(), 30, fill=(0, 0, 0))

    @pytest.mark.parametrize("degrees", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_angle_raises(self, degrees):
        """Infinite or NaN angles are rejected."""
        with pytest.raises(ValueError, match="finite"):
            rotate(create_test_buffer(), degrees)


class TestFlip:
    """Test flip."""

    def test_horizontal(self):
        """Horizontal flip mirrors columns."""
        buf = create_test_buffer()
        out = flip(buf)
        assert out.get(0, 0) == buf.get(3, 0)
        assert flip(out) == buf

    def test_vertical(self):
        """Vertical flip mirrors rows."""
        buf = create_test_buffer()
        out = flip(buf, horizontal=False)
        assert out.get(0, 0) == buf.get(0, 2)
        assert flip(out, horizontal=False) == buf


class TestResize:
    """Test resize and fit_within."""

    def test_same_size_is_copy(self):
        """Resizing to the current size returns an equal, independent buffer."""
        buf = create_test_buffer()
        out = resize(buf, 4, 3)
        assert out == buf
        assert out is not buf

    def test_uniform_stays_uniform(self):
        """A flat color survives up- and down-scaling."""
        buf = PixelBuffer.filled(6, 4, (10, 20, 30, 40))
        for size in [(13, 9), (2, 1), (1, 7)]:
            out = resize(buf, *size)
            assert out.shape == size
            assert np.all(out.to_array() == [10, 20, 30, 40])

    def test_halving_averages_quad(self):
        """2x2 -> 1x1 samples the midpoint of all four pixels."""
        arr = np.zeros((2, 2, 4), dtype=np.uint8)
        arr[:, :] = np.array([[0, 100], [200, 50]], dtype=np.uint8)[:, :, None]
        out = resize(PixelBuffer.from_array(arr), 1, 1)
        assert out.get(0, 0) == (88, 88, 88, 88)

    def test_upscale_interpolates(self):
        """Doubling a two-pixel ramp interpolates between the pixel centers."""
        arr = np.zeros((1, 2, 4), dtype=np.uint8)
        arr[0, 1, :3] = 255
        arr[..., 3] = 255
        out = resize(PixelBuffer.from_array(arr), 4, 1)
        assert [out.get(x, 0)[0] for x in range(4)] == [0, 64, 191, 255]

    def test_height_follows_aspect(self):
        """Omitted height keeps the aspect ratio, rounded half up."""
        assert resize(create_test_buffer(10, 4), 5).shape == (5, 2)
        assert resize(create_test_buffer(3, 2), 4).shape == (4, 3)

    @pytest.mark.parametrize("size", [(0, 3), (3, 0), (-1, 2)])
    def test_bad_target_raises(self, size):
        """Target sides must be at least 1."""
        with pytest.raises(ValueError):
            resize(create_test_buffer(), *size)

    def test_empty_source_raises(self):
        """An empty buffer has nothing to sample."""
        with pytest.raises(ValueError):
            resize(PixelBuffer(0, 0), 2, 2)

    def test_source_not_modified(self):
        """Resize allocates a new buffer."""
        buf = create_test_buffer()
        before = buf.clone()
        resize(buf, 7, 5)
        assert buf == before

    def test_fit_within(self):
        """Largest aspect-preserving size inside the bounds."""
        assert fit_within(400, 300, 200, 200) == (200, 150)
        assert fit_within(100, 50, 400, 400) == (400, 200)
        assert fit_within(1000, 1, 10, 10) == (10, 1)

    def test_fit_within_rejects_non_positive(self):
        with pytest.raises(ValueError):
            fit_within(0, 10, 10, 10)


class TestCompose:
    """Test blend and max_abs_difference."""

    def test_blend_endpoints(self):
        """alpha 0 gives base, alpha 1 gives overlay."""
        a = create_test_buffer(seed=1)
        b = create_test_buffer(seed=2)
        assert blend(a, b, 0.0) == a
        assert blend(a, b, 1.0) == b

    def test_blend_half(self):
        """Half blend of 0 and 255 rounds to 128."""
        black = PixelBuffer.filled(2, 2, (0, 0, 0, 0))
        white = PixelBuffer.filled(2, 2, (255, 255, 255, 255))
        assert blend(black, white, 0.5).get(1, 1) == (128, 128, 128, 128)

    def test_blend_mismatch(self):
        """Different sizes raise DimensionMismatchError."""
        with pytest.raises(DimensionMismatchError):
            blend(PixelBuffer(2, 2), PixelBuffer(3, 2), 0.5)

    def test_max_abs_difference(self):
        """Largest channel difference is reported."""
        a = PixelBuffer.filled(2, 2, (10, 10, 10, 10))
        b = a.clone()
        assert max_abs_difference(a, b) == 0
        b.set(1, 0, 10, 250, 10, 10)
        assert max_abs_difference(a, b) == 240

    def test_max_abs_difference_mismatch(self):
        """Different sizes raise DimensionMismatchError."""
        with pytest.raises(DimensionMismatchError):
            max_abs_difference(PixelBuffer(1, 2), PixelBuffer(2, 1))
