"""Tests for EditSession."""

import numpy as np
import pytest

from pixmod import (
    AdjustmentPipeline,
    EditSession,
    FilterCatalog,
    HistoryStack,
    NoHistoryError,
    OutOfBoundsError,
    PixelBuffer,
    UnknownFilterError,
)


@pytest.fixture
def image():
    """Random 8x6 opaque image."""
    rng = np.random.default_rng(42)
    return PixelBuffer.from_array(rng.integers(0, 256, size=(6, 8, 3), dtype=np.uint8))


@pytest.fixture
def session(image):
    return EditSession(image, pipeline=AdjustmentPipeline(seed=0))


class TestLoad:
    """Test session start-up."""

    def test_load_records_entry(self, session, image):
        """Loading pushes "Image Loaded"."""
        assert session.history.descriptions() == ["Image Loaded"]
        assert session.image == image

    def test_image_is_copy(self, session, image):
        """Mutating session.image does not change the session."""
        session.image.set(0, 0, 0, 0, 0, 0)
        assert session.image == image

    def test_input_is_cloned(self, image):
        """Mutating the loaded buffer does not change the session."""
        session = EditSession(image)
        before = image.clone()
        image.set(0, 0, *[255 - c for c in image.get(0, 0)])
        assert session.image == before

    def test_collaborators_injected(self, image):
        """Pipeline, catalog and history can be supplied."""
        catalog = FilterCatalog(include_builtins=False)
        history = HistoryStack(max_entries=5)
        session = EditSession(image, catalog=catalog, history=history)
        assert session.catalog is catalog
        assert session.history is history
        assert len(history) == 1


class TestEdits:
    """Test preview and commits."""

    def test_preview_does_not_commit(self, session, image):
        """Preview renders without touching image or history."""
        preview = session.preview({"brightness": 150})
        assert preview != image
        assert session.image == image
        assert len(session.history) == 1

    def test_adjust_commits(self, session):
        """adjust replaces the image and records an entry."""
        result = session.adjust({"contrast": 150})
        assert session.image == result
        assert session.history.descriptions() == ["Image Loaded", "Adjustment"]

    def test_adjust_custom_description(self, session):
        """A description can be given."""
        session.adjust({"hue": 20}, "Hue Shift")
        assert session.history.descriptions()[-1] == "Hue Shift"

    def test_adjustments_accumulate(self, session, image):
        """Each adjust renders from the committed image."""
        session.adjust({"brightness": 50})
        session.adjust({"brightness": 50})
        expected = AdjustmentPipeline().apply(
            AdjustmentPipeline().apply(image, {"brightness": 50}), {"brightness": 50}
        )
        assert session.image == expected

    def test_apply_filter(self, session, image):
        """Filters commit "Applied <name> filter"."""
        session.apply_filter("invert")
        assert session.history.descriptions()[-1] == "Applied invert filter"
        assert session.image == FilterCatalog().apply("invert", image)

    def test_unknown_filter_leaves_state(self, session, image):
        """A failed filter changes nothing."""
        with pytest.raises(UnknownFilterError):
            session.apply_filter("glitch")
        assert session.image == image
        assert len(session.history) == 1

    def test_apply_preset(self, session):
        """Presets commit with their name."""
        session.apply_preset("Warm")
        assert session.history.descriptions()[-1] == "Applied warm preset"

    def test_crop(self, session, image):
        """Crop commits "Crop Applied"."""
        session.crop(2, 1, 3, 2)
        assert session.image.shape == (3, 2)
        assert session.image.get(0, 0) == image.get(2, 1)
        assert session.history.descriptions()[-1] == "Crop Applied"

    def test_crop_miss_leaves_state(self, session, image):
        """A crop outside the image raises and changes nothing."""
        with pytest.raises(OutOfBoundsError):
            session.crop(100, 100, 5, 5)
        assert session.image == image
        assert len(session.history) == 1

    def test_rotate(self, session):
        """Rotate commits "Rotated <n>°"."""
        session.rotate(90)
        assert session.image.shape == (6, 8)
        assert session.history.descriptions()[-1] == "Rotated 90°"

    def test_flip(self, session, image):
        """Flip commits a mirror image."""
        session.flip()
        assert session.image.get(0, 0) == image.get(7, 0)
        assert session.history.descriptions()[-1] == "Flipped Horizontal"

    def test_resize(self, session, image):
        """Resize commits "Resized to WxH" and undo restores the size."""
        session.resize(4)
        assert session.image.shape == (4, 3)
        assert session.history.descriptions()[-1] == "Resized to 4x3"
        assert session.undo() == image

    def test_resize_invalid_leaves_state(self, session, image):
        """A rejected resize records nothing."""
        with pytest.raises(ValueError):
            session.resize(0, 5)
        assert session.image == image
        assert len(session.history) == 1

    def test_current_matches_image(self, session):
        """current() returns a copy of the committed image."""
        session.adjust({"brightness": 120})
        assert session.current() == session.image
        assert session.current() is not session.current()


class TestHistory:
    """Test undo, redo, jump and reset through the session."""

    def test_undo_redo(self, session, image):
        """Undo restores the previous image; redo re-applies."""
        edited = session.apply_filter("sepia")
        assert session.undo() == image
        assert session.image == image
        assert session.redo() == edited
        assert session.image == edited

    def test_undo_at_start_raises(self, session, image):
        """Nothing to undo after loading."""
        with pytest.raises(NoHistoryError):
            session.undo()
        assert session.image == image

    def test_edit_after_undo_prunes(self, session):
        """Committing after undo drops the redo branch."""
        session.apply_filter("sepia")
        session.undo()
        session.apply_filter("invert")
        assert session.history.descriptions() == ["Image Loaded", "Applied invert filter"]
        with pytest.raises(NoHistoryError):
            session.redo()

    def test_jump_to(self, session, image):
        """Jumping selects a history entry."""
        session.apply_filter("sepia")
        session.apply_filter("invert")
        assert session.jump_to(0) == image
        assert session.image == image

    def test_reset(self, session, image):
        """reset returns to the original and restarts history."""
        session.apply_filter("sepia")
        session.crop(0, 0, 2, 2)
        assert session.reset() == image
        assert session.history.descriptions() == ["Image Loaded"]
        assert session.original == image
