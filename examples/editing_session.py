"""
Example: photo editing session usage.

Demonstrates how to use pixmod for:
- Slider previews and committed adjustments
- Named filters and presets
- Undo / redo / history jumps
- Fluent pipelines and image statistics
"""

import logging

import numpy as np

from pixmod import (
    AdjustmentValues,
    EditSession,
    FilterCatalog,
    NoHistoryError,
    PixelBuffer,
    Pipeline,
    compute_histogram,
)

# Configure logging to see per-stage timings
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def generate_sample_image(width: int = 320, height: int = 240) -> PixelBuffer:
    """Generate a gradient test image with some texture."""
    rng = np.random.default_rng(42)

    x = np.linspace(0.0, 1.0, width)
    y = np.linspace(0.0, 1.0, height)[:, None]
    rgb = np.empty((height, width, 3), dtype=np.float64)
    rgb[..., 0] = 255.0 * x
    rgb[..., 1] = 255.0 * y
    rgb[..., 2] = 255.0 * (1.0 - x) * (1.0 - y)
    rgb += rng.normal(0.0, 8.0, size=rgb.shape)

    return PixelBuffer.from_array(rgb)


def example_1_adjustments(session: EditSession):
    """Example 1: Preview vs commit."""
    print("\n" + "=" * 70)
    print("EXAMPLE 1: Slider Preview and Commit")
    print("=" * 70)

    # Dragging a slider renders previews without touching the history
    for value in (105, 110, 120):
        session.preview({"brightness": value})
    print(f"History after previews: {session.history.descriptions()}")

    # Releasing the slider commits
    session.adjust({"brightness": 120, "contrast": 115}, "Brightness/Contrast")
    print(f"History after commit:   {session.history.descriptions()}")


def example_2_filters_and_presets(session: EditSession):
    """Example 2: Catalog filters and presets."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: Filters and Presets")
    print("=" * 70)

    catalog = session.catalog
    for name in catalog.names():
        info = catalog.info(name)
        print(f"  {info['display_name']:<14} {info['description']}")

    session.apply_filter("clarendon")
    session.apply_preset("vintage")
    print(f"History: {session.history.descriptions()}")


def example_3_history(session: EditSession):
    """Example 3: Undo, redo and jumps."""
    print("\n" + "=" * 70)
    print("EXAMPLE 3: Undo / Redo")
    print("=" * 70)

    session.undo()
    print(f"After undo, cursor at {session.history.cursor}")
    session.redo()
    print(f"After redo, cursor at {session.history.cursor}")

    session.jump_to(0)
    session.rotate(90)
    print(f"Rotated after jumping back: {session.history.descriptions()}")

    try:
        session.redo()
    except NoHistoryError as e:
        print(f"Redo branch was pruned: {e}")


def example_4_pipeline(image: PixelBuffer):
    """Example 4: Fluent pipeline and statistics."""
    print("\n" + "=" * 70)
    print("EXAMPLE 4: Fluent Pipeline")
    print("=" * 70)

    pipe = (
        Pipeline()
        .values(AdjustmentValues(saturation=130, temperature=20))
        .filter("sharpen")
        .vignette(45)
    )
    result = pipe(image)

    before = compute_histogram(image)
    after = compute_histogram(result)
    print(f"Average RGB before: {before.average_rgb()}  after: {after.average_rgb()}")
    print(f"Dynamic range before: {before.dynamic_range():.1f}  after: {after.dynamic_range():.1f}")


def main():
    image = generate_sample_image()
    session = EditSession(image, catalog=FilterCatalog())

    example_1_adjustments(session)
    example_2_filters_and_presets(session)
    example_3_history(session)
    example_4_pipeline(image)

    print("\nFinal image:", session.image)


if __name__ == "__main__":
    main()
