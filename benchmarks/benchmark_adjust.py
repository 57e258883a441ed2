"""
Benchmark the adjustment pipeline and built-in filters.

Measures per-call latency for:
- The fused color pass (all six per-pixel adjustments)
- Box blur at several radii
- Each built-in filter

Warmup calls absorb Numba compilation and are not timed.

Usage:
    python benchmark_adjust.py [width] [height]
"""

import sys
import time

import numpy as np

from pixmod import AdjustmentPipeline, FilterCatalog, PixelBuffer, box_blur

# Test configurations
NUM_ITERATIONS = 20
WARMUP_ITERATIONS = 2


def create_image(width: int, height: int) -> PixelBuffer:
    rng = np.random.default_rng(42)
    return PixelBuffer.from_array(rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8))


def time_call(fn, *args) -> float:
    """Mean wall time of ``fn(*args)`` in milliseconds."""
    for _ in range(WARMUP_ITERATIONS):
        fn(*args)
    start = time.perf_counter()
    for _ in range(NUM_ITERATIONS):
        fn(*args)
    return (time.perf_counter() - start) / NUM_ITERATIONS * 1000.0


def report(label: str, ms: float, megapixels: float) -> None:
    print(f"{label:<24} {ms:8.2f} ms  {megapixels / ms * 1000:8.1f} MP/s")


def main():
    width = int(sys.argv[1]) if len(sys.argv) > 1 else 1920
    height = int(sys.argv[2]) if len(sys.argv) > 2 else 1080
    image = create_image(width, height)
    megapixels = width * height / 1e6

    print("=" * 80)
    print(f"PIXMOD BENCHMARK: {width}x{height} ({megapixels:.2f} MP)")
    print("=" * 80)

    pipeline = AdjustmentPipeline(seed=0)
    color = {
        "brightness": 110,
        "contrast": 120,
        "saturation": 130,
        "hue": 15,
        "exposure": 10,
        "temperature": 20,
    }
    report("color pass", time_call(pipeline.apply, image, color), megapixels)

    for radius in (1, 5, 20):
        report(f"box blur r={radius}", time_call(box_blur, image, radius), megapixels)

    catalog = FilterCatalog()
    for name in catalog.names():
        report(f"filter {name}", time_call(catalog.apply, name, image), megapixels)


if __name__ == "__main__":
    main()
