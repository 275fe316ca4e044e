"""Histogram computation, rendering and histogram-based color correction."""

import logging

import numpy as np
from typing import Sequence

from models.histogram import Histogram
from models.pixel_buffer import PixelBuffer
from utils.constants import (
    HISTOGRAM_BINS,
    HISTOGRAM_SIZE,
    HISTOGRAM_GRID_SPACING,
    HISTOGRAM_BACKGROUND,
    HISTOGRAM_GRID_COLOR,
    HISTOGRAM_CHANNEL_COLORS,
    PEAK_SEARCH_RANGE,
)

logger = logging.getLogger(__name__)


def compute_histogram(image: PixelBuffer) -> Histogram:
    """Count intensity frequencies per channel (256 buckets each)."""
    samples = image.samples
    counts = [
        np.bincount(samples[:, :, c].ravel(), minlength=HISTOGRAM_BINS).astype(np.int64)
        for c in range(3)
    ]
    return Histogram(red=counts[0], green=counts[1], blue=counts[2])


def find_peak(counts: np.ndarray, low: int = PEAK_SEARCH_RANGE[0], high: int = PEAK_SEARCH_RANGE[1]) -> int:
    """Most frequent intensity in [low, high]; the first one wins ties."""
    return low + int(np.argmax(counts[low:high + 1]))


def draw_line(canvas: np.ndarray, x1: int, y1: int, x2: int, y2: int, color: Sequence[int]) -> None:
    """Integer Bresenham line on an (H, W, 3) array; off-canvas points are skipped."""
    h, w = canvas.shape[:2]
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy

    while True:
        if 0 <= x1 < w and 0 <= y1 < h:
            canvas[y1, x1] = color
        if x1 == x2 and y1 == y2:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x1 += sx
        if e2 < dx:
            err += dx
            y1 += sy


def _bar_top(count: int, max_frequency: int) -> int:
    if max_frequency == 0:
        top = HISTOGRAM_SIZE
    else:
        top = HISTOGRAM_SIZE - int(count / max_frequency * HISTOGRAM_SIZE)
    return min(max(top, 0), HISTOGRAM_SIZE - 1)


def render_histogram(hist: Histogram) -> PixelBuffer:
    """
    256x256 line plot of the three channel histograms.

    White background, light grid every 32 px, then red, green and blue
    polylines scaled so the global maximum frequency touches the top row.
    """
    size = HISTOGRAM_SIZE
    canvas = np.empty((size, size, 3), dtype=np.uint8)
    canvas[:, :] = HISTOGRAM_BACKGROUND
    canvas[:, ::HISTOGRAM_GRID_SPACING] = HISTOGRAM_GRID_COLOR
    canvas[::HISTOGRAM_GRID_SPACING, :] = HISTOGRAM_GRID_COLOR

    max_frequency = hist.max_frequency
    step = size // HISTOGRAM_BINS
    for i in range(1, HISTOGRAM_BINS):
        x1 = (i - 1) * step
        x2 = i * step
        for c, color in enumerate(HISTOGRAM_CHANNEL_COLORS):
            counts = hist.channel(c)
            draw_line(
                canvas,
                x1, _bar_top(int(counts[i - 1]), max_frequency),
                x2, _bar_top(int(counts[i]), max_frequency),
                color,
            )

    return PixelBuffer.from_array(canvas)


def histogram(image: PixelBuffer) -> PixelBuffer:
    """Histogram visualization of `image`."""
    return render_histogram(compute_histogram(image))


def color_correct(image: PixelBuffer) -> PixelBuffer:
    """Shift each channel so its histogram peak meets the average peak."""
    hist = compute_histogram(image)
    peaks = [find_peak(hist.channel(c)) for c in range(3)]
    average_peak = sum(peaks) // 3
    offsets = np.array([average_peak - p for p in peaks], dtype=np.int64)
    logger.debug("Color correct: peaks=%s average=%d offsets=%s", peaks, average_peak, offsets.tolist())
    return PixelBuffer.from_values(image.samples.astype(np.int64) + offsets)
