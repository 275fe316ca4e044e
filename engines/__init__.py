"""Image engines - pure computation on PixelBuffers, no I/O."""

from .pointwise import (
    adjust_brightness,
    flip_horizontal,
    flip_vertical,
    greyscale,
    luma,
    value,
    intensity,
    sepia,
    extract_component,
    split_components,
    combine_components,
)
from .convolution import apply_kernel, blur, sharpen
from .padding import next_power_of_two, pad_to_power_of_two, crop
from .haar_engine import haar2, ihaar2
from .thresholding import compression_ratio, apply_threshold
from .pipeline import compress, compress_reconstruct
from .histogram import compute_histogram, render_histogram, histogram, color_correct
from .levels import levels_adjust
from .split_view import split_view
from .resampler import downscale

__all__ = [
    'adjust_brightness',
    'flip_horizontal',
    'flip_vertical',
    'greyscale',
    'luma',
    'value',
    'intensity',
    'sepia',
    'extract_component',
    'split_components',
    'combine_components',
    'apply_kernel',
    'blur',
    'sharpen',
    'next_power_of_two',
    'pad_to_power_of_two',
    'crop',
    'haar2',
    'ihaar2',
    'compression_ratio',
    'apply_threshold',
    'compress',
    'compress_reconstruct',
    'compute_histogram',
    'render_histogram',
    'histogram',
    'color_correct',
    'levels_adjust',
    'split_view',
    'downscale',
]
