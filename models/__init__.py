"""Data models: pixel buffers, parameters, results and errors."""

from .errors import ImageEngineError, InvalidArgumentError, DimensionMismatchError, OutOfBoundsError
from .pixel_buffer import PixelBuffer
from .enums import ColorChannel, SplitKind
from .histogram import Histogram
from .tone_curve import ToneCurve
from .compression_params import CompressionParams
from .compression_result import CompressionResult
from .intermediate_data import IntermediateData

__all__ = [
    'ImageEngineError',
    'InvalidArgumentError',
    'DimensionMismatchError',
    'OutOfBoundsError',
    'PixelBuffer',
    'ColorChannel',
    'SplitKind',
    'Histogram',
    'ToneCurve',
    'CompressionParams',
    'CompressionResult',
    'IntermediateData',
]
