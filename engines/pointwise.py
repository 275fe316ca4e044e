"""Per-pixel color transforms: each output sample depends only on its input sample(s)."""

import numpy as np
from typing import Tuple

from models.enums import ColorChannel
from models.errors import DimensionMismatchError
from models.pixel_buffer import PixelBuffer
from utils.constants import LUMA_WEIGHTS, SEPIA_MATRIX


def _broadcast(plane: np.ndarray) -> np.ndarray:
    """Repeat a (H, W) plane into all three channels."""
    return np.repeat(plane[:, :, None], 3, axis=2)


def adjust_brightness(image: PixelBuffer, delta: int) -> PixelBuffer:
    """Add delta to every channel, clamped to [0, 255]."""
    return PixelBuffer.from_values(image.samples.astype(np.int64) + int(delta))


def flip_horizontal(image: PixelBuffer) -> PixelBuffer:
    return PixelBuffer.from_array(image.samples[:, ::-1])


def flip_vertical(image: PixelBuffer) -> PixelBuffer:
    return PixelBuffer.from_array(image.samples[::-1, :])


def greyscale(image: PixelBuffer) -> PixelBuffer:
    """Rec. 709 luma, rounded to nearest, in all three channels."""
    rgb = image.as_float()
    wr, wg, wb = LUMA_WEIGHTS
    luma_plane = wr * rgb[:, :, 0] + wg * rgb[:, :, 1] + wb * rgb[:, :, 2]
    return PixelBuffer.from_values(_broadcast(luma_plane), rounding='round')


# The luma component visualization is the greyscale conversion.
luma = greyscale


def value(image: PixelBuffer) -> PixelBuffer:
    """max(R, G, B) broadcast."""
    return PixelBuffer.from_array(_broadcast(image.samples.max(axis=2)))


def intensity(image: PixelBuffer) -> PixelBuffer:
    """floor((R + G + B) / 3) broadcast."""
    total = image.samples.astype(np.int64).sum(axis=2)
    return PixelBuffer.from_array(_broadcast(total // 3))


def sepia(image: PixelBuffer) -> PixelBuffer:
    """Sepia tone matrix; results truncated then clamped."""
    toned = image.as_float() @ SEPIA_MATRIX.T
    return PixelBuffer.from_values(toned, rounding='floor')


def extract_component(image: PixelBuffer, channel) -> PixelBuffer:
    """Grey image of a single channel's intensity."""
    index = ColorChannel.parse(channel).index
    return PixelBuffer.from_array(_broadcast(image.samples[:, :, index]))


def split_components(image: PixelBuffer) -> Tuple[PixelBuffer, PixelBuffer, PixelBuffer]:
    """Red, green and blue component images."""
    return tuple(extract_component(image, channel) for channel in ColorChannel)


def combine_components(red: PixelBuffer, green: PixelBuffer, blue: PixelBuffer) -> PixelBuffer:
    """Output channel i taken from source i's channel i."""
    if not (red.same_size(green) and red.same_size(blue)):
        raise DimensionMismatchError(
            "Cannot combine components of different sizes: "
            f"{red.width}x{red.height}, {green.width}x{green.height}, {blue.width}x{blue.height}"
        )
    combined = np.stack(
        [red.samples[:, :, 0], green.samples[:, :, 1], blue.samples[:, :, 2]], axis=-1
    )
    return PixelBuffer.from_array(combined)
