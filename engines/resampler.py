"""Bilinear resampling to arbitrary dimensions."""

import logging

import numpy as np

from models.errors import InvalidArgumentError
from models.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


def downscale(image: PixelBuffer, target_w: int, target_h: int) -> PixelBuffer:
    """
    Resize to (target_w, target_h) with bilinear interpolation.

    Target pixel (x, y) samples the source at (x * W / tw, y * H / th);
    the far neighbours are clamped to the last row/column. Works for
    upscaling as well.
    """
    if target_w < 1 or target_h < 1:
        raise InvalidArgumentError(f"Target dimensions must be >= 1, got {target_w}x{target_h}")
    w, h = image.width, image.height

    src_x = np.arange(target_w, dtype=np.float64) * w / target_w
    src_y = np.arange(target_h, dtype=np.float64) * h / target_h
    x0 = np.floor(src_x).astype(np.intp)
    y0 = np.floor(src_y).astype(np.intp)
    x1 = np.minimum(x0 + 1, w - 1)
    y1 = np.minimum(y0 + 1, h - 1)
    wx = (src_x - x0)[None, :, None]
    wy = (src_y - y0)[:, None, None]

    rgb = image.as_float()
    c00 = rgb[y0[:, None], x0[None, :]]
    c10 = rgb[y0[:, None], x1[None, :]]
    c01 = rgb[y1[:, None], x0[None, :]]
    c11 = rgb[y1[:, None], x1[None, :]]

    out = ((1 - wx) * (1 - wy) * c00
           + wx * (1 - wy) * c10
           + (1 - wx) * wy * c01
           + wx * wy * c11)

    logger.debug("Resampled %dx%d -> %dx%d", w, h, target_w, target_h)
    return PixelBuffer.from_values(out, rounding='round')
