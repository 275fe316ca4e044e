"""Kernel correlation with border renormalization."""

import logging

import numpy as np
from scipy.ndimage import correlate

from models.errors import InvalidArgumentError
from models.pixel_buffer import PixelBuffer
from utils.constants import BLUR_KERNEL, SHARPEN_KERNEL

logger = logging.getLogger(__name__)

SNAP_TOLERANCE = 1e-9


def validate_kernel(kernel: np.ndarray) -> np.ndarray:
    """Return kernel as a 2D float64 array with odd dimensions."""
    kernel = np.asarray(kernel, dtype=np.float64)
    if kernel.ndim != 2 or kernel.shape[0] % 2 == 0 or kernel.shape[1] % 2 == 0:
        raise InvalidArgumentError(f"Kernel must be 2D with odd dimensions, got {kernel.shape}")
    return kernel


def apply_kernel(image: PixelBuffer, kernel: np.ndarray) -> PixelBuffer:
    """
    Correlate every channel with `kernel`, centred on each pixel.

    Taps falling outside the image are skipped and the weighted sum is
    divided by the sum of the taps that were used, so borders keep the
    brightness of the interior. Results are clamped and truncated.
    """
    kernel = validate_kernel(kernel)
    h, w = image.shape

    # Zero padding drops out-of-range taps from the numerator; correlating
    # a ones mask the same way yields the used-tap weight per pixel.
    used_weight = correlate(np.ones((h, w)), kernel, mode='constant', cval=0.0)
    rgb = image.as_float()
    out = np.empty_like(rgb)
    for c in range(3):
        out[:, :, c] = correlate(rgb[:, :, c], kernel, mode='constant', cval=0.0)

    with np.errstate(divide='ignore', invalid='ignore'):
        normalized = np.where(used_weight[:, :, None] != 0, out / used_weight[:, :, None], 0.0)

    # Quotients a float step below an integer would lose a whole level on truncation
    nearest = np.rint(normalized)
    normalized = np.where(np.abs(normalized - nearest) < SNAP_TOLERANCE, nearest, normalized)

    logger.debug("Applied %dx%d kernel to %dx%d image", kernel.shape[0], kernel.shape[1], w, h)
    return PixelBuffer.from_values(np.clip(normalized, 0, 255), rounding='floor')


def blur(image: PixelBuffer) -> PixelBuffer:
    return apply_kernel(image, BLUR_KERNEL)


def sharpen(image: PixelBuffer) -> PixelBuffer:
    return apply_kernel(image, SHARPEN_KERNEL)
