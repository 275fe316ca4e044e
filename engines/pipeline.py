"""Haar-wavelet compression/reconstruction pipeline."""

import logging
from concurrent.futures import ThreadPoolExecutor

import numpy as np
from typing import Tuple

from models.compression_params import CompressionParams
from models.compression_result import CompressionResult
from models.intermediate_data import IntermediateData
from models.pixel_buffer import PixelBuffer
from engines.padding import pad_to_power_of_two, crop
from engines.haar_engine import haar2, ihaar2
from engines.thresholding import apply_threshold
from utils.metrics import compute_psnr_ssim, Timer

logger = logging.getLogger(__name__)


def compress_channel(channel: np.ndarray, ratio: float, timer: Timer = None) -> dict:
    """Pad, transform, threshold, invert and crop one plane."""
    timer = timer or Timer()
    padded, orig_shape = pad_to_power_of_two(channel)
    coeffs = timer.measure_encode(haar2, padded)
    thresholded, zeroed, threshold = apply_threshold(coeffs, ratio)
    spatial = timer.measure_decode(ihaar2, thresholded)
    return {
        'reconstructed': crop(spatial, orig_shape),
        'coefficients': thresholded,
        'zeroed': zeroed,
        'threshold': threshold,
        'padded_size': padded.shape[0],
        'encode_time_ms': timer.encode_time_ms,
        'decode_time_ms': timer.decode_time_ms,
    }


def compress_reconstruct(
    image: PixelBuffer,
    params: CompressionParams
) -> Tuple[CompressionResult, IntermediateData]:
    """Run wavelet compression on each channel and reconstruct the image."""
    rgb = image.as_float()
    ratio = params.compression_ratio
    planes = [rgb[:, :, c] for c in range(3)]

    if params.max_workers > 1:
        with ThreadPoolExecutor(max_workers=min(params.max_workers, 3)) as pool:
            channels = list(pool.map(lambda plane: compress_channel(plane, ratio), planes))
    else:
        channels = [compress_channel(plane, ratio) for plane in planes]

    reconstructed = PixelBuffer.from_values(
        np.stack([ch['reconstructed'] for ch in channels], axis=-1), rounding='round'
    )

    padded_size = channels[0]['padded_size']
    zeroed = sum(ch['zeroed'] for ch in channels)
    total = 3 * padded_size * padded_size
    metrics = compute_psnr_ssim(image, reconstructed)

    logger.debug(
        "Compressed %dx%d at quality %d: padded to %d, zeroed %d/%d coefficients",
        image.width, image.height, params.quality, padded_size, zeroed, total
    )

    result = CompressionResult(
        original_image=image,
        reconstructed_image=reconstructed,
        quality=params.quality,
        psnr_rgb=metrics['psnr_rgb'],
        ssim_rgb=metrics['ssim_rgb'],
        zeroed_coeffs=zeroed,
        total_coeffs=total,
        encode_time_ms=sum(ch['encode_time_ms'] for ch in channels),
        decode_time_ms=sum(ch['decode_time_ms'] for ch in channels),
    )

    intermediate = IntermediateData(
        padded_size=padded_size,
        original_shape=image.shape,
        thresholds=[ch['threshold'] for ch in channels],
        zeroed_per_channel=[ch['zeroed'] for ch in channels],
        coefficients=[ch['coefficients'] for ch in channels],
    )

    return result, intermediate


def compress(image: PixelBuffer, quality: int) -> PixelBuffer:
    """Lossy wavelet simplification of `image`; same dimensions as the input."""
    result, _ = compress_reconstruct(image, CompressionParams(quality=quality))
    return result.reconstructed_image
