"""Metrics: PSNR, SSIM, timing."""

import time
import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity
from typing import Dict

from models.pixel_buffer import PixelBuffer


def compute_psnr_ssim(original: PixelBuffer, reconstructed: PixelBuffer) -> Dict[str, float]:
    """Compute PSNR and SSIM over RGB. Identical buffers give PSNR = inf."""
    original_rgb = original.samples
    reconstructed_rgb = reconstructed.samples

    if np.array_equal(original_rgb, reconstructed_rgb):
        return {'psnr_rgb': float('inf'), 'ssim_rgb': 1.0}

    psnr_rgb = peak_signal_noise_ratio(original_rgb, reconstructed_rgb, data_range=255)

    # SSIM needs a window no larger than the image; odd, at least 3
    win_size = min(7, original.width, original.height)
    if win_size % 2 == 0:
        win_size -= 1
    if win_size < 3:
        ssim_rgb = float('nan')
    else:
        ssim_rgb = structural_similarity(
            original_rgb, reconstructed_rgb, channel_axis=2, data_range=255, win_size=win_size
        )

    return {
        'psnr_rgb': float(psnr_rgb),
        'ssim_rgb': float(ssim_rgb),
    }


class Timer:
    """Simple timer for forward/inverse transform runtime."""
    
    def __init__(self):
        self.encode_time_ms = 0.0
        self.decode_time_ms = 0.0
    
    def measure_encode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.encode_time_ms += (time.perf_counter() - start) * 1000.0
        return result
    
    def measure_decode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.decode_time_ms += (time.perf_counter() - start) * 1000.0
        return result
