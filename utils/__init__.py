"""Shared utilities."""

from .constants import BLUR_KERNEL, SHARPEN_KERNEL, LUMA_WEIGHTS, SEPIA_MATRIX
from .metrics import compute_psnr_ssim, Timer
from .test_images import generate_colored_checkerboard, generate_thin_stripes, generate_gradient
from .image_io import load_image, save_image

__all__ = [
    'BLUR_KERNEL',
    'SHARPEN_KERNEL',
    'LUMA_WEIGHTS',
    'SEPIA_MATRIX',
    'compute_psnr_ssim',
    'Timer',
    'generate_colored_checkerboard',
    'generate_thin_stripes',
    'generate_gradient',
    'load_image',
    'save_image',
]
