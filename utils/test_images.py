"""Synthetic test image generators."""

import numpy as np

from models.pixel_buffer import PixelBuffer


def generate_colored_checkerboard(size: int = 256, block_size: int = 32) -> PixelBuffer:
    """High-contrast checkerboard - stresses edges in filters and the wavelet."""
    ys, xs = np.indices((size, size))
    dark = ((ys // block_size + xs // block_size) % 2) == 0
    img = np.where(dark[..., None], np.uint8(30), np.uint8(220))
    return PixelBuffer.from_array(np.broadcast_to(img, (size, size, 3)))


def generate_thin_stripes(size: int = 256, stripe_width: int = 4) -> PixelBuffer:
    """Fine vertical two-colour stripes - high-frequency content."""
    img = np.zeros((size, size, 3), dtype=np.uint8)
    
    for j in range(size):
        if (j // stripe_width) % 2 == 0:
            img[:, j] = [200, 60, 60]
        else:
            img[:, j] = [60, 180, 200]
    
    return PixelBuffer.from_array(img)


def generate_gradient(width: int = 256, height: int = 256) -> PixelBuffer:
    """Smooth diagonal gradient - reveals banding and smoothing."""
    ys, xs = np.indices((height, width), dtype=np.float64)
    t = (ys + xs) / max(width + height - 2, 1)
    img = np.stack([40 + t * 180, 60 + t * 140, 120 + t * 100], axis=-1)
    return PixelBuffer.from_values(img)


def generate_random(width: int = 64, height: int = 64, seed: int = 0) -> PixelBuffer:
    """Uniform noise with a fixed seed."""
    rng = np.random.default_rng(seed)
    return PixelBuffer.from_array(rng.integers(0, 256, (height, width, 3), dtype=np.uint8))


def generate_demo_image(key: str) -> PixelBuffer | None:
    """Generate demo image by key."""
    generators = {
        "checkerboard": lambda: generate_colored_checkerboard(256),
        "stripes": lambda: generate_thin_stripes(256),
        "gradient": lambda: generate_gradient(256, 256),
        "random": lambda: generate_random(256, 256),
    }
    
    if key in generators:
        return generators[key]()
    
    return None
