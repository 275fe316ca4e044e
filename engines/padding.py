"""Power-of-two padding and cropping of channel planes."""

import numpy as np
from typing import Tuple


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (1 for n <= 1)."""
    power = 1
    while power < n:
        power *= 2
    return power


def pad_to_power_of_two(channel: np.ndarray) -> Tuple[np.ndarray, Tuple[int, int]]:
    """Zero-pad a 2D plane to a square whose side is a power of two."""
    h, w = channel.shape
    size = next_power_of_two(max(h, w))
    padded = np.zeros((size, size), dtype=np.float64)
    padded[:h, :w] = channel
    return padded, (h, w)


def crop(channel: np.ndarray, shape: Tuple[int, int]) -> np.ndarray:
    """Take the top-left (h, w) region as a new array."""
    h, w = shape
    return channel[:h, :w].copy()
