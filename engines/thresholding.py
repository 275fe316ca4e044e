"""Magnitude thresholding of wavelet coefficients."""

import numpy as np
from typing import Tuple

from models.errors import InvalidArgumentError


def compression_ratio(quality: int) -> float:
    """Fraction of coefficients to discard for quality 0-100."""
    if not (0 <= quality <= 100):
        raise InvalidArgumentError(f"Quality must be 0-100, got {quality}")
    return (100 - quality) / 1000.0


def select_threshold(coeffs: np.ndarray, ratio: float) -> Tuple[float, int]:
    """
    Magnitude at or below which coefficients are discarded.

    Returns (threshold, k) where k = floor(N * ratio) is the nominal count.
    k == 0 gives a threshold of -inf (nothing discarded).
    """
    total = coeffs.size
    k = int(total * ratio)
    if k <= 0:
        return float('-inf'), 0
    magnitudes = np.sort(np.abs(coeffs), axis=None)
    return float(magnitudes[k - 1]), k


def apply_threshold(coeffs: np.ndarray, ratio: float) -> Tuple[np.ndarray, int, float]:
    """
    Zero the smallest-magnitude fraction `ratio` of coefficients.

    Every coefficient whose magnitude equals the threshold is zeroed too,
    so ties can discard more than the nominal count.
    Returns (new coefficients, zeroed count, threshold).
    """
    threshold, _ = select_threshold(coeffs, ratio)
    mask = np.abs(coeffs) <= threshold
    result = np.where(mask, 0.0, coeffs)
    return result, int(mask.sum()), threshold
