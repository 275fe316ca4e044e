"""Multi-level 2D Haar transform and its inverse."""

import numpy as np

SQRT2 = np.sqrt(2.0)


def transform_rows(matrix: np.ndarray, length: int) -> None:
    """
    One Haar step on the first `length` entries of every row, in place.

    Produces length/2 averages (a[2i] + a[2i+1]) / sqrt(2) followed by
    length/2 differences (a[2i] - a[2i+1]) / sqrt(2).
    """
    half = length // 2
    even = matrix[:, 0:length:2].copy()
    odd = matrix[:, 1:length:2].copy()
    matrix[:, :half] = (even + odd) / SQRT2
    matrix[:, half:length] = (even - odd) / SQRT2


def inverse_transform_rows(matrix: np.ndarray, length: int) -> None:
    """Undo `transform_rows` on the first `length` entries of every row, in place."""
    half = length // 2
    avg = matrix[:, :half].copy()
    diff = matrix[:, half:length].copy()
    matrix[:, 0:length:2] = (avg + diff) / SQRT2
    matrix[:, 1:length:2] = (avg - diff) / SQRT2


def haar2(channel: np.ndarray) -> np.ndarray:
    """
    Forward 2D Haar pyramid of a square power-of-two plane.

    Each level works on the top-left c x c quadrant: all its rows, then all
    its columns; c halves until it reaches 1.
    """
    size = channel.shape[0]
    coeffs = np.array(channel, dtype=np.float64, copy=True)
    c = size
    while c > 1:
        quadrant = coeffs[:c, :c]
        transform_rows(quadrant, c)
        transform_rows(quadrant.T, c)
        c //= 2
    return coeffs


def ihaar2(coeffs: np.ndarray) -> np.ndarray:
    """Inverse of `haar2`: levels from 2 up to full size, columns then rows."""
    size = coeffs.shape[0]
    spatial = np.array(coeffs, dtype=np.float64, copy=True)
    c = 2
    while c <= size:
        quadrant = spatial[:c, :c]
        inverse_transform_rows(quadrant.T, c)
        inverse_transform_rows(quadrant, c)
        c *= 2
    return spatial
