"""Quadratic tone curve through black/mid/white anchors."""

from dataclasses import dataclass
import numpy as np

from models.errors import InvalidArgumentError
from utils.constants import LEVELS_TARGETS


@dataclass(frozen=True)
class ToneCurve:
    """
    y = a*x^2 + b*x + c passing through (black, 0), (mid, 128), (white, 255).

    The coefficients are the closed-form solution of the 3x3 Vandermonde
    system, so each anchor maps exactly onto its target.
    """

    black: int
    mid: int
    white: int
    a: float
    b: float
    c: float

    @classmethod
    def fit(cls, black: int, mid: int, white: int) -> 'ToneCurve':
        if black < 0 or mid < black or white < mid or white > 255:
            raise InvalidArgumentError(
                f"Levels require 0 <= black <= mid <= white <= 255, got {black}, {mid}, {white}"
            )
        if black == mid or mid == white:
            raise InvalidArgumentError(
                f"Levels anchors must be distinct, got {black}, {mid}, {white}"
            )

        y0, y1, y2 = LEVELS_TARGETS
        x0, x1, x2 = float(black), float(mid), float(white)
        denom = (x0 - x1) * (x0 - x2) * (x1 - x2)
        a = (x2 * (y1 - y0) + x1 * (y0 - y2) + x0 * (y2 - y1)) / denom
        b = (x2 * x2 * (y0 - y1) + x1 * x1 * (y2 - y0) + x0 * x0 * (y1 - y2)) / denom
        c = (x1 * x2 * (x1 - x2) * y0 + x2 * x0 * (x2 - x0) * y1 + x0 * x1 * (x0 - x1) * y2) / denom
        return cls(black, mid, white, a, b, c)

    def apply(self, values: np.ndarray) -> np.ndarray:
        """Evaluate the curve on an array (unclamped float)."""
        x = np.asarray(values, dtype=np.float64)
        return (self.a * x + self.b) * x + self.c

    def lookup_table(self) -> np.ndarray:
        """256-entry uint8 table: curve at every input level, rounded and clamped."""
        return np.clip(np.rint(self.apply(np.arange(256))), 0, 255).astype(np.uint8)
