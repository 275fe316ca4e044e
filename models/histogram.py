"""Per-channel intensity histogram."""

from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class Histogram:
    """Three 256-bucket frequency arrays keyed by intensity."""

    red: np.ndarray
    green: np.ndarray
    blue: np.ndarray

    def channel(self, index: int) -> np.ndarray:
        return (self.red, self.green, self.blue)[index]

    def total(self, index: int) -> int:
        return int(self.channel(index).sum())

    @property
    def max_frequency(self) -> int:
        """Largest bucket over all three channels."""
        return int(max(self.red.max(), self.green.max(), self.blue.max()))
