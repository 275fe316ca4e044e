"""Intermediate data for inspection of a compression run."""

from dataclasses import dataclass, field
from typing import List
import numpy as np


@dataclass
class IntermediateData:
    """Per-channel wavelet state captured between transform and inverse."""
    
    padded_size: int = 0
    original_shape: tuple = (0, 0)
    thresholds: List[float] = field(default_factory=list)
    zeroed_per_channel: List[int] = field(default_factory=list)
    # Thresholded coefficient planes, one per channel (R, G, B)
    coefficients: List[np.ndarray] = field(default_factory=list)
