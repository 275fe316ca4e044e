"""Wavelet compression parameters."""

from dataclasses import dataclass

from models.errors import InvalidArgumentError


@dataclass
class CompressionParams:
    """Haar-wavelet compression parameters."""
    
    quality: int = 50
    max_workers: int = 1
    
    def __post_init__(self):
        if not (0 <= self.quality <= 100):
            raise InvalidArgumentError(f"Quality must be 0-100, got {self.quality}")
        if self.max_workers < 1:
            raise InvalidArgumentError(f"max_workers must be >= 1, got {self.max_workers}")

    @property
    def compression_ratio(self) -> float:
        """Fraction of coefficients to discard."""
        from engines.thresholding import compression_ratio
        return compression_ratio(self.quality)
