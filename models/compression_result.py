"""Compression result with metrics."""

from dataclasses import dataclass

from models.pixel_buffer import PixelBuffer


@dataclass
class CompressionResult:
    """Results from the wavelet compression pipeline."""
    
    original_image: PixelBuffer
    reconstructed_image: PixelBuffer
    quality: int
    
    # Quality metrics
    psnr_rgb: float
    ssim_rgb: float
    
    # Coefficient stats, summed over the three channels
    zeroed_coeffs: int
    total_coeffs: int
    
    # Runtime
    encode_time_ms: float
    decode_time_ms: float

    @property
    def zeroed_fraction(self) -> float:
        return self.zeroed_coeffs / self.total_coeffs if self.total_coeffs else 0.0
