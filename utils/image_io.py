"""Image I/O: OpenCV for standard formats, plain-text P3 PPM by hand."""

from pathlib import Path

import cv2
import numpy as np

from models.errors import InvalidArgumentError
from models.pixel_buffer import PixelBuffer


def _read_ppm(path: Path) -> PixelBuffer:
    tokens = []
    for line in path.read_text().splitlines():
        tokens.extend(line.split('#', 1)[0].split())
    if not tokens or tokens[0] != 'P3':
        raise InvalidArgumentError(f"Unsupported PPM format in {path}")
    try:
        width, height, maxval = (int(t) for t in tokens[1:4])
        values = np.array([int(t) for t in tokens[4:4 + width * height * 3]], dtype=np.float64)
    except ValueError as e:
        raise InvalidArgumentError(f"Malformed PPM header or data in {path}: {e}") from e
    if values.size != width * height * 3 or maxval < 1:
        raise InvalidArgumentError(f"Truncated PPM data in {path}")
    if maxval != 255:
        values = values * 255.0 / maxval
    return PixelBuffer.from_values(values.reshape(height, width, 3))


def _write_ppm(image: PixelBuffer, path: Path) -> None:
    rows = [' '.join(str(int(v)) for v in row.ravel()) for row in image.samples]
    path.write_text('\n'.join(['P3', f'{image.width} {image.height}', '255', *rows]) + '\n')


def load_image(path: str) -> PixelBuffer:
    """Load image as an RGB PixelBuffer."""
    path = Path(path)
    if path.suffix.lower() == '.ppm':
        return _read_ppm(path)
    img = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if img is None:
        raise InvalidArgumentError(f"Could not load image from {path}")
    return PixelBuffer.from_array(cv2.cvtColor(img, cv2.COLOR_BGR2RGB))


def save_image(image: PixelBuffer, path: str) -> None:
    """Save RGB image; format chosen by extension."""
    path = Path(path)
    if path.suffix.lower() == '.ppm':
        _write_ppm(image, path)
        return
    if not cv2.imwrite(str(path), cv2.cvtColor(image.to_array(), cv2.COLOR_RGB2BGR)):
        raise InvalidArgumentError(f"Could not save image to {path}")
