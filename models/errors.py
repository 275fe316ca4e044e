"""Error taxonomy for the image engine."""


class ImageEngineError(Exception):
    """Base class for all engine errors."""


class InvalidArgumentError(ImageEngineError, ValueError):
    """Scalar parameter outside its allowed range or unknown tag."""


class DimensionMismatchError(ImageEngineError, ValueError):
    """Buffers that must share width/height do not."""


class OutOfBoundsError(ImageEngineError, IndexError):
    """Pixel coordinate outside the buffer extent."""
