"""Side-by-side comparison of a transform and the original image."""

from models.enums import SplitKind
from models.errors import InvalidArgumentError
from models.pixel_buffer import PixelBuffer
from engines.convolution import blur, sharpen
from engines.histogram import color_correct
from engines.levels import levels_adjust
from engines.pointwise import greyscale, sepia
from utils.constants import LEVELS_PRESET

SPLIT_TRANSFORMS = {
    SplitKind.BLUR: blur,
    SplitKind.SHARPEN: sharpen,
    SplitKind.GREYSCALE: greyscale,
    SplitKind.SEPIA: sepia,
    SplitKind.COLOR_CORRECT: color_correct,
    SplitKind.LEVELS_ADJUST: lambda image: levels_adjust(image, *LEVELS_PRESET),
}


def split_view(kind, percent: int, image: PixelBuffer) -> PixelBuffer:
    """
    Transform the whole image, then keep the transformed columns
    x < width * percent / 100 and the original for the rest.
    """
    if not (0 <= percent <= 100):
        raise InvalidArgumentError(f"Split percentage must be between 0 and 100, got {percent}")
    transform = SPLIT_TRANSFORMS[SplitKind.parse(kind)]

    processed = transform(image)
    split_x = int(image.width * (percent / 100.0))
    composite = image.to_array()
    composite[:, :split_x] = processed.samples[:, :split_x]
    return PixelBuffer.from_array(composite)
