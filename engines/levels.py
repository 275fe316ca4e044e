"""Levels adjustment through a quadratic tone curve."""

import logging

from models.pixel_buffer import PixelBuffer
from models.tone_curve import ToneCurve

logger = logging.getLogger(__name__)


def levels_adjust(image: PixelBuffer, black: int, mid: int, white: int) -> PixelBuffer:
    """
    Remap every sample through the quadratic fitted to
    (black, 0), (mid, 128), (white, 255).

    Requires 0 <= black <= mid <= white <= 255. The three anchors must also
    be distinct: with black == mid or mid == white no quadratic passes
    through all of them, so those inputs raise InvalidArgumentError too.
    """
    curve = ToneCurve.fit(black, mid, white)
    logger.debug("Levels curve: a=%.6g b=%.6g c=%.6g", curve.a, curve.b, curve.c)
    # Inputs are integers in [0, 255], so a table of the curve is exact
    table = curve.lookup_table()
    return PixelBuffer.from_array(table[image.samples])
