"""Tests for the quadratic levels curve."""

import numpy as np
import pytest
from models.errors import InvalidArgumentError
from models.pixel_buffer import PixelBuffer
from models.tone_curve import ToneCurve
from engines.levels import levels_adjust
from utils.test_images import generate_random


@pytest.mark.parametrize("black, mid, white", [(20, 100, 200), (0, 128, 255), (5, 30, 250), (100, 101, 102)])
def test_anchor_points_map_exactly(black, mid, white):
    image = PixelBuffer.from_array(np.array([[(black, mid, white), (white, black, mid)]]))
    out = levels_adjust(image, black, mid, white)
    assert out.get_pixel(0, 0) == (0, 128, 255)
    assert out.get_pixel(1, 0) == (255, 0, 128)


def test_fit_passes_through_anchors():
    curve = ToneCurve.fit(20, 100, 200)
    assert np.allclose(curve.apply([20, 100, 200]), [0, 128, 255])


def test_identity_preset():
    """(0, 128, 255) are collinear on y = x, so the curve is the identity."""
    curve = ToneCurve.fit(0, 128, 255)
    assert curve.a == pytest.approx(0.0, abs=1e-12)
    assert curve.b == pytest.approx(1.0)
    image = generate_random(8, 8)
    assert levels_adjust(image, 0, 128, 255) == image


def test_values_outside_range_are_clamped():
    image = PixelBuffer.from_array(np.array([[(0, 10, 255)]]))
    out = levels_adjust(image, 20, 100, 200)
    r, g, b = out.get_pixel(0, 0)
    assert 0 <= r <= 255 and 0 <= g <= 255
    assert b == 255


@pytest.mark.parametrize("black, mid, white", [
    (-1, 100, 200), (50, 40, 200), (10, 200, 100), (0, 128, 256),
])
def test_invalid_ordering_rejected(black, mid, white):
    with pytest.raises(InvalidArgumentError):
        levels_adjust(PixelBuffer(2, 2), black, mid, white)


@pytest.mark.parametrize("black, mid, white", [(10, 10, 200), (10, 200, 200), (50, 50, 50), (0, 0, 255)])
def test_coincident_anchors_rejected(black, mid, white):
    with pytest.raises(InvalidArgumentError):
        levels_adjust(PixelBuffer(2, 2), black, mid, white)
