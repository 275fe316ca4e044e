"""Tests for PPM and OpenCV-backed image I/O."""

import numpy as np
import pytest
from models.errors import InvalidArgumentError
from models.pixel_buffer import PixelBuffer
from utils.image_io import load_image, save_image
from utils.test_images import generate_random


def test_ppm_round_trip(tmp_path):
    image = generate_random(5, 3, seed=4)
    path = tmp_path / "img.ppm"
    save_image(image, str(path))
    assert path.read_text().startswith("P3\n5 3\n255\n")
    assert load_image(str(path)) == image


def test_ppm_comments_and_maxval(tmp_path):
    path = tmp_path / "small.ppm"
    path.write_text("P3\n# a comment\n2 1\n# another\n15\n15 0 0  0 15 0\n")
    image = load_image(str(path))
    assert image.get_pixel(0, 0) == (255, 0, 0)
    assert image.get_pixel(1, 0) == (0, 255, 0)


def test_ppm_wrong_magic(tmp_path):
    path = tmp_path / "bad.ppm"
    path.write_text("P6\n1 1\n255\n0 0 0\n")
    with pytest.raises(InvalidArgumentError):
        load_image(str(path))


def test_png_round_trip_preserves_channel_order(tmp_path):
    image = PixelBuffer.filled(4, 2, (250, 10, 60))
    path = tmp_path / "img.png"
    save_image(image, str(path))
    assert load_image(str(path)) == image


def test_missing_file(tmp_path):
    with pytest.raises(InvalidArgumentError):
        load_image(str(tmp_path / "missing.png"))
