"""Tests for the split-view compositor."""

import numpy as np
import pytest
from models.enums import SplitKind
from models.errors import InvalidArgumentError
from engines.convolution import blur
from engines.pointwise import greyscale
from engines.split_view import split_view, SPLIT_TRANSFORMS
from utils.test_images import generate_random


def test_every_kind_has_a_transform():
    assert set(SPLIT_TRANSFORMS) == set(SplitKind)


def test_zero_and_full_percent():
    image = generate_random(8, 4)
    assert split_view('greyscale', 0, image) == image
    assert split_view('greyscale', 100, image) == greyscale(image)


def test_columns_split_at_percent():
    image = generate_random(10, 3, seed=6)
    out = split_view(SplitKind.GREYSCALE, 35, image)
    grey = greyscale(image)
    assert np.array_equal(out.samples[:, :3], grey.samples[:, :3])
    assert np.array_equal(out.samples[:, 3:], image.samples[:, 3:])


def test_split_matches_full_image_filter():
    """Left part equals the filter applied to the whole image, not to a crop."""
    image = generate_random(9, 6, seed=12)
    out = split_view('blur', 50, image)
    full = blur(image)
    assert np.array_equal(out.samples[:, :4], full.samples[:, :4])
    assert np.array_equal(out.samples[:, 4:], image.samples[:, 4:])


@pytest.mark.parametrize("tag", ['blur', 'sharpen', 'greyscale', 'sepia', 'color-correct', 'levels-adjust'])
def test_all_tags_run(tag):
    image = generate_random(5, 5)
    out = split_view(tag, 60, image)
    assert (out.width, out.height) == (5, 5)


def test_tag_parsing_is_case_insensitive():
    assert SplitKind.parse('Color-Correct') is SplitKind.COLOR_CORRECT


@pytest.mark.parametrize("percent", [-1, 101])
def test_invalid_percent(percent):
    with pytest.raises(InvalidArgumentError):
        split_view('blur', percent, generate_random(4, 4))


def test_unknown_kind():
    with pytest.raises(InvalidArgumentError):
        split_view('emboss', 50, generate_random(4, 4))
