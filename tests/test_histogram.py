import numpy as np
import pytest

from imglab.histogram import (
    BLACK,
    RED,
    WHITE,
    channel_histograms,
    gray_histogram,
    render_histogram,
)


def _sample(height=5, width=8, seed=0):
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8)


def test_gray_histogram_counts_every_pixel():
    hist = gray_histogram(_sample())
    assert hist.shape == (256,)
    assert hist.sum() == 40


def test_gray_histogram_uniform_image():
    rgb = np.full((3, 4, 3), 77, dtype=np.uint8)
    hist = gray_histogram(rgb)
    assert hist[77] == 12
    assert hist.sum() == hist[77]


def test_channel_histograms_pure_red():
    rgb = np.zeros((2, 3, 3), dtype=np.uint8)
    rgb[..., 0] = 255
    red, green, blue = channel_histograms(rgb)
    assert red[255] == 6 and red.sum() == 6
    assert green[0] == 6 and blue[0] == 6


def test_channel_histograms_sum_to_pixel_count():
    for hist in channel_histograms(_sample(seed=3)):
        assert hist.sum() == 40


def test_render_shape_and_full_bar():
    counts = np.zeros(256, dtype=int)
    counts[10] = 5
    image = render_histogram(counts, 50, RED)
    assert image.shape == (50, 256, 3)
    assert np.all(image[:, 10] == RED)
    assert np.all(image[:, 11] == WHITE)


def test_render_bars_anchored_at_bottom():
    counts = np.zeros(256, dtype=int)
    counts[0] = 4
    counts[1] = 2
    image = render_histogram(counts, 100)
    column = image[:, 1]
    dark = np.all(column == BLACK, axis=1)
    assert dark[-1]
    assert not dark[0]
    assert np.all(np.diff(dark.astype(int)) >= 0)
    assert dark.sum() == 50


def test_render_all_zero_is_white():
    image = render_histogram(np.zeros(256, dtype=int), 20)
    assert np.all(image == 255)


def test_render_rejects_bad_counts():
    with pytest.raises(ValueError):
        render_histogram([1, 2, 3], 20)


def test_render_rejects_bad_height():
    with pytest.raises(ValueError):
        render_histogram(np.ones(256, dtype=int), 0)