import numpy as np
import pytest

from imglab.filters import mean_filter, median_color, median_gray


def _flat(value, height=7, width=9):
    return np.full((height, width, 3), value, dtype=np.uint8)


def test_mean_filter_output_shape():
    out = mean_filter(_flat(40), 3)
    assert out.shape == (6, 8, 3)


def test_mean_filter_keeps_constant_interior():
    out = mean_filter(_flat(40), 3)
    assert np.array_equal(out[1:6, 1:8], np.full((5, 7, 3), 40))


def test_mean_filter_border_is_black():
    out = mean_filter(_flat(40), 3)
    assert int(out[0].max()) == 0
    assert int(out[:, 0].max()) == 0


def test_mean_filter_size_one_is_identity():
    rng = np.random.default_rng(0)
    image = rng.integers(0, 256, size=(5, 6, 3), dtype=np.uint8)
    assert np.array_equal(mean_filter(image, 1), image)


def test_mean_filter_spreads_single_pixel():
    image = np.zeros((5, 5, 3), dtype=np.uint8)
    image[2, 2] = 90
    out = mean_filter(image, 3)
    assert np.array_equal(out[1:4, 1:4], np.full((3, 3, 3), 10))


def test_mean_filter_rejects_non_positive_size():
    with pytest.raises(ValueError):
        mean_filter(_flat(10), 0)


def test_mean_filter_output_never_exceeds_input_maximum():
    rng = np.random.default_rng(1)
    image = rng.integers(0, 256, size=(8, 8, 3), dtype=np.uint8)
    out = mean_filter(image, 5)
    assert out.max() <= image.max()


def test_median_gray_takes_half_of_window_maximum():
    out = median_gray(_flat(200), 3)
    assert out.shape == (6, 8, 3)
    assert np.all(out[1:6, 1:8] == 100)


def test_median_gray_rejects_even_size():
    with pytest.raises(ValueError):
        median_gray(_flat(200), 4)


def test_median_gray_image_smaller_than_window_is_black():
    out = median_gray(_flat(200, 2, 2), 5)
    assert out.shape == (0, 0, 3)


def test_median_color_removes_isolated_noise():
    image = _flat(70)
    image[3, 4] = 255
    out = median_color(image, 3)
    assert out.shape == image.shape
    assert np.all(out[1:6, 1:8] == 70)


def test_median_color_border_is_black():
    out = median_color(_flat(70))
    assert int(out[0].max()) == 0
    assert int(out[-1].max()) == 0
    assert int(out[:, 0].max()) == 0
    assert int(out[:, -1].max()) == 0
    assert int(out[1, 1, 0]) == 70


def test_median_color_works_per_channel():
    image = np.zeros((3, 3, 3), dtype=np.uint8)
    image[..., 0] = 10
    image[..., 1] = 20
    image[..., 2] = 30
    out = median_color(image)
    assert out[1, 1].tolist() == [10, 20, 30]


def test_median_color_rejects_non_positive_size():
    with pytest.raises(ValueError):
        median_color(_flat(70), 0)