import numpy as np
import pytest

from imglab.pixels import gray_levels
from imglab.point import (
    contrast_color,
    contrast_gray,
    equalize,
    linear_stretch,
    negative_color,
    negative_gray,
    threshold,
)


def _sample(height=6, width=7, seed=0):
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8)


def _neutral(values):
    values = np.asarray(values, dtype=np.uint8)
    return np.stack([values] * 3, axis=2)


def test_negative_color_is_involution():
    rgb = _sample()
    assert np.array_equal(negative_color(negative_color(rgb)), rgb)


def test_negative_color_sums_to_white():
    rgb = _sample(seed=4)
    total = rgb.astype(int) + negative_color(rgb).astype(int)
    assert np.array_equal(total, np.full(rgb.shape, 255))


def test_negative_gray_inverts_gray_levels():
    rgb = _sample(seed=1)
    out = negative_gray(rgb)
    assert np.array_equal(gray_levels(out), 255 - gray_levels(rgb))
    assert np.array_equal(out[..., 0], out[..., 2])


def test_threshold_splits_and_keeps_equal():
    rgb = _neutral([[10, 100, 200]])
    out = threshold(rgb, 100)
    assert gray_levels(out).tolist() == [[0, 100, 255]]


def test_threshold_output_is_binary_away_from_level():
    rgb = _sample(seed=2)
    gray = gray_levels(threshold(rgb, 128))
    original = gray_levels(rgb)
    assert set(np.unique(gray[original != 128]).tolist()) <= {0, 255}


def test_contrast_gray_identity():
    rgb = _sample(seed=3)
    assert np.array_equal(gray_levels(contrast_gray(rgb, 1.0)), gray_levels(rgb))


def test_contrast_gray_zero_and_saturation():
    rgb = _neutral([[0, 200, 255]])
    assert gray_levels(contrast_gray(rgb, 0.0)).tolist() == [[0, 0, 0]]
    assert gray_levels(contrast_gray(rgb, 2.0)).tolist() == [[0, 255, 255]]


def test_contrast_gray_negative_factor_clips_to_black():
    rgb = _sample(seed=5)
    out = contrast_gray(rgb, -1.5)
    assert out.shape == rgb.shape
    assert int(out.max()) == 0


def test_contrast_color_identity_and_saturation():
    rgb = _sample(seed=6)
    assert np.array_equal(contrast_color(rgb, 1.0), rgb)
    doubled = contrast_color(rgb, 2.0)
    assert np.all(doubled[rgb >= 128] == 255)
    assert np.array_equal(doubled[rgb < 128], rgb[rgb < 128].astype(int) * 2)


def test_linear_stretch_covers_full_range():
    rgb = _neutral([[50, 60, 70], [80, 90, 100]])
    gray = gray_levels(linear_stretch(rgb))
    assert gray.min() == 0 and gray.max() == 255
    assert np.all(np.diff(gray.ravel()) > 0)


def test_linear_stretch_single_level_raises():
    with pytest.raises(ValueError):
        linear_stretch(_neutral([[42, 42], [42, 42]]))


def test_equalize_reaches_white_and_is_monotone():
    rgb = _sample(seed=7)
    before = gray_levels(rgb).ravel()
    after = gray_levels(equalize(rgb)).ravel()
    assert after.max() == 255
    order = np.argsort(before, kind="stable")
    assert np.all(np.diff(after[order]) >= 0)


def test_equalize_empty_raises():
    with pytest.raises(ValueError):
        equalize(np.zeros((0, 0, 3), dtype=np.uint8))