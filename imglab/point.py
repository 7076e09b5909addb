"""Point operations: negatives, thresholding, contrast and histogram stretching."""

from __future__ import annotations

import numpy as np

from imglab.pixels import _as_rgb, clamp, gray_levels, gray_to_rgb


def negative_gray(rgb) -> np.ndarray:
    """Return the negative of the image's gray levels as an RGB image."""
    return gray_to_rgb(255 - gray_levels(rgb))


def negative_color(rgb) -> np.ndarray:
    """Return the per-channel negative of a color image."""
    return clamp(255 - _as_rgb(rgb))


def threshold(rgb, level: int) -> np.ndarray:
    """Gray levels above ``level`` become white, below become black; equal ones stay."""
    gray = gray_levels(rgb)
    out = np.where(gray > level, 255, np.where(gray < level, 0, gray))
    return gray_to_rgb(out)


def _scale(values: np.ndarray, factor: float) -> np.ndarray:
    return clamp(np.trunc(values * float(factor)))


def contrast_gray(rgb, factor: float) -> np.ndarray:
    """Multiply gray levels by ``factor``, truncating and clipping to ``[0, 255]``."""
    return gray_to_rgb(_scale(gray_levels(rgb), factor))


def contrast_color(rgb, factor: float) -> np.ndarray:
    """Multiply every channel by ``factor``, truncating and clipping to ``[0, 255]``."""
    return _scale(_as_rgb(rgb), factor)


def linear_stretch(rgb) -> np.ndarray:
    """Stretch the gray range of the image linearly onto ``[0, 255]``."""
    gray = gray_levels(rgb)
    if gray.size == 0:
        raise ValueError("cannot stretch an empty image")
    low, high = int(gray.min()), int(gray.max())
    if low == high:
        raise ValueError("cannot stretch an image with a single gray level")
    return gray_to_rgb((gray - low) * 255 // (high - low))


def equalize(rgb) -> np.ndarray:
    """Equalize the gray-level histogram through its cumulative distribution."""
    gray = gray_levels(rgb)
    total = gray.size
    if total == 0:
        raise ValueError("cannot equalize an empty image")
    cdf = np.cumsum(np.bincount(gray.ravel(), minlength=256)).astype(np.int64)
    lut = np.clip(cdf * 255 // total, 0, 255)
    return gray_to_rgb(lut[gray])