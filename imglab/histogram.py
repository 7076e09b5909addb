"""Gray and per-channel histograms and their bar-chart rendering."""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from imglab.pixels import _as_rgb, gray_levels

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)

DEFAULT_HEIGHT = 200


def gray_histogram(rgb) -> np.ndarray:
    """Count the pixels at each of the 256 gray levels."""
    return np.bincount(gray_levels(rgb).ravel(), minlength=256)


def channel_histograms(rgb) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return the red, green and blue histograms of a color image."""
    array = _as_rgb(rgb)
    return tuple(
        np.bincount(array[..., channel].ravel(), minlength=256) for channel in range(3)
    )


def render_histogram(
    counts: Sequence[int],
    height: int = DEFAULT_HEIGHT,
    color: Tuple[int, int, int] = BLACK,
) -> np.ndarray:
    """Draw a 256-column bar chart on white, bars scaled to the largest count."""
    counts = np.asarray(counts, dtype=np.int64)
    if counts.shape != (256,):
        raise ValueError(f"expected 256 counts, got shape {counts.shape}")
    if np.any(counts < 0):
        raise ValueError("histogram counts must not be negative")
    if height <= 0:
        raise ValueError("histogram height must be positive")

    image = np.empty((height, 256, 3), dtype=np.uint8)
    image[...] = WHITE
    peak = int(counts.max())
    if peak == 0:
        return image
    bars = height * counts // peak
    rows = np.arange(height)[:, np.newaxis]
    image[rows >= height - bars[np.newaxis, :]] = color
    return image