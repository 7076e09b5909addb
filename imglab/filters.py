"""Mean and median smoothing filters."""

from __future__ import annotations

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from imglab.pixels import _as_rgb, clamp, gray_levels, gray_to_rgb


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError("mask size must be at least 1")


def _fits(height: int, width: int, window: int) -> bool:
    return height >= window and width >= window


def mean_filter(rgb, size: int) -> np.ndarray:
    """Average each channel over a square window.

    The window spans ``2 * ((size - 1) // 2) + 1`` pixels a side and the sum
    is divided by ``size * size``. The result is ``margin`` pixels narrower
    and shorter than the input; pixels outside the filtered area are black.
    """
    _check_size(size)
    array = _as_rgb(rgb)
    height, width = array.shape[:2]
    margin = (size - 1) // 2
    window = 2 * margin + 1
    cells = size * size
    out = np.zeros((max(height - margin, 0), max(width - margin, 0), 3), dtype=np.int64)
    if _fits(height, width, window):
        windows = sliding_window_view(array, (window, window), axis=(0, 1))
        sums = windows.sum(axis=(-2, -1), dtype=np.int64)
        out[margin:height - margin, margin:width - margin] = sums // cells
    return clamp(out)


def median_gray(rgb, size: int) -> np.ndarray:
    """Filter the gray levels with an odd square window.

    Each filtered pixel takes half of the largest gray level in its window.
    The result is ``margin`` pixels narrower and shorter than the input;
    pixels outside the filtered area are black.
    """
    _check_size(size)
    if size % 2 == 0:
        raise ValueError("mask size must be odd")
    gray = gray_levels(rgb)
    height, width = gray.shape
    margin = (size - 1) // 2
    out = np.zeros((max(height - margin, 0), max(width - margin, 0)), dtype=np.int64)
    if _fits(height, width, size):
        windows = sliding_window_view(gray, (size, size))
        out[margin:height - margin, margin:width - margin] = windows.max(axis=(-2, -1)) // 2
    return gray_to_rgb(out)


def median_color(rgb, size: int = 3) -> np.ndarray:
    """Replace each channel by its median over a square window.

    The window spans ``2 * (size // 2) + 1`` pixels a side. The output has
    the input's size; the border the window cannot cover is black.
    """
    _check_size(size)
    array = _as_rgb(rgb)
    height, width = array.shape[:2]
    margin = size // 2
    window = 2 * margin + 1
    out = np.zeros((height, width, 3), dtype=np.int64)
    if _fits(height, width, window):
        windows = sliding_window_view(array, (window, window), axis=(0, 1))
        flat = windows.reshape(windows.shape[:3] + (window * window,))
        middle = np.sort(flat, axis=-1)[..., (window * window) // 2]
        out[margin:height - margin, margin:width - margin] = middle
    return clamp(out)