"""Edge detection: first differences, Roberts, Sobel, Prewitt, Laplace and LoG."""

from __future__ import annotations

from typing import Tuple

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from imglab.pixels import _as_rgb, clamp, gray_levels, gray_to_rgb

SOBEL_X = np.array([[-1, 0, 1], [-2, 0, 2], [-1, 0, 1]])
SOBEL_Y = np.array([[-1, -2, -1], [0, 0, 0], [1, 2, 1]])
PREWITT_X = np.array([[-1, 0, 1], [-1, 0, 1], [-1, 0, 1]])
PREWITT_Y = np.array([[-1, -1, -1], [0, 0, 0], [1, 1, 1]])
LAPLACE = np.array([[0, 1, 0], [1, -4, 1], [0, 1, 0]])
LOG = np.array(
    [
        [0, 0, -1, 0, 0],
        [0, -1, -2, -1, 0],
        [-1, -2, 16, -2, -1],
        [0, -1, -2, -1, 0],
        [0, 0, -1, 0, 0],
    ]
)

Pair = Tuple[np.ndarray, np.ndarray]


def convolve_magnitude(channel, mask) -> np.ndarray:
    """Correlate a 2-D channel with a square odd mask and keep ``|sum|`` clipped to 255.

    ``mask[row][col]`` weighs the pixel at that row and column offset from the
    centre. The output has the channel's shape; the border the mask cannot
    cover is black.
    """
    data = np.asarray(channel)
    if data.ndim != 2:
        raise ValueError(f"expected a channel of shape (height, width), got {data.shape}")
    kernel = np.asarray(mask, dtype=np.int64)
    if kernel.ndim != 2 or kernel.shape[0] != kernel.shape[1] or kernel.shape[0] % 2 == 0:
        raise ValueError(f"expected a square mask of odd size, got shape {kernel.shape}")
    size = kernel.shape[0]
    margin = size // 2
    height, width = data.shape
    out = np.zeros((height, width), dtype=np.int64)
    if height >= size and width >= size:
        windows = sliding_window_view(data.astype(np.int64), (size, size))
        sums = np.tensordot(windows, kernel, axes=([2, 3], [0, 1]))
        out[margin:height - margin, margin:width - margin] = np.abs(sums)
    return clamp(out)


def _gray_masked(rgb, mask) -> np.ndarray:
    return gray_to_rgb(convolve_magnitude(gray_levels(rgb), mask))


def _color_masked(rgb, mask) -> np.ndarray:
    array = _as_rgb(rgb)
    return np.stack(
        [convolve_magnitude(array[..., channel], mask) for channel in range(3)], axis=-1
    )


def _differences(values: np.ndarray) -> Pair:
    return clamp(np.abs(np.diff(values, axis=1))), clamp(np.abs(np.diff(values, axis=0)))


def _cross_differences(values: np.ndarray) -> Pair:
    gx = np.abs(values[:-1, :-1] - values[1:, 1:])
    gy = np.abs(values[:-1, 1:] - values[1:, :-1])
    return clamp(gx), clamp(gy)


def gradient_gray(rgb) -> Pair:
    """Return horizontal and vertical gray-level differences.

    The horizontal image is one column narrower, the vertical one row shorter.
    """
    gx, gy = _differences(gray_levels(rgb))
    return gray_to_rgb(gx), gray_to_rgb(gy)


def gradient_color(rgb) -> Pair:
    """Return horizontal and vertical per-channel differences."""
    return _differences(_as_rgb(rgb))


def roberts_gray(rgb) -> Pair:
    """Return the two Roberts cross differences of the gray levels.

    Both images are one row and one column smaller than the input.
    """
    gx, gy = _cross_differences(gray_levels(rgb))
    return gray_to_rgb(gx), gray_to_rgb(gy)


def roberts_color(rgb) -> Pair:
    """Return the two Roberts cross differences of every channel."""
    return _cross_differences(_as_rgb(rgb))


def sobel_gray(rgb) -> Pair:
    """Return the Sobel x and y responses of the gray levels."""
    return _gray_masked(rgb, SOBEL_X), _gray_masked(rgb, SOBEL_Y)


def sobel_color(rgb) -> Pair:
    """Return the Sobel x and y responses of every channel."""
    return _color_masked(rgb, SOBEL_X), _color_masked(rgb, SOBEL_Y)


def prewitt_gray(rgb) -> Pair:
    """Return the Prewitt x and y responses of the gray levels."""
    return _gray_masked(rgb, PREWITT_X), _gray_masked(rgb, PREWITT_Y)


def prewitt_color(rgb) -> Pair:
    """Return the Prewitt x and y responses of every channel."""
    return _color_masked(rgb, PREWITT_X), _color_masked(rgb, PREWITT_Y)


def laplace_gray(rgb) -> np.ndarray:
    """Return the 3x3 Laplacian response of the gray levels."""
    return _gray_masked(rgb, LAPLACE)


def laplace_color(rgb) -> np.ndarray:
    """Return the 3x3 Laplacian response of every channel."""
    return _color_masked(rgb, LAPLACE)


def log_gray(rgb) -> np.ndarray:
    """Return the 5x5 Laplacian-of-Gaussian response of the gray levels."""
    return _gray_masked(rgb, LOG)


def log_color(rgb) -> np.ndarray:
    """Return the 5x5 Laplacian-of-Gaussian response of every channel."""
    return _color_masked(rgb, LOG)