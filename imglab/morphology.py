"""Binary morphology with a 3x3 structuring element."""

from __future__ import annotations

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from imglab.pixels import gray_levels

BINARY_LEVEL = 128
_WINDOW = 3


def _as_binary(binary) -> np.ndarray:
    array = np.asarray(binary)
    if array.ndim != 2:
        raise ValueError(f"expected a binary image of shape (height, width), got {array.shape}")
    return array


def _apply(binary: np.ndarray, keep) -> np.ndarray:
    height, width = binary.shape
    out = np.zeros((height, width), dtype=np.uint8)
    if height >= _WINDOW and width >= _WINDOW:
        windows = sliding_window_view(binary, (_WINDOW, _WINDOW))
        out[1:-1, 1:-1] = np.where(keep(windows), 255, 0)
    return out


def binarize(rgb, level: int = BINARY_LEVEL) -> np.ndarray:
    """Return a ``(H, W)`` image: 255 where the gray level exceeds ``level``, else 0."""
    return np.where(gray_levels(rgb) > level, 255, 0).astype(np.uint8)


def erode(binary) -> np.ndarray:
    """Keep a pixel white only if its whole 3x3 neighbourhood is non-black.

    The one-pixel border is black.
    """
    array = _as_binary(binary)
    return _apply(array, lambda windows: (windows != 0).all(axis=(-2, -1)))


def dilate(binary) -> np.ndarray:
    """Make a pixel white if any pixel in its 3x3 neighbourhood is white.

    The one-pixel border is black.
    """
    array = _as_binary(binary)
    return _apply(array, lambda windows: (windows == 255).any(axis=(-2, -1)))


def opening(rgb) -> np.ndarray:
    """Binarize the image, then erode and dilate it."""
    return dilate(erode(binarize(rgb)))


def closing(rgb) -> np.ndarray:
    """Binarize the image, then dilate and erode it."""
    return erode(dilate(binarize(rgb)))