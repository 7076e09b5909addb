"""Pixel-level helpers shared by the image operations.

Images are numpy arrays of shape ``(height, width, 3)`` holding 8-bit RGB
values. Gray levels use the integer luminance weighting ``(11 R + 16 G + 5 B) / 32``.
"""

from __future__ import annotations

from os import PathLike
from typing import Union

import numpy as np
from PIL import Image

PathType = Union[str, "PathLike[str]"]


def _as_rgb(rgb) -> np.ndarray:
    """Return ``rgb`` as an ``(H, W, 3)`` integer array, dropping any alpha channel."""
    array = np.asarray(rgb)
    if array.ndim != 3 or array.shape[2] not in (3, 4):
        raise ValueError(
            f"expected an image of shape (height, width, 3), got {array.shape}"
        )
    if not np.issubdtype(array.dtype, np.integer):
        raise ValueError(f"expected integer pixel values, got {array.dtype}")
    return array[..., :3].astype(np.int32)


def gray_levels(rgb) -> np.ndarray:
    """Return the gray level of every pixel as an ``(H, W)`` integer array."""
    array = _as_rgb(rgb)
    red, green, blue = array[..., 0], array[..., 1], array[..., 2]
    return (red * 11 + green * 16 + blue * 5) // 32


def clamp(values) -> np.ndarray:
    """Clip values into ``[0, 255]`` and return them as ``uint8``."""
    return np.clip(np.asarray(values), 0, 255).astype(np.uint8)


def gray_to_rgb(gray) -> np.ndarray:
    """Expand an ``(H, W)`` gray image into an ``(H, W, 3)`` RGB image."""
    array = np.asarray(gray)
    if array.ndim != 2:
        raise ValueError(f"expected a gray image of shape (height, width), got {array.shape}")
    return np.repeat(clamp(array)[..., np.newaxis], 3, axis=2)


def load_rgb(path: PathType) -> np.ndarray:
    """Read an image file and return it as an ``(H, W, 3)`` ``uint8`` array."""
    with Image.open(path) as image:
        return np.array(image.convert("RGB"), dtype=np.uint8)


def save_image(rgb, path: PathType) -> None:
    """Write an RGB or gray image to ``path``; the format follows the file suffix."""
    array = np.asarray(rgb)
    if array.ndim == 2:
        array = gray_to_rgb(array)
    else:
        array = clamp(_as_rgb(array))
    Image.fromarray(array, mode="RGB").save(path)