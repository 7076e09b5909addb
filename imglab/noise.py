"""Salt-and-pepper noise."""

from __future__ import annotations

from typing import Optional

import numpy as np

from imglab.pixels import _as_rgb, clamp


def salt_and_pepper(rgb, level: float, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """Return a copy of ``rgb`` with random pixels set to black or white.

    ``int(width * height * level)`` positions are drawn at random, with
    repeats allowed. Each drawn pixel becomes white or black with equal
    chance. ``rng`` is a numpy random generator; a fresh one is used when
    it is omitted.
    """
    if level < 0:
        raise ValueError("noise level must not be negative")
    image = clamp(_as_rgb(rgb))
    height, width = image.shape[:2]
    count = int(width * height * float(level))
    if count == 0:
        return image

    generator = rng if rng is not None else np.random.default_rng()
    xs = generator.integers(0, width, size=count)
    ys = generator.integers(0, height, size=count)
    salt = generator.integers(0, 2, size=count).astype(bool)
    image[ys, xs] = np.where(salt, 255, 0).astype(np.uint8)[:, np.newaxis]
    return image