# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Pixel input normalization.

The extractor works on a flat (N, 3) uint8 array. Callers may hand in
RGB values, (r, g, b) tuples or arrays; ``as_pixel_array`` folds them
all into that shape.

``load_pixels`` is a convenience for callers that start from an image
file. Decoding and downsampling belong to the caller's pipeline, so it
needs the optional Pillow dependency (``pip install palettekit[image]``).
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any, Union

import numpy as np
from numpy.typing import NDArray

from palettekit.schema import RGB


# Longest side after downsampling; k-means cost grows linearly with pixels
DEFAULT_MAX_SIZE = 200


def as_pixel_array(pixels: Union[NDArray[Any], Sequence[Any]]) -> NDArray[np.uint8]:
    """
    Normalize pixel input to an (N, 3) uint8 array.

    Accepts a sequence of RGB or (r, g, b) items, or an array of shape
    (N, 3) or (H, W, 3). Values must be integers already in [0, 255];
    float input is rejected rather than truncated.

    Raises:
        ValueError: If the input cannot be read as integer RGB triples.
    """
    if isinstance(pixels, np.ndarray):
        arr = pixels
    else:
        arr = np.array([p.as_tuple() if isinstance(p, RGB) else tuple(p) for p in pixels])
        if arr.size == 0:
            return np.empty((0, 3), dtype=np.uint8)

    if not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"Pixel values must be integers 0-255, got dtype {arr.dtype}")
    if arr.ndim == 3 and arr.shape[2] == 3:
        arr = arr.reshape(-1, 3)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"Expected (N, 3) pixel data, got shape {arr.shape}")
    if arr.size and (arr.min() < 0 or arr.max() > 255):
        raise ValueError("Pixel values must be in the range 0-255")

    return arr.astype(np.uint8, copy=False)


def load_pixels(
    image: Union[str, Path, NDArray[np.uint8]],
    max_size: int = DEFAULT_MAX_SIZE,
) -> NDArray[np.uint8]:
    """
    Decode and downsample an image into a flat pixel array.

    Args:
        image: Path to an image file, or an (H, W, 3) uint8 array
        max_size: Longest side after downsampling (0 disables it)

    Returns:
        Array of shape (N, 3) with uint8 sRGB pixels
    """
    try:
        from PIL import Image
    except ImportError as e:
        raise ImportError(
            "Pillow is required for image loading. "
            "Install with: pip install palettekit[image]"
        ) from e

    if isinstance(image, (str, Path)):
        with Image.open(image) as src:
            img = src.convert("RGB")
    elif isinstance(image, np.ndarray):
        if image.ndim != 3 or image.shape[2] != 3:
            raise ValueError(f"Expected (H, W, 3) array, got shape {image.shape}")
        if image.dtype != np.uint8:
            raise ValueError(f"Expected uint8 array, got {image.dtype}")
        img = Image.fromarray(image)
    else:
        raise TypeError(f"Expected file path or numpy array, got {type(image)}")

    if max_size > 0 and max(img.size) > max_size:
        img = img.copy()
        img.thumbnail((max_size, max_size), Image.Resampling.LANCZOS)

    return np.asarray(img, dtype=np.uint8).reshape(-1, 3)
