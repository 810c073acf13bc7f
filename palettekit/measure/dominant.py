# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Dominant color extraction using k-means clustering in RGB space.

The clustering is intentionally simple:
1. Seed k centroids by uniform random sampling of the pixels
2. Run a fixed number of assign/update rounds (no convergence test)
3. Post-filter: drop near-black/near-white centroids and near-duplicates

Cost is O(iterations × pixels × k). Downsample large images first
(``palettekit.measure.pixels.load_pixels`` does this for files).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional, Union

import numpy as np
from numpy.typing import NDArray

from palettekit.errors import EmptyInputError
from palettekit.schema import RGB
from palettekit.measure.colorspace import as_rgb
from palettekit.measure.pixels import as_pixel_array
from palettekit.measure.vision import distance

logger = logging.getLogger(__name__)

SeedLike = Union[int, np.random.Generator, None]


@dataclass(frozen=True)
class ExtractionConfig:
    """Configuration for dominant color extraction."""

    # Fixed number of k-means rounds
    iterations: int = 10

    # Mean channel brightness (0-255) outside which a centroid is dropped
    # as near-black / near-white
    min_brightness: float = 20.0
    max_brightness: float = 235.0

    # RGB distance below which a centroid duplicates an accepted one
    min_distance: float = 30.0


def kmeans_centroids(
    pixels: Union[NDArray[Any], Sequence[Any]],
    k: int,
    iterations: int = 10,
    seed: SeedLike = 42,
) -> list[RGB]:
    """
    Raw k-means centroids of a pixel set, unfiltered.

    Args:
        pixels: (N, 3) array or sequence of RGB / (r, g, b)
        k: Number of clusters
        iterations: Number of assign/update rounds
        seed: Seed or NumPy Generator for centroid sampling (None for
            a fresh unseeded generator)

    Returns:
        Exactly ``k`` centroids, in cluster order. Several may coincide
        when the pixel set has fewer than ``k`` distinct colors.

    Raises:
        EmptyInputError: If there are no pixels.
        ValueError: If ``k`` < 1.
    """
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")

    data = as_pixel_array(pixels).astype(np.float64)
    n = len(data)
    if n == 0:
        raise EmptyInputError("Cannot extract dominant colors from zero pixels")

    rng = np.random.default_rng(seed)
    centroids = data[rng.integers(n, size=k)].copy()

    for _ in range(iterations):
        # (N, k) squared distances via broadcasting
        dists = np.sum(
            (data[:, np.newaxis, :] - centroids[np.newaxis, :, :]) ** 2,
            axis=2,
        )
        labels = np.argmin(dists, axis=1)

        for j in range(k):
            mask = labels == j
            # Empty clusters keep their previous centroid
            if np.any(mask):
                # Channel means are non-negative: floor(x + 0.5) rounds half up
                centroids[j] = np.floor(data[mask].mean(axis=0) + 0.5)

    return [RGB(int(r), int(g), int(b)) for r, g, b in centroids]


def filter_colors(
    colors: Sequence[Any],
    config: Optional[ExtractionConfig] = None,
) -> list[RGB]:
    """
    Drop extreme and duplicate colors, preserving input order.

    A color is dropped when its mean brightness is below
    ``min_brightness`` or above ``max_brightness``, or when it lies
    within ``min_distance`` of a color already accepted.
    """
    cfg = config or ExtractionConfig()
    accepted: list[RGB] = []

    for color in colors:
        rgb = as_rgb(color)
        if rgb.brightness < cfg.min_brightness or rgb.brightness > cfg.max_brightness:
            continue
        if any(distance(rgb, kept) < cfg.min_distance for kept in accepted):
            continue
        accepted.append(rgb)

    return accepted


def extract_dominant_colors(
    pixels: Union[NDArray[Any], Sequence[Any]],
    k: int = 5,
    *,
    seed: SeedLike = 42,
    config: Optional[ExtractionConfig] = None,
) -> list[RGB]:
    """
    Extract up to ``k`` dominant colors from a pixel set.

    Runs k-means and then ``filter_colors``, so the result may hold
    fewer than ``k`` colors: none near-black or near-white, none within
    ``min_distance`` of another.

    Args:
        pixels: (N, 3) array or sequence of RGB / (r, g, b), already
            decoded and downsampled
        k: Number of clusters to fit
        seed: Seed or Generator for centroid initialization
        config: Extraction settings (uses defaults if None)

    Returns:
        List of RGB in cluster order

    Example:
        >>> pixels = [(200, 40, 40)] * 50 + [(40, 40, 200)] * 50
        >>> extract_dominant_colors(pixels, k=2, seed=0)
        [RGB(r=200, g=40, b=40), RGB(r=40, g=40, b=200)]  # order may vary
    """
    cfg = config or ExtractionConfig()
    data = as_pixel_array(pixels)
    centroids = kmeans_centroids(data, k, iterations=cfg.iterations, seed=seed)
    colors = filter_colors(centroids, cfg)

    logger.debug(
        "Extracted %d dominant colors from %d pixels (k=%d, %d iterations, %d before filtering)",
        len(colors), len(data), k, cfg.iterations, len(centroids),
    )
    return colors
