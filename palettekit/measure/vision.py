# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Color vision deficiency simulation and RGB color distance.

Simulation applies a fixed 3×3 matrix to normalized sRGB [0,1] and
clamps the result. The dichromacy tables are the widely circulated
Coblis-style approximations, written as per-channel update steps: the
green step reads the red channel already simulated, and the blue step
reads the simulated green. ``_compose`` folds the steps into one matrix.
They are a compatibility table, not a physiological model.

Distance is plain Euclidean distance in 0-255 RGB space. It is not
perceptually uniform (CIELAB/OKLab would be), but it is the metric the
distinguishability threshold of 30 was tuned against.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Optional, Union

import numpy as np
from numpy.typing import NDArray

from palettekit.schema import DICHROMACIES, ColorBlindnessType, RGB
from palettekit.measure.colorspace import as_hex, as_rgb, rgb_to_hex, round_half_away

logger = logging.getLogger(__name__)


# Minimum RGB distance for two colors to count as distinguishable
DISTINGUISHABLE_DISTANCE = 30.0


def _compose(steps: Sequence[Sequence[float]]) -> NDArray[np.float64]:
    """
    Fold in-place channel updates into a single matrix.

    Step i replaces channel i with a weighted sum of the current
    (r, g, b), so later steps see the channels rewritten before them.
    """
    matrix = np.eye(3, dtype=np.float64)
    for channel, step in enumerate(steps):
        matrix[channel] = np.asarray(step, dtype=np.float64) @ matrix
    return matrix


# Update steps for r, g, b in that order
_DICHROMACY_STEPS = {
    ColorBlindnessType.PROTANOPIA: (
        (0.567, 0.433, 0.0),
        (0.558, 0.442, 0.0),
        (0.0, 0.242, 0.758),
    ),
    ColorBlindnessType.DEUTERANOPIA: (
        (0.625, 0.375, 0.0),
        (0.7, 0.3, 0.0),
        (0.0, 0.3, 0.7),
    ),
    ColorBlindnessType.TRITANOPIA: (
        (0.95, 0.05, 0.0),
        (0.0, 0.433, 0.567),
        (0.0, 0.475, 0.525),
    ),
}

_MATRICES = {kind: _compose(steps) for kind, steps in _DICHROMACY_STEPS.items()}

# Rec. 601 luma on every row: output is always gray
_MATRICES[ColorBlindnessType.ACHROMATOPSIA] = np.array([
    [0.299, 0.587, 0.114],
    [0.299, 0.587, 0.114],
    [0.299, 0.587, 0.114],
], dtype=np.float64)


def simulate(
    color: Any,
    deficiency: Union[ColorBlindnessType, str],
) -> str:
    """
    Simulate how a color appears under a color vision deficiency.

    Args:
        color: Hex string, RGB, or anything ``as_rgb`` accepts
        deficiency: ColorBlindnessType or its string value

    Returns:
        Simulated color as canonical hex
    """
    matrix = _MATRICES[ColorBlindnessType(deficiency)]
    srgb = np.array(as_rgb(color).as_tuple(), dtype=np.float64) / 255.0
    simulated = np.clip(matrix @ srgb, 0.0, 1.0) * 255.0
    r, g, b = (round_half_away(float(c)) for c in simulated)
    return rgb_to_hex(RGB(r, g, b))


def simulate_palette(
    colors: Sequence[Any],
    deficiency: Union[ColorBlindnessType, str],
) -> list[str]:
    """Simulate every color of a palette, preserving order."""
    return [simulate(c, deficiency) for c in colors]


def distance(rgb_a: Any, rgb_b: Any) -> float:
    """Euclidean distance between two colors in 0-255 RGB space."""
    a = np.array(as_rgb(rgb_a).as_tuple(), dtype=np.float64)
    b = np.array(as_rgb(rgb_b).as_tuple(), dtype=np.float64)
    return float(np.sqrt(np.sum((a - b) ** 2)))


def find_confusable_pairs(
    colors: Sequence[Any],
    deficiency: Union[ColorBlindnessType, str],
    threshold: float = DISTINGUISHABLE_DISTANCE,
) -> list[tuple[int, int, float]]:
    """
    Find color pairs that become too similar under a deficiency.

    Returns:
        (i, j, distance) for every pair i < j whose simulated colors are
        closer than ``threshold``, in pair order.
    """
    simulated = simulate_palette(colors, deficiency)
    pairs = []
    for i in range(len(simulated)):
        for j in range(i + 1, len(simulated)):
            d = distance(simulated[i], simulated[j])
            if d < threshold:
                pairs.append((i, j, d))
    return pairs


def is_palette_color_blind_safe(
    colors: Sequence[Any],
    threshold: float = DISTINGUISHABLE_DISTANCE,
) -> bool:
    """
    True if every pair of colors stays distinguishable under protanopia,
    deuteranopia and tritanopia.

    Achromatopsia is not checked: almost any palette collapses under it.
    """
    for deficiency in DICHROMACIES:
        pairs = find_confusable_pairs(colors, deficiency, threshold)
        if pairs:
            i, j, d = pairs[0]
            logger.debug(
                "Colors %s and %s indistinguishable under %s (%s vs %s, distance %.1f)",
                as_hex(colors[i]), as_hex(colors[j]), deficiency.value,
                simulate(colors[i], deficiency), simulate(colors[j], deficiency), d,
            )
            return False
    return True


def select_diverse_subset(
    colors: Sequence[Any],
    target_count: int,
) -> list[Any]:
    """
    Pick up to ``target_count`` mutually distant colors.

    Greedy farthest-point selection: the first color is always kept,
    then the remaining color whose minimum distance to the selection is
    largest is added, until the target is reached or candidates run out.
    Ties go to the earliest candidate. Input items are returned as-is.
    """
    if target_count <= 0 or not colors:
        return []
    if len(colors) <= target_count:
        return list(colors)

    points = np.array([as_rgb(c).as_tuple() for c in colors], dtype=np.float64)

    selected = [0]
    remaining = list(range(1, len(colors)))
    # Minimum distance from each color to the current selection
    min_dists = np.sqrt(np.sum((points - points[0]) ** 2, axis=1))

    while len(selected) < target_count and remaining:
        best: Optional[int] = None
        for idx in remaining:
            if best is None or min_dists[idx] > min_dists[best]:
                best = idx
        selected.append(best)
        remaining.remove(best)
        new_dists = np.sqrt(np.sum((points - points[best]) ** 2, axis=1))
        min_dists = np.minimum(min_dists, new_dists)

    return [colors[i] for i in selected]
