# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Palette-level accessibility scoring.

Aggregates contrast evaluation and color vision simulation over a whole
palette into an AccessibilityReport.

Pairs evaluated for n colors:
    - each color against white and against black      (2n)
    - each unordered pair of palette colors           (n choose 2)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional

from palettekit.schema import AccessibilityReport, ContrastPair, WCAGLevel
from palettekit.measure.colorspace import as_hex, hex_to_rgb, relative_luminance
from palettekit.measure.contrast import BLACK, WHITE, contrast_ratio, wcag_level
from palettekit.measure.vision import is_palette_color_blind_safe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoringConfig:
    """Thresholds for palette scoring and its recommendations."""

    # RGB distance under which simulated colors are confusable
    distinguishable_distance: float = 30.0

    # Relative luminance bounds for "very bright" / "very dark" colors
    bright_luminance: float = 0.9
    dark_luminance: float = 0.1

    # Share of extreme colors above which the palette is flagged
    extreme_share: float = 0.6

    # Palettes smaller than this get a variety recommendation
    min_colors: int = 3


def contrast_pairs(colors: Sequence[Any]) -> list[ContrastPair]:
    """
    Evaluate every contrast pair of a palette.

    Order: for each color, (color, white) then (color, black); then
    palette pairs (i, j) with i < j.
    """
    hexes = [as_hex(c) for c in colors]
    pairs: list[ContrastPair] = []

    for hex_color in hexes:
        for background in (WHITE, BLACK):
            pairs.append(_pair(hex_color, background, applicable=hex_color != background))

    for i in range(len(hexes)):
        for j in range(i + 1, len(hexes)):
            pairs.append(_pair(hexes[i], hexes[j]))

    return pairs


def _pair(hex_a: str, hex_b: str, applicable: bool = True) -> ContrastPair:
    ratio = contrast_ratio(hex_a, hex_b)
    return ContrastPair(
        color_a=hex_a,
        color_b=hex_b,
        ratio=ratio,
        level=wcag_level(ratio),
        applicable=applicable,
    )


def worst_level(pairs: Sequence[ContrastPair]) -> WCAGLevel:
    """
    FAIL if any applicable pair fails, else AA if any is only AA, else AAA.

    Pairs marked not applicable (a color against an identical background)
    do not take part.
    """
    levels = {p.level for p in pairs if p.applicable}
    if WCAGLevel.FAIL in levels:
        return WCAGLevel.FAIL
    if WCAGLevel.AA in levels:
        return WCAGLevel.AA
    return WCAGLevel.AAA


def score(
    colors: Sequence[Any],
    config: Optional[ScoringConfig] = None,
) -> AccessibilityReport:
    """
    Build an accessibility report for a palette.

    Args:
        colors: Swatches, hex strings, or RGB values, in palette order
        config: Scoring thresholds (uses defaults if None)

    Returns:
        AccessibilityReport with every contrast pair, the worst WCAG
        level, the color-blindness verdict and advisory recommendations
    """
    cfg = config or ScoringConfig()
    pairs = contrast_pairs(colors)
    compatible = is_palette_color_blind_safe(colors, cfg.distinguishable_distance)
    overall = worst_level(pairs)
    passed = sum(1 for p in pairs if not p.failed)

    report = AccessibilityReport(
        overall_score=overall,
        contrast_pairs=tuple(pairs),
        color_blindness_compatible=compatible,
        recommendations=tuple(recommend(colors, pairs, compatible, cfg)),
        passed_checks=passed,
        total_checks=len(pairs),
    )

    logger.debug(
        "Scored %d colors: overall %s, %d/%d checks passed, color-blind safe=%s",
        len(colors), overall.value, passed, len(pairs), compatible,
    )
    return report


def recommend(
    colors: Sequence[Any],
    pairs: Sequence[ContrastPair],
    color_blindness_compatible: bool,
    config: Optional[ScoringConfig] = None,
) -> list[str]:
    """
    Advisory recommendations for a scored palette.

    Checks run in a fixed order (contrast failures, AA-only pairs,
    color blindness, palette size, brightness balance) so output is
    deterministic. A palette with no findings gets one positive note.
    """
    cfg = config or ScoringConfig()
    advice: list[str] = []

    failed = sum(1 for p in pairs if p.failed)
    if failed:
        advice.append(
            f"{failed} color combinations have insufficient contrast. "
            "Consider adjusting lightness values."
        )

    aa_only = sum(1 for p in pairs if p.applicable and p.level is WCAGLevel.AA)
    if aa_only:
        advice.append(
            f"{aa_only} combinations meet AA standards but could be improved "
            "for AAA compliance."
        )

    if not color_blindness_compatible:
        advice.append(
            "Some colors may be difficult to distinguish for users with color "
            "blindness. Consider increasing color differences."
        )

    if len(colors) < cfg.min_colors:
        advice.append(
            "Consider adding more colors to provide sufficient design flexibility "
            "while maintaining accessibility."
        )

    luminances = [relative_luminance(hex_to_rgb(as_hex(c))) for c in colors]
    bright = sum(1 for lum in luminances if lum > cfg.bright_luminance)
    dark = sum(1 for lum in luminances if lum < cfg.dark_luminance)

    if bright > len(colors) * cfg.extreme_share:
        advice.append(
            "Palette contains many very bright colors. Consider adding some "
            "darker colors for better contrast options."
        )
    if dark > len(colors) * cfg.extreme_share:
        advice.append(
            "Palette contains many very dark colors. Consider adding some "
            "lighter colors for better contrast options."
        )

    if not advice:
        advice.append(
            "Excellent! This palette meets high accessibility standards and "
            "should work well for all users."
        )

    return advice
