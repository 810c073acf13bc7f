# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
WCAG contrast evaluation.

Contrast ratio is (L1 + 0.05) / (L2 + 0.05) where L1 is the relative
luminance of the lighter color. It ranges from 1:1 (identical) to 21:1
(black on white).

Thresholds (WCAG 2.x, success criteria 1.4.3 and 1.4.6):
    normal text: AA >= 4.5, AAA >= 7
    large text:  AA >= 3,   AAA >= 4.5
"""

from __future__ import annotations

from dataclasses import dataclass

from palettekit.schema import RGB, WCAGLevel
from palettekit.measure.colorspace import (
    as_rgb,
    hex_to_rgb,
    relative_luminance,
    rgb_to_hex,
    round_half_away,
)


WHITE = "#FFFFFF"
BLACK = "#000000"

# Minimum ratio for readable body text
TEXT_READABLE_RATIO = 4.5

_THRESHOLDS = {
    # is_large_text: (AA, AAA)
    False: (4.5, 7.0),
    True: (3.0, 4.5),
}


def contrast_ratio(hex_a: str, hex_b: str) -> float:
    """
    Contrast ratio between two hex colors.

    Symmetric: the lighter color is picked by luminance, not by
    argument order.
    """
    lum_a = relative_luminance(hex_to_rgb(hex_a))
    lum_b = relative_luminance(hex_to_rgb(hex_b))
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def wcag_level(ratio: float, is_large_text: bool = False) -> WCAGLevel:
    """Classify a contrast ratio as AAA, AA or FAIL."""
    aa, aaa = _THRESHOLDS[bool(is_large_text)]
    if ratio >= aaa:
        return WCAGLevel.AAA
    if ratio >= aa:
        return WCAGLevel.AA
    return WCAGLevel.FAIL


def minimum_ratio(target: WCAGLevel, is_large_text: bool = False) -> float:
    """Smallest ratio that reaches ``target`` (FAIL needs 1.0)."""
    aa, aaa = _THRESHOLDS[bool(is_large_text)]
    return {WCAGLevel.AAA: aaa, WCAGLevel.AA: aa, WCAGLevel.FAIL: 1.0}[target]


# =============================================================================
# Per-Color Analysis
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorAnalysis:
    """
    Accessibility analysis of one color on white and black backgrounds.

    Attributes:
        contrast_with_white: Ratio against #FFFFFF
        contrast_with_black: Ratio against #000000
        level_on_white: WCAG level for normal text on white
        level_on_black: WCAG level for normal text on black
        luminance: Relative luminance of the color
        recommendations: Usage advice for this color
    """
    contrast_with_white: float
    contrast_with_black: float
    level_on_white: WCAGLevel
    level_on_black: WCAGLevel
    luminance: float
    recommendations: tuple[str, ...]

    @property
    def best_level(self) -> WCAGLevel:
        """Best level reachable on either background."""
        return max(self.level_on_white, self.level_on_black, key=lambda lv: lv.rank)


def analyze_color(hex_color: str) -> ColorAnalysis:
    """Analyze a single color against white and black backgrounds."""
    luminance = relative_luminance(hex_to_rgb(hex_color))
    on_white = contrast_ratio(hex_color, WHITE)
    on_black = contrast_ratio(hex_color, BLACK)
    level_white = wcag_level(on_white)
    level_black = wcag_level(on_black)

    advice: list[str] = []
    if level_white is WCAGLevel.FAIL and level_black is WCAGLevel.FAIL:
        advice.append(
            "This color has poor contrast with both white and black. "
            "Consider adjusting its lightness."
        )
    elif level_white is WCAGLevel.FAIL:
        advice.append(
            "This color has poor contrast with white backgrounds. "
            "Use with dark backgrounds instead."
        )
    elif level_black is WCAGLevel.FAIL:
        advice.append(
            "This color has poor contrast with black backgrounds. "
            "Use with light backgrounds instead."
        )

    if luminance > 0.9:
        advice.append(
            "This is a very bright color. Ensure sufficient contrast when used with text."
        )
    elif luminance < 0.1:
        advice.append(
            "This is a very dark color. Ensure sufficient contrast when used with text."
        )

    return ColorAnalysis(
        contrast_with_white=on_white,
        contrast_with_black=on_black,
        level_on_white=level_white,
        level_on_black=level_black,
        luminance=luminance,
        recommendations=tuple(advice),
    )


@dataclass(frozen=True, slots=True)
class ColorAdjustment:
    """Lighter and darker candidates for a color that misses its target."""
    lighter: str
    darker: str
    adjustment_needed: bool


def suggest_adjustments(
    hex_color: str,
    target: WCAGLevel = WCAGLevel.AA,
) -> ColorAdjustment:
    """
    Propose lighter/darker variants when a color reaches ``target`` on
    neither white nor black.

    Channels are scaled by 1.3 (capped at 255) for the lighter variant
    and by 0.7 for the darker one. Colors that already meet the target
    come back unchanged with ``adjustment_needed=False``.
    """
    canonical = rgb_to_hex(hex_to_rgb(hex_color))
    needed = minimum_ratio(target)
    analysis = analyze_color(canonical)

    if analysis.contrast_with_white >= needed or analysis.contrast_with_black >= needed:
        return ColorAdjustment(lighter=canonical, darker=canonical, adjustment_needed=False)

    return ColorAdjustment(
        lighter=_scale(canonical, 1.3),
        darker=_scale(canonical, 0.7),
        adjustment_needed=True,
    )


def _scale(hex_color: str, factor: float) -> str:
    rgb = as_rgb(hex_color)
    scaled = [min(255, round_half_away(c * factor)) for c in rgb.as_tuple()]
    return rgb_to_hex(RGB(*scaled))
