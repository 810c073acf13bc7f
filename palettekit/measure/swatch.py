# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Swatch construction: the boundary where raw colors become palette entries.

Hex values arriving from outside (text generation, stored palettes,
image extraction) are untrusted. Everything derived from the hex
(rgb, hsl, accessibility) is recomputed here and never read from input.

Naming is deterministic: a hue-family table picks a base name, and at
most one lightness/saturation modifier is prepended. Usage notes join
the category text with contrast advice and a hue note.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

from palettekit.schema import (
    AccessibilityInfo,
    ColorCategory,
    ColorSwatch,
    HSL,
    Palette,
    WCAGLevel,
)
from palettekit.measure.accessibility import ScoringConfig, score
from palettekit.measure.colorspace import as_hex, hex_to_rgb, rgb_to_hex, rgb_to_hsl
from palettekit.measure.contrast import (
    BLACK,
    TEXT_READABLE_RATIO,
    WHITE,
    contrast_ratio,
    suggest_adjustments,
    wcag_level,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Accessibility
# =============================================================================


def accessibility_info(hex_color: str) -> AccessibilityInfo:
    """
    Contrast facts for one color against white and black.

    The level is FAIL when the color fails on both backgrounds, AAA when
    it reaches AAA on either, AA otherwise.
    """
    on_white = contrast_ratio(hex_color, WHITE)
    on_black = contrast_ratio(hex_color, BLACK)
    levels = {wcag_level(on_white), wcag_level(on_black)}

    if levels == {WCAGLevel.FAIL}:
        level = WCAGLevel.FAIL
    elif WCAGLevel.AAA in levels:
        level = WCAGLevel.AAA
    else:
        level = WCAGLevel.AA

    return AccessibilityInfo(
        contrast_with_white=on_white,
        contrast_with_black=on_black,
        wcag_level=level,
    )


# =============================================================================
# Naming
# =============================================================================


# family: (hue range, saturation range, lightness range, base names)
# Hue ranges with lo > hi wrap around 0.
_FAMILIES = {
    "red": ((350, 10), (50, 100), (30, 70),
            ("Crimson", "Ruby", "Cherry", "Scarlet", "Burgundy")),
    "pink": ((330, 350), (30, 80), (60, 90),
             ("Rose", "Blush", "Coral", "Salmon", "Magenta")),
    "orange": ((10, 40), (50, 100), (40, 80),
               ("Tangerine", "Peach", "Apricot", "Amber", "Copper")),
    "yellow": ((40, 70), (50, 100), (50, 90),
               ("Gold", "Lemon", "Canary", "Honey", "Mustard")),
    "green": ((70, 150), (30, 100), (20, 80),
              ("Emerald", "Forest", "Mint", "Sage", "Olive")),
    "cyan": ((150, 200), (40, 100), (40, 80),
             ("Teal", "Turquoise", "Aqua", "Seafoam", "Jade")),
    "blue": ((200, 250), (40, 100), (30, 80),
             ("Navy", "Azure", "Cobalt", "Sapphire", "Steel")),
    "purple": ((250, 300), (40, 100), (30, 80),
               ("Violet", "Lavender", "Plum", "Indigo", "Amethyst")),
    "magenta": ((300, 330), (50, 100), (40, 80),
                ("Fuchsia", "Orchid", "Berry", "Wine", "Maroon")),
}

_NEUTRAL_NAMES = {
    "gray": ("Charcoal", "Silver", "Slate", "Ash", "Pearl"),
    "white": ("Ivory", "Cream", "Snow", "Pearl", "Alabaster"),
    "black": ("Ebony", "Onyx", "Charcoal", "Jet", "Obsidian"),
}

# Hue-only fallback when no family matches on all three axes: (upper bound, family)
_HUE_FALLBACK = (
    (10, "red"),
    (40, "orange"),
    (70, "yellow"),
    (150, "green"),
    (200, "cyan"),
    (250, "blue"),
    (300, "purple"),
    (330, "magenta"),
    (350, "pink"),
    (360, "red"),
)


def _in_range(value: int, bounds: tuple[int, int]) -> bool:
    lo, hi = bounds
    return lo <= value <= hi


def _hue_in_range(hue: int, bounds: tuple[int, int]) -> bool:
    lo, hi = bounds
    if lo <= hi:
        return lo <= hue <= hi
    return hue >= lo or hue <= hi


def color_family(hsl: HSL) -> str:
    """
    Hue family of a color.

    Low-saturation colors (s < 15) are white, black or gray by lightness.
    Others take the first family whose hue, saturation and lightness
    ranges all match, falling back to hue alone.
    """
    if hsl.s < 15:
        if hsl.l > 90:
            return "white"
        if hsl.l < 15:
            return "black"
        return "gray"

    for family, (hues, sats, lights, _) in _FAMILIES.items():
        if _hue_in_range(hsl.h, hues) and _in_range(hsl.s, sats) and _in_range(hsl.l, lights):
            return family

    for upper, family in _HUE_FALLBACK:
        if hsl.h < upper:
            return family
    return "red"


def suggest_name(hsl: HSL) -> str:
    """
    Deterministic display name for a color, e.g. "Light Azure".

    The base name is picked from the family's list by saturation and
    lightness (vivid, muted, dark or default slot). One descriptive
    modifier is prepended, lightness first: Light (l > 80), Dark (l < 20),
    Deep (l < 40), then Vibrant (s > 80), Muted (s < 20), Soft (s < 40).
    """
    family = color_family(hsl)
    if family in _FAMILIES:
        names = _FAMILIES[family][3]
    else:
        names = _NEUTRAL_NAMES[family]

    if hsl.s > 80 and hsl.l > 60:
        base = names[1]
    elif hsl.s < 30:
        base = names[2]
    elif hsl.l < 30:
        base = names[3]
    else:
        base = names[0]

    modifier = None
    if hsl.l > 80:
        modifier = "Light"
    elif hsl.l < 20:
        modifier = "Dark"
    elif hsl.l < 40:
        modifier = "Deep"
    elif hsl.s > 80:
        modifier = "Vibrant"
    elif hsl.s < 20:
        modifier = "Muted"
    elif hsl.s < 40:
        modifier = "Soft"

    if modifier is None or modifier.lower() in base.lower():
        return base
    return f"{modifier} {base}"


# =============================================================================
# Categories and Usage
# =============================================================================


_USAGE = {
    ColorCategory.PRIMARY: "Main brand color, headers, primary buttons, key elements",
    ColorCategory.SECONDARY: "Supporting elements, secondary buttons, section backgrounds",
    ColorCategory.ACCENT: "Highlights, call-to-action elements, decorative accents, links",
}

_GENERAL_USAGE = "General purpose color for various design elements"


def category_for_position(index: int, total: int) -> ColorCategory:
    """Primary for the first color, secondary for the first half, accent after."""
    if index == 0:
        return ColorCategory.PRIMARY
    if index < math.ceil(total / 2):
        return ColorCategory.SECONDARY
    return ColorCategory.ACCENT


def default_usage(category: Union[ColorCategory, str]) -> str:
    return _USAGE.get(ColorCategory(category), _GENERAL_USAGE)


# Hue bands for the psychology note, first match wins: (lo, hi, note)
_HUE_USAGE = (
    (0, 30, "creates urgency and draws attention"),
    (330, 360, "creates urgency and draws attention"),
    (30, 60, "promotes enthusiasm and creativity"),
    (60, 90, "stimulates optimism and mental clarity"),
    (90, 150, "suggests growth, nature, and balance"),
    (150, 250, "builds trust and promotes calmness"),
    (250, 300, "conveys creativity and luxury"),
    (300, 330, "adds warmth and approachability"),
)


def contrast_usage(accessibility: AccessibilityInfo) -> str:
    """Text-contrast advice for a color's accessibility facts."""
    if accessibility.wcag_level is WCAGLevel.AAA:
        return "excellent for text on any background"
    if accessibility.wcag_level is WCAGLevel.AA:
        if accessibility.contrast_with_white >= TEXT_READABLE_RATIO:
            return "suitable for text on light backgrounds"
        if accessibility.contrast_with_black >= TEXT_READABLE_RATIO:
            return "suitable for text on dark backgrounds"
        return "good for text with appropriate background contrast"
    return "best used for decorative elements only (insufficient text contrast)"


def suggest_usage(
    category: Union[ColorCategory, str],
    accessibility: AccessibilityInfo,
    hsl: HSL,
) -> str:
    """
    Usage note built from the palette role, contrast and hue.

    The category text is followed by the contrast advice and, when the
    hue falls in a band, a color psychology note, e.g. for #FF6B35 as
    primary: "Main brand color, ..., excellent for text on any
    background, creates urgency and draws attention".
    """
    parts = [default_usage(category), contrast_usage(accessibility)]
    for lo, hi, note in _HUE_USAGE:
        if lo <= hsl.h <= hi:
            parts.append(note)
            break
    return ", ".join(parts)


# =============================================================================
# Construction
# =============================================================================


def build_swatch(
    hex_color: str,
    name: Optional[str] = None,
    category: Union[ColorCategory, str] = ColorCategory.PRIMARY,
    usage: Optional[str] = None,
) -> ColorSwatch:
    """
    Build a swatch from an untrusted hex value.

    Args:
        hex_color: Any accepted hex form; stored canonicalized
        name: Display name (suggested from the color if None or blank)
        category: Palette role
        usage: Usage note (``suggest_usage`` if None or blank)

    Raises:
        InvalidColorFormat: If ``hex_color`` is malformed.
        ValueError: If ``category`` is unknown.
    """
    rgb = hex_to_rgb(hex_color)
    canonical = rgb_to_hex(rgb)
    hsl = rgb_to_hsl(rgb)
    role = ColorCategory(category)
    info = accessibility_info(canonical)

    return ColorSwatch(
        hex=canonical,
        rgb=rgb,
        hsl=hsl,
        name=name.strip() if name and name.strip() else suggest_name(hsl),
        category=role,
        usage=usage.strip() if usage and usage.strip() else suggest_usage(role, info, hsl),
        accessibility=info,
    )


def swatch_from_dict(
    data: Mapping[str, Any],
    index: int = 0,
    total: int = 1,
) -> ColorSwatch:
    """
    Build a swatch from a ``{hex, name, category, usage}`` mapping.

    Only ``hex`` is required. A missing category is assigned from the
    swatch's position in a palette of ``total`` colors. Any rgb, hsl or
    accessibility keys in the mapping are ignored.
    """
    category = data.get("category") or category_for_position(index, total)
    return build_swatch(
        data["hex"],
        name=data.get("name"),
        category=category,
        usage=data.get("usage"),
    )


def swatches_from_colors(colors: Sequence[Any]) -> list[ColorSwatch]:
    """Name and categorize raw colors (e.g. extracted RGB) by position."""
    total = len(colors)
    return [
        build_swatch(as_hex(color), category=category_for_position(i, total))
        for i, color in enumerate(colors)
    ]


def build_palette(
    name: str,
    swatches: Sequence[ColorSwatch],
    prompt: Optional[str] = None,
    config: Optional[ScoringConfig] = None,
) -> Palette:
    """Assemble a palette and attach a freshly computed accessibility report."""
    colors = tuple(swatches)
    return Palette(
        name=name,
        colors=colors,
        prompt=prompt,
        accessibility_report=score(colors, config),
    )


def ensure_accessibility(
    swatches: Sequence[ColorSwatch],
    level: Union[WCAGLevel, str] = WCAGLevel.AA,
) -> list[ColorSwatch]:
    """
    Darken swatches that reach ``level`` on neither white nor black.

    Each such swatch is replaced by the darker candidate from
    ``suggest_adjustments``, tagged " (Adjusted)" in its name and
    " (accessibility improved)" in its usage, and rebuilt so its
    accessibility is recomputed. One pass only: the darker color is
    not guaranteed to reach ``level``. Other swatches are returned as-is.

    Every color reaches AA for normal text against white or black, so
    only ``WCAGLevel.AAA`` changes anything in practice.
    """
    target = WCAGLevel(level)
    if target is WCAGLevel.FAIL:
        raise ValueError("Target level must be AA or AAA")

    result = []
    for swatch in swatches:
        adjustment = suggest_adjustments(swatch.hex, target)
        if not adjustment.adjustment_needed:
            result.append(swatch)
            continue

        adjusted = build_swatch(
            adjustment.darker,
            name=f"{swatch.name} (Adjusted)",
            category=swatch.category,
            usage=f"{swatch.usage} (accessibility improved)",
        )
        logger.debug(
            "Adjusted %s to %s for %s (now %s)",
            swatch.hex, adjusted.hex, target.value, adjusted.accessibility.wcag_level.value,
        )
        result.append(adjusted)
    return result
