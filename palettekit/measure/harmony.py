# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Color harmony generation.

Harmonies are rules over HSL: rotate the hue around the wheel, or
shift lightness/saturation for monochromatic sets. The base color is
always the first entry of the result.

Lightness is clamped to [10, 90] and saturation to [10, 100] in
monochromatic shifts so the rule never degenerates into pure black or
white.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from typing import Any, Union

from palettekit.schema import HSL, HarmonyType
from palettekit.measure.colorspace import as_hex, hex_to_hsl, hsl_to_hex, normalize_hex
from palettekit.measure.vision import select_diverse_subset


# Hue offsets (degrees) for the rotation rules
_HUE_ROTATIONS = {
    HarmonyType.COMPLEMENTARY: (180,),
    HarmonyType.TRIADIC: (120, 240),
    HarmonyType.ANALOGOUS: (30, -30),
    HarmonyType.TETRADIC: (90, 180, 270),
}

NEUTRALS = ("#FFFFFF", "#F5F5F5", "#CCCCCC", "#666666", "#333333", "#000000")


def generate_harmony(
    base_hex: str,
    harmony_type: Union[HarmonyType, str],
) -> list[str]:
    """
    Generate colors related to ``base_hex`` by a harmony rule.

    ==============  ==========================================
    complementary   base, h+180
    triadic         base, h+120, h+240
    analogous       base, h+30, h-30
    monochromatic   base, l-20 (>=10), l+20 (<=90), s-30 (>=10)
    tetradic        base, h+90, h+180, h+270
    ==============  ==========================================

    Raises:
        InvalidColorFormat: If ``base_hex`` is malformed.
        ValueError: If ``harmony_type`` is unknown.
    """
    rule = HarmonyType(harmony_type)
    base = normalize_hex(base_hex)
    hsl = hex_to_hsl(base)

    if rule is HarmonyType.MONOCHROMATIC:
        variants = [
            replace(hsl, l=max(10, hsl.l - 20)),
            replace(hsl, l=min(90, hsl.l + 20)),
            replace(hsl, s=max(10, hsl.s - 30)),
        ]
    else:
        variants = [
            replace(hsl, h=(hsl.h + offset) % 360)
            for offset in _HUE_ROTATIONS[rule]
        ]

    return [base] + [hsl_to_hex(v) for v in variants]


def color_variation(base_hex: str, variation: int) -> str:
    """
    Deterministic variation of a color for padding palettes.

    Cycles lightness by -20/0/+20 (clamped to [10, 90]) and, every three
    steps, saturation by -15/0/+15 (clamped to [0, 100]).
    """
    hsl = hex_to_hsl(base_hex)
    lightness_delta = (variation % 3 - 1) * 20
    saturation_delta = ((variation // 3) % 3 - 1) * 15
    return hsl_to_hex(HSL(
        h=hsl.h,
        s=max(0, min(100, hsl.s + saturation_delta)),
        l=max(10, min(90, hsl.l + lightness_delta)),
    ))


def adjust_color_count(colors: Sequence[str], target_count: int) -> list[str]:
    """
    Trim or pad a list of hex colors to exactly ``target_count``.

    Trimming keeps the most diverse colors (first color always kept);
    padding appends variations of the first color.
    """
    colors = list(colors)
    if target_count <= 0:
        return []
    if len(colors) > target_count:
        return select_diverse_subset(colors, target_count)
    if not colors:
        return colors

    base = colors[0]
    padding = [color_variation(base, i) for i in range(len(colors), target_count)]
    return colors + padding


def expand_palette(
    seeds: Sequence[Any],
    harmony_type: Union[HarmonyType, str],
    target_count: int,
    include_neutrals: bool = False,
) -> list[str]:
    """
    Grow seed colors (e.g. dominant colors of an image) into a palette.

    Each seed contributes its harmony colors, duplicates dropped. With
    ``include_neutrals``, neutrals fill in while the palette is still
    short of ``target_count``. The result is then trimmed or padded to
    exactly ``target_count`` colors.
    """
    expanded = [as_hex(s) for s in seeds]
    expanded = list(dict.fromkeys(expanded))

    for seed in list(expanded):
        for color in generate_harmony(seed, harmony_type):
            if color not in expanded:
                expanded.append(color)

    if include_neutrals:
        for neutral in NEUTRALS:
            if neutral not in expanded and len(expanded) < target_count:
                expanded.append(neutral)

    return adjust_color_count(expanded, target_count)
