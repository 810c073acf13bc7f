# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Color computation core for Palettekit.

Conversions, contrast, harmony, vision simulation, extraction and
scoring. Every operation is a pure function of its inputs (k-means is
pure given its seed).
"""

from palettekit.measure.accessibility import ScoringConfig, score
from palettekit.measure.colorspace import (
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    normalize_hex,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
)
from palettekit.measure.contrast import (
    analyze_color,
    contrast_ratio,
    suggest_adjustments,
    wcag_level,
)
from palettekit.measure.dominant import ExtractionConfig, extract_dominant_colors
from palettekit.measure.harmony import expand_palette, generate_harmony
from palettekit.measure.swatch import (
    build_palette,
    build_swatch,
    ensure_accessibility,
    suggest_usage,
    swatch_from_dict,
)
from palettekit.measure.vision import (
    distance,
    is_palette_color_blind_safe,
    simulate,
    simulate_palette,
)

__all__ = [
    # Color space
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
    "normalize_hex",
    "relative_luminance",
    # Contrast
    "contrast_ratio",
    "wcag_level",
    "analyze_color",
    "suggest_adjustments",
    # Harmony
    "generate_harmony",
    "expand_palette",
    # Vision
    "simulate",
    "simulate_palette",
    "distance",
    "is_palette_color_blind_safe",
    # Extraction
    "ExtractionConfig",
    "extract_dominant_colors",
    # Scoring
    "ScoringConfig",
    "score",
    # Swatches
    "build_swatch",
    "swatch_from_dict",
    "build_palette",
    "suggest_usage",
    "ensure_accessibility",
]
