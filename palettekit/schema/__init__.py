# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Schema definitions for palettes and their reports.

All types in this module are immutable (frozen dataclasses).
Derived values are produced by ``palettekit.measure``, never edited in place.
"""

from palettekit.schema.palette import (
    DICHROMACIES,
    HSL,
    RGB,
    AccessibilityInfo,
    AccessibilityReport,
    ColorBlindnessType,
    ColorCategory,
    ColorSwatch,
    ContrastPair,
    ExportArtifact,
    ExportFormat,
    HarmonyType,
    Palette,
    WCAGLevel,
)

__all__ = [
    # Color values
    "RGB",
    "HSL",
    # Vocabularies
    "ColorCategory",
    "WCAGLevel",
    "ColorBlindnessType",
    "DICHROMACIES",
    "HarmonyType",
    "ExportFormat",
    # Accessibility
    "AccessibilityInfo",
    "ContrastPair",
    "AccessibilityReport",
    # Containers
    "ColorSwatch",
    "Palette",
    "ExportArtifact",
]
