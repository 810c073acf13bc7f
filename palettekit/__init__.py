# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Palettekit -- color palette engine.

Color conversions, WCAG contrast scoring, harmony rules, color vision
simulation, dominant color extraction and palette export.

Quick start::

    from palettekit import build_palette, build_swatch, export_palette

    palette = build_palette("Sunset", [
        build_swatch("#FF6B35", "Sunset Orange"),
        build_swatch("#004E89", "Deep Blue", category="secondary"),
    ])
    palette.accessibility_report.overall_score   # WCAGLevel
    export_palette(palette, "css").content       # :root { --color-... }

The library logs through the standard ``logging`` module under the
``palettekit`` logger and installs no handlers beyond a NullHandler.
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from palettekit.errors import (
    EmptyInputError,
    InvalidColorFormat,
    PalettekitError,
    UnsupportedFormatError,
)
from palettekit.export import export_palette
from palettekit.measure import (
    contrast_ratio,
    extract_dominant_colors,
    generate_harmony,
    score,
    simulate,
    wcag_level,
)
from palettekit.measure.swatch import build_palette, build_swatch, ensure_accessibility
from palettekit.schema import (
    ColorCategory,
    ColorSwatch,
    ExportFormat,
    HarmonyType,
    Palette,
    WCAGLevel,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core API
    "build_swatch",
    "build_palette",
    "ensure_accessibility",
    "contrast_ratio",
    "wcag_level",
    "generate_harmony",
    "simulate",
    "extract_dominant_colors",
    "score",
    "export_palette",
    # Types (commonly needed)
    "ColorSwatch",
    "Palette",
    "ColorCategory",
    "WCAGLevel",
    "HarmonyType",
    "ExportFormat",
    # Errors
    "PalettekitError",
    "InvalidColorFormat",
    "UnsupportedFormatError",
    "EmptyInputError",
    # Version
    "__version__",
]
