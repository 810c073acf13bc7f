# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Document exporters: palette JSON, design-tool JSON (Sketch, Figma) and
the swatch-exchange text block.

Channel values for design tools are fractions of 255.
"""

from __future__ import annotations

import json

from palettekit.schema import Palette


def to_json(palette: Palette, generated_at: str) -> str:
    """Full palette document with swatches, report and summary metadata."""
    report = palette.accessibility_report
    document = {
        "name": palette.name,
        "prompt": palette.prompt,
        "generatedAt": generated_at,
        "colors": [swatch.to_dict() for swatch in palette.colors],
        "accessibilityScore": report.to_dict() if report is not None else None,
        "metadata": {
            "totalColors": len(palette.colors),
            "categories": palette.categories,
            "wcagCompliance": (
                report.overall_score.value if report is not None else "Unknown"
            ),
        },
    }
    return json.dumps(document, indent=2)


def to_sketch(palette: Palette) -> str:
    document = {
        "compatibleVersion": "3",
        "pluginVersion": "1.0",
        "colors": [
            {
                "name": swatch.name,
                "red": swatch.rgb.r / 255,
                "green": swatch.rgb.g / 255,
                "blue": swatch.rgb.b / 255,
                "alpha": 1,
            }
            for swatch in palette.colors
        ],
    }
    return json.dumps(document, indent=2)


def to_figma(palette: Palette) -> str:
    document = {
        "name": palette.name,
        "description": palette.prompt or "",
        "colors": [
            {
                "name": swatch.name,
                "description": swatch.usage,
                "color": {
                    "r": swatch.rgb.r / 255,
                    "g": swatch.rgb.g / 255,
                    "b": swatch.rgb.b / 255,
                    "a": 1,
                },
                "scopes": ["ALL_SCOPES"],
                "codeSyntax": {},
            }
            for swatch in palette.colors
        ],
    }
    return json.dumps(document, indent=2)


def to_ase(palette: Palette) -> str:
    """
    Swatch exchange listing as readable text.

    This is not the binary Adobe Swatch Exchange container; consumers of
    the ``.ase`` download expect this text layout::

        Adobe Swatch Exchange Format
        Palette: Sunset
        Colors: 1

        Color 1:
          Name: Sunset Orange
          Type: RGB
          R: 1.000000
          G: 0.419608
          B: 0.207843
          Usage: Main brand color, ...
    """
    lines = [
        "Adobe Swatch Exchange Format",
        f"Palette: {palette.name}",
        f"Colors: {len(palette.colors)}",
        "",
    ]
    for i, swatch in enumerate(palette.colors, start=1):
        lines.extend([
            f"Color {i}:",
            f"  Name: {swatch.name}",
            "  Type: RGB",
            f"  R: {swatch.rgb.r / 255:.6f}",
            f"  G: {swatch.rgb.g / 255:.6f}",
            f"  B: {swatch.rgb.b / 255:.6f}",
            f"  Usage: {swatch.usage}",
            "",
        ])
    return "\n".join(lines) + "\n"
