# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Stylesheet exporters: CSS custom properties, SCSS variables and a
Tailwind theme extension.

Colors are keyed by the slug of their name, so two swatches whose names
slugify alike share a key.
"""

from __future__ import annotations

from palettekit.schema import ColorSwatch, Palette
from palettekit.export.base import darken, lighten, slugify


# Tailwind shade scale: (key, transform, amount); 500 is the base color
_TAILWIND_SHADES = (
    ("50", lighten, 0.9),
    ("100", lighten, 0.8),
    ("200", lighten, 0.6),
    ("300", lighten, 0.4),
    ("400", lighten, 0.2),
    ("500", None, 0.0),
    ("600", darken, 0.1),
    ("700", darken, 0.2),
    ("800", darken, 0.3),
    ("900", darken, 0.4),
)


def _rgb_triplet(swatch: ColorSwatch) -> str:
    return f"{swatch.rgb.r}, {swatch.rgb.g}, {swatch.rgb.b}"


def to_css(palette: Palette, generated_at: str) -> str:
    """Render ``:root`` custom properties plus bg/text/border utility classes.

    Example::

        :root {
          --color-sunset-orange: #FF6B35;
          --color-sunset-orange-rgb: 255, 107, 53;
        }

        /* Sunset Orange - Main brand color, ... */
        .bg-sunset-orange { background-color: #FF6B35; }
        .text-sunset-orange { color: #FF6B35; }
        .border-sunset-orange { border-color: #FF6B35; }
    """
    lines = [
        f"/* {palette.name} Color Palette */",
        f"/* Generated on {generated_at} */",
        f"/* Prompt: {palette.prompt or 'N/A'} */",
        "",
        ":root {",
    ]

    for swatch in palette.colors:
        slug = slugify(swatch.name)
        lines.append(f"  --color-{slug}: {swatch.hex};")
        lines.append(f"  --color-{slug}-rgb: {_rgb_triplet(swatch)};")

    lines.append("}")
    lines.append("")

    for swatch in palette.colors:
        slug = slugify(swatch.name)
        lines.append(f"/* {swatch.name} - {swatch.usage} */")
        lines.append(f".bg-{slug} {{ background-color: {swatch.hex}; }}")
        lines.append(f".text-{slug} {{ color: {swatch.hex}; }}")
        lines.append(f".border-{slug} {{ border-color: {swatch.hex}; }}")
        lines.append("")

    return "\n".join(lines) + "\n"


def to_scss(palette: Palette, generated_at: str) -> str:
    """Render SCSS variables, a ``$colors`` map and two lookup mixins."""
    lines = [
        f"// {palette.name} Color Palette",
        f"// Generated on {generated_at}",
        f"// Prompt: {palette.prompt or 'N/A'}",
        "",
    ]

    for swatch in palette.colors:
        slug = slugify(swatch.name)
        lines.append(f"${slug}: {swatch.hex}; // {swatch.usage}")
        lines.append(f"${slug}-rgb: {_rgb_triplet(swatch)};")

    lines.append("")
    lines.append("// Color map for easy iteration")
    lines.append("$colors: (")
    entries = [
        f"  '{'-'.join(swatch.name.lower().split())}': ${slugify(swatch.name)}"
        for swatch in palette.colors
    ]
    if entries:
        lines.append(",\n".join(entries))
    lines.append(");")
    lines.append("")

    lines.extend([
        "// Utility mixins",
        "@mixin bg-color($color-name) {",
        "  background-color: map-get($colors, $color-name);",
        "}",
        "",
        "@mixin text-color($color-name) {",
        "  color: map-get($colors, $color-name);",
        "}",
    ])
    return "\n".join(lines) + "\n"


def to_tailwind(palette: Palette, generated_at: str) -> str:
    """Render a ``tailwind.config.js`` fragment with a 50-900 scale per color."""
    lines = [
        f"// {palette.name} - Tailwind CSS Configuration",
        f"// Generated on {generated_at}",
        "// Add this to your tailwind.config.js theme.extend.colors",
        "",
        "module.exports = {",
        "  theme: {",
        "    extend: {",
        "      colors: {",
        f"        // {palette.name}",
    ]

    for swatch in palette.colors:
        lines.append(f"        '{slugify(swatch.name)}': {{")
        lines.append(f"          DEFAULT: '{swatch.hex}',")
        for key, transform, amount in _TAILWIND_SHADES:
            shade = swatch.hex if transform is None else transform(swatch.hex, amount)
            lines.append(f"          {key}: '{shade}',")
        lines.append("        },")

    lines.extend([
        "      }",
        "    }",
        "  }",
        "};",
    ])
    return "\n".join(lines) + "\n"
