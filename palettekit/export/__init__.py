# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Palette exporters.

Each exporter renders a Palette for one consumer (stylesheets, config
files, design tools). Exporters only format; every value they write
comes from the palette unchanged.
"""

from palettekit.export.base import lighten, darken, sanitize_filename, slugify
from palettekit.export.exporter import export_palette

__all__ = [
    "export_palette",
    "slugify",
    "sanitize_filename",
    "lighten",
    "darken",
]
