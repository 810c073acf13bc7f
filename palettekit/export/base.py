# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""Shared naming, shading and metadata helpers for exporters."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Optional

from palettekit.schema import ExportFormat, RGB
from palettekit.measure.colorspace import hex_to_rgb, rgb_to_hex, round_half_away


FILENAME_SUFFIX = {
    ExportFormat.CSS: ".css",
    ExportFormat.SCSS: ".scss",
    ExportFormat.JSON: ".json",
    ExportFormat.TAILWIND: "-tailwind.js",
    ExportFormat.ASE: ".ase",
    ExportFormat.SKETCH: "-sketch.json",
    ExportFormat.FIGMA: "-figma.json",
}

MIME_TYPES = {
    ExportFormat.CSS: "text/css",
    ExportFormat.SCSS: "text/scss",
    ExportFormat.JSON: "application/json",
    ExportFormat.TAILWIND: "application/javascript",
    ExportFormat.ASE: "application/octet-stream",
    ExportFormat.SKETCH: "application/json",
    ExportFormat.FIGMA: "application/json",
}

# Filename base used when a palette name has no usable characters
FALLBACK_FILENAME = "palette"


def slugify(name: str) -> str:
    """
    Identifier for CSS variables, classes and config keys.

    Lowercased, characters outside ``[a-z0-9]`` and whitespace dropped,
    whitespace runs replaced by ``-``. "Sunset Orange" -> "sunset-orange".
    """
    cleaned = re.sub(r"[^a-z0-9\s]", "", name.lower())
    return re.sub(r"\s+", "-", cleaned)


def sanitize_filename(name: str) -> str:
    """
    Filesystem-safe base name for a download.

    Like ``slugify`` but keeps dashes, collapses repeated dashes and
    trims them from both ends.
    """
    cleaned = re.sub(r"[^a-z0-9\s-]", "", name.lower())
    cleaned = re.sub(r"\s+", "-", cleaned)
    cleaned = re.sub(r"-+", "-", cleaned).strip("-")
    return cleaned or FALLBACK_FILENAME


def filename_for(name: str, format: ExportFormat) -> str:
    return sanitize_filename(name) + FILENAME_SUFFIX[format]


def lighten(hex_color: str, amount: float) -> str:
    """Move each channel ``amount`` (0-1) of the way toward 255."""
    rgb = hex_to_rgb(hex_color)
    return rgb_to_hex(RGB(*(
        min(255, round_half_away(c + (255 - c) * amount)) for c in rgb.as_tuple()
    )))


def darken(hex_color: str, amount: float) -> str:
    """Scale each channel by ``1 - amount`` (0-1)."""
    rgb = hex_to_rgb(hex_color)
    return rgb_to_hex(RGB(*(
        max(0, round_half_away(c * (1 - amount))) for c in rgb.as_tuple()
    )))


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """
    UTC timestamp with millisecond precision, e.g. ``2026-01-31T12:00:00.000Z``.

    Naive datetimes are taken as UTC.
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"
