# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Palette export entry point.

Dispatches a palette to the renderer for the requested format and wraps
the result in an ExportArtifact with its download filename and MIME type.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Union

from palettekit.errors import UnsupportedFormatError
from palettekit.schema import ExportArtifact, ExportFormat, Palette
from palettekit.export.base import MIME_TYPES, filename_for, format_timestamp
from palettekit.export.document import to_ase, to_figma, to_json, to_sketch
from palettekit.export.stylesheet import to_css, to_scss, to_tailwind

logger = logging.getLogger(__name__)


def export_palette(
    palette: Palette,
    format: Union[ExportFormat, str],
    *,
    generated_at: Optional[datetime] = None,
) -> ExportArtifact:
    """
    Render a palette in one export format.

    Args:
        palette: The palette to render (may have no colors)
        format: ExportFormat or its string value
        generated_at: Timestamp written into headers and the JSON
            document (defaults to now, UTC)

    Returns:
        ExportArtifact with text content, filename and MIME type

    Raises:
        UnsupportedFormatError: If ``format`` is not a known format.
    """
    target = _resolve_format(format)
    logger.info(
        "Exporting palette %r as %s (%d colors)",
        palette.name, target.value, len(palette.colors),
    )

    stamp = format_timestamp(generated_at)

    if target == ExportFormat.CSS:
        content = to_css(palette, stamp)
    elif target == ExportFormat.SCSS:
        content = to_scss(palette, stamp)
    elif target == ExportFormat.JSON:
        content = to_json(palette, stamp)
    elif target == ExportFormat.TAILWIND:
        content = to_tailwind(palette, stamp)
    elif target == ExportFormat.ASE:
        content = to_ase(palette)
    elif target == ExportFormat.SKETCH:
        content = to_sketch(palette)
    else:
        content = to_figma(palette)

    artifact = ExportArtifact(
        format=target,
        content=content,
        filename=filename_for(palette.name, target),
        mime_type=MIME_TYPES[target],
    )

    logger.debug(
        "Exported %s: %s, %d characters",
        target.value, artifact.filename, len(content),
    )
    return artifact


def _resolve_format(format: Union[ExportFormat, str]) -> ExportFormat:
    if isinstance(format, ExportFormat):
        return format
    try:
        return ExportFormat(format)
    except ValueError:
        logger.warning("Unsupported export format requested: %r", format)
        raise UnsupportedFormatError(format) from None
