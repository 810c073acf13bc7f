# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Error kinds raised by the engine.

All of them subclass ValueError: they signal bad input, never a
transient condition, so nothing here is worth retrying.
"""

from __future__ import annotations


class PalettekitError(Exception):
    """Base class for engine errors."""


class InvalidColorFormat(PalettekitError, ValueError):
    """A hex color string is malformed."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Invalid hex color {value!r}: expected #RGB or #RRGGBB"
        )


class UnsupportedFormatError(PalettekitError, ValueError):
    """An export target is not one of the known formats."""

    def __init__(self, format: object) -> None:
        self.format = format
        super().__init__(f"Unsupported export format: {format}")


class EmptyInputError(PalettekitError, ValueError):
    """An operation is undefined on empty input."""


UnsupportedFormat = UnsupportedFormatError
EmptyInput = EmptyInputError

__all__ = [
    "PalettekitError",
    "InvalidColorFormat",
    "UnsupportedFormatError",
    "UnsupportedFormat",
    "EmptyInputError",
    "EmptyInput",
]
