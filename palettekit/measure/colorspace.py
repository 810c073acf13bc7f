# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: hex ↔ sRGB (0-255) ↔ HSL, plus WCAG relative luminance.

Rounding:
    Every conversion that lands on display integers (hex channels, HSL
    degrees and percents) rounds half away from zero, NOT Python's
    round-half-to-even. ``hex_to_rgb(rgb_to_hex(x)) == x`` holds exactly
    for every valid RGB.

Luminance:
    Uses the WCAG 2.x formula with the 0.03928 linearization threshold
    (not the 0.04045 of IEC 61966-2-1). The constants are part of the
    contract: any change moves colors across WCAG level boundaries.
"""

from __future__ import annotations

import math
import re
from typing import Any

import numpy as np
from numpy.typing import NDArray

from palettekit.errors import InvalidColorFormat
from palettekit.schema import HSL, RGB


_HEX_RE = re.compile(r"^#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")

# WCAG relative luminance weights (Rec. 709 primaries)
LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


# =============================================================================
# Hex ↔ RGB
# =============================================================================


def is_valid_hex(value: object) -> bool:
    """True if value is a 3- or 6-digit hex color, with or without '#'."""
    return isinstance(value, str) and _HEX_RE.match(value) is not None


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Parse a hex color string.

    Accepts ``#RGB``, ``#RRGGBB``, and the same without ``#``, in any case.
    3-digit forms are expanded by duplicating each digit (``#F60`` is
    ``#FF6600``).

    Raises:
        InvalidColorFormat: If the string is not a valid hex color.
    """
    if not isinstance(hex_color, str):
        raise InvalidColorFormat(hex_color)
    m = _HEX_RE.match(hex_color.strip())
    if m is None:
        raise InvalidColorFormat(hex_color)

    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)

    return RGB(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
    )


def rgb_to_hex(rgb: RGB) -> str:
    """Format RGB as canonical uppercase ``#RRGGBB``."""
    r, g, b = (_clamp_channel(c) for c in rgb.as_tuple())
    return f"#{r:02X}{g:02X}{b:02X}"


def normalize_hex(hex_color: str) -> str:
    """Canonicalize any accepted hex form to uppercase ``#RRGGBB``."""
    return rgb_to_hex(hex_to_rgb(hex_color))


def _clamp_channel(value: float) -> int:
    return max(0, min(255, round_half_away(value)))


# =============================================================================
# RGB ↔ HSL
# =============================================================================


def rgb_to_hsl(rgb: RGB) -> HSL:
    """
    Convert RGB to HSL using the max/min channel algorithm.

    Achromatic colors (max == min) get h = s = 0. Hue is reported in
    whole degrees; a hue that rounds up to 360 wraps to 0.
    """
    r = rgb.r / 255
    g = rgb.g / 255
    b = rgb.b / 255

    hi = max(r, g, b)
    lo = min(r, g, b)
    diff = hi - lo

    h = 0.0
    s = 0.0
    l = (hi + lo) / 2

    if diff != 0:
        s = diff / (2 - hi - lo) if l > 0.5 else diff / (hi + lo)

        if hi == r:
            h = ((g - b) / diff + (6 if g < b else 0)) / 6
        elif hi == g:
            h = ((b - r) / diff + 2) / 6
        else:
            h = ((r - g) / diff + 4) / 6

    return HSL(
        h=round_half_away(h * 360) % 360,
        s=round_half_away(s * 100),
        l=round_half_away(l * 100),
    )


def hsl_to_rgb(hsl: HSL) -> RGB:
    """Convert HSL (degrees, percents) to RGB."""
    h = hsl.h / 360
    s = hsl.s / 100
    l = hsl.l / 100

    if s == 0:
        gray = _clamp_channel(l * 255)
        return RGB(gray, gray, gray)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    return RGB(
        r=_clamp_channel(_hue_to_channel(p, q, h + 1 / 3) * 255),
        g=_clamp_channel(_hue_to_channel(p, q, h) * 255),
        b=_clamp_channel(_hue_to_channel(p, q, h - 1 / 3) * 255),
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hex_to_hsl(hex_color: str) -> HSL:
    return rgb_to_hsl(hex_to_rgb(hex_color))


def hsl_to_hex(hsl: HSL) -> str:
    return rgb_to_hex(hsl_to_rgb(hsl))


# =============================================================================
# Relative Luminance (WCAG)
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Linearize sRGB values in [0,1] with the WCAG piecewise curve.

    - For values <= 0.03928: value/12.92
    - Otherwise: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.03928,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )


def relative_luminance(rgb: RGB) -> float:
    """
    WCAG relative luminance of a color, in [0, 1].

    0.2126 R + 0.7152 G + 0.0722 B over linearized channels.
    """
    srgb = np.array(rgb.as_tuple(), dtype=np.float64) / 255.0
    return float(srgb_to_linear(srgb) @ LUMINANCE_WEIGHTS)


def relative_luminance_batch(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """
    Vectorized relative luminance.

    Args:
        pixels: Array of shape (..., 3) with sRGB values [0, 255]

    Returns:
        Array of shape (...) with luminance values
    """
    srgb = np.asarray(pixels, dtype=np.float64) / 255.0
    return srgb_to_linear(srgb) @ LUMINANCE_WEIGHTS


# =============================================================================
# Coercion
# =============================================================================


def as_rgb(color: Any) -> RGB:
    """
    Coerce a color-like value to RGB.

    Accepts RGB, a hex string, an ``(r, g, b)`` sequence, or any object
    exposing an ``rgb`` attribute (such as ColorSwatch).
    """
    if isinstance(color, RGB):
        return color
    if isinstance(color, str):
        return hex_to_rgb(color)
    rgb_attr = getattr(color, "rgb", None)
    if isinstance(rgb_attr, RGB):
        return rgb_attr
    try:
        r, g, b = color
    except (TypeError, ValueError) as e:
        raise TypeError(f"Cannot interpret {color!r} as a color") from e
    return RGB(int(r), int(g), int(b))


def as_hex(color: Any) -> str:
    """Coerce a color-like value (see ``as_rgb``) to canonical hex."""
    return rgb_to_hex(as_rgb(color))
