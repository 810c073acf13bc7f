# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Palette schema: the value types exchanged with callers.

Design principles:
- Immutable: all types are frozen dataclasses, changed by reconstruction
- Derived fields (HSL, accessibility) are recomputed from RGB by the engine
- Plain data: ``to_dict()`` emits the camelCase keys of the wire contract

Hex colors are plain strings in canonical ``#RRGGBB`` (uppercase) form.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


# =============================================================================
# Closed Vocabularies
# =============================================================================


class ColorCategory(Enum):
    """Role of a swatch within its palette."""
    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"
    NEUTRAL = "neutral"


class WCAGLevel(Enum):
    """WCAG conformance level of a contrast ratio."""
    AAA = "AAA"
    AA = "AA"
    FAIL = "FAIL"

    @property
    def rank(self) -> int:
        """0 for FAIL, 1 for AA, 2 for AAA."""
        return {WCAGLevel.FAIL: 0, WCAGLevel.AA: 1, WCAGLevel.AAA: 2}[self]


class ColorBlindnessType(Enum):
    """Color vision deficiencies the simulator can reproduce."""
    PROTANOPIA = "protanopia"        # red-blind
    DEUTERANOPIA = "deuteranopia"    # green-blind
    TRITANOPIA = "tritanopia"        # blue-blind
    ACHROMATOPSIA = "achromatopsia"  # no color vision


# The three dichromacies; achromatopsia is excluded from safety checks
DICHROMACIES = (
    ColorBlindnessType.PROTANOPIA,
    ColorBlindnessType.DEUTERANOPIA,
    ColorBlindnessType.TRITANOPIA,
)


class HarmonyType(Enum):
    """Hue-rotation / lightness-shift rules for related colors."""
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    ANALOGOUS = "analogous"
    MONOCHROMATIC = "monochromatic"
    TETRADIC = "tetradic"


class ExportFormat(Enum):
    """Supported palette export targets."""
    CSS = "css"
    SCSS = "scss"
    JSON = "json"
    TAILWIND = "tailwind"
    ASE = "ase"
    SKETCH = "sketch"
    FIGMA = "figma"


# =============================================================================
# Color Values
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGB:
    """
    An sRGB color with integer channels.

    This is the canonical pixel representation; every other form
    (hex, HSL) is derived from it.
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {channel} must be 0-255, got {value}")

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def brightness(self) -> float:
        """Mean of the three channels, 0-255."""
        return (self.r + self.g + self.b) / 3

    def to_dict(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGB:
        return cls(r=int(data["r"]), g=int(data["g"]), b=int(data["b"]))


@dataclass(frozen=True, slots=True)
class HSL:
    """
    Hue/saturation/lightness in display units.

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation percent [0, 100]
        l: Lightness percent [0, 100]
    """
    h: int
    s: int
    l: int

    def __post_init__(self) -> None:
        if not 0 <= self.h < 360:
            raise ValueError(f"Hue must be 0-360, got {self.h}")
        if not 0 <= self.s <= 100:
            raise ValueError(f"Saturation must be 0-100, got {self.s}")
        if not 0 <= self.l <= 100:
            raise ValueError(f"Lightness must be 0-100, got {self.l}")

    def to_dict(self) -> dict:
        return {"h": self.h, "s": self.s, "l": self.l}

    @classmethod
    def from_dict(cls, data: dict) -> HSL:
        return cls(h=int(data["h"]), s=int(data["s"]), l=int(data["l"]))


# =============================================================================
# Accessibility Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class AccessibilityInfo:
    """
    Contrast facts for a single swatch against white and black.

    Always computed by the engine; values supplied from outside are
    never trusted.
    """
    contrast_with_white: float
    contrast_with_black: float
    wcag_level: WCAGLevel

    def __post_init__(self) -> None:
        for label, ratio in (
            ("white", self.contrast_with_white),
            ("black", self.contrast_with_black),
        ):
            if not 1.0 <= ratio <= 21.0 + 1e-9:
                raise ValueError(f"Contrast with {label} must be 1-21, got {ratio}")

    def to_dict(self) -> dict:
        return {
            "contrastWithWhite": self.contrast_with_white,
            "contrastWithBlack": self.contrast_with_black,
            "wcagLevel": self.wcag_level.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> AccessibilityInfo:
        return cls(
            contrast_with_white=data["contrastWithWhite"],
            contrast_with_black=data["contrastWithBlack"],
            wcag_level=WCAGLevel(data["wcagLevel"]),
        )


@dataclass(frozen=True, slots=True)
class ContrastPair:
    """
    Contrast between two colors, evaluated for normal-size text.

    Attributes:
        color_a: First color (the palette color)
        color_b: Second color (a background or another palette color)
        ratio: Contrast ratio, 1-21
        level: WCAG level of ``ratio``
        applicable: False when a palette color is checked against a
            background identical to itself. Such a pair is never a
            usable combination, so it is reported but never counted as
            a failure.
    """
    color_a: str
    color_b: str
    ratio: float
    level: WCAGLevel
    applicable: bool = True

    @property
    def is_text_readable(self) -> bool:
        """True when the pair reaches the 4.5:1 body-text minimum."""
        return self.ratio >= 4.5

    @property
    def failed(self) -> bool:
        """True for an applicable pair at FAIL."""
        return self.applicable and self.level is WCAGLevel.FAIL

    def to_dict(self) -> dict:
        return {
            "colorA": self.color_a,
            "colorB": self.color_b,
            "ratio": self.ratio,
            "level": self.level.value,
            "isTextReadable": self.is_text_readable,
            "applicable": self.applicable,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ContrastPair:
        return cls(
            color_a=data["colorA"],
            color_b=data["colorB"],
            ratio=data["ratio"],
            level=WCAGLevel(data["level"]),
            applicable=data.get("applicable", True),
        )


@dataclass(frozen=True, slots=True)
class AccessibilityReport:
    """
    Palette-level compliance report.

    Attributes:
        overall_score: Worst level observed over all contrast pairs
        contrast_pairs: Every evaluated pair, swatches vs white/black first,
            then swatches against each other
        color_blindness_compatible: True if colors stay distinguishable
            under all three dichromacies
        recommendations: Advisory text, in a fixed check order
        passed_checks: Number of pairs not failed (see ContrastPair.failed)
        total_checks: Number of pairs evaluated
    """
    overall_score: WCAGLevel
    contrast_pairs: tuple[ContrastPair, ...]
    color_blindness_compatible: bool
    recommendations: tuple[str, ...]
    passed_checks: int
    total_checks: int

    def __post_init__(self) -> None:
        if self.total_checks != len(self.contrast_pairs):
            raise ValueError(
                f"total_checks ({self.total_checks}) must equal the number "
                f"of contrast pairs ({len(self.contrast_pairs)})"
            )
        if not 0 <= self.passed_checks <= self.total_checks:
            raise ValueError(
                f"passed_checks must be 0-{self.total_checks}, "
                f"got {self.passed_checks}"
            )

    def to_dict(self) -> dict:
        return {
            "overallScore": self.overall_score.value,
            "contrastPairs": [p.to_dict() for p in self.contrast_pairs],
            "colorBlindnessCompatible": self.color_blindness_compatible,
            "recommendations": list(self.recommendations),
            "passedChecks": self.passed_checks,
            "totalChecks": self.total_checks,
        }

    @classmethod
    def from_dict(cls, data: dict) -> AccessibilityReport:
        return cls(
            overall_score=WCAGLevel(data["overallScore"]),
            contrast_pairs=tuple(
                ContrastPair.from_dict(p) for p in data["contrastPairs"]
            ),
            color_blindness_compatible=data["colorBlindnessCompatible"],
            recommendations=tuple(data.get("recommendations", ())),
            passed_checks=data["passedChecks"],
            total_checks=data["totalChecks"],
        )


# =============================================================================
# Swatches and Palettes
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorSwatch:
    """
    A named color with its role in a palette.

    Build swatches with ``palettekit.measure.swatch.build_swatch``, which
    validates the hex and derives rgb, hsl and accessibility from it.
    """
    hex: str
    rgb: RGB
    hsl: HSL
    name: str
    category: ColorCategory
    usage: str
    accessibility: AccessibilityInfo

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "hex": self.hex,
            "rgb": self.rgb.to_dict(),
            "hsl": self.hsl.to_dict(),
            "category": self.category.value,
            "usage": self.usage,
            "accessibility": self.accessibility.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class Palette:
    """
    An ordered collection of swatches.

    Order matters: the first swatch is the primary color.
    """
    name: str
    colors: tuple[ColorSwatch, ...]
    prompt: Optional[str] = None
    accessibility_report: Optional[AccessibilityReport] = None

    @property
    def categories(self) -> list[str]:
        """Distinct category values in first-seen order."""
        seen: list[str] = []
        for swatch in self.colors:
            if swatch.category.value not in seen:
                seen.append(swatch.category.value)
        return seen

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "prompt": self.prompt,
            "colors": [c.to_dict() for c in self.colors],
            "accessibilityScore": (
                self.accessibility_report.to_dict()
                if self.accessibility_report is not None else None
            ),
        }


# =============================================================================
# Export Output
# =============================================================================


@dataclass(frozen=True, slots=True)
class ExportArtifact:
    """
    One rendered export of a palette.

    Attributes:
        format: The export target
        content: Rendered text, or raw bytes for binary targets
        filename: Suggested download filename
        mime_type: Declared content type for the download response
    """
    format: ExportFormat
    content: Union[str, bytes]
    filename: str
    mime_type: str

    @property
    def data(self) -> bytes:
        """Content as bytes (UTF-8 for text content)."""
        if isinstance(self.content, bytes):
            return self.content
        return self.content.encode("utf-8")
