# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""Tests for swatch construction, naming and palette assembly."""

import pytest

from palettekit.errors import InvalidColorFormat
from palettekit.schema import HSL, RGB, AccessibilityInfo, ColorCategory, WCAGLevel
from palettekit.measure.swatch import (
    accessibility_info,
    build_palette,
    build_swatch,
    category_for_position,
    color_family,
    contrast_usage,
    default_usage,
    ensure_accessibility,
    suggest_name,
    suggest_usage,
    swatch_from_dict,
    swatches_from_colors,
)


class TestAccessibilityInfo:

    def test_orange(self):
        info = accessibility_info("#FF6B35")
        assert info.contrast_with_white == pytest.approx(2.84, abs=0.01)
        assert info.contrast_with_black == pytest.approx(7.41, abs=0.01)
        assert info.wcag_level is WCAGLevel.AAA

    def test_mid_gray_is_aa(self):
        assert accessibility_info("#777777").wcag_level is WCAGLevel.AA


class TestNaming:

    @pytest.mark.parametrize("hsl, family", [
        (HSL(0, 0, 95), "white"),
        (HSL(0, 5, 5), "black"),
        (HSL(0, 10, 50), "gray"),
        (HSL(0, 100, 50), "red"),
        (HSL(16, 100, 60), "orange"),
        (HSL(120, 60, 50), "green"),
        (HSL(220, 60, 50), "blue"),
        (HSL(340, 60, 70), "pink"),
    ])
    def test_color_family(self, hsl, family):
        assert color_family(hsl) == family

    def test_family_falls_back_to_hue(self):
        # Blue hue but too dark for the blue lightness band
        assert color_family(HSL(210, 60, 20)) == "blue"

    def test_vibrant_orange(self):
        assert suggest_name(HSL(16, 100, 60)) == "Vibrant Tangerine"

    def test_light_white(self):
        assert suggest_name(HSL(0, 0, 100)) == "Light Snow"

    def test_dark_black(self):
        assert suggest_name(HSL(0, 0, 0)) == "Dark Charcoal"

    def test_deep_blue(self):
        assert suggest_name(HSL(210, 60, 20)) == "Deep Sapphire"

    def test_unmodified_name(self):
        assert suggest_name(HSL(220, 60, 50)) == "Navy"


class TestCategories:

    def test_positions(self):
        cats = [category_for_position(i, 5) for i in range(5)]
        assert cats == [
            ColorCategory.PRIMARY,
            ColorCategory.SECONDARY,
            ColorCategory.SECONDARY,
            ColorCategory.ACCENT,
            ColorCategory.ACCENT,
        ]

    def test_default_usage(self):
        assert default_usage("primary").startswith("Main brand color")
        assert default_usage(ColorCategory.ACCENT).startswith("Highlights")
        assert default_usage("neutral") == "General purpose color for various design elements"


class TestUsage:

    def test_contrast_aaa(self):
        assert contrast_usage(accessibility_info("#FF6B35")) == "excellent for text on any background"

    def test_contrast_aa_light_backgrounds(self):
        # 4.54 on white, 4.62 on black
        info = accessibility_info("#767676")
        assert info.wcag_level is WCAGLevel.AA
        assert contrast_usage(info) == "suitable for text on light backgrounds"

    def test_contrast_aa_dark_backgrounds(self):
        # 4.48 on white, 4.69 on black
        assert contrast_usage(accessibility_info("#777777")) == "suitable for text on dark backgrounds"

    def test_contrast_aa_neither_background(self):
        info = AccessibilityInfo(4.4, 4.4, WCAGLevel.AA)
        assert contrast_usage(info) == "good for text with appropriate background contrast"

    def test_contrast_fail(self):
        info = AccessibilityInfo(2.0, 3.0, WCAGLevel.FAIL)
        assert contrast_usage(info) == (
            "best used for decorative elements only (insufficient text contrast)"
        )

    @pytest.mark.parametrize("hue, note", [
        (0, "creates urgency and draws attention"),
        (30, "creates urgency and draws attention"),
        (45, "promotes enthusiasm and creativity"),
        (75, "stimulates optimism and mental clarity"),
        (120, "suggests growth, nature, and balance"),
        (206, "builds trust and promotes calmness"),
        (280, "conveys creativity and luxury"),
        (315, "adds warmth and approachability"),
        (330, "creates urgency and draws attention"),
    ])
    def test_hue_note(self, hue, note):
        usage = suggest_usage("accent", accessibility_info("#FF6B35"), HSL(hue, 60, 50))
        assert usage == (
            "Highlights, call-to-action elements, decorative accents, links, "
            f"excellent for text on any background, {note}"
        )

    def test_unnamed_swatch_gets_full_usage(self):
        s = build_swatch("#767676", category="neutral")
        assert s.usage == (
            "General purpose color for various design elements, "
            "suitable for text on light backgrounds, creates urgency and draws attention"
        )

    def test_explicit_usage_kept(self):
        assert build_swatch("#767676", usage="Body text").usage == "Body text"


class TestBuildSwatch:

    def test_derived_fields(self):
        s = build_swatch("ff6b35", "Sunset Orange")
        assert s.hex == "#FF6B35"
        assert s.rgb == RGB(255, 107, 53)
        assert s.hsl == HSL(16, 100, 60)
        assert s.category is ColorCategory.PRIMARY
        assert s.usage == (
            "Main brand color, headers, primary buttons, key elements, "
            "excellent for text on any background, creates urgency and draws attention"
        )
        assert s.accessibility == accessibility_info("#FF6B35")

    def test_blank_name_is_suggested(self):
        assert build_swatch("#FF6B35", "  ").name == "Vibrant Tangerine"

    def test_invalid_hex_raises(self):
        with pytest.raises(InvalidColorFormat):
            build_swatch("#GG0000", "Bad")

    def test_invalid_category_raises(self):
        with pytest.raises(ValueError):
            build_swatch("#FF0000", "Red", category="tertiary")

    def test_to_dict_keys(self):
        d = build_swatch("#004E89", "Ocean", category="secondary", usage="Links").to_dict()
        assert list(d) == ["name", "hex", "rgb", "hsl", "category", "usage", "accessibility"]
        assert d["category"] == "secondary"
        assert d["usage"] == "Links"
        assert d["accessibility"]["wcagLevel"] == "AAA"


class TestSwatchFromDict:

    def test_category_from_position(self):
        s = swatch_from_dict({"hex": "#00F", "name": "Blue"}, index=1, total=3)
        assert s.hex == "#0000FF"
        assert s.category is ColorCategory.SECONDARY

    def test_explicit_category_kept(self):
        s = swatch_from_dict({"hex": "#00F", "category": "neutral"}, index=0, total=3)
        assert s.category is ColorCategory.NEUTRAL

    def test_supplied_accessibility_ignored(self):
        s = swatch_from_dict({
            "hex": "#FFFF00",
            "name": "Yellow",
            "accessibility": {"contrastWithWhite": 21, "wcagLevel": "AAA"},
        })
        assert s.accessibility.contrast_with_white == pytest.approx(1.07, abs=0.01)

    def test_missing_hex_raises(self):
        with pytest.raises(KeyError):
            swatch_from_dict({"name": "Nothing"})


class TestPalette:

    def test_swatches_from_colors(self):
        swatches = swatches_from_colors([RGB(255, 107, 53), "#004E89", (247, 197, 159)])
        assert [s.category for s in swatches] == [
            ColorCategory.PRIMARY,
            ColorCategory.SECONDARY,
            ColorCategory.ACCENT,
        ]
        assert all(s.name for s in swatches)

    def test_build_palette_scores(self):
        palette = build_palette(
            "Mono",
            [build_swatch("#000000", "Ink"), build_swatch("#FFFFFF", "Paper")],
            prompt="black and white",
        )
        report = palette.accessibility_report
        assert report.overall_score is WCAGLevel.AAA
        assert report.total_checks == 5
        assert report.passed_checks == 5
        assert palette.prompt == "black and white"

    def test_categories_in_first_seen_order(self):
        palette = build_palette("P", swatches_from_colors(["#FF0000", "#00FF00", "#0000FF"]))
        assert palette.categories == ["primary", "secondary", "accent"]


class TestEnsureAccessibility:

    def test_aa_leaves_palette_untouched(self):
        swatches = swatches_from_colors(["#FF6B35", "#777777", "#FFFF00"])
        result = ensure_accessibility(swatches)
        assert all(a is b for a, b in zip(result, swatches))

    def test_aaa_darkens_mid_gray(self):
        original = build_swatch("#777777", "Slate", category="secondary", usage="Body text")
        (adjusted,) = ensure_accessibility([original], WCAGLevel.AAA)
        assert adjusted.hex == "#535353"
        assert adjusted.name == "Slate (Adjusted)"
        assert adjusted.usage == "Body text (accessibility improved)"
        assert adjusted.category is ColorCategory.SECONDARY
        assert adjusted.accessibility == accessibility_info("#535353")
        assert adjusted.accessibility.wcag_level is WCAGLevel.AAA

    def test_high_contrast_color_kept_at_aaa(self):
        # Yellow is 19.56:1 on black
        yellow = build_swatch("#FFFF00", "Canary")
        assert ensure_accessibility([yellow], "AAA") == [yellow]

    def test_adjusted_palette_rescored(self):
        swatches = ensure_accessibility(
            [build_swatch("#777777", "Slate"), build_swatch("#000000", "Ink")],
            WCAGLevel.AAA,
        )
        report = build_palette("Adjusted", swatches).accessibility_report
        assert report.contrast_pairs[0].color_a == "#535353"
        assert report.contrast_pairs[0].level is WCAGLevel.AAA

    def test_fail_target_rejected(self):
        with pytest.raises(ValueError, match="AA or AAA"):
            ensure_accessibility([build_swatch("#777777")], WCAGLevel.FAIL)
