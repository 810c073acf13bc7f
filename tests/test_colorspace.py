# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (hex ↔ RGB ↔ HSL, luminance)."""

import numpy as np
import pytest

from palettekit.errors import InvalidColorFormat
from palettekit.schema import HSL, RGB
from palettekit.measure.colorspace import (
    as_hex,
    as_rgb,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    is_valid_hex,
    normalize_hex,
    relative_luminance,
    relative_luminance_batch,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_away,
    srgb_to_linear,
)


class TestRoundHalfAway:

    def test_positive_tie_rounds_up(self):
        assert round_half_away(2.5) == 3
        assert round_half_away(0.5) == 1

    def test_negative_tie_rounds_down(self):
        assert round_half_away(-2.5) == -3

    def test_non_ties(self):
        assert round_half_away(2.49) == 2
        assert round_half_away(127.51) == 128


class TestHexParsing:

    def test_six_digit(self):
        assert hex_to_rgb("#FF6B35") == RGB(255, 107, 53)

    def test_without_hash(self):
        assert hex_to_rgb("ff6b35") == RGB(255, 107, 53)

    def test_three_digit_expands(self):
        assert hex_to_rgb("#F60") == RGB(255, 102, 0)

    def test_surrounding_whitespace_ignored(self):
        assert hex_to_rgb("  #000000 ") == RGB(0, 0, 0)

    @pytest.mark.parametrize("bad", ["#GGGGGG", "#12345", "", "red", "#1234567", "##FFF"])
    def test_invalid_raises(self, bad):
        with pytest.raises(InvalidColorFormat) as exc:
            hex_to_rgb(bad)
        assert exc.value.value == bad

    def test_non_string_raises(self):
        with pytest.raises(InvalidColorFormat):
            hex_to_rgb(None)

    def test_invalid_is_value_error(self):
        with pytest.raises(ValueError, match="Invalid hex color"):
            hex_to_rgb("nope")

    def test_is_valid_hex(self):
        assert is_valid_hex("#abc")
        assert is_valid_hex("ABCDEF")
        assert not is_valid_hex("#abcd")
        assert not is_valid_hex(123)


class TestHexFormatting:

    def test_uppercase_output(self):
        assert rgb_to_hex(RGB(255, 107, 53)) == "#FF6B35"

    def test_zero_padded(self):
        assert rgb_to_hex(RGB(0, 10, 1)) == "#000A01"

    def test_normalize(self):
        assert normalize_hex("f60") == "#FF6600"

    def test_roundtrip_sampled(self):
        rng = np.random.default_rng(7)
        for r, g, b in rng.integers(0, 256, size=(500, 3)):
            rgb = RGB(int(r), int(g), int(b))
            assert hex_to_rgb(rgb_to_hex(rgb)) == rgb

    def test_roundtrip_extremes(self):
        for rgb in (RGB(0, 0, 0), RGB(255, 255, 255), RGB(255, 0, 128)):
            assert hex_to_rgb(rgb_to_hex(rgb)) == rgb


class TestHSL:

    def test_pure_red(self):
        assert rgb_to_hsl(RGB(255, 0, 0)) == HSL(0, 100, 50)

    def test_pure_blue(self):
        assert rgb_to_hsl(RGB(0, 0, 255)) == HSL(240, 100, 50)

    def test_achromatic_has_zero_hue_and_saturation(self):
        hsl = rgb_to_hsl(RGB(128, 128, 128))
        assert hsl.h == 0
        assert hsl.s == 0
        assert hsl.l == 50

    def test_orange(self):
        assert hex_to_hsl("#FF6B35") == HSL(16, 100, 60)

    def test_hsl_to_rgb_primaries(self):
        assert hsl_to_rgb(HSL(0, 100, 50)) == RGB(255, 0, 0)
        assert hsl_to_rgb(HSL(120, 100, 50)) == RGB(0, 255, 0)
        assert hsl_to_rgb(HSL(240, 100, 50)) == RGB(0, 0, 255)

    def test_hsl_to_rgb_gray(self):
        assert hsl_to_rgb(HSL(200, 0, 50)) == RGB(128, 128, 128)

    def test_hsl_to_hex(self):
        assert hsl_to_hex(HSL(180, 100, 50)) == "#00FFFF"

    def test_hue_always_below_360(self):
        # Reds just below the wrap point must not report h=360
        assert rgb_to_hsl(RGB(255, 0, 1)).h < 360


class TestRelativeLuminance:

    def test_white(self):
        assert relative_luminance(RGB(255, 255, 255)) == pytest.approx(1.0)

    def test_black(self):
        assert relative_luminance(RGB(0, 0, 0)) == pytest.approx(0.0)

    def test_channel_weights(self):
        assert relative_luminance(RGB(255, 0, 0)) == pytest.approx(0.2126)
        assert relative_luminance(RGB(0, 255, 0)) == pytest.approx(0.7152)
        assert relative_luminance(RGB(0, 0, 255)) == pytest.approx(0.0722)

    def test_linear_segment_threshold(self):
        """Values at or below 0.03928 use the linear segment."""
        val = 0.03928
        linear = srgb_to_linear(np.array([val]))
        assert float(linear[0]) == pytest.approx(val / 12.92, abs=1e-12)

    def test_batch_matches_scalar(self):
        pixels = np.array([[255, 107, 53], [0, 78, 137], [200, 200, 200]], dtype=np.uint8)
        batch = relative_luminance_batch(pixels)
        expected = [relative_luminance(RGB(*map(int, p))) for p in pixels]
        np.testing.assert_allclose(batch, expected, atol=1e-12)


class TestCoercion:

    def test_as_rgb_accepts_hex_tuple_and_rgb(self):
        assert as_rgb("#010203") == RGB(1, 2, 3)
        assert as_rgb((1, 2, 3)) == RGB(1, 2, 3)
        assert as_rgb(RGB(1, 2, 3)) == RGB(1, 2, 3)

    def test_as_rgb_accepts_object_with_rgb(self):
        class Holder:
            rgb = RGB(9, 8, 7)

        assert as_rgb(Holder()) == RGB(9, 8, 7)

    def test_as_rgb_rejects_other(self):
        with pytest.raises(TypeError):
            as_rgb(object())

    def test_as_hex(self):
        assert as_hex((255, 107, 53)) == "#FF6B35"
