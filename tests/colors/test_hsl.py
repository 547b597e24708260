"""Tests for hex <-> HSL conversion"""

import pytest

from themegen.colors.hex import parse_hex
from themegen.colors.hsl import HSL, hex_to_hsl, hsl_to_hex, round_half_up
from themegen.errors import InvalidColorError


class TestRoundHalfUp:
    """Test integer rounding used by both conversions"""

    def test_halves_round_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(127.5) == 128
        assert round_half_up(-2.5) == -2

    def test_non_halves(self):
        assert round_half_up(2.49) == 2
        assert round_half_up(2.51) == 3


class TestHexToHSL:
    """Test hex -> HSL conversion"""

    def test_indigo(self):
        # hue 238.73, saturation 83.53, lightness 66.67
        assert hex_to_hsl("#6366f1") == HSL(h=239, s=84, l=67)

    def test_case_and_hash_insignificant(self):
        assert hex_to_hsl("6366F1") == hex_to_hsl("#6366f1")

    @pytest.mark.parametrize("hex_color,expected", [
        ("#ff0000", HSL(0, 100, 50)),
        ("#00ff00", HSL(120, 100, 50)),
        ("#0000ff", HSL(240, 100, 50)),
        ("#ffffff", HSL(0, 0, 100)),
        ("#000000", HSL(0, 0, 0)),
        ("#808080", HSL(0, 0, 50)),
        ("#123456", HSL(210, 65, 20)),
    ])
    def test_reference_colors(self, hex_color, expected):
        assert hex_to_hsl(hex_color) == expected

    def test_hue_wraps_below_360(self):
        # Red sector with g < b gives 359.77 degrees, which rounds to 360
        hsl = hex_to_hsl("#ff0001")
        assert hsl.h == 0
        assert hsl.s == 100

    def test_unpacks_as_tuple(self):
        h, s, l = hex_to_hsl("#6366f1")
        assert (h, s, l) == (239, 84, 67)

    @pytest.mark.parametrize("value", ["#f00", "", "#zzzzzz", None])
    def test_invalid_input_raises(self, value):
        with pytest.raises(InvalidColorError) as exc_info:
            hex_to_hsl(value)
        assert exc_info.value.value == value


class TestHSLToHex:
    """Test HSL -> hex conversion"""

    @pytest.mark.parametrize("hsl,expected", [
        ((0, 100, 50), "#ff0000"),
        ((120, 100, 50), "#00ff00"),
        ((240, 100, 50), "#0000ff"),
        ((360, 100, 50), "#ff0000"),
        ((0, 0, 100), "#ffffff"),
        ((0, 0, 0), "#000000"),
        ((0, 0, 50), "#808080"),
    ])
    def test_reference_colors(self, hsl, expected):
        assert hsl_to_hex(*hsl) == expected

    def test_output_is_lowercase_with_hash(self):
        assert hsl_to_hex(239, 84, 50) == "#1418eb"

    def test_output_always_six_digits(self):
        for h in range(0, 360, 15):
            for s in (0, 50, 100):
                for l in (0, 25, 50, 75, 100):
                    result = hsl_to_hex(h, s, l)
                    assert len(result) == 7
                    assert result.startswith("#")

    def test_out_of_range_lightness_is_clamped(self):
        assert hsl_to_hex(0, 0, 150) == "#ffffff"
        assert hsl_to_hex(0, 0, -10) == "#000000"


class TestRoundTrip:
    """Test hex -> HSL -> hex stays visually equivalent"""

    # Integer HSL loses up to ~2 units per channel
    TOLERANCE = 3

    @pytest.mark.parametrize("hex_color", [
        "#6366f1", "#ff0000", "#00ff00", "#0000ff", "#808080",
        "#ffffff", "#000000", "#123456", "#f8f9fa", "#5b2be6",
    ])
    def test_round_trip_within_tolerance(self, hex_color):
        back = hsl_to_hex(*hex_to_hsl(hex_color))

        for original, restored in zip(parse_hex(hex_color), parse_hex(back)):
            assert abs(original - restored) <= self.TOLERANCE

    def test_pure_colors_round_trip_exactly(self):
        for hex_color in ("#ff0000", "#00ff00", "#0000ff", "#ffffff", "#000000"):
            assert hsl_to_hex(*hex_to_hsl(hex_color)) == hex_color
