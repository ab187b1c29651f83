"""Tests for the Color codec."""

from __future__ import annotations

import pytest

from rng_service.color import BLACK, WHITE, Color, format_color, parse_color
from rng_service.exceptions import ColorError, RngServiceError


class TestParse:
    """Tests for Color.parse."""

    def test_white(self) -> None:
        assert Color.parse("white") == Color(255, 255, 255)

    def test_black(self) -> None:
        assert Color.parse("black") == Color(0, 0, 0)

    def test_uppercase_hex(self) -> None:
        assert Color.parse("#0A1B2C") == Color(0x0A, 0x1B, 0x2C)

    def test_lowercase_hex(self) -> None:
        assert Color.parse("#ff8000") == Color(255, 128, 0)

    def test_mixed_case_hex(self) -> None:
        assert Color.parse("#aBcDeF") == Color(0xAB, 0xCD, 0xEF)

    @pytest.mark.parametrize(
        "text",
        [
            "#GGGGGG",
            "",
            "White",
            "BLACK",
            "red",
            "#FFF",
            "#FFFFFFF",
            "FFFFFF",
            "FFFFFFF",
            "# FFFFF",
            "#+1+1+1",
            "#0_1_02",
            "#12345G",
        ],
    )
    def test_invalid_values(self, text: str) -> None:
        with pytest.raises(ColorError) as excinfo:
            Color.parse(text)
        assert excinfo.value.value == text

    def test_invalid_value_message(self) -> None:
        with pytest.raises(ColorError, match="#GGGGGG"):
            Color.parse("#GGGGGG")

    def test_color_error_is_service_error(self) -> None:
        assert issubclass(ColorError, RngServiceError)
        assert not issubclass(ColorError, ValueError)

    def test_module_alias(self) -> None:
        assert parse_color("#010203") == Color(1, 2, 3)


class TestFormat:
    """Tests for Color.format."""

    def test_named_constants(self) -> None:
        assert WHITE.format() == "white"
        assert BLACK.format() == "black"

    def test_constructed_named_colors_use_names(self) -> None:
        assert Color(255, 255, 255).format() == "white"
        assert Color(0, 0, 0).format() == "black"

    def test_zero_padded_uppercase(self) -> None:
        assert Color(10, 0, 255).format() == "#0A00FF"

    def test_str_matches_format(self) -> None:
        color = Color(1, 2, 3)
        assert str(color) == color.format() == format_color(color)

    def test_near_white_is_hex(self) -> None:
        assert Color(255, 255, 254).format() == "#FFFFFE"


class TestRoundTrip:
    """Round-trip laws between parse and format."""

    @pytest.mark.parametrize("text", ["#000001", "#0A0B0C", "#FF0000", "#123ABC", "white", "black"])
    def test_canonical_text_round_trips(self, text: str) -> None:
        """Canonical text survives parse then format.

        ``#FFFFFF`` and ``#000000`` are excluded: they parse to the named
        constants and format as ``white`` and ``black``.
        """
        assert Color.parse(text).format() == text

    @pytest.mark.parametrize(("text", "expected"), [("#FFFFFF", "white"), ("#000000", "black")])
    def test_hex_of_named_colors_formats_as_name(self, text: str, expected: str) -> None:
        assert Color.parse(text).format() == expected
        assert Color.parse(expected) == Color.parse(text)

    def test_every_channel_value_round_trips(self) -> None:
        for value in range(256):
            for color in (Color(value, 0, 1), Color(1, value, 0), Color(0, 1, value)):
                assert Color.parse(color.format()) == color

    def test_lowercase_input_is_not_preserved(self) -> None:
        assert Color.parse("#abcdef").format() == "#ABCDEF"


class TestColorValue:
    """Tests for the Color value type itself."""

    def test_frozen(self) -> None:
        color = Color(1, 2, 3)
        with pytest.raises(AttributeError):
            color.red = 5  # type: ignore[misc]

    def test_channels(self) -> None:
        assert Color(1, 2, 3).channels() == (1, 2, 3)

    @pytest.mark.parametrize("channels", [(-1, 0, 0), (0, 256, 0), (0, 0, 1000)])
    def test_out_of_range_channel_rejected(self, channels: tuple[int, int, int]) -> None:
        with pytest.raises(ValueError, match="color channels"):
            Color(*channels)

    def test_out_of_range_channel_is_not_a_color_error(self) -> None:
        with pytest.raises(ValueError) as excinfo:
            Color(0, 0, 300)
        assert not isinstance(excinfo.value, ColorError)

    def test_hashable(self) -> None:
        assert len({Color(1, 2, 3), Color(1, 2, 3), WHITE}) == 2
