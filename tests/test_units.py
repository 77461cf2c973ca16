"""Unit tests for whole-sequence helpers.

WHY: iter_scalars() is how every front end walks a buffer; a wrong
advance would skip or double-read units. The text converters and token
parsers are what users feed the CLI through.

HOW: Walks the shared sample buffer, checks malformed buffers fail at
the right index, converts text both ways, and parses each supported
notation.
"""

import pytest

from codepoint_codec.core.errors import (
    InvalidCodePointError,
    NullSequenceError,
    UnpairedHighSurrogateError,
    UnpairedLowSurrogateError,
)
from codepoint_codec.core.units import (
    count_scalars,
    iter_scalars,
    parse_scalar,
    parse_unit,
    text_to_units,
    units_to_text,
)


class TestIterScalars:
    """iter_scalars yields (index, scalar, consumed) and advances correctly."""

    def test_sample_walk(self, sample_units, sample_scalars):
        result = list(iter_scalars(sample_units))
        assert [s for _, s, _ in result] == sample_scalars
        assert [i for i, _, _ in result] == [0, 1, 2, 4, 5]
        assert [c for _, _, c in result] == [1, 1, 2, 1, 2]

    def test_empty(self):
        assert list(iter_scalars([])) == []

    def test_start_offset(self, sample_units):
        result = list(iter_scalars(sample_units, start=4))
        assert result == [(4, 0x20AC, 1), (5, 0x1D11E, 2)]

    def test_start_at_length_yields_nothing(self, sample_units):
        assert list(iter_scalars(sample_units, start=len(sample_units))) == []

    def test_error_raised_at_offending_index(self):
        walker = iter_scalars([0x41, 0x42, 0xDC00, 0x43])
        assert next(walker) == (0, 0x41, 1)
        assert next(walker) == (1, 0x42, 1)
        with pytest.raises(UnpairedLowSurrogateError) as excinfo:
            next(walker)
        assert excinfo.value.index == 2

    def test_trailing_high_surrogate(self):
        with pytest.raises(UnpairedHighSurrogateError) as excinfo:
            list(iter_scalars([0x41, 0xD83D]))
        assert excinfo.value.index == 1
        assert excinfo.value.at_end

    def test_none(self):
        with pytest.raises(NullSequenceError):
            list(iter_scalars(None))


class TestCountScalars:

    def test_sample(self, sample_units):
        assert count_scalars(sample_units) == 5

    def test_empty(self):
        assert count_scalars([]) == 0

    def test_malformed_raises(self):
        with pytest.raises(UnpairedHighSurrogateError):
            count_scalars([0xD800, 0xD800])


class TestTextConversion:
    """text_to_units and units_to_text convert through the codec."""

    def test_text_to_units(self, sample_text, sample_units):
        assert text_to_units(sample_text) == sample_units

    def test_units_to_text(self, sample_text, sample_units):
        assert units_to_text(sample_units) == sample_text

    def test_empty(self):
        assert text_to_units("") == []
        assert units_to_text([]) == ""

    def test_lone_surrogate_in_text_rejected(self):
        with pytest.raises(InvalidCodePointError) as excinfo:
            text_to_units("a\ud83db")
        assert excinfo.value.value == 0xD83D

    def test_malformed_units_rejected(self):
        with pytest.raises(UnpairedLowSurrogateError):
            units_to_text([0xDE00, 0xD83D])

    def test_length_difference_for_supplementary(self):
        text = "\U0001F600\U0001F601"
        assert len(text) == 2
        assert len(text_to_units(text)) == 4


class TestParsing:
    """parse_scalar / parse_unit accept the notations users type."""

    @pytest.mark.parametrize("token,expected", [
        ("U+1F600", 0x1F600),
        ("u+1f600", 0x1F600),
        ("0x1F600", 0x1F600),
        ("\\U0001F600", 0x1F600),
        ("\\u00e9", 0xE9),
        ("65", 65),
        ("-1", -1),
        ("  U+0041 ", 0x41),
    ])
    def test_parse_scalar(self, token, expected):
        assert parse_scalar(token) == expected

    def test_parse_scalar_bare_hex_is_not_decimal(self):
        with pytest.raises(ValueError, match="Cannot parse"):
            parse_scalar("1F600")

    @pytest.mark.parametrize("token,expected", [
        ("D83D", 0xD83D),
        ("de00", 0xDE00),
        ("0x0041", 0x41),
        ("41", 0x41),
        ("\\uD83D", 0xD83D),
        ("FFFF", 0xFFFF),
    ])
    def test_parse_unit(self, token, expected):
        assert parse_unit(token) == expected

    def test_parse_unit_rejects_wide_values(self):
        with pytest.raises(ValueError, match="16 bits"):
            parse_unit("1F600")

    def test_parse_unit_rejects_garbage(self):
        with pytest.raises(ValueError, match="Cannot parse"):
            parse_unit("zz")
