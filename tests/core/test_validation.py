# tests/core/test_validation.py
import pytest

from figure_service.core.domain.exceptions import (
    BadFormatError,
    CoordinateError,
    DomainError,
    EmptyStringError,
    OneCoordError,
    OutOfRangeError,
    TooMuchCoordsError,
)
from figure_service.core.domain.models import Point
from figure_service.core.domain.validation import (
    iter_tokens,
    parse_coord,
    parse_line,
    parse_pair,
)


class TestParseCoord:
    @pytest.mark.parametrize(
        "token, expected",
        [
            ("0", 0),
            ("-100", -100),
            ("100", 100),
            ("+5", 5),
            ("007", 7),
            ("-0", 0),
            ("42", 42),
            pytest.param("0" * 5000 + "12", 12, id="long-leading-zeros"),
            pytest.param("-" + "0" * 5000 + "100", -100, id="long-leading-zeros-negative"),
        ],
    )
    def test_valid_tokens(self, token, expected):
        assert parse_coord(token) == expected

    @pytest.mark.parametrize("token", ["abc", "", "5.0", "1_0", " 5", "5 ", "--5", "+", "0x10", "٣"])
    def test_bad_format(self, token):
        with pytest.raises(BadFormatError) as excinfo:
            parse_coord(token)
        assert excinfo.value.token == token

    @pytest.mark.parametrize(
        "token",
        [
            "200",
            "101",
            "-101",
            "99999999999999999999",
            pytest.param("1" * 5000, id="5000-digits"),
            pytest.param("-" + "9" * 5000, id="5000-digits-negative"),
            pytest.param("+" + "0" * 4999 + "101", id="long-leading-zeros"),
        ],
    )
    def test_out_of_range(self, token):
        with pytest.raises(OutOfRangeError):
            parse_coord(token)


class TestParseLine:
    def test_two_tokens(self):
        assert parse_line("10 -10") == Point(x=10, y=-10)

    def test_surrounding_and_mixed_whitespace(self):
        assert parse_line("  3\t\t-4 \n") == Point(x=3, y=-4)

    @pytest.mark.parametrize("line", ["", "   ", "\n"])
    def test_empty(self, line):
        with pytest.raises(EmptyStringError):
            parse_line(line)

    def test_one_coord(self):
        with pytest.raises(OneCoordError):
            parse_line("5")

    def test_too_much_coords(self):
        with pytest.raises(TooMuchCoordsError) as excinfo:
            parse_line("1 2 3")
        assert excinfo.value.token == "3"

    def test_first_token_is_checked_before_counting(self):
        with pytest.raises(BadFormatError):
            parse_line("abc")
        with pytest.raises(OutOfRangeError):
            parse_line("500 1 2")

    def test_second_token_is_checked_before_extra_tokens(self):
        with pytest.raises(OutOfRangeError):
            parse_line("1 500 2")
        with pytest.raises(BadFormatError):
            parse_line("5 abc")

    def test_huge_second_token_is_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            parse_line("1 " + "9" * 5000)

    def test_iter_tokens_splits_on_ascii_whitespace(self):
        assert list(iter_tokens(" a\tb\r\nc\fd ")) == ["a", "b", "c", "d"]


class TestParsePair:
    def test_valid(self):
        assert parse_pair("-20", "1") == Point(x=-20, y=1)

    def test_x_is_checked_first(self):
        with pytest.raises(BadFormatError):
            parse_pair("abc", "200")


class TestErrorMessages:
    @pytest.mark.parametrize(
        "error_cls, message",
        [
            (BadFormatError, "error: bad format"),
            (OutOfRangeError, "error: out of range"),
            (EmptyStringError, "error: empty string"),
            (OneCoordError, "error: one coord"),
            (TooMuchCoordsError, "error: too much coords"),
        ],
    )
    def test_rendered_message(self, error_cls, message):
        error = error_cls()
        assert error.message == message
        assert str(error) == message
        assert isinstance(error, CoordinateError)
        assert isinstance(error, DomainError)
