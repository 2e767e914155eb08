"""
Тесты для разбора числовых литералов
"""

import pytest

from src.core.errors import NumberFormatError
from src.core.math.parsers import is_valid_number, parse_exponent, parse_num, parse_parts


class TestParseNum:
    """Тесты parse_num"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("0", (0, 0)),
            ("-12.50", (-1250, 2)),
            ("+3.5", (35, 1)),
            (".5", (5, 1)),
            ("5.", (5, 0)),
            ("  7 ", (7, 0)),
            ("1e2", (1, -2)),
            ("1E+2", (1, -2)),
            ("4.001e1", (4001, 2)),
            ("4001e-2", (4001, 2)),
            ("-2.5e-05", (-25, 6)),
        ],
    )
    def test_valid_literals(self, text: str, expected: tuple) -> None:
        assert parse_num(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["", "1.1.1", "1e2e3", "12a", "--1", "e5", "1e", "1e2.5", ".", "1 2", "٣"],
    )
    def test_illegal_literals(self, text: str) -> None:
        with pytest.raises(NumberFormatError, match="Illegal number format"):
            parse_num(text)

    def test_non_string_rejected(self) -> None:
        with pytest.raises(TypeError):
            parse_num(12)


class TestParseExponent:
    """Тесты parse_exponent"""

    def test_signed(self) -> None:
        assert parse_exponent("12") == 12
        assert parse_exponent("+3") == 3
        assert parse_exponent("-05") == -5

    def test_empty(self) -> None:
        with pytest.raises(NumberFormatError):
            parse_exponent("-")


class TestParseParts:
    """Тесты двухкомпонентной формы"""

    def test_fraction_keeps_leading_zeros(self) -> None:
        assert parse_parts("40", "01") == (4001, 2)

    def test_negative_integer_part(self) -> None:
        assert parse_parts("-1", "5") == (-15, 1)

    def test_single_argument(self) -> None:
        assert parse_parts("2.5") == (25, 1)

    @pytest.mark.parametrize("integer, fraction", [("1.0", "5"), ("1e2", "5"), ("1", "-5"), ("1", "")])
    def test_illegal_parts(self, integer: str, fraction: str) -> None:
        with pytest.raises(NumberFormatError):
            parse_parts(integer, fraction)


class TestIsValidNumber:
    """Тесты is_valid_number"""

    def test_valid(self) -> None:
        assert is_valid_number("1.5e3")
        assert is_valid_number("-0.001")

    def test_invalid(self) -> None:
        assert not is_valid_number("abc")
        assert not is_valid_number("1..2")
        assert not is_valid_number(5)
