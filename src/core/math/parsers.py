"""
Parsers — разбор числовых литералов

Преобразует десятичную строку в пару (unscaled, scale), где значение
равно unscaled * 10^(-scale). Поддерживается научная нотация:
"4.001e1", "4001e-2", "1E+2".

Разбор строгий: одна десятичная точка максимум, один маркер экспоненты
максимум, только цифры в мантиссе и экспоненте.
"""

from typing import Final, Optional, Tuple

from src.core.errors import NumberFormatError


ILLEGAL_FORMAT_MESSAGE: Final[str] = "Illegal number format."

_SIGNS: Final[str] = "+-"


def _split_sign(text: str) -> Tuple[int, str]:
    if text and text[0] in _SIGNS:
        return (-1 if text[0] == "-" else 1), text[1:]
    return 1, text


def parse_exponent(text: str) -> int:
    """
    Разбор показателя степени научной нотации.

    Args:
        text: Строка вида "2", "+2", "-2"

    Returns:
        Целый показатель

    Raises:
        NumberFormatError: Если показатель пуст или содержит не-цифры
    """
    sign, digits = _split_sign(text)
    if not digits or not digits.isdigit() or not digits.isascii():
        raise NumberFormatError(ILLEGAL_FORMAT_MESSAGE)
    return sign * int(digits)


def parse_num(text: str) -> Tuple[int, int]:
    """
    Разбор десятичного литерала.

    Args:
        text: Десятичная строка, возможно в научной нотации

    Returns:
        (unscaled, scale) — значение равно unscaled * 10^(-scale);
        scale может быть отрицательным для больших экспонент

    Raises:
        NumberFormatError: При недопустимом формате

    Examples:
        >>> parse_num("-12.50")
        (-1250, 2)
        >>> parse_num("4001e-2")
        (4001, 2)
        >>> parse_num("1e2")
        (1, -2)
    """
    if not isinstance(text, str):
        raise TypeError(ILLEGAL_FORMAT_MESSAGE)

    body = text.strip()
    lowered = body.lower()
    if lowered.count("e") > 1:
        raise NumberFormatError(ILLEGAL_FORMAT_MESSAGE)

    exponent = 0
    if "e" in lowered:
        mantissa, exp_text = body[: lowered.index("e")], body[lowered.index("e") + 1 :]
        exponent = parse_exponent(exp_text)
    else:
        mantissa = body

    sign, mantissa = _split_sign(mantissa)
    if mantissa.count(".") > 1:
        raise NumberFormatError(ILLEGAL_FORMAT_MESSAGE)

    integer_part, _, fraction_part = mantissa.partition(".")
    digits = integer_part + fraction_part
    if not digits or not digits.isdigit() or not digits.isascii():
        raise NumberFormatError(ILLEGAL_FORMAT_MESSAGE)

    return sign * int(digits), len(fraction_part) - exponent


def parse_parts(integer: str, fraction: Optional[str] = None) -> Tuple[int, int]:
    """
    Разбор двухкомпонентной формы: целая часть и строка дробных цифр.

    Дробная строка сохраняет ведущие нули: ("40", "01") -> 40.01.

    Args:
        integer: Целая часть (со знаком)
        fraction: Дробные цифры без знака и точки

    Returns:
        (unscaled, scale)

    Raises:
        NumberFormatError: При недопустимом формате любой из частей
    """
    if fraction is None:
        return parse_num(integer)
    if not fraction or not fraction.isdigit() or not fraction.isascii():
        raise NumberFormatError(ILLEGAL_FORMAT_MESSAGE)
    if "." in integer or "e" in integer.lower():
        raise NumberFormatError(ILLEGAL_FORMAT_MESSAGE)
    return parse_num(f"{integer.strip()}.{fraction}")


def is_valid_number(text: str) -> bool:
    """
    Проверка литерала без исключения.

    Returns:
        True если parse_num примет строку
    """
    try:
        parse_num(text)
    except (NumberFormatError, TypeError):
        return False
    return True
