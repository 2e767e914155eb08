"""
Математические константы произвольной точности

π, e и ln 2 вычисляются с нуля в целочисленной fixed-point арифметике:
значение хранится как int, равный константе * 10^digits. Результаты
кэшируются по числу цифр (lru_cache на 32 последних точности),
повторные запросы на той же точности бесплатны.

Методы:
- π:    формула Мэчина, π = 16·arccot(5) − 4·arccot(239)
- e:    ряд Σ 1/n!
- ln 2: ряд 2·Σ 1/((2k+1)·3^(2k+1)), т.е. 2·atanh(1/3)
"""

from functools import lru_cache
from typing import Final, Optional

from src.core.logging_config import get_logger
from src.core.math.bignum import BigNum
from src.core.math.context import MathContext, resolve_context


logger = get_logger(__name__)

# Дополнительные цифры fixed-point вычислений поверх запрошенной точности
CONSTANT_GUARD_DIGITS: Final[int] = 10


# =============================================================================
# FIXED-POINT ЯДРА
# =============================================================================


def _arccot(n: int, one: int) -> int:
    """arccot(n) * one по ряду Тейлора arctan(1/n)."""
    n_sq = n * n
    power = one // n
    total = power
    k = 1
    sign = 1
    while power:
        power //= n_sq
        k += 2
        sign = -sign
        total += sign * (power // k)
    return total


@lru_cache(maxsize=32)
def pi_fixed(digits: int) -> int:
    """π * 10^digits (усечённое)."""
    one = 10 ** (digits + CONSTANT_GUARD_DIGITS)
    value = 4 * (4 * _arccot(5, one) - _arccot(239, one))
    logger.debug("pi computed to %d digits", digits)
    return value // 10**CONSTANT_GUARD_DIGITS


@lru_cache(maxsize=32)
def e_fixed(digits: int) -> int:
    """e * 10^digits (усечённое)."""
    one = 10 ** (digits + CONSTANT_GUARD_DIGITS)
    total = 0
    term = one
    n = 0
    while term:
        total += term
        n += 1
        term //= n
    logger.debug("e computed to %d digits with %d terms", digits, n)
    return total // 10**CONSTANT_GUARD_DIGITS


@lru_cache(maxsize=32)
def ln2_fixed(digits: int) -> int:
    """ln 2 * 10^digits (усечённое)."""
    one = 10 ** (digits + CONSTANT_GUARD_DIGITS)
    power = one // 3
    total = 0
    k = 0
    while power:
        total += power // (2 * k + 1)
        power //= 9
        k += 1
    logger.debug("ln2 computed to %d digits with %d terms", digits, k)
    return 2 * total // 10**CONSTANT_GUARD_DIGITS


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================


def _constant(fixed, context: Optional[MathContext]) -> BigNum:
    ctx = resolve_context(context)
    digits = ctx.precision + CONSTANT_GUARD_DIGITS
    return BigNum.round(BigNum(fixed(digits), digits), ctx)


def pi(context: Optional[MathContext] = None) -> BigNum:
    """
    π, округлённое к контексту.

    Examples:
        >>> str(pi(MathContext(precision=5)))
        '3.14159'
    """
    return _constant(pi_fixed, context)


def e(context: Optional[MathContext] = None) -> BigNum:
    """Число Эйлера, округлённое к контексту."""
    return _constant(e_fixed, context)


def ln2(context: Optional[MathContext] = None) -> BigNum:
    """Натуральный логарифм 2, округлённый к контексту."""
    return _constant(ln2_fixed, context)
