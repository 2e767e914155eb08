"""
Экспонента, логарифмы и квадратный корень

- exp: разделение x = n + f (n целое, 0 <= f < 1);
  e^x = e^n · e^f, где e^n — возведение константы e в степень,
  e^f — ряд Маклорена (быстро сходится при f < 1)
- ln: редукция x = 2^k · y с y около 1;
  ln x = k·ln 2 + 2·atanh((y − 1)/(y + 1)), ряд atanh при |z| < 0.18
- log: десятичный логарифм ln x / ln 10
- sqrt: корректно округлённый корень через math.isqrt

Все функции вычисляют на рабочей точности и округляют к context
один раз в конце.
"""

import math
from typing import Final, Optional

from src.core.errors import UndefinedValue
from src.core.logging_config import get_logger
from src.core.math import constants
from src.core.math.bignum import BigNum, NumberLike, sqrt_fraction
from src.core.math.context import GUARD_DIGITS, MathContext, resolve_context


logger = get_logger(__name__)

LOG2_10: Final[float] = math.log2(10)

# log10(e) в десятитысячных: оценка числа целых цифр e^n
LOG10_E_E4: Final[int] = 4343


# =============================================================================
# РЯДЫ
# =============================================================================


def _exp_series(f: BigNum, wp: MathContext) -> BigNum:
    """Σ f^k / k! до первого члена, округлённого к нулю."""
    total = BigNum.ONE
    term = BigNum.ONE
    k = 0
    while True:
        k += 1
        term = term.mul(f, wp).div(k, wp)
        if term.is_zero:
            break
        total = total.add(term)
    logger.debug("exp series converged after %d terms at precision %d", k, wp.precision)
    return total


def _atanh_series(z: BigNum, wp: MathContext) -> BigNum:
    """Σ z^(2j+1) / (2j+1) до первого члена, округлённого к нулю."""
    z_sq = z.mul(z, wp)
    power = z
    total = z
    j = 0
    while True:
        j += 1
        power = power.mul(z_sq, wp)
        term = power.div(2 * j + 1, wp)
        if term.is_zero:
            break
        total = total.add(term)
    logger.debug("atanh series converged after %d terms at precision %d", j, wp.precision)
    return total


def _int_power(base: BigNum, n: int, wp: MathContext) -> BigNum:
    """base^n (n >= 0) бинарным возведением с округлением каждого шага."""
    result = BigNum.ONE
    while n:
        if n & 1:
            result = result.mul(base, wp)
        n >>= 1
        if n:
            base = base.mul(base, wp)
    return result


# =============================================================================
# ЭКСПОНЕНТА
# =============================================================================


def exp(x: NumberLike, context: Optional[MathContext] = None) -> BigNum:
    """
    Экспонента e^x.

    Args:
        x: Показатель
        context: Контекст результата

    Returns:
        e^x, округлённое к context

    Examples:
        >>> str(exp(1, MathContext(precision=10)))
        '2.7182818285'
    """
    ctx = resolve_context(context)
    x = BigNum.create(x)
    if x.is_zero:
        return BigNum.ONE

    if x.sign < 0:
        return BigNum.ONE.div(exp(x.neg(), ctx.working()), ctx)

    n = int(x)
    fraction = x.sub(n)
    magnitude = n * LOG10_E_E4 // 10000 + 2
    wp = ctx.working(extra=magnitude + len(str(n)) + 2 * GUARD_DIGITS)

    result = _exp_series(fraction, wp)
    if n:
        logger.debug("exp split: integer part %d, working precision %d", n, wp.precision)
        result = _int_power(constants.e(wp), n, wp).mul(result, wp)
    return BigNum.round(result, ctx)


# =============================================================================
# ЛОГАРИФМЫ
# =============================================================================


def ln(x: NumberLike, context: Optional[MathContext] = None) -> BigNum:
    """
    Натуральный логарифм.

    Args:
        x: Аргумент (> 0)
        context: Контекст результата

    Raises:
        UndefinedValue: x <= 0
    """
    ctx = resolve_context(context)
    x = BigNum.create(x)
    if x.sign <= 0:
        raise UndefinedValue("ln", x)
    if x == BigNum.ONE:
        return BigNum.ZERO

    # x = 2^k * y, y в [1/sqrt(2), sqrt(2)] с точностью до оценки float
    k = round(math.log2(x.unscaled) - x.scale * LOG2_10)
    if k >= 0:
        y = BigNum(x.unscaled * 5**k, x.scale + k)
    else:
        y = BigNum(x.unscaled * 2**-k, x.scale)

    wp = ctx.working(extra=2 * GUARD_DIGITS + len(str(abs(k))))
    z = y.sub(BigNum.ONE).div(y.add(BigNum.ONE), wp)
    logger.debug("ln reduction: k=%d, z=%s", k, z)

    result = _atanh_series(z, wp).mul(BigNum.TWO)
    if k:
        result = result.add(constants.ln2(wp).mul(k))
    return BigNum.round(result, ctx)


def log(x: NumberLike, context: Optional[MathContext] = None) -> BigNum:
    """
    Десятичный логарифм.

    Raises:
        UndefinedValue: x <= 0
    """
    ctx = resolve_context(context)
    x = BigNum.create(x)
    if x.sign <= 0:
        raise UndefinedValue("log", x)
    wp = ctx.working()
    return ln(x, wp).div(ln(BigNum.TEN, wp), ctx)


# =============================================================================
# КВАДРАТНЫЙ КОРЕНЬ
# =============================================================================


def sqrt(x: NumberLike, context: Optional[MathContext] = None) -> BigNum:
    """
    Квадратный корень, корректно округлённый к context.

    Raises:
        UndefinedValue: x < 0
    """
    ctx = resolve_context(context)
    x = BigNum.create(x)
    if x.sign < 0:
        raise UndefinedValue("sqrt", x)
    return sqrt_fraction(x.unscaled, 10**x.scale, ctx.precision, ctx.rounding)
