"""
Circular trigonometry — круговые тригонометрические функции

Все функции принимают MathContext, вычисляют на повышенной рабочей
точности и округляют к запрошенной точности один раз в конце:
- ряды Маклорена: 2 * precision + GUARD_DIGITS
- композиции (тождества, редукции): precision + GUARD_DIGITS

sin/cos: редукция аргумента по модулю 2π в (−π, π], затем ряд до члена,
округлённого к нулю.

asin: прямой ряд при |x| < 0.5, иначе asin(x) = π/2 − 2·asin(√((1−x)/2)).

atan: четыре области вокруг √2 − 1, 1, √2 + 1 — аргумент ряда всегда
меньше √2 − 1:
1. 0 <= x < √2 − 1:      atan(x)
2. √2 − 1 <= x < 1:      π/4 − atan((1 − x)/(1 + x))
3. 1 <= x < √2 + 1:      π/4 + atan((x − 1)/(x + 1))
4. x >= √2 + 1:          π/2 − atan(1/x)
"""

from typing import Final, Optional

from src.core.errors import UndefinedValue
from src.core.logging_config import get_logger
from src.core.math.bignum import BigNum, NumberLike
from src.core.math.constants import pi
from src.core.math.context import MathContext, resolve_context
from src.core.math.exponential import sqrt


logger = get_logger(__name__)


# =============================================================================
# ПОРОГИ
# =============================================================================

# Граница прямого ряда asin
ASIN_SERIES_LIMIT: Final[BigNum] = BigNum.create("0.5")

# √2 − 1 и √2 + 1: границы областей atan
ATAN_LIMIT_LOW: Final[BigNum] = BigNum.create("0.414213562373")
ATAN_LIMIT_HIGH: Final[BigNum] = BigNum.create("2.414213562373")


# =============================================================================
# РЕДУКЦИЯ И РЯДЫ
# =============================================================================


def _reduce(x: BigNum, wp: MathContext) -> BigNum:
    """x по модулю 2π в интервал (−π, π]."""
    integer_digits = len(str(abs(int(x))))
    pi_value = pi(MathContext(precision=wp.precision + integer_digits + 2))
    two_pi = pi_value.mul(BigNum.TWO)
    reduced = x.mod(two_pi)
    if reduced > pi_value:
        reduced = reduced.sub(two_pi)
    if reduced != x:
        logger.debug("argument %s reduced to %s", x, BigNum.round(reduced, wp))
    return reduced


def _sin_series(x: BigNum, wp: MathContext) -> BigNum:
    x_sq = x.mul(x, wp)
    term = x
    total = x
    n = 1
    while True:
        term = term.mul(x_sq, wp).div((n + 1) * (n + 2), wp).neg()
        n += 2
        if term.is_zero:
            break
        total = total.add(term)
    logger.debug("sin series converged after %d terms", n // 2)
    return total


def _cos_series(x: BigNum, wp: MathContext) -> BigNum:
    x_sq = x.mul(x, wp)
    term = BigNum.ONE
    total = BigNum.ONE
    n = 0
    while True:
        term = term.mul(x_sq, wp).div((n + 1) * (n + 2), wp).neg()
        n += 2
        if term.is_zero:
            break
        total = total.add(term)
    logger.debug("cos series converged after %d terms", n // 2)
    return total


def _asin_series(x: BigNum, wp: MathContext) -> BigNum:
    """
    Ряд арксинуса при |x| <= 0.5.

    p_0 = x, p_(n+1) = p_n · x² · (2n+1)/(2n+2), член ряда p_n / (2n+1).
    """
    x_sq = x.mul(x, wp)
    power = x
    total = x
    n = 0
    while True:
        power = power.mul(x_sq, wp).mul(2 * n + 1).div(2 * n + 2, wp)
        n += 1
        term = power.div(2 * n + 1, wp)
        if term.is_zero:
            break
        total = total.add(term)
    logger.debug("asin series converged after %d terms", n)
    return total


def _atan_series(x: BigNum, wp: MathContext) -> BigNum:
    """Ряд арктангенса при |x| < √2 − 1."""
    x_sq = x.mul(x, wp)
    power = x
    total = x
    n = 0
    while True:
        power = power.mul(x_sq, wp).neg()
        n += 1
        term = power.div(2 * n + 1, wp)
        if term.is_zero:
            break
        total = total.add(term)
    logger.debug("atan series converged after %d terms", n)
    return total


# =============================================================================
# ПРЯМЫЕ ФУНКЦИИ
# =============================================================================


def sin(x: NumberLike, context: Optional[MathContext] = None) -> BigNum:
    """
    Синус.

    Examples:
        >>> str(sin(0))
        '0.0'
    """
    ctx = resolve_context(context)
    x = BigNum.create(x)
    if x.is_zero:
        return BigNum.ZERO
    wp = ctx.working(factor=2)
    return BigNum.round(_sin_series(_reduce(x, wp), wp), ctx)


def cos(x: NumberLike, context: Optional[MathContext] = None) -> BigNum:
    """Косинус."""
    ctx = resolve_context(context)
    x = BigNum.create(x)
    if x.is_zero:
        return BigNum.ONE
    wp = ctx.working(factor=2)
    return BigNum.round(_cos_series(_reduce(x, wp), wp), ctx)


def tan(x: NumberLike, context: Optional[MathContext] = None) -> BigNum:
    """
    Тангенс sin(x) / cos(x).

    Raises:
        DivisionByZero: cos(x) округлился к нулю на рабочей точности
    """
    ctx = resolve_context(context)
    wp = ctx.working(factor=2)
    return sin(x, wp).div(cos(x, wp), ctx)


# =============================================================================
# ОБРАТНЫЕ ФУНКЦИИ
# =============================================================================


def _check_unit_interval(operation: str, x: BigNum) -> None:
    if x.abs() > BigNum.ONE:
        raise UndefinedValue(operation, x)


def asin(x: NumberLike, context: Optional[MathContext] = None) -> BigNum:
    """
    Арксинус.

    Args:
        x: Аргумент, |x| <= 1
        context: Контекст результата

    Returns:
        asin(x) в [−π/2, π/2]

    Raises:
        UndefinedValue: |x| > 1
    """
    ctx = resolve_context(context)
    x = BigNum.create(x)
    _check_unit_interval("asin", x)
    if x.is_zero:
        return BigNum.ZERO
    if x.sign < 0:
        return asin(x.neg(), ctx).neg()

    series_wp = ctx.working(factor=2)
    if x < ASIN_SERIES_LIMIT:
        return BigNum.round(_asin_series(x, series_wp), ctx)

    half_pi = pi(series_wp).div(BigNum.TWO, series_wp)
    root = sqrt(BigNum.ONE.sub(x).div(BigNum.TWO, series_wp), series_wp)
    result = half_pi.sub(_asin_series(root, series_wp).mul(BigNum.TWO))
    logger.debug("asin(%s) via half-angle identity", x)
    return BigNum.round(result, ctx)


def acos(x: NumberLike, context: Optional[MathContext] = None) -> BigNum:
    """
    Арккосинус.

    Returns:
        acos(x) в [0, π]

    Raises:
        UndefinedValue: |x| > 1
    """
    ctx = resolve_context(context)
    x = BigNum.create(x)
    _check_unit_interval("acos", x)
    wp = ctx.working()

    if x.abs() < ASIN_SERIES_LIMIT:
        half_pi = pi(wp).div(BigNum.TWO, wp)
        return BigNum.round(half_pi.sub(asin(x, wp)), ctx)

    root = sqrt(BigNum.ONE.sub(x).div(BigNum.TWO, wp), wp)
    return BigNum.round(asin(root, wp).mul(BigNum.TWO), ctx)


def atan(x: NumberLike, context: Optional[MathContext] = None) -> BigNum:
    """
    Арктангенс.

    Returns:
        atan(x) в (−π/2, π/2)
    """
    ctx = resolve_context(context)
    x = BigNum.create(x)
    if x.is_zero:
        return BigNum.ZERO
    if x.sign < 0:
        return atan(x.neg(), ctx).neg()

    series_wp = ctx.working(factor=2)

    if x < ATAN_LIMIT_LOW:
        return BigNum.round(_atan_series(x, series_wp), ctx)

    if x < BigNum.ONE:
        less = BigNum.ONE.sub(x).div(BigNum.ONE.add(x), series_wp)
        reference, sign = pi(series_wp).div(BigNum.FOUR, series_wp), -1
    elif x < ATAN_LIMIT_HIGH:
        less = x.sub(BigNum.ONE).div(x.add(BigNum.ONE), series_wp)
        reference, sign = pi(series_wp).div(BigNum.FOUR, series_wp), 1
    else:
        less = BigNum.ONE.div(x, series_wp)
        reference, sign = pi(series_wp).div(BigNum.TWO, series_wp), -1

    logger.debug("atan(%s) reduced to atan(%s)", x, less)
    value = _atan_series(less, series_wp)
    result = reference.add(value) if sign > 0 else reference.sub(value)
    return BigNum.round(result, ctx)


def atan2(y: NumberLike, x: NumberLike, context: Optional[MathContext] = None) -> BigNum:
    """
    Угол точки (x, y) в (−π, π].

    Raises:
        UndefinedValue: x = y = 0
    """
    ctx = resolve_context(context)
    y = BigNum.create(y)
    x = BigNum.create(x)
    if x.is_zero and y.is_zero:
        raise UndefinedValue("atan2", (y, x))

    wp = ctx.working()
    if x.is_zero:
        half_pi = pi(wp).div(BigNum.TWO, wp)
        return BigNum.round(half_pi.neg() if y.sign < 0 else half_pi, ctx)

    if x.sign > 0:
        return atan(y.div(x, wp), ctx)

    value = atan(y.div(x, wp), wp)
    result = value.sub(pi(wp)) if y.sign < 0 else value.add(pi(wp))
    return BigNum.round(result, ctx)
