"""
Hyperbolic trigonometry — гиперболические функции

sinh/cosh — прямые ряды Маклорена (сходятся при любом x, медленнее
при больших |x|). tanh = sinh/cosh с коротким путём для нуля и знака.

Обратные функции выражены через ln и sqrt:
- asinh(x) = ln(x + √(x² + 1))
- acosh(x) = ln(x + √(x² − 1)),  x >= 1
- atanh(x) = ½·ln((1 + x)/(1 − x)),  |x| < 1
"""

from typing import Optional

from src.core.errors import UndefinedValue
from src.core.logging_config import get_logger
from src.core.math.bignum import BigNum, NumberLike
from src.core.math.context import MathContext, resolve_context
from src.core.math.exponential import ln, sqrt


logger = get_logger(__name__)


def _series(start: BigNum, first: int, x: BigNum, wp: MathContext) -> BigNum:
    """Σ x^n / n! по n = first, first + 2, ... начиная с члена start."""
    x_sq = x.mul(x, wp)
    term = start
    total = start
    n = first
    while True:
        term = term.mul(x_sq, wp).div((n + 1) * (n + 2), wp)
        n += 2
        if term.is_zero:
            break
        total = total.add(term)
    logger.debug("hyperbolic series converged after %d terms", n // 2)
    return total


# =============================================================================
# ПРЯМЫЕ ФУНКЦИИ
# =============================================================================


def sinh(x: NumberLike, context: Optional[MathContext] = None) -> BigNum:
    """Гиперболический синус."""
    ctx = resolve_context(context)
    x = BigNum.create(x)
    if x.is_zero:
        return BigNum.ZERO
    wp = ctx.working(factor=2)
    return BigNum.round(_series(x, 1, x, wp), ctx)


def cosh(x: NumberLike, context: Optional[MathContext] = None) -> BigNum:
    """Гиперболический косинус."""
    ctx = resolve_context(context)
    x = BigNum.create(x)
    if x.is_zero:
        return BigNum.ONE
    wp = ctx.working(factor=2)
    return BigNum.round(_series(BigNum.ONE, 0, x, wp), ctx)


def tanh(x: NumberLike, context: Optional[MathContext] = None) -> BigNum:
    """
    Гиперболический тангенс.

    Examples:
        >>> str(tanh(0))
        '0.0'
    """
    ctx = resolve_context(context)
    x = BigNum.create(x)
    if x.is_zero:
        return BigNum.ZERO
    if x.sign < 0:
        return tanh(x.neg(), ctx).neg()
    wp = ctx.working()
    return sinh(x, wp).div(cosh(x, wp), ctx)


# =============================================================================
# ОБРАТНЫЕ ФУНКЦИИ
# =============================================================================


def asinh(x: NumberLike, context: Optional[MathContext] = None) -> BigNum:
    """Обратный гиперболический синус."""
    ctx = resolve_context(context)
    x = BigNum.create(x)
    if x.is_zero:
        return BigNum.ZERO
    if x.sign < 0:
        return asinh(x.neg(), ctx).neg()
    wp = ctx.working(factor=2)
    root = sqrt(x.mul(x).add(BigNum.ONE), wp)
    return ln(x.add(root), ctx)


def acosh(x: NumberLike, context: Optional[MathContext] = None) -> BigNum:
    """
    Обратный гиперболический косинус.

    Raises:
        UndefinedValue: x < 1
    """
    ctx = resolve_context(context)
    x = BigNum.create(x)
    if x < BigNum.ONE:
        raise UndefinedValue("acosh", x)
    if x == BigNum.ONE:
        return BigNum.ZERO
    wp = ctx.working(factor=2)
    root = sqrt(x.mul(x).sub(BigNum.ONE), wp)
    return ln(x.add(root), ctx)


def atanh(x: NumberLike, context: Optional[MathContext] = None) -> BigNum:
    """
    Обратный гиперболический тангенс.

    Raises:
        UndefinedValue: |x| >= 1
    """
    ctx = resolve_context(context)
    x = BigNum.create(x)
    if x.abs() >= BigNum.ONE:
        raise UndefinedValue("atanh", x)
    if x.is_zero:
        return BigNum.ZERO
    if x.sign < 0:
        return atanh(x.neg(), ctx).neg()
    wp = ctx.working()
    ratio = BigNum.ONE.add(x).div(BigNum.ONE.sub(x), wp)
    return BigNum.round(ln(ratio, wp).div(BigNum.TWO, wp), ctx)
