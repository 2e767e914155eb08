"""
Generalized transcendentals — обобщённое полярное разложение

x = re + r·u, где re — компонента 0, r = |im| — модуль мнимого вектора,
u = im / r — обобщённая мнимая единица (u² = −1 в любой размерности).

Подалгебра {1, u} изоморфна комплексным числам, поэтому любая
аналитическая функция f вычисляется на паре (re, r):
    f(re + i·r) = A + i·B  =>  f(x) = A + B·u

Частный случай — обобщённая формула Эйлера:
    exp(re + r·u) = e^re·(cos r + u·sin r)

Чисто вещественный аргумент (r = 0):
- внутри вещественной области: скалярная функция BigNum, dim сохраняется
- вне области: предел из верхней полуплоскости вдоль e1, dim >= 2
  (ln x при x < 0 = ln|x| + π·e1, asin 2 = π/2 + acosh 2·e1, ...)
- особые точки (ln 0, atanh ±1) — UndefinedValue
"""

import math
from typing import Callable, Optional

from src.core.logging_config import get_logger
from src.core.math import exponential
from src.core.math.bignum import BigNum
from src.core.math.constants import pi
from src.core.math.context import GUARD_DIGITS, MathContext, resolve_context
from src.core.math.trigonometry import circular, hyperbolic
from src.hypercomplex import plane
from src.hypercomplex.hyper_number import HyperLike, HyperNumber


logger = get_logger(__name__)

RealFunction = Callable[[BigNum, MathContext], BigNum]
PlaneFunction = Callable[[plane.Pair, MathContext], plane.Pair]
BranchFunction = Callable[[BigNum, MathContext], Optional[plane.Pair]]


# =============================================================================
# ПОДЪЁМ НА ГИПЕРКОМПЛЕКСНЫЕ ЧИСЛА
# =============================================================================


def _lift(
    name: str,
    x: HyperLike,
    context: Optional[MathContext],
    real_fn: RealFunction,
    plane_fn: PlaneFunction,
    branch_fn: Optional[BranchFunction] = None,
    grows: bool = False,
) -> HyperNumber:
    """
    Вычисление функции через комплексную подалгебру {1, u}.

    Args:
        name: Имя функции (для логов)
        x: Аргумент
        context: Контекст результата
        real_fn: Скалярная функция для вещественного аргумента
        plane_fn: Комплексное ядро на паре (re, r)
        branch_fn: Значение вне вещественной области (None — внутри)
        grows: Результат растёт как e^(|re|+r): рабочая точность
            увеличивается на число его целых цифр
    """
    ctx = resolve_context(context)
    x = HyperNumber.create(x)
    wp = ctx.working(factor=2)
    re = x.components[0]

    if x.is_real:
        branch = branch_fn(re, wp) if branch_fn is not None else None
        if branch is None:
            value = real_fn(re, ctx)
            return HyperNumber((value,) + (BigNum.ZERO,) * (x.dim - 1))
        logger.debug("%s(%s) outside the real domain, continued along e1", name, re)
        dim = max(x.dim, 2)
        return HyperNumber.round(
            HyperNumber(branch + (BigNum.ZERO,) * (dim - 2)), ctx
        )

    imaginary = x.components[1:]
    norm_sq = BigNum.ZERO
    for c in imaginary:
        norm_sq = norm_sq.add(c.mul(c))
    if grows:
        magnitude = int(re.abs()) + math.isqrt(int(norm_sq)) + 1
        digits = magnitude * exponential.LOG10_E_E4 // 10000 + 1
        wp = ctx.working(extra=GUARD_DIGITS + digits, factor=2)
        logger.debug("%s: working precision raised by %d digits", name, digits)
    r = exponential.sqrt(norm_sq, wp)
    logger.debug("%s: polar decomposition re=%s, |im|=%s, dim=%d", name, re, r, x.dim)

    a, b = plane_fn((re, r), wp)
    factor = b.div(r, wp)
    components = (a,) + tuple(factor.mul(c, wp) for c in imaginary)
    return HyperNumber.round(HyperNumber(components), ctx)


# =============================================================================
# ВЕТВИ ВНЕ ВЕЩЕСТВЕННОЙ ОБЛАСТИ
# =============================================================================


def _ln_branch(x: BigNum, wp: MathContext) -> Optional[plane.Pair]:
    if x.sign < 0:
        return exponential.ln(x.neg(), wp), pi(wp)
    return None


def _sqrt_branch(x: BigNum, wp: MathContext) -> Optional[plane.Pair]:
    if x.sign < 0:
        return BigNum.ZERO, exponential.sqrt(x.neg(), wp)
    return None


def _asin_branch(x: BigNum, wp: MathContext) -> Optional[plane.Pair]:
    if x.abs() <= BigNum.ONE:
        return None
    re = plane.half_pi(wp)
    return (re if x.sign > 0 else re.neg()), hyperbolic.acosh(x.abs(), wp)


def _acos_branch(x: BigNum, wp: MathContext) -> Optional[plane.Pair]:
    if x.abs() <= BigNum.ONE:
        return None
    re = BigNum.ZERO if x.sign > 0 else pi(wp)
    return re, hyperbolic.acosh(x.abs(), wp).neg()


def _acosh_branch(x: BigNum, wp: MathContext) -> Optional[plane.Pair]:
    if x >= BigNum.ONE:
        return None
    if x >= BigNum.ONE.neg():
        return BigNum.ZERO, circular.acos(x, wp)
    return hyperbolic.acosh(x.neg(), wp), pi(wp)


def _atanh_branch(x: BigNum, wp: MathContext) -> Optional[plane.Pair]:
    # |x| = 1 остаётся особой точкой скалярной функции
    if x.abs() <= BigNum.ONE:
        return None
    return hyperbolic.atanh(BigNum.ONE.div(x, wp), wp), plane.half_pi(wp)


# =============================================================================
# ПУБЛИЧНЫЕ ФУНКЦИИ
# =============================================================================


def exp(x: HyperLike, context: Optional[MathContext] = None) -> HyperNumber:
    return _lift("exp", x, context, exponential.exp, plane.c_exp, grows=True)


def ln(x: HyperLike, context: Optional[MathContext] = None) -> HyperNumber:
    """
    Натуральный логарифм.

    Raises:
        UndefinedValue: x = 0
    """
    return _lift("ln", x, context, exponential.ln, plane.c_ln, _ln_branch)


def log(x: HyperLike, context: Optional[MathContext] = None) -> HyperNumber:
    """Десятичный логарифм ln(x) / ln(10)."""
    ctx = resolve_context(context)
    wp = ctx.working(factor=2)
    value = ln(x, wp)
    return value.scale(BigNum.ONE.div(exponential.ln(BigNum.TEN, wp), wp), ctx)


def sqrt(x: HyperLike, context: Optional[MathContext] = None) -> HyperNumber:
    return _lift("sqrt", x, context, exponential.sqrt, plane.c_sqrt, _sqrt_branch)


def sin(x: HyperLike, context: Optional[MathContext] = None) -> HyperNumber:
    return _lift("sin", x, context, circular.sin, plane.c_sin, grows=True)


def cos(x: HyperLike, context: Optional[MathContext] = None) -> HyperNumber:
    return _lift("cos", x, context, circular.cos, plane.c_cos, grows=True)


def tan(x: HyperLike, context: Optional[MathContext] = None) -> HyperNumber:
    return _lift("tan", x, context, circular.tan, plane.c_tan)


def asin(x: HyperLike, context: Optional[MathContext] = None) -> HyperNumber:
    return _lift("asin", x, context, circular.asin, plane.c_asin, _asin_branch)


def acos(x: HyperLike, context: Optional[MathContext] = None) -> HyperNumber:
    return _lift("acos", x, context, circular.acos, plane.c_acos, _acos_branch)


def atan(x: HyperLike, context: Optional[MathContext] = None) -> HyperNumber:
    """
    Арктангенс.

    Raises:
        UndefinedValue: x = ±u (полюса при r = 1, re = 0)
    """
    return _lift("atan", x, context, circular.atan, plane.c_atan)


def sinh(x: HyperLike, context: Optional[MathContext] = None) -> HyperNumber:
    return _lift("sinh", x, context, hyperbolic.sinh, plane.c_sinh, grows=True)


def cosh(x: HyperLike, context: Optional[MathContext] = None) -> HyperNumber:
    return _lift("cosh", x, context, hyperbolic.cosh, plane.c_cosh, grows=True)


def tanh(x: HyperLike, context: Optional[MathContext] = None) -> HyperNumber:
    return _lift("tanh", x, context, hyperbolic.tanh, plane.c_tanh)


def asinh(x: HyperLike, context: Optional[MathContext] = None) -> HyperNumber:
    return _lift("asinh", x, context, hyperbolic.asinh, plane.c_asinh)


def acosh(x: HyperLike, context: Optional[MathContext] = None) -> HyperNumber:
    return _lift("acosh", x, context, hyperbolic.acosh, plane.c_acosh, _acosh_branch)


def atanh(x: HyperLike, context: Optional[MathContext] = None) -> HyperNumber:
    """
    Обратный гиперболический тангенс.

    Raises:
        UndefinedValue: x = ±1
    """
    return _lift("atanh", x, context, hyperbolic.atanh, plane.c_atanh, _atanh_branch)
