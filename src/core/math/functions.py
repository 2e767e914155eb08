"""
Generic functions — свободные функции над Numerical

Каждая функция принимает:
- int / float: вычисляется стандартным модулем math (context игнорируется)
- любое значение, реализующее Numerical (BigNum, HyperNumber):
  вызывается одноимённый метод значения с переданным context

Ошибки области определения math (ValueError) переводятся в UndefinedValue.
"""

import math
from typing import Callable, Optional, Union

from src.core.errors import UndefinedValue
from src.core.math.context import MathContext
from src.core.math.numerical import Numerical


Value = Union[int, float, Numerical]


def _is_native(x: object) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _apply(
    name: str,
    native: Callable[[float], float],
    x: Value,
    context: Optional[MathContext],
) -> Value:
    if _is_native(x):
        try:
            return native(x)
        except ValueError as err:
            raise UndefinedValue(name, x) from err
    if not isinstance(x, Numerical):
        raise TypeError(f"Unsupported operand for {name}: {type(x).__name__}")
    return getattr(x, name)(context)


# =============================================================================
# ЭЛЕМЕНТАРНЫЕ
# =============================================================================


def neg(x: Value) -> Value:
    if _is_native(x):
        return -x
    return x.neg()


def abs(x: Value):
    """Модуль; для HyperNumber — вещественное |x|."""
    if _is_native(x):
        return math.fabs(x) if isinstance(x, float) else (x if x >= 0 else -x)
    return x.abs()


def sqrt(x: Value, context: Optional[MathContext] = None) -> Value:
    return _apply("sqrt", math.sqrt, x, context)


def exp(x: Value, context: Optional[MathContext] = None) -> Value:
    return _apply("exp", math.exp, x, context)


def ln(x: Value, context: Optional[MathContext] = None) -> Value:
    return _apply("ln", math.log, x, context)


def log(x: Value, context: Optional[MathContext] = None) -> Value:
    """Десятичный логарифм."""
    return _apply("log", math.log10, x, context)


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def sin(x: Value, context: Optional[MathContext] = None) -> Value:
    return _apply("sin", math.sin, x, context)


def cos(x: Value, context: Optional[MathContext] = None) -> Value:
    return _apply("cos", math.cos, x, context)


def tan(x: Value, context: Optional[MathContext] = None) -> Value:
    return _apply("tan", math.tan, x, context)


def asin(x: Value, context: Optional[MathContext] = None) -> Value:
    return _apply("asin", math.asin, x, context)


def acos(x: Value, context: Optional[MathContext] = None) -> Value:
    return _apply("acos", math.acos, x, context)


def atan(x: Value, context: Optional[MathContext] = None) -> Value:
    return _apply("atan", math.atan, x, context)


def sinh(x: Value, context: Optional[MathContext] = None) -> Value:
    return _apply("sinh", math.sinh, x, context)


def cosh(x: Value, context: Optional[MathContext] = None) -> Value:
    return _apply("cosh", math.cosh, x, context)


def tanh(x: Value, context: Optional[MathContext] = None) -> Value:
    return _apply("tanh", math.tanh, x, context)


def asinh(x: Value, context: Optional[MathContext] = None) -> Value:
    return _apply("asinh", math.asinh, x, context)


def acosh(x: Value, context: Optional[MathContext] = None) -> Value:
    return _apply("acosh", math.acosh, x, context)


def atanh(x: Value, context: Optional[MathContext] = None) -> Value:
    return _apply("atanh", math.atanh, x, context)
