"""
Numerical Protocol — общий интерфейс числовых типов.

BigNum и HyperNumber реализуют один и тот же набор методов, поэтому
обобщённые функции (src.core.math.functions) работают с любым из них
без проверки конкретного типа.
"""

from typing import Optional, Protocol, TypeVar, runtime_checkable

from src.core.math.context import MathContext


N = TypeVar("N", bound="Numerical")


@runtime_checkable
class Numerical(Protocol):
    """
    Протокол числового значения.

    Арифметика принимает значение того же вида; функции, способные
    потерять точность, принимают необязательный MathContext.
    """

    def add(self: N, that: N, context: Optional[MathContext] = None) -> N:
        ...

    def sub(self: N, that: N, context: Optional[MathContext] = None) -> N:
        ...

    def mul(self: N, that: N, context: Optional[MathContext] = None) -> N:
        ...

    def div(self: N, that: N, context: Optional[MathContext] = None) -> N:
        ...

    def neg(self: N) -> N:
        ...

    def abs(self) -> "Numerical":
        """Модуль (для HyperNumber — вещественная норма)."""
        ...

    def equals(self, that: "Numerical", context: Optional[MathContext] = None) -> bool:
        ...

    def sqrt(self: N, context: Optional[MathContext] = None) -> N:
        ...

    def exp(self: N, context: Optional[MathContext] = None) -> N:
        ...

    def ln(self: N, context: Optional[MathContext] = None) -> N:
        ...

    def log(self: N, context: Optional[MathContext] = None) -> N:
        ...

    def sin(self: N, context: Optional[MathContext] = None) -> N:
        ...

    def cos(self: N, context: Optional[MathContext] = None) -> N:
        ...

    def tan(self: N, context: Optional[MathContext] = None) -> N:
        ...

    def asin(self: N, context: Optional[MathContext] = None) -> N:
        ...

    def acos(self: N, context: Optional[MathContext] = None) -> N:
        ...

    def atan(self: N, context: Optional[MathContext] = None) -> N:
        ...

    def sinh(self: N, context: Optional[MathContext] = None) -> N:
        ...

    def cosh(self: N, context: Optional[MathContext] = None) -> N:
        ...

    def tanh(self: N, context: Optional[MathContext] = None) -> N:
        ...

    def asinh(self: N, context: Optional[MathContext] = None) -> N:
        ...

    def acosh(self: N, context: Optional[MathContext] = None) -> N:
        ...

    def atanh(self: N, context: Optional[MathContext] = None) -> N:
        ...
