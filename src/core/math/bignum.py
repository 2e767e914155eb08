"""
BigNum — десятичное число произвольной точности

Значение хранится как пара (unscaled, scale): value = unscaled * 10^(-scale).
Python int обеспечивает точную неограниченную арифметику под десятичным
значением, поэтому add/sub/mul/mod точны всегда, а div/sqrt округляются
ровно один раз до запрошенного MathContext.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каноническая форма: scale >= 0, нет лишних хвостовых нулей в дробной части
2. Знак хранится в unscaled; ноль всегда (0, 0)
3. Равенство — по значению, не по представлению
4. Immutable: каждая операция возвращает новый BigNum
5. UNNECESSARY: результат точен либо RoundingNecessary

Строковое представление всегда содержит дробную часть: "100.0", "-0.05".
"""

import math
from dataclasses import dataclass
from fractions import Fraction
from functools import total_ordering
from typing import Any, ClassVar, Dict, Optional, Union

from src.core.errors import (
    DivisionByZero,
    IndeterminateForm,
    NumberFormatError,
    RoundingNecessary,
    UndefinedValue,
)
from src.core.math.context import (
    GUARD_DIGITS,
    MathContext,
    RoundingMode,
    resolve_context,
)
from src.core.math.parsers import parse_num, parse_parts


NumberLike = Union["BigNum", int, float, str]


# =============================================================================
# ЯДРО ОКРУГЛЕНИЯ
# =============================================================================


def round_fraction(
    numerator: int, denominator: int, precision: int, mode: RoundingMode
) -> "BigNum":
    """
    Округление дроби numerator / denominator до precision цифр.

    numerator уже умножен на 10^precision, то есть результат равен
    round(numerator / denominator) * 10^(-precision).

    Args:
        numerator: Числитель (со знаком)
        denominator: Знаменатель (> 0)
        precision: Цифр после точки в результате
        mode: Режим округления

    Returns:
        Округлённый BigNum

    Raises:
        RoundingNecessary: mode == UNNECESSARY и деление неточно
    """
    negative = numerator < 0
    quotient, remainder = divmod(abs(numerator), denominator)

    if remainder:
        if mode is RoundingMode.UNNECESSARY:
            raise RoundingNecessary(
                f"Rounding is necessary to represent the value with {precision} digits."
            )
        # Сравнение отброшенной части с половиной: -1, 0, 1
        half = (2 * remainder > denominator) - (2 * remainder < denominator)

        if mode is RoundingMode.UP:
            quotient += 1
        elif mode is RoundingMode.CEIL:
            quotient += 0 if negative else 1
        elif mode is RoundingMode.FLOOR:
            quotient += 1 if negative else 0
        elif mode is RoundingMode.HALF_UP:
            quotient += 1 if half >= 0 else 0
        elif mode is RoundingMode.HALF_DOWN:
            quotient += 1 if half > 0 else 0
        elif mode is RoundingMode.HALF_EVEN:
            if half > 0 or (half == 0 and quotient % 2 == 1):
                quotient += 1

    return BigNum(-quotient if negative else quotient, precision)


def sqrt_fraction(
    numerator: int, denominator: int, precision: int, mode: RoundingMode
) -> "BigNum":
    """
    Корректно округлённый квадратный корень из numerator / denominator.

    Корень вычисляется math.isqrt на precision + 1 цифрах; остаток
    кодируется sticky-цифрой, поэтому финальное округление видит,
    была ли отброшенная часть точной половиной.

    Args:
        numerator: Числитель (>= 0)
        denominator: Знаменатель (> 0)
        precision: Цифр после точки в результате
        mode: Режим округления
    """
    scaled, remainder = divmod(numerator * 10 ** (2 * (precision + 1)), denominator)
    root = math.isqrt(scaled)
    sticky = 1 if (remainder or root * root != scaled) else 0
    return round_fraction(root * 10 + sticky, 100, precision, mode)


# =============================================================================
# BIGNUM
# =============================================================================


@total_ordering
@dataclass(frozen=True, eq=False, repr=False)
class BigNum:
    """
    Десятичное число произвольной точности.

    Examples:
        >>> BigNum.create("144").div(BigNum.create("-12"))
        BigNum('-12.0')
        >>> str(BigNum.create("4001e-2"))
        '40.01'
    """

    unscaled: int
    scale: int = 0

    ZERO: ClassVar["BigNum"]
    ONE: ClassVar["BigNum"]
    TWO: ClassVar["BigNum"]
    THREE: ClassVar["BigNum"]
    FOUR: ClassVar["BigNum"]
    FIVE: ClassVar["BigNum"]
    SIX: ClassVar["BigNum"]
    SEVEN: ClassVar["BigNum"]
    EIGHT: ClassVar["BigNum"]
    NINE: ClassVar["BigNum"]
    TEN: ClassVar["BigNum"]

    def __post_init__(self) -> None:
        """Приведение к канонической форме."""
        for name in ("unscaled", "scale"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"BigNum {name} must be int, got {type(value).__name__}")

        unscaled, scale = self.unscaled, self.scale
        if scale < 0:
            unscaled *= 10 ** (-scale)
            scale = 0
        if unscaled == 0:
            scale = 0
        while scale > 0 and unscaled % 10 == 0:
            unscaled //= 10
            scale -= 1

        object.__setattr__(self, "unscaled", unscaled)
        object.__setattr__(self, "scale", scale)

    # =========================================================================
    # СОЗДАНИЕ
    # =========================================================================

    @classmethod
    def create(cls, source: NumberLike, fraction: Optional[str] = None) -> "BigNum":
        """
        Создание BigNum из литерала или числа.

        Args:
            source: BigNum, int, float (конечный) или десятичная строка
                (возможно в научной нотации)
            fraction: Строка дробных цифр для двухкомпонентной формы
                ("40", "01" -> 40.01)

        Returns:
            BigNum

        Raises:
            NumberFormatError: Некорректный литерал или нечисловой float
            TypeError: Неподдерживаемый тип источника
        """
        if isinstance(source, BigNum) and fraction is None:
            return source
        if isinstance(source, bool):
            raise TypeError("Cannot create BigNum from bool.")
        if isinstance(source, int):
            if fraction is None:
                return cls(source)
            return cls(*parse_parts(str(source), fraction))
        if isinstance(source, float) and fraction is None:
            if not math.isfinite(source):
                raise NumberFormatError(f"Cannot create BigNum from {source}.")
            return cls(*parse_num(repr(source)))
        if isinstance(source, str):
            return cls(*parse_parts(source, fraction))
        raise TypeError(f"Cannot create BigNum from {type(source).__name__}.")

    @classmethod
    def pi(cls, context: Optional[MathContext] = None) -> "BigNum":
        """π, округлённое к context."""
        # Import here to avoid circular dependency
        from src.core.math.constants import pi

        return pi(context)

    @classmethod
    def e(cls, context: Optional[MathContext] = None) -> "BigNum":
        """Число Эйлера, округлённое к context."""
        # Import here to avoid circular dependency
        from src.core.math.constants import e

        return e(context)

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def integer(self) -> str:
        """Целая часть канонической строки (со знаком)."""
        return str(self).split(".")[0]

    @property
    def decimal(self) -> str:
        """Дробная часть канонической строки."""
        return str(self).split(".")[1]

    @property
    def sign(self) -> int:
        return (self.unscaled > 0) - (self.unscaled < 0)

    @property
    def precision(self) -> int:
        """Количество значащих цифр после точки."""
        return self.scale

    @property
    def is_zero(self) -> bool:
        return self.unscaled == 0

    # =========================================================================
    # ОКРУГЛЕНИЕ
    # =========================================================================

    @staticmethod
    def round(x: "BigNum", context: Optional[MathContext] = None) -> "BigNum":
        """
        Округление x до точности контекста.

        Отбрасываемые цифры unscaled обрабатываются выбранным режимом
        округления. Если x уже помещается в precision цифр, он
        возвращается без изменений (UNNECESSARY в этом случае успешен).

        Args:
            x: Число
            context: Контекст (DEFAULT_CONTEXT если None)

        Returns:
            Округлённый BigNum

        Raises:
            RoundingNecessary: UNNECESSARY и x неточен на этой точности
        """
        ctx = resolve_context(context)
        x = BigNum.create(x)
        if x.scale <= ctx.precision:
            return x
        diff = x.scale - ctx.precision
        return round_fraction(x.unscaled, 10**diff, ctx.precision, ctx.rounding)

    def _finish(self, context: Optional[MathContext]) -> "BigNum":
        return self if context is None else BigNum.round(self, context)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def _aligned(self, that: "BigNum"):
        scale = max(self.scale, that.scale)
        return (
            self.unscaled * 10 ** (scale - self.scale),
            that.unscaled * 10 ** (scale - that.scale),
            scale,
        )

    def add(self, that: NumberLike, context: Optional[MathContext] = None) -> "BigNum":
        """Сумма (точная; округляется только если передан context)."""
        a, b, scale = self._aligned(BigNum.create(that))
        return BigNum(a + b, scale)._finish(context)

    def sub(self, that: NumberLike, context: Optional[MathContext] = None) -> "BigNum":
        """Разность (точная; округляется только если передан context)."""
        a, b, scale = self._aligned(BigNum.create(that))
        return BigNum(a - b, scale)._finish(context)

    def mul(self, that: NumberLike, context: Optional[MathContext] = None) -> "BigNum":
        """Произведение (точное; округляется только если передан context)."""
        that = BigNum.create(that)
        return BigNum(self.unscaled * that.unscaled, self.scale + that.scale)._finish(
            context
        )

    def div(self, that: NumberLike, context: Optional[MathContext] = None) -> "BigNum":
        """
        Частное, округлённое ровно один раз до context.

        Args:
            that: Делитель
            context: Контекст (DEFAULT_CONTEXT если None)

        Raises:
            DivisionByZero: Делитель равен нулю
            IndeterminateForm: Делимое и делитель равны нулю
        """
        that = BigNum.create(that)
        if that.is_zero:
            if self.is_zero:
                raise IndeterminateForm("Cannot determine 0/0.")
            raise DivisionByZero("Cannot divide by zero.")

        ctx = resolve_context(context)
        numerator = self.unscaled * 10 ** (that.scale + ctx.precision)
        denominator = that.unscaled * 10**self.scale
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        return round_fraction(numerator, denominator, ctx.precision, ctx.rounding)

    def mod(self, that: NumberLike, context: Optional[MathContext] = None) -> "BigNum":
        """
        Остаток от деления.

        Результат имеет знак делителя: для положительного делителя
        он лежит в [0, that).

        Raises:
            DivisionByZero: Делитель равен нулю
            IndeterminateForm: 0 mod 0
        """
        that = BigNum.create(that)
        if that.is_zero:
            if self.is_zero:
                raise IndeterminateForm("Cannot determine 0 mod 0.")
            raise DivisionByZero("Cannot divide by zero.")
        a, b, scale = self._aligned(that)
        return BigNum(a % b, scale)._finish(context)

    def pow(self, that: NumberLike, context: Optional[MathContext] = None) -> "BigNum":
        """
        Возведение в степень.

        - Целый показатель: точный результат (округляется, если передан context)
        - Отрицательный целый показатель: 1 / x^|n| с округлением до context
        - Полуцелый показатель: корректно округлённый корень из x^(2n)
        - Прочие показатели: exp(y * ln x), только при x > 0

        Raises:
            IndeterminateForm: 0 ** 0
            DivisionByZero: 0 ** отрицательное
            UndefinedValue: Нецелый показатель при отрицательном основании
        """
        exponent = BigNum.create(that)

        if self.is_zero:
            if exponent.is_zero:
                raise IndeterminateForm("Cannot determine 0^0.")
            if exponent.sign < 0:
                raise DivisionByZero("Cannot divide by zero.")
            return BigNum.ZERO

        if exponent.scale == 0:
            n = exponent.unscaled
            if n >= 0:
                return BigNum(self.unscaled**n, self.scale * n)._finish(context)
            return BigNum.ONE.div(BigNum(self.unscaled**-n, self.scale * -n), context)

        ctx = resolve_context(context)
        doubled = exponent.mul(BigNum.TWO)
        if doubled.scale == 0:
            if self.sign < 0:
                raise UndefinedValue("pow", self)
            k = doubled.unscaled
            if k > 0:
                numerator, denominator = self.unscaled**k, 10 ** (self.scale * k)
            else:
                numerator, denominator = 10 ** (self.scale * -k), self.unscaled**-k
            return sqrt_fraction(numerator, denominator, ctx.precision, ctx.rounding)

        if self.sign < 0:
            raise UndefinedValue("pow", self)

        # Import here to avoid circular dependency
        from src.core.math.exponential import exp, ln

        magnitude = abs(float(exponent)) * abs(
            math.log10(self.unscaled) - self.scale
        )
        wp = ctx.working(extra=2 * GUARD_DIGITS + int(magnitude))
        return BigNum.round(exp(ln(self, wp).mul(exponent, wp), wp), ctx)

    def neg(self) -> "BigNum":
        return BigNum(-self.unscaled, self.scale)

    def abs(self) -> "BigNum":
        return BigNum(abs(self.unscaled), self.scale)

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare_to(self, that: NumberLike) -> int:
        """Сравнение: -1 если self < that, 0 если равны, 1 если больше."""
        a, b, _ = self._aligned(BigNum.create(that))
        return (a > b) - (a < b)

    def equals(self, that: NumberLike, context: Optional[MathContext] = None) -> bool:
        """
        Приближённое равенство.

        Оба значения округляются к context (по умолчанию DEFAULT_CONTEXT)
        и сравниваются точно.
        """
        ctx = resolve_context(context)
        return BigNum.round(self, ctx).compare_to(BigNum.round(BigNum.create(that), ctx)) == 0

    # =========================================================================
    # ТРАНСЦЕНДЕНТНЫЕ ФУНКЦИИ
    # =========================================================================

    def sqrt(self, context: Optional[MathContext] = None) -> "BigNum":
        # Import here to avoid circular dependency
        from src.core.math.exponential import sqrt

        return sqrt(self, context)

    def exp(self, context: Optional[MathContext] = None) -> "BigNum":
        from src.core.math.exponential import exp

        return exp(self, context)

    def ln(self, context: Optional[MathContext] = None) -> "BigNum":
        from src.core.math.exponential import ln

        return ln(self, context)

    def log(self, context: Optional[MathContext] = None) -> "BigNum":
        from src.core.math.exponential import log

        return log(self, context)

    def sin(self, context: Optional[MathContext] = None) -> "BigNum":
        from src.core.math.trigonometry.circular import sin

        return sin(self, context)

    def cos(self, context: Optional[MathContext] = None) -> "BigNum":
        from src.core.math.trigonometry.circular import cos

        return cos(self, context)

    def tan(self, context: Optional[MathContext] = None) -> "BigNum":
        from src.core.math.trigonometry.circular import tan

        return tan(self, context)

    def asin(self, context: Optional[MathContext] = None) -> "BigNum":
        from src.core.math.trigonometry.circular import asin

        return asin(self, context)

    def acos(self, context: Optional[MathContext] = None) -> "BigNum":
        from src.core.math.trigonometry.circular import acos

        return acos(self, context)

    def atan(self, context: Optional[MathContext] = None) -> "BigNum":
        from src.core.math.trigonometry.circular import atan

        return atan(self, context)

    def sinh(self, context: Optional[MathContext] = None) -> "BigNum":
        from src.core.math.trigonometry.hyperbolic import sinh

        return sinh(self, context)

    def cosh(self, context: Optional[MathContext] = None) -> "BigNum":
        from src.core.math.trigonometry.hyperbolic import cosh

        return cosh(self, context)

    def tanh(self, context: Optional[MathContext] = None) -> "BigNum":
        from src.core.math.trigonometry.hyperbolic import tanh

        return tanh(self, context)

    def asinh(self, context: Optional[MathContext] = None) -> "BigNum":
        from src.core.math.trigonometry.hyperbolic import asinh

        return asinh(self, context)

    def acosh(self, context: Optional[MathContext] = None) -> "BigNum":
        from src.core.math.trigonometry.hyperbolic import acosh

        return acosh(self, context)

    def atanh(self, context: Optional[MathContext] = None) -> "BigNum":
        from src.core.math.trigonometry.hyperbolic import atanh

        return atanh(self, context)

    # =========================================================================
    # СЕРИАЛИЗАЦИЯ
    # =========================================================================

    def to_token(self) -> Dict[str, Any]:
        """Константный токен для слоя выражений."""
        return {"type": "constant", "kind": "real", "value": str(self)}

    @classmethod
    def from_token(cls, token: Dict[str, Any]) -> "BigNum":
        """
        Создание из константного токена.

        Raises:
            jsonschema.ValidationError: Токен не соответствует контракту
        """
        # Import here to avoid circular dependency
        from src.core.contracts.validators import validate_real_number

        validate_real_number(token)
        return cls.create(token["value"])

    # =========================================================================
    # ПРОТОКОЛЫ PYTHON
    # =========================================================================

    def __str__(self) -> str:
        sign = "-" if self.unscaled < 0 else ""
        digits = str(abs(self.unscaled))
        if self.scale == 0:
            return f"{sign}{digits}.0"
        digits = digits.rjust(self.scale + 1, "0")
        return f"{sign}{digits[:-self.scale]}.{digits[-self.scale:]}"

    def __repr__(self) -> str:
        return f"BigNum('{self}')"

    def __hash__(self) -> int:
        # Совпадает с hash(int) и hash(float) для равных значений
        return hash(Fraction(self.unscaled, 10**self.scale))

    def __eq__(self, other: object) -> bool:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self.compare_to(that) == 0

    def __lt__(self, other: object) -> bool:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self.compare_to(that) < 0

    def __bool__(self) -> bool:
        return not self.is_zero

    def __float__(self) -> float:
        return float(str(self))

    def __int__(self) -> int:
        # Усечение к нулю
        magnitude = abs(self.unscaled) // 10**self.scale
        return -magnitude if self.unscaled < 0 else magnitude

    def __round__(self, ndigits: Optional[int] = None):
        if ndigits is None:
            return int(BigNum.round(self, MathContext(precision=0)))
        return BigNum.round(self, MathContext(precision=ndigits))

    def __neg__(self) -> "BigNum":
        return self.neg()

    def __pos__(self) -> "BigNum":
        return self

    def __abs__(self) -> "BigNum":
        return self.abs()

    def __add__(self, other: Any) -> "BigNum":
        that = _coerce(other)
        return NotImplemented if that is None else self.add(that)

    def __radd__(self, other: Any) -> "BigNum":
        that = _coerce(other)
        return NotImplemented if that is None else that.add(self)

    def __sub__(self, other: Any) -> "BigNum":
        that = _coerce(other)
        return NotImplemented if that is None else self.sub(that)

    def __rsub__(self, other: Any) -> "BigNum":
        that = _coerce(other)
        return NotImplemented if that is None else that.sub(self)

    def __mul__(self, other: Any) -> "BigNum":
        that = _coerce(other)
        return NotImplemented if that is None else self.mul(that)

    def __rmul__(self, other: Any) -> "BigNum":
        that = _coerce(other)
        return NotImplemented if that is None else that.mul(self)

    def __truediv__(self, other: Any) -> "BigNum":
        that = _coerce(other)
        return NotImplemented if that is None else self.div(that)

    def __rtruediv__(self, other: Any) -> "BigNum":
        that = _coerce(other)
        return NotImplemented if that is None else that.div(self)

    def __mod__(self, other: Any) -> "BigNum":
        that = _coerce(other)
        return NotImplemented if that is None else self.mod(that)

    def __rmod__(self, other: Any) -> "BigNum":
        that = _coerce(other)
        return NotImplemented if that is None else that.mod(self)

    def __pow__(self, other: Any) -> "BigNum":
        that = _coerce(other)
        return NotImplemented if that is None else self.pow(that)

    def __rpow__(self, other: Any) -> "BigNum":
        that = _coerce(other)
        return NotImplemented if that is None else that.pow(self)


def _coerce(value: Any) -> Optional[BigNum]:
    """Приведение операнда оператора; None для чужих типов."""
    if isinstance(value, BigNum):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int) or (isinstance(value, float) and math.isfinite(value)):
        return BigNum.create(value)
    return None


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

BigNum.ZERO = BigNum(0)
BigNum.ONE = BigNum(1)
BigNum.TWO = BigNum(2)
BigNum.THREE = BigNum(3)
BigNum.FOUR = BigNum(4)
BigNum.FIVE = BigNum(5)
BigNum.SIX = BigNum(6)
BigNum.SEVEN = BigNum(7)
BigNum.EIGHT = BigNum(8)
BigNum.NINE = BigNum(9)
BigNum.TEN = BigNum(10)
