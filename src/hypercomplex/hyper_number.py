"""
HyperNumber — гиперкомплексное число конструкции Кэли–Диксона

Упорядоченный кортеж BigNum длины 2^n:
- dim = 1: вещественное
- dim = 2: комплексное
- dim = 4: кватернионы
- dim = 8: октонионы, и далее

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. dim — наименьшая степень двойки, вмещающая компоненты (дополнение нулями,
   никогда не усечение)
2. Компонента 0 — вещественная часть, 1..dim-1 — мнимые
3. Immutable: каждая операция возвращает новый HyperNumber
4. Умножение коммутативно и ассоциативно только при dim <= 2; при dim >= 8
   теряется и ассоциативность — деление требует указания стороны
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from src.core.errors import DivisionByZero, InvalidIndex
from src.core.math.bignum import BigNum, NumberLike
from src.core.math.context import MathContext, resolve_context


Components = Tuple[BigNum, ...]
HyperLike = Union["HyperNumber", BigNum, int, float, str]


# =============================================================================
# КОНСТРУКЦИЯ КЭЛИ–ДИКСОНА
# =============================================================================


def _padded_length(length: int) -> int:
    """Наименьшая степень двойки >= length (не меньше 1)."""
    size = 1
    while size < length:
        size *= 2
    return size


def _pad(values: Sequence[BigNum], length: int) -> Components:
    return tuple(values) + (BigNum.ZERO,) * (length - len(values))


def _conj(a: Components) -> Components:
    return (a[0],) + tuple(c.neg() for c in a[1:])


def _add(a: Components, b: Components) -> Components:
    return tuple(x.add(y) for x, y in zip(a, b))


def _sub(a: Components, b: Components) -> Components:
    return tuple(x.sub(y) for x, y in zip(a, b))


def _cd_mul(a: Components, b: Components) -> Components:
    """
    Рекурсивное произведение Кэли–Диксона (точное).

    a = (a1, a2), b = (b1, b2):
        a·b = (a1·b1 − conj(b2)·a2, b2·a1 + a2·conj(b1))

    База рекурсии — длина 1, обычное произведение BigNum.
    """
    if len(a) == 1:
        return (a[0].mul(b[0]),)
    half = len(a) // 2
    a1, a2 = a[:half], a[half:]
    b1, b2 = b[:half], b[half:]
    return _sub(_cd_mul(a1, b1), _cd_mul(_conj(b2), a2)) + _add(
        _cd_mul(b2, a1), _cd_mul(a2, _conj(b1))
    )


# =============================================================================
# HYPERNUMBER
# =============================================================================


@dataclass(frozen=True, eq=False, repr=False)
class HyperNumber:
    """
    Элемент алгебры Кэли–Диксона размерности dim = 2^n.

    Examples:
        >>> z = HyperNumber.complex("3", "4")
        >>> z.inv()
        HyperNumber('0.12', '-0.16')
        >>> z.norm()
        BigNum('25.0')
    """

    components: Components

    def __post_init__(self) -> None:
        values = [BigNum.create(c) for c in self.components]
        if not values:
            values = [BigNum.ZERO]
        object.__setattr__(self, "components", _pad(values, _padded_length(len(values))))

    # =========================================================================
    # СОЗДАНИЕ
    # =========================================================================

    @classmethod
    def real(cls, x: NumberLike) -> "HyperNumber":
        return cls((BigNum.create(x),))

    @classmethod
    def complex(cls, re: NumberLike, im: NumberLike) -> "HyperNumber":
        return cls((BigNum.create(re), BigNum.create(im)))

    @classmethod
    def hyper(cls, *values: Union[NumberLike, Iterable[NumberLike]]) -> "HyperNumber":
        """
        Создание из произвольного числа компонент.

        Принимает как hyper(1, 2, 3), так и hyper([1, 2, 3]).
        """
        if len(values) == 1 and not isinstance(values[0], (BigNum, int, float, str)):
            values = tuple(values[0])
        return cls(tuple(BigNum.create(v) for v in values))

    @classmethod
    def create(cls, value: HyperLike) -> "HyperNumber":
        """HyperNumber без изменений либо вещественное число dim = 1."""
        if isinstance(value, HyperNumber):
            return value
        return cls.real(value)

    @classmethod
    def unit(cls, index: int, dim: int) -> "HyperNumber":
        """
        Базисный элемент e_index размерности dim.

        Raises:
            InvalidIndex: index вне [0, dim)
        """
        size = _padded_length(dim)
        if not 0 <= index < size:
            raise InvalidIndex(index)
        values = [BigNum.ZERO] * size
        values[index] = BigNum.ONE
        return cls(tuple(values))

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def dim(self) -> int:
        return len(self.components)

    @property
    def real_part(self) -> BigNum:
        return self.components[0]

    @property
    def imaginary(self) -> Components:
        return self.components[1:]

    @property
    def is_real(self) -> bool:
        """Все мнимые компоненты равны нулю."""
        return all(c.is_zero for c in self.components[1:])

    @property
    def is_zero(self) -> bool:
        return all(c.is_zero for c in self.components)

    def _extended(self, that: "HyperNumber") -> Tuple[Components, Components]:
        size = max(self.dim, that.dim)
        return _pad(self.components, size), _pad(that.components, size)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, that: HyperLike, context: Optional[MathContext] = None) -> "HyperNumber":
        """Покомпонентная сумма с дополнением нулями."""
        a, b = self._extended(HyperNumber.create(that))
        return HyperNumber(_add(a, b))._finish(context)

    def sub(self, that: HyperLike, context: Optional[MathContext] = None) -> "HyperNumber":
        """Покомпонентная разность с дополнением нулями."""
        a, b = self._extended(HyperNumber.create(that))
        return HyperNumber(_sub(a, b))._finish(context)

    def mul(self, that: HyperLike, context: Optional[MathContext] = None) -> "HyperNumber":
        """Произведение Кэли–Диксона self·that (порядок важен при dim > 2)."""
        a, b = self._extended(HyperNumber.create(that))
        return HyperNumber(_cd_mul(a, b))._finish(context)

    def scale(self, factor: NumberLike, context: Optional[MathContext] = None) -> "HyperNumber":
        """Умножение каждой компоненты на вещественный factor."""
        factor = BigNum.create(factor)
        return HyperNumber(tuple(c.mul(factor) for c in self.components))._finish(context)

    def neg(self) -> "HyperNumber":
        return HyperNumber(tuple(c.neg() for c in self.components))

    def conj(self) -> "HyperNumber":
        """Сопряжение: мнимые компоненты меняют знак."""
        return HyperNumber(_conj(self.components))

    def norm(self) -> BigNum:
        """
        Норма self·conj(self), взятая как вещественная компонента.

        Равна сумме квадратов всех компонент; вычисляется точно.
        """
        return _cd_mul(self.components, _conj(self.components))[0]

    def abs_sq(self) -> BigNum:
        return self.norm()

    def abs(self, context: Optional[MathContext] = None) -> BigNum:
        """Модуль √norm, округлённый к context."""
        return self.norm().sqrt(context)

    def inv(self, context: Optional[MathContext] = None) -> "HyperNumber":
        """
        Обратное conj(self) / norm.

        Raises:
            DivisionByZero: norm равна нулю
        """
        norm = self.norm()
        if norm.is_zero:
            raise DivisionByZero("Cannot invert zero.")
        ctx = resolve_context(context)
        return HyperNumber(tuple(c.div(norm, ctx) for c in _conj(self.components)))

    def div(
        self,
        that: HyperLike,
        context: Optional[MathContext] = None,
        side: str = "right",
    ) -> "HyperNumber":
        """
        Деление с указанием стороны.

        - "right": self · that⁻¹
        - "left":  that⁻¹ · self

        that⁻¹ = conj(that) / norm, а norm вещественна, поэтому
        произведение с conj(that) вычисляется точно и каждая компонента
        делится на norm один раз с округлением к context.

        Raises:
            DivisionByZero: Делитель равен нулю
            ValueError: Неизвестная сторона
        """
        if side not in ("left", "right"):
            raise ValueError(f"Division side must be 'left' or 'right', got {side!r}")
        ctx = resolve_context(context)
        divisor = HyperNumber.create(that)
        norm = divisor.norm()
        if norm.is_zero:
            raise DivisionByZero("Cannot divide by zero.")
        a, b = self._extended(divisor)
        product = _cd_mul(a, _conj(b)) if side == "right" else _cd_mul(_conj(b), a)
        return HyperNumber(tuple(c.div(norm, ctx) for c in product))

    def pow(self, n: int, context: Optional[MathContext] = None) -> "HyperNumber":
        """
        Целая степень бинарным возведением.

        Степени одного элемента ассоциативны в любой размерности
        (алгебры Кэли–Диксона степенно-ассоциативны). Положительная
        степень точна, если context не передан. Отрицательная степень:
        точная self^|n|, затем одно деление 1 / self^|n| к context.

        Raises:
            TypeError: n не int
            DivisionByZero: Отрицательная степень нуля
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"HyperNumber power must be int, got {type(n).__name__}")
        if n < 0:
            return HyperNumber.real(BigNum.ONE).div(self.pow(-n), context)
        result = HyperNumber.real(BigNum.ONE)
        base = self
        while n:
            if n & 1:
                result = result.mul(base)
            n >>= 1
            if n:
                base = base.mul(base)
        return result._finish(context)

    # =========================================================================
    # ОКРУГЛЕНИЕ И СРАВНЕНИЕ
    # =========================================================================

    @staticmethod
    def round(x: "HyperNumber", context: Optional[MathContext] = None) -> "HyperNumber":
        """Округление каждой компоненты к context."""
        ctx = resolve_context(context)
        return HyperNumber(tuple(BigNum.round(c, ctx) for c in x.components))

    def _finish(self, context: Optional[MathContext]) -> "HyperNumber":
        return self if context is None else HyperNumber.round(self, context)

    def equals(self, that: HyperLike, context: Optional[MathContext] = None) -> bool:
        """Покомпонентное приближённое равенство (округление к context)."""
        a, b = self._extended(HyperNumber.create(that))
        return all(x.equals(y, context) for x, y in zip(a, b))

    # =========================================================================
    # ТРАНСЦЕНДЕНТНЫЕ ФУНКЦИИ
    # =========================================================================

    def _apply(self, name: str, context: Optional[MathContext]) -> "HyperNumber":
        # Import here to avoid circular dependency
        from src.hypercomplex import transcendental

        return getattr(transcendental, name)(self, context)

    def sqrt(self, context: Optional[MathContext] = None) -> "HyperNumber":
        return self._apply("sqrt", context)

    def exp(self, context: Optional[MathContext] = None) -> "HyperNumber":
        return self._apply("exp", context)

    def ln(self, context: Optional[MathContext] = None) -> "HyperNumber":
        return self._apply("ln", context)

    def log(self, context: Optional[MathContext] = None) -> "HyperNumber":
        return self._apply("log", context)

    def sin(self, context: Optional[MathContext] = None) -> "HyperNumber":
        return self._apply("sin", context)

    def cos(self, context: Optional[MathContext] = None) -> "HyperNumber":
        return self._apply("cos", context)

    def tan(self, context: Optional[MathContext] = None) -> "HyperNumber":
        return self._apply("tan", context)

    def asin(self, context: Optional[MathContext] = None) -> "HyperNumber":
        return self._apply("asin", context)

    def acos(self, context: Optional[MathContext] = None) -> "HyperNumber":
        return self._apply("acos", context)

    def atan(self, context: Optional[MathContext] = None) -> "HyperNumber":
        return self._apply("atan", context)

    def sinh(self, context: Optional[MathContext] = None) -> "HyperNumber":
        return self._apply("sinh", context)

    def cosh(self, context: Optional[MathContext] = None) -> "HyperNumber":
        return self._apply("cosh", context)

    def tanh(self, context: Optional[MathContext] = None) -> "HyperNumber":
        return self._apply("tanh", context)

    def asinh(self, context: Optional[MathContext] = None) -> "HyperNumber":
        return self._apply("asinh", context)

    def acosh(self, context: Optional[MathContext] = None) -> "HyperNumber":
        return self._apply("acosh", context)

    def atanh(self, context: Optional[MathContext] = None) -> "HyperNumber":
        return self._apply("atanh", context)

    # =========================================================================
    # СЕРИАЛИЗАЦИЯ
    # =========================================================================

    def to_token(self) -> Dict[str, Any]:
        """Константный токен для слоя выражений."""
        return {
            "type": "constant",
            "kind": "hyper",
            "dim": self.dim,
            "components": [str(c) for c in self.components],
        }

    @classmethod
    def from_token(cls, token: Dict[str, Any]) -> "HyperNumber":
        """
        Создание из константного токена.

        Raises:
            jsonschema.ValidationError: Токен не соответствует контракту
            ValueError: dim не совпадает с длиной после дополнения
        """
        # Import here to avoid circular dependency
        from src.core.contracts.validators import validate_hyper_number

        validate_hyper_number(token)
        value = cls.hyper(token["components"])
        if value.dim != token["dim"]:
            raise ValueError(
                f"Token dim {token['dim']} does not match {len(token['components'])} components"
            )
        return value

    # =========================================================================
    # ПРОТОКОЛЫ PYTHON
    # =========================================================================

    def __getitem__(self, index: int) -> BigNum:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"HyperNumber index must be int, got {type(index).__name__}")
        if not 0 <= index < self.dim:
            raise InvalidIndex(index)
        return self.components[index]

    def __iter__(self) -> Iterator[BigNum]:
        return iter(self.components)

    def __len__(self) -> int:
        return self.dim

    def __str__(self) -> str:
        return "(" + ", ".join(str(c) for c in self.components) + ")"

    def __repr__(self) -> str:
        return "HyperNumber(" + ", ".join(f"'{c}'" for c in self.components) + ")"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HyperNumber):
            that = other
        elif isinstance(other, (BigNum, int, float)) and not isinstance(other, bool):
            that = HyperNumber.real(other)
        else:
            return NotImplemented
        a, b = self._extended(that)
        return a == b

    def __hash__(self) -> int:
        # Хвостовые нулевые компоненты не влияют на значение
        values: List[BigNum] = list(self.components)
        while len(values) > 1 and values[-1].is_zero:
            values.pop()
        if len(values) == 1:
            return hash(values[0])
        return hash(tuple(values))

    def __neg__(self) -> "HyperNumber":
        return self.neg()

    def __pos__(self) -> "HyperNumber":
        return self

    def __abs__(self) -> BigNum:
        return self.abs()

    def __add__(self, other: Any) -> "HyperNumber":
        return self.add(other) if _is_operand(other) else NotImplemented

    def __radd__(self, other: Any) -> "HyperNumber":
        return HyperNumber.create(other).add(self) if _is_operand(other) else NotImplemented

    def __sub__(self, other: Any) -> "HyperNumber":
        return self.sub(other) if _is_operand(other) else NotImplemented

    def __rsub__(self, other: Any) -> "HyperNumber":
        return HyperNumber.create(other).sub(self) if _is_operand(other) else NotImplemented

    def __mul__(self, other: Any) -> "HyperNumber":
        return self.mul(other) if _is_operand(other) else NotImplemented

    def __rmul__(self, other: Any) -> "HyperNumber":
        return HyperNumber.create(other).mul(self) if _is_operand(other) else NotImplemented

    def __truediv__(self, other: Any) -> "HyperNumber":
        return self.div(other) if _is_operand(other) else NotImplemented

    def __rtruediv__(self, other: Any) -> "HyperNumber":
        return HyperNumber.create(other).div(self) if _is_operand(other) else NotImplemented

    def __pow__(self, n: int) -> "HyperNumber":
        return self.pow(n)


def _is_operand(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (HyperNumber, BigNum, int, float))
