"""
MathContext — контекст округления

Пара {precision, rounding}, передаваемая явно в каждую операцию, способную
потерять точность. Единственное глобальное состояние — DEFAULT_CONTEXT,
используемый, когда вызывающая сторона контекст не передала.

precision — количество цифр после десятичной точки (абсолютная точность).

Режимы округления повторяют семантику java.math.RoundingMode:
- UP          — от нуля
- DOWN        — к нулю
- CEIL        — к +∞
- FLOOR       — к −∞
- HALF_UP     — к ближайшему, половина — от нуля
- HALF_DOWN   — к ближайшему, половина — к нулю
- HALF_EVEN   — к ближайшему, половина — к чётной последней цифре
- UNNECESSARY — округление запрещено (точный результат или ошибка)
"""

from enum import Enum
from typing import Any, Dict, Final, Optional

from pydantic import BaseModel, Field


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Запас цифр для рабочей точности итеративных вычислений
GUARD_DIGITS: Final[int] = 5

# Точность контекста по умолчанию
DEFAULT_PRECISION: Final[int] = 17


# =============================================================================
# ТИПЫ
# =============================================================================


class RoundingMode(str, Enum):
    """Режим округления отбрасываемых цифр."""

    UP = "UP"
    DOWN = "DOWN"
    CEIL = "CEIL"
    FLOOR = "FLOOR"
    HALF_UP = "HALF_UP"
    HALF_DOWN = "HALF_DOWN"
    HALF_EVEN = "HALF_EVEN"
    UNNECESSARY = "UNNECESSARY"


class MathContext(BaseModel):
    """
    Контекст округления.

    Immutable модель (frozen=True): контекст можно безопасно разделять
    между вызовами и потоками.
    """

    precision: int = Field(..., ge=0, description="Цифр после десятичной точки")
    rounding: RoundingMode = Field(
        RoundingMode.HALF_EVEN, description="Режим округления отбрасываемых цифр"
    )

    model_config = {"frozen": True}

    def working(self, extra: int = GUARD_DIGITS, factor: int = 1) -> "MathContext":
        """
        Рабочий контекст с повышенной точностью.

        Промежуточные шаги рядов вычисляются на precision * factor + extra
        цифрах и округляются к запрошенной точности только в конце.
        UNNECESSARY заменяется на HALF_EVEN: промежуточные шаги обязаны
        округлять, а точность результата проверяет финальное округление.

        Args:
            extra: Дополнительные цифры
            factor: Множитель исходной точности

        Returns:
            Новый MathContext
        """
        rounding = self.rounding
        if rounding is RoundingMode.UNNECESSARY:
            rounding = RoundingMode.HALF_EVEN
        return MathContext(precision=self.precision * factor + extra, rounding=rounding)

    def with_precision(self, precision: int) -> "MathContext":
        """Тот же режим округления с другой точностью."""
        return MathContext(precision=precision, rounding=self.rounding)

    def to_token(self) -> Dict[str, Any]:
        """Сериализация в {"precision", "rounding"}."""
        return self.model_dump(mode="json")

    @classmethod
    def from_token(cls, token: Dict[str, Any]) -> "MathContext":
        """
        Создание из сериализованного контекста.

        Raises:
            jsonschema.ValidationError: Данные не соответствуют контракту
        """
        # Import here to avoid circular dependency
        from src.core.contracts.validators import validate_math_context

        validate_math_context(token)
        return cls(**token)


DEFAULT_CONTEXT: Final[MathContext] = MathContext(
    precision=DEFAULT_PRECISION, rounding=RoundingMode.HALF_EVEN
)


def resolve_context(context: Optional[MathContext]) -> MathContext:
    """Контекст вызывающей стороны или DEFAULT_CONTEXT, если он не передан."""
    return DEFAULT_CONTEXT if context is None else context
