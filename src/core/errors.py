"""
Errors — таксономия ошибок числового ядра

Все ошибки fail-fast: поднимаются синхронно в месте обнаружения и никогда
не перехватываются внутри ядра. Решение о восстановлении (подставить
значение по умолчанию, прервать вычисление) принимает вызывающая сторона.

Иерархия:
- MathError (ArithmeticError)
    - NumberFormatError    — некорректный числовой литерал
    - DivisionByZero       — деление ненулевого значения на ноль
    - IndeterminateForm    — 0/0, 0 mod 0, 0^0
    - UndefinedValue       — аргумент вне области определения функции
    - RoundingNecessary    — UNNECESSARY при неточном результате
- Overwrite (KeyError)     — повторное определение именованной константы
- InvalidIndex (IndexError) — обращение к несуществующей компоненте
"""

from typing import Any


# =============================================================================
# ЧИСЛОВЫЕ ОШИБКИ
# =============================================================================


class MathError(ArithmeticError):
    """Базовый класс всех числовых ошибок ядра."""

    pass


class NumberFormatError(MathError, ValueError):
    """
    Некорректный числовой литерал.

    Поднимается при разборе строки, если в ней больше одной десятичной точки,
    больше одного маркера экспоненты или недопустимые символы.
    """

    pass


class DivisionByZero(MathError, ZeroDivisionError):
    """Деление ненулевого значения на точный ноль."""

    pass


class IndeterminateForm(MathError):
    """
    Неопределённость (indeterminate form).

    Результат не определён даже в расширенном смысле: 0/0, 0 mod 0, 0^0.
    """

    pass


class UndefinedValue(MathError, ValueError):
    """
    Аргумент вне области определения функции.

    Например: |x| > 1 для asin над вещественными, x < 1 для acosh,
    atan2(0, 0), чётный корень из отрицательного числа.
    """

    def __init__(self, operation: str, value: Any):
        self.operation = operation
        self.value = value
        super().__init__(f"Operation {operation} is undefined for argument {value}.")


class RoundingNecessary(MathError):
    """Режим UNNECESSARY запрошен, но значение не точно на целевой точности."""

    pass


# =============================================================================
# ОШИБКИ КОНТЕЙНЕРОВ
# =============================================================================


class Overwrite(KeyError):
    """
    Попытка переопределить именованную константу.

    Каждое имя в реестре констант может быть определено только один раз.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"A constant with name {name} has already been declared.")

    def __str__(self) -> str:
        return self.args[0]


class InvalidIndex(IndexError):
    """Обращение к компоненте с индексом вне диапазона [start, dim)."""

    def __init__(self, passed: int, start: int = 0):
        self.passed = passed
        self.start = start
        super().__init__(f"Index {passed} does not exist. Indexing starts from {start}.")
