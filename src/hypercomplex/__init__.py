"""
Hypercomplex numbers

Алгебры Кэли–Диксона произвольной размерности 2^n и трансцендентные
функции над ними через обобщённое полярное разложение.
"""

from src.hypercomplex.hyper_number import HyperNumber
from src.hypercomplex import transcendental

__all__ = [
    "HyperNumber",
    "transcendental",
]
