"""
Trigonometry — круговые и гиперболические функции над BigNum.
"""

from src.core.math.trigonometry.circular import acos, asin, atan, atan2, cos, sin, tan
from src.core.math.trigonometry.hyperbolic import acosh, asinh, atanh, cosh, sinh, tanh

__all__ = [
    # Circular
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "atan2",
    # Hyperbolic
    "sinh",
    "cosh",
    "tanh",
    "asinh",
    "acosh",
    "atanh",
]
