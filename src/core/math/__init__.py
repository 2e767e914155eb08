"""
Core math modules

Десятичная арифметика произвольной точности и трансцендентные функции,
вычисляемые рядами на повышенной рабочей точности.
"""

# Rounding context
from src.core.math.context import (
    DEFAULT_CONTEXT,
    DEFAULT_PRECISION,
    GUARD_DIGITS,
    MathContext,
    RoundingMode,
    resolve_context,
)

# Parsing
from src.core.math.parsers import is_valid_number, parse_num

# BigNum
from src.core.math.bignum import BigNum

# Constants
from src.core.math.constants import e, ln2, pi

# Exponential and logarithms
from src.core.math.exponential import exp, ln, log, sqrt

# Trigonometry
from src.core.math.trigonometry import (
    acos,
    acosh,
    asin,
    asinh,
    atan,
    atan2,
    atanh,
    cos,
    cosh,
    sin,
    sinh,
    tan,
    tanh,
)

# Numerical protocol
from src.core.math.numerical import Numerical

__all__ = [
    # Context
    "DEFAULT_CONTEXT",
    "DEFAULT_PRECISION",
    "GUARD_DIGITS",
    "MathContext",
    "RoundingMode",
    "resolve_context",
    # Parsing
    "is_valid_number",
    "parse_num",
    # Types
    "BigNum",
    "Numerical",
    # Constants
    "e",
    "ln2",
    "pi",
    # Exponential
    "exp",
    "ln",
    "log",
    "sqrt",
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
