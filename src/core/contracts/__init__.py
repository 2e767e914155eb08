"""
Contract Validation Module

Модуль для валидации константных токенов и контекстов округления
по JSON Schema контрактам.
"""

from .validators import (
    ContractValidator,
    HyperNumberValidator,
    MathContextValidator,
    RealNumberValidator,
    SchemaLoader,
    validate_hyper_number,
    validate_math_context,
    validate_real_number,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RealNumberValidator",
    "HyperNumberValidator",
    "MathContextValidator",
    # Functions
    "validate_real_number",
    "validate_hyper_number",
    "validate_math_context",
]
