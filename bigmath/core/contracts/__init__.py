"""
Contract Validation Module

Модуль для валидации JSON контрактов конфигурации BigMath.
"""

from .validators import (
    ContractValidator,
    PrecisionContextValidator,
    SchemaLoader,
    validate_precision_context,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PrecisionContextValidator",
    # Functions
    "validate_precision_context",
]
