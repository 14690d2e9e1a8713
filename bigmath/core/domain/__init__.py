"""
Domain models and value objects.

DecimalValue (десятичное представление) и PrecisionContext (контекст точности).
"""

from bigmath.core.domain.context import (
    DEFAULT_DECIMAL_PLACES,
    MAX_DECIMAL_PLACES,
    PrecisionContext,
    RoundingMode,
    configure,
    get_context,
    get_default_context,
    local_context,
    reset_default_context,
    resolve_context,
)
from bigmath.core.domain.decimal_value import DecimalValue, NumberLike, round_quotient

__all__ = [
    # Context
    "DEFAULT_DECIMAL_PLACES",
    "MAX_DECIMAL_PLACES",
    "PrecisionContext",
    "RoundingMode",
    "configure",
    "get_context",
    "get_default_context",
    "local_context",
    "reset_default_context",
    "resolve_context",
    # Decimal value
    "DecimalValue",
    "NumberLike",
    "round_quotient",
]
