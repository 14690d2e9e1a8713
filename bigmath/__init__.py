"""
BigMath — высокоточная десятичная арифметика.

Все операторы принимают строки или числа и возвращают строки (compare
возвращает int). Ошибки — подклассы BigMathError с полем kind.

    >>> import bigmath
    >>> bigmath.add("9999999999999999", "1")
    '10000000000000000'
    >>> bigmath.divide("10", "3", 4)
    '3.3333'
"""

# Operators (core.math импортируется до core.domain)
from bigmath.core.math import (
    BigInteger,
    abs,
    add,
    compare,
    divide,
    factorial,
    gcd,
    lcm,
    mod,
    multiply,
    pow,
    round,
    sqrt,
    subtract,
)

# Domain
from bigmath.core.domain import (
    DecimalValue,
    PrecisionContext,
    RoundingMode,
    configure,
    get_default_context,
    local_context,
    reset_default_context,
)

# Errors
from bigmath.core.errors import (
    BigMathError,
    ConvergenceFailure,
    DivisionByZero,
    ErrorKind,
    InvalidConfiguration,
    InvalidDecimalPlaces,
    InvalidExponent,
    InvalidFactorialArgument,
    InvalidNumberFormat,
    ModuloByZero,
    NegativeSqrt,
    ResourceLimitExceeded,
)
from bigmath.facade import BigMath
from bigmath.outcome import Outcome, attempt

__version__ = "1.0.0"

__all__ = [
    # Operators
    "add",
    "subtract",
    "multiply",
    "divide",
    "mod",
    "pow",
    "sqrt",
    "factorial",
    "gcd",
    "lcm",
    "compare",
    "round",
    "abs",
    "configure",
    # Context
    "PrecisionContext",
    "RoundingMode",
    "get_default_context",
    "local_context",
    "reset_default_context",
    # Types
    "BigInteger",
    "DecimalValue",
    "BigMath",
    # Errors
    "BigMathError",
    "ErrorKind",
    "InvalidNumberFormat",
    "DivisionByZero",
    "ModuloByZero",
    "InvalidExponent",
    "NegativeSqrt",
    "InvalidFactorialArgument",
    "InvalidDecimalPlaces",
    "ConvergenceFailure",
    "ResourceLimitExceeded",
    "InvalidConfiguration",
    # Outcome
    "Outcome",
    "attempt",
]
