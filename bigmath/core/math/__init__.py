"""
Core math modules для BigMath

Integer core и операторы над десятичными числами.
"""

# Integer core (импортируется первым: от него зависит DecimalValue)
from bigmath.core.math.integer import BASE, LIMB_DIGITS, BigInteger

# Arithmetic
from bigmath.core.math.arithmetic import (
    add,
    add_values,
    divide,
    divide_values,
    mod,
    multiply,
    multiply_values,
    remainder_values,
    subtract,
    subtract_values,
)

# Powers
from bigmath.core.math.powers import (
    GUARD_DIGITS,
    pow,
    power_values,
    sqrt,
    sqrt_iteration_limit,
    sqrt_values,
)

# Number theory
from bigmath.core.math.number_theory import (
    factorial,
    factorial_integer,
    gcd,
    gcd_integers,
    lcm,
    lcm_integers,
    truncated_magnitude,
)

# Ordering
from bigmath.core.math.ordering import abs, compare, round

__all__ = [
    # Integer core
    "BASE",
    "LIMB_DIGITS",
    "BigInteger",
    # Arithmetic
    "add",
    "add_values",
    "divide",
    "divide_values",
    "mod",
    "multiply",
    "multiply_values",
    "remainder_values",
    "subtract",
    "subtract_values",
    # Powers
    "GUARD_DIGITS",
    "pow",
    "power_values",
    "sqrt",
    "sqrt_iteration_limit",
    "sqrt_values",
    # Number theory
    "factorial",
    "factorial_integer",
    "gcd",
    "gcd_integers",
    "lcm",
    "lcm_integers",
    "truncated_magnitude",
    # Ordering
    "abs",
    "compare",
    "round",
]
