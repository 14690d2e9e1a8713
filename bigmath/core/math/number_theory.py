"""
Number Theory — GCD, LCM, факториал

GCD/LCM:
- операнды приводятся к целым без ошибки: берётся модуль, дробная часть
  отбрасывается (усечение, не округление)
- GCD: алгоритм Евклида (a, b) → (b, a mod b) до b == 0; gcd(a, 0) == a
- LCM: 0, если любой операнд 0, иначе |a × b| / gcd(a, b) (точное деление)

Factorial:
- только для неотрицательных целых; 0! = 1! = 1
- итеративное произведение 1 × 2 × … × n в integer core
- стоимость сверхлинейна по n; лимит задаётся через
  PrecisionContext.max_factorial_argument
"""

from typing import Optional, Union

from bigmath.core.domain.context import PrecisionContext, RoundingMode, resolve_context
from bigmath.core.domain.decimal_value import DecimalValue, NumberLike
from bigmath.core.errors import (
    InvalidFactorialArgument,
    InvalidNumberFormat,
    ResourceLimitExceeded,
    operation,
)
from bigmath.core.math.integer import BigInteger


# =============================================================================
# GCD / LCM
# =============================================================================


def truncated_magnitude(value: NumberLike) -> BigInteger:
    """
    Модуль целой части операнда.

    Examples:
        >>> str(truncated_magnitude("-12.9"))
        '12'
    """
    return DecimalValue.parse(value).rescale(0, RoundingMode.DOWN).coefficient


def gcd_integers(a: BigInteger, b: BigInteger) -> BigInteger:
    """
    Наибольший общий делитель неотрицательных целых (алгоритм Евклида).

    Args:
        a: Неотрицательное целое
        b: Неотрицательное целое

    Returns:
        gcd(a, b); gcd(a, 0) == a
    """
    while not b.is_zero():
        a, b = b, a % b
    return a


def lcm_integers(a: BigInteger, b: BigInteger) -> BigInteger:
    """Наименьшее общее кратное неотрицательных целых (0, если любой равен 0)"""
    if a.is_zero() or b.is_zero():
        return BigInteger.zero()
    return (a * b) // gcd_integers(a, b)


@operation("GCD")
def gcd(a: NumberLike, b: NumberLike) -> str:
    """
    Наибольший общий делитель.

    Нецелые и отрицательные операнды усекаются до модуля целой части.

    Examples:
        >>> gcd("123456789012345678901234", "987654321098765432109")
        '1'
        >>> gcd("12", "0")
        '12'
        >>> gcd("-12.7", "18")
        '6'
    """
    return str(gcd_integers(truncated_magnitude(a), truncated_magnitude(b)))


@operation("LCM")
def lcm(a: NumberLike, b: NumberLike) -> str:
    """
    Наименьшее общее кратное.

    Examples:
        >>> lcm("4", "6")
        '12'
        >>> lcm("0", "5")
        '0'
    """
    return str(lcm_integers(truncated_magnitude(a), truncated_magnitude(b)))


# =============================================================================
# FACTORIAL
# =============================================================================


def _parse_factorial_argument(n: Union[int, NumberLike]) -> int:
    """
    Приведение аргумента факториала к неотрицательному int.

    Raises:
        InvalidFactorialArgument: Если n не неотрицательное целое
    """
    if isinstance(n, int) and not isinstance(n, bool):
        count = n
    else:
        try:
            value = DecimalValue.parse(n)
        except InvalidNumberFormat as e:
            raise InvalidFactorialArgument(
                "Factorial is defined only for non-negative integers"
            ) from e
        if not value.is_integer():
            raise InvalidFactorialArgument(
                "Factorial is defined only for non-negative integers"
            )
        count = value.rescale(0, RoundingMode.DOWN).unscaled.to_int()

    if count < 0:
        raise InvalidFactorialArgument("Factorial is defined only for non-negative integers")
    return count


def factorial_integer(n: int) -> BigInteger:
    """n! как BigInteger для n >= 0"""
    result = BigInteger.one()
    for factor in range(2, n + 1):
        result = result * factor
    return result


@operation("Factorial")
def factorial(
    n: Union[int, NumberLike],
    *,
    context: Optional[PrecisionContext] = None,
) -> str:
    """
    Факториал неотрицательного целого.

    Args:
        n: Неотрицательное целое (int или целочисленная запись)
        context: Контекст точности (для max_factorial_argument)

    Raises:
        InvalidFactorialArgument: Если n не неотрицательное целое
        ResourceLimitExceeded: Если n > context.max_factorial_argument

    Examples:
        >>> factorial(0)
        '1'
        >>> factorial(20)
        '2432902008176640000'
    """
    context = resolve_context(context)
    count = _parse_factorial_argument(n)
    if context.max_factorial_argument is not None and count > context.max_factorial_argument:
        raise ResourceLimitExceeded(
            f"Factorial argument {count} exceeds limit {context.max_factorial_argument}"
        )
    if count in (0, 1):
        return "1"
    return str(factorial_integer(count))
