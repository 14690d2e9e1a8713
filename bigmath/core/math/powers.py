"""
Powers — Целая степень и квадратный корень

pow:
- показатель обязан быть целым числом (дробные степени не поддерживаются)
- pow(x, 0) == "1" для любого x, включая 0
- положительный показатель: бинарное возведение (результат идентичен
  повторному умножению)
- отрицательный показатель: divide(1, pow(x, -n), 0), то есть результат
  всегда целый, округлённый режимом контекста

sqrt (Newton-Raphson):
    x_0 = value
    x_{n+1} = (x_n + value / x_n) / 2
Вычисления ведутся с GUARD_DIGITS дополнительными знаками. Итерации
останавливаются, когда шаг |x_n - x_{n-1}| не превышает 10 единиц последнего
рабочего знака, то есть метод вышел на неподвижную точку рабочей точности.
Финальное значение округляется до decimal_places.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Число итераций sqrt ограничено (ConvergenceFailure вместо зависания)
2. Лимиты контекста (max_exponent) проверяются до вычисления
"""

import logging
from typing import Final, Optional, Union

from bigmath.core.domain.context import PrecisionContext, RoundingMode, resolve_context
from bigmath.core.domain.decimal_value import DecimalValue, NumberLike
from bigmath.core.errors import (
    ConvergenceFailure,
    DivisionByZero,
    InvalidExponent,
    InvalidNumberFormat,
    NegativeSqrt,
    ResourceLimitExceeded,
    operation,
)
from bigmath.core.math.arithmetic import add_values, divide_values, subtract_values
from bigmath.core.math.integer import BigInteger

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Дополнительные знаки рабочей точности sqrt
GUARD_DIGITS: Final[int] = 5

# Постоянная часть ограничения итераций sqrt
SQRT_ITERATION_FLOOR: Final[int] = 64

# Множитель ограничения итераций на цифру операнда и точности
SQRT_ITERATIONS_PER_DIGIT: Final[int] = 4

_TWO: Final[DecimalValue] = DecimalValue.parse(2)


# =============================================================================
# POW
# =============================================================================


def _parse_exponent(exponent: Union[int, NumberLike]) -> int:
    """
    Приведение показателя к int.

    Raises:
        InvalidExponent: Если показатель не целое число
    """
    if isinstance(exponent, int) and not isinstance(exponent, bool):
        return exponent
    try:
        value = DecimalValue.parse(exponent)
    except InvalidNumberFormat as e:
        raise InvalidExponent(f"Exponent must be an integer, got {exponent!r}") from e
    if not value.is_integer():
        raise InvalidExponent(f"Exponent must be an integer, got {exponent!r}")
    return value.rescale(0, RoundingMode.DOWN).unscaled.to_int()


def power_values(base: DecimalValue, exponent: int) -> DecimalValue:
    """
    base^exponent для exponent >= 0.

    Коэффициент возводится в степень в integer core, scale умножается
    на показатель.
    """
    if exponent == 0:
        return DecimalValue.one()
    sign = -1 if base.is_negative() and exponent % 2 else 1
    return DecimalValue.from_parts(sign, base.coefficient**exponent, base.scale * exponent)


@operation("Power")
def pow(
    base: NumberLike,
    exponent: Union[int, NumberLike],
    *,
    context: Optional[PrecisionContext] = None,
) -> str:
    """
    Возведение в целую степень.

    Args:
        base: Основание
        exponent: Целый показатель (int или целочисленная запись)
        context: Контекст точности

    Returns:
        Результат в обычной нотации; для отрицательного показателя целое

    Raises:
        InvalidExponent: Если показатель не целый
        DivisionByZero: Если основание 0 при отрицательном показателе
        ResourceLimitExceeded: Если |exponent| > context.max_exponent

    Examples:
        >>> pow("2", 100)
        '1267650600228229401496703205376'
        >>> pow("0", 0)
        '1'
        >>> pow("2", -2)
        '0'
    """
    context = resolve_context(context)
    power = _parse_exponent(exponent)
    base_value = DecimalValue.parse(base)

    magnitude = -power if power < 0 else power
    if context.max_exponent is not None and magnitude > context.max_exponent:
        raise ResourceLimitExceeded(
            f"Exponent {power} exceeds limit {context.max_exponent}"
        )

    if power == 0:
        return "1"

    result = power_values(base_value, magnitude)
    if power < 0:
        if result.is_zero():
            raise DivisionByZero("Division by zero")
        return divide_values(DecimalValue.one(), result, 0, context.rounding).to_fixed(0)
    return result.to_plain_string()


# =============================================================================
# SQRT
# =============================================================================


def sqrt_iteration_limit(value: DecimalValue, places: int) -> int:
    """
    Ограничение итераций Newton-Raphson.

    От x_0 = value метод сначала уменьшает приближение примерно вдвое за
    итерацию (число шагов растёт с количеством цифр value), затем сходится
    квадратично (число шагов растёт как log(places)).
    """
    digits = value.coefficient.digit_count() + value.scale + places
    return SQRT_ITERATIONS_PER_DIGIT * digits + SQRT_ITERATION_FLOOR


def sqrt_values(
    value: DecimalValue,
    places: int,
    context: PrecisionContext,
) -> DecimalValue:
    """
    Квадратный корень неотрицательного value с places знаками после точки.

    Raises:
        NegativeSqrt: Если value < 0
        ConvergenceFailure: Если превышено ограничение итераций
    """
    if value.is_negative():
        raise NegativeSqrt("Cannot calculate square root of negative number")
    if value.is_zero():
        return DecimalValue.zero()

    working = places + GUARD_DIGITS
    tolerance = DecimalValue(1, BigInteger.one(), working - 1)
    limit = context.max_sqrt_iterations or sqrt_iteration_limit(value, places)

    x = value
    iterations = 0
    while True:
        if iterations >= limit:
            error = ConvergenceFailure(
                f"Square root did not converge within {limit} iterations"
            )
            logger.warning(
                "sqrt did not converge: value=%s places=%d %s",
                value,
                places,
                error.to_dict(),
            )
            raise error
        quotient = divide_values(value, x, working, context.rounding)
        following = divide_values(add_values(x, quotient), _TWO, working, context.rounding)
        iterations += 1
        step = subtract_values(following, x).absolute()
        x = following
        if x.is_zero():
            # приближение ушло ниже рабочей точности
            break
        if step.compare(tolerance) <= 0:
            break

    logger.debug("sqrt converged: places=%d iterations=%d", places, iterations)
    return x.rescale(places, context.rounding)


@operation("Square root")
def sqrt(
    value: NumberLike,
    decimal_places: Optional[int] = None,
    *,
    context: Optional[PrecisionContext] = None,
) -> str:
    """
    Квадратный корень методом Newton-Raphson.

    Args:
        value: Неотрицательное число
        decimal_places: Знаков после точки (по умолчанию из контекста, 20)
        context: Контекст точности

    Returns:
        "0" для нуля, иначе ровно decimal_places знаков после точки

    Raises:
        NegativeSqrt: Если value < 0
        ConvergenceFailure: Если превышено ограничение итераций

    Examples:
        >>> sqrt("2", 20)
        '1.41421356237309504880'
        >>> sqrt("16", 2)
        '4.00'
    """
    context = resolve_context(context)
    places = context.resolve_places(decimal_places)
    parsed = DecimalValue.parse(value)
    if parsed.is_zero():
        return "0"
    return sqrt_values(parsed, places, context).to_fixed(places)
