"""
Arithmetic — Сложение, вычитание, умножение, деление, остаток

Операторы двух уровней:
- *_values: функции над DecimalValue (используются другими модулями)
- add/subtract/multiply/divide/mod: публичные операторы над строками и
  числами, возвращают строку

ФОРМАТ РЕЗУЛЬТАТА:
- add/subtract/multiply/mod: обычная нотация, целое без точки при любой
  величине, дробное без хвостовых нулей
- divide: ровно decimal_places знаков после точки, даже при точном делении
  (divide("7", "7", 10) == "1.0000000000")

Деление выполняется в столбик на выровненных целых коэффициентах
(integer core), результат округляется режимом контекста.
"""

from typing import Optional

from bigmath.core.domain.context import PrecisionContext, RoundingMode, resolve_context
from bigmath.core.domain.decimal_value import DecimalValue, NumberLike, round_quotient
from bigmath.core.errors import DivisionByZero, ModuloByZero, operation


# =============================================================================
# ОПЕРАЦИИ НАД DECIMAL VALUE
# =============================================================================


def add_values(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """Сумма при общем scale (большем из двух)"""
    left, right, scale = a.aligned_with(b)
    return DecimalValue.from_unscaled(left + right, scale)


def subtract_values(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """Разность при общем scale"""
    left, right, scale = a.aligned_with(b)
    return DecimalValue.from_unscaled(left - right, scale)


def multiply_values(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """Произведение: коэффициенты перемножаются, scale складываются"""
    return DecimalValue.from_parts(
        a.sign * b.sign, a.coefficient * b.coefficient, a.scale + b.scale
    )


def divide_values(
    dividend: DecimalValue,
    divisor: DecimalValue,
    places: int,
    rounding: RoundingMode,
) -> DecimalValue:
    """
    Частное с ровно places знаками после точки.

    a / b × 10^places = A / B × 10^(scale_b - scale_a + places),
    где A, B — коэффициенты. Положительная степень переносится в числитель,
    отрицательная в знаменатель, затем одно целочисленное деление.

    Args:
        dividend: Делимое
        divisor: Делитель
        places: Знаков после точки в результате
        rounding: Режим округления последнего знака

    Raises:
        DivisionByZero: Если divisor равен нулю
    """
    if divisor.is_zero():
        raise DivisionByZero("Division by zero")

    numerator = dividend.coefficient
    denominator = divisor.coefficient
    shift = divisor.scale - dividend.scale + places
    if shift >= 0:
        numerator = numerator.shift(shift)
    else:
        denominator = denominator.shift(-shift)

    quotient, remainder = divmod(numerator, denominator)
    quotient = round_quotient(quotient, remainder, denominator, rounding)
    return DecimalValue.from_parts(dividend.sign * divisor.sign, quotient, places)


def remainder_values(dividend: DecimalValue, divisor: DecimalValue) -> DecimalValue:
    """
    Остаток усечённого деления: a = q × b + r, знак r совпадает со знаком a.

    Raises:
        ModuloByZero: Если divisor равен нулю
    """
    if divisor.is_zero():
        raise ModuloByZero("Modulo by zero")

    left, right, scale = dividend.aligned_with(divisor)
    return DecimalValue.from_unscaled(left % right, scale)


# =============================================================================
# ПУБЛИЧНЫЕ ОПЕРАТОРЫ
# =============================================================================


@operation("Addition")
def add(a: NumberLike, b: NumberLike) -> str:
    """
    Сложение с произвольной точностью.

    Examples:
        >>> add("9999999999999999", "1")
        '10000000000000000'
        >>> add("0.1", "0.2")
        '0.3'
    """
    return add_values(DecimalValue.parse(a), DecimalValue.parse(b)).to_plain_string()


@operation("Subtraction")
def subtract(a: NumberLike, b: NumberLike) -> str:
    """Вычитание с произвольной точностью"""
    return subtract_values(DecimalValue.parse(a), DecimalValue.parse(b)).to_plain_string()


@operation("Multiplication")
def multiply(a: NumberLike, b: NumberLike) -> str:
    """
    Умножение с произвольной точностью.

    Examples:
        >>> multiply("9999999999999999", "9999999999999999")
        '99999999999999980000000000000001'
        >>> multiply("1.5", "1.5")
        '2.25'
    """
    return multiply_values(DecimalValue.parse(a), DecimalValue.parse(b)).to_plain_string()


@operation("Division")
def divide(
    a: NumberLike,
    b: NumberLike,
    decimal_places: Optional[int] = None,
    *,
    context: Optional[PrecisionContext] = None,
) -> str:
    """
    Деление с фиксированным количеством знаков после точки.

    Args:
        a: Делимое
        b: Делитель
        decimal_places: Знаков после точки (по умолчанию из контекста, 20)
        context: Контекст точности (по умолчанию действующий)

    Returns:
        Частное ровно с decimal_places знаками после точки

    Raises:
        DivisionByZero: Если b равно нулю
        InvalidNumberFormat: Если операнд некорректен
        InvalidDecimalPlaces: Если decimal_places вне диапазона

    Examples:
        >>> divide("10", "3", 4)
        '3.3333'
        >>> divide("2", "3", 2)
        '0.67'
    """
    context = resolve_context(context)
    places = context.resolve_places(decimal_places)
    dividend = DecimalValue.parse(a)
    divisor = DecimalValue.parse(b)
    return divide_values(dividend, divisor, places, context.rounding).to_fixed(places)


@operation("Modulo")
def mod(a: NumberLike, b: NumberLike) -> str:
    """
    Остаток от деления (знак делимого).

    Examples:
        >>> mod("10", "3")
        '1'
        >>> mod("-7", "3")
        '-1'
        >>> mod("5.5", "2")
        '1.5'
    """
    return remainder_values(DecimalValue.parse(a), DecimalValue.parse(b)).to_plain_string()
