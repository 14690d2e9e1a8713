"""
Ordering — Сравнение, округление, модуль

compare: точное сравнение при выровненных scale, без промежуточного
float.

round: режим округления контекста (по умолчанию половина от нуля), ровно
decimal_places знаков после точки; точка выводится только при
decimal_places > 0. Операция идемпотентна: round(round(x, n), n) == round(x, n).

abs: снимает знак, вывод в обычной нотации.
"""

from typing import Optional

from bigmath.core.domain.context import PrecisionContext, resolve_context
from bigmath.core.domain.decimal_value import DecimalValue, NumberLike
from bigmath.core.errors import operation


@operation("Comparison")
def compare(a: NumberLike, b: NumberLike) -> int:
    """
    Сравнение двух чисел.

    Returns:
        -1 если a < b, 0 если a == b, 1 если a > b

    Examples:
        >>> compare("0.10", "0.1")
        0
        >>> compare("-1", "0.000001")
        -1
    """
    return DecimalValue.parse(a).compare(DecimalValue.parse(b))


@operation("Rounding")
def round(
    value: NumberLike,
    decimal_places: int = 0,
    *,
    context: Optional[PrecisionContext] = None,
) -> str:
    """
    Округление до decimal_places знаков после точки.

    Examples:
        >>> round("2.5")
        '3'
        >>> round("-2.5")
        '-3'
        >>> round("1.005", 2)
        '1.01'
        >>> round("1.5", 2)
        '1.50'
    """
    context = resolve_context(context)
    places = context.resolve_places(decimal_places)
    return DecimalValue.parse(value).to_fixed(places, context.rounding)


@operation("Absolute value")
def abs(value: NumberLike) -> str:
    """
    Модуль числа.

    Examples:
        >>> abs("-123456789012345678901234567890.50")
        '123456789012345678901234567890.5'
    """
    return DecimalValue.parse(value).absolute().to_plain_string()
