"""
DecimalValue — Десятичное число произвольной точности

Представление: value = sign × coefficient × 10^(-scale)
- sign ∈ {-1, 0, 1}
- coefficient: неотрицательный BigInteger
- scale: целое >= 0 (позиция десятичной точки)

Представление не канонично (хвостовые нули допустимы), но каждый способ
вывода строки детерминирован:
- to_plain_string(): обычная нотация, хвостовые нули дробной части
  отброшены, целые без точки, без научной нотации при любой величине
- to_fixed(places): ровно places знаков после точки (дополнение нулями)

Парсинг принимает str, int, float (через repr) и DecimalValue.
Любой некорректный ввод → InvalidNumberFormat.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значение неизменяемо после создания
2. sign == 0 тогда и только тогда, когда coefficient == 0
3. Строка "-0" никогда не выводится
"""

import math
import re
from dataclasses import dataclass
from typing import Final, Tuple, Union

from bigmath.core.domain.context import MAX_DECIMAL_PLACES, RoundingMode
from bigmath.core.errors import InvalidNumberFormat
from bigmath.core.math.integer import BigInteger

# =============================================================================
# ПАРАМЕТРЫ ПАРСИНГА
# =============================================================================

# Знак, целая часть, дробная часть, показатель (как печатает repr(float))
_NUMBER_PATTERN: Final[re.Pattern] = re.compile(
    r"([+-]?)([0-9]*)(?:\.([0-9]*))?(?:[eE]([+-]?[0-9]+))?"
)

# Максимальный модуль показателя в записи вида 1e5
MAX_PARSE_EXPONENT: Final[int] = MAX_DECIMAL_PLACES

NumberLike = Union[str, int, float, "DecimalValue"]


# =============================================================================
# ОКРУГЛЕНИЕ ЧАСТНОГО
# =============================================================================


def round_quotient(
    quotient: BigInteger,
    remainder: BigInteger,
    divisor: BigInteger,
    rounding: RoundingMode,
) -> BigInteger:
    """
    Округление неотрицательного частного по остатку.

    Все аргументы — модули (>= 0); знак применяется вызывающим кодом,
    поэтому режимы симметричны относительно нуля.

    Args:
        quotient: Усечённое частное
        remainder: Остаток (0 <= remainder < divisor)
        divisor: Делитель (> 0)
        rounding: Режим округления

    Returns:
        Округлённое частное
    """
    if remainder.is_zero() or rounding == RoundingMode.DOWN:
        return quotient
    if rounding == RoundingMode.UP:
        return quotient + 1

    half_order = (remainder + remainder).compare(divisor)
    if half_order > 0:
        return quotient + 1
    if half_order == 0:
        if rounding == RoundingMode.HALF_UP or not quotient.is_even():
            return quotient + 1
    return quotient


# =============================================================================
# DECIMAL VALUE
# =============================================================================


@dataclass(frozen=True)
class DecimalValue:
    """
    Неизменяемое десятичное число.

    Examples:
        >>> DecimalValue.parse("-12.340").to_plain_string()
        '-12.34'
        >>> DecimalValue.parse("2.5").to_fixed(0)
        '3'
    """

    sign: int
    coefficient: BigInteger
    scale: int

    def __post_init__(self):
        if self.coefficient.is_negative():
            raise ValueError("coefficient must be non-negative")
        if self.scale < 0:
            raise ValueError(f"scale must be non-negative, got {self.scale}")
        if self.coefficient.is_zero() != (self.sign == 0):
            raise ValueError("sign must be 0 exactly when coefficient is 0")

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_unscaled(cls, unscaled: BigInteger, scale: int = 0) -> "DecimalValue":
        """Создание из знакового BigInteger и scale"""
        return cls(unscaled.sign, unscaled.abs(), scale)

    @classmethod
    def from_parts(cls, sign: int, coefficient: BigInteger, scale: int) -> "DecimalValue":
        """Создание с нормализацией знака нуля"""
        return cls(0 if coefficient.is_zero() else sign, coefficient, scale)

    @classmethod
    def zero(cls) -> "DecimalValue":
        return cls(0, BigInteger.zero(), 0)

    @classmethod
    def one(cls) -> "DecimalValue":
        return cls(1, BigInteger.one(), 0)

    @classmethod
    def parse(cls, value: NumberLike) -> "DecimalValue":
        """
        Парсинг операнда.

        Args:
            value: Строка, int, float или DecimalValue

        Returns:
            DecimalValue

        Raises:
            InvalidNumberFormat: Если значение не является корректным
                десятичным числом (пустая строка, несколько точек, недопустимые
                символы, знак без цифр, NaN/Inf, bool, другой тип)

        Examples:
            >>> DecimalValue.parse(".5").to_plain_string()
            '0.5'
            >>> DecimalValue.parse(1e-07).to_plain_string()
            '0.0000001'
        """
        if isinstance(value, DecimalValue):
            return value
        if isinstance(value, bool):
            raise InvalidNumberFormat(f"Invalid number: {value!r}")
        if isinstance(value, int):
            return cls.from_unscaled(BigInteger.from_int(value))
        if isinstance(value, float):
            if not math.isfinite(value):
                raise InvalidNumberFormat(f"Invalid number: {value!r}")
            return cls._parse_string(repr(value))
        if isinstance(value, str):
            return cls._parse_string(value)
        raise InvalidNumberFormat(f"Invalid number type: {type(value).__name__}")

    @classmethod
    def _parse_string(cls, text: str) -> "DecimalValue":
        match = _NUMBER_PATTERN.fullmatch(text)
        if match is None:
            raise InvalidNumberFormat(f"Invalid number: {text!r}")

        sign_text, integer_part, fraction_part, exponent_text = match.groups()
        fraction_part = fraction_part or ""
        if not integer_part and not fraction_part:
            raise InvalidNumberFormat(f"Invalid number: {text!r}")

        exponent_digits = (exponent_text or "").lstrip("+-").lstrip("0")
        # длина показателя проверяется до int()
        if len(exponent_digits) > len(str(MAX_PARSE_EXPONENT)):
            raise InvalidNumberFormat(f"Exponent out of range: {text!r}")
        exponent = int(exponent_digits or "0")
        if exponent_text and exponent_text.startswith("-"):
            exponent = -exponent
        if abs(exponent) > MAX_PARSE_EXPONENT:
            raise InvalidNumberFormat(f"Exponent out of range: {text!r}")

        digits = (integer_part + fraction_part).lstrip("0") or "0"
        scale = len(fraction_part) - exponent
        coefficient = BigInteger.from_digits(digits)
        if scale < 0:
            coefficient = coefficient.shift(-scale)
            scale = 0

        return cls.from_parts(-1 if sign_text == "-" else 1, coefficient, scale)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def unscaled(self) -> BigInteger:
        """Знаковый коэффициент: sign × coefficient"""
        return self.coefficient if self.sign >= 0 else self.coefficient.neg()

    def is_zero(self) -> bool:
        return self.sign == 0

    def is_negative(self) -> bool:
        return self.sign < 0

    def is_integer(self) -> bool:
        """Целое тогда и только тогда, когда округление до 0 знаков не меняет значение"""
        return self.rescale(0, RoundingMode.DOWN).compare(self) == 0

    # -------------------------------------------------------------------------
    # Масштаб и сравнение
    # -------------------------------------------------------------------------

    def aligned_with(self, other: "DecimalValue") -> Tuple[BigInteger, BigInteger, int]:
        """
        Знаковые коэффициенты обоих чисел при общем (большем) scale.

        Returns:
            (unscaled self, unscaled other, общий scale)
        """
        scale = max(self.scale, other.scale)
        return (
            self.unscaled.shift(scale - self.scale),
            other.unscaled.shift(scale - other.scale),
            scale,
        )

    def rescale(self, places: int, rounding: RoundingMode) -> "DecimalValue":
        """
        Приведение к ровно places знакам после точки.

        Увеличение scale точное, уменьшение округляет по rounding.

        Args:
            places: Целевой scale (>= 0)
            rounding: Режим округления
        """
        if places >= self.scale:
            return DecimalValue(self.sign, self.coefficient.shift(places - self.scale), places)

        divisor = BigInteger.power_of_ten(self.scale - places)
        quotient, remainder = divmod(self.coefficient, divisor)
        rounded = round_quotient(quotient, remainder, divisor, rounding)
        return DecimalValue.from_parts(self.sign, rounded, places)

    def normalized(self) -> "DecimalValue":
        """Копия без хвостовых нулей дробной части"""
        digits = str(self.coefficient)
        strip = min(self.scale, len(digits) - len(digits.rstrip("0")))
        if self.is_zero():
            return DecimalValue.zero()
        if strip == 0:
            return self
        return DecimalValue(self.sign, BigInteger.from_digits(digits[:-strip]), self.scale - strip)

    def compare(self, other: "DecimalValue") -> int:
        """Точное сравнение: -1, 0 или 1"""
        if self.sign != other.sign:
            return -1 if self.sign < other.sign else 1
        left, right, _ = self.aligned_with(other)
        return left.compare(right)

    def absolute(self) -> "DecimalValue":
        return DecimalValue(abs(self.sign), self.coefficient, self.scale)

    # -------------------------------------------------------------------------
    # Вывод
    # -------------------------------------------------------------------------

    def _split_digits(self) -> Tuple[str, str]:
        """Целая и дробная часть модуля при текущем scale"""
        digits = str(self.coefficient)
        if self.scale == 0:
            return digits, ""
        digits = digits.zfill(self.scale + 1)
        return digits[: -self.scale], digits[-self.scale :]

    def _with_sign(self, text: str) -> str:
        return "-" + text if self.sign < 0 else text

    def to_plain_string(self) -> str:
        """
        Обычная нотация без хвостовых нулей.

        Examples:
            >>> DecimalValue.parse("1e25").to_plain_string()
            '10000000000000000000000000'
            >>> DecimalValue.parse("-0.0").to_plain_string()
            '0'
        """
        integer_part, fraction_part = self._split_digits()
        fraction_part = fraction_part.rstrip("0")
        if fraction_part:
            return self._with_sign(f"{integer_part}.{fraction_part}")
        return self._with_sign(integer_part)

    def to_fixed(self, places: int, rounding: RoundingMode = RoundingMode.HALF_UP) -> str:
        """
        Ровно places знаков после точки, точка только при places > 0.

        Examples:
            >>> DecimalValue.parse("1").to_fixed(3)
            '1.000'
            >>> DecimalValue.parse("-0.0004").to_fixed(3)
            '0.000'
        """
        value = self.rescale(places, rounding)
        integer_part, fraction_part = value._split_digits()
        if fraction_part:
            return value._with_sign(f"{integer_part}.{fraction_part}")
        return value._with_sign(integer_part)

    def __str__(self) -> str:
        return self.to_plain_string()
