"""
BigInteger — Целое произвольной точности

Фундамент BigMath: знаковое целое неограниченной величины.

Представление:
- sign ∈ {-1, 0, 1}
- magnitude: little-endian кортеж limbs в основании 10^9
  (без ведущих нулевых limbs; ноль — пустой кортеж)

Основание 10^9 выбрано, чтобы десятичная запись строилась по limbs напрямую:
преобразование str ↔ int интерпретатора ограничено 4300 цифрами и здесь
не используется.

Операции над модулями (add/sub/mul/divmod) реализованы как функции
над списками limbs; BigInteger только комбинирует их со знаком.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значение неизменяемо после создания
2. Ноль всегда имеет sign == 0 и пустую magnitude
3. divmod усекает частное к нулю, остаток имеет знак делимого
"""

from functools import total_ordering
from typing import Final, List, Sequence, Tuple, Union

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Десятичных цифр в одном limb
LIMB_DIGITS: Final[int] = 9

# Основание limb
BASE: Final[int] = 10**LIMB_DIGITS

_POWERS_OF_TEN: Final[Tuple[int, ...]] = tuple(10**i for i in range(LIMB_DIGITS + 1))


# =============================================================================
# ОПЕРАЦИИ НАД МОДУЛЯМИ
# =============================================================================


def _normalize(limbs: List[int]) -> List[int]:
    """Удаление ведущих нулевых limbs (in place)"""
    while limbs and limbs[-1] == 0:
        limbs.pop()
    return limbs


def _compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """Сравнение модулей: -1, 0 или 1"""
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


def _add_magnitudes(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """Сложение модулей"""
    if len(a) < len(b):
        a, b = b, a
    result = []
    carry = 0
    for i in range(len(b)):
        carry += a[i] + b[i]
        result.append(carry % BASE)
        carry //= BASE
    for i in range(len(b), len(a)):
        carry += a[i]
        result.append(carry % BASE)
        carry //= BASE
    if carry:
        result.append(carry)
    return result


def _sub_magnitudes(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """Вычитание модулей, требуется |a| >= |b|"""
    result = []
    borrow = 0
    for i in range(len(a)):
        diff = a[i] - borrow - (b[i] if i < len(b) else 0)
        if diff < 0:
            diff += BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)
    return _normalize(result)


def _mul_small(a: Sequence[int], n: int) -> List[int]:
    """Умножение модуля на один limb (0 <= n < BASE)"""
    if n == 0:
        return []
    result = []
    carry = 0
    for limb in a:
        carry += limb * n
        result.append(carry % BASE)
        carry //= BASE
    if carry:
        result.append(carry)
    return result


def _mul_magnitudes(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """Умножение модулей в столбик"""
    if not a or not b:
        return []
    if len(b) == 1:
        return _mul_small(a, b[0])
    if len(a) == 1:
        return _mul_small(b, a[0])

    result = [0] * (len(a) + len(b))
    for i, a_limb in enumerate(a):
        if a_limb == 0:
            continue
        carry = 0
        for j, b_limb in enumerate(b):
            carry += result[i + j] + a_limb * b_limb
            result[i + j] = carry % BASE
            carry //= BASE
        k = i + len(b)
        while carry:
            carry += result[k]
            result[k] = carry % BASE
            carry //= BASE
            k += 1
    return _normalize(result)


def _divmod_small(a: Sequence[int], n: int) -> Tuple[List[int], int]:
    """Деление модуля на один limb (0 < n < BASE), возвращает (частное, остаток)"""
    quotient = [0] * len(a)
    remainder = 0
    for i in range(len(a) - 1, -1, -1):
        remainder = remainder * BASE + a[i]
        quotient[i], remainder = divmod(remainder, n)
    return _normalize(quotient), remainder


def _divmod_magnitudes(a: Sequence[int], b: Sequence[int]) -> Tuple[List[int], List[int]]:
    """
    Деление модулей с остатком (Knuth, Algorithm D).

    Args:
        a: Делимое
        b: Делитель (непустой)

    Returns:
        (частное, остаток)
    """
    if _compare_magnitudes(a, b) < 0:
        return [], list(a)
    if len(b) == 1:
        quotient, remainder = _divmod_small(a, b[0])
        return quotient, [remainder] if remainder else []

    # Нормализация: старший limb делителя >= BASE / 2
    factor = BASE // (b[-1] + 1)
    u = _mul_small(a, factor)
    u.extend([0] * (len(a) + 1 - len(u)))
    v = _mul_small(b, factor)

    n = len(v)
    m = len(u) - n - 1
    v_top = v[-1]
    v_next = v[-2]
    quotient = [0] * (m + 1)

    for j in range(m, -1, -1):
        qhat, rhat = divmod(u[j + n] * BASE + u[j + n - 1], v_top)
        while qhat >= BASE or qhat * v_next > rhat * BASE + u[j + n - 2]:
            qhat -= 1
            rhat += v_top
            if rhat >= BASE:
                break

        # u[j..j+n] -= qhat * v
        borrow = 0
        carry = 0
        for i in range(n):
            product = qhat * v[i] + carry
            carry = product // BASE
            diff = u[i + j] - product % BASE - borrow
            if diff < 0:
                u[i + j] = diff + BASE
                borrow = 1
            else:
                u[i + j] = diff
                borrow = 0
        diff = u[j + n] - carry - borrow

        if diff < 0:
            # qhat на единицу больше: добавляем v обратно
            qhat -= 1
            carry = 0
            for i in range(n):
                total = u[i + j] + v[i] + carry
                if total >= BASE:
                    u[i + j] = total - BASE
                    carry = 1
                else:
                    u[i + j] = total
                    carry = 0
            diff = (diff + BASE + carry) % BASE
        u[j + n] = diff
        quotient[j] = qhat

    remainder, _ = _divmod_small(_normalize(u[:n]), factor)
    return _normalize(quotient), remainder


# =============================================================================
# BIG INTEGER
# =============================================================================


IntegerLike = Union["BigInteger", int]


@total_ordering
class BigInteger:
    """
    Неизменяемое знаковое целое произвольной точности.

    Поддерживает +, -, *, //, %, divmod, ** (неотрицательный показатель),
    унарные -, abs, сравнения и hash. Операнд int приводится через from_int.

    Examples:
        >>> str(BigInteger.from_digits("999999999999") + 1)
        '1000000000000'
        >>> divmod(BigInteger.from_int(-7), BigInteger.from_int(2))
        (BigInteger(-3), BigInteger(-1))
    """

    __slots__ = ("_sign", "_limbs")

    def __init__(self, limbs: Sequence[int] = (), sign: int = 1):
        magnitude = _normalize(list(limbs))
        if any(limb < 0 or limb >= BASE for limb in magnitude):
            raise ValueError("limbs must be in range [0, BASE)")
        if sign not in (-1, 0, 1):
            raise ValueError(f"sign must be -1, 0 or 1, got {sign}")
        self._limbs: Tuple[int, ...] = tuple(magnitude)
        self._sign = 0 if not magnitude else (sign or 1)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def _from_magnitude(cls, limbs: List[int], sign: int) -> "BigInteger":
        """Сборка из уже нормализованных limbs без повторной проверки"""
        result = cls.__new__(cls)
        result._limbs = tuple(limbs)
        result._sign = sign if limbs else 0
        return result

    @classmethod
    def from_int(cls, value: int) -> "BigInteger":
        """
        Создание из int интерпретатора.

        Args:
            value: Целое любого размера (bool не допускается)

        Raises:
            TypeError: Если value не int
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        sign = -1 if value < 0 else 1
        value = -value if value < 0 else value
        limbs = []
        while value:
            value, limb = divmod(value, BASE)
            limbs.append(limb)
        return cls._from_magnitude(limbs, sign)

    @classmethod
    def from_digits(cls, digits: str, negative: bool = False) -> "BigInteger":
        """
        Создание из строки десятичных цифр.

        Args:
            digits: Непустая строка из символов 0-9 (ведущие нули допустимы)
            negative: Отрицательный знак

        Raises:
            ValueError: Если строка пустая или содержит не-цифры
        """
        if not digits or not all("0" <= ch <= "9" for ch in digits):
            raise ValueError(f"invalid digit string: {digits!r}")
        limbs = []
        end = len(digits)
        while end > 0:
            start = max(0, end - LIMB_DIGITS)
            limbs.append(int(digits[start:end]))
            end = start
        return cls._from_magnitude(_normalize(limbs), -1 if negative else 1)

    @classmethod
    def zero(cls) -> "BigInteger":
        return cls._from_magnitude([], 0)

    @classmethod
    def one(cls) -> "BigInteger":
        return cls._from_magnitude([1], 1)

    @classmethod
    def power_of_ten(cls, exponent: int) -> "BigInteger":
        """10^exponent для exponent >= 0"""
        return cls.one().shift(exponent)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def sign(self) -> int:
        return self._sign

    @property
    def limbs(self) -> Tuple[int, ...]:
        return self._limbs

    def is_zero(self) -> bool:
        return self._sign == 0

    def is_negative(self) -> bool:
        return self._sign < 0

    def is_even(self) -> bool:
        return not self._limbs or self._limbs[0] % 2 == 0

    def digit_count(self) -> int:
        """Количество десятичных цифр модуля (1 для нуля)"""
        if not self._limbs:
            return 1
        return (len(self._limbs) - 1) * LIMB_DIGITS + len(str(self._limbs[-1]))

    def to_int(self) -> int:
        """Преобразование в int интерпретатора"""
        result = 0
        for limb in reversed(self._limbs):
            result = result * BASE + limb
        return -result if self._sign < 0 else result

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "BigInteger") -> "BigInteger":
        if self._sign == 0:
            return other
        if other._sign == 0:
            return self
        if self._sign == other._sign:
            return BigInteger._from_magnitude(
                _add_magnitudes(self._limbs, other._limbs), self._sign
            )
        order = _compare_magnitudes(self._limbs, other._limbs)
        if order == 0:
            return BigInteger.zero()
        if order > 0:
            return BigInteger._from_magnitude(
                _sub_magnitudes(self._limbs, other._limbs), self._sign
            )
        return BigInteger._from_magnitude(
            _sub_magnitudes(other._limbs, self._limbs), other._sign
        )

    def sub(self, other: "BigInteger") -> "BigInteger":
        return self.add(other.neg())

    def mul(self, other: "BigInteger") -> "BigInteger":
        return BigInteger._from_magnitude(
            _mul_magnitudes(self._limbs, other._limbs), self._sign * other._sign
        )

    def divmod(self, other: "BigInteger") -> Tuple["BigInteger", "BigInteger"]:
        """
        Деление с остатком с усечением к нулю.

        Частное имеет знак sign(a) * sign(b), остаток — знак делимого,
        так что a == q * b + r и |r| < |b|.

        Raises:
            ZeroDivisionError: Если делитель равен нулю
        """
        if other._sign == 0:
            raise ZeroDivisionError("BigInteger division by zero")
        quotient, remainder = _divmod_magnitudes(self._limbs, other._limbs)
        return (
            BigInteger._from_magnitude(quotient, self._sign * other._sign),
            BigInteger._from_magnitude(remainder, self._sign),
        )

    def neg(self) -> "BigInteger":
        return BigInteger._from_magnitude(list(self._limbs), -self._sign)

    def abs(self) -> "BigInteger":
        return BigInteger._from_magnitude(list(self._limbs), 1)

    def shift(self, places: int) -> "BigInteger":
        """
        Умножение на 10^places (places >= 0).

        Целые limbs добавляются сдвигом, остаток — умножением на малую степень.
        """
        if places < 0:
            raise ValueError(f"places must be non-negative, got {places}")
        if self._sign == 0 or places == 0:
            return self
        whole, partial = divmod(places, LIMB_DIGITS)
        limbs = _mul_small(self._limbs, _POWERS_OF_TEN[partial]) if partial else list(self._limbs)
        return BigInteger._from_magnitude([0] * whole + limbs, self._sign)

    def compare(self, other: "BigInteger") -> int:
        """Сравнение: -1, 0 или 1"""
        if self._sign != other._sign:
            return -1 if self._sign < other._sign else 1
        order = _compare_magnitudes(self._limbs, other._limbs)
        return order * self._sign if self._sign else 0

    # -------------------------------------------------------------------------
    # Протоколы Python
    # -------------------------------------------------------------------------

    @staticmethod
    def _coerce(value: object) -> "BigInteger":
        if isinstance(value, BigInteger):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return BigInteger.from_int(value)
        return NotImplemented  # type: ignore[return-value]

    def __add__(self, other: IntegerLike) -> "BigInteger":
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else self.add(other)

    __radd__ = __add__

    def __sub__(self, other: IntegerLike) -> "BigInteger":
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else self.sub(other)

    def __rsub__(self, other: IntegerLike) -> "BigInteger":
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else other.sub(self)

    def __mul__(self, other: IntegerLike) -> "BigInteger":
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else self.mul(other)

    __rmul__ = __mul__

    def __divmod__(self, other: IntegerLike) -> Tuple["BigInteger", "BigInteger"]:
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else self.divmod(other)

    def __floordiv__(self, other: IntegerLike) -> "BigInteger":
        """Частное с усечением к нулю (не floor, в отличие от int)"""
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else self.divmod(other)[0]

    def __mod__(self, other: IntegerLike) -> "BigInteger":
        """Остаток со знаком делимого (не делителя, в отличие от int)"""
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else self.divmod(other)[1]

    def __pow__(self, exponent: int) -> "BigInteger":
        """Возведение в неотрицательную целую степень (бинарное)"""
        if not isinstance(exponent, int) or exponent < 0:
            return NotImplemented
        result = BigInteger.one()
        base = self
        while exponent:
            if exponent & 1:
                result = result.mul(base)
            exponent >>= 1
            if exponent:
                base = base.mul(base)
        return result

    def __neg__(self) -> "BigInteger":
        return self.neg()

    def __abs__(self) -> "BigInteger":
        return self.abs()

    def __bool__(self) -> bool:
        return self._sign != 0

    def __eq__(self, other: object) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._sign == other._sign and self._limbs == other._limbs

    def __lt__(self, other: IntegerLike) -> bool:
        other = self._coerce(other)
        return NotImplemented if other is NotImplemented else self.compare(other) < 0

    def __hash__(self) -> int:
        # Согласован с hash(int) для равных значений
        return hash(self.to_int())

    def __str__(self) -> str:
        if not self._limbs:
            return "0"
        head = str(self._limbs[-1])
        tail = "".join(str(limb).zfill(LIMB_DIGITS) for limb in reversed(self._limbs[:-1]))
        return ("-" if self._sign < 0 else "") + head + tail

    def __repr__(self) -> str:
        return f"BigInteger({self})"
