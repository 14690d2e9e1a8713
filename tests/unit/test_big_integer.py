"""
Тесты для integer core (BigInteger)

Проверяет:
1. Конструирование из int и строки цифр (в том числе > 4300 цифр)
2. Сложение и вычитание с переносом между limbs
3. Умножение в столбик
4. Деление с остатком (усечение к нулю, знак остатка = знак делимого)
5. Сдвиг на степень десяти, сравнение, hash
"""

import pytest

from bigmath.core.math.integer import BASE, LIMB_DIGITS, BigInteger


def _truncated_divmod(a: int, b: int) -> tuple[int, int]:
    """Эталон: деление с усечением к нулю на int интерпретатора"""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


class TestConstruction:
    """Тесты конструкторов BigInteger"""

    def test_from_int_roundtrip(self) -> None:
        """from_int → to_int возвращает исходное значение"""
        for value in (0, 1, -1, BASE - 1, BASE, -(BASE + 1), 2**200, -(3**150)):
            assert BigInteger.from_int(value).to_int() == value

    def test_from_int_limbs(self) -> None:
        """Limbs хранятся little-endian в основании 10^9"""
        value = BigInteger.from_int(1_000_000_002_000_000_003)
        assert value.limbs == (3, 2, 1)
        assert value.sign == 1

    def test_zero_has_no_limbs(self) -> None:
        """Ноль: пустая magnitude и sign == 0"""
        for zero in (BigInteger.zero(), BigInteger.from_int(0), BigInteger.from_digits("000")):
            assert zero.limbs == ()
            assert zero.sign == 0
            assert zero.is_zero()
            assert str(zero) == "0"

    def test_from_digits(self) -> None:
        """Строка цифр с ведущими нулями"""
        value = BigInteger.from_digits("000123456789012345678901234567890")
        assert str(value) == "123456789012345678901234567890"

    def test_from_digits_negative(self) -> None:
        """Отрицательный знак"""
        assert str(BigInteger.from_digits("42", negative=True)) == "-42"
        # Отрицательный ноль невозможен
        assert BigInteger.from_digits("0", negative=True).sign == 0

    def test_from_digits_rejects_invalid(self) -> None:
        """Пустая строка и не-цифры отклоняются"""
        for bad in ("", "12a", "-1", "1.0", " 1"):
            with pytest.raises(ValueError, match="invalid digit string"):
                BigInteger.from_digits(bad)

    def test_from_int_rejects_non_int(self) -> None:
        """bool и float отклоняются"""
        with pytest.raises(TypeError):
            BigInteger.from_int(True)
        with pytest.raises(TypeError):
            BigInteger.from_int(1.0)  # type: ignore[arg-type]

    def test_invalid_limbs_rejected(self) -> None:
        """Limb вне [0, BASE) отклоняется"""
        with pytest.raises(ValueError, match="limbs must be in range"):
            BigInteger([BASE])
        with pytest.raises(ValueError, match="sign must be"):
            BigInteger([1], sign=2)

    def test_digits_beyond_interpreter_str_limit(self) -> None:
        """Числа длиннее 4300 цифр обрабатываются без int(str)"""
        digits = "7" + "0" * 5000 + "1"
        value = BigInteger.from_digits(digits)
        assert str(value) == digits
        assert value.digit_count() == 5002

    def test_digit_count(self) -> None:
        """Количество десятичных цифр"""
        assert BigInteger.zero().digit_count() == 1
        assert BigInteger.from_int(9).digit_count() == 1
        assert BigInteger.from_int(BASE).digit_count() == LIMB_DIGITS + 1
        assert BigInteger.from_int(-12345).digit_count() == 5


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestAddSub:
    """Тесты сложения и вычитания"""

    def test_carry_across_limbs(self) -> None:
        """Перенос через несколько limbs"""
        value = BigInteger.from_digits("999999999999999999") + 1
        assert str(value) == "1000000000000000000"

    def test_borrow_across_limbs(self) -> None:
        """Заём через несколько limbs"""
        value = BigInteger.from_int(10**27) - 1
        assert str(value) == "9" * 27

    def test_mixed_signs(self) -> None:
        """Сложение разных знаков сводится к вычитанию модулей"""
        pairs = [(5, -3), (-5, 3), (3, -5), (-3, 5), (10**20, -(10**20)), (-7, -8)]
        for a, b in pairs:
            assert (BigInteger.from_int(a) + BigInteger.from_int(b)).to_int() == a + b
            assert (BigInteger.from_int(a) - BigInteger.from_int(b)).to_int() == a - b

    def test_reflected_operators(self) -> None:
        """int слева от оператора"""
        assert (1 + BigInteger.from_int(2)).to_int() == 3
        assert (10 - BigInteger.from_int(2)).to_int() == 8
        assert (3 * BigInteger.from_int(4)).to_int() == 12


class TestMultiply:
    """Тесты умножения"""

    def test_matches_reference(self) -> None:
        """Умножение совпадает с эталоном"""
        a = 123456789123456789123456789
        b = 987654321987654321
        product = BigInteger.from_int(a) * BigInteger.from_int(b)
        assert str(product) == "121932631356500531469135800347203169112635269"

    def test_signs(self) -> None:
        """Знак произведения"""
        assert (BigInteger.from_int(-3) * 4).to_int() == -12
        assert (BigInteger.from_int(-3) * -4).to_int() == 12
        assert (BigInteger.from_int(-3) * 0).is_zero()

    def test_power(self) -> None:
        """Бинарное возведение в степень"""
        assert (BigInteger.from_int(2) ** 100).to_int() == 2**100
        assert (BigInteger.from_int(-3) ** 5).to_int() == -243
        assert (BigInteger.from_int(12345) ** 0).to_int() == 1


class TestDivmod:
    """Тесты деления с остатком"""

    @pytest.mark.parametrize(
        "a,b",
        [
            (7, 2),
            (-7, 2),
            (7, -2),
            (-7, -2),
            (10**40 - 1, 10**20 + 1),
            (2**300, 3**100),
            (-(2**300), 3**100),
            (BASE**3, BASE**2 - 1),
            (BASE**4 - 1, BASE**2 // 2 + 1),
            (10**50, 10**50),
            (10**49, 10**50),
            (123456789012345678901234, 987654321098765432109),
        ],
    )
    def test_matches_truncated_reference(self, a: int, b: int) -> None:
        """Частное и остаток совпадают с эталоном усечённого деления"""
        quotient, remainder = divmod(BigInteger.from_int(a), BigInteger.from_int(b))
        assert (quotient.to_int(), remainder.to_int()) == _truncated_divmod(a, b)

    def test_remainder_sign_follows_dividend(self) -> None:
        """Остаток имеет знак делимого (в отличие от int)"""
        assert (BigInteger.from_int(-7) % 3).to_int() == -1
        assert (BigInteger.from_int(7) % -3).to_int() == 1
        assert (BigInteger.from_int(-7) // 3).to_int() == -2

    def test_division_by_zero(self) -> None:
        """Деление на ноль → ZeroDivisionError"""
        with pytest.raises(ZeroDivisionError):
            divmod(BigInteger.from_int(1), BigInteger.zero())


# =============================================================================
# СДВИГ, СРАВНЕНИЕ, HASH
# =============================================================================


class TestShiftAndCompare:
    """Тесты сдвига и сравнения"""

    def test_shift(self) -> None:
        """Умножение на 10^places"""
        for places in (0, 1, 8, 9, 10, 27, 31):
            assert BigInteger.from_int(123).shift(places).to_int() == 123 * 10**places
        assert BigInteger.from_int(-5).shift(3).to_int() == -5000

    def test_shift_negative_rejected(self) -> None:
        """Отрицательный сдвиг отклоняется"""
        with pytest.raises(ValueError, match="places must be non-negative"):
            BigInteger.one().shift(-1)

    def test_power_of_ten(self) -> None:
        """10^n"""
        assert str(BigInteger.power_of_ten(20)) == "1" + "0" * 20

    def test_ordering(self) -> None:
        """Сортировка совпадает с int"""
        values = [5, -(10**30), 0, 10**30, -1, 999999999, 1000000000]
        ordered = sorted(BigInteger.from_int(v) for v in values)
        assert [v.to_int() for v in ordered] == sorted(values)

    def test_compare(self) -> None:
        """compare возвращает -1/0/1"""
        assert BigInteger.from_int(-2).compare(BigInteger.from_int(-3)) == 1
        assert BigInteger.from_int(2).compare(BigInteger.from_int(3)) == -1
        assert BigInteger.zero().compare(BigInteger.zero()) == 0

    def test_equality_and_hash_with_int(self) -> None:
        """Равные значения имеют равный hash"""
        assert BigInteger.from_int(5) == 5
        assert hash(BigInteger.from_int(5)) == hash(5)
        assert hash(BigInteger.from_int(-(10**30))) == hash(-(10**30))

    def test_parity(self) -> None:
        """Чётность по младшему limb"""
        assert BigInteger.from_int(10**18).is_even()
        assert not BigInteger.from_int(10**18 + 1).is_even()
        assert BigInteger.zero().is_even()

    def test_abs_and_neg(self) -> None:
        """Модуль и отрицание"""
        assert abs(BigInteger.from_int(-9)).to_int() == 9
        assert (-BigInteger.from_int(9)).to_int() == -9
        assert (-BigInteger.zero()).sign == 0
