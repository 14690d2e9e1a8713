"""
Тесты для ошибок, Outcome и фасада BigMath

Проверяет:
1. Формат сообщений "<Operation> error: <cause>" и поле kind
2. Декоратор operation: префикс, сохранение внутреннего префикса,
   переформулирование ZeroDivisionError
3. attempt/Outcome: значение или вид ошибки без разбора строк
4. BigMath: статические методы и синоним configure_big_js
"""

from typing import Iterator

import pytest
from pydantic import ValidationError

import bigmath
from bigmath import (
    BigMath,
    BigMathError,
    DivisionByZero,
    ErrorKind,
    InvalidNumberFormat,
    Outcome,
    PrecisionContext,
    attempt,
    divide,
    reset_default_context,
)
from bigmath.core.errors import operation


@pytest.fixture(autouse=True)
def restore_default_context() -> Iterator[None]:
    reset_default_context()
    yield
    reset_default_context()


# =============================================================================
# ERRORS
# =============================================================================


class TestErrorMessages:
    """Тесты формата ошибок"""

    @pytest.mark.parametrize(
        "call,kind,message",
        [
            (lambda: bigmath.divide("1", "0"), ErrorKind.DIVISION_BY_ZERO,
             "Division error: Division by zero"),
            (lambda: bigmath.mod("1", "0"), ErrorKind.MODULO_BY_ZERO,
             "Modulo error: Modulo by zero"),
            (lambda: bigmath.sqrt("-4"), ErrorKind.NEGATIVE_SQRT,
             "Square root error: Cannot calculate square root of negative number"),
            (lambda: bigmath.factorial(-1), ErrorKind.INVALID_FACTORIAL_ARGUMENT,
             "Factorial error: Factorial is defined only for non-negative integers"),
            (lambda: bigmath.add("1", "abc"), ErrorKind.INVALID_NUMBER_FORMAT,
             "Addition error: Invalid number: 'abc'"),
            (lambda: bigmath.pow("2", "0.5"), ErrorKind.INVALID_EXPONENT,
             "Power error: Exponent must be an integer, got '0.5'"),
        ],
    )
    def test_operator_errors(self, call, kind: ErrorKind, message: str) -> None:
        with pytest.raises(BigMathError) as exc_info:
            call()
        assert exc_info.value.kind == kind
        assert str(exc_info.value) == message

    def test_cause_and_operation_fields(self) -> None:
        with pytest.raises(DivisionByZero) as exc_info:
            divide("5", "0.000")
        assert exc_info.value.operation == "Division"
        assert exc_info.value.cause == "Division by zero"

    def test_to_dict(self) -> None:
        error = InvalidNumberFormat("Invalid number: 'x'", operation="Addition")
        assert error.to_dict() == {
            "error_type": "InvalidNumberFormat",
            "kind": "InvalidNumberFormat",
            "operation": "Addition",
            "cause": "Invalid number: 'x'",
            "message": "Addition error: Invalid number: 'x'",
        }

    def test_without_operation(self) -> None:
        error = InvalidNumberFormat("Invalid number: 'x'")
        assert str(error) == "Invalid number: 'x'"
        stamped = error.with_operation("Addition")
        assert isinstance(stamped, InvalidNumberFormat)
        assert str(stamped) == "Addition error: Invalid number: 'x'"
        assert error.operation is None


class TestOperationDecorator:
    """Тесты декоратора operation"""

    def test_outer_operation_keeps_inner_prefix(self) -> None:
        """Ошибка вложенного оператора не переименовывается"""

        @operation("Outer")
        def outer() -> str:
            return divide("1", "0")

        with pytest.raises(DivisionByZero, match="^Division error: "):
            outer()

    def test_zero_division_translated(self) -> None:
        @operation("Custom")
        def broken() -> int:
            return 1 // 0

        with pytest.raises(DivisionByZero, match="Custom error: Division by zero"):
            broken()

    def test_other_exceptions_propagate(self) -> None:
        @operation("Custom")
        def broken() -> None:
            raise KeyError("missing")

        with pytest.raises(KeyError):
            broken()

    def test_preserves_metadata(self) -> None:
        assert divide.__name__ == "divide"
        assert divide.__wrapped__.__name__ == "divide"  # type: ignore[attr-defined]


# =============================================================================
# OUTCOME
# =============================================================================


class TestOutcome:
    """Тесты attempt/Outcome"""

    def test_success(self) -> None:
        outcome = attempt(bigmath.add, "1", "2")
        assert outcome.ok
        assert outcome.value == "3"
        assert outcome.error_kind is None

    def test_success_with_int_value(self) -> None:
        outcome = attempt(bigmath.compare, "1", "2")
        assert outcome.value == -1
        assert isinstance(outcome.value, int)

    def test_keyword_arguments(self) -> None:
        outcome = attempt(bigmath.divide, "1", "3", decimal_places=2)
        assert outcome.value == "0.33"

    def test_failure(self) -> None:
        outcome = attempt(bigmath.divide, "1", "0")
        assert not outcome.ok
        assert outcome.value is None
        assert outcome.error_kind == ErrorKind.DIVISION_BY_ZERO
        assert outcome.message == "Division error: Division by zero"

    def test_configure_result(self) -> None:
        """configure возвращает PrecisionContext, attempt принимает его как значение"""
        outcome = attempt(bigmath.configure, 30)
        assert outcome.ok
        assert isinstance(outcome.value, PrecisionContext)
        assert outcome.value.decimal_places == 30

    def test_configure_failure(self) -> None:
        outcome = attempt(bigmath.configure, -1)
        assert not outcome.ok
        assert outcome.error_kind == ErrorKind.INVALID_CONFIGURATION
        assert outcome.message.startswith("Configuration error: ")

    def test_non_domain_errors_propagate(self) -> None:
        with pytest.raises(TypeError):
            attempt(bigmath.add, "1")

    def test_frozen(self) -> None:
        outcome = Outcome.success("1")
        with pytest.raises(ValidationError):
            outcome.value = "2"  # type: ignore[misc]


# =============================================================================
# FACADE
# =============================================================================


class TestBigMathFacade:
    """Тесты статического фасада"""

    def test_operators(self) -> None:
        assert BigMath.add("9999999999999999", "1") == "10000000000000000"
        assert BigMath.divide("10", "3", 4) == "3.3333"
        assert BigMath.pow("2", 10) == "1024"
        assert BigMath.factorial(5) == "120"
        assert BigMath.gcd("48", "18") == "6"
        assert BigMath.lcm("4", "6") == "12"
        assert BigMath.compare("1", "2") == -1
        assert BigMath.round("2.5") == "3"
        assert BigMath.abs("-1") == "1"
        assert BigMath.sqrt("4", 1) == "2.0"
        assert BigMath.subtract("1", "2") == "-1"
        assert BigMath.multiply("2", "3") == "6"
        assert BigMath.mod("7", "3") == "1"

    def test_configure_alias(self) -> None:
        BigMath.configure_big_js(3)
        assert BigMath.divide("1", "3") == "0.333"
        BigMath.configure(5)
        assert BigMath.divide("1", "3") == "0.33333"

    def test_module_exports(self) -> None:
        for name in bigmath.__all__:
            assert hasattr(bigmath, name), name
