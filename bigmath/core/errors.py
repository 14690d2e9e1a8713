"""
Errors — Типизированные ошибки BigMath

Каждый публичный оператор проверяет свои предусловия до вычисления и
завершается одной конкретной ошибкой. Ошибки несут:
- kind: ErrorKind (для ветвления без разбора строк)
- operation: имя операции ("Division", "Power", ...)
- cause: описание причины

Формат сообщения: "<Operation> error: <cause>",
например "Division error: Division by zero".

Исключения нижележащих слоёв (ZeroDivisionError из integer core) наружу
не выходят, а переформулируются в один из доменных видов.
"""

from enum import Enum
from functools import wraps
from typing import Any, Callable, ClassVar, Dict, Optional, TypeVar

T = TypeVar("T")


# =============================================================================
# ERROR KINDS
# =============================================================================


class ErrorKind(str, Enum):
    """Вид ошибки оператора"""

    INVALID_NUMBER_FORMAT = "InvalidNumberFormat"
    DIVISION_BY_ZERO = "DivisionByZero"
    MODULO_BY_ZERO = "ModuloByZero"
    INVALID_EXPONENT = "InvalidExponent"
    NEGATIVE_SQRT = "NegativeSqrt"
    INVALID_FACTORIAL_ARGUMENT = "InvalidFactorialArgument"
    INVALID_DECIMAL_PLACES = "InvalidDecimalPlaces"
    CONVERGENCE_FAILURE = "ConvergenceFailure"
    RESOURCE_LIMIT_EXCEEDED = "ResourceLimitExceeded"
    INVALID_CONFIGURATION = "InvalidConfiguration"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigMathError(Exception):
    """
    Базовая ошибка BigMath.

    Подклассы фиксируют kind на уровне класса. operation проставляется
    декоратором @operation на границе публичного оператора.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, cause: str, operation: Optional[str] = None):
        super().__init__(cause)
        self.cause = cause
        self.operation = operation

    def __str__(self) -> str:
        if self.operation is None:
            return self.cause
        return f"{self.operation} error: {self.cause}"

    def with_operation(self, operation: str) -> "BigMathError":
        """Копия ошибки с проставленным именем операции"""
        return type(self)(self.cause, operation=operation)

    def to_dict(self) -> Dict[str, Any]:
        """Представление ошибки для логирования"""
        return {
            "error_type": self.__class__.__name__,
            "kind": self.kind.value,
            "operation": self.operation,
            "cause": self.cause,
            "message": str(self),
        }


class InvalidNumberFormat(BigMathError):
    """Операнд не является корректной десятичной записью"""

    kind = ErrorKind.INVALID_NUMBER_FORMAT


class DivisionByZero(BigMathError):
    """Делитель точно равен нулю"""

    kind = ErrorKind.DIVISION_BY_ZERO


class ModuloByZero(BigMathError):
    """Делитель остатка точно равен нулю"""

    kind = ErrorKind.MODULO_BY_ZERO


class InvalidExponent(BigMathError):
    """Показатель степени не является целым числом"""

    kind = ErrorKind.INVALID_EXPONENT


class NegativeSqrt(BigMathError):
    """Квадратный корень из отрицательного числа"""

    kind = ErrorKind.NEGATIVE_SQRT


class InvalidFactorialArgument(BigMathError):
    """Факториал определён только для неотрицательных целых"""

    kind = ErrorKind.INVALID_FACTORIAL_ARGUMENT


class InvalidDecimalPlaces(BigMathError):
    """Количество знаков после точки вне допустимого диапазона"""

    kind = ErrorKind.INVALID_DECIMAL_PLACES


class ConvergenceFailure(BigMathError):
    """
    Итерационный метод не сошёлся за отведённое число итераций.

    Возникает только при срабатывании защитного ограничения итераций
    в sqrt.
    """

    kind = ErrorKind.CONVERGENCE_FAILURE


class ResourceLimitExceeded(BigMathError):
    """Аргумент превышает лимит, заданный в PrecisionContext"""

    kind = ErrorKind.RESOURCE_LIMIT_EXCEEDED


class InvalidConfiguration(BigMathError):
    """Конфигурация контекста точности не прошла валидацию"""

    kind = ErrorKind.INVALID_CONFIGURATION


# =============================================================================
# DECORATOR
# =============================================================================


def operation(name: str) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Декоратор публичного оператора: проставляет префикс операции.

    Ошибка, уже помеченная другой операцией, пропускается без изменений.
    ZeroDivisionError из integer core переформулируется в DivisionByZero.

    Args:
        name: Имя операции для префикса сообщения

    Returns:
        Декоратор
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return func(*args, **kwargs)
            except BigMathError as exc:
                if exc.operation is not None:
                    raise
                raise exc.with_operation(name) from exc
            except ZeroDivisionError as exc:
                raise DivisionByZero("Division by zero", operation=name) from exc

        return wrapper

    return decorator
