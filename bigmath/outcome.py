"""
Outcome — Типизированный результат оператора

Альтернатива исключениям для вызывающего кода, которому нужно ветвиться
по виду ошибки без разбора строк:

    outcome = attempt(divide, "1", "0")
    if outcome.error_kind == ErrorKind.DIVISION_BY_ZERO:
        ...

Immutable Pydantic модель. Перехватываются только ошибки BigMath;
прочие исключения пропагируют.
"""

from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, Field

from bigmath.core.domain.context import PrecisionContext
from bigmath.core.errors import BigMathError, ErrorKind

OutcomeValue = Union[str, int, PrecisionContext]


class Outcome(BaseModel):
    """Результат вызова оператора: значение или вид ошибки"""

    ok: bool = Field(..., description="Вызов завершился без ошибки")
    value: Optional[OutcomeValue] = Field(
        None, description="Результат оператора (PrecisionContext для configure)"
    )
    error_kind: Optional[ErrorKind] = Field(None, description="Вид ошибки")
    message: Optional[str] = Field(None, description="Сообщение ошибки")

    model_config = {"frozen": True}

    @classmethod
    def success(cls, value: OutcomeValue) -> "Outcome":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: BigMathError) -> "Outcome":
        return cls(ok=False, error_kind=error.kind, message=str(error))


def attempt(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Outcome:
    """
    Вызов оператора с упаковкой результата в Outcome.

    Args:
        func: Оператор BigMath (add, divide, ...)
        *args: Позиционные аргументы оператора
        **kwargs: Именованные аргументы оператора

    Returns:
        Outcome(ok=True, value=...) или Outcome(ok=False, error_kind=...)
    """
    try:
        value = func(*args, **kwargs)
    except BigMathError as e:
        return Outcome.failure(e)
    return Outcome.success(value)
