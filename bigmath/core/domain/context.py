"""
PrecisionContext — Контекст точности вычислений

Immutable Pydantic модель, определяющая:
- decimal_places: рабочую точность по умолчанию для divide и sqrt
- rounding: режим округления (по умолчанию HALF_UP, половина от нуля)
- positive/negative_exponent_threshold: пороги научной нотации
  (хранятся для вызывающего кода, вывод всегда в обычной нотации)
- лимиты ресурсов, задаваемые вызывающим кодом

Контекст передаётся в каждый оператор явно (context=...). Если он не
передан, берётся scoped override из local_context(), затем процессный
default, установленный configure().

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Контекст неизменяем: операторы никогда не мутируют общее состояние
2. local_context() всегда восстанавливает предыдущее значение, в том числе
   при исключении
3. Override хранится в ContextVar и не разделяется между потоками
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from enum import Enum
from typing import Any, Final, Iterator, Mapping, Optional, Union

from pydantic import BaseModel, Field, ValidationError, model_validator

from bigmath.core.contracts.validators import validate_precision_context
from bigmath.core.errors import InvalidConfiguration, InvalidDecimalPlaces, operation

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Рабочая точность divide/sqrt по умолчанию
DEFAULT_DECIMAL_PLACES: Final[int] = 20

# Верхняя граница количества знаков после точки
MAX_DECIMAL_PLACES: Final[int] = 1_000_000

# Пороги научной нотации по умолчанию
DEFAULT_POSITIVE_EXPONENT_THRESHOLD: Final[int] = 21
DEFAULT_NEGATIVE_EXPONENT_THRESHOLD: Final[int] = -7

# Значения configure() без аргументов
CONFIGURE_PRECISION_DEFAULT: Final[int] = 1000
CONFIGURE_EXPONENT_THRESHOLD: Final[int] = 1000

# Имя операции в сообщениях об ошибках конфигурации
CONFIGURATION_OPERATION: Final[str] = "Configuration"


# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(str, Enum):
    """
    Режим округления.

    Все режимы симметричны относительно нуля.
    """

    DOWN = "DOWN"  # усечение к нулю
    HALF_UP = "HALF_UP"  # половина от нуля
    HALF_EVEN = "HALF_EVEN"  # половина к чётному
    UP = "UP"  # от нуля


# =============================================================================
# PRECISION CONTEXT
# =============================================================================


class PrecisionContext(BaseModel):
    """
    Контекст точности.

    Immutable модель (frozen=True). Лимиты ресурсов со значением None
    не ограничивают вычисление.
    """

    decimal_places: int = Field(
        DEFAULT_DECIMAL_PLACES,
        ge=0,
        le=MAX_DECIMAL_PLACES,
        description="Знаков после точки по умолчанию для divide/sqrt",
    )
    rounding: RoundingMode = Field(RoundingMode.HALF_UP, description="Режим округления")
    positive_exponent_threshold: int = Field(
        DEFAULT_POSITIVE_EXPONENT_THRESHOLD,
        ge=0,
        description="Порядок, начиная с которого уместна научная нотация",
    )
    negative_exponent_threshold: int = Field(
        DEFAULT_NEGATIVE_EXPONENT_THRESHOLD,
        le=0,
        description="Отрицательный порядок, начиная с которого уместна научная нотация",
    )

    # Лимиты ресурсов
    max_decimal_places: int = Field(
        MAX_DECIMAL_PLACES,
        ge=0,
        le=MAX_DECIMAL_PLACES,
        description="Максимум запрашиваемых знаков после точки",
    )
    max_factorial_argument: Optional[int] = Field(
        None, ge=0, description="Максимальный аргумент factorial"
    )
    max_exponent: Optional[int] = Field(
        None, ge=0, description="Максимальный модуль показателя pow"
    )
    max_sqrt_iterations: Optional[int] = Field(
        None, gt=0, description="Ограничение итераций sqrt (иначе вычисляется)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_places_within_limit(self) -> "PrecisionContext":
        """Проверка, что decimal_places <= max_decimal_places"""
        if self.decimal_places > self.max_decimal_places:
            raise ValueError(
                f"decimal_places {self.decimal_places} must be <= "
                f"max_decimal_places {self.max_decimal_places}"
            )
        return self

    def with_overrides(self, **changes: Any) -> "PrecisionContext":
        """
        Новый контекст с заменой полей (с валидацией).

        Raises:
            InvalidConfiguration: Если результат не проходит валидацию
        """
        return _build_context({**self.model_dump(), **changes})

    def resolve_places(self, decimal_places: Optional[int]) -> int:
        """
        Проверка запрошенного количества знаков после точки.

        Args:
            decimal_places: Запрошенное значение или None (берётся из контекста)

        Returns:
            Проверенное количество знаков

        Raises:
            InvalidDecimalPlaces: Если значение не int, отрицательное или
                превышает max_decimal_places
        """
        if decimal_places is None:
            return self.decimal_places
        if isinstance(decimal_places, bool) or not isinstance(decimal_places, int):
            raise InvalidDecimalPlaces(
                f"Decimal places must be an integer, got {decimal_places!r}"
            )
        if decimal_places < 0 or decimal_places > self.max_decimal_places:
            raise InvalidDecimalPlaces(
                f"Decimal places must be in [0, {self.max_decimal_places}], "
                f"got {decimal_places}"
            )
        return decimal_places


def _build_context(data: Mapping[str, Any]) -> PrecisionContext:
    """Создание контекста с переводом ValidationError в InvalidConfiguration"""
    try:
        return PrecisionContext(**data)
    except ValidationError as e:
        raise InvalidConfiguration(f"Invalid precision context: {e}") from e


# =============================================================================
# ПРОЦЕССНЫЙ DEFAULT И SCOPED OVERRIDE
# =============================================================================

_default_context: PrecisionContext = PrecisionContext()

_context_override: ContextVar[Optional[PrecisionContext]] = ContextVar(
    "bigmath_context_override", default=None
)


def get_default_context() -> PrecisionContext:
    """Текущий процессный контекст по умолчанию"""
    return _default_context


def get_context() -> PrecisionContext:
    """Действующий контекст: scoped override или процессный default"""
    override = _context_override.get()
    return override if override is not None else _default_context


def resolve_context(context: Optional[PrecisionContext] = None) -> PrecisionContext:
    """
    Контекст для одного вызова оператора.

    Порядок: явный аргумент → local_context() → configure().
    """
    if context is None:
        return get_context()
    if not isinstance(context, PrecisionContext):
        raise InvalidConfiguration(
            f"context must be a PrecisionContext, got {type(context).__name__}"
        )
    return context


@operation(CONFIGURATION_OPERATION)
def configure(
    precision: Union[int, PrecisionContext, Mapping[str, Any]] = CONFIGURE_PRECISION_DEFAULT,
    *,
    rounding: RoundingMode = RoundingMode.HALF_UP,
    positive_exponent_threshold: int = CONFIGURE_EXPONENT_THRESHOLD,
    negative_exponent_threshold: int = -CONFIGURE_EXPONENT_THRESHOLD,
) -> PrecisionContext:
    """
    Установка процессного контекста по умолчанию.

    Значение заменяется атомарно; уже выполняющиеся вызовы продолжают
    работать со своим контекстом.

    Args:
        precision: Количество знаков по умолчанию, готовый PrecisionContext
            или mapping (валидируется по JSON Schema контракту)
        rounding: Режим округления (для int precision)
        positive_exponent_threshold: Порог научной нотации (для int precision)
        negative_exponent_threshold: Порог научной нотации (для int precision)

    Returns:
        Установленный контекст

    Raises:
        InvalidConfiguration: Если конфигурация невалидна

    Examples:
        >>> configure(50).decimal_places
        50
    """
    global _default_context

    if isinstance(precision, PrecisionContext):
        new_context = precision
    elif isinstance(precision, Mapping):
        new_context = _build_context(validate_precision_context(dict(precision)))
    elif isinstance(precision, int) and not isinstance(precision, bool):
        new_context = _build_context(
            {
                "decimal_places": precision,
                "rounding": rounding,
                "positive_exponent_threshold": positive_exponent_threshold,
                "negative_exponent_threshold": negative_exponent_threshold,
            }
        )
    else:
        raise InvalidConfiguration(
            f"precision must be an int, mapping or PrecisionContext, got {precision!r}"
        )

    _default_context = new_context
    logger.debug("Default precision context configured: %s", new_context)
    return new_context


def reset_default_context() -> PrecisionContext:
    """Возврат процессного контекста к значениям по умолчанию"""
    global _default_context
    _default_context = PrecisionContext()
    return _default_context


@contextmanager
def local_context(
    context: Optional[PrecisionContext] = None, **changes: Any
) -> Iterator[PrecisionContext]:
    """
    Scoped override контекста.

    Действует в текущем потоке/задаче до выхода из блока, затем
    восстанавливает предыдущее значение на любом пути выхода.

    Args:
        context: Базовый контекст (по умолчанию действующий)
        **changes: Поля для замены

    Yields:
        Установленный контекст

    Examples:
        >>> with local_context(decimal_places=4):
        ...     divide("1", "3")
        '0.3333'
    """
    try:
        scoped = resolve_context(context)
        if changes:
            scoped = scoped.with_overrides(**changes)
    except InvalidConfiguration as e:
        raise e.with_operation(CONFIGURATION_OPERATION) from e
    token = _context_override.set(scoped)
    try:
        yield scoped
    finally:
        _context_override.reset(token)
