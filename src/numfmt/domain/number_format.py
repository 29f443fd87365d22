"""
NumberFormat — Конфигурация формата числового значения N(m.k)

Формат описи документов, направляемых в налоговый орган в электронном виде:
формат числового значения указывается в виде N(m.k), где
- m — максимальное количество знаков в числе, включая знак (для
  отрицательного числа), целую и дробную часть без разделяющей точки;
- k — максимальное число знаков дробной части.
Если k == 0 (число целое), формат имеет вид N(m).

Модуль содержит:
- ValidatorConfig — immutable конфигурация (precision=m, scale=k, only_positive)
- Sign / ParsedNumber — разбор числа на знак, целую и дробную часть
- ConfigurationError — ошибка конфигурации валидатора

ИНВАРИАНТЫ:
1. precision > 0
2. 0 <= scale < precision
3. Нарушение инварианта обнаруживается при создании, не при валидации
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# CONSTANTS
# =============================================================================

# N(m), N(m.k), N(m,k)
NOTATION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"N\(([0-9]+)(?:[.,]([0-9]+))?\)", re.IGNORECASE
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ConfigurationError(ValueError):
    """
    Невалидная конфигурация валидатора числового формата.

    Неустранима для данной попытки создания: вызывающий код должен
    передать исправленные precision/scale и создать валидатор заново.

    Attributes:
        parameter: Имя параметра-нарушителя ("precision", "scale", "notation")
    """

    def __init__(self, parameter: str, message: str) -> None:
        self.parameter = parameter
        super().__init__(message)


# =============================================================================
# ПРОВЕРКА КОНФИГУРАЦИИ
# =============================================================================


def check_precision_scale(precision: int, scale: int) -> None:
    """
    Проверка пары (precision, scale).

    Порядок проверок:
    1. precision не int или <= 0 → ошибка precision
    2. scale не int, scale < 0 или scale >= precision → ошибка scale

    Args:
        precision: Максимальное количество знаков числа (m)
        scale: Максимальное количество знаков дробной части (k)

    Raises:
        ConfigurationError: Если пара не удовлетворяет инварианту
    """
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise ConfigurationError("precision", f"precision must be an integer, got {precision!r}")

    if isinstance(scale, bool) or not isinstance(scale, int):
        raise ConfigurationError("scale", f"scale must be an integer, got {scale!r}")

    if precision <= 0:
        raise ConfigurationError("precision", "precision must be a positive number")

    if scale < 0 or scale >= precision:
        raise ConfigurationError(
            "scale", "scale must be a non-negative number less than precision"
        )


def parse_notation(notation: str) -> tuple[int, int]:
    """
    Разбор записи формата N(m.k) / N(m,k) / N(m).

    Args:
        notation: Запись формата (например, 'N(10.2)' или 'N(5)')

    Returns:
        Пара (precision, scale); для N(m) scale = 0

    Raises:
        ConfigurationError: Если запись не соответствует формату

    Examples:
        >>> parse_notation("N(10.2)")
        (10, 2)
        >>> parse_notation("N(5)")
        (5, 0)
    """
    if not isinstance(notation, str):
        raise ConfigurationError("notation", f"notation must be a string, got {notation!r}")

    match = NOTATION_PATTERN.fullmatch(notation)
    if match is None:
        raise ConfigurationError("notation", f"invalid number format notation: {notation!r}")

    precision = int(match.group(1))
    scale = int(match.group(2)) if match.group(2) is not None else 0
    return precision, scale


# =============================================================================
# CONFIG MODEL
# =============================================================================


class ValidatorConfig(BaseModel):
    """
    Конфигурация валидатора формата N(m.k).

    Immutable модель (frozen=True): создаётся один раз и принадлежит
    экземпляру валидатора.
    """

    precision: int = Field(..., description="Максимум знаков числа, включая знак (m)")
    scale: int = Field(default=0, description="Максимум знаков дробной части (k)")
    only_positive: bool = Field(
        default=False, description="Запрет чисел с явным знаком '-'"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_limits(self) -> "ValidatorConfig":
        """Проверка инварианта precision > 0, 0 <= scale < precision."""
        check_precision_scale(self.precision, self.scale)
        return self

    @classmethod
    def create(
        cls, precision: int, scale: int = 0, only_positive: bool = False
    ) -> "ValidatorConfig":
        """
        Создание конфигурации с ошибками в виде ConfigurationError.

        В отличие от ValidatorConfig(...), который оборачивает ошибки в
        pydantic ValidationError, проверки выполняются здесь один раз,
        после чего модель строится без повторной валидации.

        Raises:
            ConfigurationError: Если precision/scale невалидны или
                only_positive не bool
        """
        check_precision_scale(precision, scale)
        if not isinstance(only_positive, bool):
            raise ConfigurationError(
                "only_positive", f"only_positive must be a boolean, got {only_positive!r}"
            )
        return cls.model_construct(
            precision=precision, scale=scale, only_positive=only_positive
        )

    @classmethod
    def from_notation(cls, notation: str, only_positive: bool = False) -> "ValidatorConfig":
        """
        Создание конфигурации из записи N(m.k).

        Raises:
            ConfigurationError: Если запись или значения m, k невалидны
        """
        precision, scale = parse_notation(notation)
        return cls.create(precision, scale, only_positive)

    @property
    def notation(self) -> str:
        """Запись формата: N(m) для целых, иначе N(m.k)."""
        if self.scale == 0:
            return f"N({self.precision})"
        return f"N({self.precision}.{self.scale})"


# =============================================================================
# PARSED NUMBER
# =============================================================================


class Sign(str, Enum):
    """Знак числа (значение — токен во входной строке)"""

    NONE = ""
    PLUS = "+"
    MINUS = "-"


@dataclass(frozen=True)
class ParsedNumber:
    """Разбор числа: знак, цифры целой части, цифры дробной части."""

    sign: Sign
    integer_digits: str
    fractional_digits: str = ""

    @property
    def int_len(self) -> int:
        """Знак и целая часть."""
        return len(self.sign.value) + len(self.integer_digits)

    @property
    def frac_len(self) -> int:
        """Дробная часть."""
        return len(self.fractional_digits)

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.MINUS
