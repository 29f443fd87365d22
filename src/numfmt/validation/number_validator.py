"""
NumberValidator — Валидация числовых значений формата N(m.k)

Проверяет, что строковое значение соответствует формату:
- необязательный знак (+ или -)
- целая часть: одна или более цифр
- необязательная дробная часть: разделитель (. или ,) и одна или более цифр

Далее проверяются ограничения конфигурации:
- знак + целая часть + дробная часть <= precision
- дробная часть <= scale
- знак '-' запрещён при only_positive

Результат валидации — bool. Невалидное значение не является ошибкой:
is_valid_number никогда не бросает исключений.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional

from src.numfmt.domain.number_format import ParsedNumber, Sign, ValidatorConfig, parse_notation

logger = logging.getLogger(__name__)


# =============================================================================
# PATTERN
# =============================================================================

# Только ASCII цифры; сопоставление со всей строкой (fullmatch).
# IGNORECASE не влияет на допустимый алфавит, но сохраняется как опция.
NUMBER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"([+-]?)([0-9]+)(?:[.,]([0-9]+))?", re.IGNORECASE
)


def parse_number(value: Optional[str]) -> Optional[ParsedNumber]:
    """
    Лексический разбор значения.

    Args:
        value: Входная строка

    Returns:
        ParsedNumber или None, если значение не соответствует формату

    Examples:
        >>> parse_number("-12,5")
        ParsedNumber(sign=<Sign.MINUS: '-'>, integer_digits='12', fractional_digits='5')
        >>> parse_number("1..2") is None
        True
    """
    if not isinstance(value, str) or not value:
        return None

    match = NUMBER_PATTERN.fullmatch(value)
    if match is None:
        return None

    return ParsedNumber(
        sign=Sign(match.group(1)),
        integer_digits=match.group(2),
        fractional_digits=match.group(3) or "",
    )


# =============================================================================
# RESULT
# =============================================================================


class CheckReason(str, Enum):
    """Причина решения валидатора"""

    OK = "ok"
    EMPTY = "empty"
    MALFORMED = "malformed"
    PRECISION_EXCEEDED = "precision_exceeded"
    SCALE_EXCEEDED = "scale_exceeded"
    NEGATIVE_NOT_ALLOWED = "negative_not_allowed"


@dataclass(frozen=True)
class NumberCheckResult:
    """Результат проверки значения."""

    is_valid: bool
    reason: CheckReason

    # Длины частей числа (0, если значение не разобрано)
    int_len: int
    frac_len: int

    # Детали
    details: str


# =============================================================================
# VALIDATOR
# =============================================================================


class NumberValidator:
    """
    Валидатор числовых значений формата N(m.k).

    Порядок проверок:
    1. Пустое значение / None → False
    2. Несоответствие формату → False
    3. int_len + frac_len > precision → False
    4. frac_len > scale → False
    5. only_positive и знак '-' → False

    Экземпляр immutable и не хранит состояния между вызовами.
    """

    def __init__(self, precision: int, scale: int = 0, only_positive: bool = False):
        """
        Инициализация валидатора.

        Args:
            precision: Максимум знаков числа, включая знак (m)
            scale: Максимум знаков дробной части (k)
            only_positive: Запрет отрицательных чисел

        Raises:
            ConfigurationError: Если precision <= 0, scale вне [0, precision)
                или only_positive не bool
        """
        self._config = ValidatorConfig.create(precision, scale, only_positive)
        logger.debug("NumberValidator created: %s", self._config.notation)

    @classmethod
    def from_config(cls, config: ValidatorConfig) -> "NumberValidator":
        return cls(config.precision, config.scale, config.only_positive)

    @classmethod
    def from_notation(cls, notation: str, only_positive: bool = False) -> "NumberValidator":
        """
        Создание валидатора из записи формата ('N(10.2)', 'N(5)').

        Raises:
            ConfigurationError: Если запись невалидна
        """
        precision, scale = parse_notation(notation)
        return cls(precision, scale, only_positive)

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    @property
    def precision(self) -> int:
        return self._config.precision

    @property
    def scale(self) -> int:
        return self._config.scale

    @property
    def only_positive(self) -> bool:
        return self._config.only_positive

    def __repr__(self) -> str:
        return (
            f"NumberValidator({self._config.notation}, "
            f"only_positive={self._config.only_positive})"
        )

    def check(self, value: Optional[str]) -> NumberCheckResult:
        """
        Проверка значения с указанием причины решения.

        Args:
            value: Проверяемая строка (None допустим)

        Returns:
            NumberCheckResult с первой сработавшей причиной отказа или OK
        """
        if not isinstance(value, str) or not value:
            return NumberCheckResult(
                is_valid=False,
                reason=CheckReason.EMPTY,
                int_len=0,
                frac_len=0,
                details="Value is empty",
            )

        parsed = parse_number(value)
        if parsed is None:
            return self._reject(
                CheckReason.MALFORMED, 0, 0, f"Value {value!r} does not match number format"
            )

        int_len = parsed.int_len
        frac_len = parsed.frac_len

        if int_len + frac_len > self.precision:
            return self._reject(
                CheckReason.PRECISION_EXCEEDED,
                int_len,
                frac_len,
                f"Length {int_len + frac_len} exceeds precision {self.precision}",
            )

        if frac_len > self.scale:
            return self._reject(
                CheckReason.SCALE_EXCEEDED,
                int_len,
                frac_len,
                f"Fractional length {frac_len} exceeds scale {self.scale}",
            )

        if self.only_positive and parsed.is_negative:
            return self._reject(
                CheckReason.NEGATIVE_NOT_ALLOWED,
                int_len,
                frac_len,
                "Negative numbers are not allowed",
            )

        return NumberCheckResult(
            is_valid=True,
            reason=CheckReason.OK,
            int_len=int_len,
            frac_len=frac_len,
            details=f"Value matches {self._config.notation}",
        )

    def is_valid_number(self, value: Optional[str]) -> bool:
        """
        Проверка соответствия значения формату N(m.k).

        Args:
            value: Проверяемая строка (None допустим)

        Returns:
            True если значение валидно, False иначе (никогда не бросает)
        """
        return self.check(value).is_valid

    def _reject(
        self, reason: CheckReason, int_len: int, frac_len: int, details: str
    ) -> NumberCheckResult:
        logger.debug("Number rejected (%s): %s", reason.value, details)
        return NumberCheckResult(
            is_valid=False,
            reason=reason,
            int_len=int_len,
            frac_len=frac_len,
            details=details,
        )
