"""
Валидация числовых значений формата N(m.k).
"""

from src.numfmt.validation.number_validator import (
    NUMBER_PATTERN,
    CheckReason,
    NumberCheckResult,
    NumberValidator,
    parse_number,
)

__all__ = [
    "NUMBER_PATTERN",
    "CheckReason",
    "NumberCheckResult",
    "NumberValidator",
    "parse_number",
]
