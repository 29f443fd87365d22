"""
Contract Validation Module

Модуль для валидации JSON контракта конфигурации формата N(m.k).
"""

from .validators import (
    NUMBER_FORMAT_SCHEMA,
    NUMBER_FORMAT_SCHEMA_PATH,
    load_number_format_schema,
    load_validator_config,
    validate_number_format,
)

__all__ = [
    # Constants
    "NUMBER_FORMAT_SCHEMA",
    "NUMBER_FORMAT_SCHEMA_PATH",
    # Functions
    "load_number_format_schema",
    "validate_number_format",
    "load_validator_config",
]
