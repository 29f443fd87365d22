"""
Domain models: конфигурация формата N(m.k) и разбор числа.
"""

from src.numfmt.domain.number_format import (
    NOTATION_PATTERN,
    ConfigurationError,
    ParsedNumber,
    Sign,
    ValidatorConfig,
    check_precision_scale,
    parse_notation,
)

__all__ = [
    # Constants
    "NOTATION_PATTERN",
    # Exceptions
    "ConfigurationError",
    # Models
    "ValidatorConfig",
    "ParsedNumber",
    "Sign",
    # Functions
    "check_precision_scale",
    "parse_notation",
]
