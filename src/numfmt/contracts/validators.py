"""
Number Format Contract

Валидация сериализованной конфигурации формата N(m.k) (например, из
JSON-файла настроек) по контракту schema/number_format.json.

Контракт проверяет типы и границы отдельных полей:
- precision: целое >= 1 (обязательное)
- scale: целое >= 0 (по умолчанию 0)
- only_positive: bool (по умолчанию false)

Перекрёстный инвариант scale < precision в JSON Schema не выражается
и проверяется при построении ValidatorConfig.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

from src.numfmt.domain.number_format import ValidatorConfig


NUMBER_FORMAT_SCHEMA_PATH: Final[Path] = Path(__file__).parent / "schema" / "number_format.json"


def load_number_format_schema(path: Path = NUMBER_FORMAT_SCHEMA_PATH) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация схемы number_format.

    Args:
        path: Путь к файлу схемы

    Returns:
        Схема как dict

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    if not path.exists():
        raise FileNotFoundError(f"Number format schema not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid number format schema {path.name}: {e.message}")

    return schema


# Схема загружается один раз при импорте
NUMBER_FORMAT_SCHEMA: Final[Dict[str, Any]] = load_number_format_schema()
_NUMBER_FORMAT_VALIDATOR: Final = Draft202012Validator(NUMBER_FORMAT_SCHEMA)


def validate_number_format(data: Dict[str, Any]) -> None:
    """
    Проверка данных number_format по контракту.

    Raises:
        ValidationError: Первое найденное нарушение контракта
    """
    _NUMBER_FORMAT_VALIDATOR.validate(data)


def load_validator_config(data: Dict[str, Any]) -> ValidatorConfig:
    """
    Построение ValidatorConfig из данных контракта number_format.

    Args:
        data: Данные (например, результат json.load)

    Returns:
        Immutable ValidatorConfig

    Raises:
        ValidationError: Если данные не соответствуют схеме
        ConfigurationError: Если scale >= precision
    """
    validate_number_format(data)

    # JSON Schema "integer" допускает 4.0
    return ValidatorConfig.create(
        precision=int(data["precision"]),
        scale=int(data.get("scale", 0)),
        only_positive=data.get("only_positive", False),
    )
