"""
JSON Schema Contract Validators

Внешний контракт результата конвертации. ConversionResult.to_contract()
проверяет по схеме каждый возвращаемый словарь.

Схемы (src/core/contracts/schema/):
- conversion_result.json — результат конвертации целого числа
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Final

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"
CONVERSION_RESULT_SCHEMA: Final[str] = "conversion_result"


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema (результат кэшируется).

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.is_file():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e
    return schema


@lru_cache(maxsize=None)
def conversion_result_validator() -> Draft202012Validator:
    return Draft202012Validator(load_schema(CONVERSION_RESULT_SCHEMA))


def contract_violations(data: dict[str, Any]) -> list[str]:
    """Все нарушения conversion_result контракта (пустой список — данные валидны)"""
    return [
        f"{'/'.join(str(p) for p in error.absolute_path) or '<root>'}: {error.message}"
        for error in conversion_result_validator().iter_errors(data)
    ]


def validate_conversion_result(data: dict[str, Any]) -> None:
    """
    Валидация conversion_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    conversion_result_validator().validate(data)
