"""
Contracts — JSON Schema валидация внешних контрактов ядра.
"""

from .validators import (
    CONVERSION_RESULT_SCHEMA,
    SCHEMA_DIR,
    contract_violations,
    conversion_result_validator,
    load_schema,
    validate_conversion_result,
)

__all__ = [
    "CONVERSION_RESULT_SCHEMA",
    "SCHEMA_DIR",
    "contract_violations",
    "conversion_result_validator",
    "load_schema",
    "validate_conversion_result",
]
