"""
Integers — модели конвертации целых чисел между основаниями

- BaseSelector: выбор основания входа (auto / 2 / 10 / 16)
- SignedInteger: знак + беззнаковая величина произвольной точности
- ConversionResult: три канонических представления одного целого

ConversionResult — immutable Pydantic модель, совместимая с
contracts/schema/conversion_result.json.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field

from src.core.contracts.validators import validate_conversion_result


# =============================================================================
# ENUMS
# =============================================================================


class BaseSelector(str, Enum):
    """
    Основание входного числа.

    Значения совпадают со значениями выпадающего списка интерфейса:
    "auto", "2", "10", "16".
    """

    AUTO = "auto"
    BASE2 = "2"
    BASE10 = "10"
    BASE16 = "16"

    @classmethod
    def coerce(cls, value: "BaseSelector | str | int") -> "BaseSelector":
        """
        Приведение произвольного представления к BaseSelector.

        Examples:
            >>> BaseSelector.coerce(16)
            <BaseSelector.BASE16: '16'>
            >>> BaseSelector.coerce("Auto")
            <BaseSelector.AUTO: 'auto'>

        Raises:
            ValueError: Если значение не соответствует ни одному основанию
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Unsupported base selector: {value!r}")
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unsupported base selector: {value!r}")

    @property
    def radix(self) -> int | None:
        """Числовое основание; None для AUTO"""
        if self is BaseSelector.AUTO:
            return None
        return int(self.value)


# =============================================================================
# SIGNED INTEGER
# =============================================================================


@dataclass(frozen=True)
class SignedInteger:
    """
    Целое произвольной точности: знак отдельно от величины.

    Инвариант: ноль никогда не отрицательный.
    """

    negative: bool
    magnitude: int

    def __post_init__(self) -> None:
        if self.magnitude < 0:
            raise ValueError(f"magnitude must be non-negative, got {self.magnitude}")
        if self.magnitude == 0 and self.negative:
            object.__setattr__(self, "negative", False)

    @classmethod
    def from_int(cls, value: int) -> "SignedInteger":
        return cls(negative=value < 0, magnitude=abs(value))

    @property
    def sign(self) -> str:
        """Символ знака для вывода: "-" или пустая строка"""
        return "-" if self.negative else ""

    def __int__(self) -> int:
        return -self.magnitude if self.negative else self.magnitude


# =============================================================================
# CONVERSION RESULT
# =============================================================================

# Ноль без знака, ненулевые значения без ведущих нулей
BINARY_PATTERN: Final[str] = r"^(0b0|-?0b1[01]*)$"
DECIMAL_PATTERN: Final[str] = r"^(0|-?[1-9][0-9]*)$"
HEXADECIMAL_PATTERN: Final[str] = r"^(0x0|-?0x[1-9A-F][0-9A-F]*)$"


class ConversionResult(BaseModel):
    """
    Результат конвертации: одно целое в трёх канонических формах.

    Знак стоит перед префиксом основания, hex в верхнем регистре,
    без ведущих нулей.
    """

    binary: str = Field(..., pattern=BINARY_PATTERN, description="Двоичная форма, 0b-префикс")
    decimal: str = Field(..., pattern=DECIMAL_PATTERN, description="Десятичная форма")
    hexadecimal: str = Field(
        ..., pattern=HEXADECIMAL_PATTERN, description="Шестнадцатеричная форма, 0x-префикс"
    )

    model_config = {"frozen": True}

    @property
    def is_negative(self) -> bool:
        return self.decimal.startswith("-")

    def to_contract(self) -> dict[str, str]:
        """
        Словарь для conversion_result контракта.

        Raises:
            jsonschema.ValidationError: Если словарь не соответствует схеме
        """
        payload = self.model_dump(mode="json")
        validate_conversion_result(payload)
        return payload
