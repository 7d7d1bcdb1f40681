"""
Integer Formatter — целое произвольной точности → канонические строки

- decimal: "-123" / "123"
- binary: "-0b1111011" (знак перед префиксом)
- hexadecimal: "-0x7B" (верхний регистр)

Без ведущих нулей; ноль всегда без знака: "0b0", "0", "0x0".
"""

from src.conversion.integer_parser import DECIMAL_CHUNK_DIGITS
from src.core.domain.integers import ConversionResult, SignedInteger


def int_to_decimal(magnitude: int) -> str:
    """Десятичная запись неотрицательного целого произвольной длины (блоками)."""
    chunk_base = 10**DECIMAL_CHUNK_DIGITS
    if magnitude < chunk_base:
        return str(magnitude)

    chunks: list[int] = []
    while magnitude:
        magnitude, remainder = divmod(magnitude, chunk_base)
        chunks.append(remainder)

    head = str(chunks[-1])
    tail = "".join(str(chunk).zfill(DECIMAL_CHUNK_DIGITS) for chunk in reversed(chunks[:-1]))
    return head + tail


def format_decimal(value: SignedInteger) -> str:
    return value.sign + int_to_decimal(value.magnitude)


def format_binary(value: SignedInteger) -> str:
    return f"{value.sign}0b{value.magnitude:b}"


def format_hexadecimal(value: SignedInteger) -> str:
    return f"{value.sign}0x{value.magnitude:X}"


def format_all(value: SignedInteger) -> ConversionResult:
    """Три канонических представления одного целого."""
    return ConversionResult(
        binary=format_binary(value),
        decimal=format_decimal(value),
        hexadecimal=format_hexadecimal(value),
    )
