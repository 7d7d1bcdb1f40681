"""Integer base conversion — разбор и форматирование целых (2 / 10 / 16)."""

from .integer_formatter import (
    format_all,
    format_binary,
    format_decimal,
    format_hexadecimal,
    int_to_decimal,
)
from .integer_parser import (
    BINARY_DIGITS,
    DECIMAL_CHUNK_DIGITS,
    DECIMAL_DIGITS,
    HEX_DIGITS,
    decimal_to_int,
    parse_integer,
    split_sign,
)

__all__ = [
    # Parser
    "BINARY_DIGITS",
    "DECIMAL_CHUNK_DIGITS",
    "DECIMAL_DIGITS",
    "HEX_DIGITS",
    "decimal_to_int",
    "parse_integer",
    "split_sign",
    # Formatter
    "format_all",
    "format_binary",
    "format_decimal",
    "format_hexadecimal",
    "int_to_decimal",
]
