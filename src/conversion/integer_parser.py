"""
Integer Parser — строка со знаком → целое произвольной точности

Режимы (BaseSelector):
- AUTO: 0b<bin> → 2, 0x<hex> → 16, <dec> → 10 (префиксы без учёта регистра)
- BASE2: необязательный 0b, затем только 0/1
- BASE16: необязательный 0x, затем только 0-9a-fA-F
- BASE10: только 0-9

Цифры — только ASCII. Длина не ограничена: десятичные строки разбираются
блоками по DECIMAL_CHUNK_DIGITS, поэтому лимит int/str интерпретатора
(sys.get_int_max_str_digits) никогда не отклоняет вход.
"""

from typing import Final

from src.core.domain.integers import BaseSelector, SignedInteger
from src.core.errors import (
    ConversionError,
    EmptyInputError,
    InvalidBinaryDigitError,
    InvalidDecimalDigitError,
    InvalidHexDigitError,
    UnrecognizedFormatError,
)

# =============================================================================
# CHARACTER CLASSES
# =============================================================================

BINARY_DIGITS: Final[frozenset[str]] = frozenset("01")
DECIMAL_DIGITS: Final[frozenset[str]] = frozenset("0123456789")
HEX_DIGITS: Final[frozenset[str]] = frozenset("0123456789abcdefABCDEF")

BINARY_PREFIX: Final[str] = "0b"
HEX_PREFIX: Final[str] = "0x"

# Размер блока десятичного разбора; меньше минимально допустимого
# значения лимита int/str (640 цифр)
DECIMAL_CHUNK_DIGITS: Final[int] = 500


# =============================================================================
# HELPERS
# =============================================================================


def is_numeral(body: str, digits: frozenset[str]) -> bool:
    """Непустая строка из символов заданного класса."""
    return bool(body) and all(ch in digits for ch in body)


def has_prefix(body: str, prefix: str) -> bool:
    return body[: len(prefix)].lower() == prefix


def split_sign(text: str) -> tuple[bool, str]:
    """Отделение необязательного ведущего "+"/"-".

    Returns:
        (negative, body)
    """
    if text[:1] in ("+", "-"):
        return text[0] == "-", text[1:]
    return False, text


def decimal_to_int(digits: str) -> int:
    """Разбор десятичной строки произвольной длины блоками."""
    value = 0
    for start in range(0, len(digits), DECIMAL_CHUNK_DIGITS):
        chunk = digits[start : start + DECIMAL_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def _magnitude(body: str, radix: int) -> int:
    if radix == 10:
        return decimal_to_int(body)
    # Основания-степени двойки не подпадают под лимит int/str
    return int(body, radix)


# =============================================================================
# PARSING
# =============================================================================


def _detect_auto(body: str) -> tuple[str, int]:
    if has_prefix(body, BINARY_PREFIX) and is_numeral(body[2:], BINARY_DIGITS):
        return body[2:], 2
    if has_prefix(body, HEX_PREFIX) and is_numeral(body[2:], HEX_DIGITS):
        return body[2:], 16
    if is_numeral(body, DECIMAL_DIGITS):
        return body, 10
    raise UnrecognizedFormatError()


# radix → (необязательный префикс, допустимые цифры, ошибка)
_EXPLICIT_FORMATS: Final[dict[int, tuple[str | None, frozenset[str], type[ConversionError]]]] = {
    2: (BINARY_PREFIX, BINARY_DIGITS, InvalidBinaryDigitError),
    10: (None, DECIMAL_DIGITS, InvalidDecimalDigitError),
    16: (HEX_PREFIX, HEX_DIGITS, InvalidHexDigitError),
}


def _validate_explicit(body: str, base: BaseSelector) -> tuple[str, int]:
    radix = base.radix
    prefix, digits, error = _EXPLICIT_FORMATS[radix]
    if prefix is not None and has_prefix(body, prefix):
        body = body[len(prefix) :]
    if not is_numeral(body, digits):
        raise error()
    return body, radix


def parse_integer(raw: str, base: BaseSelector | str | int = BaseSelector.AUTO) -> SignedInteger:
    """
    Разбор целого числа со знаком.

    Args:
        raw: Сырая строка (окружающие пробелы игнорируются)
        base: Основание или AUTO

    Returns:
        SignedInteger

    Raises:
        EmptyInputError: пустая строка после trim
        UnrecognizedFormatError: AUTO не распознал формат
        InvalidBinaryDigitError / InvalidHexDigitError / InvalidDecimalDigitError:
            недопустимые цифры для явно заданного основания
        ValueError: неизвестный селектор основания

    Examples:
        >>> int(parse_integer("0xFF"))
        255
        >>> int(parse_integer("-0b101"))
        -5
        >>> int(parse_integer("ff", 16))
        255
    """
    selector = BaseSelector.coerce(base)
    text = raw.strip()
    if not text:
        raise EmptyInputError()

    negative, body = split_sign(text)

    if selector is BaseSelector.AUTO:
        digits, radix = _detect_auto(body)
    else:
        digits, radix = _validate_explicit(body, selector)

    return SignedInteger(negative=negative, magnitude=_magnitude(digits, radix))
