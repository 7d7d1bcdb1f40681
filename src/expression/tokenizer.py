"""Tokenizer — нормализованная строка → последовательность токенов.

Сканирование слева направо:
- максимальная серия цифр и "." → NUMBER
- "(" / ")" → PAREN
- "+-*/" → OPERATOR с тем же символом, "%" → OPERATOR PERCENT
- максимальная серия букв → FUNCTION, если это sqrt (без учёта регистра)
"""

import math
from typing import Final

from src.core.domain.tokens import FunctionName, OperatorSymbol, Token
from src.core.errors import (
    InvalidNumberError,
    NumberOutOfRangeError,
    UnparseableExpressionError,
    UnsupportedFunctionError,
)
from src.expression.normalizer import DIGITS, OPERATOR_CHARS

NUMBER_CHARS: Final[frozenset[str]] = DIGITS | frozenset(".")


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _parse_number(raw: str) -> float:
    """Серия цифр/точек → конечный float.

    Некорректная серия ("1.2.3") не имеет числового значения и, как и
    переполнение ("1" * 400 → inf), считается выходом за диапазон.
    """
    if raw == ".":
        raise InvalidNumberError(f"Invalid number {raw!r}")
    try:
        value = float(raw)
    except ValueError:
        raise NumberOutOfRangeError(f"Number {raw!r} is out of range")
    if not math.isfinite(value):
        raise NumberOutOfRangeError(f"Number {raw!r} is out of range")
    return value


def tokenize(expression: str) -> list[Token]:
    """Разбор нормализованного выражения на токены.

    Args:
        expression: Результат normalize_expression

    Returns:
        Список токенов в порядке следования

    Raises:
        InvalidNumberError: серия из одной "."
        NumberOutOfRangeError: число не представимо конечным float
        UnsupportedFunctionError: серия букв, отличная от sqrt
        UnparseableExpressionError: любой другой символ
    """
    tokens: list[Token] = []
    i = 0
    length = len(expression)

    while i < length:
        ch = expression[i]

        if ch in NUMBER_CHARS:
            j = i + 1
            while j < length and expression[j] in NUMBER_CHARS:
                j += 1
            tokens.append(Token.number(_parse_number(expression[i:j])))
            i = j
            continue

        if ch == "(":
            tokens.append(Token.open_paren())
            i += 1
            continue

        if ch == ")":
            tokens.append(Token.close_paren())
            i += 1
            continue

        if ch in OPERATOR_CHARS:
            tokens.append(Token.operator(ch))
            i += 1
            continue

        if ch == "%":
            tokens.append(Token.operator(OperatorSymbol.PERCENT))
            i += 1
            continue

        if _is_letter(ch):
            j = i + 1
            while j < length and _is_letter(expression[j]):
                j += 1
            word = expression[i:j]
            if word.lower() != FunctionName.SQRT.value:
                raise UnsupportedFunctionError(f"Unsupported function {word!r}")
            tokens.append(Token.function(FunctionName.SQRT))
            i = j
            continue

        raise UnparseableExpressionError(f"Cannot parse expression at position {i}: {ch!r}")

    return tokens
