"""
Tokens — типизированные токены арифметического выражения

Токен — неизменяемый tagged variant:
- NUMBER: value (конечный float)
- OPERATOR: symbol из закрытого алфавита OperatorSymbol
- FUNCTION: name из FunctionName (только sqrt)
- PAREN: kind из ParenKind

Одна и та же модель используется и как вход парсера (инфиксная
последовательность), и как его выход (постфиксная последовательность).
"""

import math
from dataclasses import dataclass
from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class TokenKind(str, Enum):
    """Тип токена"""

    NUMBER = "number"
    OPERATOR = "operator"
    FUNCTION = "function"
    PAREN = "paren"


class OperatorSymbol(str, Enum):
    """
    Алфавит операторов.

    UNARY_MINUS синтезируется парсером из "-", токенизатор его не выдаёт.
    """

    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    UNARY_MINUS = "u-"
    PERCENT = "%"


class FunctionName(str, Enum):
    SQRT = "sqrt"


class ParenKind(str, Enum):
    OPEN = "("
    CLOSE = ")"


# =============================================================================
# TOKEN
# =============================================================================


@dataclass(frozen=True)
class Token:
    """Токен выражения. Создавать через фабрики number/operator/function/paren."""

    kind: TokenKind
    value: float | None = None
    symbol: OperatorSymbol | None = None
    name: FunctionName | None = None
    paren: ParenKind | None = None

    def __post_init__(self) -> None:
        if self.kind == TokenKind.NUMBER:
            if self.value is None or not math.isfinite(self.value):
                raise ValueError(f"Number token requires a finite value, got {self.value}")
        elif self.kind == TokenKind.OPERATOR and self.symbol is None:
            raise ValueError("Operator token requires a symbol")
        elif self.kind == TokenKind.FUNCTION and self.name is None:
            raise ValueError("Function token requires a name")
        elif self.kind == TokenKind.PAREN and self.paren is None:
            raise ValueError("Paren token requires a kind")

    @classmethod
    def number(cls, value: float) -> "Token":
        return cls(kind=TokenKind.NUMBER, value=float(value))

    @classmethod
    def operator(cls, symbol: OperatorSymbol | str) -> "Token":
        return cls(kind=TokenKind.OPERATOR, symbol=OperatorSymbol(symbol))

    @classmethod
    def function(cls, name: FunctionName | str = FunctionName.SQRT) -> "Token":
        return cls(kind=TokenKind.FUNCTION, name=FunctionName(name))

    @classmethod
    def open_paren(cls) -> "Token":
        return cls(kind=TokenKind.PAREN, paren=ParenKind.OPEN)

    @classmethod
    def close_paren(cls) -> "Token":
        return cls(kind=TokenKind.PAREN, paren=ParenKind.CLOSE)

    @property
    def is_number(self) -> bool:
        return self.kind == TokenKind.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.kind == TokenKind.OPERATOR

    @property
    def is_function(self) -> bool:
        return self.kind == TokenKind.FUNCTION

    @property
    def is_open_paren(self) -> bool:
        return self.kind == TokenKind.PAREN and self.paren == ParenKind.OPEN

    @property
    def is_close_paren(self) -> bool:
        return self.kind == TokenKind.PAREN and self.paren == ParenKind.CLOSE

    def __str__(self) -> str:
        if self.kind == TokenKind.NUMBER:
            return repr(self.value)
        if self.kind == TokenKind.OPERATOR:
            return self.symbol.value
        if self.kind == TokenKind.FUNCTION:
            return self.name.value
        return self.paren.value


def describe(tokens: list[Token]) -> str:
    """Компактная запись последовательности токенов для логов и диагностики"""
    return " ".join(str(token) for token in tokens)
