"""
Domain models and value objects.

Contains tokens of the expression pipeline and models of the integer
base conversion.
"""

from src.core.domain.integers import (
    BINARY_PATTERN,
    DECIMAL_PATTERN,
    HEXADECIMAL_PATTERN,
    BaseSelector,
    ConversionResult,
    SignedInteger,
)
from src.core.domain.tokens import (
    FunctionName,
    OperatorSymbol,
    ParenKind,
    Token,
    TokenKind,
    describe,
)

__all__ = [
    # Tokens
    "FunctionName",
    "OperatorSymbol",
    "ParenKind",
    "Token",
    "TokenKind",
    "describe",
    # Integers
    "BINARY_PATTERN",
    "DECIMAL_PATTERN",
    "HEXADECIMAL_PATTERN",
    "BaseSelector",
    "ConversionResult",
    "SignedInteger",
]
