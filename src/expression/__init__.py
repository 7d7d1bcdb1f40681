"""Expression pipeline — нормализация, токенизация, разбор и вычисление.

normalize_expression → tokenize → to_postfix → evaluate_postfix → format_result
"""

from .editing import (
    append_token,
    apply_percent,
    backspace,
    find_matching_open_paren,
    pretty_expression,
    wrap_last_term,
)
from .evaluator import (
    DEFAULT_CONFIG,
    EvaluatorConfig,
    evaluate_postfix,
    format_result,
)
from .normalizer import ALLOWED_CHARS, normalize_expression
from .parser import ParserState, ShuntingYardParser, to_postfix
from .tokenizer import tokenize

__all__ = [
    # Pipeline
    "ALLOWED_CHARS",
    "normalize_expression",
    "tokenize",
    "ParserState",
    "ShuntingYardParser",
    "to_postfix",
    "DEFAULT_CONFIG",
    "EvaluatorConfig",
    "evaluate_postfix",
    "format_result",
    # Editing helpers
    "append_token",
    "apply_percent",
    "backspace",
    "find_matching_open_paren",
    "pretty_expression",
    "wrap_last_term",
]
