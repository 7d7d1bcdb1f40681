"""Normalizer — проверка набора символов выражения и удаление пробелов.

Допустимые символы задаются явным перечислением (без regex):
цифры, ".", операторы "+-*/", скобки, "%", пробельные символы
и буквы, из которых состоит ключевое слово sqrt (в любом регистре).
"""

from typing import Final

from src.core.errors import CharacterError

DIGITS: Final[frozenset[str]] = frozenset("0123456789")
OPERATOR_CHARS: Final[frozenset[str]] = frozenset("+-*/")
PAREN_CHARS: Final[frozenset[str]] = frozenset("()")
KEYWORD_LETTERS: Final[frozenset[str]] = frozenset("sqrtSQRT")

ALLOWED_CHARS: Final[frozenset[str]] = (
    DIGITS | OPERATOR_CHARS | PAREN_CHARS | KEYWORD_LETTERS | frozenset(".%")
)


def is_allowed_char(ch: str) -> bool:
    return ch in ALLOWED_CHARS or ch.isspace()


def normalize_expression(expression: str) -> str:
    """Проверка символов и удаление всех пробельных символов.

    Args:
        expression: Сырая строка выражения

    Returns:
        Строка без пробельных символов

    Raises:
        CharacterError: при первом недопустимом символе
    """
    for position, ch in enumerate(expression):
        if not is_allowed_char(ch):
            raise CharacterError(
                f"Expression contains an unsupported character {ch!r} at position {position}"
            )
    return "".join(ch for ch in expression if not ch.isspace())
