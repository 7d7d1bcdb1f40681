"""
Calculator — публичные точки входа вычислительного ядра.

Два независимых пути без общего состояния:
- evaluate: арифметическое выражение → десятичная строка
- convert_integer: целое → двоичная / десятичная / шестнадцатеричная форма
"""

from .service import convert_integer, evaluate

__all__ = [
    "convert_integer",
    "evaluate",
]
