"""Editing helpers — чистые операции над строкой выражения для клавиатуры калькулятора.

UI-слой только маршрутизирует события (кнопки, клавиши) в эти функции
и отображает результат; вся логика редактирования — здесь.
"""

from typing import Final

from src.core.domain.tokens import FunctionName
from src.expression.normalizer import OPERATOR_CHARS
from src.expression.tokenizer import NUMBER_CHARS

DISPLAY_SUBSTITUTIONS: Final[dict[str, str]] = {
    "*": "×",
    "/": "÷",
    "-": "−",
}


def append_token(expression: str, value: str) -> str:
    """Добавление нажатой клавиши (цифра, оператор, скобка, "sqrt(") в конец."""
    return expression + value


def backspace(expression: str) -> str:
    """Удаление последнего символа; хвост "sqrt(" удаляется целиком.

    Examples:
        >>> backspace("2+sqrt(")
        '2+'
        >>> backspace("12")
        '1'
    """
    if not expression:
        return expression
    opening = f"{FunctionName.SQRT.value}("
    if expression.endswith(opening):
        return expression[: -len(opening)]
    return expression[:-1]


def find_matching_open_paren(expression: str, close_index: int) -> int:
    """Индекс "(" парной к ")" в позиции close_index, либо -1."""
    depth = 0
    for i in range(close_index, -1, -1):
        ch = expression[i]
        if ch == ")":
            depth += 1
        elif ch == "(":
            depth -= 1
            if depth == 0:
                return i
    return -1


def wrap_last_term(expression: str, function: FunctionName | str = FunctionName.SQRT) -> str:
    """Оборачивание последнего терма в вызов функции.

    Терм — серия цифр/точек или сбалансированная группа в скобках.
    Завершающий "%" остаётся снаружи: "1+(2+3)%" → "1+sqrt((2+3))%".
    Если терма нет или скобки не сбалансированы, строка не меняется.
    """
    name = FunctionName(function).value
    if not expression:
        return expression

    end = len(expression) - 1
    if expression[end] == "%":
        end -= 1
    if end < 0:
        return expression

    if expression[end] == ")":
        start = find_matching_open_paren(expression, end)
        if start == -1:
            return expression
    else:
        start = end
        while start >= 0 and expression[start] in NUMBER_CHARS:
            start -= 1
        start += 1
        if start > end:
            return expression

    before = expression[:start]
    term = expression[start : end + 1]
    after = expression[end + 1 :]
    return f"{before}{name}({term}){after}"


def apply_percent(expression: str) -> str:
    """Добавление постфиксного "%", если перед ним стоит значение.

    Не меняет строку, если она пуста или оканчивается на "%", "(" или оператор.
    """
    if not expression:
        return expression
    last = expression[-1]
    if last in ("%", "(") or last in OPERATOR_CHARS:
        return expression
    return expression + "%"


def pretty_expression(expression: str) -> str:
    """Отображаемая форма: "*" → "×", "/" → "÷", "-" → "−"."""
    return "".join(DISPLAY_SUBSTITUTIONS.get(ch, ch) for ch in expression)
