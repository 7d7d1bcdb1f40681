"""Parser — инфиксные токены → постфиксная (RPN) последовательность.

Алгоритм сортировочной станции (shunting-yard) с явным конечным автоматом
категории предыдущего токена (ParserState):
- "-" без левого операнда (START/OPERATOR/OPEN_PAREN/FUNCTION_NAME) → UNARY_MINUS
- "%" допустим только после значения (VALUE)
- функция применяется к выражению в скобках сразу после ")"

Приоритеты (больше — связывает сильнее):
    + -          1
    * /          2
    unary minus  3  (правоассоциативный)
    %            4  (постфиксный)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

from src.core.domain.tokens import OperatorSymbol, Token
from src.core.errors import IllegalPercentPositionError, MismatchedParenthesesError


class ParserState(str, Enum):
    """Категория последнего принятого токена."""

    START = "start"
    VALUE = "value"
    OPERATOR = "operator"
    OPEN_PAREN = "open_paren"
    FUNCTION_NAME = "function_name"


PRECEDENCE: Final[dict[OperatorSymbol, int]] = {
    OperatorSymbol.PLUS: 1,
    OperatorSymbol.MINUS: 1,
    OperatorSymbol.MULTIPLY: 2,
    OperatorSymbol.DIVIDE: 2,
    OperatorSymbol.UNARY_MINUS: 3,
    OperatorSymbol.PERCENT: 4,
}

RIGHT_ASSOCIATIVE: Final[frozenset[OperatorSymbol]] = frozenset({OperatorSymbol.UNARY_MINUS})

# Состояния, в которых у "-" нет левого операнда
UNARY_CONTEXT: Final[frozenset[ParserState]] = frozenset(
    {
        ParserState.START,
        ParserState.OPERATOR,
        ParserState.OPEN_PAREN,
        ParserState.FUNCTION_NAME,
    }
)


def precedence(symbol: OperatorSymbol) -> int:
    return PRECEDENCE[symbol]


def is_right_associative(symbol: OperatorSymbol) -> bool:
    return symbol in RIGHT_ASSOCIATIVE


@dataclass
class _Conversion:
    """Рабочее состояние одного разбора (создаётся на каждый вызов)."""

    output: list[Token]
    stack: list[Token]
    state: ParserState = ParserState.START


class ShuntingYardParser:
    """Преобразователь инфиксной записи в постфиксную.

    Экземпляр не хранит состояния между вызовами parse.
    """

    def parse(self, tokens: list[Token]) -> list[Token]:
        """Преобразование токенов в постфиксную последовательность.

        Raises:
            MismatchedParenthesesError: непарная скобка
            IllegalPercentPositionError: "%" не после значения
        """
        run = _Conversion(output=[], stack=[])

        for token in tokens:
            if token.is_number:
                run.output.append(token)
                run.state = ParserState.VALUE
            elif token.is_function:
                run.stack.append(token)
                run.state = ParserState.FUNCTION_NAME
            elif token.is_open_paren:
                run.stack.append(token)
                run.state = ParserState.OPEN_PAREN
            elif token.is_close_paren:
                self._close_group(run)
            else:
                self._push_operator(run, token.symbol)

        while run.stack:
            token = run.stack.pop()
            if token.is_open_paren:
                raise MismatchedParenthesesError("Unclosed parenthesis")
            run.output.append(token)

        return run.output

    def _close_group(self, run: _Conversion) -> None:
        while run.stack and not run.stack[-1].is_open_paren:
            run.output.append(run.stack.pop())
        if not run.stack:
            raise MismatchedParenthesesError("Closing parenthesis without a matching opening one")
        run.stack.pop()

        # Функция связывается со своим аргументом в скобках
        if run.stack and run.stack[-1].is_function:
            run.output.append(run.stack.pop())

        run.state = ParserState.VALUE

    def _push_operator(self, run: _Conversion, symbol: OperatorSymbol) -> None:
        if symbol == OperatorSymbol.MINUS and run.state in UNARY_CONTEXT:
            symbol = OperatorSymbol.UNARY_MINUS

        if symbol == OperatorSymbol.PERCENT and run.state != ParserState.VALUE:
            raise IllegalPercentPositionError("Percent sign must follow a value")

        incoming = precedence(symbol)
        while run.stack:
            top = run.stack[-1]
            if top.is_function:
                run.output.append(run.stack.pop())
                continue
            if not top.is_operator:
                break

            top_precedence = precedence(top.symbol)
            if top_precedence > incoming or (
                top_precedence == incoming and not is_right_associative(symbol)
            ):
                run.output.append(run.stack.pop())
            else:
                break

        run.stack.append(Token.operator(symbol))
        run.state = ParserState.VALUE if symbol == OperatorSymbol.PERCENT else ParserState.OPERATOR


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Convenience-обёртка над ShuntingYardParser().parse."""
    return ShuntingYardParser().parse(tokens)
