"""Evaluator — стековая машина для постфиксной последовательности.

Операции:
- NUMBER: push
- UNARY_MINUS: a → -a
- PERCENT: a → a / 100
- + - * /: (a, b) → a op b, где b — верхний элемент стека
- sqrt: a → sqrt(a), a >= 0

Результат округляется до сетки 1e-12 (epsilon-сдвиг + half-up) и
выводится канонической десятичной строкой.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Final

from src.core.domain.tokens import FunctionName, OperatorSymbol, Token
from src.core.errors import (
    ArityError,
    DivisionByZeroError,
    IncompleteExpressionError,
    InvalidResultError,
    NegativeSqrtError,
    UnparseableExpressionError,
    UnsupportedFunctionError,
)
from src.core.math.numerical_safeguards import (
    EPS_MACHINE,
    ROUNDING_SCALE,
    is_valid_float,
    round_half_up,
    to_canonical_string,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluatorConfig:
    """Конфигурация округления результата.

    - rounding_scale: результат кратен 1 / rounding_scale
    - rounding_bias: сдвиг перед округлением против ошибки двоичного представления
    """

    rounding_scale: float = ROUNDING_SCALE
    rounding_bias: float = EPS_MACHINE

    def __post_init__(self) -> None:
        if not is_valid_float(self.rounding_scale) or self.rounding_scale <= 0:
            raise ValueError(f"rounding_scale must be positive, got {self.rounding_scale}")
        if not is_valid_float(self.rounding_bias) or self.rounding_bias < 0:
            raise ValueError(f"rounding_bias must be non-negative, got {self.rounding_bias}")


DEFAULT_CONFIG: Final[EvaluatorConfig] = EvaluatorConfig()


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZeroError()
    return a / b


BINARY_OPERATIONS: Final[dict[OperatorSymbol, Callable[[float, float], float]]] = {
    OperatorSymbol.PLUS: lambda a, b: a + b,
    OperatorSymbol.MINUS: lambda a, b: a - b,
    OperatorSymbol.MULTIPLY: lambda a, b: a * b,
    OperatorSymbol.DIVIDE: _divide,
}


def _pop_operand(stack: list[float], what: str, operand_of: str) -> float:
    if not stack:
        raise ArityError(f"{what} is missing an operand", operand_of=operand_of)
    return stack.pop()


def _apply_operator(stack: list[float], symbol: OperatorSymbol) -> None:
    if symbol == OperatorSymbol.UNARY_MINUS:
        stack.append(-_pop_operand(stack, "Unary minus", "unary_minus"))
        return

    if symbol == OperatorSymbol.PERCENT:
        stack.append(_pop_operand(stack, "Percent sign", "percent") / 100)
        return

    if len(stack) < 2:
        raise ArityError(f"Operator {symbol.value!r} is missing an operand")
    b = stack.pop()
    a = stack.pop()
    stack.append(BINARY_OPERATIONS[symbol](a, b))


def _apply_function(stack: list[float], name: FunctionName) -> None:
    if name == FunctionName.SQRT:
        a = _pop_operand(stack, "Square root", "sqrt")
        if a < 0:
            raise NegativeSqrtError(f"Square root argument must not be negative, got {a!r}")
        stack.append(math.sqrt(a))
        return
    raise UnsupportedFunctionError(f"Unsupported function {name!r}")


def evaluate_postfix(postfix: list[Token]) -> float:
    """Вычисление постфиксной последовательности.

    Args:
        postfix: Результат to_postfix

    Returns:
        Конечное значение выражения (без округления)

    Raises:
        ArityError: оператору или функции не хватает операндов
        DivisionByZeroError: деление на ноль
        NegativeSqrtError: корень из отрицательного числа
        IncompleteExpressionError: в стеке осталось не одно значение
        InvalidResultError: результат NaN/Inf
    """
    stack: list[float] = []

    for token in postfix:
        if token.is_number:
            stack.append(token.value)
        elif token.is_operator:
            _apply_operator(stack, token.symbol)
        elif token.is_function:
            _apply_function(stack, token.name)
        else:
            raise UnparseableExpressionError(f"Unexpected token {token} in postfix sequence")

    if len(stack) != 1:
        raise IncompleteExpressionError(
            f"Expression is incomplete: {len(stack)} values left on the stack"
        )

    result = stack[0]
    if not is_valid_float(result):
        raise InvalidResultError(f"Result is not a finite number: {result!r}")
    return result


def format_result(value: float, config: EvaluatorConfig = DEFAULT_CONFIG) -> str:
    """Округление результата и вывод канонической десятичной строкой.

    Examples:
        >>> format_result(0.1 + 0.2)
        '0.3'
        >>> format_result(14.0)
        '14'
    """
    rounded = round_half_up(value, scale=config.rounding_scale, bias=config.rounding_bias)
    if rounded != value:
        logger.debug("Result %r rounded to %r", value, rounded)
    return to_canonical_string(rounded)
