"""Calculator service — две точки входа вычислительного ядра для UI-слоя.

- evaluate(expression) → строка результата
- convert_integer(raw, base) → ConversionResult

Функции чистые и не хранят состояния между вызовами. Ошибки —
подклассы CalculatorError, поднимаются в месте обнаружения; перехват
и отображение сообщения — ответственность вызывающей стороны.
"""

import logging

from src.conversion.integer_formatter import format_all
from src.conversion.integer_parser import parse_integer
from src.core.domain.integers import BaseSelector, ConversionResult
from src.core.domain.tokens import describe
from src.core.errors import CalculatorError
from src.expression.evaluator import DEFAULT_CONFIG, EvaluatorConfig, evaluate_postfix, format_result
from src.expression.normalizer import normalize_expression
from src.expression.parser import to_postfix
from src.expression.tokenizer import tokenize

logger = logging.getLogger(__name__)


def evaluate(expression: str, config: EvaluatorConfig | None = None) -> str:
    """
    Вычисление арифметического выражения.

    Args:
        expression: Инфиксное выражение: + - * /, скобки, унарный минус,
            постфиксный %, sqrt(...)
        config: Параметры округления (default: DEFAULT_CONFIG)

    Returns:
        Десятичная строка, не более 12 знаков после точки

    Raises:
        ExpressionError: любой вид ошибки выражения

    Examples:
        >>> evaluate("2+3*4")
        '14'
        >>> evaluate("-sqrt(9)")
        '-3'
        >>> evaluate("0.1+0.2")
        '0.3'
    """
    try:
        postfix = to_postfix(tokenize(normalize_expression(expression)))
        logger.debug("Postfix for %r: %s", expression, describe(postfix))
        result = format_result(evaluate_postfix(postfix), config or DEFAULT_CONFIG)
    except CalculatorError as e:
        logger.info("Expression %r rejected: %s", expression, e.code)
        raise

    logger.debug("Expression %r evaluated to %s", expression, result)
    return result


def convert_integer(
    raw: str, base: BaseSelector | str | int = BaseSelector.AUTO
) -> ConversionResult:
    """
    Конвертация целого числа в двоичную, десятичную и шестнадцатеричную форму.

    Args:
        raw: Целое со знаком, с префиксом 0b/0x или без
        base: BaseSelector или его значение ("auto", 2, "10", 16)

    Returns:
        ConversionResult(binary, decimal, hexadecimal)

    Raises:
        ConversionError: любой вид ошибки разбора
        ValueError: неизвестный селектор основания

    Examples:
        >>> convert_integer("0xFF").decimal
        '255'
        >>> convert_integer("-0b101").hexadecimal
        '-0x5'
    """
    selector = BaseSelector.coerce(base)
    try:
        result = format_all(parse_integer(raw, selector))
    except CalculatorError as e:
        logger.info("Conversion of %r (base=%s) rejected: %s", raw, selector.value, e.code)
        raise

    logger.debug("Converted %r (base=%s) to %s", raw, selector.value, result.decimal)
    return result
