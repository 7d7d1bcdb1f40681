"""
Тесты для Parser (shunting-yard)

Coverage:
- Приоритеты и левоассоциативность бинарных операторов
- Унарный минус по состоянию предыдущего токена
- Постфиксный процент и его допустимые позиции
- Применение функции к группе в скобках
- Непарные скобки
"""

import pytest

from src.core.errors import IllegalPercentPositionError, MismatchedParenthesesError
from src.expression.parser import (
    PRECEDENCE,
    ParserState,
    ShuntingYardParser,
    UNARY_CONTEXT,
    is_right_associative,
    to_postfix,
)
from src.core.domain.tokens import OperatorSymbol
from src.expression.tokenizer import tokenize


def rpn(expression: str) -> list[str]:
    """Постфиксная запись выражения в виде строк токенов."""
    return [str(token) for token in to_postfix(tokenize(expression))]


class TestPrecedence:
    """Тесты приоритетов операторов."""

    def test_multiplication_binds_tighter(self):
        assert rpn("2+3*4") == ["2.0", "3.0", "4.0", "*", "+"]

    def test_parens_override_precedence(self):
        assert rpn("(2+3)*4") == ["2.0", "3.0", "+", "4.0", "*"]

    def test_subtraction_left_associative(self):
        assert rpn("8-3-2") == ["8.0", "3.0", "-", "2.0", "-"]

    def test_division_left_associative(self):
        assert rpn("8/2/2") == ["8.0", "2.0", "/", "2.0", "/"]

    def test_precedence_table(self):
        assert PRECEDENCE[OperatorSymbol.PLUS] < PRECEDENCE[OperatorSymbol.MULTIPLY]
        assert PRECEDENCE[OperatorSymbol.MULTIPLY] < PRECEDENCE[OperatorSymbol.UNARY_MINUS]
        assert PRECEDENCE[OperatorSymbol.UNARY_MINUS] < PRECEDENCE[OperatorSymbol.PERCENT]

    def test_only_unary_minus_is_right_associative(self):
        assert [s for s in OperatorSymbol if is_right_associative(s)] == [
            OperatorSymbol.UNARY_MINUS
        ]


class TestUnaryMinus:
    """Тесты классификации "-"."""

    def test_leading_minus(self):
        assert rpn("-3") == ["3.0", "u-"]

    def test_double_minus(self):
        assert rpn("--3") == ["3.0", "u-", "u-"]

    def test_minus_after_operator(self):
        assert rpn("2*-3") == ["2.0", "3.0", "u-", "*"]

    def test_minus_after_open_paren(self):
        assert rpn("3-(-2)") == ["3.0", "2.0", "u-", "-"]

    def test_unary_minus_binds_tighter_than_multiplication(self):
        assert rpn("-2*3") == ["2.0", "u-", "3.0", "*"]

    def test_minus_after_function_name(self):
        """После имени функции "-" тоже унарный; функция выталкивается раньше"""
        assert rpn("sqrt-4") == ["sqrt", "4.0", "u-"]

    def test_unary_context_states(self):
        assert UNARY_CONTEXT == {
            ParserState.START,
            ParserState.OPERATOR,
            ParserState.OPEN_PAREN,
            ParserState.FUNCTION_NAME,
        }


class TestPercent:
    """Тесты постфиксного процента."""

    def test_percent_after_number(self):
        assert rpn("50%") == ["50.0", "%"]

    def test_percent_binds_tighter_than_addition(self):
        assert rpn("200+10%") == ["200.0", "10.0", "%", "+"]

    def test_percent_after_group(self):
        assert rpn("(50)%") == ["50.0", "%"]

    def test_negative_percent(self):
        assert rpn("-50%") == ["50.0", "%", "u-"]

    def test_percent_then_binary_minus(self):
        """После % состояние VALUE: следующий "-" бинарный"""
        assert rpn("10%-5") == ["10.0", "%", "5.0", "-"]

    @pytest.mark.parametrize("expression", ["%10", "5+%", "(%", "sqrt%"])
    def test_percent_without_value_is_illegal(self, expression):
        with pytest.raises(IllegalPercentPositionError):
            rpn(expression)


class TestFunctions:
    """Тесты применения sqrt."""

    def test_function_applied_after_group(self):
        assert rpn("sqrt(16)+1") == ["16.0", "sqrt", "1.0", "+"]

    def test_negated_function(self):
        assert rpn("-sqrt(9)") == ["9.0", "sqrt", "u-"]

    def test_function_without_parens(self):
        assert rpn("sqrt9") == ["9.0", "sqrt"]

    def test_nested_functions(self):
        assert rpn("sqrt(sqrt(16))") == ["16.0", "sqrt", "sqrt"]


class TestParentheses:
    """Тесты непарных скобок."""

    @pytest.mark.parametrize("expression", ["(1+2", "1+2)", ")", "((1)", "sqrt(4"])
    def test_mismatched(self, expression):
        with pytest.raises(MismatchedParenthesesError):
            rpn(expression)

    def test_empty_input(self):
        assert to_postfix([]) == []


class TestParserIsStateless:
    """Экземпляр парсера переиспользуется без утечки состояния."""

    def test_repeated_parse(self):
        parser = ShuntingYardParser()
        tokens = tokenize("-2+3")

        first = parser.parse(tokens)
        second = parser.parse(tokens)

        assert first == second

    def test_failed_parse_does_not_affect_next(self):
        parser = ShuntingYardParser()
        with pytest.raises(MismatchedParenthesesError):
            parser.parse(tokenize("(1"))

        assert [str(t) for t in parser.parse(tokenize("1"))] == ["1.0"]
