"""
Тесты для Editing helpers

Coverage:
- append_token / backspace (включая удаление "sqrt(" целиком)
- wrap_last_term: число, группа в скобках, хвостовой %
- apply_percent: допустимые и недопустимые позиции
- pretty_expression
- Интеграция с evaluate
"""

import pytest

from src.calculator import evaluate
from src.expression.editing import (
    append_token,
    apply_percent,
    backspace,
    find_matching_open_paren,
    pretty_expression,
    wrap_last_term,
)


class TestBackspace:
    """Тесты backspace."""

    def test_empty_stays_empty(self):
        assert backspace("") == ""

    def test_removes_last_char(self):
        assert backspace("12") == "1"

    def test_removes_function_opening_as_unit(self):
        assert backspace("2+sqrt(") == "2+"
        assert backspace("sqrt(") == ""

    def test_closed_function_removed_char_by_char(self):
        assert backspace("sqrt(4)") == "sqrt(4"


class TestAppendToken:
    def test_append(self):
        assert append_token("2+", "sqrt(") == "2+sqrt("
        assert append_token("", "7") == "7"


class TestFindMatchingOpenParen:
    def test_simple(self):
        assert find_matching_open_paren("1+(2+3)", 6) == 2

    def test_nested(self):
        assert find_matching_open_paren("((1)+2)", 6) == 0

    def test_unbalanced(self):
        assert find_matching_open_paren("2+3)", 3) == -1


class TestWrapLastTerm:
    """Тесты wrap_last_term."""

    def test_number(self):
        assert wrap_last_term("12") == "sqrt(12)"

    def test_trailing_number(self):
        assert wrap_last_term("1+25") == "1+sqrt(25)"

    def test_decimal_number(self):
        assert wrap_last_term("2*1.5") == "2*sqrt(1.5)"

    def test_group_with_percent(self):
        assert wrap_last_term("1+(2+3)%") == "1+sqrt((2+3))%"

    def test_number_with_percent(self):
        assert wrap_last_term("3.5%") == "sqrt(3.5)%"

    @pytest.mark.parametrize("expression", ["", "%", "1+", "2+3)", "("])
    def test_no_term_unchanged(self, expression):
        assert wrap_last_term(expression) == expression

    def test_unknown_function_rejected(self):
        with pytest.raises(ValueError):
            wrap_last_term("4", "cos")


class TestApplyPercent:
    """Тесты apply_percent."""

    def test_after_number(self):
        assert apply_percent("50") == "50%"

    def test_after_group(self):
        assert apply_percent("(2)") == "(2)%"

    @pytest.mark.parametrize("expression", ["", "50%", "(", "2+", "2-", "2*", "2/"])
    def test_illegal_position_unchanged(self, expression):
        assert apply_percent(expression) == expression


class TestPrettyExpression:
    def test_display_symbols(self):
        assert pretty_expression("2*3/4-1") == "2×3÷4−1"

    def test_other_chars_unchanged(self):
        assert pretty_expression("sqrt(4)+5%") == "sqrt(4)+5%"


class TestEditingIntegration:
    """Отредактированная строка вычисляется ядром."""

    def test_wrapped_term_evaluates(self):
        assert evaluate(wrap_last_term("2*16")) == "8"

    def test_percent_evaluates(self):
        assert evaluate(apply_percent("50")) == "0.5"

    def test_backspace_keeps_expression_valid(self):
        assert evaluate(backspace("9+sqrt(") + "1") == "10"
