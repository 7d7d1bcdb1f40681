"""
Тесты для Normalizer

Проверяет:
1. Удаление всех пробельных символов
2. Белый список символов (цифры, операторы, скобки, %, буквы sqrt)
3. CharacterError для любых других символов
"""

import pytest

from src.core.errors import CharacterError
from src.expression.normalizer import ALLOWED_CHARS, is_allowed_char, normalize_expression


class TestNormalizeExpression:
    """Тесты для normalize_expression"""

    def test_spaces_removed(self) -> None:
        """Пробелы удаляются"""
        assert normalize_expression(" 1 +  2 ") == "1+2"

    def test_all_whitespace_removed(self) -> None:
        """Табуляция и перевод строки тоже удаляются"""
        assert normalize_expression("\t3*\n4") == "3*4"

    def test_empty_expression(self) -> None:
        assert normalize_expression("") == ""

    def test_full_alphabet_accepted(self) -> None:
        """Все допустимые символы проходят без изменений"""
        expression = "sqrt(1.5)+2-3*4/5%"
        assert normalize_expression(expression) == expression

    def test_keyword_case_insensitive(self) -> None:
        assert normalize_expression("SQRT(4)") == "SQRT(4)"
        assert normalize_expression("SqRt(4)") == "SqRt(4)"

    def test_keyword_letters_in_any_order_pass(self) -> None:
        """Нормализатор проверяет только символы; слово проверяет токенизатор"""
        assert normalize_expression("sqr(4)") == "sqr(4)"
        assert normalize_expression("tsqr") == "tsqr"

    @pytest.mark.parametrize("expression", ["2^3", "abc", "1,5", "x+1", "2**3!", "√4", "1e5"])
    def test_unsupported_character_raises(self, expression: str) -> None:
        with pytest.raises(CharacterError, match="unsupported character"):
            normalize_expression(expression)

    def test_error_reports_position(self) -> None:
        with pytest.raises(CharacterError, match="position 2"):
            normalize_expression("1+a")


class TestAllowedChars:
    """Тесты для белого списка символов"""

    def test_alphabet_is_closed(self) -> None:
        assert ALLOWED_CHARS == frozenset("0123456789.+-*/()%sqrtSQRT")

    def test_whitespace_allowed(self) -> None:
        assert is_allowed_char(" ")
        assert is_allowed_char("\t")

    def test_other_letters_rejected(self) -> None:
        assert not is_allowed_char("a")
        assert not is_allowed_char("e")
