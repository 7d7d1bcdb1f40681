"""
Calculator Errors — таксономия ошибок обоих вычислительных путей

Все ошибки синхронные и детерминированные: повтор вызова с тем же входом
всегда даёт ту же ошибку, поэтому retry не имеет смысла.

Иерархия:
- CalculatorError (ValueError)
  - ExpressionError: ошибки нормализации, токенизации, парсинга и вычисления
  - ConversionError: ошибки разбора целого числа для конвертации оснований

Каждый класс несёт стабильный code (snake_case) и английское сообщение
по умолчанию. Локализованные тексты — в src.core.messages.
"""

from typing import ClassVar


class CalculatorError(ValueError):
    """
    Базовая ошибка вычислительного ядра.

    Наследуется от ValueError: все ошибки ядра вызваны некорректным входом.

    Attributes:
        code: Стабильный идентификатор вида ошибки
        message: Человекочитаемое сообщение
    """

    code: ClassVar[str] = "calculator_error"
    default_message: ClassVar[str] = "Calculation failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def message_key(self) -> str:
        """Ключ каталога сообщений; по умолчанию совпадает с code"""
        return self.code


# =============================================================================
# EXPRESSION PATH
# =============================================================================


class ExpressionError(CalculatorError):
    """Ошибка вычисления арифметического выражения"""

    code = "expression_error"
    default_message = "Invalid expression"


class CharacterError(ExpressionError):
    code = "unsupported_character"
    default_message = "Expression contains an unsupported character"


class InvalidNumberError(ExpressionError):
    code = "invalid_number"
    default_message = "Invalid number"


class NumberOutOfRangeError(ExpressionError):
    code = "number_out_of_range"
    default_message = "Number is out of range"


class UnsupportedFunctionError(ExpressionError):
    code = "unsupported_function"
    default_message = "Unsupported function"


class UnparseableExpressionError(ExpressionError):
    code = "unparseable_expression"
    default_message = "Cannot parse expression"


class MismatchedParenthesesError(ExpressionError):
    code = "mismatched_parentheses"
    default_message = "Mismatched parentheses"


class IllegalPercentPositionError(ExpressionError):
    code = "illegal_percent_position"
    default_message = "Percent sign must follow a value"


class ArityError(ExpressionError):
    """
    Оператору или функции не хватает операндов.

    operand_of уточняет, чему именно: "operator" (бинарный), "unary_minus",
    "percent" или "sqrt".
    """

    code = "missing_operand"
    default_message = "Operator is missing an operand"
    SUBJECTS: ClassVar[tuple[str, ...]] = ("operator", "unary_minus", "percent", "sqrt")

    def __init__(self, message: str | None = None, operand_of: str = "operator"):
        if operand_of not in self.SUBJECTS:
            raise ValueError(f"Unknown operand_of: {operand_of!r}")
        super().__init__(message)
        self.operand_of = operand_of

    @property
    def message_key(self) -> str:
        return f"{self.code}.{self.operand_of}"


class DivisionByZeroError(ExpressionError):
    code = "division_by_zero"
    default_message = "Division by zero"


class NegativeSqrtError(ExpressionError):
    code = "negative_sqrt"
    default_message = "Square root argument must not be negative"


class IncompleteExpressionError(ExpressionError):
    code = "incomplete_expression"
    default_message = "Expression is incomplete"


class InvalidResultError(ExpressionError):
    code = "invalid_result"
    default_message = "Result is not a finite number"


# =============================================================================
# CONVERSION PATH
# =============================================================================


class ConversionError(CalculatorError):
    """Ошибка разбора целого числа для конвертации оснований"""

    code = "conversion_error"
    default_message = "Conversion failed"


class EmptyInputError(ConversionError):
    code = "empty_input"
    default_message = "Enter an integer to convert"


class UnrecognizedFormatError(ConversionError):
    code = "unrecognized_format"
    default_message = (
        "Cannot detect the base: use a 0b/0x prefix or select the input base"
    )


class InvalidBinaryDigitError(ConversionError):
    code = "invalid_binary_digit"
    default_message = "Binary numbers may only contain 0 or 1"


class InvalidHexDigitError(ConversionError):
    code = "invalid_hex_digit"
    default_message = "Hexadecimal numbers may only contain 0-9 or a-f"


class InvalidDecimalDigitError(ConversionError):
    code = "invalid_decimal_digit"
    default_message = "Decimal numbers may only contain digits"


EXPRESSION_ERRORS: tuple[type[ExpressionError], ...] = (
    CharacterError,
    InvalidNumberError,
    NumberOutOfRangeError,
    UnsupportedFunctionError,
    UnparseableExpressionError,
    MismatchedParenthesesError,
    IllegalPercentPositionError,
    ArityError,
    DivisionByZeroError,
    NegativeSqrtError,
    IncompleteExpressionError,
    InvalidResultError,
)

CONVERSION_ERRORS: tuple[type[ConversionError], ...] = (
    EmptyInputError,
    UnrecognizedFormatError,
    InvalidBinaryDigitError,
    InvalidHexDigitError,
    InvalidDecimalDigitError,
)
