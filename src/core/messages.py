"""
Error Messages — каталог локализованных сообщений об ошибках

Единственная поддерживаемая локализация ядра: тексты ошибок.
- "en" — сообщения по умолчанию (default_message каждого класса)
- "zh-CN" — тексты интерфейса исходного калькулятора

Поиск: сначала message_key ошибки (например "missing_operand.sqrt"),
затем code. Неизвестная локаль или отсутствующий код → английское сообщение.
"""

from typing import Final

from src.core.errors import CONVERSION_ERRORS, EXPRESSION_ERRORS, CalculatorError

DEFAULT_LOCALE: Final[str] = "en"

_ZH_CN: Final[dict[str, str]] = {
    "unsupported_character": "表达式包含不支持的字符",
    "invalid_number": "无效数字",
    "number_out_of_range": "数字超出范围",
    "unsupported_function": "不支持的函数",
    "unparseable_expression": "无法解析表达式",
    "mismatched_parentheses": "括号不匹配",
    "illegal_percent_position": "百分号位置不合法",
    "missing_operand": "运算符缺少参数",
    "missing_operand.operator": "运算符缺少参数",
    "missing_operand.unary_minus": "一元负号缺少参数",
    "missing_operand.percent": "百分号缺少参数",
    "missing_operand.sqrt": "平方根缺少参数",
    "division_by_zero": "除数不能为 0",
    "negative_sqrt": "平方根参数不能为负数",
    "incomplete_expression": "表达式不完整",
    "invalid_result": "结果无效",
    "empty_input": "请输入要转换的整数",
    "unrecognized_format": "无法自动识别：请使用 0b/0x 前缀或选择输入进制",
    "invalid_binary_digit": "二进制只能包含 0 或 1",
    "invalid_hex_digit": "十六进制只能包含 0-9 或 a-f",
    "invalid_decimal_digit": "十进制只能包含数字",
}

MESSAGE_CATALOGS: Final[dict[str, dict[str, str]]] = {
    DEFAULT_LOCALE: {
        error_cls.code: error_cls.default_message
        for error_cls in (*EXPRESSION_ERRORS, *CONVERSION_ERRORS)
    },
    "zh-CN": _ZH_CN,
}


def supported_locales() -> list[str]:
    """Список локалей, для которых есть каталог сообщений"""
    return sorted(MESSAGE_CATALOGS)


def localize(error: CalculatorError, locale: str = DEFAULT_LOCALE) -> str:
    """
    Сообщение об ошибке для заданной локали.

    Для локали по умолчанию возвращается message самой ошибки (оно может
    содержать детали, например позицию символа).

    Args:
        error: Ошибка ядра
        locale: Код локали ("en", "zh-CN")

    Returns:
        Локализованное сообщение или message ошибки как fallback
    """
    if locale == DEFAULT_LOCALE:
        return error.message

    catalog = MESSAGE_CATALOGS.get(locale)
    if catalog is None:
        return error.message
    if error.message_key in catalog:
        return catalog[error.message_key]
    return catalog.get(error.code, error.message)
