"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную корректность результата вычисления выражения:
- Проверка конечности float (NaN/Inf не покидают ядро)
- Округление half-up до фиксированной сетки 1e-12 с epsilon-сдвигом
- Каноническая десятичная запись float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не возвращаются как результат
2. Каноническая запись — кратчайшие round-trip цифры без хвостовых нулей
3. Все операции детерминированы и воспроизводимы

ИЗВЕСТНОЕ ПРИБЛИЖЕНИЕ:
Округление выполняется в двоичной арифметике: (x + eps) * scale.
Значения ровно на половине шага сетки могут сместиться на один шаг.
Это приближение, а не точное десятичное округление.
"""

import math
import sys
from decimal import Decimal
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Машинный epsilon double (2**-52), сдвиг перед округлением
EPS_MACHINE: Final[float] = sys.float_info.epsilon

# Масштаб сетки округления: результат кратен 1 / ROUNDING_SCALE
ROUNDING_SCALE: Final[float] = 1e12

# Границы десятичной записи без экспоненты: 1e-6 <= |x| < 1e21
EXPONENT_UPPER: Final[int] = 21
EXPONENT_LOWER: Final[int] = -6


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_up(
    value: float,
    scale: float = ROUNDING_SCALE,
    bias: float = EPS_MACHINE,
) -> float:
    """
    Округление до ближайшего кратного 1 / scale (половина — вверх).

    Перед округлением к значению добавляется bias, чтобы компенсировать
    ошибку двоичного представления (0.1 + 0.2 → 0.3).

    Если масштабированное значение не конечно (|value| близко к максимуму
    float), сетка 1 / scale не имеет смысла и value возвращается как есть.

    Args:
        value: Конечное значение
        scale: Масштаб сетки (default: ROUNDING_SCALE = 1e12)
        bias: Сдвиг перед округлением (default: EPS_MACHINE)

    Returns:
        Округлённое значение

    Raises:
        ValueError: Если value содержит NaN/Inf или scale <= 0

    Examples:
        >>> round_half_up(0.1 + 0.2)
        0.3
        >>> round_half_up(2.5, scale=1.0)
        3.0
        >>> round_half_up(-2.5, scale=1.0)
        -2.0
    """
    if not is_valid_float(value):
        raise ValueError(f"value must be a valid float (not NaN/Inf), got {value}")
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")

    scaled = (value + bias) * scale
    if not is_valid_float(scaled):
        return value

    # scaled + 0.5 неточно при |scaled| >= 2**52
    rounded = math.floor(scaled)
    if scaled - rounded >= 0.5:
        rounded += 1
    return rounded / scale


# =============================================================================
# КАНОНИЧЕСКАЯ ЗАПИСЬ
# =============================================================================


def to_canonical_string(value: float) -> str:
    """
    Каноническая десятичная запись float.

    Правила:
    - кратчайшие цифры, однозначно восстанавливающие float (как repr)
    - целые значения без дробной части: 14.0 → "14"
    - отрицательный ноль → "0"
    - экспоненциальная форма вне диапазона 1e-6 <= |x| < 1e21:
      "1e+21", "1.5e-7"

    Args:
        value: Конечное значение

    Returns:
        Строка с десятичной записью

    Raises:
        ValueError: Если value содержит NaN/Inf

    Examples:
        >>> to_canonical_string(14.0)
        '14'
        >>> to_canonical_string(0.5)
        '0.5'
        >>> to_canonical_string(1e21)
        '1e+21'
        >>> to_canonical_string(-1e-7)
        '-1e-7'
    """
    if not is_valid_float(value):
        raise ValueError(f"value must be a valid float (not NaN/Inf), got {value}")

    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    # value = 0.<digits> * 10**n
    n = k + exponent

    if k <= n <= EXPONENT_UPPER:
        body = digits + "0" * (n - k)
    elif 0 < n <= EXPONENT_UPPER:
        body = f"{digits[:n]}.{digits[n:]}"
    elif EXPONENT_LOWER < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        mantissa = digits[0] if k == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"

    return sign + body
