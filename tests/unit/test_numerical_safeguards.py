"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf проверку
2. Округление half-up до сетки 1e-12 с epsilon-сдвигом
3. Каноническую десятичную запись float
4. Граничные случаи и устойчивость
"""

import math
import sys

import pytest

from src.core.math.numerical_safeguards import (
    EPS_MACHINE,
    EXPONENT_LOWER,
    EXPONENT_UPPER,
    ROUNDING_SCALE,
    is_valid_float,
    round_half_up,
    to_canonical_string,
)

# =============================================================================
# ТЕСТЫ NaN/Inf
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e308)
        assert is_valid_float(sys.float_info.min)

    def test_nan_and_inf(self) -> None:
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ
# =============================================================================


class TestRoundHalfUp:
    """Тесты для round_half_up"""

    def test_constants(self) -> None:
        assert ROUNDING_SCALE == 1e12
        assert EPS_MACHINE == 2.0**-52

    def test_representation_error_removed(self) -> None:
        assert round_half_up(0.1 + 0.2) == 0.3

    def test_half_rounds_up(self) -> None:
        """Половина шага округляется в сторону +inf"""
        assert round_half_up(2.5, scale=1.0) == 3.0
        assert round_half_up(-2.5, scale=1.0) == -2.0

    def test_already_on_grid_unchanged(self) -> None:
        assert round_half_up(14.0) == 14.0
        assert round_half_up(-0.5) == -0.5

    @pytest.mark.parametrize("value", [5000.000000000001, 4503.599627370497, -5000.000000000001])
    def test_grid_values_above_2_pow_52_unchanged(self, value: float) -> None:
        """Масштабированное значение — нечётное целое в [2**52, 2**53)"""
        assert round_half_up(value) == value

    def test_below_half_step_to_zero(self) -> None:
        assert round_half_up(4e-13) == 0.0

    def test_zero_bias(self) -> None:
        assert round_half_up(0.125, scale=100.0, bias=0.0) == 0.13

    def test_huge_value_returned_unchanged(self) -> None:
        assert round_half_up(1e300) == 1e300
        assert round_half_up(-sys.float_info.max) == -sys.float_info.max

    def test_invalid_value_raises(self) -> None:
        with pytest.raises(ValueError, match="NaN/Inf"):
            round_half_up(math.nan)
        with pytest.raises(ValueError, match="NaN/Inf"):
            round_half_up(math.inf)

    def test_invalid_scale_raises(self) -> None:
        with pytest.raises(ValueError, match="scale must be positive"):
            round_half_up(1.0, scale=0.0)


# =============================================================================
# ТЕСТЫ КАНОНИЧЕСКОЙ ЗАПИСИ
# =============================================================================


class TestToCanonicalString:
    """Тесты для to_canonical_string"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (14.0, "14"),
            (-14.0, "-14"),
            (0.5, "0.5"),
            (123.456, "123.456"),
            (0.0, "0"),
            (-0.0, "0"),
            (1e16, "10000000000000000"),
            (1e20, "100000000000000000000"),
            (0.000001, "0.000001"),
            (0.0000015, "0.0000015"),
        ],
    )
    def test_plain_notation(self, value: float, expected: str) -> None:
        assert to_canonical_string(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1e21, "1e+21"),
            (-2.5e22, "-2.5e+22"),
            (1e300, "1e+300"),
            (1e-7, "1e-7"),
            (-1.5e-7, "-1.5e-7"),
        ],
    )
    def test_exponent_notation(self, value: float, expected: str) -> None:
        assert to_canonical_string(value) == expected

    def test_exponent_bounds(self) -> None:
        assert EXPONENT_UPPER == 21
        assert EXPONENT_LOWER == -6

    def test_shortest_round_trip_digits(self) -> None:
        value = 0.1 + 0.2
        assert to_canonical_string(value) == "0.30000000000000004"
        assert float(to_canonical_string(value)) == value

    def test_invalid_value_raises(self) -> None:
        with pytest.raises(ValueError, match="NaN/Inf"):
            to_canonical_string(math.nan)
