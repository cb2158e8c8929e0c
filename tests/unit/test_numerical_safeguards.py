"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Проверку валидности float (NaN/Inf)
2. Epsilon-сравнения float, включая IEEE-особые значения
3. Валидацию конечности параметров
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_valid_float,
    validate_finite,
)


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_normal_values_valid(self) -> None:
        """Обычные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1.0)
        assert is_valid_float(1e308)
        assert is_valid_float(5e-324)

    def test_nan_invalid(self) -> None:
        assert not is_valid_float(float("nan"))

    def test_inf_invalid(self) -> None:
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestIsClose:
    """Тесты для is_close"""

    def test_default_tolerances(self) -> None:
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_close_values_within_tolerance(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(1.0, 1.0 - 1e-10)

    def test_far_values_not_close(self) -> None:
        assert not is_close(1.0, 1.1)

    def test_trig_noise_near_zero(self) -> None:
        """cos(π/2) ≈ 6e-17 считается нулём (абсолютная толерантность)"""
        assert is_close(math.cos(math.pi / 2), 0.0)
        assert not is_close(0.0, 1e-10)

    def test_relative_tolerance_for_large_values(self) -> None:
        assert is_close(1e10, 1e10 + 1.0)
        assert not is_close(1e10, 1e10 + 100.0)

    def test_infinities(self) -> None:
        """Inf одного знака равны, NaN не равен ничему"""
        assert is_close(math.inf, math.inf)
        assert not is_close(math.inf, -math.inf)
        assert not is_close(math.nan, math.nan)


class TestValidateFinite:
    """Тесты для validate_finite"""

    def test_finite_passes(self) -> None:
        validate_finite(0.0, "x")
        validate_finite(-42.5, "x")

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_raises(self, value: float) -> None:
        with pytest.raises(ValueError, match="bound must be a valid float"):
            validate_finite(value, "bound")
