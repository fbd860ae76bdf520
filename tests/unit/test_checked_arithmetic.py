"""
Тесты для модуля Checked Arithmetic

Проверяет:
1. Границы ширин (u8 ... u128, usize)
2. Валидацию кардиналов (тип и диапазон)
3. Checked сложение/вычитание
4. Иерархию исключений
"""

import sys

import pytest

from src.ordinals.math.checked import (
    U8_MAX,
    U16_MAX,
    U32_MAX,
    U64_MAX,
    U128_MAX,
    USIZE_BITS,
    USIZE_MAX,
    OrdinalDomainViolation,
    OrdinalError,
    OrdinalOverflowError,
    checked_add,
    checked_sub,
    fits_width,
    is_cardinal,
    max_for_bits,
    validate_cardinal,
)

# =============================================================================
# ТЕСТЫ ГРАНИЦ ШИРИН
# =============================================================================


class TestWidthBounds:
    """Тесты констант ширин"""

    def test_fixed_widths(self) -> None:
        """Максимумы фиксированных ширин"""
        assert U8_MAX == 255
        assert U16_MAX == 65_535
        assert U32_MAX == 4_294_967_295
        assert U64_MAX == 18_446_744_073_709_551_615
        assert U128_MAX == 2**128 - 1

    def test_usize_matches_platform(self) -> None:
        """usize соответствует разрядности платформы"""
        assert USIZE_MAX == sys.maxsize * 2 + 1
        assert USIZE_BITS in (32, 64)
        assert USIZE_MAX == max_for_bits(USIZE_BITS)

    def test_max_for_bits(self) -> None:
        """max_for_bits согласован с константами"""
        assert max_for_bits(8) == U8_MAX
        assert max_for_bits(16) == U16_MAX
        assert max_for_bits(32) == U32_MAX
        assert max_for_bits(64) == U64_MAX
        assert max_for_bits(128) == U128_MAX

    def test_max_for_bits_rejects_non_positive(self) -> None:
        """Нулевая ширина отклоняется"""
        with pytest.raises(ValueError, match="bits must be positive"):
            max_for_bits(0)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidateCardinal:
    """Тесты для validate_cardinal"""

    def test_valid_values_returned(self) -> None:
        """Значения в диапазоне возвращаются без изменений"""
        assert validate_cardinal(0, "n", U8_MAX) == 0
        assert validate_cardinal(255, "n", U8_MAX) == 255

    def test_above_max_overflows(self) -> None:
        """Значение больше MAX → overflow"""
        with pytest.raises(OrdinalOverflowError, match="n=256"):
            validate_cardinal(256, "n", U8_MAX)

    def test_negative_overflows(self) -> None:
        """Отрицательное значение не помещается в беззнаковую ширину"""
        with pytest.raises(OrdinalOverflowError):
            validate_cardinal(-1, "n", U8_MAX)

    def test_bool_rejected(self) -> None:
        """bool не является кардиналом"""
        assert not is_cardinal(True)
        with pytest.raises(TypeError, match="must be an int"):
            validate_cardinal(True, "n", U8_MAX)

    def test_float_rejected(self) -> None:
        """float не является кардиналом, даже целочисленный"""
        assert not is_cardinal(4.0)
        with pytest.raises(TypeError, match="got float"):
            validate_cardinal(4.0, "n", U8_MAX)

    def test_fits_width(self) -> None:
        """fits_width — включительный диапазон [0, max]"""
        assert fits_width(0, U16_MAX)
        assert fits_width(U16_MAX, U16_MAX)
        assert not fits_width(U16_MAX + 1, U16_MAX)
        assert not fits_width(-1, U16_MAX)


# =============================================================================
# ТЕСТЫ CHECKED ОПЕРАЦИЙ
# =============================================================================


class TestCheckedOperations:
    """Тесты checked_add / checked_sub"""

    def test_add_within_width(self) -> None:
        """Сложение до MAX включительно"""
        assert checked_add(250, 5, U8_MAX) == 255

    def test_add_overflow_returns_none(self) -> None:
        """Переполнение → None"""
        assert checked_add(250, 6, U8_MAX) is None
        assert checked_add(U64_MAX, 1, U64_MAX) is None

    def test_sub_unsigned_underflow_returns_none(self) -> None:
        """Беззнаковый underflow → None"""
        assert checked_sub(3, 3) == 0
        assert checked_sub(3, 4) is None

    def test_sub_with_floor(self) -> None:
        """floor=1 запрещает результат ниже first"""
        assert checked_sub(2, 1, floor=1) == 1
        assert checked_sub(1, 1, floor=1) is None


class TestExceptionHierarchy:
    """Исключения совместимы со стандартными"""

    def test_overflow_is_overflow_error(self) -> None:
        assert issubclass(OrdinalOverflowError, OverflowError)
        assert issubclass(OrdinalOverflowError, OrdinalError)

    def test_domain_violation_is_value_error(self) -> None:
        assert issubclass(OrdinalDomainViolation, ValueError)
        assert issubclass(OrdinalDomainViolation, OrdinalError)
