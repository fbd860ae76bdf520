"""
Checked Arithmetic — целочисленные примитивы фиксированной ширины

Модуль обеспечивает корректность арифметики над беззнаковыми целыми
фиксированной ширины (u8/u16/u32/u64/u128/usize), хотя int в Python
не ограничен:
- Границы ширин (MAX для каждой ширины)
- Валидация кардиналов (тип int, диапазон 0..MAX)
- Checked сложение/вычитание: None вместо переполнения
- Иерархия исключений для overflow и domain violation

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат никогда не выходит за [0, MAX] молча (None или exception)
2. bool и float не принимаются как кардиналы
3. Все операции детерминированы и не имеют состояния
"""

import sys
from typing import Final, Optional

# =============================================================================
# ГРАНИЦЫ ШИРИН
# =============================================================================

def max_for_bits(bits: int) -> int:
    """
    Максимальное значение беззнакового целого заданной ширины.

    Args:
        bits: Ширина в битах (положительная)

    Returns:
        2**bits - 1

    Raises:
        ValueError: Если bits <= 0

    Examples:
        >>> max_for_bits(8)
        255
        >>> max_for_bits(16)
        65535
    """
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")
    return (1 << bits) - 1


U8_MAX: Final[int] = max_for_bits(8)
U16_MAX: Final[int] = max_for_bits(16)
U32_MAX: Final[int] = max_for_bits(32)
U64_MAX: Final[int] = max_for_bits(64)
U128_MAX: Final[int] = max_for_bits(128)

# Pointer-sized: sys.maxsize это максимум signed ssize_t
USIZE_BITS: Final[int] = (sys.maxsize * 2 + 1).bit_length()
USIZE_MAX: Final[int] = max_for_bits(USIZE_BITS)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class OrdinalError(Exception):
    """Базовый класс для всех ошибок порядковых чисел."""


class OrdinalOverflowError(OrdinalError, OverflowError):
    """
    Значение не помещается в ширину порядкового типа.

    Возникает при:
    1. from_zero_based(MAX) — n + 1 не помещается в ширину
    2. Сложении, результат которого больше MAX
    3. Кардинале вне диапазона 0..MAX (в том числе отрицательном)
    """


class OrdinalDomainViolation(OrdinalError, ValueError):
    """
    Нарушение domain: порядковое число меньше "first".

    Не существует "0th": хранимое 1-based значение всегда >= 1.
    Возникает при from_one_based(0), вычитании ниже первого и
    отрицательной разности двух порядковых чисел.
    """


# =============================================================================
# ВАЛИДАЦИЯ КАРДИНАЛОВ
# =============================================================================


def is_cardinal(value: object) -> bool:
    """
    Проверка, что значение является целым (int, но не bool).

    Args:
        value: Проверяемое значение

    Returns:
        True если value — int и не bool
    """
    return isinstance(value, int) and not isinstance(value, bool)


def fits_width(value: int, max_value: int) -> bool:
    """
    Проверка, что целое лежит в диапазоне беззнаковой ширины.

    Args:
        value: Проверяемое значение
        max_value: Максимум ширины (например, U8_MAX)

    Returns:
        True если 0 <= value <= max_value
    """
    return 0 <= value <= max_value


def validate_cardinal(value: object, name: str, max_value: int) -> int:
    """
    Валидация кардинала для беззнаковой ширины.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        max_value: Максимум ширины

    Returns:
        value (как int)

    Raises:
        TypeError: Если value не int (bool и float отклоняются)
        OrdinalOverflowError: Если value вне 0..max_value
    """
    if not is_cardinal(value):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if not fits_width(value, max_value):
        raise OrdinalOverflowError(
            f"{name}={value} does not fit in an unsigned integer with maximum {max_value}"
        )

    return value


# =============================================================================
# CHECKED ОПЕРАЦИИ
# =============================================================================


def checked_add(lhs: int, rhs: int, max_value: int) -> Optional[int]:
    """
    Сложение с проверкой переполнения ширины.

    Args:
        lhs: Левый операнд (0..max_value)
        rhs: Правый операнд (0..max_value)
        max_value: Максимум ширины

    Returns:
        lhs + rhs или None при переполнении

    Examples:
        >>> checked_add(250, 5, U8_MAX)
        255
        >>> checked_add(250, 6, U8_MAX) is None
        True
    """
    result = lhs + rhs
    if result > max_value:
        return None
    return result


def checked_sub(lhs: int, rhs: int, floor: int = 0) -> Optional[int]:
    """
    Вычитание с проверкой нижней границы.

    Args:
        lhs: Уменьшаемое
        rhs: Вычитаемое
        floor: Минимально допустимый результат (default: 0, беззнаковый underflow)

    Returns:
        lhs - rhs или None если результат < floor

    Examples:
        >>> checked_sub(5, 3)
        2
        >>> checked_sub(1, 1, floor=1) is None
        True
    """
    result = lhs - rhs
    if result < floor:
        return None
    return result
