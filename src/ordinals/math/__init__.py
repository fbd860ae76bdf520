"""
Math modules для ordinals

Беззнаковая арифметика фиксированной ширины с явной проверкой переполнения.
"""

from src.ordinals.math.checked import (
    # Width bounds
    U8_MAX,
    U16_MAX,
    U32_MAX,
    U64_MAX,
    U128_MAX,
    USIZE_BITS,
    USIZE_MAX,
    max_for_bits,
    # Exceptions
    OrdinalDomainViolation,
    OrdinalError,
    OrdinalOverflowError,
    # Validation
    fits_width,
    is_cardinal,
    validate_cardinal,
    # Checked operations
    checked_add,
    checked_sub,
)

__all__ = [
    # Width bounds
    "U8_MAX",
    "U16_MAX",
    "U32_MAX",
    "U64_MAX",
    "U128_MAX",
    "USIZE_BITS",
    "USIZE_MAX",
    "max_for_bits",
    # Exceptions
    "OrdinalError",
    "OrdinalOverflowError",
    "OrdinalDomainViolation",
    # Validation
    "is_cardinal",
    "fits_width",
    "validate_cardinal",
    # Checked operations
    "checked_add",
    "checked_sub",
]
