"""
Domain models и value objects.

Содержит порядковые числа фиксированной ширины (O8 ... O128, Osize).
"""

from src.ordinals.domain.ordinal import (
    O8,
    O16,
    O32,
    O64,
    O128,
    ORDINAL_KINDS,
    Ordinal,
    Osize,
    ordinal0,
    ordinal1,
)

__all__ = [
    # Base
    "Ordinal",
    # Widths
    "O8",
    "O16",
    "O32",
    "O64",
    "O128",
    "Osize",
    "ORDINAL_KINDS",
    # Convenience functions
    "ordinal0",
    "ordinal1",
]
