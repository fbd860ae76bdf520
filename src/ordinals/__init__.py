"""
Ordinal number types.

Порядковые числа (first, second, third, ...) в естественном языке 1-based,
а индексы в Python 0-based. Пакет даёт отдельный тип для порядкового
числа с явной конверсией из/в кардиналы:

    >>> from src.ordinals import Osize, ordinal
    >>> str(Osize.from_zero_based(3))
    '4th'
    >>> Osize.from_one_based(3).spelled()
    'third'
    >>> ordinal("5-th O32") - 3 == ordinal("second O32")
    True
    >>> ordinal("5-th O32") - ordinal("second O32")
    3

Значение по умолчанию — first.
"""

from src.ordinals.math import (
    OrdinalDomainViolation,
    OrdinalError,
    OrdinalOverflowError,
)
from src.ordinals.text import (
    SPELLED_ORDINAL_LIMIT,
    SpellingConfig,
    format_spelled,
    format_suffixed,
    ordinal_suffix,
)
from src.ordinals.domain import (
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
from src.ordinals.literal import (
    LiteralConfig,
    OrdinalLiteral,
    OrdinalParseError,
    ordinal,
    parse_literal,
)
from src.ordinals.contracts import (
    OrdinalContractValidator,
    dump_ordinal,
    load_ordinal,
    validate_ordinal,
)

__all__ = [
    # Exceptions
    "OrdinalError",
    "OrdinalOverflowError",
    "OrdinalDomainViolation",
    "OrdinalParseError",
    # Types
    "Ordinal",
    "O8",
    "O16",
    "O32",
    "O64",
    "O128",
    "Osize",
    "ORDINAL_KINDS",
    # Construction
    "ordinal0",
    "ordinal1",
    # Formatting
    "SPELLED_ORDINAL_LIMIT",
    "SpellingConfig",
    "format_spelled",
    "format_suffixed",
    "ordinal_suffix",
    # Literals
    "LiteralConfig",
    "OrdinalLiteral",
    "ordinal",
    "parse_literal",
    # Contracts
    "OrdinalContractValidator",
    "validate_ordinal",
    "dump_ordinal",
    "load_ordinal",
]
