"""
Literal parsing порядковых чисел ("4-th", "second", "5-th O32").
"""

from .parser import (
    DEFAULT_KIND_NAME,
    LiteralConfig,
    OrdinalLiteral,
    OrdinalParseError,
    ordinal,
    parse_literal,
)

__all__ = [
    "DEFAULT_KIND_NAME",
    "LiteralConfig",
    "OrdinalLiteral",
    "OrdinalParseError",
    "ordinal",
    "parse_literal",
]
