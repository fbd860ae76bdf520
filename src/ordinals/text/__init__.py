"""
Text rendering порядковых чисел (английский).
"""

from src.ordinals.text.formatting import (
    ORDINAL_SUFFIXES,
    SPELLED_ORDINAL_LIMIT,
    SPELLED_ORDINALS,
    WORD_VALUES,
    SpellingConfig,
    format_spelled,
    format_suffixed,
    ordinal_suffix,
)

__all__ = [
    # Tables
    "ORDINAL_SUFFIXES",
    "SPELLED_ORDINAL_LIMIT",
    "SPELLED_ORDINALS",
    "WORD_VALUES",
    # Config
    "SpellingConfig",
    # Functions
    "format_spelled",
    "format_suffixed",
    "ordinal_suffix",
]
