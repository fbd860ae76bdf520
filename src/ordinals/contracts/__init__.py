"""
Contract Validation Module

Валидация и сериализация порядковых чисел через JSON Schema контракт.
"""

from .serialization import dump_ordinal, load_ordinal
from .validators import (
    OrdinalContractValidator,
    SchemaLoader,
    validate_ordinal,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "OrdinalContractValidator",
    # Functions
    "validate_ordinal",
    "dump_ordinal",
    "load_ordinal",
]
