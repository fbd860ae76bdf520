"""
Serialization — порядковые числа ↔ plain integer

Порядковое число сериализуется в своё 1-based целое значение,
а не в текст ("4th"). Загрузка проверяет контракт ordinal.json
с максимумом ширины и только затем строит экземпляр.
"""

from typing import Any, TypeVar

from src.ordinals.contracts.validators import OrdinalContractValidator
from src.ordinals.domain.ordinal import Ordinal

O = TypeVar("O", bound=Ordinal)


def dump_ordinal(value: Ordinal) -> int:
    """
    Сериализация порядкового числа.

    Args:
        value: Порядковое число любой ширины

    Returns:
        1-based целое (first → 1)
    """
    if not isinstance(value, Ordinal):
        raise TypeError(f"expected an Ordinal, got {type(value).__name__}")
    return value.to_one_based()


def load_ordinal(data: Any, kind: type[O]) -> O:
    """
    Десериализация порядкового числа.

    Args:
        data: 1-based целое из JSON
        kind: Ширина результата

    Returns:
        Порядковое число kind

    Raises:
        ValidationError: Если data не соответствует контракту ширины
    """
    OrdinalContractValidator(kind).validate(data)
    # JSON Schema считает 4.0 целым числом
    return kind.from_one_based(int(data))
