"""
Formatting — текстовое представление порядковых чисел

Два независимых способа рендеринга 1-based значения:
- Короткая форма: цифры + английский суффикс ("1st", "22nd", "113th")
- Прописная форма: английское слово ("first", "third") для первых
  SPELLED_ORDINAL_LIMIT значений, далее fallback на короткую форму

Правило суффикса:
    v % 100 in {11, 12, 13} → "th"  (teen-исключение важнее последней цифры)
    иначе по v % 10: 1 → "st", 2 → "nd", 3 → "rd", остальное → "th"
"""

from dataclasses import dataclass
from typing import Final, Optional

# =============================================================================
# ТАБЛИЦЫ
# =============================================================================

# Прописные формы, индекс = 1-based значение - 1
SPELLED_ORDINALS: Final[tuple[str, ...]] = (
    "first",
    "second",
    "third",
    "fourth",
    "fifth",
    "sixth",
    "seventh",
    "eighth",
    "ninth",
    "tenth",
    "eleventh",
    "twelfth",
    "thirteenth",
    "fourteenth",
    "fifteenth",
    "sixteenth",
    "seventeenth",
    "eighteenth",
    "nineteenth",
    "twentieth",
)

# Значения выше этого рендерятся в короткой форме ("21st")
SPELLED_ORDINAL_LIMIT: Final[int] = len(SPELLED_ORDINALS)

# Слово → 1-based значение (для парсера литералов)
WORD_VALUES: Final[dict[str, int]] = {
    word: index for index, word in enumerate(SPELLED_ORDINALS, start=1)
}

ORDINAL_SUFFIXES: Final[frozenset[str]] = frozenset({"st", "nd", "rd", "th"})

_TEEN_EXCEPTIONS: Final[frozenset[int]] = frozenset({11, 12, 13})
_LAST_DIGIT_SUFFIXES: Final[dict[int, str]] = {1: "st", 2: "nd", 3: "rd"}


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class SpellingConfig:
    """Конфигурация прописного рендеринга.

    limit — последнее значение, которое пишется словом.
    0 означает "всегда короткая форма".
    """
    limit: int = SPELLED_ORDINAL_LIMIT

    def __post_init__(self) -> None:
        if not 0 <= self.limit <= SPELLED_ORDINAL_LIMIT:
            raise ValueError(
                f"limit must be in [0, {SPELLED_ORDINAL_LIMIT}], got {self.limit}"
            )


# =============================================================================
# РЕНДЕРИНГ
# =============================================================================


def ordinal_suffix(value: int) -> str:
    """
    Английский суффикс для 1-based значения.

    Args:
        value: 1-based значение (>= 1)

    Returns:
        "st", "nd", "rd" или "th"

    Examples:
        >>> ordinal_suffix(1)
        'st'
        >>> ordinal_suffix(12)
        'th'
        >>> ordinal_suffix(112)
        'th'
        >>> ordinal_suffix(122)
        'nd'
    """
    if value % 100 in _TEEN_EXCEPTIONS:
        return "th"
    return _LAST_DIGIT_SUFFIXES.get(value % 10, "th")


def format_suffixed(value: int) -> str:
    """
    Короткая форма: десятичные цифры + суффикс.

    Examples:
        >>> format_suffixed(4)
        '4th'
        >>> format_suffixed(101)
        '101st'
    """
    return f"{value}{ordinal_suffix(value)}"


def format_spelled(value: int, config: Optional[SpellingConfig] = None) -> str:
    """
    Прописная форма с fallback на короткую.

    Args:
        value: 1-based значение (>= 1)
        config: Конфигурация cutover (default: первые 20 значений словом)

    Returns:
        Слово для value <= config.limit, иначе format_suffixed(value)

    Examples:
        >>> format_spelled(3)
        'third'
        >>> format_spelled(20)
        'twentieth'
        >>> format_spelled(21)
        '21st'
    """
    limit = (config or SpellingConfig()).limit
    if 1 <= value <= limit:
        return SPELLED_ORDINALS[value - 1]
    return format_suffixed(value)
