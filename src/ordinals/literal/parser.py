"""
Literal Parser — порядковые числа из текста

Runtime-парсер литералов для мест создания порядковых чисел.
Используется на уровне модуля, чтобы неверный литерал падал при импорте,
а не при первом выполнении кода.

Грамматика:
    literal  := body [ws kind]
    body     := word | digits ["-" | ws] suffix | digits [ws] "."
    word     := "first" | "second" | ... | "twentieth"
    suffix   := "st" | "nd" | "rd" | "th"   (должен соответствовать digits)
    kind     := "O8" | "O16" | "O32" | "O64" | "O128" | "Osize"

Примеры: "4-th", "21st", "4 th", "4.", "second", "5-th O32".

Неверный суффикс ("4-st") — ошибка, никогда не исправляется молча.
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Final, NamedTuple, Optional

from src.ordinals.domain.ordinal import ORDINAL_KINDS, Ordinal
from src.ordinals.math.checked import U128_MAX, USIZE_MAX, OrdinalError, OrdinalOverflowError
from src.ordinals.text.formatting import ORDINAL_SUFFIXES, WORD_VALUES, ordinal_suffix

logger = logging.getLogger(__name__)

DEFAULT_KIND_NAME: Final[str] = "Osize"

# Длиннее (без ведущих нулей) не помещается ни в одну ширину;
# проверяется до int(), у которого есть свой предел длины строки
_MAX_LITERAL_DIGITS: Final[int] = len(str(max(U128_MAX, USIZE_MAX)))

_LITERAL_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    (?:
        (?P<word>[a-z]+)
      | (?P<digits>[0-9]+)
        (?:
            (?P<sep>-|\s+)?(?P<suffix>[a-z]+)
          | \s*(?P<dot>\.)
        )
    )
    (?:\s+(?P<kind>[A-Za-z][A-Za-z0-9]*))?
    """,
    re.VERBOSE,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class OrdinalParseError(OrdinalError, ValueError):
    """
    Нарушение грамматики литерала.

    Возникает при:
    1. Пустом или синтаксически неверном тексте
    2. Суффиксе, не соответствующем цифрам ("4-st", "11-st")
    3. Неизвестном слове ("zeroth", "hundredth")
    4. Неизвестной или конфликтующей аннотации ширины
    """


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class LiteralConfig:
    """Конфигурация парсера литералов.

    - default_kind_name: ширина, если нет ни аннотации, ни kind
    - allow_dot: принимать форму "4."
    - require_dash: требовать "4-th" (отклонять "4th" и "4 th")
    """
    default_kind_name: str = DEFAULT_KIND_NAME
    allow_dot: bool = True
    require_dash: bool = False

    def __post_init__(self) -> None:
        if self.default_kind_name not in ORDINAL_KINDS:
            raise ValueError(
                f"default_kind_name must be one of {sorted(ORDINAL_KINDS)}, "
                f"got {self.default_kind_name!r}"
            )


class OrdinalLiteral(NamedTuple):
    """Результат разбора литерала (без построения порядкового числа)."""

    value: int
    kind_name: Optional[str]


# =============================================================================
# PARSING
# =============================================================================


@lru_cache(maxsize=256)
def parse_literal(text: str, config: Optional[LiteralConfig] = None) -> OrdinalLiteral:
    """
    Разбор литерала в 1-based значение и необязательную аннотацию ширины.

    Args:
        text: Литерал, например "4-th", "second O8"
        config: Конфигурация парсера (default: LiteralConfig())

    Returns:
        OrdinalLiteral(value, kind_name)

    Raises:
        TypeError: Если text не str
        OrdinalParseError: Если литерал нарушает грамматику
        OrdinalOverflowError: Если цифр больше, чем вмещает самая широкая ширина

    Examples:
        >>> parse_literal("4-th")
        OrdinalLiteral(value=4, kind_name=None)
        >>> parse_literal("second O8")
        OrdinalLiteral(value=2, kind_name='O8')
    """
    if not isinstance(text, str):
        raise TypeError(f"literal must be a str, got {type(text).__name__}")

    config = config or LiteralConfig()
    source = text.strip()
    if not source:
        raise OrdinalParseError("empty ordinal literal")

    match = _LITERAL_RE.fullmatch(source)
    if match is None:
        raise OrdinalParseError(f"malformed ordinal literal: {text!r}")

    kind_name = match.group("kind")
    if kind_name is not None and kind_name not in ORDINAL_KINDS:
        raise OrdinalParseError(
            f"unknown ordinal type {kind_name!r} in {text!r}; "
            f"expected one of {sorted(ORDINAL_KINDS)}"
        )

    word = match.group("word")
    if word is not None:
        if word not in WORD_VALUES:
            raise OrdinalParseError(f"unknown ordinal word {word!r} in {text!r}")
        return OrdinalLiteral(WORD_VALUES[word], kind_name)

    significant = match.group("digits").lstrip("0") or "0"
    if len(significant) > _MAX_LITERAL_DIGITS:
        raise OrdinalOverflowError(
            f"ordinal literal {text[:32]!r}... has {len(significant)} significant digits; "
            f"no ordinal width holds more than {_MAX_LITERAL_DIGITS}"
        )
    value = int(significant)

    if match.group("dot") is not None:
        if not config.allow_dot:
            raise OrdinalParseError(f"dot ordinal form is disabled: {text!r}")
        return OrdinalLiteral(value, kind_name)

    suffix = match.group("suffix")
    if suffix not in ORDINAL_SUFFIXES:
        raise OrdinalParseError(f"unknown ordinal suffix {suffix!r} in {text!r}")

    if config.require_dash and match.group("sep") != "-":
        raise OrdinalParseError(f"expected '{value}-{suffix}' form, got {text!r}")

    expected = ordinal_suffix(value)
    if suffix != expected:
        raise OrdinalParseError(
            f"wrong suffix in {text!r}: {value} takes '{expected}', not '{suffix}'"
        )

    return OrdinalLiteral(value, kind_name)


def _resolve_kind(
    literal: OrdinalLiteral,
    kind: Optional[type[Ordinal]],
    config: LiteralConfig,
) -> type[Ordinal]:
    if literal.kind_name is None:
        return kind or ORDINAL_KINDS[config.default_kind_name]

    annotated = ORDINAL_KINDS[literal.kind_name]
    if kind is not None and kind is not annotated:
        raise OrdinalParseError(
            f"literal is annotated as {literal.kind_name} but {kind.__name__} was requested"
        )
    return annotated


def ordinal(
    text: str,
    kind: Optional[type[Ordinal]] = None,
    config: Optional[LiteralConfig] = None,
) -> Ordinal:
    """
    Порядковое число из литерала.

    Ширина: аннотация в тексте ("5-th O32"), иначе kind, иначе
    config.default_kind_name (Osize).

    Args:
        text: Литерал
        kind: Ширина результата (должна совпадать с аннотацией, если она есть)
        config: Конфигурация парсера

    Returns:
        Порядковое число с 1-based значением литерала

    Raises:
        OrdinalParseError: Нарушение грамматики или конфликт ширин
        OrdinalDomainViolation: "0." / "0-th"
        OrdinalOverflowError: Значение не помещается в ширину

    Examples:
        >>> ordinal("4-th", O32)
        O32(one_based=4)
        >>> ordinal("second O8")
        O8(one_based=2)
    """
    config = config or LiteralConfig()
    literal = parse_literal(text, config)
    result = _resolve_kind(literal, kind, config).from_one_based(literal.value)
    logger.debug("Parsed ordinal literal %r as %r", text, result)
    return result
