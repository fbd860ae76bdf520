"""
Ordinal — порядковые числа фиксированной ширины

Immutable value object, отделяющий порядковое число (1st, 2nd, 3rd, ...)
от кардинала, из которого оно построено. Конверсия всегда явная:
from_zero_based / from_one_based и to_zero_based / to_one_based.
Это исключает off-by-one ошибки между 0-based индексами и 1-based
нумерацией естественного языка.

Внутреннее хранение всегда 1-based: "first" = 1, "0th" не существует.

Семейство ширин: O8, O16, O32, O64, O128, Osize (pointer-sized).
Каждый класс несёт BITS/MAX, все операции проверяют границы своей ширины.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 1 <= one_based <= MAX для каждого экземпляра
2. Равенство, порядок и hash определены только по one_based и только
   внутри одной ширины
3. Переполнение → OrdinalOverflowError, значение ниже first →
   OrdinalDomainViolation; checked_* варианты возвращают None
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Final, Optional, TypeVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from src.ordinals.math.checked import (
    U8_MAX,
    U16_MAX,
    U32_MAX,
    U64_MAX,
    U128_MAX,
    USIZE_BITS,
    USIZE_MAX,
    OrdinalDomainViolation,
    OrdinalOverflowError,
    checked_add,
    checked_sub,
    fits_width,
    is_cardinal,
    validate_cardinal,
)
from src.ordinals.text.formatting import SpellingConfig, format_spelled, format_suffixed

O = TypeVar("O", bound="Ordinal")


# =============================================================================
# BASE
# =============================================================================


@dataclass(frozen=True, order=True)
class Ordinal:
    """
    Порядковое число, абстрактная база для ширин.

    Immutable (frozen=True): арифметика создаёт новый экземпляр.
    Значение по умолчанию — first: O32() == O32.from_one_based(1).

    Прямой вызов конструктора принимает 1-based значение; для
    конверсии из индексов используйте from_zero_based.
    """

    one_based: int = 1

    BITS: ClassVar[int] = 0
    MAX: ClassVar[int] = 0

    def __post_init__(self) -> None:
        type(self)._require_width()
        validate_cardinal(self.one_based, "one_based", self.MAX)
        if self.one_based == 0:
            raise OrdinalDomainViolation("0 is not a valid 1-based ordinal")

    @classmethod
    def _require_width(cls) -> None:
        if cls.MAX <= 0:
            raise TypeError(
                f"{cls.__name__} has no integer width; use O8, O16, O32, O64, O128 or Osize"
            )

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def first(cls: type[O]) -> O:
        """Первое (наименьшее) порядковое число."""
        return cls(1)

    @classmethod
    def from_zero_based(cls: type[O], n: int) -> O:
        """
        Порядковое число для позиции n при счёте от 0 (хранится n + 1).

        Args:
            n: 0-based кардинал (0..MAX)

        Returns:
            Порядковое число; from_zero_based(0) — first

        Raises:
            TypeError: Если n не int
            OrdinalOverflowError: Если n == MAX (n + 1 не помещается в ширину)
        """
        cls._require_width()
        validate_cardinal(n, "n", cls.MAX)
        if n == cls.MAX:
            raise OrdinalOverflowError(f"value {n} is too big for {cls.__name__}")
        return cls(n + 1)

    @classmethod
    def from_one_based(cls: type[O], n: int) -> O:
        """
        Порядковое число для позиции n при счёте от 1 (хранится n).

        Args:
            n: 1-based кардинал (1..MAX)

        Raises:
            TypeError: Если n не int
            OrdinalDomainViolation: Если n == 0 (нет "0th")
            OrdinalOverflowError: Если n > MAX
        """
        cls._require_width()
        validate_cardinal(n, "n", cls.MAX)
        if n == 0:
            raise OrdinalDomainViolation("0 is not a valid 1-based ordinal")
        return cls(n)

    @classmethod
    def try_from_zero_based(cls: type[O], n: int) -> Optional[O]:
        """Как from_zero_based, но None вместо exception для n вне 0..MAX-1."""
        cls._require_width()
        if not is_cardinal(n):
            raise TypeError(f"n must be an int, got {type(n).__name__}")
        if not fits_width(n, cls.MAX - 1):
            return None
        return cls(n + 1)

    @classmethod
    def try_from_one_based(cls: type[O], n: int) -> Optional[O]:
        """Как from_one_based, но None вместо exception для n вне 1..MAX."""
        cls._require_width()
        if not is_cardinal(n):
            raise TypeError(f"n must be an int, got {type(n).__name__}")
        if n == 0 or not fits_width(n, cls.MAX):
            return None
        return cls(n)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_zero_based(self) -> int:
        """Эквивалентный 0-based кардинал (индекс)."""
        return self.one_based - 1

    def to_one_based(self) -> int:
        """Эквивалентный 1-based кардинал."""
        return self.one_based

    def next(self: O) -> O:
        """
        Следующее порядковое число.

        Raises:
            OrdinalOverflowError: Если self — последнее значение ширины
        """
        return self.add(1)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def checked_add(self: O, rhs: int) -> Optional[O]:
        """
        self + rhs без exception.

        Returns:
            Новое порядковое число или None, если rhs вне ширины или
            результат больше MAX
        """
        if not is_cardinal(rhs):
            raise TypeError(f"rhs must be an int, got {type(rhs).__name__}")
        if not fits_width(rhs, self.MAX):
            return None
        result = checked_add(self.one_based, rhs, self.MAX)
        if result is None:
            return None
        return type(self)(result)

    def checked_subtract(self: O, rhs: int) -> Optional[O]:
        """
        self - rhs без exception.

        Returns:
            Новое порядковое число или None, если результат ниже first
        """
        if not is_cardinal(rhs):
            raise TypeError(f"rhs must be an int, got {type(rhs).__name__}")
        if not fits_width(rhs, self.MAX):
            return None
        result = checked_sub(self.one_based, rhs, floor=1)
        if result is None:
            return None
        return type(self)(result)

    def checked_difference(self, other: "Ordinal") -> Optional[int]:
        """
        Количество шагов от other до self без exception.

        Returns:
            self.one_based - other.one_based или None, если other > self
        """
        self._require_same_width(other)
        return checked_sub(self.one_based, other.one_based)

    def add(self: O, rhs: int) -> O:
        """
        self + rhs.

        Raises:
            TypeError: Если rhs не int
            OrdinalOverflowError: Если rhs вне ширины или результат > MAX
        """
        validate_cardinal(rhs, "rhs", self.MAX)
        result = self.checked_add(rhs)
        if result is None:
            raise OrdinalOverflowError(
                f"{self} + {rhs} overflows {type(self).__name__} (max {self.MAX})"
            )
        return result

    def subtract(self: O, rhs: int) -> O:
        """
        self - rhs.

        Raises:
            TypeError: Если rhs не int
            OrdinalOverflowError: Если rhs вне ширины
            OrdinalDomainViolation: Если результат ниже first
        """
        validate_cardinal(rhs, "rhs", self.MAX)
        result = self.checked_subtract(rhs)
        if result is None:
            raise OrdinalDomainViolation(f"{self} - {rhs} is below the first ordinal")
        return result

    def difference(self, other: "Ordinal") -> int:
        """
        Количество шагов от other до self: self.one_based - other.one_based.

        Результат беззнаковый, как целое ширины.

        Raises:
            TypeError: Если other другой ширины
            OrdinalDomainViolation: Если other > self (разность отрицательна)
        """
        result = self.checked_difference(other)
        if result is None:
            raise OrdinalDomainViolation(
                f"{self} - {other} is negative and cannot be represented as "
                f"an unsigned {type(self).__name__} difference"
            )
        return result

    def _require_same_width(self, other: object) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}"
            )

    def __add__(self: O, other: object) -> O:
        if not is_cardinal(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Any:
        if type(other) is type(self):
            return self.difference(other)
        if is_cardinal(other):
            return self.subtract(other)
        return NotImplemented

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def suffixed(self) -> str:
        """Короткая форма: "1st", "4th", "113th"."""
        return format_suffixed(self.one_based)

    def spelled(self, config: Optional[SpellingConfig] = None) -> str:
        """Прописная форма ("third"), выше cutover — короткая форма."""
        return format_spelled(self.one_based, config)

    def __str__(self) -> str:
        return self.suffixed()

    # -------------------------------------------------------------------------
    # Pydantic
    # -------------------------------------------------------------------------

    @classmethod
    def _from_serialized(cls: type[O], value: int) -> O:
        # pydantic превращает ValueError (не TypeError) в ValidationError
        if cls.MAX <= 0:
            raise ValueError(
                f"{cls.__name__} has no integer width; annotate the field with "
                "O8, O16, O32, O64, O128 or Osize"
            )
        ordinal = cls.try_from_one_based(value)
        if ordinal is None:
            raise ValueError(
                f"{value} is not a valid 1-based {cls.__name__} (expected 1..{cls.MAX})"
            )
        return ordinal

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Схема pydantic: сериализация в 1-based int (не "4th").

        Валидация принимает строгий int >= 1 (в пределах ширины) или
        готовый экземпляр этой ширины.
        """
        from_int = core_schema.no_info_after_validator_function(
            cls._from_serialized,
            core_schema.int_schema(ge=1, strict=True),
        )
        return core_schema.json_or_python_schema(
            json_schema=from_int,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_int]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_one_based,
                return_schema=core_schema.int_schema(),
            ),
        )


# =============================================================================
# WIDTHS
# =============================================================================


class O8(Ordinal):
    """Порядковое число, представленное u8."""

    BITS = 8
    MAX = U8_MAX


class O16(Ordinal):
    """Порядковое число, представленное u16."""

    BITS = 16
    MAX = U16_MAX


class O32(Ordinal):
    """Порядковое число, представленное u32."""

    BITS = 32
    MAX = U32_MAX


class O64(Ordinal):
    """Порядковое число, представленное u64."""

    BITS = 64
    MAX = U64_MAX


class O128(Ordinal):
    """Порядковое число, представленное u128."""

    BITS = 128
    MAX = U128_MAX


class Osize(Ordinal):
    """Порядковое число, представленное pointer-sized usize."""

    BITS = USIZE_BITS
    MAX = USIZE_MAX


# Имя ширины → класс (для аннотаций в литералах, например "4-th O32")
ORDINAL_KINDS: Final[dict[str, type[Ordinal]]] = {
    kind.__name__: kind for kind in (O8, O16, O32, O64, O128, Osize)
}


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def ordinal0(n: int, kind: type[O] = Osize) -> O:
    """
    0-based порядковое число: ordinal0(4) — пятое.

    Args:
        n: 0-based кардинал
        kind: Ширина результата (default: Osize)
    """
    return kind.from_zero_based(n)


def ordinal1(n: int, kind: type[O] = Osize) -> O:
    """
    1-based порядковое число: ordinal1(4) — четвёртое.

    Args:
        n: 1-based кардинал
        kind: Ширина результата (default: Osize)
    """
    return kind.from_one_based(n)
