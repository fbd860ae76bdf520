"""
Тесты для Ordinal: создание, конверсия, сравнение

Проверяет:
1. from_zero_based / from_one_based и обратные конверсии
2. Граничные случаи ширин (MAX, 0)
3. try_* варианты (None вместо exception)
4. Значение по умолчанию, first(), next()
5. Равенство, порядок, hash, immutability
6. ordinal0 / ordinal1
"""

import pytest

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
from src.ordinals.math import OrdinalDomainViolation, OrdinalOverflowError

ALL_KINDS = (O8, O16, O32, O64, O128, Osize)


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


class TestFromZeroBased:
    """Тесты для from_zero_based"""

    def test_index_three_is_fourth(self) -> None:
        """Индекс 3 — четвёртый"""
        o = O32.from_zero_based(3)
        assert o.to_one_based() == 4
        assert o.to_zero_based() == 3
        assert str(o) == "4th"

    def test_index_zero_is_first(self) -> None:
        assert O32.from_zero_based(0) == O32.first()

    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_roundtrip_at_boundaries(self, kind: type[Ordinal]) -> None:
        """Инвариант: to_zero_based(from_zero_based(n)) == n"""
        for n in (0, 1, 41, kind.MAX - 1):
            o = kind.from_zero_based(n)
            assert o.to_zero_based() == n
            assert o.to_one_based() == n + 1

    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_max_overflows(self, kind: type[Ordinal]) -> None:
        """n == MAX: n + 1 не помещается в ширину"""
        with pytest.raises(OrdinalOverflowError, match="too big"):
            kind.from_zero_based(kind.MAX)

    def test_above_width_overflows(self) -> None:
        with pytest.raises(OrdinalOverflowError):
            O8.from_zero_based(300)

    def test_negative_rejected(self) -> None:
        with pytest.raises(OrdinalOverflowError):
            O8.from_zero_based(-1)

    def test_non_int_rejected(self) -> None:
        with pytest.raises(TypeError):
            O8.from_zero_based(3.0)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            O8.from_zero_based("3")  # type: ignore[arg-type]


class TestFromOneBased:
    """Тесты для from_one_based"""

    def test_three_is_third(self) -> None:
        o = O32.from_one_based(3)
        assert o.to_one_based() == 3
        assert o.to_zero_based() == 2
        assert o.spelled() == "third"
        assert str(o) == "3rd"

    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_roundtrip_at_boundaries(self, kind: type[Ordinal]) -> None:
        """Инвариант: to_one_based(from_one_based(n)) == n"""
        for n in (1, 2, 255, kind.MAX):
            assert kind.from_one_based(n).to_one_based() == n

    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_zero_is_domain_violation(self, kind: type[Ordinal]) -> None:
        """Нет "0th" ordinal"""
        with pytest.raises(OrdinalDomainViolation, match="0 is not a valid"):
            kind.from_one_based(0)

    def test_above_width_overflows(self) -> None:
        with pytest.raises(OrdinalOverflowError):
            O16.from_one_based(65_536)


class TestCheckedConstructors:
    """Тесты try_from_zero_based / try_from_one_based"""

    def test_try_from_zero_based(self) -> None:
        assert O8.try_from_zero_based(254) == O8.from_one_based(255)
        assert O8.try_from_zero_based(255) is None
        assert O8.try_from_zero_based(-1) is None

    def test_try_from_one_based(self) -> None:
        assert O8.try_from_one_based(255) == O8.from_one_based(255)
        assert O8.try_from_one_based(0) is None
        assert O8.try_from_one_based(256) is None

    def test_type_errors_still_raised(self) -> None:
        """Неверный тип — ошибка программиста, не None"""
        with pytest.raises(TypeError):
            O8.try_from_one_based(None)  # type: ignore[arg-type]


class TestDirectConstruction:
    """Конструктор класса принимает 1-based значение"""

    def test_default_is_first(self) -> None:
        """Значение по умолчанию — first"""
        assert O32() == O32.from_one_based(1)
        assert O32() == O32.first()
        assert str(O32()) == "1st"
        assert O32().spelled() == "first"

    def test_keyword_construction(self) -> None:
        assert O16(one_based=7) == O16.from_one_based(7)

    def test_zero_rejected(self) -> None:
        with pytest.raises(OrdinalDomainViolation):
            O16(0)

    def test_base_class_is_abstract(self) -> None:
        """Ordinal без ширины нельзя создать"""
        with pytest.raises(TypeError, match="has no integer width"):
            Ordinal()
        with pytest.raises(TypeError, match="has no integer width"):
            Ordinal.from_one_based(1)


class TestNext:
    """Тесты next()"""

    def test_next(self) -> None:
        assert O8.first().next() == O8.from_one_based(2)

    def test_next_at_max_overflows(self) -> None:
        with pytest.raises(OrdinalOverflowError):
            O8.from_one_based(O8.MAX).next()


# =============================================================================
# СРАВНЕНИЕ И IMMUTABILITY
# =============================================================================


class TestValueSemantics:
    """Равенство, порядок, hash"""

    def test_equality_by_value(self) -> None:
        assert O32.from_zero_based(4) == O32.from_one_based(5)
        assert O32.from_one_based(4) != O32.from_one_based(5)

    def test_ordering(self) -> None:
        values = [O32.from_one_based(n) for n in (5, 1, 3)]
        assert sorted(values) == [O32(1), O32(3), O32(5)]
        assert O32(1) < O32(2) <= O32(2)

    def test_hash_consistent_with_equality(self) -> None:
        a = O64.from_zero_based(9)
        b = O64.from_one_based(10)
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_different_widths_not_equal(self) -> None:
        """Разные ширины не смешиваются"""
        assert O8(3) != O16(3)

    def test_different_widths_not_ordered(self) -> None:
        with pytest.raises(TypeError):
            O8(3) < O16(4)  # noqa: B015

    def test_not_equal_to_int(self) -> None:
        """Порядковое число не равно кардиналу"""
        assert O32(3) != 3

    def test_frozen(self) -> None:
        o = O32(3)
        with pytest.raises(AttributeError):
            o.one_based = 4  # type: ignore[misc]

    def test_repr(self) -> None:
        assert repr(O32(4)) == "O32(one_based=4)"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


class TestConvenienceFunctions:
    """Тесты ordinal0 / ordinal1"""

    def test_ordinal0(self) -> None:
        o = ordinal0(3, O32)
        assert isinstance(o, O32)
        assert str(o) == "4th"

    def test_ordinal1(self) -> None:
        o = ordinal1(3, O32)
        assert isinstance(o, O32)
        assert o.spelled() == "third"

    def test_default_kind_is_osize(self) -> None:
        assert isinstance(ordinal0(0), Osize)
        assert ordinal1(1) == Osize.first()

    def test_errors_propagate(self) -> None:
        with pytest.raises(OrdinalDomainViolation):
            ordinal1(0, O8)
        with pytest.raises(OrdinalOverflowError):
            ordinal0(O8.MAX, O8)

    def test_kind_registry(self) -> None:
        assert set(ORDINAL_KINDS) == {"O8", "O16", "O32", "O64", "O128", "Osize"}
        assert ORDINAL_KINDS["O32"] is O32
