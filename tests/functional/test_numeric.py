from decimal import Decimal, InvalidOperation

import pytest
from minimalisp.functional.transforms import compact, lmap
from minimalisp.functional.numeric import sum_decimals, to_decimal


def test_sum():
    assert sum_decimals(lmap(Decimal, [1, 2, 3, 4, 5])) == 15


def test_sum_of_compacted_values():
    values = lmap(lambda i: None if i is None else Decimal(i), [1, 2, None, 3])
    total = sum_decimals(compact(values))
    assert total == Decimal(6)
    assert str(total) == "6"


def test_sum_ignores_none():
    assert sum_decimals([Decimal("1.5"), None, Decimal("2.5")]) == Decimal("4.0")


@pytest.mark.parametrize("items", [[], [None, None]])
def test_sum_of_nothing_is_zero(items):
    assert sum_decimals(items) == Decimal(0)


def test_sum_floats_without_rounding_error():
    assert 0.1 + 0.2 != 0.3
    assert sum_decimals([0.1, 0.2]) == Decimal("0.3")


def test_sum_beyond_default_precision():
    big = Decimal("1" + "0" * 40)
    assert sum_decimals([big, Decimal(1)]) == Decimal("1" + "0" * 39 + "1")


def test_to_decimal():
    assert to_decimal(3) == Decimal(3)
    assert to_decimal("2.50") == Decimal("2.50")
    assert to_decimal(0.1) == Decimal("0.1")


@pytest.mark.parametrize("value", [True, [1], object()])
def test_to_decimal_rejects_other_types(value):
    with pytest.raises(TypeError):
        to_decimal(value)


def test_to_decimal_rejects_bad_strings():
    with pytest.raises(InvalidOperation):
        to_decimal("one")
