"""
Calendar and money helper tests
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from rent_application.rent_accounting.utils import (
    days_in_month,
    eomonth,
    escalate_rent,
    months_between,
    next_rent_due_date,
    prorate_rent,
    round_currency,
    start_of_next_month,
    to_date,
    to_decimal,
)


@pytest.mark.parametrize('d, months, expected', [
    (date(2024, 2, 10), 0, date(2024, 2, 29)),
    (date(2023, 2, 10), 0, date(2023, 2, 28)),
    (date(2023, 1, 31), 1, date(2023, 2, 28)),
    (date(2023, 12, 5), 0, date(2023, 12, 31)),
    (date(2024, 1, 15), -1, date(2023, 12, 31)),
])
def test_eomonth(d, months, expected):
    assert eomonth(d, months) == expected


@pytest.mark.parametrize('d, expected', [
    (date(2000, 2, 1), 29),
    (date(2100, 2, 1), 28),
    (date(2024, 2, 1), 29),
    (date(2023, 4, 1), 30),
    (date(2023, 7, 1), 31),
])
def test_days_in_month(d, expected):
    assert days_in_month(d) == expected


@pytest.mark.parametrize('d, due_day, expected', [
    (date(2023, 2, 1), 31, date(2023, 2, 28)),
    (date(2024, 2, 1), 30, date(2024, 2, 29)),
    (date(2023, 4, 10), 31, date(2023, 4, 30)),
    (date(2023, 1, 20), 15, date(2023, 1, 15)),
    (date(2023, 3, 1), 31, date(2023, 3, 31)),
])
def test_next_rent_due_date(d, due_day, expected):
    assert next_rent_due_date(d, due_day) == expected


def test_start_of_next_month():
    assert start_of_next_month(date(2023, 12, 15)) == date(2024, 1, 1)
    assert start_of_next_month(date(2024, 1, 31)) == date(2024, 2, 1)
    assert start_of_next_month(date(2024, 2, 1)) == date(2024, 3, 1)


def test_months_between():
    assert months_between(date(2023, 1, 15), date(2023, 3, 1)) == 3
    assert months_between(date(2023, 11, 30), date(2024, 2, 1)) == 4
    assert months_between(date(2023, 5, 1), date(2023, 5, 31)) == 1


def test_to_date():
    assert to_date('2023-01-31') == date(2023, 1, 31)
    assert to_date(datetime(2023, 1, 31, 23, 59)) == date(2023, 1, 31)
    assert to_date(date(2023, 1, 31)) == date(2023, 1, 31)

    with pytest.raises(ValueError):
        to_date('2023-13-01')
    with pytest.raises(TypeError):
        to_date(20230101)


def test_to_decimal():
    assert to_decimal(0.1) == Decimal('0.1')
    assert to_decimal(100) == Decimal('100')
    assert to_decimal(' 12.50 ') == Decimal('12.50')

    with pytest.raises(TypeError):
        to_decimal(True)
    with pytest.raises(ValueError):
        to_decimal('abc')
    with pytest.raises(ValueError):
        to_decimal('NaN')
    with pytest.raises(ValueError):
        to_decimal(float('inf'))


def test_round_currency_half_away_from_zero():
    assert round_currency(Decimal('2.675')) == Decimal('2.68')
    assert round_currency(Decimal('-2.675')) == Decimal('-2.68')
    assert round_currency(2.674) == Decimal('2.67')
    assert str(round_currency(0)) == '0.00'


def test_escalate_rent():
    assert escalate_rent(100, 0.1) == Decimal('110.00')
    assert escalate_rent(Decimal('110.00'), Decimal('-0.1')) == Decimal('99.00')
    assert escalate_rent(Decimal('100.05'), Decimal('0.1')) == Decimal('110.06')


def test_prorate_rent_uses_30_day_basis():
    assert prorate_rent(100, 14) == Decimal('46.67')
    assert prorate_rent(Decimal('1000'), 31) == Decimal('1033.33')
    assert prorate_rent(100, 30) == Decimal('100.00')


def test_round_currency_beyond_default_precision():
    assert round_currency(Decimal('1e30')) == Decimal('1e30')
    assert round_currency(Decimal('123456789012345678901234567890.125')) == Decimal('123456789012345678901234567890.13')


def test_escalate_and_prorate_large_rent():
    assert escalate_rent(Decimal('1e27'), Decimal('0.001')) == Decimal('1.001e27')
    assert prorate_rent(Decimal('3e27'), 10) == Decimal('1e27')
