"""
Financial calculation utilities
Money rounding, escalation and proration for rent schedules
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext, localcontext
from typing import Union

# Proration always uses a 30-day month, whatever the actual month length
PRORATION_BASIS_DAYS = 30

CENTS = Decimal('0.01')

# Guard digits kept past the cents place before the final rounding
GUARD_DIGITS = 10

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """
    Convert a number to Decimal
    Floats go through str() so 0.1 becomes Decimal('0.1'), not its binary expansion
    """
    if isinstance(value, bool):
        raise TypeError("Boolean is not a valid amount")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"Invalid numeric value: {value!r}")
    else:
        raise TypeError(f"Expected a number, got {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    return result


def money_context(*amounts: Decimal):
    """
    Decimal context wide enough to add, multiply and quantize amounts exactly
    Precision grows with the amounts so rounding to cents never overflows
    """
    ctx = getcontext().copy()
    digits = sum(len(a.as_tuple().digits) + abs(a.as_tuple().exponent) for a in amounts)
    ctx.prec = max(ctx.prec, digits + GUARD_DIGITS)
    return localcontext(ctx)


def round_currency(amount: Number) -> Decimal:
    """Round to cents, halves away from zero"""
    value = to_decimal(amount)
    with money_context(value):
        return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def escalate_rent(monthly_rent: Number, rent_change_rate: Number) -> Decimal:
    """
    Calculate the new monthly rent after a rate change

    Args:
        monthly_rent: Rent before the change
        rent_change_rate: Decimal rate (not %), positive for increase, negative for decrease
    Returns:
        New rent rounded to cents
    """
    rent = to_decimal(monthly_rent)
    rate = to_decimal(rent_change_rate)
    with money_context(rent, rate):
        return round_currency(rent + rent * rate)


def prorate_rent(monthly_rent: Number, days: int) -> Decimal:
    """
    Partial-month rent for a number of days on a 30-day basis

    Args:
        monthly_rent: Full monthly rent
        days: Days charged
    Returns:
        Prorated rent rounded to cents
    """
    rent = to_decimal(monthly_rent)
    with money_context(rent, Decimal(days), Decimal(PRORATION_BASIS_DAYS)):
        return round_currency(rent * days / PRORATION_BASIS_DAYS)
