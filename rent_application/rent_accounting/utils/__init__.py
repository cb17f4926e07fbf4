"""
Utility functions for rent scheduling
"""

from .date_utils import (
    eomonth,
    days_in_month,
    next_rent_due_date,
    start_of_next_month,
    same_month,
    months_between,
    to_date,
)

from .finance import (
    PRORATION_BASIS_DAYS,
    to_decimal,
    round_currency,
    escalate_rent,
    prorate_rent,
)

__all__ = [
    # Date utilities
    'eomonth',
    'days_in_month',
    'next_rent_due_date',
    'start_of_next_month',
    'same_month',
    'months_between',
    'to_date',

    # Finance utilities
    'PRORATION_BASIS_DAYS',
    'to_decimal',
    'round_currency',
    'escalate_rent',
    'prorate_rent',
]
