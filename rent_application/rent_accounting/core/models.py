"""
Data models for rent scheduling
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any
from datetime import date
from decimal import Decimal

from rent_application.rent_accounting.core.exceptions import InvalidParameter
from rent_application.rent_accounting.utils.date_utils import to_date
from rent_application.rent_accounting.utils.finance import to_decimal, round_currency


@dataclass(frozen=True)
class RentRecord:
    """Single billing event in a rent schedule"""
    vacancy: bool
    rent_amount: Decimal
    rent_due_date: date

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            'vacancy': self.vacancy,
            'rent_amount': str(self.rent_amount),
            'rent_due_date': self.rent_due_date.isoformat(),
        }


@dataclass(frozen=True)
class ScheduleParameters:
    """Inputs of a rent schedule calculation"""

    base_monthly_rent: Decimal
    lease_start_date: date
    window_start_date: date
    window_end_date: date
    day_of_month_rent_due: int
    rent_change_frequency: int  # Months between rent changes
    rent_change_rate: Decimal   # Decimal rate, e.g. 0.1 for +10%, -0.1 for -10%

    def validate(self) -> 'ScheduleParameters':
        """Raise InvalidParameter if the parameters cannot produce a schedule"""
        if self.base_monthly_rent <= 0:
            raise InvalidParameter('base_monthly_rent', f"must be greater than 0, got {self.base_monthly_rent}")

        if not _is_int(self.day_of_month_rent_due) or not 1 <= self.day_of_month_rent_due <= 31:
            raise InvalidParameter('day_of_month_rent_due', f"must be an integer from 1 to 31, got {self.day_of_month_rent_due!r}")

        if not _is_int(self.rent_change_frequency) or self.rent_change_frequency <= 0:
            raise InvalidParameter('rent_change_frequency', f"must be a positive integer, got {self.rent_change_frequency!r}")

        if self.window_end_date < self.window_start_date:
            raise InvalidParameter(
                'window_end_date',
                f"{self.window_end_date.isoformat()} is before window start {self.window_start_date.isoformat()}"
            )
        return self

    @classmethod
    def create(cls, base_monthly_rent, lease_start_date, window_start_date, window_end_date,
               day_of_month_rent_due, rent_change_frequency, rent_change_rate) -> 'ScheduleParameters':
        """Build parameters from loosely typed values, converting money to Decimal and dates to date"""
        return cls(
            base_monthly_rent=_decimal_field('base_monthly_rent', base_monthly_rent),
            lease_start_date=_date_field('lease_start_date', lease_start_date),
            window_start_date=_date_field('window_start_date', window_start_date),
            window_end_date=_date_field('window_end_date', window_end_date),
            day_of_month_rent_due=_int_field('day_of_month_rent_due', day_of_month_rent_due),
            rent_change_frequency=_int_field('rent_change_frequency', rent_change_frequency),
            rent_change_rate=_decimal_field('rent_change_rate', rent_change_rate),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ScheduleParameters':
        """Build parameters from a JSON payload"""
        if not isinstance(data, dict):
            raise InvalidParameter('payload', 'expected a JSON object')

        missing = [name for name in cls.__dataclass_fields__ if data.get(name) in (None, '')]
        if missing:
            raise InvalidParameter(missing[0], 'is required')

        return cls.create(**{name: data[name] for name in cls.__dataclass_fields__})

    def to_dict(self) -> dict:
        return {
            'base_monthly_rent': str(self.base_monthly_rent),
            'lease_start_date': self.lease_start_date.isoformat(),
            'window_start_date': self.window_start_date.isoformat(),
            'window_end_date': self.window_end_date.isoformat(),
            'day_of_month_rent_due': self.day_of_month_rent_due,
            'rent_change_frequency': self.rent_change_frequency,
            'rent_change_rate': str(self.rent_change_rate),
        }


@dataclass(frozen=True)
class ScheduleSummary:
    """Totals over a rent schedule"""
    record_count: int = 0
    vacant_months: int = 0
    total_rent: Decimal = round_currency(0)
    first_due_date: Optional[date] = None
    last_due_date: Optional[date] = None

    def to_dict(self) -> dict:
        return {
            'record_count': self.record_count,
            'vacant_months': self.vacant_months,
            'total_rent': str(self.total_rent),
            'first_due_date': self.first_due_date.isoformat() if self.first_due_date else None,
            'last_due_date': self.last_due_date.isoformat() if self.last_due_date else None,
        }


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _decimal_field(name: str, value) -> Decimal:
    try:
        return to_decimal(value)
    except (ValueError, TypeError) as e:
        raise InvalidParameter(name, str(e))


def _date_field(name: str, value) -> date:
    try:
        return to_date(value)
    except (ValueError, TypeError) as e:
        raise InvalidParameter(name, str(e))


def _int_field(name: str, value) -> int:
    # Accept 15, '15' and 15.0 but not 15.5
    if _is_int(value):
        return value
    try:
        number = to_decimal(value)
    except (ValueError, TypeError) as e:
        raise InvalidParameter(name, str(e))
    if number != number.to_integral_value():
        raise InvalidParameter(name, f"must be a whole number, got {value!r}")
    return int(number)
