"""
Monthly Rent Schedule Generator
Determines vacancy, rent amount and due date for each month in a reporting window

Rules:
  - Months before the lease start month are vacant (rent 0)
  - The lease start month is prorated on a 30-day basis
  - Rent changes by rent_change_rate every rent_change_frequency months after the start month
  - Due dates past the end of a month fall on the month's last day
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional
import logging

from rent_application.rent_accounting.core.models import RentRecord, ScheduleParameters, ScheduleSummary
from rent_application.rent_accounting.utils.date_utils import (
    days_in_month,
    month_index,
    next_rent_due_date,
    same_month,
    start_of_next_month,
)
from rent_application.rent_accounting.utils.finance import (
    PRORATION_BASIS_DAYS,
    escalate_rent,
    money_context,
    prorate_rent,
    round_currency,
)

logger = logging.getLogger(__name__)

ZERO_RENT = round_currency(0)


def calculate_monthly_rent(
    base_monthly_rent,
    lease_start_date,
    window_start_date,
    window_end_date,
    day_of_month_rent_due: int,
    rent_change_frequency: int,
    rent_change_rate,
) -> List[RentRecord]:
    """
    Determines the vacancy, rent amount and due date for each month in a given time window

    Args:
        base_monthly_rent: The base or starting monthly rent for the unit
        lease_start_date: The date the tenant's lease starts
        window_start_date: The first date of the time window
        window_end_date: The last date of the time window
        day_of_month_rent_due: Day of each month on which rent is due (1-31)
        rent_change_frequency: Frequency in months at which rent changes
        rent_change_rate: Rate to increase or decrease rent, as a decimal (not %),
            positive for increase, negative for decrease
    Returns:
        List of RentRecord in due date order

    Raises:
        InvalidParameter: if the parameters fail validation
    """
    params = ScheduleParameters.create(
        base_monthly_rent,
        lease_start_date,
        window_start_date,
        window_end_date,
        day_of_month_rent_due,
        rent_change_frequency,
        rent_change_rate,
    )
    return generate_rent_schedule(params)


def generate_rent_schedule(params: ScheduleParameters) -> List[RentRecord]:
    """Generate the rent schedule for validated ScheduleParameters"""
    params.validate()

    records: List[RentRecord] = []
    current_rent = params.base_monthly_rent
    current_date = params.window_start_date
    months_since_rent_change = 0
    lease_start = params.lease_start_date
    due_day = params.day_of_month_rent_due

    logger.debug(
        f"Generating rent schedule: base={params.base_monthly_rent}, lease_start={lease_start}, "
        f"window={params.window_start_date}..{params.window_end_date}, due_day={due_day}, "
        f"change every {params.rent_change_frequency} month(s) at {params.rent_change_rate}"
    )

    while current_date is not None and current_date <= params.window_end_date:
        rent_due_date = next_rent_due_date(current_date, due_day)

        # Months before the lease starts are vacant
        if month_index(current_date) < month_index(lease_start):
            records.append(RentRecord(vacancy=True, rent_amount=ZERO_RENT, rent_due_date=rent_due_date))
            current_date = _next_month(current_date)
            continue

        if same_month(current_date, lease_start):
            records.extend(_lease_start_month_records(current_rent, lease_start, rent_due_date, due_day))
            current_date = _next_month(current_date)
            continue

        months_since_rent_change += 1
        if months_since_rent_change == params.rent_change_frequency:
            previous_rent = current_rent
            current_rent = escalate_rent(current_rent, params.rent_change_rate)
            months_since_rent_change = 0
            logger.debug(f"Rent changed {previous_rent} -> {current_rent} for {rent_due_date}")

        records.append(RentRecord(vacancy=False, rent_amount=round_currency(current_rent), rent_due_date=rent_due_date))
        current_date = _next_month(current_date)

    logger.debug(f"Rent schedule complete: {len(records)} records")
    return records


def _next_month(current_date: date) -> Optional[date]:
    """Start of the following month, None once the cursor is in the last representable month"""
    if same_month(current_date, date.max):
        return None
    return start_of_next_month(current_date)


def _lease_start_month_records(
    current_rent: Decimal,
    lease_start: date,
    rent_due_date: date,
    due_day: int,
) -> List[RentRecord]:
    """Prorated charges for the month the lease starts in"""
    full_rent = RentRecord(vacancy=False, rent_amount=round_currency(current_rent), rent_due_date=rent_due_date)

    # Lease starts on the 1st and rent is due at month end: one full charge
    if lease_start.day == 1 and due_day > days_in_month(lease_start):
        return [full_rent]

    # Lease starts before the due date: prorated charge up to the due date, then the full charge
    if (lease_start.day == 1 and rent_due_date.day != 1) or lease_start.day < rent_due_date.day:
        prorated = prorate_rent(current_rent, rent_due_date.day - lease_start.day)
        return [
            RentRecord(vacancy=False, rent_amount=prorated, rent_due_date=lease_start),
            full_rent,
        ]

    # Lease starts on or after the due date: single prorated charge
    prorated = prorate_rent(current_rent, PRORATION_BASIS_DAYS - (lease_start.day - due_day))
    return [RentRecord(vacancy=False, rent_amount=prorated, rent_due_date=lease_start)]


def summarize_schedule(records: List[RentRecord]) -> ScheduleSummary:
    """Totals over a rent schedule"""
    if not records:
        return ScheduleSummary()

    amounts = [record.rent_amount for record in records]
    with money_context(max(amounts, key=abs), Decimal(len(amounts))):
        total_rent = sum(amounts, Decimal('0'))
    return ScheduleSummary(
        record_count=len(records),
        vacant_months=sum(1 for record in records if record.vacancy),
        total_rent=round_currency(total_rent),
        first_due_date=records[0].rent_due_date,
        last_due_date=records[-1].rent_due_date,
    )
