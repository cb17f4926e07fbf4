"""
Rent accounting: monthly rent schedules with vacancy, proration and escalation
"""

from .core import RentScheduleError, InvalidParameter, RentRecord, ScheduleParameters, ScheduleSummary
from .schedule import calculate_monthly_rent, generate_rent_schedule, summarize_schedule

__all__ = [
    'RentScheduleError',
    'InvalidParameter',
    'RentRecord',
    'ScheduleParameters',
    'ScheduleSummary',
    'calculate_monthly_rent',
    'generate_rent_schedule',
    'summarize_schedule',
]
