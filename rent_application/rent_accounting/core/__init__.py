"""
Core models and errors for rent scheduling
"""

from .exceptions import RentScheduleError, InvalidParameter
from .models import RentRecord, ScheduleParameters, ScheduleSummary

__all__ = [
    'RentScheduleError',
    'InvalidParameter',
    'RentRecord',
    'ScheduleParameters',
    'ScheduleSummary',
]
