"""
Rent schedule generation
"""

from .rent_scheduler import calculate_monthly_rent, generate_rent_schedule, summarize_schedule

__all__ = [
    'calculate_monthly_rent',
    'generate_rent_schedule',
    'summarize_schedule',
]
