"""
Exceptions raised by rent schedule calculations
"""


class RentScheduleError(Exception):
    """Base class for rent schedule errors"""


class InvalidParameter(RentScheduleError, ValueError):
    """Schedule parameters failed validation; no records are produced"""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")
