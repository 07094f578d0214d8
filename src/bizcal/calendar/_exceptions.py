from __future__ import annotations


class CalendarError(Exception):
    """Base exception for all calendar-related errors."""


class DegenerateCalendarError(CalendarError):
    """
    Raised when an operation needs a business day but the calendar has no
    working days, so no business day can exist.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            f"{operation}: no business day exists in this calendar "
            "(working-day set is empty)."
        )


class DateRangeError(CalendarError):
    """Raised when a scan runs past ``date.min`` or ``date.max``."""
