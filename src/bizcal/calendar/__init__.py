"""
bizcal.calendar
~~~~~~~~~~~~~~~

Business-day arithmetic.  A Calendar holds a set of working weekdays and a set
of holiday dates; a date is a business day iff its weekday is a working day and
it is not a holiday.

Basic usage::

    from datetime import date
    from bizcal.calendar import Calendar

    xmas = date(2020, 12, 25)                        # Friday
    cal = Calendar.with_holidays([xmas])             # Mon–Fri

    cal.is_business_day(xmas)                        # → False
    cal.roll_forward(xmas)                           # → date(2020, 12, 28)
    cal.add_business_days(date(2020, 12, 24), 2)     # → date(2020, 12, 29)

NumPy arrays are accepted everywhere a scalar is::

    import numpy as np
    days = np.array(["2020-12-24", "2020-12-26"], dtype="datetime64[D]")
    cal.add_business_days(days, np.array([1, 1]))   # → ['2020-12-28', '2020-12-28']

Public API
----------
Calendar                 The main class.
Weekday                  Day-of-week enumeration (Monday = 0).
WORKWEEK                 The default working-day set, Monday to Friday.
CalendarError            Base exception for all calendar-related errors.
DateRangeError           Raised when a scan runs off the supported date range.
DegenerateCalendarError  Raised when a calendar with no working days is asked
                         for a business day.
"""

from __future__ import annotations

from bizcal.calendar._exceptions import (
    CalendarError,
    DateRangeError,
    DegenerateCalendarError,
)
from bizcal.calendar.calendar import Calendar
from bizcal.calendar.weekday import WORKWEEK, Weekday

__all__ = [
    "Calendar",
    "CalendarError",
    "DateRangeError",
    "DegenerateCalendarError",
    "WORKWEEK",
    "Weekday",
]
