from __future__ import annotations

import enum
from datetime import date


class Weekday(enum.IntEnum):
    """Day of the week, numbered like ``date.weekday()`` (Monday is 0)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def from_name(cls, name: str) -> Weekday:
        key = name.strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown weekday name: {name!r}.") from None

    @classmethod
    def of(cls, d: date) -> Weekday:
        return cls(d.weekday())

    def __str__(self) -> str:
        return self.name.lower()


WORKWEEK: frozenset[Weekday] = frozenset(
    [Weekday.MONDAY, Weekday.TUESDAY, Weekday.WEDNESDAY, Weekday.THURSDAY, Weekday.FRIDAY]
)
