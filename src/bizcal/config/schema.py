from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bizcal.calendar import WORKWEEK, Calendar, Weekday

_ORDINAL_SUFFIX = re.compile(r"(?<=\d)(st|nd|rd|th)\b", re.IGNORECASE)
_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")
_LONG_FORM = "%B %d, %Y"


def parse_date(text: str) -> date:
    """
    Parse a holiday date: ISO ``YYYY-MM-DD`` or long form such as
    ``"October 3rd, 2022"`` (the ordinal suffix is optional).
    """
    value = text.strip()
    try:
        if _ISO_DATE.fullmatch(value):
            return date.fromisoformat(value)
        return datetime.strptime(_ORDINAL_SUFFIX.sub("", value), _LONG_FORM).date()
    except ValueError:
        raise ValueError(
            f"Invalid date {text!r}; expected YYYY-MM-DD or e.g. 'October 3rd, 2022'"
        ) from None


def _as_list(value: Any, field: str) -> list[Any]:
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    raise ValueError(f"{field} must be a list, got {type(value).__name__}")


class CalendarConfig(BaseModel):
    """Validated calendar document: working weekdays and holiday dates."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    working_days: frozenset[Weekday] = Field(
        default=WORKWEEK, description="Working weekdays; Mon-Fri if omitted"
    )
    holidays: frozenset[date] = Field(
        default_factory=frozenset, description="Holiday dates; none if omitted"
    )

    @field_validator("working_days", mode="before")
    @classmethod
    def parse_working_days(cls, v: Any) -> Any:
        if v is None:
            return WORKWEEK
        days = []
        for item in _as_list(v, "working_days"):
            if isinstance(item, str):
                days.append(Weekday.from_name(item))
            elif isinstance(item, int) and not isinstance(item, bool):
                days.append(Weekday(item))
            else:
                raise ValueError(f"Invalid weekday: {item!r}")
        return days

    @field_validator("holidays", mode="before")
    @classmethod
    def parse_holidays(cls, v: Any) -> Any:
        if v is None:
            return frozenset()
        dates = []
        for item in _as_list(v, "holidays"):
            if isinstance(item, str):
                dates.append(parse_date(item))
            elif isinstance(item, datetime):
                dates.append(item.date())
            elif isinstance(item, date):
                dates.append(item)
            else:
                raise ValueError(f"Invalid holiday date: {item!r}")
        return dates

    def to_calendar(self) -> Calendar:
        return Calendar.with_working_days_and_holidays(self.working_days, self.holidays)
