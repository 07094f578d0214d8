from __future__ import annotations

import logging
import operator
from datetime import date, datetime, timedelta
from typing import Any, Iterable, Optional, Union

import numpy as np

from ._exceptions import DateRangeError, DegenerateCalendarError
from .weekday import WORKWEEK, Weekday

logger = logging.getLogger(__name__)

DateLike = Union[date, "np.datetime64"]
DateInput = Union[DateLike, "np.ndarray", Iterable[DateLike]]
OffsetInput = Union[int, "np.ndarray"]

_ONE_DAY = timedelta(days=1)


def _to_date(value: Any) -> date:
    """Coerce a date-like scalar to ``datetime.date`` (datetimes are truncated)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, np.datetime64):
        item = value.astype("datetime64[D]").item()
        if not isinstance(item, date):
            raise ValueError(f"Cannot convert {value!r} to a calendar date.")
        return item
    raise TypeError(f"Expected datetime.date-like, got {type(value)!r}")


def _scalar_date(value: Any) -> date:
    if isinstance(value, np.ndarray):
        value = value[()]
    return _to_date(value)


def _as_day_array(value: Any) -> np.ndarray:
    return np.asarray(value, dtype="datetime64[D]")


class Calendar:
    """
    Immutable business-day calendar: a set of working weekdays plus a set of
    holiday dates.

    A date is a business day iff its weekday is a working day and it is not a
    holiday.  Scalar queries walk one day at a time; array queries go through
    ``numpy.busday_offset`` with an equivalent ``numpy.busdaycalendar``.
    """

    __slots__ = ("_working_days", "_holidays", "_busdaycal")

    def __init__(
        self,
        working_days: Optional[Iterable[Union[Weekday, int]]] = None,
        holidays: Optional[Iterable[DateLike]] = None,
    ) -> None:
        wd = WORKWEEK if working_days is None else frozenset(Weekday(w) for w in working_days)
        hol = frozenset() if holidays is None else frozenset(_to_date(h) for h in holidays)

        object.__setattr__(self, "_working_days", wd)
        object.__setattr__(self, "_holidays", hol)

        # numpy refuses an all-zero weekmask, so degenerate calendars carry no busdaycal.
        busdaycal = None
        if wd:
            busdaycal = np.busdaycalendar(
                weekmask=self.weekmask,
                holidays=np.array(sorted(hol), dtype="datetime64[D]"),
            )
        object.__setattr__(self, "_busdaycal", busdaycal)

        if wd:
            logger.debug(
                "Calendar built: working_days=%s holidays=%d",
                self.weekmask, len(hol),
            )
        else:
            logger.warning(
                "Calendar built with no working days; roll and offset queries will fail."
            )

    # ── constructors ─────────────────────────────────────────────────────

    @classmethod
    def workweek(cls) -> Calendar:
        """Mon–Fri, no holidays."""
        return cls()

    @classmethod
    def with_holidays(cls, holidays: Iterable[DateLike]) -> Calendar:
        return cls(WORKWEEK, holidays)

    @classmethod
    def with_working_days_and_holidays(
        cls,
        working_days: Iterable[Union[Weekday, int]],
        holidays: Iterable[DateLike],
    ) -> Calendar:
        return cls(working_days, holidays)

    # ── immutability / value semantics ───────────────────────────────────

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __reduce__(self):
        return (type(self), (self._working_days, self._holidays))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calendar):
            return NotImplemented
        return (
            self._working_days == other._working_days
            and self._holidays == other._holidays
        )

    def __hash__(self) -> int:
        return hash((self._working_days, self._holidays))

    # ── predicate ────────────────────────────────────────────────────────

    def is_business_day(self, d: DateInput) -> Union[bool, np.ndarray]:
        if np.ndim(d) == 0:
            day = _scalar_date(d)
            return day.weekday() in self._working_days and day not in self._holidays

        days = _as_day_array(d)
        if self._busdaycal is None:
            return np.zeros(days.shape, dtype=bool)
        return np.is_busday(days, busdaycal=self._busdaycal)

    # ── rolls ────────────────────────────────────────────────────────────

    def roll_forward(self, d: DateInput) -> Union[date, np.ndarray]:
        """Return ``d`` if it is a business day, else the next one after it."""
        self._require_business_days("roll_forward")
        if np.ndim(d) == 0:
            return self._scan(_scalar_date(d), _ONE_DAY)
        return np.busday_offset(_as_day_array(d), 0, roll="forward", busdaycal=self._busdaycal)

    def roll_backward(self, d: DateInput) -> Union[date, np.ndarray]:
        """Return ``d`` if it is a business day, else the last one before it."""
        self._require_business_days("roll_backward")
        if np.ndim(d) == 0:
            return self._scan(_scalar_date(d), -_ONE_DAY)
        return np.busday_offset(_as_day_array(d), 0, roll="backward", busdaycal=self._busdaycal)

    def next_business_day(self, d: DateInput) -> Union[date, np.ndarray]:
        """Earliest business day strictly after ``d``."""
        self._require_business_days("next_business_day")
        if np.ndim(d) == 0:
            return self._scan(_shift(_scalar_date(d), _ONE_DAY), _ONE_DAY)
        return np.busday_offset(_as_day_array(d), 1, roll="backward", busdaycal=self._busdaycal)

    def previous_business_day(self, d: DateInput) -> Union[date, np.ndarray]:
        """Latest business day strictly before ``d``."""
        self._require_business_days("previous_business_day")
        if np.ndim(d) == 0:
            return self._scan(_shift(_scalar_date(d), -_ONE_DAY), -_ONE_DAY)
        return np.busday_offset(_as_day_array(d), -1, roll="forward", busdaycal=self._busdaycal)

    # ── offsets ──────────────────────────────────────────────────────────

    def add_business_days(self, d: DateInput, n: OffsetInput) -> Union[date, np.ndarray]:
        """
        Move ``n`` business days from ``d`` (backwards when ``n < 0``).

        The start date is never counted, so on a Mon–Fri calendar Saturday + 1
        is Monday.  ``n == 0`` returns ``d`` unchanged, business day or not.
        """
        return self._offset(d, n, "add_business_days")

    def subtract_business_days(self, d: DateInput, n: OffsetInput) -> Union[date, np.ndarray]:
        if np.ndim(n) == 0:
            return self._offset(d, -_as_offset(n), "subtract_business_days")
        return self._offset(d, -_as_offset_array(n), "subtract_business_days")

    def _offset(self, d: DateInput, n: OffsetInput, operation: str) -> Union[date, np.ndarray]:
        if np.ndim(d) == 0 and np.ndim(n) == 0:
            day = _scalar_date(d)
            steps = _as_offset(n)
            if steps == 0:
                return day
            self._require_business_days(operation)
            step = _ONE_DAY if steps > 0 else -_ONE_DAY
            for _ in range(abs(steps)):
                day = self._scan(_shift(day, step), step)
            return day

        days = _as_day_array(d)
        offsets = _as_offset_array(n)
        if np.any(offsets != 0):
            self._require_business_days(operation)
        if self._busdaycal is None:
            return np.broadcast_to(days, np.broadcast(days, offsets).shape).copy()

        # Rolling against the direction of travel makes the start date uncounted.
        forward = np.busday_offset(days, offsets, roll="backward", busdaycal=self._busdaycal)
        backward = np.busday_offset(days, offsets, roll="forward", busdaycal=self._busdaycal)
        return np.where(offsets > 0, forward, np.where(offsets < 0, backward, days))

    # ── scanning ─────────────────────────────────────────────────────────

    def _scan(self, day: date, step: timedelta) -> date:
        while not self.is_business_day(day):
            day = _shift(day, step)
        return day

    def _require_business_days(self, operation: str) -> None:
        if not self._working_days:
            raise DegenerateCalendarError(operation)

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def working_days(self) -> frozenset[Weekday]:
        return self._working_days

    @property
    def holidays(self) -> frozenset[date]:
        return self._holidays

    @property
    def weekmask(self) -> str:
        """Seven-character mask, Monday first, as used by ``numpy.busdaycalendar``."""
        return "".join("1" if day in self._working_days else "0" for day in Weekday)

    @property
    def is_degenerate(self) -> bool:
        return not self._working_days

    def __repr__(self) -> str:
        days = [str(day) for day in sorted(self._working_days)]
        return (
            f"Calendar(working_days={days}, "
            f"holidays={len(self._holidays)}, "
            f"degenerate={self.is_degenerate})"
        )


def _as_offset_array(n: Any) -> np.ndarray:
    offsets = np.asarray(n)
    if not np.issubdtype(offsets.dtype, np.integer):
        raise TypeError(f"Business-day offsets must be integers, got dtype {offsets.dtype}.")
    return offsets


def _as_offset(n: Any) -> int:
    if isinstance(n, (bool, np.bool_)):
        raise TypeError("Business-day offsets must be integers, got bool.")
    return operator.index(n)


def _shift(day: date, step: timedelta) -> date:
    try:
        return day + step
    except OverflowError as e:
        raise DateRangeError(
            f"No business day found between {day} and the end of the supported "
            f"date range ({date.min} to {date.max})."
        ) from e
