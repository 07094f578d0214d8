"""
bizcal.config
~~~~~~~~~~~~~

Loading a Calendar from a YAML document.

Document format::

    # Defaults to Mon-Fri if omitted
    working_days:
      - monday
      - tuesday
      - wednesday
      - thursday
      - friday
    # ISO 8601 dates, defaults to no holidays if omitted
    holidays:
      - 2017-12-25
      - 2017-12-26

Basic usage::

    from bizcal.config import load_calendar

    cal = load_calendar("cal.yml")
    cal.roll_backward(date(2017, 12, 25))    # → date(2017, 12, 22)

Public API
----------
load_calendar          Read a YAML file into a Calendar.
calendar_from_yaml     Same, from a YAML string.
calendar_from_mapping  Same, from an already-parsed mapping.
config_from_mapping    Validate a mapping into a CalendarConfig.
CalendarConfig         The validated document (pydantic model).
parse_date             Holiday date parser (ISO or "October 3rd, 2022").
ConfigError            Raised for any unreadable or invalid document.
"""

from __future__ import annotations

from bizcal.config._exceptions import ConfigError
from bizcal.config.loader import (
    calendar_from_mapping,
    calendar_from_yaml,
    config_from_mapping,
    load_calendar,
)
from bizcal.config.schema import CalendarConfig, parse_date

__all__ = [
    "CalendarConfig",
    "ConfigError",
    "calendar_from_mapping",
    "calendar_from_yaml",
    "config_from_mapping",
    "load_calendar",
    "parse_date",
]
