from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from bizcal.calendar import Calendar
from bizcal.config._exceptions import ConfigError
from bizcal.config.schema import CalendarConfig

logger = logging.getLogger(__name__)


def _describe(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "<root>"
        problems.append(f"{loc}: {err['msg']}")
    return "Invalid calendar configuration: " + "; ".join(problems)


def config_from_mapping(data: Optional[Mapping[str, Any]], source: Optional[str] = None) -> CalendarConfig:
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigError(
            f"Calendar document must be a mapping, got {type(data).__name__}", source
        )
    try:
        config = CalendarConfig.model_validate(dict(data))
    except ValidationError as e:
        raise ConfigError(_describe(e), source) from e

    logger.debug(
        "Calendar config loaded: source=%s working_days=%d holidays=%d",
        source or "<mapping>", len(config.working_days), len(config.holidays),
    )
    return config


def calendar_from_mapping(data: Optional[Mapping[str, Any]], source: Optional[str] = None) -> Calendar:
    """Build a Calendar from an already-parsed document (``None`` gives the default)."""
    return config_from_mapping(data, source).to_calendar()


def calendar_from_yaml(text: str, source: Optional[str] = None) -> Calendar:
    """
    Build a Calendar from a YAML document::

        working_days: [monday, tuesday, wednesday, thursday, friday]
        holidays:
          - 2017-12-25
          - 2017-12-26

    Both keys are optional.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML: {e}", source) from e
    except ValueError as e:
        # SafeLoader builds unquoted timestamps while parsing, e.g. 2022-13-01.
        raise ConfigError(f"Invalid date in YAML document: {e}", source) from e
    return calendar_from_mapping(data, source)


def load_calendar(path: Union[str, os.PathLike]) -> Calendar:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read calendar file: {e.strerror or e}", str(p)) from e
    return calendar_from_yaml(text, str(p))
