"""Calendar-day normalization for streak accounting.

Every date-like value is reduced to a `datetime.date` in a single calendar
(the configured timezone):

- plain ``YYYY-MM-DD`` strings and naive timestamps are taken as already
  being in that calendar;
- offset-aware timestamps (``...Z`` / ``...+02:00``) are converted into it
  before the time of day is dropped.

Values that cannot be parsed normalize to ``None`` and are skipped by callers.
"""

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, List, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

DAY = timedelta(days=1)

DateLike = Union[str, date, datetime]
TzLike = Union[str, ZoneInfo, timezone, None]


def resolve_timezone(tz: TzLike = None):
    """Return a tzinfo for a name or tzinfo, defaulting to UTC."""
    if tz is None:
        return timezone.utc
    if isinstance(tz, str):
        try:
            return ZoneInfo(tz)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown timezone: {tz}") from None
    return tz


def _parse_timestamp(value: str) -> datetime:
    value = value.strip()
    # fromisoformat only accepts a trailing "Z" from Python 3.11 on
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def normalize_day(value: DateLike, tz: TzLike = None) -> Optional[date]:
    """Reduce a date-like value to its calendar day, or None if unparseable."""
    tzinfo = resolve_timezone(tz)

    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        return value
    elif isinstance(value, str):
        try:
            moment = _parse_timestamp(value)
        except ValueError:
            logger.debug("Skipping unparseable date %r", value)
            return None
    else:
        logger.debug("Skipping non date-like value %r", value)
        return None

    if moment.tzinfo is not None:
        try:
            moment = moment.astimezone(tzinfo)
        except (ValueError, OverflowError):
            # Offset pushes the instant outside the supported date range
            logger.debug("Skipping out-of-range date %r", value)
            return None
    return moment.date()


def normalize_days(values: Iterable[DateLike], tz: TzLike = None) -> List[date]:
    """Normalize, deduplicate and sort days, most recent first."""
    days = set()
    for value in values:
        day = normalize_day(value, tz)
        if day is not None:
            days.add(day)
    return sorted(days, reverse=True)


def day_key(day: date) -> str:
    """Canonical string key of a calendar day."""
    return day.isoformat()


def today(as_of: DateLike, tz: TzLike = None) -> date:
    """Calendar day of the evaluation instant."""
    day = normalize_day(as_of, tz)
    if day is None:
        raise ValueError(f"Invalid as-of instant: {as_of!r}")
    return day
