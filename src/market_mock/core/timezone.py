"""Timezone utilities for the calendar used by date queries."""

from datetime import datetime

import pytz
from dateutil import parser as date_parser

from market_mock.config.settings import get_settings
from market_mock.core.exceptions import InvalidDateError

# Fills parts a partial date leaves out, e.g. "2024-06" is June 1
_PARSE_DEFAULT = datetime(2000, 1, 1)


def get_local_tz() -> pytz.BaseTzInfo:
    """Return the configured calendar timezone."""
    return pytz.timezone(get_settings().timezone)


def now_utc() -> datetime:
    """Return current time in UTC."""
    return datetime.now(pytz.UTC)


def to_local(dt: datetime) -> datetime:
    """Convert a datetime to the configured calendar timezone."""
    tz = get_local_tz()
    if dt.tzinfo is None:
        # Assume naive datetime is already local
        return tz.localize(dt)
    return dt.astimezone(tz)


def to_epoch_millis(dt: datetime) -> int:
    """Return milliseconds since the Unix epoch for an aware datetime."""
    return int(dt.timestamp() * 1000)


def isoformat_utc(dt: datetime) -> str:
    """Render a datetime as an ISO-8601 UTC string with millisecond precision."""
    utc = dt.astimezone(pytz.UTC)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def parse_query_date(value: str) -> datetime:
    """
    Parse a date-like query parameter into an aware datetime.

    If no timezone is given in the string, the configured calendar timezone
    is assumed. Missing parts fall back to the first month or day, never
    to today. Raises InvalidDateError when the value does not parse or
    carries an impossible UTC offset.
    """
    try:
        dt = date_parser.parse(value, default=_PARSE_DEFAULT)
        return to_local(dt)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(value) from exc
