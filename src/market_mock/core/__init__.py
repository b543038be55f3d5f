"""Core utilities and shared functionality."""

from market_mock.core.timezone import (
    get_local_tz,
    now_utc,
    to_local,
    to_epoch_millis,
    isoformat_utc,
    parse_query_date,
)
from market_mock.core.date_matcher import same_calendar_day, in_range
from market_mock.core.identifiers import new_id
from market_mock.core.exceptions import (
    AppError,
    MissingParameterError,
    InvalidDateError,
    InternalFailureError,
)

__all__ = [
    "get_local_tz",
    "now_utc",
    "to_local",
    "to_epoch_millis",
    "isoformat_utc",
    "parse_query_date",
    "same_calendar_day",
    "in_range",
    "new_id",
    "AppError",
    "MissingParameterError",
    "InvalidDateError",
    "InternalFailureError",
]
