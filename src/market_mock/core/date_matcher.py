"""Date predicates used by the query engines.

Inputs are trusted: callers parse and validate query values first.
"""

from datetime import datetime

from market_mock.core.timezone import to_local


def same_calendar_day(timestamp: datetime, reference: datetime) -> bool:
    """Return True if both instants fall on the same local calendar day."""
    return to_local(timestamp).date() == to_local(reference).date()


def in_range(timestamp: datetime, start: datetime, end: datetime) -> bool:
    """Return True if start <= timestamp <= end at full precision."""
    return start <= timestamp <= end
