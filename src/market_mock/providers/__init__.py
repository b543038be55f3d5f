"""Record source providers module."""

from market_mock.providers.record_source import RecordSource, build_record_store
from market_mock.providers.synthetic_source import SyntheticRecordSource

__all__ = [
    "RecordSource",
    "SyntheticRecordSource",
    "build_record_store",
]
