from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ...common.datetime_utils import next_day_start, start_of_day, to_local_naive
from ..model import AttendanceRecord
from .base import RecordFilter


@dataclass(frozen=True)
class StartDateFilter(RecordFilter):
    """Keep records at or after midnight of `day`."""

    day: date

    def matches(self, record: AttendanceRecord) -> bool:
        return to_local_naive(record.timestamp) >= start_of_day(self.day)


@dataclass(frozen=True)
class EndDateFilter(RecordFilter):
    """Keep every record on `day` (inclusive), down to the microsecond."""

    day: date

    def matches(self, record: AttendanceRecord) -> bool:
        return to_local_naive(record.timestamp) < next_day_start(self.day)
