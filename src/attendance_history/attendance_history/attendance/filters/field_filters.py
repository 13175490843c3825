from __future__ import annotations

from dataclasses import dataclass

from ...core.enums import AttendanceKind, enum_value
from ..model import AttendanceRecord
from .base import RecordFilter

REPORTABLE_KINDS = frozenset({AttendanceKind.CHECK_IN.value, AttendanceKind.CHECK_OUT.value})


class ReportableKindFilter(RecordFilter):
    """Only check-in/check-out events belong in the report; absence markers do not."""

    def matches(self, record: AttendanceRecord) -> bool:
        return enum_value(record.kind) in REPORTABLE_KINDS


@dataclass(frozen=True)
class EmployeeFilter(RecordFilter):
    user_id: str

    def matches(self, record: AttendanceRecord) -> bool:
        return record.user_id == self.user_id


@dataclass(frozen=True)
class KindFilter(RecordFilter):
    kind: str

    def matches(self, record: AttendanceRecord) -> bool:
        return enum_value(record.kind) == self.kind


@dataclass(frozen=True)
class StatusFilter(RecordFilter):
    status: str

    def matches(self, record: AttendanceRecord) -> bool:
        return enum_value(record.status) == self.status
