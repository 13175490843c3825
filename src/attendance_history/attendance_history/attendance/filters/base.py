from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import AttendanceRecord


class RecordFilter(ABC):
    """Strategy Pattern: one narrowing predicate over attendance records."""

    @abstractmethod
    def matches(self, record: AttendanceRecord) -> bool:
        raise NotImplementedError
