from __future__ import annotations

from typing import Protocol, Sequence

from ..core.constants import ADMIN_RECORD_LIMIT
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Read side of the record store for time-clock events.

    Both queries return records sorted by timestamp, newest first.
    """

    def list_for_user(self, user_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_recent(self, limit: int = ADMIN_RECORD_LIMIT) -> Sequence[AttendanceRecord]:
        """All employees, with `profile` attached to each record."""

        raise NotImplementedError
