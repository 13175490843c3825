from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Mapping, Optional, Union

from ..core.constants import EMPLOYEE_SELECTOR_ALL
from ..core.enums import AttendanceKind, AttendanceStatus
from ..users.model import Profile


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one time-clock event.

    Built by `normalize.record_from_row`, so optional numbers already carry
    their defaults and coordinates are either both set or both None. `kind`
    and `status` stay plain strings when the store sends a value we do not know.
    """

    record_id: str
    user_id: str
    timestamp: datetime
    kind: Union[AttendanceKind, str]
    status: Union[AttendanceStatus, str]
    is_late: bool = False
    late_minutes: int = 0
    work_hours: float = 0.0
    overtime_hours: float = 0.0
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    profile: Optional[Profile] = None

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None


@dataclass(frozen=True)
class FilterCriteria:
    """User-editable filter state. Empty fields mean "no constraint"."""

    start_date: str = ""
    end_date: str = ""
    kind: str = ""
    status: str = ""
    employee_selector: str = EMPLOYEE_SELECTOR_ALL

    @classmethod
    def from_mapping(cls, args: Mapping[str, object]) -> "FilterCriteria":
        """Build from request args (`start`, `end`, `kind`, `status`, `employee`)."""

        def _get(*keys: str) -> str:
            for key in keys:
                value = args.get(key)
                if value is not None:
                    return str(value).strip()
            return ""

        return cls(
            start_date=_get("start", "start_date"),
            end_date=_get("end", "end_date"),
            kind=_get("kind"),
            status=_get("status"),
            employee_selector=_get("employee", "employee_selector") or EMPLOYEE_SELECTOR_ALL,
        )
