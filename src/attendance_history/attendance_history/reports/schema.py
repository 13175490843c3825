from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from ..attendance.classifier import kind_label
from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_number, format_report_date, format_report_time
from ..core.enums import Role, enum_value

CellFn = Callable[[AttendanceRecord], str]


def _hours(value: Optional[float]) -> str:
    return format_number(value) if value is not None else "0"


def _coordinate(value: Optional[float]) -> str:
    return format_number(value) if value is not None else ""


def _employee_name(record: AttendanceRecord) -> str:
    return record.profile.name if record.profile and record.profile.name else "Unknown"


def _department(record: AttendanceRecord) -> str:
    return record.profile.department if record.profile and record.profile.department else "-"


@dataclass(frozen=True)
class Column:
    header: str
    cell: CellFn


@dataclass(frozen=True)
class ExportSchema:
    """Fixed column list; header and row cells come from the same columns."""

    name: str
    columns: tuple[Column, ...]

    @property
    def headers(self) -> list[str]:
        return [c.header for c in self.columns]

    def row(self, record: AttendanceRecord) -> list[str]:
        return [c.cell(record) for c in self.columns]


DATE = Column("Date", lambda r: format_report_date(r.timestamp))
TIME = Column("Time", lambda r: format_report_time(r.timestamp))
EMPLOYEE_NAME = Column("EmployeeName", _employee_name)
DEPARTMENT = Column("Department", _department)
KIND = Column("Kind", lambda r: kind_label(r.kind))
STATUS = Column("Status", lambda r: enum_value(r.status))
LATE = Column("Late", lambda r: "Yes" if r.is_late else "No")
LATE_MINUTES = Column("LateMinutes", lambda r: str(r.late_minutes or 0) if r.is_late else "0")
WORK_HOURS = Column("WorkHours", lambda r: _hours(r.work_hours))
OVERTIME_HOURS = Column("OvertimeHours", lambda r: _hours(r.overtime_hours))
LATITUDE = Column("Latitude", lambda r: _coordinate(r.latitude))
LONGITUDE = Column("Longitude", lambda r: _coordinate(r.longitude))

_TRAILING = (KIND, STATUS, LATE, LATE_MINUTES, WORK_HOURS, OVERTIME_HOURS, LATITUDE, LONGITUDE)

EMPLOYEE_SCHEMA = ExportSchema(name="employee", columns=(DATE, TIME) + _TRAILING)
ADMIN_SCHEMA = ExportSchema(name="admin", columns=(DATE, TIME, EMPLOYEE_NAME, DEPARTMENT) + _TRAILING)


def schema_for(viewer_role: Role) -> ExportSchema:
    return ADMIN_SCHEMA if viewer_role == Role.ADMIN else EMPLOYEE_SCHEMA
