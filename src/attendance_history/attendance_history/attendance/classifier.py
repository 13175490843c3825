from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import format_number, format_report_date, format_report_time
from ..core.enums import AttendanceKind, AttendanceStatus, Severity, enum_value
from .model import AttendanceRecord

FALLBACK_CATEGORY = "Failed"
NO_VALUE = "-"
NO_LOCATION = "No location"
UNKNOWN_EMPLOYEE = "Unknown"

CATEGORY_LABELS = {
    AttendanceStatus.SUCCESS.value: "Successful",
    AttendanceStatus.FACE_INVALID.value: "Invalid Face",
    AttendanceStatus.LOCATION_INVALID.value: "Invalid Location",
    AttendanceStatus.ABSENT.value: "Absent",
}

SEVERITIES = {
    AttendanceStatus.SUCCESS.value: Severity.POSITIVE,
    AttendanceStatus.FACE_INVALID.value: Severity.NEGATIVE,
    AttendanceStatus.LOCATION_INVALID.value: Severity.WARNING,
    AttendanceStatus.ABSENT.value: Severity.NEGATIVE,
}

ICONS = {
    AttendanceStatus.SUCCESS.value: "check-circle",
    AttendanceStatus.FACE_INVALID.value: "x-circle",
    AttendanceStatus.LOCATION_INVALID.value: "x-circle",
    AttendanceStatus.ABSENT.value: "x-circle",
}

KIND_LABELS = {
    AttendanceKind.CHECK_IN.value: "Check-in",
    AttendanceKind.CHECK_OUT.value: "Check-out",
}


@dataclass(frozen=True)
class RecordPresentation:
    record_id: str
    date_text: str
    time_text: str
    kind_label: str
    category: str
    severity: Severity
    icon: str
    lateness_text: str
    work_hours_text: str
    overtime_text: Optional[str]
    location_text: str
    employee_name: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "date": self.date_text,
            "time": self.time_text,
            "kind": self.kind_label,
            "category": self.category,
            "severity": self.severity.value,
            "icon": self.icon,
            "lateness": self.lateness_text,
            "work_hours": self.work_hours_text,
            "overtime": self.overtime_text,
            "location": self.location_text,
            "employee_name": self.employee_name,
        }


def status_category(status: object) -> str:
    """Never fails: unknown statuses degrade to "Failed"."""
    return CATEGORY_LABELS.get(enum_value(status), FALLBACK_CATEGORY)


def status_severity(status: object) -> Severity:
    return SEVERITIES.get(enum_value(status), Severity.NEUTRAL)


def status_icon(status: object) -> str:
    return ICONS.get(enum_value(status), "alert-triangle")


def kind_label(kind: object) -> str:
    return KIND_LABELS.get(enum_value(kind), "Absent")


def lateness_text(record: AttendanceRecord) -> str:
    if record.is_late:
        return f"Late {record.late_minutes or 0} minutes"
    return "On time"


def hours_text(hours: Optional[float]) -> Optional[str]:
    if hours and hours > 0:
        return f"{format_number(hours)} hours"
    return None


def location_text(record: AttendanceRecord) -> str:
    if not record.has_location:
        return NO_LOCATION
    return f"{record.latitude:.4f}, {record.longitude:.4f}"


def classify(record: AttendanceRecord, *, include_employee: bool = False) -> RecordPresentation:
    """Pure mapping from a record to its display facts."""

    employee_name = None
    if include_employee:
        employee_name = record.profile.name if record.profile and record.profile.name else UNKNOWN_EMPLOYEE

    return RecordPresentation(
        record_id=record.record_id,
        date_text=format_report_date(record.timestamp),
        time_text=format_report_time(record.timestamp),
        kind_label=kind_label(record.kind),
        category=status_category(record.status),
        severity=status_severity(record.status),
        icon=status_icon(record.status),
        lateness_text=lateness_text(record),
        work_hours_text=hours_text(record.work_hours) or NO_VALUE,
        overtime_text=hours_text(record.overtime_hours),
        location_text=location_text(record),
        employee_name=employee_name,
    )
