from __future__ import annotations

from enum import Enum
from typing import Union


class Role(str, Enum):
    """Viewer role. Only ADMIN changes what the history view shows."""

    ADMIN = "admin"
    EMPLOYEE = "employee"

    @classmethod
    def from_value(cls, value: object) -> "Role":
        return cls.ADMIN if enum_value(value) == cls.ADMIN.value else cls.EMPLOYEE


class AttendanceKind(str, Enum):
    """What a time-clock event records."""

    CHECK_IN = "check_in"
    CHECK_OUT = "check_out"
    ABSENT = "absent"


class AttendanceStatus(str, Enum):
    """Outcome of a capture attempt as stored by the record store."""

    SUCCESS = "success"
    FACE_INVALID = "face_invalid"
    LOCATION_INVALID = "location_invalid"
    ABSENT = "absent"


class Severity(str, Enum):
    """Styling/alerting class derived from a status."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    WARNING = "warning"
    NEUTRAL = "neutral"


def enum_value(value: object) -> str:
    """Raw string behind an enum member or a plain value.

    Enum members hash by name, so lookups must always go through the raw value.
    """

    if isinstance(value, Enum):
        return str(value.value)
    if value is None:
        return ""
    return str(value)


def coerce_enum(enum_cls, value: object) -> Union[Enum, str]:
    """Known values become members; unknown values stay plain strings."""

    raw = enum_value(value)
    try:
        return enum_cls(raw)
    except ValueError:
        return raw
