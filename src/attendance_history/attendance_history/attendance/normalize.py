"""Record store rows -> strict `AttendanceRecord`.

Dirty data is repaired here with explicit defaults so the filter engine,
classifier and exporter can assume well-formed records.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import parse_timestamp
from ..common.validators import non_negative_float, non_negative_int, optional_float, require_non_empty
from ..core.enums import AttendanceKind, AttendanceStatus, coerce_enum
from ..core.exceptions import ValidationError
from ..users.model import Profile
from .model import AttendanceRecord

logger = logging.getLogger(__name__)


def _coordinates(row: Mapping[str, Any]) -> tuple[Optional[float], Optional[float]]:
    latitude = optional_float(row.get("latitude"))
    longitude = optional_float(row.get("longitude"))
    if latitude is None or longitude is None:
        return None, None
    return latitude, longitude


def record_from_row(row: Mapping[str, Any], *, profile: Optional[Profile] = None) -> AttendanceRecord:
    """Raises ValidationError when the row has no usable id or timestamp."""

    record_id = require_non_empty(row.get("id"), "id")
    user_id = require_non_empty(row.get("user_id"), "user_id")
    try:
        timestamp = parse_timestamp(row.get("timestamp"))
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"record {record_id}: invalid timestamp {row.get('timestamp')!r}") from exc

    is_late = bool(row.get("is_late"))
    latitude, longitude = _coordinates(row)

    return AttendanceRecord(
        record_id=record_id,
        user_id=user_id,
        timestamp=timestamp,
        kind=coerce_enum(AttendanceKind, row.get("type", row.get("kind"))),
        status=coerce_enum(AttendanceStatus, row.get("status")),
        is_late=is_late,
        late_minutes=non_negative_int(row.get("late_minutes")) if is_late else 0,
        work_hours=non_negative_float(row.get("work_hours")),
        overtime_hours=non_negative_float(row.get("overtime_hours")),
        latitude=latitude,
        longitude=longitude,
        profile=profile,
    )


def records_from_rows(rows: Iterable[Mapping[str, Any]], *, profiles: Optional[Mapping[str, Profile]] = None) -> list[AttendanceRecord]:
    """Normalize rows in order; rows that cannot be displayed are skipped."""

    out: list[AttendanceRecord] = []
    for row in rows:
        profile = profiles.get(str(row.get("user_id"))) if profiles else None
        try:
            out.append(record_from_row(row, profile=profile))
        except ValidationError as exc:
            logger.warning("Skipping attendance row: %s", exc)
    return out
