from __future__ import annotations

from datetime import date, datetime

import pytest

from src.attendance_history.attendance_history.attendance.model import AttendanceRecord
from src.attendance_history.attendance_history.core.enums import AttendanceKind, AttendanceStatus, Role
from src.attendance_history.attendance_history.users.model import Profile


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 5, 20)


@pytest.fixture
def employee() -> Profile:
    return Profile(profile_id="u-1", name="Budi Santoso", email="budi@example.com", employee_code="E001", department="Finance")


@pytest.fixture
def admin() -> Profile:
    return Profile(profile_id="u-admin", name="Admin", email="admin@example.com", role=Role.ADMIN)


@pytest.fixture
def make_record():
    counter = {"n": 0}

    def _make(**overrides) -> AttendanceRecord:
        counter["n"] += 1
        values = {
            "record_id": str(counter["n"]),
            "user_id": "u-1",
            "timestamp": datetime(2024, 5, 1, 8, 0),
            "kind": AttendanceKind.CHECK_IN,
            "status": AttendanceStatus.SUCCESS,
        }
        values.update(overrides)
        return AttendanceRecord(**values)

    return _make
