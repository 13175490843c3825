from __future__ import annotations

import asyncio
import threading
from datetime import datetime
from typing import Optional

import pytest

from src.attendance_history.attendance_history.attendance.model import AttendanceRecord, FilterCriteria
from src.attendance_history.attendance_history.attendance.service import AttendanceHistoryService
from src.attendance_history.attendance_history.core.enums import AttendanceKind
from src.attendance_history.attendance_history.core.exceptions import AuthenticationMissing, RetrievalFailure
from src.attendance_history.attendance_history.reports.model import ExportError
from src.attendance_history.attendance_history.users.model import Profile


class InMemoryProfiles:
    def __init__(self, profiles: list[Profile], *, fail_list: bool = False):
        self._by_id = {p.profile_id: p for p in profiles}
        self._fail_list = fail_list
        self.list_calls = 0

    def get_viewer_profile(self, viewer_id: str) -> Optional[Profile]:
        return self._by_id.get(viewer_id)

    def list_profiles(self):
        self.list_calls += 1
        if self._fail_list:
            raise RetrievalFailure("profiles unavailable")
        return sorted(self._by_id.values(), key=lambda p: p.name)


class InMemoryAttendance:
    def __init__(self, records: list[AttendanceRecord]):
        self.records = records
        self.fail = False
        self.last_limit = None
        self.last_user_id = None

    def list_for_user(self, user_id: str):
        if self.fail:
            raise ConnectionError("store offline")
        self.last_user_id = user_id
        return [r for r in self.records if r.user_id == user_id]

    def list_recent(self, limit: int = 500):
        if self.fail:
            raise ConnectionError("store offline")
        self.last_limit = limit
        return self.records[:limit]


class BarrierAttendance(InMemoryAttendance):
    """Only returns once list_profiles has started too, proving both calls overlap."""

    def __init__(self, records, started: threading.Event):
        super().__init__(records)
        self._started = started

    def list_recent(self, limit: int = 500):
        assert self._started.wait(timeout=5)
        return super().list_recent(limit)


class SignallingProfiles(InMemoryProfiles):
    def __init__(self, profiles, started: threading.Event):
        super().__init__(profiles)
        self._started = started

    def list_profiles(self):
        self._started.set()
        return super().list_profiles()


@pytest.fixture
def store_records(make_record):
    return [
        make_record(user_id="u-2", timestamp=datetime(2024, 5, 2, 8, 0)),
        make_record(user_id="u-1", timestamp=datetime(2024, 5, 1, 17, 0), kind=AttendanceKind.CHECK_OUT),
        make_record(user_id="u-1", timestamp=datetime(2024, 5, 1, 8, 0)),
    ]


def test_missing_or_unknown_viewer_requires_authentication(employee):
    svc = AttendanceHistoryService(InMemoryAttendance([]), InMemoryProfiles([employee]))

    with pytest.raises(AuthenticationMissing):
        asyncio.run(svc.load(None))
    with pytest.raises(AuthenticationMissing):
        asyncio.run(svc.load("ghost"))


def test_employee_sees_only_own_records_and_selector_is_ignored(employee, store_records):
    attendance = InMemoryAttendance(store_records)
    svc = AttendanceHistoryService(attendance, InMemoryProfiles([employee]))

    view = asyncio.run(svc.load("u-1", FilterCriteria(employee_selector="u-2")))

    assert attendance.last_user_id == "u-1"
    assert {r.user_id for r in view.filtered} == {"u-1"}
    assert view.summary() == {"visible": 2, "total": 2, "employee": None}
    assert "employees" not in view.filter_options()


def test_admin_loads_records_and_employees_concurrently(admin, employee, store_records):
    started = threading.Event()
    attendance = BarrierAttendance(store_records, started)
    profiles = SignallingProfiles([admin, employee], started)
    svc = AttendanceHistoryService(attendance, profiles, admin_record_limit=2)

    view = asyncio.run(svc.load("u-admin"))

    assert attendance.last_limit == 2
    assert len(view.records) == 2
    assert [p.name for p in view.profiles] == ["Admin", "Budi Santoso"]
    assert view.notices == ()


def test_admin_selection_label_and_options(admin, employee, store_records):
    svc = AttendanceHistoryService(InMemoryAttendance(store_records), InMemoryProfiles([admin, employee]))
    view = asyncio.run(svc.load("u-admin"))

    narrowed = view.apply(FilterCriteria(employee_selector="u-1"))

    assert view.summary()["employee"] == "All employees"
    assert narrowed.summary() == {"visible": 2, "total": 3, "employee": "Budi Santoso"}
    assert narrowed.reset_filters().filtered == view.filtered
    assert narrowed.filter_options()["employees"][0] == {"value": "all", "label": "All employees"}
    assert all(row.employee_name for row in narrowed.rows())


def test_retrieval_failure_on_first_load_gives_empty_view_with_notice(employee, store_records):
    attendance = InMemoryAttendance(store_records)
    attendance.fail = True
    svc = AttendanceHistoryService(attendance, InMemoryProfiles([employee]))

    view = asyncio.run(svc.load("u-1"))

    assert view.records == ()
    assert [n.title for n in view.notices] == ["Load failed"]


def test_employee_list_failure_keeps_records(admin, store_records):
    svc = AttendanceHistoryService(InMemoryAttendance(store_records), InMemoryProfiles([admin], fail_list=True))

    view = asyncio.run(svc.load("u-admin"))

    assert len(view.records) == 3
    assert view.profiles == ()
    assert len(view.notices) == 1


def test_refresh_failure_keeps_last_known_data(employee, store_records):
    attendance = InMemoryAttendance(store_records)
    svc = AttendanceHistoryService(attendance, InMemoryProfiles([employee]))
    view = asyncio.run(svc.load("u-1", FilterCriteria(kind="check_in")))

    attendance.fail = True
    refreshed = asyncio.run(svc.refresh(view))

    assert refreshed.filtered == view.filtered
    assert refreshed.criteria == view.criteria
    assert refreshed.notices[-1].title == "Refresh failed"


def test_refresh_reapplies_current_criteria(employee, store_records, make_record):
    attendance = InMemoryAttendance(store_records)
    svc = AttendanceHistoryService(attendance, InMemoryProfiles([employee]))
    view = asyncio.run(svc.load("u-1", FilterCriteria(kind="check_in")))

    attendance.records = [make_record(user_id="u-1", timestamp=datetime(2024, 5, 3, 8, 0))] + store_records
    refreshed = asyncio.run(svc.refresh(view))

    assert len(refreshed.filtered) == len(view.filtered) + 1


def test_export_from_view(employee, store_records, fixed_today):
    svc = AttendanceHistoryService(InMemoryAttendance(store_records), InMemoryProfiles([employee]))
    view = asyncio.run(svc.load("u-1"))

    assert view.export(today=fixed_today).ok
    assert view.apply(FilterCriteria(start_date="2030-01-01")).export(today=fixed_today).error == ExportError.EMPTY_DATASET


def test_options_load_skips_attendance_records(admin, employee, store_records):
    attendance = InMemoryAttendance(store_records)
    profiles = InMemoryProfiles([admin, employee])
    svc = AttendanceHistoryService(attendance, profiles)

    admin_view = asyncio.run(svc.load_options("u-admin"))
    employee_view = asyncio.run(svc.load_options("u-1"))

    assert attendance.last_limit is None
    assert attendance.last_user_id is None
    assert admin_view.records == ()
    assert [e["value"] for e in admin_view.filter_options()["employees"]] == ["all", "u-admin", "u-1"]
    assert profiles.list_calls == 1
    assert "employees" not in employee_view.filter_options()


def test_options_load_reports_employee_list_failure(admin):
    svc = AttendanceHistoryService(InMemoryAttendance([]), InMemoryProfiles([admin], fail_list=True))

    view = asyncio.run(svc.load_options("u-admin"))

    assert view.profiles == ()
    assert [n.title for n in view.notices] == ["Load failed"]
