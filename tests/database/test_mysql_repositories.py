from __future__ import annotations

from datetime import datetime

import mysql.connector
import pytest

from src.attendance_history.attendance_history.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from src.attendance_history.attendance_history.core.enums import Role
from src.attendance_history.attendance_history.core.exceptions import RetrievalFailure
from src.attendance_history.attendance_history.database.connection import DatabaseConnection, DBConfig
from src.attendance_history.attendance_history.users.mysql_profile_repository import MySQLProfileRepository

CONFIG = DBConfig(host="db.local", port=3306, user="reader", password="secret", database="hr")


class FakeCursor:
    def __init__(self, rows=None, *, error=None):
        self.rows = rows or []
        self.error = error
        self.executed = []
        self.closed = False

    def execute(self, sql, params=None):
        if self.error is not None:
            raise self.error
        self.executed.append((sql, params))

    def fetchall(self):
        return list(self.rows)

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.closed = False

    def cursor(self, dictionary=False):
        assert dictionary
        return self._cursor

    def close(self):
        self.closed = True


class FakeDatabase(DatabaseConnection):
    def __init__(self, cursor: FakeCursor | None = None, *, connect_error=None):
        super().__init__(CONFIG)
        self.cursor = cursor or FakeCursor()
        self.connection = FakeConnection(self.cursor)
        self._connect_error = connect_error

    def connect(self):
        if self._connect_error is not None:
            raise self._connect_error
        return self.connection


def _joined_row(**overrides):
    row = {
        "id": "10",
        "user_id": "u-1",
        "timestamp": datetime(2024, 5, 1, 8, 0),
        "type": "check_in",
        "status": "success",
        "is_late": 0,
        "late_minutes": None,
        "work_hours": None,
        "overtime_hours": None,
        "latitude": None,
        "longitude": None,
        "profile_id": "u-1",
        "name": "Budi Santoso",
        "email": "budi@example.com",
        "employee_id": "E001",
        "department": "Finance",
        "role": "employee",
    }
    row.update(overrides)
    return row


def test_list_recent_attaches_joined_profile():
    db = FakeDatabase(FakeCursor([_joined_row()]))

    records = MySQLAttendanceRepository(db).list_recent(25)

    assert db.cursor.executed[0][1] == (25,)
    assert records[0].record_id == "10"
    assert records[0].profile.profile_id == "u-1"
    assert records[0].profile.name == "Budi Santoso"
    assert records[0].profile.department == "Finance"
    assert records[0].profile.role == Role.EMPLOYEE


def test_list_recent_leaves_profile_empty_when_join_misses():
    orphan = _joined_row(id="11", user_id="u-gone", profile_id=None, name=None, email=None, department=None, role=None)
    db = FakeDatabase(FakeCursor([_joined_row(), orphan]))

    records = MySQLAttendanceRepository(db).list_recent()

    assert [r.record_id for r in records] == ["10", "11"]
    assert records[1].profile is None


def test_query_error_becomes_retrieval_failure_and_connection_is_closed():
    db = FakeDatabase(FakeCursor(error=mysql.connector.Error("table missing")))

    with pytest.raises(RetrievalFailure) as excinfo:
        MySQLAttendanceRepository(db).list_for_user("u-1")

    assert isinstance(excinfo.value.__cause__, mysql.connector.Error)
    assert db.cursor.closed
    assert db.connection.closed


def test_connect_error_becomes_retrieval_failure_without_password():
    db = FakeDatabase(connect_error=mysql.connector.Error("refused"))

    with pytest.raises(RetrievalFailure) as excinfo:
        MySQLProfileRepository(db).list_profiles()

    assert "reader@db.local:3306/hr" in str(excinfo.value)
    assert "secret" not in str(excinfo.value)


def test_viewer_lookup_returns_none_for_unknown_id():
    db = FakeDatabase(FakeCursor([]))

    assert MySQLProfileRepository(db).get_viewer_profile("ghost") is None
    assert db.cursor.executed[0][1] == ("ghost",)
