from __future__ import annotations

from typing import Sequence

from ..core.constants import ADMIN_RECORD_LIMIT
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from ..users.mysql_profile_repository import profile_from_row
from .model import AttendanceRecord
from .normalize import records_from_rows
from .repository import AttendanceRepository

_RECORD_COLUMNS = """
    a.id, a.user_id, a.timestamp, a.type, a.status, a.is_late, a.late_minutes,
    a.work_hours, a.overtime_hours, a.latitude, a.longitude
"""


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_user(self, user_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS}
                FROM attendance a
                WHERE a.user_id=%s
                ORDER BY a.timestamp DESC
                """,
                (user_id,),
            )
            rows = fetchall(cur)
        return records_from_rows(rows)

    def list_recent(self, limit: int = ADMIN_RECORD_LIMIT) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS},
                    p.id AS profile_id, p.name, p.email, p.employee_id, p.department, p.role
                FROM attendance a
                LEFT JOIN profiles p ON p.id = a.user_id
                ORDER BY a.timestamp DESC
                LIMIT %s
                """,
                (int(limit),),
            )
            rows = fetchall(cur)

        profiles = {
            str(r["user_id"]): profile_from_row({**r, "id": r["profile_id"]})
            for r in rows
            if r.get("profile_id") is not None
        }
        return records_from_rows(rows, profiles=profiles)
