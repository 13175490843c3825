from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Profile
from .repository import ProfileRepository


def profile_from_row(row: dict[str, Any]) -> Profile:
    return Profile(
        profile_id=str(row["id"]),
        name=row.get("name") or "",
        email=row.get("email") or "",
        employee_code=row.get("employee_id"),
        department=row.get("department"),
        role=Role.from_value(row.get("role")),
    )


class MySQLProfileRepository(ProfileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_viewer_profile(self, viewer_id: str) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, name, email, employee_id, department, role
                FROM profiles
                WHERE id=%s
                """,
                (viewer_id,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return profile_from_row(row)

    def list_profiles(self) -> Sequence[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, email, employee_id, department, role FROM profiles ORDER BY name")
            return [profile_from_row(r) for r in fetchall(cur)]
