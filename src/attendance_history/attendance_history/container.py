from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceHistoryService
from .core.constants import ADMIN_RECORD_LIMIT
from .database.connection import DBConfig, DatabaseConnection
from .users.mysql_profile_repository import MySQLProfileRepository
from .users.repository import ProfileRepository


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    profiles_repo: ProfileRepository

    attendance_history_service: AttendanceHistoryService


def build_container_from_repositories(
    *,
    attendance_repo: AttendanceRepository,
    profiles_repo: ProfileRepository,
    admin_record_limit: int = ADMIN_RECORD_LIMIT,
) -> Container:
    service = AttendanceHistoryService(attendance_repo, profiles_repo, admin_record_limit=admin_record_limit)
    return Container(
        attendance_repo=attendance_repo,
        profiles_repo=profiles_repo,
        attendance_history_service=service,
    )


def build_container(*, db_config: dict, admin_record_limit: int = ADMIN_RECORD_LIMIT) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    return build_container_from_repositories(
        attendance_repo=MySQLAttendanceRepository(conn),
        profiles_repo=MySQLProfileRepository(conn),
        admin_record_limit=admin_record_limit,
    )
