from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .messages.mysql_message_repository import MySQLMessageRepository
from .messages.repository import MessageRepository
from .messages.service import MessageService
from .roster.service import RosterService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    attendance_repo: AttendanceRepository
    messages_repo: MessageRepository

    auth_service: AuthService
    attendance_service: AttendanceService
    roster_service: RosterService
    message_service: MessageService


def wire(
    *,
    users_repo: UserRepository,
    attendance_repo: AttendanceRepository,
    messages_repo: MessageRepository,
    clock=None,
) -> Container:
    """Build services around any set of repositories (MySQL or in-memory)."""

    clock_kw = {"clock": clock} if clock else {}
    return Container(
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        messages_repo=messages_repo,
        auth_service=AuthService(users_repo),
        attendance_service=AttendanceService(attendance_repo, users_repo, **clock_kw),
        roster_service=RosterService(users_repo, attendance_repo, **clock_kw),
        message_service=MessageService(messages_repo, users_repo, **clock_kw),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire(
        users_repo=MySQLUserRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        messages_repo=MySQLMessageRepository(conn),
    )
