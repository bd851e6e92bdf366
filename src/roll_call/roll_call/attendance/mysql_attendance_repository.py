from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence, Tuple

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..users.model import User
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        user_id=int(r["user_id"]),
        roll_number=r["roll_number"],
        status=AttendanceStatus(r["status"]),
        work_date=r["work_date"],
        created_at=r["created_at"],
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_user_since(self, user_id: int, since: datetime) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, user_id, roll_number, status, work_date, created_at
                FROM attendance_records
                WHERE user_id=%s AND created_at >= %s
                ORDER BY created_at
                LIMIT 1
                """,
                (user_id, since),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_since(self, since: datetime) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, user_id, roll_number, status, work_date, created_at
                FROM attendance_records
                WHERE created_at >= %s
                ORDER BY created_at
                """,
                (since,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def create_batch(
        self,
        *,
        marks: Sequence[Tuple[User, AttendanceStatus]],
        work_date: date,
        created_at: datetime,
    ) -> Sequence[AttendanceRecord]:
        created: list[AttendanceRecord] = []
        # One connection, one transaction: a duplicate on any row rolls back the batch.
        with db_cursor(self._conn_factory) as (_, cur):
            for student, status in marks:
                cur.execute(
                    """
                    INSERT INTO attendance_records(user_id, roll_number, status, work_date, created_at)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (student.user_id, student.roll_number, status.value, work_date, created_at),
                )
                created.append(
                    AttendanceRecord(
                        attendance_id=int(cur.lastrowid),
                        user_id=student.user_id,
                        roll_number=student.roll_number or "",
                        status=status,
                        work_date=work_date,
                        created_at=created_at,
                    )
                )
        return created
