from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Message
from .repository import MessageRepository


def _to_message(r: Dict[str, Any]) -> Message:
    return Message(
        message_id=int(r["message_id"]),
        teacher_id=int(r["teacher_id"]),
        body=r["body"],
        start_time=r["start_time"],
        duration_minutes=int(r["duration_minutes"]),
    )


class MySQLMessageRepository(MessageRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, teacher_id: int, body: str, start_time: datetime, duration_minutes: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO messages(teacher_id, body, start_time, duration_minutes)
                VALUES(%s,%s,%s,%s)
                """,
                (teacher_id, body, start_time, int(duration_minutes)),
            )
            return int(cur.lastrowid)

    def list_active(self, now: datetime) -> Sequence[Message]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT message_id, teacher_id, body, start_time, duration_minutes
                FROM messages
                WHERE start_time <= %s
                  AND DATE_ADD(start_time, INTERVAL duration_minutes MINUTE) > %s
                ORDER BY start_time, message_id
                """,
                (now, now),
            )
            return [_to_message(r) for r in fetchall(cur)]
