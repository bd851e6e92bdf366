from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence, Tuple

from ..core.enums import AttendanceStatus
from ..users.model import User
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_user_since(self, user_id: int, since: datetime) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_since(self, since: datetime) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create_batch(
        self,
        *,
        marks: Sequence[Tuple[User, AttendanceStatus]],
        work_date: date,
        created_at: datetime,
    ) -> Sequence[AttendanceRecord]:
        """Insert all marks in one transaction.

        Raises ``DuplicateKeyError`` (and writes nothing) when any student
        already has a record for ``work_date``.
        """

        raise NotImplementedError
