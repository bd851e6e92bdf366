from __future__ import annotations

from datetime import datetime
from typing import Callable, Dict, List

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local, start_of_day
from ..core.constants import NOT_MARKED
from ..users.repository import UserRepository
from .model import RosterEntry


class RosterService:
    """Use case: list every student with today's attendance status."""

    def __init__(
        self,
        users: UserRepository,
        attendance: AttendanceRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._users = users
        self._attendance = attendance
        self._clock = clock

    def list_students_with_today_status(self, *, now: datetime | None = None) -> List[RosterEntry]:
        now = now or self._clock()
        students = self._users.list_students()
        if not students:
            return []

        today: Dict[int, AttendanceRecord] = {}
        for record in self._attendance.list_since(start_of_day(now)):
            # first mark of the day wins
            today.setdefault(record.user_id, record)

        return [
            RosterEntry(
                user_id=s.user_id,
                name=s.name,
                roll_number=s.roll_number or "",
                email=s.email,
                attendance_status=today[s.user_id].status.value if s.user_id in today else NOT_MARKED,
            )
            for s in students
        ]
