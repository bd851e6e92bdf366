from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Sequence, Tuple

from ..common.datetime_utils import now_local, start_of_day
from ..core.enums import AttendanceStatus
from ..core.exceptions import AlreadyMarkedError, DuplicateKeyError, NotFoundError, ValidationError
from ..users.model import User
from ..users.repository import UserRepository
from .model import AttendanceEntry, AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: mark daily attendance for a batch of students.

    A batch is all-or-nothing. Every entry is resolved and checked against
    today's records before anything is written, and the inserts share one
    transaction. The ``UNIQUE (user_id, work_date)`` constraint catches a
    concurrent writer that slips in between the check and the insert.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._users = users
        self._clock = clock

    def mark_attendance(
        self, entries: Sequence[AttendanceEntry], *, now: datetime | None = None
    ) -> List[AttendanceRecord]:
        if not entries:
            raise ValidationError("Invalid input data")

        seen: set[str] = set()
        for entry in entries:
            if entry.roll_number in seen:
                raise ValidationError(f"Roll number {entry.roll_number} is listed more than once")
            seen.add(entry.roll_number)

        now = now or self._clock()
        since = start_of_day(now)

        marks: List[Tuple[User, AttendanceStatus]] = []
        for entry in entries:
            student = self._users.get_student_by_roll_number(entry.roll_number)
            if not student:
                logger.warning("Attendance batch rejected: unknown roll number %s", entry.roll_number)
                raise NotFoundError(entry.roll_number)
            marks.append((student, entry.status))

        already_marked = [
            student.roll_number or ""
            for student, _ in marks
            if self._attendance.get_for_user_since(student.user_id, since)
        ]
        if already_marked:
            logger.warning("Attendance batch rejected: already marked %s", already_marked)
            raise AlreadyMarkedError(already_marked)

        try:
            records = self._attendance.create_batch(marks=marks, work_date=since.date(), created_at=now)
        except DuplicateKeyError:
            # A concurrent batch won the race; nothing from this one was kept.
            conflicts = [
                student.roll_number or ""
                for student, _ in marks
                if self._attendance.get_for_user_since(student.user_id, since)
            ]
            logger.warning("Attendance batch lost a concurrent write for %s", conflicts)
            raise AlreadyMarkedError(conflicts)

        logger.info("Marked attendance for %d student(s)", len(records))
        return list(records)
