from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.roll_call.roll_call.attendance.model import AttendanceRecord
from src.roll_call.roll_call.container import wire
from src.roll_call.roll_call.core.enums import Role
from src.roll_call.roll_call.core.exceptions import DuplicateKeyError
from src.roll_call.roll_call.messages.model import Message
from src.roll_call.roll_call.users.model import User


class InMemoryUsers:
    def __init__(self, users: Optional[list[User]] = None):
        self._users: dict[int, User] = {}
        self._id = 0
        for u in users or []:
            self._users[u.user_id] = u
            self._id = max(self._id, u.user_id)
        self.lookups: list[str] = []

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._users.values() if u.email == email), None)

    def get_student_by_roll_number(self, roll_number: str) -> Optional[User]:
        self.lookups.append(roll_number)
        return next(
            (u for u in self._users.values() if u.roll_number == roll_number and u.role == Role.STUDENT),
            None,
        )

    def list_students(self):
        return [u for u in self._users.values() if u.role == Role.STUDENT]

    def create_user(self, *, name, email, password_hash, role, roll_number=None) -> int:
        if self.get_by_email(email):
            raise DuplicateKeyError(email)
        self._id += 1
        self._users[self._id] = User(
            user_id=self._id,
            name=name,
            email=email,
            password_hash=password_hash,
            role=role,
            roll_number=roll_number,
        )
        return self._id


class InMemoryAttendance:
    """Mirrors the UNIQUE (user_id, work_date) constraint and batch rollback."""

    def __init__(self):
        self.records: list[AttendanceRecord] = []
        self._id = 0

    def get_for_user_since(self, user_id: int, since: datetime) -> Optional[AttendanceRecord]:
        return next((r for r in self.records if r.user_id == user_id and r.created_at >= since), None)

    def list_since(self, since: datetime):
        return [r for r in self.records if r.created_at >= since]

    def add(self, *, user: User, status, created_at: datetime) -> AttendanceRecord:
        self._id += 1
        rec = AttendanceRecord(
            attendance_id=self._id,
            user_id=user.user_id,
            roll_number=user.roll_number or "",
            status=status,
            work_date=created_at.date(),
            created_at=created_at,
        )
        self.records.append(rec)
        return rec

    def create_batch(self, *, marks, work_date: date, created_at: datetime):
        taken = {(r.user_id, r.work_date) for r in self.records}
        if any((student.user_id, work_date) in taken for student, _ in marks):
            raise DuplicateKeyError("uq_attendance_user_day")
        return [self.add(user=student, status=status, created_at=created_at) for student, status in marks]


@dataclass
class InMemoryMessages:
    messages: dict[int, Message] = field(default_factory=dict)

    def create(self, *, teacher_id, body, start_time, duration_minutes) -> int:
        message_id = len(self.messages) + 1
        self.messages[message_id] = Message(
            message_id=message_id,
            teacher_id=teacher_id,
            body=body,
            start_time=start_time,
            duration_minutes=duration_minutes,
        )
        return message_id

    def list_active(self, now: datetime):
        return sorted(
            (m for m in self.messages.values() if m.start_time <= now < m.ends_at),
            key=lambda m: (m.start_time, m.message_id),
        )


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 3, 2, 9, 15, 0)


@pytest.fixture
def clock(fixed_now) -> FakeClock:
    return FakeClock(fixed_now)


@pytest.fixture
def teacher() -> User:
    return User(
        user_id=1,
        name="Teacher",
        email="t1@example.com",
        password_hash=generate_password_hash("teach-pw"),
        role=Role.TEACHER,
    )


@pytest.fixture
def students() -> list[User]:
    return [
        User(
            user_id=10 + i,
            name=f"Student {i}",
            email=f"s{i}@example.com",
            password_hash=generate_password_hash("student-pw"),
            role=Role.STUDENT,
            roll_number=f"R{i}",
        )
        for i in (1, 2, 3)
    ]


@pytest.fixture
def users_repo(teacher, students) -> InMemoryUsers:
    return InMemoryUsers([teacher, *students])


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def messages_repo() -> InMemoryMessages:
    return InMemoryMessages()


@pytest.fixture
def container(users_repo, attendance_repo, messages_repo, clock):
    return wire(
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        messages_repo=messages_repo,
        clock=clock,
    )
