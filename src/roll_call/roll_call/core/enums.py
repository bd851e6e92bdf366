from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role stored on the account."""

    STUDENT = "student"
    TEACHER = "teacher"


class AttendanceStatus(str, Enum):
    """Status values accepted when marking attendance."""

    PRESENT = "present"
    ABSENT = "absent"


class MessageState(str, Enum):
    """Lifecycle of a broadcast message, derived from the clock only."""

    PENDING = "pending"
    ACTIVE = "active"
    EXPIRED = "expired"
