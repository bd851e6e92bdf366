from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RosterEntry:
    """Read-model: a student with today's attendance status."""

    user_id: int
    name: str
    roll_number: str
    email: str
    attendance_status: str

    def to_dict(self) -> dict:
        return {
            "id": self.user_id,
            "name": self.name,
            "rollNumber": self.roll_number,
            "email": self.email,
            "attendanceStatus": self.attendance_status,
        }
