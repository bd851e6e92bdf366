from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, List

from ..common.validators import require_choice, require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark for a student on one day."""

    attendance_id: int
    user_id: int
    roll_number: str
    status: AttendanceStatus
    work_date: date
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "studentId": self.user_id,
            "rollNumber": self.roll_number,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class AttendanceEntry:
    """One validated line of a marking request."""

    roll_number: str
    status: AttendanceStatus

    @classmethod
    def from_dict(cls, data: Any) -> "AttendanceEntry":
        if not isinstance(data, dict):
            raise ValidationError("Invalid input for roll number or status")
        roll_number = data.get("rollNumber")
        if isinstance(roll_number, int) and not isinstance(roll_number, bool):
            roll_number = str(roll_number)
        return cls(
            roll_number=require_non_empty(roll_number, "Roll number"),
            status=require_choice(data.get("status"), "Status", AttendanceStatus),
        )

    @classmethod
    def parse_batch(cls, payload: Any) -> List["AttendanceEntry"]:
        if not isinstance(payload, list) or not payload:
            raise ValidationError("Invalid input data")
        return [cls.from_dict(item) for item in payload]
