from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..common.datetime_utils import minutes_after
from ..common.validators import require_non_empty, require_positive_int
from ..core.constants import MAX_MESSAGE_MINUTES
from ..core.enums import MessageState
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Message:
    """Domain entity: a broadcast announcement.

    A message is never updated; whether it is shown depends only on the clock.
    """

    message_id: int
    teacher_id: int
    body: str
    start_time: datetime
    duration_minutes: int

    @property
    def ends_at(self) -> datetime:
        return minutes_after(self.start_time, self.duration_minutes)

    def state_at(self, now: datetime) -> MessageState:
        if now < self.start_time:
            return MessageState.PENDING
        if now < self.ends_at:
            return MessageState.ACTIVE
        return MessageState.EXPIRED

    def is_active_at(self, now: datetime) -> bool:
        return self.state_at(now) == MessageState.ACTIVE

    def to_dict(self) -> dict:
        return {
            "id": self.message_id,
            "teacherId": self.teacher_id,
            "message": self.body,
            "startTime": self.start_time.isoformat(),
            "duration": self.duration_minutes,
        }


@dataclass(frozen=True)
class NewMessage:
    teacher_id: int
    body: str
    duration_minutes: int

    @classmethod
    def from_dict(cls, data: Any) -> "NewMessage":
        if not isinstance(data, dict) or not all(data.get(k) for k in ("teacherId", "message", "duration")):
            raise ValidationError("Message, teacher ID, and duration are required")
        return cls(
            teacher_id=require_positive_int(data.get("teacherId"), "Teacher ID"),
            body=require_non_empty(data.get("message"), "Message"),
            duration_minutes=require_positive_int(data.get("duration"), "Duration", MAX_MESSAGE_MINUTES),
        )
