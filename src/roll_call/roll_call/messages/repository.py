from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import Message


class MessageRepository(Protocol):
    def create(self, *, teacher_id: int, body: str, start_time: datetime, duration_minutes: int) -> int:
        raise NotImplementedError

    def list_active(self, now: datetime) -> Sequence[Message]:
        """Messages with ``start_time <= now < start_time + duration``, oldest first."""

        raise NotImplementedError
