from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List

from ..common.datetime_utils import now_local
from ..core.constants import MAX_MESSAGE_MINUTES
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..users.repository import UserRepository
from .model import Message, NewMessage
from .repository import MessageRepository

logger = logging.getLogger(__name__)


class MessageService:
    """Use cases: broadcast a message, list the ones currently active."""

    def __init__(
        self,
        messages: MessageRepository,
        users: UserRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._messages = messages
        self._users = users
        self._clock = clock

    def create_message(self, new: NewMessage, *, now: datetime | None = None) -> Message:
        if not 0 < new.duration_minutes <= MAX_MESSAGE_MINUTES:
            raise ValidationError(f"Duration must be between 1 and {MAX_MESSAGE_MINUTES} minutes")
        if not new.body.strip():
            raise ValidationError("Message is required")

        teacher = self._users.get_by_id(new.teacher_id)
        if not teacher or teacher.role != Role.TEACHER:
            raise ValidationError(f"Teacher {new.teacher_id} does not exist")

        start_time = (now or self._clock()).replace(microsecond=0)
        message_id = self._messages.create(
            teacher_id=new.teacher_id,
            body=new.body.strip(),
            start_time=start_time,
            duration_minutes=new.duration_minutes,
        )
        logger.info("Teacher %s broadcast message %s for %d min", new.teacher_id, message_id, new.duration_minutes)

        return Message(
            message_id=message_id,
            teacher_id=new.teacher_id,
            body=new.body.strip(),
            start_time=start_time,
            duration_minutes=new.duration_minutes,
        )

    def list_active_messages(self, *, now: datetime | None = None) -> List[Message]:
        now = now or self._clock()
        seen: set[int] = set()
        active: List[Message] = []
        for message in self._messages.list_active(now):
            if message.message_id in seen or not message.is_active_at(now):
                continue
            seen.add(message.message_id)
            active.append(message)
        return active
