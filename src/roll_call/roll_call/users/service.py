from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, DuplicateKeyError, ValidationError
from .model import SignupForm
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    user_id: int
    name: str
    email: str
    role: Role
    roll_number: Optional[str]

    def to_dict(self) -> dict:
        return {
            "id": self.user_id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "rollNumber": self.roll_number,
        }


class AuthService:
    """Use cases: signup and login."""

    def __init__(self, users: UserRepository):
        self._users = users

    def signup(self, form: SignupForm) -> int:
        if self._users.get_by_email(form.email):
            raise ValidationError("Email is already registered")

        if form.role == Role.STUDENT and self._users.get_student_by_roll_number(form.roll_number or ""):
            raise ValidationError("Roll number is already registered")

        try:
            user_id = self._users.create_user(
                name=form.name,
                email=form.email,
                password_hash=generate_password_hash(form.password),
                role=form.role,
                roll_number=form.roll_number,
            )
        except DuplicateKeyError:
            # lost a race against a concurrent signup with the same email/roll number
            raise ValidationError("Email or roll number is already registered")

        logger.info("Registered %s %s (id=%s)", form.role.value, form.email, user_id)
        return user_id

    def login(self, email: str, password: str) -> SessionUser:
        user = self._users.get_by_email((email or "").strip().lower())
        if not user:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid email or password")

        return SessionUser(
            user_id=user.user_id,
            name=user.name,
            email=user.email,
            role=user.role,
            roll_number=user.roll_number,
        )
