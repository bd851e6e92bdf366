from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..common.validators import require_choice, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class User:
    """Domain entity: an account (teacher or student).

    Plain data object, no DB access here.
    """

    user_id: int
    name: str
    email: str
    password_hash: str
    role: Role
    roll_number: Optional[str] = None


@dataclass(frozen=True)
class SignupForm:
    name: str
    email: str
    password: str
    role: Role
    roll_number: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "SignupForm":
        if not isinstance(data, dict):
            raise ValidationError("Invalid input data")

        role = require_choice(data.get("role"), "Role", Role)
        roll_number = data.get("rollNumber")
        if role == Role.STUDENT:
            roll_number = require_non_empty(roll_number, "Roll number")
        else:
            roll_number = None

        return cls(
            name=require_non_empty(data.get("name"), "Name"),
            email=require_non_empty(data.get("email"), "Email").lower(),
            password=require_min_length(data.get("password"), "Password", MIN_PASSWORD_LENGTH),
            role=role,
            roll_number=roll_number,
        )
