from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Services depend on this protocol, never on a concrete DB.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def get_student_by_roll_number(self, roll_number: str) -> Optional[User]:
        raise NotImplementedError

    def list_students(self) -> Sequence[User]:
        """All students in store order."""

        raise NotImplementedError

    def create_user(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        role: Role,
        roll_number: Optional[str] = None,
    ) -> int:
        raise NotImplementedError
