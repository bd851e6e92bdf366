from __future__ import annotations

from typing import Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class NotFoundError(DomainError):
    """Raised when a referenced student does not exist."""

    def __init__(self, roll_number: str):
        super().__init__(f"Student with roll number {roll_number} not found")
        self.roll_number = roll_number


class AlreadyMarkedError(DomainError):
    """Raised when some students already have attendance for today."""

    def __init__(self, roll_numbers: Sequence[str]):
        super().__init__("Attendance already marked for some students")
        self.roll_numbers = list(roll_numbers)


class StoreError(Exception):
    """Raised when the record store fails an operation."""


class StoreUnavailableError(StoreError):
    """Raised when the record store cannot be reached."""


class DuplicateKeyError(StoreError):
    """Raised when an insert violates a unique constraint."""
