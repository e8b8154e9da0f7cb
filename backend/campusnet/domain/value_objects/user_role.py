"""
UserRole - The two kinds of campus account.
"""

from enum import Enum

from campusnet.domain.exceptions.validation_error import DomainValidationError


class UserRole(str, Enum):
    STUDENT = "student"
    TEACHER = "teacher"

    @classmethod
    def parse(cls, value: str) -> "UserRole":
        try:
            return cls(value)
        except ValueError as e:
            raise DomainValidationError(
                "Invalid role. Must be student or teacher"
            ) from e
