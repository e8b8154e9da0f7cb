"""
UserId Value Object

User ids are issued by the identity provider, never generated here.
"""

from dataclasses import dataclass
from uuid import UUID

from campusnet.domain.exceptions.validation_error import DomainValidationError


@dataclass(frozen=True)
class UserId:
    value: str  # user_id

    def __post_init__(self):
        if not self.value:
            raise DomainValidationError("UserId cannot be empty")
        try:
            UUID(self.value)  # Validate UUID format
        except ValueError as e:
            raise DomainValidationError(f"Invalid UserId: {self.value}") from e

    def __str__(self) -> str:
        return self.value
