"""
PaperId Value Object - UUID wrapper for Paper identity.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4

from campusnet.domain.exceptions.validation_error import DomainValidationError


@dataclass(frozen=True)
class PaperId:
    value: str  # paper_id, presented as UUID string

    def __post_init__(self):
        if not self.value:
            raise DomainValidationError("Paper ID cannot be empty")
        try:
            UUID(self.value)
        except ValueError as e:
            raise DomainValidationError(f"Invalid Paper ID: {self.value}") from e

    @classmethod
    def generate(cls) -> "PaperId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
