"""
ResearchDomain Entity - A research area a teacher files papers under.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from campusnet.domain.exceptions.validation_error import DomainValidationError
from campusnet.domain.services.clock import utc_now
from campusnet.domain.value_objects.domain_id import DomainId
from campusnet.domain.value_objects.user_id import UserId


@dataclass
class ResearchDomain:
    id: DomainId
    name: str
    description: str
    teacher_id: UserId
    created_at: datetime

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise DomainValidationError("Domain name is required")

    @classmethod
    def create(
        cls, teacher_id: UserId, name: str, description: Optional[str] = None
    ) -> ResearchDomain:
        return cls(
            id=DomainId.generate(),
            name=name,
            description=description or "",
            teacher_id=teacher_id,
            created_at=utc_now(),
        )

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.teacher_id == user_id
