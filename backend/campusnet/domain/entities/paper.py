"""
Paper Entity - A research paper uploaded by a teacher.

The file itself lives in the blob store; the entity only keeps `file_path`,
the object path inside the store.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from pathlib import PurePosixPath
from typing import Optional

from campusnet.domain.exceptions.validation_error import DomainValidationError
from campusnet.domain.services.clock import utc_now
from campusnet.domain.value_objects.domain_id import DomainId
from campusnet.domain.value_objects.paper_id import PaperId
from campusnet.domain.value_objects.user_id import UserId


@dataclass
class Paper:
    id: PaperId
    title: str
    description: str
    domain_id: Optional[DomainId]
    teacher_id: UserId
    file_name: str
    file_path: str
    created_at: datetime

    def __post_init__(self):
        if not self.title or not self.title.strip():
            raise DomainValidationError("Paper title is required")
        if not self.file_name or not self.file_path:
            raise DomainValidationError("Paper file is required")

    @classmethod
    def create(
        cls,
        teacher_id: UserId,
        title: str,
        file_name: str,
        description: Optional[str] = None,
        domain_id: Optional[DomainId] = None,
    ) -> Paper:
        """Factory method; the blob path is `{teacherId}/{paperId}_{fileName}`."""
        paper_id = PaperId.generate()
        # Keep only the final path component of client supplied names
        safe_name = PurePosixPath((file_name or "").replace("\\", "/")).name
        if not safe_name:
            raise DomainValidationError("File name is required")
        return cls(
            id=paper_id,
            title=title,
            description=description or "",
            domain_id=domain_id,
            teacher_id=teacher_id,
            file_name=safe_name,
            file_path=f"{teacher_id.value}/{paper_id.value}_{safe_name}",
            created_at=utc_now(),
        )

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.teacher_id == user_id
