"""Paper DTOs for API responses."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from campusnet.domain.entities.paper import Paper


class PaperDTO(BaseModel):
    """
    Paper metadata. `file_path` is the object path inside the blob store;
    clients fetch the bytes through GET /papers/{id}/download.
    """

    id: str
    title: str
    description: str = ""
    domain_id: Optional[str] = None
    teacher_id: str
    file_name: str
    file_path: str
    created_at: datetime

    @classmethod
    def from_entity(cls, paper: Paper) -> "PaperDTO":
        return cls(
            id=paper.id.value,
            title=paper.title,
            description=paper.description,
            domain_id=paper.domain_id.value if paper.domain_id else None,
            teacher_id=paper.teacher_id.value,
            file_name=paper.file_name,
            file_path=paper.file_path,
            created_at=paper.created_at,
        )
