"""Research domain DTOs for API responses."""

from datetime import datetime

from pydantic import BaseModel

from campusnet.domain.entities.research_domain import ResearchDomain


class DomainDTO(BaseModel):
    id: str
    name: str
    description: str = ""
    teacher_id: str
    created_at: datetime

    @classmethod
    def from_entity(cls, domain: ResearchDomain) -> "DomainDTO":
        return cls(
            id=domain.id.value,
            name=domain.name,
            description=domain.description,
            teacher_id=domain.teacher_id.value,
            created_at=domain.created_at,
        )
