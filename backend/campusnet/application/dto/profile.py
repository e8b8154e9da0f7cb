"""Profile DTOs for API responses."""

from datetime import datetime

from pydantic import BaseModel

from campusnet.domain.entities.user import User


class ProfileDTO(BaseModel):
    id: str
    email: str
    name: str
    role: str
    bio: str = ""
    institution: str = ""
    research_interests: list[str] = []
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "ProfileDTO":
        return cls(
            id=user.id.value,
            email=user.email.value,
            name=user.name,
            role=user.role.value,
            bio=user.bio,
            institution=user.institution,
            research_interests=list(user.research_interests),
            created_at=user.created_at,
        )
