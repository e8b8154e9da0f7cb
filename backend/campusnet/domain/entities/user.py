"""
User Entity - A campus profile (student or teacher).

Created once at signup, afterwards mutated only by its owner through a
profile update. Users are never deleted.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Optional

from campusnet.domain.exceptions.validation_error import DomainValidationError
from campusnet.domain.services.clock import utc_now
from campusnet.domain.value_objects.user_email import UserEmail
from campusnet.domain.value_objects.user_id import UserId
from campusnet.domain.value_objects.user_role import UserRole


@dataclass
class User:
    # Required fields (no defaults) - must come first
    id: UserId
    email: UserEmail
    name: str
    role: UserRole
    created_at: datetime
    # Optional fields (with defaults) - must come last
    bio: str = ""
    institution: str = ""
    research_interests: list[str] = field(default_factory=list)

    # Fields a profile update may touch; id, email, role and created_at are fixed
    PROFILE_FIELDS: ClassVar[tuple[str, ...]] = (
        "name",
        "bio",
        "institution",
        "research_interests",
    )

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise DomainValidationError("Name is required")
        if not isinstance(self.research_interests, list) or not all(
            isinstance(interest, str) for interest in self.research_interests
        ):
            raise DomainValidationError("Research interests must be a list of strings")
        self.research_interests = [
            interest.strip() for interest in self.research_interests if interest.strip()
        ]

    @classmethod
    def create(
        cls,
        user_id: UserId,
        email: UserEmail,
        name: str,
        role: str,
        bio: Optional[str] = None,
        institution: Optional[str] = None,
        research_interests: Optional[list[str]] = None,
    ) -> User:
        """Factory method for signup; the id comes from the identity provider."""
        return cls(
            id=user_id,
            email=email,
            name=name,
            role=UserRole.parse(role),
            created_at=utc_now(),
            bio=bio or "",
            institution=institution or "",
            research_interests=list(research_interests or []),
        )

    @property
    def is_teacher(self) -> bool:
        return self.role == UserRole.TEACHER

    def apply_profile_changes(self, changes: dict[str, Any]) -> None:
        """Overlay the supplied fields; fields not in `changes` stay as they are."""
        unknown = set(changes) - set(self.PROFILE_FIELDS)
        if unknown:
            raise DomainValidationError(
                f"Cannot update profile fields: {', '.join(sorted(unknown))}"
            )
        for name, value in changes.items():
            if value is None:
                value = [] if name == "research_interests" else ""
            setattr(self, name, value)
        self.__post_init__()

    def matches(self, search: str) -> bool:
        """Case-insensitive match on name, institution, bio or any interest."""
        needle = search.strip().lower()
        if not needle:
            return True
        haystacks = [self.name, self.institution, self.bio, *self.research_interests]
        return any(needle in text.lower() for text in haystacks if text)
