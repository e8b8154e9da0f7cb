"""
KV User Repository Implementation.

Record layout (key `user:{id}`):
    {
        "id": "uuid", "email": "a@b.edu", "name": "...", "role": "teacher",
        "bio": "", "institution": "", "researchInterests": [...],
        "createdAt": "ISO-8601"
    }

Mapping:
- record["researchInterests"] ←→ User.research_interests
- record["createdAt"] (str)   ←→ User.created_at (datetime)
- Other fields map directly
"""

import logging
from typing import Any, Optional

from campusnet.domain.entities.user import User
from campusnet.domain.exceptions.validation_error import DomainValidationError
from campusnet.domain.ports.repositories.user_repository import UserRepository
from campusnet.domain.services.clock import format_timestamp, parse_timestamp
from campusnet.domain.services.relationship_index import EntityKind
from campusnet.domain.value_objects.user_email import UserEmail
from campusnet.domain.value_objects.user_id import UserId
from campusnet.domain.value_objects.user_role import UserRole
from campusnet.infrastructure.persistence.kv_entity_store import KvEntityStore, Record

logger = logging.getLogger(__name__)

# entity attribute → record field
_FIELD_NAMES = {
    "name": "name",
    "bio": "bio",
    "institution": "institution",
    "research_interests": "researchInterests",
}


class KvUserRepository(UserRepository):
    def __init__(self, entities: KvEntityStore):
        self._entities = entities

    def _to_entity(self, record: Record) -> User:
        return User(
            id=UserId(record["id"]),
            email=UserEmail(record["email"]),
            name=record["name"],
            role=UserRole.parse(record["role"]),
            created_at=parse_timestamp(record["createdAt"]),
            bio=record.get("bio") or "",
            institution=record.get("institution") or "",
            research_interests=list(record.get("researchInterests") or []),
        )

    def _to_record(self, user: User) -> Record:
        return {
            "id": user.id.value,
            "email": user.email.value,
            "name": user.name,
            "role": user.role.value,
            "bio": user.bio,
            "institution": user.institution,
            "researchInterests": list(user.research_interests),
            "createdAt": format_timestamp(user.created_at),
        }

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        record = await self._entities.read(EntityKind.USER, user_id.value)
        return self._to_entity(record) if record else None

    async def save(self, user: User) -> None:
        await self._entities.create(EntityKind.USER, self._to_record(user))

    async def update(self, user_id: UserId, changes: dict[str, Any]) -> Optional[User]:
        current = await self._entities.read(EntityKind.USER, user_id.value)
        if current is None:
            return None

        unknown = set(changes) - set(_FIELD_NAMES)
        if unknown:
            raise DomainValidationError(f"Not updatable: {', '.join(sorted(unknown))}")

        merged = {**current, **{_FIELD_NAMES[k]: v for k, v in changes.items()}}
        user = self._to_entity(merged)  # validates the merged profile
        await self._entities.write(EntityKind.USER, merged)
        logger.info(f"[Users] Updated {sorted(changes)} for user {user_id.value}")
        return user

    async def list_by_role(self, role: UserRole) -> list[User]:
        records = await self._entities.list_kind(EntityKind.USER)
        return [self._to_entity(r) for r in records if r.get("role") == role.value]
