"""
KV ResearchDomain Repository Implementation.

Record `domain:{id}` = {id, name, description, teacherId, createdAt}
Pointer `teacher:{teacherId}:domain:{id}` = id
"""

from typing import Optional

from campusnet.domain.entities.research_domain import ResearchDomain
from campusnet.domain.ports.repositories.research_domain_repository import (
    ResearchDomainRepository,
)
from campusnet.domain.services.clock import format_timestamp, parse_timestamp
from campusnet.domain.services.relationship_index import (
    ChildKind,
    EntityKind,
    Relation,
)
from campusnet.domain.value_objects.domain_id import DomainId
from campusnet.domain.value_objects.user_id import UserId
from campusnet.infrastructure.persistence.kv_entity_store import KvEntityStore, Record
from campusnet.infrastructure.persistence.relation_resolver import RelationResolver


class KvResearchDomainRepository(ResearchDomainRepository):
    def __init__(self, entities: KvEntityStore, resolver: RelationResolver):
        self._entities = entities
        self._resolver = resolver

    def _to_entity(self, record: Record) -> ResearchDomain:
        return ResearchDomain(
            id=DomainId(record["id"]),
            name=record["name"],
            description=record.get("description") or "",
            teacher_id=UserId(record["teacherId"]),
            created_at=parse_timestamp(record["createdAt"]),
        )

    def _to_record(self, domain: ResearchDomain) -> Record:
        return {
            "id": domain.id.value,
            "name": domain.name,
            "description": domain.description,
            "teacherId": domain.teacher_id.value,
            "createdAt": format_timestamp(domain.created_at),
        }

    async def get_by_id(self, domain_id: DomainId) -> Optional[ResearchDomain]:
        record = await self._entities.read(EntityKind.DOMAIN, domain_id.value)
        return self._to_entity(record) if record else None

    async def save(self, domain: ResearchDomain) -> None:
        await self._entities.create(EntityKind.DOMAIN, self._to_record(domain))

    async def list_by_teacher(self, teacher_id: UserId) -> list[ResearchDomain]:
        records = await self._resolver.list_children(
            Relation.TEACHER, teacher_id.value, ChildKind.DOMAIN
        )
        return [self._to_entity(r) for r in records]
