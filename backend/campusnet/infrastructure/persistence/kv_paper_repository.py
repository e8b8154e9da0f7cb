"""
KV Paper Repository Implementation.

Record `paper:{id}` = {id, title, description, domainId|null, teacherId,
fileName, filePath, createdAt}

Pointers:
- `teacher:{teacherId}:paper:{id}` = id   (always)
- `domain:{domainId}:paper:{id}` = id     (only when domainId is set)
"""

from typing import Optional

from campusnet.domain.entities.paper import Paper
from campusnet.domain.ports.repositories.paper_repository import PaperRepository
from campusnet.domain.services.clock import format_timestamp, parse_timestamp
from campusnet.domain.services.relationship_index import (
    ChildKind,
    EntityKind,
    Relation,
)
from campusnet.domain.value_objects.domain_id import DomainId
from campusnet.domain.value_objects.paper_id import PaperId
from campusnet.domain.value_objects.user_id import UserId
from campusnet.infrastructure.persistence.kv_entity_store import KvEntityStore, Record
from campusnet.infrastructure.persistence.relation_resolver import RelationResolver


class KvPaperRepository(PaperRepository):
    def __init__(self, entities: KvEntityStore, resolver: RelationResolver):
        self._entities = entities
        self._resolver = resolver

    def _to_entity(self, record: Record) -> Paper:
        domain_id = record.get("domainId")
        return Paper(
            id=PaperId(record["id"]),
            title=record["title"],
            description=record.get("description") or "",
            domain_id=DomainId(domain_id) if domain_id else None,
            teacher_id=UserId(record["teacherId"]),
            file_name=record["fileName"],
            file_path=record["filePath"],
            created_at=parse_timestamp(record["createdAt"]),
        )

    def _to_record(self, paper: Paper) -> Record:
        return {
            "id": paper.id.value,
            "title": paper.title,
            "description": paper.description,
            "domainId": paper.domain_id.value if paper.domain_id else None,
            "teacherId": paper.teacher_id.value,
            "fileName": paper.file_name,
            "filePath": paper.file_path,
            "createdAt": format_timestamp(paper.created_at),
        }

    async def get_by_id(self, paper_id: PaperId) -> Optional[Paper]:
        record = await self._entities.read(EntityKind.PAPER, paper_id.value)
        return self._to_entity(record) if record else None

    async def save(self, paper: Paper) -> None:
        await self._entities.create(EntityKind.PAPER, self._to_record(paper))

    async def delete(self, paper: Paper) -> None:
        await self._entities.delete(EntityKind.PAPER, self._to_record(paper))

    async def list_by_teacher(self, teacher_id: UserId) -> list[Paper]:
        records = await self._resolver.list_children(
            Relation.TEACHER, teacher_id.value, ChildKind.PAPER
        )
        return [self._to_entity(r) for r in records]

    async def list_by_domain(self, domain_id: DomainId) -> list[Paper]:
        records = await self._resolver.list_children(
            Relation.DOMAIN, domain_id.value, ChildKind.PAPER
        )
        return [self._to_entity(r) for r in records]
