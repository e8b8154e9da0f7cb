"""
Relationship Index - key layout of the flat key-value namespace.

Entity records:
    {kind}:{id}                                → full record

Pointer records (value is the child id, never its data):
    teacher:{teacherId}:domain:{domainId}      → domains owned by a teacher
    teacher:{teacherId}:paper:{paperId}        → papers owned by a teacher
    domain:{domainId}:paper:{paperId}          → papers filed under a domain
    user:{receiverId}:inbox:{messageId}        → messages addressed to a user
    user:{senderId}:sent:{messageId}           → messages sent by a user

The pointer set of a record is a pure function of its foreign-key fields, so
the keys written at create time can be recomputed at delete time without an
index of indexes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class EntityKind(str, Enum):
    USER = "user"
    DOMAIN = "domain"
    PAPER = "paper"
    MESSAGE = "message"


class Relation(str, Enum):
    TEACHER = "teacher"
    DOMAIN = "domain"
    USER = "user"


class ChildKind(str, Enum):
    """Segment naming the child collection inside a pointer key."""

    DOMAIN = "domain"
    PAPER = "paper"
    INBOX = "inbox"
    SENT = "sent"


@dataclass(frozen=True)
class IndexRule:
    """One foreign-key field of an entity kind and the pointer it implies."""

    relation: Relation
    foreign_key: str  # record field holding the parent id
    child: ChildKind


INDEX_RULES: dict[EntityKind, tuple[IndexRule, ...]] = {
    EntityKind.USER: (),
    EntityKind.DOMAIN: (IndexRule(Relation.TEACHER, "teacherId", ChildKind.DOMAIN),),
    EntityKind.PAPER: (
        IndexRule(Relation.TEACHER, "teacherId", ChildKind.PAPER),
        IndexRule(Relation.DOMAIN, "domainId", ChildKind.PAPER),
    ),
    EntityKind.MESSAGE: (
        IndexRule(Relation.USER, "receiverId", ChildKind.INBOX),
        IndexRule(Relation.USER, "senderId", ChildKind.SENT),
    ),
}

# Which entity kind a child collection resolves to
CHILD_ENTITY: dict[ChildKind, EntityKind] = {
    ChildKind.DOMAIN: EntityKind.DOMAIN,
    ChildKind.PAPER: EntityKind.PAPER,
    ChildKind.INBOX: EntityKind.MESSAGE,
    ChildKind.SENT: EntityKind.MESSAGE,
}


def _segment(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def entity_key(kind: EntityKind, entity_id: str) -> str:
    return f"{_segment(kind)}:{entity_id}"


def entity_prefix(kind: EntityKind) -> str:
    return f"{_segment(kind)}:"


def index_prefix(relation: Relation, parent_id: str, child: ChildKind) -> str:
    return f"{_segment(relation)}:{parent_id}:{_segment(child)}:"


def index_key(
    relation: Relation, parent_id: str, child: ChildKind, child_id: str
) -> str:
    return f"{index_prefix(relation, parent_id, child)}{child_id}"


def pointer_keys(kind: EntityKind, record: Mapping[str, Any]) -> list[str]:
    """
    Derive every pointer key implied by a record's foreign keys.

    Foreign keys that are missing or empty (e.g. a paper without a domain)
    imply no pointer.
    """
    entity_id = record.get("id")
    if not entity_id:
        raise ValueError(f"Cannot index a {_segment(kind)} record without an id")

    keys = []
    for rule in INDEX_RULES[EntityKind(kind)]:
        parent_id = record.get(rule.foreign_key)
        if parent_id:
            keys.append(index_key(rule.relation, parent_id, rule.child, entity_id))
    return keys
