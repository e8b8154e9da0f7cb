"""
Persistence Layer - entity records and relationship indexes on the KV store.

- KvEntityStore:    `{kind}:{id}` records, delegates pointers to IndexMaintainer
- IndexMaintainer:  writes/removes `relation:{parentId}:{child}:{id}` pointers
- RelationResolver: prefix-scan + materialise joins for listings
- Kv*Repository:    typed implementations of the domain repository ports
"""

from campusnet.infrastructure.persistence.index_maintainer import IndexMaintainer
from campusnet.infrastructure.persistence.kv_entity_store import KvEntityStore
from campusnet.infrastructure.persistence.relation_resolver import RelationResolver
from campusnet.infrastructure.persistence.kv_user_repository import KvUserRepository
from campusnet.infrastructure.persistence.kv_research_domain_repository import (
    KvResearchDomainRepository,
)
from campusnet.infrastructure.persistence.kv_paper_repository import KvPaperRepository
from campusnet.infrastructure.persistence.kv_message_repository import (
    KvMessageRepository,
)

__all__ = [
    "IndexMaintainer",
    "KvEntityStore",
    "RelationResolver",
    "KvUserRepository",
    "KvResearchDomainRepository",
    "KvPaperRepository",
    "KvMessageRepository",
]
