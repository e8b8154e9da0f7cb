"""
Dishka DI Container Setup.

- Registers the KV store, blob store and identity provider (APP scope)
- Maps repository ports to the KV implementations (REQUEST scope)
- Wires command/query handlers (REQUEST scope)

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)
- make_async_container: Creates the container

Flow:
  Container → KeyValueStore → KvEntityStore → KvPaperRepository → UploadPaperHandler
                                                      ↓
                                        used through the PaperRepository port

Tests pass ready-made adapters to AppProvider(...) instead of patching:

    AppProvider(
        kv_store=InMemoryKeyValueStore(),
        blob_store=LocalBlobStore(base_dir=tmp_path),
        identity_provider=JwtIdentityProvider(secret="test"),
    )
"""

import logging
from typing import AsyncIterable, Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from campusnet.application.commands.domains import CreateDomainHandler
from campusnet.application.commands.messages import (
    MarkMessageReadHandler,
    SendMessageHandler,
)
from campusnet.application.commands.papers import DeletePaperHandler, UploadPaperHandler
from campusnet.application.commands.profiles import (
    CreateProfileHandler,
    UpdateProfileHandler,
)
from campusnet.application.queries.domains import ListTeacherDomainsHandler
from campusnet.application.queries.messages import ListInboxHandler, ListSentHandler
from campusnet.application.queries.papers import (
    GetPaperDownloadUrlHandler,
    ListDomainPapersHandler,
    ListTeacherPapersHandler,
)
from campusnet.application.queries.profiles import (
    GetProfileHandler,
    GetTeacherHandler,
    ListTeachersHandler,
)
from campusnet.config.settings import Config, get_config
from campusnet.domain.ports.blob_store import BlobStore
from campusnet.domain.ports.identity_provider import IdentityProvider
from campusnet.domain.ports.kv_store import KeyValueStore
from campusnet.domain.ports.repositories import (
    MessageRepository,
    PaperRepository,
    ResearchDomainRepository,
    UserRepository,
)
from campusnet.infrastructure.identity import JwtIdentityProvider
from campusnet.infrastructure.kv import (
    InMemoryKeyValueStore,
    RedisKeyValueStore,
    close_redis_client,
    create_redis_client,
)
from campusnet.infrastructure.persistence import (
    IndexMaintainer,
    KvEntityStore,
    KvMessageRepository,
    KvPaperRepository,
    KvResearchDomainRepository,
    KvUserRepository,
    RelationResolver,
)
from campusnet.infrastructure.storage import LocalBlobStore

logger = logging.getLogger(__name__)


class AppProvider(Provider):
    """
    Application dependency provider.

    Args:
        config: Settings profile; defaults to get_config() (APP_ENV)
        kv_store: Use this store instead of building one from config.KV_BACKEND
        blob_store: Use this blob store instead of LocalBlobStore(Config.BLOB_BASE)
        identity_provider: Use this instead of JwtIdentityProvider from Config
    """

    def __init__(
        self,
        config: Optional[type[Config]] = None,
        kv_store: Optional[KeyValueStore] = None,
        blob_store: Optional[LocalBlobStore] = None,
        identity_provider: Optional[IdentityProvider] = None,
    ):
        super().__init__()
        self._config = config or get_config()
        self._kv_store = kv_store
        self._blob_store = blob_store
        self._identity_provider = identity_provider

    # ==================== KEY-VALUE STORE ====================

    @provide(scope=Scope.APP)
    async def get_kv_store(self) -> AsyncIterable[KeyValueStore]:
        """
        Provide the KV store (singleton, app-scoped).

        - "redis": connects on first use, closed when the container closes
        - "memory": process-local, lost on restart
        """
        if self._kv_store is not None:
            yield self._kv_store
            return

        if self._config.KV_BACKEND == "redis":
            client = await create_redis_client(self._config.REDIS_URL)
            try:
                yield RedisKeyValueStore(client)
            finally:
                await close_redis_client(client)
            return

        logger.warning("[KV] Using in-memory store; data is lost on restart")
        yield InMemoryKeyValueStore()

    # ==================== EXTERNAL SERVICES ====================

    @provide(scope=Scope.APP)
    def get_local_blob_store(self) -> LocalBlobStore:
        return self._blob_store or LocalBlobStore()

    @provide(scope=Scope.APP)
    def get_blob_store(self, local_blob_store: LocalBlobStore) -> BlobStore:
        """Same instance as LocalBlobStore; handlers only see the port."""
        return local_blob_store

    @provide(scope=Scope.APP)
    def get_identity_provider(self) -> IdentityProvider:
        return self._identity_provider or JwtIdentityProvider()

    # ==================== PERSISTENCE ====================

    @provide(scope=Scope.REQUEST)
    def get_index_maintainer(self, kv_store: KeyValueStore) -> IndexMaintainer:
        return IndexMaintainer(kv_store)

    @provide(scope=Scope.REQUEST)
    def get_entity_store(
        self, kv_store: KeyValueStore, index_maintainer: IndexMaintainer
    ) -> KvEntityStore:
        return KvEntityStore(kv_store, index_maintainer)

    @provide(scope=Scope.REQUEST)
    def get_relation_resolver(
        self, kv_store: KeyValueStore, entity_store: KvEntityStore
    ) -> RelationResolver:
        return RelationResolver(kv_store, entity_store)

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, entity_store: KvEntityStore) -> UserRepository:
        """
        - Return type is ABSTRACT (UserRepository)
        - Implementation is CONCRETE (KvUserRepository)
        """
        return KvUserRepository(entity_store)

    @provide(scope=Scope.REQUEST)
    def get_domain_repository(
        self, entity_store: KvEntityStore, resolver: RelationResolver
    ) -> ResearchDomainRepository:
        return KvResearchDomainRepository(entity_store, resolver)

    @provide(scope=Scope.REQUEST)
    def get_paper_repository(
        self, entity_store: KvEntityStore, resolver: RelationResolver
    ) -> PaperRepository:
        return KvPaperRepository(entity_store, resolver)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(
        self, entity_store: KvEntityStore, resolver: RelationResolver
    ) -> MessageRepository:
        return KvMessageRepository(entity_store, resolver)

    # ==================== PROFILE HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_profile_handler(
        self, user_repository: UserRepository
    ) -> CreateProfileHandler:
        return CreateProfileHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_profile_handler(self, user_repository: UserRepository) -> GetProfileHandler:
        return GetProfileHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_handler(
        self, user_repository: UserRepository
    ) -> UpdateProfileHandler:
        return UpdateProfileHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_teachers_handler(
        self, user_repository: UserRepository
    ) -> ListTeachersHandler:
        return ListTeachersHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_teacher_handler(self, user_repository: UserRepository) -> GetTeacherHandler:
        return GetTeacherHandler(user_repository)

    # ==================== DOMAIN HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_domain_handler(
        self,
        user_repository: UserRepository,
        domain_repository: ResearchDomainRepository,
    ) -> CreateDomainHandler:
        return CreateDomainHandler(user_repository, domain_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_teacher_domains_handler(
        self, domain_repository: ResearchDomainRepository
    ) -> ListTeacherDomainsHandler:
        return ListTeacherDomainsHandler(domain_repository)

    # ==================== PAPER HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_upload_paper_handler(
        self,
        user_repository: UserRepository,
        domain_repository: ResearchDomainRepository,
        paper_repository: PaperRepository,
        blob_store: BlobStore,
    ) -> UploadPaperHandler:
        return UploadPaperHandler(
            user_repository=user_repository,
            domain_repository=domain_repository,
            paper_repository=paper_repository,
            blob_store=blob_store,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_paper_handler(
        self, paper_repository: PaperRepository, blob_store: BlobStore
    ) -> DeletePaperHandler:
        return DeletePaperHandler(paper_repository, blob_store)

    @provide(scope=Scope.REQUEST)
    def get_list_teacher_papers_handler(
        self, paper_repository: PaperRepository
    ) -> ListTeacherPapersHandler:
        return ListTeacherPapersHandler(paper_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_domain_papers_handler(
        self, paper_repository: PaperRepository
    ) -> ListDomainPapersHandler:
        return ListDomainPapersHandler(paper_repository)

    @provide(scope=Scope.REQUEST)
    def get_paper_download_url_handler(
        self, paper_repository: PaperRepository, blob_store: BlobStore
    ) -> GetPaperDownloadUrlHandler:
        return GetPaperDownloadUrlHandler(paper_repository, blob_store)

    # ==================== MESSAGE HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_send_message_handler(
        self,
        user_repository: UserRepository,
        message_repository: MessageRepository,
    ) -> SendMessageHandler:
        return SendMessageHandler(user_repository, message_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_inbox_handler(
        self, message_repository: MessageRepository
    ) -> ListInboxHandler:
        return ListInboxHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_sent_handler(self, message_repository: MessageRepository) -> ListSentHandler:
        return ListSentHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_mark_message_read_handler(
        self, message_repository: MessageRepository
    ) -> MarkMessageReadHandler:
        return MarkMessageReadHandler(message_repository)


def create_container(provider: Optional[AppProvider] = None) -> AsyncContainer:
    """
    Create and configure the DI container.

    - Call this ONCE at app startup (or once per test app)
    """
    return make_async_container(provider or AppProvider())
