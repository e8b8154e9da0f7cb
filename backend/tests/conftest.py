import time
import uuid

import jwt
import pytest
from fastapi.testclient import TestClient

from campusnet.config.settings import TestingConfig
from campusnet.domain.entities.user import User
from campusnet.domain.value_objects.user_email import UserEmail
from campusnet.domain.value_objects.user_id import UserId
from campusnet.fastapi_app import create_fastapi_app
from campusnet.infrastructure.identity import JwtIdentityProvider
from campusnet.infrastructure.kv import InMemoryKeyValueStore
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
from campusnet.setup.ioc.container import AppProvider, create_container

SERVICE_AUTH_SECRET = "campusnet-test-secret-0123456789abcdef"
BLOB_SIGNING_SECRET = "campusnet-blob-secret-0123456789abcdef"
AUD = "campusnet-tests"
ISS = "campus-identity-tests"


def _service_token(user_id, email="user@example.edu", ttl=300, **claims):
    now = int(time.time())
    return jwt.encode(
        {
            "sub": user_id,
            "email": email,
            "iat": now,
            "exp": now + ttl,
            "iss": ISS,
            "aud": AUD,
            **claims,
        },
        SERVICE_AUTH_SECRET,
        algorithm="HS256",
    )


def new_id() -> str:
    return str(uuid.uuid4())


# ==================== CORE ====================


@pytest.fixture()
def kv():
    return InMemoryKeyValueStore()


@pytest.fixture()
def entities(kv):
    return KvEntityStore(kv, IndexMaintainer(kv))


@pytest.fixture()
def resolver(kv, entities):
    return RelationResolver(kv, entities)


@pytest.fixture()
def user_repo(entities):
    return KvUserRepository(entities)


@pytest.fixture()
def domain_repo(entities, resolver):
    return KvResearchDomainRepository(entities, resolver)


@pytest.fixture()
def paper_repo(entities, resolver):
    return KvPaperRepository(entities, resolver)


@pytest.fixture()
def message_repo(entities, resolver):
    return KvMessageRepository(entities, resolver)


@pytest.fixture()
def blob_store(tmp_path):
    return LocalBlobStore(
        base_dir=str(tmp_path / "blobs"),
        signing_secret=BLOB_SIGNING_SECRET,
        public_base_url="http://testserver",
    )


@pytest.fixture()
def identity_provider():
    return JwtIdentityProvider(secret=SERVICE_AUTH_SECRET, issuer=ISS, audience=AUD)


@pytest.fixture()
def make_user(user_repo):
    """Async factory that stores a profile and returns the User."""

    async def _make(role="teacher", name=None, email=None, **fields):
        user_id = new_id()
        user = User.create(
            user_id=UserId(user_id),
            email=UserEmail(email or f"{role}-{user_id[:8]}@uni.edu"),
            name=name or f"{role.title()} {user_id[:4]}",
            role=role,
            **fields,
        )
        await user_repo.save(user)
        return user

    return _make


# ==================== API ====================


@pytest.fixture()
def app(kv, blob_store, identity_provider):
    """A FastAPI app wired to in-memory KV and a temp-dir blob store."""
    provider = AppProvider(
        config=TestingConfig,
        kv_store=kv,
        blob_store=blob_store,
        identity_provider=identity_provider,
    )
    return create_fastapi_app(create_container(provider), config=TestingConfig)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def auth_headers():
    """Factory: bearer headers for a given user id."""

    def _headers(user_id, email="user@example.edu"):
        return {"Authorization": f"Bearer {_service_token(user_id, email)}"}

    return _headers
