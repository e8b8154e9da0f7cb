"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- kv/: Key-value store adapters (in-memory, Redis)
- persistence/: Entity store, index maintainer, resolver and KV repositories
- storage/: Blob store on local disk with signed URLs
- identity/: JWT identity provider
"""

from campusnet.infrastructure.kv import (
    InMemoryKeyValueStore,
    RedisKeyValueStore,
    create_redis_client,
)
from campusnet.infrastructure.storage import LocalBlobStore
from campusnet.infrastructure.identity import JwtIdentityProvider

__all__ = [
    "InMemoryKeyValueStore",
    "RedisKeyValueStore",
    "create_redis_client",
    "LocalBlobStore",
    "JwtIdentityProvider",
]
