"""
Key-Value Layer - adapters for the KeyValueStore port.
"""

from campusnet.infrastructure.kv.in_memory_kv_store import InMemoryKeyValueStore
from campusnet.infrastructure.kv.redis_client import (
    create_redis_client,
    close_redis_client,
)
from campusnet.infrastructure.kv.redis_kv_store import RedisKeyValueStore

__all__ = [
    "InMemoryKeyValueStore",
    "RedisKeyValueStore",
    "create_redis_client",
    "close_redis_client",
]
