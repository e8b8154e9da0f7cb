"""
Redis KeyValueStore - the durable KV backend.

Redis Data Structure (STRING):
- Key pattern: "{namespace}{key}", e.g. "kv:paper:3f2c..." or
  "kv:teacher:{teacherId}:paper:{paperId}"
- Value: JSON document (entity record) or JSON string (pointer record)
- No TTL: records live until deleted

Redis Commands Used:
- GET / SET / DEL: point operations, atomic per key
- SCAN MATCH: prefix enumeration without blocking the server like KEYS
- MGET: fetch the scanned values in one round trip

Prefix scans are not a snapshot. A key deleted between SCAN and MGET comes
back as None and is skipped, the same as if the scan had missed it.
"""

import json
import logging
import re
from typing import Any, Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from campusnet.config.settings import Config
from campusnet.domain.exceptions.dependency_failure import DependencyFailureError
from campusnet.domain.ports.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

# SCAN MATCH uses glob syntax
_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")


def escape_glob(value: str) -> str:
    return _GLOB_SPECIAL.sub(r"\\\1", value)


class RedisKeyValueStore(KeyValueStore):
    """KeyValueStore backed by Redis strings holding JSON."""

    MGET_BATCH = 200

    def __init__(
        self,
        redis: Redis,
        namespace: Optional[str] = None,
        scan_count: Optional[int] = None,
    ):
        self._redis = redis
        self._namespace = Config.KV_NAMESPACE if namespace is None else namespace
        self._scan_count = scan_count or Config.REDIS_SCAN_COUNT

    def _key(self, key: str) -> str:
        return f"{self._namespace}{key}"

    async def get(self, key: str) -> Optional[Any]:
        try:
            raw = await self._redis.get(self._key(key))
        except RedisError as e:
            logger.error(f"[KV] GET {key} failed: {e}")
            raise DependencyFailureError("kv", str(e)) from e
        return json.loads(raw) if raw is not None else None

    async def set(self, key: str, value: Any) -> None:
        try:
            await self._redis.set(self._key(key), json.dumps(value, ensure_ascii=False))
        except RedisError as e:
            logger.error(f"[KV] SET {key} failed: {e}")
            raise DependencyFailureError("kv", str(e)) from e

    async def delete(self, key: str) -> None:
        try:
            await self._redis.delete(self._key(key))
        except RedisError as e:
            logger.error(f"[KV] DEL {key} failed: {e}")
            raise DependencyFailureError("kv", str(e)) from e

    async def scan_prefix(self, prefix: str) -> list[Any]:
        pattern = escape_glob(self._key(prefix)) + "*"
        try:
            # SCAN may return a key more than once
            keys = sorted(
                {
                    key
                    async for key in self._redis.scan_iter(
                        match=pattern, count=self._scan_count
                    )
                }
            )
            values: list[Any] = []
            for start in range(0, len(keys), self.MGET_BATCH):
                batch = keys[start : start + self.MGET_BATCH]
                raws = await self._redis.mget(batch)
                values.extend(json.loads(raw) for raw in raws if raw is not None)
        except RedisError as e:
            logger.error(f"[KV] SCAN {prefix} failed: {e}")
            raise DependencyFailureError("kv", str(e)) from e

        logger.debug(f"[KV] SCAN {prefix} -> {len(values)} values")
        return values
