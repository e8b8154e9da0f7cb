"""KeyValueStore adapters: in-memory and Redis (against a small in-test double)."""

import re

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from campusnet.domain.exceptions import DependencyFailureError
from campusnet.infrastructure.kv import InMemoryKeyValueStore, RedisKeyValueStore
from campusnet.infrastructure.kv.redis_kv_store import escape_glob


class FakeRedis:
    """Just enough of redis.asyncio.Redis for RedisKeyValueStore."""

    def __init__(self, fail=False):
        self.data: dict[str, str] = {}
        self.fail = fail
        self.scan_calls: list[tuple[str, int]] = []

    def _check(self):
        if self.fail:
            raise RedisConnectionError("connection refused")

    async def get(self, key):
        self._check()
        return self.data.get(key)

    async def set(self, key, value):
        self._check()
        self.data[key] = value

    async def delete(self, key):
        self._check()
        self.data.pop(key, None)

    async def mget(self, keys):
        self._check()
        return [self.data.get(k) for k in keys]

    async def scan_iter(self, match, count):
        self._check()
        self.scan_calls.append((match, count))
        assert match.endswith("*")
        prefix = re.sub(r"\\(.)", r"\1", match[:-1])
        # Unordered, with a duplicate, like a real SCAN may return
        keys = [k for k in self.data if k.startswith(prefix)]
        for key in reversed(keys + keys[:1]):
            yield key


# ==================== IN-MEMORY ====================


@pytest.mark.asyncio
async def test_in_memory_point_operations():
    kv = InMemoryKeyValueStore()
    assert await kv.get("paper:1") is None

    await kv.set("paper:1", {"id": "1", "title": "A"})
    assert await kv.get("paper:1") == {"id": "1", "title": "A"}

    await kv.delete("paper:1")
    await kv.delete("paper:1")  # deleting a missing key is fine
    assert await kv.get("paper:1") is None


@pytest.mark.asyncio
async def test_in_memory_scan_is_ordered_by_key():
    kv = InMemoryKeyValueStore()
    await kv.set("teacher:t:paper:b", "b")
    await kv.set("teacher:t:paper:a", "a")
    await kv.set("teacher:t:domain:d", "d")
    await kv.set("teacher:other:paper:c", "c")

    assert await kv.scan_prefix("teacher:t:paper:") == ["a", "b"]
    assert await kv.scan_prefix("nothing:") == []


@pytest.mark.asyncio
async def test_in_memory_values_are_copies():
    kv = InMemoryKeyValueStore()
    record = {"id": "1", "researchInterests": ["ml"]}
    await kv.set("user:1", record)
    record["researchInterests"].append("nlp")

    stored = await kv.get("user:1")
    stored["researchInterests"].append("vision")
    assert (await kv.get("user:1"))["researchInterests"] == ["ml"]


# ==================== REDIS ====================


def test_escape_glob():
    assert escape_glob("user:a*b?[c]") == r"user:a\*b\?\[c\]"


@pytest.mark.asyncio
async def test_redis_store_namespaces_keys_and_round_trips_json():
    redis = FakeRedis()
    kv = RedisKeyValueStore(redis, namespace="kv:")

    await kv.set("paper:1", {"id": "1", "title": "Graph Theory"})
    await kv.set("teacher:t:paper:1", "1")

    assert set(redis.data) == {"kv:paper:1", "kv:teacher:t:paper:1"}
    assert await kv.get("paper:1") == {"id": "1", "title": "Graph Theory"}
    assert await kv.get("teacher:t:paper:1") == "1"

    await kv.delete("paper:1")
    assert await kv.get("paper:1") is None


@pytest.mark.asyncio
async def test_redis_scan_prefix_dedupes_and_sorts():
    redis = FakeRedis()
    kv = RedisKeyValueStore(redis, namespace="kv:", scan_count=10)
    for child in ("c", "a", "b"):
        await kv.set(f"domain:d1:paper:{child}", child)
    await kv.set("domain:d2:paper:z", "z")

    assert await kv.scan_prefix("domain:d1:paper:") == ["a", "b", "c"]
    assert redis.scan_calls == [("kv:domain:d1:paper:*", 10)]


@pytest.mark.asyncio
async def test_redis_scan_batches_mget(monkeypatch):
    redis = FakeRedis()
    kv = RedisKeyValueStore(redis, namespace="")
    monkeypatch.setattr(RedisKeyValueStore, "MGET_BATCH", 2)
    for i in range(5):
        await kv.set(f"user:u:sent:{i}", str(i))

    assert await kv.scan_prefix("user:u:sent:") == ["0", "1", "2", "3", "4"]


@pytest.mark.asyncio
async def test_redis_errors_become_dependency_failures():
    kv = RedisKeyValueStore(FakeRedis(fail=True), namespace="kv:")

    with pytest.raises(DependencyFailureError):
        await kv.get("user:1")
    with pytest.raises(DependencyFailureError):
        await kv.set("user:1", {"id": "1"})
    with pytest.raises(DependencyFailureError):
        await kv.scan_prefix("user:")
