"""Entity store, index maintainer and relation resolver over the in-memory KV."""

import asyncio
import logging

import pytest

from campusnet.domain.exceptions import DependencyFailureError
from campusnet.domain.services.relationship_index import ChildKind, EntityKind, Relation
from campusnet.infrastructure.kv import InMemoryKeyValueStore
from campusnet.infrastructure.persistence import (
    IndexMaintainer,
    KvEntityStore,
    RelationResolver,
)
from campusnet.infrastructure.persistence.relation_resolver import newest_first


class RecordingKeyValueStore(InMemoryKeyValueStore):
    """In-memory store that records the order of writes."""

    def __init__(self):
        super().__init__()
        self.ops: list[tuple[str, str]] = []

    async def set(self, key, value):
        self.ops.append(("set", key))
        await super().set(key, value)

    async def delete(self, key):
        self.ops.append(("delete", key))
        await super().delete(key)


class FailingIndexStore(RecordingKeyValueStore):
    """Fails every write under the given key prefix."""

    def __init__(self, failing_prefix):
        super().__init__()
        self.failing_prefix = failing_prefix

    async def set(self, key, value):
        if key.startswith(self.failing_prefix):
            self.ops.append(("failed", key))
            raise DependencyFailureError("kv", f"write to {key} failed")
        await super().set(key, value)


class ConcurrencyTrackingStore(InMemoryKeyValueStore):
    """Records how many reads were in flight at once."""

    def __init__(self):
        super().__init__()
        self.in_flight = 0
        self.max_in_flight = 0

    async def get(self, key):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        await asyncio.sleep(0)
        try:
            return await super().get(key)
        finally:
            self.in_flight -= 1


def paper(paper_id, created_at, domain_id="d1", teacher_id="t1"):
    return {
        "id": paper_id,
        "title": f"Paper {paper_id}",
        "teacherId": teacher_id,
        "domainId": domain_id,
        "createdAt": created_at,
    }


@pytest.mark.asyncio
async def test_create_writes_entity_before_pointers():
    kv = RecordingKeyValueStore()
    store = KvEntityStore(kv, IndexMaintainer(kv))

    await store.create(EntityKind.PAPER, paper("p1", "2024-01-01T00:00:00.000000+00:00"))

    assert kv.ops == [
        ("set", "paper:p1"),
        ("set", "teacher:t1:paper:p1"),
        ("set", "domain:d1:paper:p1"),
    ]
    assert await kv.get("teacher:t1:paper:p1") == "p1"


@pytest.mark.asyncio
async def test_delete_removes_entity_then_exactly_its_pointers():
    kv = RecordingKeyValueStore()
    store = KvEntityStore(kv, IndexMaintainer(kv))
    record = paper("p1", "2024-01-01T00:00:00.000000+00:00")
    await store.create(EntityKind.PAPER, record)
    await kv.set("teacher:t1:paper:p2", "p2")  # unrelated pointer survives
    kv.ops.clear()

    await store.delete(EntityKind.PAPER, record)

    assert kv.ops == [
        ("delete", "paper:p1"),
        ("delete", "teacher:t1:paper:p1"),
        ("delete", "domain:d1:paper:p1"),
    ]
    assert kv.keys() == ["teacher:t1:paper:p2"]


@pytest.mark.asyncio
async def test_failed_pointer_write_is_logged_raised_and_not_rolled_back(caplog):
    kv = FailingIndexStore("domain:")
    store = KvEntityStore(kv, IndexMaintainer(kv))

    with caplog.at_level(logging.ERROR):
        with pytest.raises(DependencyFailureError):
            await store.create(EntityKind.PAPER, paper("p1", "2024-01-01T00:00:00.000000+00:00"))

    assert kv.ops == [
        ("set", "paper:p1"),
        ("set", "teacher:t1:paper:p1"),
        ("failed", "domain:d1:paper:p1"),
    ]
    assert (await kv.get("paper:p1"))["id"] == "p1"
    assert await kv.get("teacher:t1:paper:p1") == "p1"
    assert "domain:d1:paper:p1" in caplog.text


@pytest.mark.asyncio
async def test_read_ignores_non_record_values(kv, entities):
    await kv.set("user:u1", "not-a-record")
    assert await entities.read(EntityKind.USER, "u1") is None
    assert await entities.read(EntityKind.USER, "missing") is None


@pytest.mark.asyncio
async def test_list_kind_skips_pointer_records(kv, entities):
    await entities.create(EntityKind.USER, {"id": "u1", "name": "A"})
    await kv.set("user:u1:inbox:m1", "m1")

    assert await entities.list_kind(EntityKind.USER) == [{"id": "u1", "name": "A"}]


@pytest.mark.asyncio
async def test_list_children_skips_dangling_pointers(kv, entities, resolver):
    await entities.create(EntityKind.PAPER, paper("p1", "2024-01-01T00:00:00.000000+00:00"))
    # Pointer left behind by an interrupted delete
    await kv.set("domain:d1:paper:gone", "gone")

    records = await resolver.list_children(Relation.DOMAIN, "d1", ChildKind.PAPER)
    assert [r["id"] for r in records] == ["p1"]


@pytest.mark.asyncio
async def test_list_children_newest_first_with_id_tie_break(entities, resolver):
    await entities.create(EntityKind.PAPER, paper("a", "2024-01-01T00:00:00.000000+00:00"))
    await entities.create(EntityKind.PAPER, paper("c", "2024-03-01T00:00:00.000000+00:00"))
    await entities.create(EntityKind.PAPER, paper("b", "2024-03-01T00:00:00.000000+00:00"))
    await entities.create(EntityKind.PAPER, paper("z", "2024-02-01T00:00:00.000000+00:00"))

    records = await resolver.list_children(Relation.TEACHER, "t1", ChildKind.PAPER)
    assert [r["id"] for r in records] == ["c", "b", "z", "a"]


def test_newest_first_handles_missing_fields():
    records = [{"id": "x"}, {"id": "y", "createdAt": "2024-01-01"}]
    assert [r["id"] for r in newest_first(records)] == ["y", "x"]


@pytest.mark.asyncio
async def test_list_children_unknown_parent_is_empty(resolver):
    assert await resolver.list_children(Relation.TEACHER, "nobody", ChildKind.DOMAIN) == []


@pytest.mark.asyncio
async def test_inbox_with_sender_pairs_missing_sender_with_none(entities, resolver):
    await entities.create(EntityKind.USER, {"id": "s1", "name": "Dr. Smith", "email": "s@uni.edu"})
    for message_id, sender_id, created_at in (
        ("m1", "s1", "2024-01-01T00:00:00.000000+00:00"),
        ("m2", "ghost", "2024-01-02T00:00:00.000000+00:00"),
    ):
        await entities.create(
            EntityKind.MESSAGE,
            {
                "id": message_id,
                "senderId": sender_id,
                "receiverId": "r1",
                "subject": "Hi",
                "content": "Hello",
                "read": False,
                "createdAt": created_at,
            },
        )

    joined = await resolver.list_inbox_with_sender("r1")

    assert [(m["id"], s["name"] if s else None) for m, s in joined] == [
        ("m2", None),
        ("m1", "Dr. Smith"),
    ]


@pytest.mark.asyncio
async def test_list_children_reads_entities_concurrently():
    kv = ConcurrencyTrackingStore()
    entities = KvEntityStore(kv, IndexMaintainer(kv))
    resolver = RelationResolver(kv, entities)
    for n in range(4):
        await entities.create(
            EntityKind.PAPER, paper(f"p{n}", f"2024-01-0{n + 1}T00:00:00.000000+00:00")
        )

    records = await resolver.list_children(Relation.TEACHER, "t1", ChildKind.PAPER)

    assert [r["id"] for r in records] == ["p3", "p2", "p1", "p0"]
    assert kv.max_in_flight == 4
