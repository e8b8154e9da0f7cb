import uuid
from datetime import datetime, timedelta, timezone

import pytest

from campusnet.domain.entities.message import Message
from campusnet.domain.entities.paper import Paper
from campusnet.domain.entities.research_domain import ResearchDomain
from campusnet.domain.exceptions import DomainValidationError
from campusnet.domain.value_objects.domain_id import DomainId
from campusnet.domain.value_objects.message_id import MessageId
from campusnet.domain.value_objects.paper_id import PaperId
from campusnet.domain.value_objects.user_id import UserId
from campusnet.domain.value_objects.user_role import UserRole

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_paper(teacher_id, domain_id=None, minutes=0, title="Paper"):
    paper_id = PaperId.generate()
    return Paper(
        id=paper_id,
        title=title,
        description="",
        domain_id=domain_id,
        teacher_id=teacher_id,
        file_name="paper.pdf",
        file_path=f"{teacher_id.value}/{paper_id.value}_paper.pdf",
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


# ==================== USERS ====================


@pytest.mark.asyncio
async def test_user_round_trip(user_repo, make_user):
    user = await make_user(
        role="teacher",
        name="Ada",
        institution="MIT",
        research_interests=["graphs", " ml "],
    )

    stored = await user_repo.get_by_id(user.id)
    assert stored == user
    assert stored.research_interests == ["graphs", "ml"]
    assert await user_repo.get_by_id(UserId(str(uuid.uuid4()))) is None


@pytest.mark.asyncio
async def test_update_bio_leaves_other_fields(user_repo, make_user):
    user = await make_user(
        name="Ada", institution="MIT", research_interests=["graphs"], bio="old"
    )

    updated = await user_repo.update(user.id, {"bio": "new"})

    assert updated.bio == "new"
    stored = await user_repo.get_by_id(user.id)
    assert (stored.name, stored.institution, stored.research_interests) == (
        "Ada",
        "MIT",
        ["graphs"],
    )
    assert stored.role == UserRole.TEACHER
    assert stored.created_at == user.created_at


@pytest.mark.asyncio
async def test_update_rejects_fixed_fields(user_repo, make_user):
    user = await make_user(role="student")

    with pytest.raises(DomainValidationError):
        await user_repo.update(user.id, {"role": "teacher"})
    assert (await user_repo.get_by_id(user.id)).role == UserRole.STUDENT


@pytest.mark.asyncio
async def test_update_of_missing_user_returns_none(user_repo):
    assert await user_repo.update(UserId(str(uuid.uuid4())), {"bio": "x"}) is None


@pytest.mark.asyncio
async def test_list_by_role(user_repo, make_user, kv):
    teacher = await make_user(role="teacher")
    await make_user(role="student")
    await kv.set(f"user:{teacher.id.value}:inbox:{uuid.uuid4()}", "pointer")

    teachers = await user_repo.list_by_role(UserRole.TEACHER)
    assert [t.id for t in teachers] == [teacher.id]


# ==================== DOMAINS & PAPERS ====================


@pytest.mark.asyncio
async def test_domains_listed_per_teacher(domain_repo, make_user):
    ada = await make_user(name="Ada")
    bob = await make_user(name="Bob")
    domain = ResearchDomain.create(teacher_id=ada.id, name="Graphs")
    await domain_repo.save(domain)
    await domain_repo.save(ResearchDomain.create(teacher_id=bob.id, name="Optics"))

    assert await domain_repo.get_by_id(domain.id) == domain
    assert [d.id for d in await domain_repo.list_by_teacher(ada.id)] == [domain.id]


@pytest.mark.asyncio
async def test_paper_visible_in_domain_list_immediately(paper_repo, make_user):
    teacher = await make_user()
    domain_id = DomainId.generate()
    paper = make_paper(teacher.id, domain_id)

    await paper_repo.save(paper)

    assert [p.id for p in await paper_repo.list_by_domain(domain_id)] == [paper.id]
    assert [p.id for p in await paper_repo.list_by_teacher(teacher.id)] == [paper.id]


@pytest.mark.asyncio
async def test_paper_without_domain_only_in_teacher_list(paper_repo, kv, make_user):
    teacher = await make_user()
    paper = make_paper(teacher.id)

    await paper_repo.save(paper)

    assert (await paper_repo.get_by_id(paper.id)).domain_id is None
    assert not [k for k in kv.keys() if k.startswith("domain:")]


@pytest.mark.asyncio
async def test_delete_paper_removes_every_trace(paper_repo, make_user):
    teacher = await make_user()
    domain_id = DomainId.generate()
    keep = make_paper(teacher.id, domain_id, minutes=1)
    gone = make_paper(teacher.id, domain_id, minutes=2)
    await paper_repo.save(keep)
    await paper_repo.save(gone)

    await paper_repo.delete(gone)

    assert await paper_repo.get_by_id(gone.id) is None
    assert [p.id for p in await paper_repo.list_by_teacher(teacher.id)] == [keep.id]
    assert [p.id for p in await paper_repo.list_by_domain(domain_id)] == [keep.id]


@pytest.mark.asyncio
async def test_papers_newest_first(paper_repo, make_user):
    teacher = await make_user()
    papers = [make_paper(teacher.id, minutes=m, title=f"P{m}") for m in (5, 1, 9)]
    for p in papers:
        await paper_repo.save(p)

    titles = [p.title for p in await paper_repo.list_by_teacher(teacher.id)]
    assert titles == ["P9", "P5", "P1"]


# ==================== MESSAGES ====================


@pytest.mark.asyncio
async def test_message_fan_out_and_sender_join(message_repo, make_user):
    sender = await make_user(role="teacher", name="Dr. Smith", email="smith@uni.edu")
    receiver = await make_user(role="student")
    message = Message.create(sender.id, receiver.id, "Office hours", "Tuesday 3pm")

    await message_repo.save(message)

    assert [m.id for m in await message_repo.list_sent(sender.id)] == [message.id]
    assert await message_repo.list_inbox_with_sender(sender.id) == []

    (entry,) = await message_repo.list_inbox_with_sender(receiver.id)
    assert entry.message.read is False
    assert (entry.sender_name, entry.sender_email) == ("Dr. Smith", "smith@uni.edu")


@pytest.mark.asyncio
async def test_inbox_sender_fallback(message_repo, make_user):
    receiver = await make_user(role="student")
    message = Message.create(
        UserId(str(uuid.uuid4())), receiver.id, "Hello", "From nobody"
    )
    await message_repo.save(message)

    (entry,) = await message_repo.list_inbox_with_sender(receiver.id)
    assert (entry.sender_name, entry.sender_email) == ("Unknown", "")


@pytest.mark.asyncio
async def test_message_update_persists_read_flag(message_repo, make_user):
    sender = await make_user()
    receiver = await make_user(role="student")
    message = Message.create(sender.id, receiver.id, "Hi", "There")
    await message_repo.save(message)

    updated = await message_repo.update(message.id, {"read": True})

    assert updated.read is True
    assert (await message_repo.get_by_id(message.id)).read is True
    assert await message_repo.update(MessageId.generate(), {"read": True}) is None
    assert await message_repo.get_by_id(MessageId.generate()) is None

    with pytest.raises(DomainValidationError):
        await message_repo.update(message.id, {"subject": "Changed"})


@pytest.mark.asyncio
async def test_message_update_keeps_stored_fields_verbatim(kv, message_repo):
    message_id = str(uuid.uuid4())
    stored = {
        "id": message_id,
        "senderId": str(uuid.uuid4()),
        "receiverId": str(uuid.uuid4()),
        "subject": "Reading list",
        "content": "Chapters 1-3",
        "read": False,
        "createdAt": "2024-01-01T00:00:00.000Z",
        "attachments": [],
    }
    await kv.set(f"message:{message_id}", dict(stored))

    await message_repo.update(MessageId(message_id), {"read": True})

    assert await kv.get(f"message:{message_id}") == {**stored, "read": True}
