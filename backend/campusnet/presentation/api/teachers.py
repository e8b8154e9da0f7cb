"""
Teachers API Router - the directory students browse.

- GET /teachers?search=...         → {"teachers": [...]}
- GET /teachers/{id}               → teacher profile
- GET /teachers/{id}/domains       → {"domains": [...]}, newest first
- GET /teachers/{id}/papers        → {"papers": [...]}, newest first
"""

from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from campusnet.application.dto.domain import DomainDTO
from campusnet.application.dto.paper import PaperDTO
from campusnet.application.dto.profile import ProfileDTO
from campusnet.application.queries.domains import (
    ListTeacherDomainsHandler,
    ListTeacherDomainsQuery,
)
from campusnet.application.queries.papers import (
    ListTeacherPapersHandler,
    ListTeacherPapersQuery,
)
from campusnet.application.queries.profiles import (
    GetTeacherHandler,
    GetTeacherQuery,
    ListTeachersHandler,
    ListTeachersQuery,
)
from campusnet.domain.value_objects.user_id import UserId
from campusnet.presentation.dependencies.auth import AuthUser, get_current_user


class ListTeachersResponse(BaseModel):
    teachers: list[ProfileDTO]


class ListDomainsResponse(BaseModel):
    domains: list[DomainDTO]


class ListPapersResponse(BaseModel):
    papers: list[PaperDTO]


router = APIRouter(prefix="/teachers", tags=["teachers"])


@router.get("", response_model=ListTeachersResponse)
@inject
async def list_teachers(
    handler: FromDishka[ListTeachersHandler],
    search: Optional[str] = None,
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(ListTeachersQuery(search=search))
    return ListTeachersResponse(teachers=result.teachers)


@router.get("/{teacher_id}", response_model=ProfileDTO)
@inject
async def get_teacher(
    teacher_id: str,
    handler: FromDishka[GetTeacherHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    teacher = await handler.execute(GetTeacherQuery(teacher_id=UserId(teacher_id)))
    return ProfileDTO.from_entity(teacher)


@router.get("/{teacher_id}/domains", response_model=ListDomainsResponse)
@inject
async def list_teacher_domains(
    teacher_id: str,
    handler: FromDishka[ListTeacherDomainsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(
        ListTeacherDomainsQuery(teacher_id=UserId(teacher_id))
    )
    return ListDomainsResponse(domains=result.domains)


@router.get("/{teacher_id}/papers", response_model=ListPapersResponse)
@inject
async def list_teacher_papers(
    teacher_id: str,
    handler: FromDishka[ListTeacherPapersHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(ListTeacherPapersQuery(teacher_id=UserId(teacher_id)))
    return ListPapersResponse(papers=result.papers)
