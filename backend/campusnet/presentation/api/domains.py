"""
Research Domains API Router.

- POST /domains                 → create a domain (teachers only)
- GET  /domains/{id}/papers     → papers filed under the domain
"""

from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from campusnet.application.commands.domains import (
    CreateDomainCommand,
    CreateDomainHandler,
)
from campusnet.application.dto.domain import DomainDTO
from campusnet.application.dto.paper import PaperDTO
from campusnet.application.queries.papers import (
    ListDomainPapersHandler,
    ListDomainPapersQuery,
)
from campusnet.domain.value_objects.domain_id import DomainId
from campusnet.presentation.dependencies.auth import AuthUser, get_current_user


class CreateDomainRequest(BaseModel):
    name: str
    description: Optional[str] = None


class ListDomainPapersResponse(BaseModel):
    papers: list[PaperDTO]


router = APIRouter(prefix="/domains", tags=["domains"])


@router.post("", response_model=DomainDTO, status_code=status.HTTP_201_CREATED)
@inject
async def create_domain(
    request: CreateDomainRequest,
    handler: FromDishka[CreateDomainHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    domain = await handler.execute(
        CreateDomainCommand(
            teacher_id=current_user.id,
            name=request.name,
            description=request.description,
        )
    )
    return DomainDTO.from_entity(domain)


@router.get("/{domain_id}/papers", response_model=ListDomainPapersResponse)
@inject
async def list_domain_papers(
    domain_id: str,
    handler: FromDishka[ListDomainPapersHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(ListDomainPapersQuery(domain_id=DomainId(domain_id)))
    return ListDomainPapersResponse(papers=result.papers)
