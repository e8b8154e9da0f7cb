"""
Profile API Router - signup and the caller's own profile.

- POST /profile: create the caller's profile (once)
- GET  /profile: read it
- PUT  /profile: partial update; only fields present in the body change
"""

from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from campusnet.application.commands.profiles import (
    CreateProfileCommand,
    CreateProfileHandler,
    UpdateProfileCommand,
    UpdateProfileHandler,
)
from campusnet.application.dto.profile import ProfileDTO
from campusnet.application.queries.profiles import GetProfileHandler, GetProfileQuery
from campusnet.presentation.dependencies.auth import AuthUser, get_current_user


# ==================== REQUEST MODELS ====================


class CreateProfileRequest(BaseModel):
    name: str
    role: str
    bio: Optional[str] = None
    institution: Optional[str] = None
    research_interests: list[str] = []


class UpdateProfileRequest(BaseModel):
    """Every field is optional; omitted fields keep their stored value."""

    name: Optional[str] = None
    bio: Optional[str] = None
    institution: Optional[str] = None
    research_interests: Optional[list[str]] = None


# ==================== ROUTER ====================

router = APIRouter(prefix="/profile", tags=["profile"])


@router.post("", response_model=ProfileDTO, status_code=status.HTTP_201_CREATED)
@inject
async def create_profile(
    request: CreateProfileRequest,
    handler: FromDishka[CreateProfileHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Create the caller's profile. Id and email come from the token."""
    command = CreateProfileCommand(
        user_id=current_user.id,
        email=current_user.email,
        name=request.name,
        role=request.role,
        bio=request.bio,
        institution=request.institution,
        research_interests=tuple(request.research_interests),
    )
    user = await handler.execute(command)
    return ProfileDTO.from_entity(user)


@router.get("", response_model=ProfileDTO)
@inject
async def get_profile(
    handler: FromDishka[GetProfileHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    user = await handler.execute(GetProfileQuery(user_id=current_user.id))
    return ProfileDTO.from_entity(user)


@router.put("", response_model=ProfileDTO)
@inject
async def update_profile(
    request: UpdateProfileRequest,
    handler: FromDishka[UpdateProfileHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = UpdateProfileCommand(
        user_id=current_user.id,
        changes=request.model_dump(exclude_unset=True),
    )
    user = await handler.execute(command)
    return ProfileDTO.from_entity(user)
