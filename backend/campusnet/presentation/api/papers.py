"""
Papers API Router.

- POST   /papers                 → upload (teachers only)
- GET    /papers/{id}/download   → {"url", "file_name", "expires_in"}
- DELETE /papers/{id}            → owner only

Upload body is JSON; the file travels base64 encoded in `file_data`
(`fileData` is accepted too). A browser data URL such as
"data:application/pdf;base64,JVBERi0..." works as is and its MIME type is
kept as the blob content type.
"""

import base64
import binascii
import re
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import AliasChoices, BaseModel, Field

from campusnet.application.commands.papers import (
    DeletePaperCommand,
    DeletePaperHandler,
    UploadPaperCommand,
    UploadPaperHandler,
)
from campusnet.application.dto.paper import PaperDTO
from campusnet.application.queries.papers import (
    GetPaperDownloadUrlHandler,
    GetPaperDownloadUrlQuery,
)
from campusnet.config.settings import Config
from campusnet.domain.exceptions import DomainValidationError
from campusnet.domain.value_objects.domain_id import DomainId
from campusnet.domain.value_objects.paper_id import PaperId
from campusnet.presentation.dependencies.auth import AuthUser, get_current_user

_DATA_URL = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(;[^,]*)?;base64,", re.I)


# ==================== REQUEST/RESPONSE MODELS ====================


class UploadPaperRequest(BaseModel):
    title: str
    file_name: str = Field(validation_alias=AliasChoices("file_name", "fileName"))
    file_data: str = Field(validation_alias=AliasChoices("file_data", "fileData"))
    description: Optional[str] = None
    domain_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("domain_id", "domainId")
    )
    content_type: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("content_type", "contentType")
    )


class DownloadUrlResponse(BaseModel):
    url: str
    file_name: str
    expires_in: int


class DeletePaperResponse(BaseModel):
    success: bool


def decode_file_data(file_data: str) -> tuple[bytes, Optional[str]]:
    """Decode base64 (optionally a data URL) into (bytes, mime type or None)."""
    mime = None
    match = _DATA_URL.match(file_data)
    if match:
        mime = match.group("mime")
        file_data = file_data[match.end():]
    try:
        return base64.b64decode(file_data, validate=True), mime
    except (binascii.Error, ValueError) as e:
        raise DomainValidationError("file_data is not valid base64") from e


# ==================== ROUTER ====================

router = APIRouter(prefix="/papers", tags=["papers"])


@router.post("", response_model=PaperDTO, status_code=status.HTTP_201_CREATED)
@inject
async def upload_paper(
    request: UploadPaperRequest,
    handler: FromDishka[UploadPaperHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    content, mime = decode_file_data(request.file_data)
    command = UploadPaperCommand(
        teacher_id=current_user.id,
        title=request.title,
        file_name=request.file_name,
        content=content,
        description=request.description,
        domain_id=DomainId(request.domain_id) if request.domain_id else None,
        content_type=request.content_type or mime or Config.PAPER_CONTENT_TYPE,
    )
    paper = await handler.execute(command)
    return PaperDTO.from_entity(paper)


@router.get("/{paper_id}/download", response_model=DownloadUrlResponse)
@inject
async def get_download_url(
    paper_id: str,
    handler: FromDishka[GetPaperDownloadUrlHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(GetPaperDownloadUrlQuery(paper_id=PaperId(paper_id)))
    return DownloadUrlResponse(
        url=result.url, file_name=result.file_name, expires_in=result.expires_in
    )


@router.delete("/{paper_id}", response_model=DeletePaperResponse)
@inject
async def delete_paper(
    paper_id: str,
    handler: FromDishka[DeletePaperHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    success = await handler.execute(
        DeletePaperCommand(paper_id=PaperId(paper_id), user_id=current_user.id)
    )
    return DeletePaperResponse(success=success)
