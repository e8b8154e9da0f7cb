"""
UploadPaper Command - store a paper file and register its metadata.

Flow:
1. Caller must be a teacher
2. If a domain is given it must exist and belong to the caller
3. Put the bytes in the blob store at `{teacherId}/{paperId}_{fileName}`
4. Write the paper record, then its teacher/domain pointers

If step 4 fails the blob stays behind as an orphan. Nothing references it,
so it is invisible to every listing.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from campusnet.application.common.interfaces import Command, CommandHandler
from campusnet.config.settings import Config
from campusnet.domain.entities.paper import Paper
from campusnet.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from campusnet.domain.ports.blob_store import BlobStore
from campusnet.domain.ports.repositories import (
    PaperRepository,
    ResearchDomainRepository,
    UserRepository,
)
from campusnet.domain.value_objects.domain_id import DomainId
from campusnet.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


# ==================== COMMAND ====================


@dataclass(frozen=True)
class UploadPaperCommand(Command[Paper]):
    """
    Args:
        teacher_id: Caller, becomes the paper owner
        title: Paper title
        file_name: Client file name; only its last path component is kept
        content: Raw file bytes
        description: Optional abstract
        domain_id: Optional research domain owned by the caller
        content_type: MIME type stored alongside the blob
    """

    teacher_id: UserId
    title: str
    file_name: str
    content: bytes
    description: Optional[str] = None
    domain_id: Optional[DomainId] = None
    content_type: str = Config.PAPER_CONTENT_TYPE


# ==================== HANDLER ====================


class UploadPaperHandler(CommandHandler[Paper]):
    def __init__(
        self,
        user_repository: UserRepository,
        domain_repository: ResearchDomainRepository,
        paper_repository: PaperRepository,
        blob_store: BlobStore,
    ):
        self._user_repository = user_repository
        self._domain_repository = domain_repository
        self._paper_repository = paper_repository
        self._blob_store = blob_store

    async def execute(self, command: UploadPaperCommand) -> Paper:
        teacher = await self._user_repository.get_by_id(command.teacher_id)
        if not teacher:
            raise EntityNotFoundError(f"Profile {command.teacher_id.value} not found")
        if not teacher.is_teacher:
            raise AccessDeniedError("Only teachers can upload papers")

        if not command.content:
            raise DomainValidationError("Paper file is empty")
        max_bytes = int(Config.MAX_UPLOAD_MB * 1024 * 1024)
        if len(command.content) > max_bytes:
            raise DomainValidationError(
                f"Paper file exceeds the {Config.MAX_UPLOAD_MB:g} MB upload limit"
            )

        if command.domain_id:
            domain = await self._domain_repository.get_by_id(command.domain_id)
            if not domain:
                raise EntityNotFoundError(
                    f"Research domain {command.domain_id.value} not found"
                )
            if not domain.is_owned_by(command.teacher_id):
                raise AccessDeniedError("Research domain belongs to another teacher")

        paper = Paper.create(
            teacher_id=command.teacher_id,
            title=command.title,
            file_name=command.file_name,
            description=command.description,
            domain_id=command.domain_id,
        )

        # Blob first; a failure here leaves no KV trace
        await self._blob_store.put_object(
            paper.file_path, command.content, command.content_type
        )
        await self._paper_repository.save(paper)

        logger.info(
            f"[Papers] Uploaded {paper.id.value} ({paper.file_name}, "
            f"{len(command.content)} bytes) for teacher {command.teacher_id.value}"
        )
        return paper
