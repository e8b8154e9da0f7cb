"""
DeletePaper Command.

Order: blob, then the paper record, then its pointers. A blob store failure
aborts before any KV write, so the paper stays listed and the delete can
simply be retried.
"""

import logging
from dataclasses import dataclass

from campusnet.application.common.interfaces import Command, CommandHandler
from campusnet.domain.exceptions import AccessDeniedError, EntityNotFoundError
from campusnet.domain.ports.blob_store import BlobStore
from campusnet.domain.ports.repositories import PaperRepository
from campusnet.domain.value_objects.paper_id import PaperId
from campusnet.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeletePaperCommand(Command[bool]):
    paper_id: PaperId
    user_id: UserId


class DeletePaperHandler(CommandHandler[bool]):
    def __init__(self, paper_repository: PaperRepository, blob_store: BlobStore):
        self._paper_repository = paper_repository
        self._blob_store = blob_store

    async def execute(self, command: DeletePaperCommand) -> bool:
        paper = await self._paper_repository.get_by_id(command.paper_id)
        if not paper:
            raise EntityNotFoundError(f"Paper {command.paper_id.value} not found")
        if not paper.is_owned_by(command.user_id):
            raise AccessDeniedError("User does not own this paper")

        await self._blob_store.delete_object(paper.file_path)
        await self._paper_repository.delete(paper)

        logger.info(f"[Papers] Deleted {paper.id.value} for teacher {command.user_id.value}")
        return True
