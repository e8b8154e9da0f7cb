"""
GetPaperDownloadUrl Query - short-lived read URL for a paper file.

Papers are readable by every signed-in user; the URL expires after
`ttl_seconds` and only grants access to this one object.
"""

from dataclasses import dataclass

from campusnet.application.common.interfaces import Query, QueryHandler
from campusnet.config.settings import Config
from campusnet.domain.exceptions import EntityNotFoundError
from campusnet.domain.ports.blob_store import BlobStore
from campusnet.domain.ports.repositories import PaperRepository
from campusnet.domain.value_objects.paper_id import PaperId


@dataclass
class GetPaperDownloadUrlResult:
    url: str
    file_name: str
    expires_in: int


@dataclass(frozen=True)
class GetPaperDownloadUrlQuery(Query[GetPaperDownloadUrlResult]):
    paper_id: PaperId
    ttl_seconds: int = Config.SIGNED_URL_TTL


class GetPaperDownloadUrlHandler(QueryHandler[GetPaperDownloadUrlResult]):
    def __init__(self, paper_repository: PaperRepository, blob_store: BlobStore):
        self._paper_repository = paper_repository
        self._blob_store = blob_store

    async def execute(self, query: GetPaperDownloadUrlQuery) -> GetPaperDownloadUrlResult:
        paper = await self._paper_repository.get_by_id(query.paper_id)
        if not paper:
            raise EntityNotFoundError(f"Paper {query.paper_id.value} not found")

        url = await self._blob_store.create_signed_url(paper.file_path, query.ttl_seconds)
        return GetPaperDownloadUrlResult(
            url=url, file_name=paper.file_name, expires_in=query.ttl_seconds
        )
