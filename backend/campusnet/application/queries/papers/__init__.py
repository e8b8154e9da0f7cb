"""Paper queries."""

from campusnet.application.queries.papers.list_papers import (
    ListPapersResult,
    ListTeacherPapersQuery,
    ListTeacherPapersHandler,
    ListDomainPapersQuery,
    ListDomainPapersHandler,
)
from campusnet.application.queries.papers.get_paper_download_url import (
    GetPaperDownloadUrlQuery,
    GetPaperDownloadUrlHandler,
    GetPaperDownloadUrlResult,
)

__all__ = [
    "ListPapersResult",
    "ListTeacherPapersQuery",
    "ListTeacherPapersHandler",
    "ListDomainPapersQuery",
    "ListDomainPapersHandler",
    "GetPaperDownloadUrlQuery",
    "GetPaperDownloadUrlHandler",
    "GetPaperDownloadUrlResult",
]
