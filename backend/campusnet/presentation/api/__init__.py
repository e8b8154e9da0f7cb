"""
API Routers - FastAPI endpoint definitions.
"""

from campusnet.presentation.api.profiles import router as profiles_router
from campusnet.presentation.api.teachers import router as teachers_router
from campusnet.presentation.api.domains import router as domains_router
from campusnet.presentation.api.papers import router as papers_router
from campusnet.presentation.api.messages import router as messages_router
from campusnet.presentation.api.blobs import router as blobs_router

__all__ = [
    "profiles_router",
    "teachers_router",
    "domains_router",
    "papers_router",
    "messages_router",
    "blobs_router",
]
