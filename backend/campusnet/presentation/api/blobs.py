"""
Blobs API Router - serves files behind signed URLs.

GET /blobs/{path}?token=...

The token minted by LocalBlobStore.create_signed_url is the only
credential; no bearer header is needed, so the URL can be opened directly
in a browser tab until it expires.
"""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter
from fastapi.responses import Response

from campusnet.infrastructure.storage import LocalBlobStore

router = APIRouter(prefix="/blobs", tags=["blobs"])


@router.get("/{path:path}")
@inject
async def read_blob(path: str, token: str, blob_store: FromDishka[LocalBlobStore]):
    content, content_type = blob_store.read_signed(path, token)
    return Response(content=content, media_type=content_type)
