"""
LocalBlobStore - BlobStore on the local file system.

Objects live under `base_dir/{path}`; a small sidecar file next to each
object keeps its content type. Signed URLs point at the `/blobs` route and
carry a short-lived PyJWT token bound to the object path:

    {PUBLIC_BASE_URL}/blobs/{path}?token=<jwt{path, iat, exp}>

File I/O is synchronous, as in the rest of the code base; paper files are
small enough that this never needed aiofiles.
"""

import json
import logging
import time
from pathlib import Path
from typing import Optional
from urllib.parse import quote

import jwt

from campusnet.config.settings import Config
from campusnet.domain.exceptions.access_denied import AccessDeniedError
from campusnet.domain.exceptions.dependency_failure import DependencyFailureError
from campusnet.domain.exceptions.entity_not_found import EntityNotFoundError
from campusnet.domain.exceptions.validation_error import DomainValidationError
from campusnet.domain.ports.blob_store import BlobStore

logger = logging.getLogger(__name__)

META_SUFFIX = ".meta.json"
DEFAULT_CONTENT_TYPE = "application/octet-stream"
TOKEN_PURPOSE = "blob-read"


class LocalBlobStore(BlobStore):
    def __init__(
        self,
        base_dir: Optional[str] = None,
        signing_secret: Optional[str] = None,
        public_base_url: Optional[str] = None,
    ):
        """
        Initialize LocalBlobStore.

        Args:
            base_dir: Root directory for objects (default: Config.BLOB_BASE)
            signing_secret: HMAC secret for signed URLs (default: Config.BLOB_SIGNING_SECRET)
            public_base_url: Origin used to build signed URLs (default: Config.PUBLIC_BASE_URL)
        """
        self.base_dir = Path(base_dir or Config.BLOB_BASE).resolve()
        self._secret = signing_secret or Config.BLOB_SIGNING_SECRET
        self._public_base_url = (public_base_url or Config.PUBLIC_BASE_URL).rstrip("/")

    def _resolve(self, path: str) -> Path:
        """Map an object path to a file under base_dir, refusing anything outside it."""
        if not path or path.startswith(("/", "\\")):
            raise DomainValidationError(f"Invalid blob path: {path!r}")
        target = (self.base_dir / path).resolve()
        if target == self.base_dir or self.base_dir not in target.parents:
            raise DomainValidationError(f"Invalid blob path: {path!r}")
        return target

    async def put_object(self, path: str, data: bytes, content_type: str) -> None:
        target = self._resolve(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
            Path(f"{target}{META_SUFFIX}").write_text(
                json.dumps({"contentType": content_type or DEFAULT_CONTENT_TYPE}),
                encoding="utf-8",
            )
        except OSError as e:
            logger.error(f"[BlobStore] Failed to store {path}: {e}")
            raise DependencyFailureError("blob_store", f"upload failed: {e}") from e

        logger.debug(f"[BlobStore] Stored {path} ({len(data)} bytes)")

    async def delete_object(self, path: str) -> None:
        target = self._resolve(path)
        try:
            target.unlink(missing_ok=True)
            Path(f"{target}{META_SUFFIX}").unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"[BlobStore] Failed to delete {path}: {e}")
            raise DependencyFailureError("blob_store", f"delete failed: {e}") from e

        logger.debug(f"[BlobStore] Deleted {path}")

    async def create_signed_url(self, path: str, ttl_seconds: int) -> str:
        self._resolve(path)
        if not self._secret:
            raise DependencyFailureError("blob_store", "no signing secret configured")

        now = int(time.time())
        token = jwt.encode(
            {"path": path, "purpose": TOKEN_PURPOSE, "iat": now, "exp": now + ttl_seconds},
            self._secret,
            algorithm="HS256",
        )
        return f"{self._public_base_url}/blobs/{quote(path)}?token={token}"

    def read_signed(self, path: str, token: str) -> tuple[bytes, str]:
        """
        Return (content, content_type) for a signed URL.

        Raises:
            AccessDeniedError: token invalid, expired or issued for another path
            EntityNotFoundError: object no longer exists
        """
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=["HS256"],
                options={"require": ["exp", "iat", "path"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise AccessDeniedError("Download link has expired") from e
        except jwt.InvalidTokenError as e:
            raise AccessDeniedError(f"Invalid download link: {e}") from e

        if claims.get("purpose") != TOKEN_PURPOSE or claims.get("path") != path:
            raise AccessDeniedError("Download link does not match this file")

        target = self._resolve(path)
        if not target.is_file():
            raise EntityNotFoundError(f"File not found: {path}")

        content_type = DEFAULT_CONTENT_TYPE
        meta = Path(f"{target}{META_SUFFIX}")
        try:
            content = target.read_bytes()
            if meta.is_file():
                content_type = json.loads(meta.read_text(encoding="utf-8")).get(
                    "contentType", DEFAULT_CONTENT_TYPE
                )
        except OSError as e:
            raise DependencyFailureError("blob_store", f"read failed: {e}") from e

        return content, content_type
