import time
from urllib.parse import parse_qs, urlparse

import jwt
import pytest

from campusnet.domain.exceptions import (
    AccessDeniedError,
    DependencyFailureError,
    DomainValidationError,
    EntityNotFoundError,
)
from conftest import BLOB_SIGNING_SECRET


def token_of(url):
    return parse_qs(urlparse(url).query)["token"][0]


@pytest.mark.asyncio
async def test_put_sign_and_read(blob_store):
    await blob_store.put_object("t1/p1_notes.pdf", b"%PDF", "application/pdf")

    url = await blob_store.create_signed_url("t1/p1_notes.pdf", 60)

    assert url.startswith("http://testserver/blobs/t1/p1_notes.pdf?token=")
    assert blob_store.read_signed("t1/p1_notes.pdf", token_of(url)) == (
        b"%PDF",
        "application/pdf",
    )


@pytest.mark.asyncio
async def test_token_is_bound_to_its_path(blob_store):
    await blob_store.put_object("t1/a.pdf", b"a", "application/pdf")
    await blob_store.put_object("t1/b.pdf", b"b", "application/pdf")
    url = await blob_store.create_signed_url("t1/a.pdf", 60)

    with pytest.raises(AccessDeniedError):
        blob_store.read_signed("t1/b.pdf", token_of(url))


def test_expired_and_forged_tokens_are_rejected(blob_store):
    now = int(time.time())
    expired = jwt.encode(
        {"path": "t1/a.pdf", "purpose": "blob-read", "iat": now - 120, "exp": now - 60},
        BLOB_SIGNING_SECRET,
        algorithm="HS256",
    )
    forged = jwt.encode(
        {"path": "t1/a.pdf", "purpose": "blob-read", "iat": now, "exp": now + 60},
        "some-other-secret-that-is-long-enough",
        algorithm="HS256",
    )

    with pytest.raises(AccessDeniedError, match="expired"):
        blob_store.read_signed("t1/a.pdf", expired)
    with pytest.raises(AccessDeniedError):
        blob_store.read_signed("t1/a.pdf", forged)
    with pytest.raises(AccessDeniedError):
        blob_store.read_signed("t1/a.pdf", "not-a-token")


@pytest.mark.asyncio
async def test_deleted_blob_is_not_found_and_delete_is_idempotent(blob_store):
    await blob_store.put_object("t1/a.pdf", b"a", "application/pdf")
    url = await blob_store.create_signed_url("t1/a.pdf", 60)

    await blob_store.delete_object("t1/a.pdf")
    await blob_store.delete_object("t1/a.pdf")

    with pytest.raises(EntityNotFoundError):
        blob_store.read_signed("t1/a.pdf", token_of(url))


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["../outside.pdf", "/etc/passwd", "t1/../../x", ""])
async def test_paths_outside_base_dir_are_rejected(blob_store, path):
    with pytest.raises(DomainValidationError):
        await blob_store.put_object(path, b"x", "application/pdf")


@pytest.mark.asyncio
async def test_os_errors_become_dependency_failures(blob_store):
    # A file where a directory is needed
    blob_store.base_dir.mkdir(parents=True, exist_ok=True)
    (blob_store.base_dir / "t1").write_bytes(b"")

    with pytest.raises(DependencyFailureError):
        await blob_store.put_object("t1/a.pdf", b"a", "application/pdf")
