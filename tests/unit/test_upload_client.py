"""Unit tests for the UploadClient."""

import httpx
import pytest

from admin_console.domain.entities import UploadedFile
from admin_console.domain.exceptions import ApiError, ApiErrorKind, PayloadValidationError
from admin_console.infrastructure.http import UploadClient


def _client(handler, **options) -> UploadClient:
    return UploadClient(
        "http://admin.test",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        **options,
    )


@pytest.mark.asyncio
async def test_upload_sends_multipart_file():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "filePath": "/uploads/handbook.pdf",
                "fileName": "handbook.pdf",
                "fileSize": 4,
            },
        )

    client = _client(handler)

    uploaded = await client.upload(b"%PDF", "handbook.pdf", material_type="pdf")

    assert uploaded == UploadedFile("/uploads/handbook.pdf", "handbook.pdf", 4)
    request = seen[0]
    assert request.url.path == "/api/admin/training/upload"
    assert request.headers["content-type"].startswith("multipart/form-data")
    body = request.content
    assert b'name="file"; filename="handbook.pdf"' in body
    assert b"application/pdf" in body
    assert b'name="type"' in body


@pytest.mark.asyncio
async def test_upload_accepts_url_only_response():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"url": "/uploads/clip.mp4"})

    uploaded = await _client(handler).upload(b"1234567", "clip.mp4")

    assert uploaded.file_path == "/uploads/clip.mp4"
    assert uploaded.file_name == "clip.mp4"
    assert uploaded.file_size == 7


@pytest.mark.asyncio
async def test_upload_rejects_empty_file_without_request():
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={})

    with pytest.raises(PayloadValidationError) as exc_info:
        await _client(handler).upload(b"", "empty.pdf")

    assert "file" in exc_info.value.field_errors
    assert calls == []


@pytest.mark.asyncio
async def test_upload_rejects_oversized_file():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={})

    client = _client(handler, max_upload_size_mb=1)

    with pytest.raises(PayloadValidationError) as exc_info:
        await client.upload(b"x" * (1024 * 1024 + 1), "big.bin")

    assert "1 MB" in exc_info.value.field_errors["file"]


@pytest.mark.asyncio
async def test_upload_without_path_is_malformed():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"ok": True})

    with pytest.raises(ApiError) as exc_info:
        await _client(handler).upload(b"data", "notes.txt")

    assert exc_info.value.kind == ApiErrorKind.MALFORMED


@pytest.mark.asyncio
async def test_upload_server_error_keeps_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(413, json={"error": "File too large"})

    with pytest.raises(ApiError) as exc_info:
        await _client(handler).upload(b"data", "notes.txt")

    assert exc_info.value.status_code == 413
    assert exc_info.value.message == "File too large"


@pytest.mark.asyncio
async def test_upload_with_non_numeric_size_is_malformed():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, json={"filePath": "/uploads/a.pdf", "fileSize": "about 2 MB"}
        )

    with pytest.raises(ApiError) as exc_info:
        await _client(handler).upload(b"data", "a.pdf")

    assert exc_info.value.kind == ApiErrorKind.MALFORMED
