"""Upload client — implements the FileUploader interface for training materials."""

import logging
import mimetypes
from typing import Any

from admin_console.application.interfaces import FileUploader
from admin_console.domain.entities import UploadedFile
from admin_console.domain.exceptions import ApiError, ApiErrorKind, PayloadValidationError
from admin_console.infrastructure.http.base_client import BaseApiClient

logger = logging.getLogger(__name__)


class UploadClient(BaseApiClient, FileUploader):
    """Infrastructure adapter — ``POST /api/{scope}/upload`` with one multipart file."""

    def __init__(
        self,
        base_url: str,
        upload_path: str = "admin/training/upload",
        *,
        max_upload_size_mb: int = 100,
        **options: Any,
    ):
        super().__init__(base_url, **options)
        self._upload_path = upload_path.strip("/")
        self._max_bytes = max_upload_size_mb * 1024 * 1024

    async def upload(
        self,
        content: bytes,
        filename: str,
        *,
        content_type: str | None = None,
        material_type: str | None = None,
    ) -> UploadedFile:
        if not content:
            raise PayloadValidationError("file", {"file": "The file is empty."})
        if len(content) > self._max_bytes:
            raise PayloadValidationError(
                "file",
                {"file": f"The file exceeds {self._max_bytes // (1024 * 1024)} MB."},
            )

        mime = content_type or mimetypes.guess_type(filename)[0] or "application/octet-stream"
        data = {"type": material_type} if material_type else None
        response = await self._send(
            "POST",
            self._api_url(self._upload_path),
            files={"file": (filename, content, mime)},
            data=data,
        )
        body = self._parse_json(response)
        logger.info("Uploaded %s (%d bytes)", filename, len(content))
        return self._to_uploaded_file(body, filename, len(content), response.status_code)

    def _to_uploaded_file(
        self, body: Any, filename: str, size: int, status_code: int
    ) -> UploadedFile:
        """Accept both ``{filePath, fileName, fileSize}`` and the older ``{url}`` shape."""
        if isinstance(body, dict):
            path = body.get("filePath") or body.get("url")
            try:
                file_size = int(body.get("fileSize") or size)
            except (TypeError, ValueError):
                logger.warning("Upload response has a bad fileSize: %r", body.get("fileSize"))
                file_size = None
            if isinstance(path, str) and path and file_size is not None:
                return UploadedFile(
                    file_path=path,
                    file_name=str(body.get("fileName") or filename),
                    file_size=file_size,
                )
        raise ApiError(
            ApiErrorKind.MALFORMED,
            self._malformed_response_message,
            status_code=status_code,
        )
