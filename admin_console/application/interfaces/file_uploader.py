"""Abstract file uploader interface — port for material file uploads."""

from abc import ABC, abstractmethod

from admin_console.domain.entities import UploadedFile


class FileUploader(ABC):
    """Port for sending one file to the server and getting its descriptor back."""

    @abstractmethod
    async def upload(
        self,
        content: bytes,
        filename: str,
        *,
        content_type: str | None = None,
        material_type: str | None = None,
    ) -> UploadedFile:
        """Upload a single file as multipart form data.

        Raises:
            ApiError: If the upload fails or the response is unreadable.
        """
        ...
