"""Domain entity — descriptor returned after a material file upload."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UploadedFile:
    """Where the server stored an uploaded file."""

    file_path: str
    file_name: str
    file_size: int
