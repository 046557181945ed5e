from .collection_client import CollectionClient
from .file_uploader import FileUploader
from .session_provider import SessionProvider

__all__ = [
    "CollectionClient",
    "FileUploader",
    "SessionProvider",
]
