from .base_client import BaseApiClient
from .rest_collection_client import RestCollectionClient
from .upload_client import UploadClient

__all__ = [
    "BaseApiClient",
    "RestCollectionClient",
    "UploadClient",
]
