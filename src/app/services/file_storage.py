from abc import ABC, abstractmethod

from pydantic import BaseModel


class StoredFile(BaseModel):
    """Where an uploaded file ended up"""

    url: str
    public_id: str
    format: str
    size: int


class FileStorageError(Exception):
    """Raised when the object store rejects or fails an upload"""


class IFileStorage(ABC):
    """Object storage for uploaded media and documents"""

    @abstractmethod
    async def upload(
        self, content: bytes, filename: str, content_type: str, folder: str
    ) -> StoredFile:
        pass
