"""
Upload File Use Case

Checks an uploaded file and hands it to object storage.
"""

import logging

from src.app.services.file_storage import FileStorageError, IFileStorage, StoredFile
from src.domain.result import Error, Result, Return

logger = logging.getLogger(__name__)

DEFAULT_FOLDER = "nuprc_general"
MAX_UPLOAD_BYTES = 50 * 1024 * 1024

ALLOWED_MIME_TYPES = frozenset(
    {
        "image/jpeg",
        "image/png",
        "image/gif",
        "image/webp",
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "video/mp4",
        "video/mpeg",
    }
)

FILE_TOO_LARGE = Error("FILE_TOO_LARGE", "File exceeds the 50MB limit")


def exceeds_upload_limit(size: int | None) -> bool:
    return size is not None and size > MAX_UPLOAD_BYTES


def read_limit() -> int:
    """Bytes to read from an upload: one past the cap, so an oversize file shows."""
    return MAX_UPLOAD_BYTES + 1


class UploadFileUseCase:
    """
    Use case for storing an uploaded file.

    Business Rules:
    - Only images, PDFs, Word documents and MP4/MPEG videos are accepted
    - Files larger than 50 MiB are rejected
    - Storage failures are logged and reported as UPLOAD_FAILED
    """

    def __init__(self, storage: IFileStorage):
        self.storage = storage

    async def execute(
        self,
        content: bytes,
        filename: str,
        content_type: str,
        folder: str | None = None,
    ) -> Result[StoredFile]:
        if content_type not in ALLOWED_MIME_TYPES:
            return Return.err(
                Error(
                    "INVALID_FILE_TYPE",
                    "Invalid file type. Only images, PDFs, word docs and videos are allowed.",
                )
            )
        if exceeds_upload_limit(len(content)):
            return Return.err(FILE_TOO_LARGE)
        if not content:
            return Return.err(Error("NO_FILE", "No file uploaded"))

        try:
            stored = await self.storage.upload(
                content, filename, content_type, folder or DEFAULT_FOLDER
            )
        except FileStorageError as exc:
            logger.error("Upload of %s failed: %s", filename, exc)
            return Return.err(Error("UPLOAD_FAILED", "File upload failed"))

        return Return.ok(stored)
