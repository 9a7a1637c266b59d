"""
Cloudinary object storage through the official SDK.
"""

import io
import logging
import os
import time

import cloudinary.exceptions
import cloudinary.uploader
from fastapi.concurrency import run_in_threadpool

from src.app.services.file_storage import FileStorageError, IFileStorage, StoredFile

logger = logging.getLogger(__name__)


def resource_type_for(content_type: str) -> str:
    """Videos go to "video", PDFs and Word files to "raw", the rest is auto."""
    if content_type.startswith("video/"):
        return "video"
    if content_type.startswith("application/pdf") or "word" in content_type:
        return "raw"
    return "auto"


class CloudinaryStorage(IFileStorage):
    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        timeout_sec: float = 30.0,
    ):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.timeout_sec = timeout_sec

    async def upload(
        self, content: bytes, filename: str, content_type: str, folder: str
    ) -> StoredFile:
        if not self.cloud_name or not self.api_key or not self.api_secret:
            logger.warning("Cloudinary credentials missing")
            raise FileStorageError("Object storage is not configured")

        stem = os.path.splitext(os.path.basename(filename or "upload"))[0] or "upload"

        # The SDK is blocking; keep it off the event loop
        try:
            body = await run_in_threadpool(
                cloudinary.uploader.upload,
                io.BytesIO(content),
                folder=folder,
                public_id=f"{stem}_{int(time.time() * 1000)}",
                resource_type=resource_type_for(content_type),
                cloud_name=self.cloud_name,
                api_key=self.api_key,
                api_secret=self.api_secret,
                timeout=self.timeout_sec,
            )
        except cloudinary.exceptions.Error as e:
            raise FileStorageError(f"Cloudinary upload failed: {e}") from e

        url = body.get("secure_url")
        public_id = body.get("public_id")
        if not url or not public_id:
            raise FileStorageError("Cloudinary response is missing secure_url or public_id")

        logger.info("Uploaded %s to Cloudinary as %s", filename, public_id)
        return StoredFile(
            url=url,
            public_id=public_id,
            format=body.get("format") or os.path.splitext(filename)[1].lstrip("."),
            size=body.get("bytes", len(content)),
        )
