from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from src.api.error import ClientError, unwrap
from src.api.responses import envelope
from src.api.utils.access import require
from src.app.policy import Identity
from src.app.services.file_storage import IFileStorage
from src.app.use_cases.upload import (
    FILE_TOO_LARGE,
    UploadFileUseCase,
    exceeds_upload_limit,
    read_limit,
)
from src.depends import get_file_storage
from src.domain.result import Error

router = APIRouter(prefix="/upload", tags=["Upload"])


@router.post("", status_code=status.HTTP_200_OK)
async def upload_file(
    file: Optional[UploadFile] = File(None),
    folder: Optional[str] = Form(None),
    identity: Identity = Depends(require("upload:create")),
    storage: IFileStorage = Depends(get_file_storage),
):
    """
    Upload an image, document or video to object storage.

    Raises:
        - 400 Bad Request: No file, disallowed type or over 50MB
        - 500 Internal Server Error: Storage provider failure
    """
    if file is None:
        raise ClientError(Error("NO_FILE", "No file uploaded"))

    # Size is known once the multipart body is spooled; never buffer past the cap
    if exceeds_upload_limit(file.size):
        raise ClientError(FILE_TOO_LARGE)
    content = await file.read(read_limit())

    result = await UploadFileUseCase(storage).execute(
        content,
        filename=file.filename or "upload",
        content_type=file.content_type or "",
        folder=folder,
    )
    stored = unwrap(result)
    return envelope(
        data={
            "url": stored.url,
            "publicId": stored.public_id,
            "format": stored.format,
            "size": stored.size,
        },
        message="File uploaded successfully",
    )
