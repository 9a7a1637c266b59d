from .upload_file_use_case import (
    ALLOWED_MIME_TYPES,
    FILE_TOO_LARGE,
    MAX_UPLOAD_BYTES,
    UploadFileUseCase,
    exceeds_upload_limit,
    read_limit,
)

__all__ = [
    "ALLOWED_MIME_TYPES",
    "FILE_TOO_LARGE",
    "MAX_UPLOAD_BYTES",
    "UploadFileUseCase",
    "exceeds_upload_limit",
    "read_limit",
]
