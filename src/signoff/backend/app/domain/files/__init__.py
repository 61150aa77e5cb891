from signoff.backend.app.domain.files.entities import Attachment, StorageCapability
from signoff.backend.app.domain.files.errors import (
    AttachmentNotFound,
    DisallowedMimeType,
    InvalidFileSize,
    InvalidUpload,
)

__all__ = [
    "Attachment",
    "StorageCapability",
    "AttachmentNotFound",
    "DisallowedMimeType",
    "InvalidFileSize",
    "InvalidUpload",
]
