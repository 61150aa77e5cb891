from .confirm_upload import ConfirmUploadUseCase
from .delete_attachment import DeleteAttachmentUseCase
from .issue_download_capability import IssueDownloadCapabilityUseCase
from .issue_upload_capability import IssueUploadCapabilityUseCase

__all__ = [
    "ConfirmUploadUseCase",
    "DeleteAttachmentUseCase",
    "IssueDownloadCapabilityUseCase",
    "IssueUploadCapabilityUseCase",
]
