from uuid import UUID

from signoff.backend.app.api.v1.storage.schemas import ConfirmUploadRequest, SignUrlRequest
from signoff.backend.app.application.files.dto import (
    ConfirmUploadInputDTO,
    DeleteAttachmentInputDTO,
    IssueDownloadCapabilityInputDTO,
    IssueUploadCapabilityInputDTO,
)
from signoff.backend.app.domain.projects import ProjectIdentity


def get_issue_upload_input_dto(identity: ProjectIdentity, body: SignUrlRequest) -> IssueUploadCapabilityInputDTO:
    return IssueUploadCapabilityInputDTO(
        identity=identity,
        filename=body.filename,
        mime_type=body.mimetype,
        size=body.size,
    )


def get_confirm_upload_input_dto(identity: ProjectIdentity, body: ConfirmUploadRequest) -> ConfirmUploadInputDTO:
    return ConfirmUploadInputDTO(
        identity=identity,
        key=body.key,
        filename=body.filename,
        size=body.size,
        mime_type=body.mimetype,
    )


def get_download_input_dto(identity: ProjectIdentity, file_id: UUID) -> IssueDownloadCapabilityInputDTO:
    return IssueDownloadCapabilityInputDTO(identity=identity, file_id=file_id)


def get_delete_attachment_input_dto(identity: ProjectIdentity, file_id: UUID) -> DeleteAttachmentInputDTO:
    return DeleteAttachmentInputDTO(identity=identity, file_id=file_id)
