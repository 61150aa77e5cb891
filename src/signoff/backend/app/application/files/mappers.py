from __future__ import annotations

from typing import Optional

from signoff.backend.app.application.files.dto import AttachmentDTO, ConfirmUploadInputDTO
from signoff.backend.app.domain.files import Attachment


def attachment_domain_to_dto(attachment: Attachment, url: Optional[str] = None) -> AttachmentDTO:
    return AttachmentDTO(
        id=attachment.id,
        project_id=attachment.project_id,
        original_filename=attachment.original_filename,
        content_type=attachment.content_type,
        size_bytes=attachment.size_bytes,
        storage_key=attachment.storage_key,
        uploaded_at=attachment.uploaded_at,
        url=url,
    )


def confirm_upload_dto_to_domain(dto: ConfirmUploadInputDTO) -> Attachment:
    return Attachment(
        project_id=dto.identity.project_id,
        original_filename=dto.filename,
        content_type=dto.mime_type,
        size_bytes=dto.size,
        storage_key=dto.key,
    )
