from signoff.backend.app.domain.common import ensure_utc
from signoff.backend.app.domain.files import Attachment
from signoff.backend.app.infrastructure.db.models.file import AttachmentModel


def attachment_model_to_domain(m: AttachmentModel) -> Attachment:
    return Attachment(
        id=m.id,
        project_id=m.project_id,
        original_filename=m.original_filename,
        content_type=m.content_type,
        size_bytes=m.size_bytes,
        storage_key=m.storage_key,
        uploaded_at=ensure_utc(m.uploaded_at),
    )


def attachment_domain_to_model(a: Attachment) -> AttachmentModel:
    return AttachmentModel(
        id=a.id,
        project_id=a.project_id,
        original_filename=a.original_filename,
        content_type=a.content_type,
        size_bytes=a.size_bytes,
        storage_key=a.storage_key,
        uploaded_at=a.uploaded_at,
    )
