from __future__ import annotations

from signoff.backend.app.application.audit import AuditTrailRecorder
from signoff.backend.app.application.common.auth import require_admin
from signoff.backend.app.application.common.notifications import emit_safely
from signoff.backend.app.application.files.dto import DeleteAttachmentInputDTO, DeleteResultDTO
from signoff.backend.app.domain.audit import LogAction
from signoff.backend.app.domain.common.enums import ActorRole
from signoff.backend.app.domain.common.uow import UnitOfWork
from signoff.backend.app.domain.files import AttachmentNotFound
from signoff.backend.app.domain.files.interfaces import ObjectCleanupScheduler
from signoff.backend.app.domain.notifications import NotificationSink, ProjectEvent


class DeleteAttachmentUseCase:
    def __init__(
            self,
            uow: UnitOfWork,
            cleanup: ObjectCleanupScheduler,
            notifier: NotificationSink,
    ) -> None:
        self._uow = uow
        self._cleanup = cleanup
        self._notifier = notifier

    async def execute(self, dto: DeleteAttachmentInputDTO) -> DeleteResultDTO:
        require_admin(dto.identity)
        async with self._uow:
            attachment = await self._uow.attachment_repo.get_by_id_and_project(
                dto.file_id, dto.identity.project_id
            )
            if attachment is None:
                raise AttachmentNotFound(str(dto.file_id))
            await self._uow.attachment_repo.delete(attachment.id)
            await AuditTrailRecorder(self._uow).record(
                attachment.project_id, LogAction.FILE_DELETED, ActorRole.ADMIN
            )

        # metadata is gone, so the file is gone; the bytes follow in the background
        self._cleanup.schedule_delete(attachment.storage_key)
        await emit_safely(
            self._notifier,
            attachment.project_id,
            ProjectEvent.FILE_UPDATED,
            {"fileId": None, "filename": None},
        )
        return DeleteResultDTO(success=True)
