from __future__ import annotations

from typing import Optional

from signoff.backend.app.application.audit import AuditTrailRecorder
from signoff.backend.app.application.common.auth import require_admin
from signoff.backend.app.application.common.notifications import emit_safely
from signoff.backend.app.application.files.dto import AttachmentDTO, ConfirmUploadInputDTO
from signoff.backend.app.application.files.mappers import (
    attachment_domain_to_dto,
    confirm_upload_dto_to_domain,
)
from signoff.backend.app.application.files.upload_policy import UploadPolicy
from signoff.backend.app.domain.audit import LogAction
from signoff.backend.app.domain.common.enums import ActorRole
from signoff.backend.app.domain.common.uow import UnitOfWork
from signoff.backend.app.domain.files.interfaces import ObjectCleanupScheduler
from signoff.backend.app.domain.notifications import NotificationSink, ProjectEvent
from signoff.backend.app.domain.projects.errors import ProjectNotFound


class ConfirmUploadUseCase:
    """
    Records metadata for bytes the caller already put at `key`.

    One project, one file: an existing attachment row is deleted in the same
    transaction that inserts the new one. Its object is removed only after
    commit, in the background; if that fails the object is left orphaned.
    """

    def __init__(
            self,
            uow: UnitOfWork,
            policy: UploadPolicy,
            cleanup: ObjectCleanupScheduler,
            notifier: NotificationSink,
    ) -> None:
        self._uow = uow
        self._policy = policy
        self._cleanup = cleanup
        self._notifier = notifier

    async def execute(self, dto: ConfirmUploadInputDTO) -> AttachmentDTO:
        require_admin(dto.identity)
        self._policy.validate(mime_type=dto.mime_type, size=dto.size)
        self._policy.ensure_key_owned(dto.identity.project_id, dto.key)

        replaced_key: Optional[str] = None
        async with self._uow:
            # lock the project row so two confirmations for it cannot interleave
            project = await self._uow.project_repo.get_by_id(dto.identity.project_id, for_update=True)
            if project is None:
                raise ProjectNotFound(str(dto.identity.project_id))

            existing = await self._uow.attachment_repo.get_by_project(project.id)
            if existing is not None:
                await self._uow.attachment_repo.delete(existing.id)
                replaced_key = existing.storage_key

            saved = await self._uow.attachment_repo.add(confirm_upload_dto_to_domain(dto))
            await AuditTrailRecorder(self._uow).record(
                project.id, LogAction.FILE_UPLOADED, ActorRole.ADMIN
            )

        # a repeated confirmation of the same key must not delete the live object
        if replaced_key is not None and replaced_key != saved.storage_key:
            self._cleanup.schedule_delete(replaced_key)

        await emit_safely(
            self._notifier,
            project.id,
            ProjectEvent.FILE_UPDATED,
            {"fileId": str(saved.id), "filename": saved.original_filename},
        )
        return attachment_domain_to_dto(saved)
