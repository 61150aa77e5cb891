from __future__ import annotations

from signoff.backend.app.application.common.auth import require_admin
from signoff.backend.app.application.common.notifications import emit_safely
from signoff.backend.app.application.files.dto import DeleteResultDTO
from signoff.backend.app.application.projects.dto import DeleteProjectInputDTO
from signoff.backend.app.domain.common.uow import UnitOfWork
from signoff.backend.app.domain.files.interfaces import ObjectCleanupScheduler
from signoff.backend.app.domain.notifications import NotificationSink, ProjectEvent
from signoff.backend.app.domain.projects.errors import ProjectNotFound


class DeleteProjectUseCase:
    def __init__(
            self,
            uow: UnitOfWork,
            cleanup: ObjectCleanupScheduler,
            notifier: NotificationSink,
    ) -> None:
        self._uow = uow
        self._cleanup = cleanup
        self._notifier = notifier

    async def execute(self, dto: DeleteProjectInputDTO) -> DeleteResultDTO:
        require_admin(dto.identity)
        async with self._uow:
            project = await self._uow.project_repo.get_by_id(dto.identity.project_id, for_update=True)
            if project is None:
                raise ProjectNotFound(str(dto.identity.project_id))
            attachment = await self._uow.attachment_repo.get_by_project(project.id)
            # attachment, decisions and audit entries go with the project row
            await self._uow.project_repo.delete(project.id)

        if attachment is not None:
            self._cleanup.schedule_delete(attachment.storage_key)
        await emit_safely(self._notifier, project.id, ProjectEvent.DELETED, {})
        return DeleteResultDTO(success=True)
