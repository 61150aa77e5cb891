from __future__ import annotations

from signoff.backend.app.application.audit import AuditTrailRecorder
from signoff.backend.app.application.common.auth import require_admin
from signoff.backend.app.application.common.notifications import emit_safely
from signoff.backend.app.application.projects.dto import ExtendExpirationInputDTO, ProjectDTO
from signoff.backend.app.application.projects.expiration import ExpirationPolicy
from signoff.backend.app.application.projects.mappers import project_domain_to_output_dto
from signoff.backend.app.domain.audit import LogAction
from signoff.backend.app.domain.common.enums import ActorRole
from signoff.backend.app.domain.common.uow import UnitOfWork
from signoff.backend.app.domain.notifications import NotificationSink, ProjectEvent
from signoff.backend.app.domain.projects.errors import ProjectNotFound


class ExtendExpirationUseCase:
    def __init__(self, uow: UnitOfWork, expiration: ExpirationPolicy, notifier: NotificationSink) -> None:
        self._uow = uow
        self._expiration = expiration
        self._notifier = notifier

    async def execute(self, dto: ExtendExpirationInputDTO) -> ProjectDTO:
        require_admin(dto.identity)
        async with self._uow:
            project = await self._uow.project_repo.get_by_id(dto.identity.project_id, for_update=True)
            if project is None:
                raise ProjectNotFound(str(dto.identity.project_id))
            project.extend_until(self._expiration.extended(dto.days))
            saved = await self._uow.project_repo.update(project)
            await AuditTrailRecorder(self._uow).record(
                saved.id, LogAction.PROJECT_UPDATED, ActorRole.ADMIN
            )

        await emit_safely(
            self._notifier,
            saved.id,
            ProjectEvent.EXPIRATION_UPDATED,
            {"expiresAt": saved.expires_at.isoformat() if saved.expires_at else None},
        )
        return project_domain_to_output_dto(saved)
