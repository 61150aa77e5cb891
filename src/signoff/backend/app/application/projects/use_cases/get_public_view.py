from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from signoff.backend.app.application.audit import AuditTrailRecorder
from signoff.backend.app.application.projects.dto import (
    GetPublicViewInputDTO,
    PublicFileDTO,
    PublicProjectViewDTO,
)
from signoff.backend.app.application.projects.expiration import ExpirationPolicy
from signoff.backend.app.application.projects.mappers import attachment_to_public_file_dto
from signoff.backend.app.domain.audit import LogAction
from signoff.backend.app.domain.common.enums import ActorRole
from signoff.backend.app.domain.common.errors import StorageFailure
from signoff.backend.app.domain.common.uow import UnitOfWork
from signoff.backend.app.domain.files import Attachment
from signoff.backend.app.domain.files.interfaces import ObjectStorage
from signoff.backend.app.domain.projects.errors import ProjectNotFound, ProjectLinkExpired

logger = logging.getLogger(__name__)


class GetPublicViewUseCase:
    def __init__(
            self,
            uow: UnitOfWork,
            storage: ObjectStorage,
            expiration: ExpirationPolicy,
            *,
            download_expires_in: int,
    ) -> None:
        self._uow = uow
        self._storage = storage
        self._expiration = expiration
        self._download_expires_in = download_expires_in

    async def execute(self, dto: GetPublicViewInputDTO) -> PublicProjectViewDTO:
        async with self._uow:
            project = await self._uow.project_repo.get_by_public_token(dto.public_token)
            if project is None:
                raise ProjectNotFound()
            # an expired link reveals nothing, not even the file
            if self._expiration.is_expired(project):
                raise ProjectLinkExpired()
            attachment = await self._uow.attachment_repo.get_by_project(project.id)
            latest = await self._uow.decision_repo.get_latest(project.id)

        await self._record_view(project.id, dto)

        return PublicProjectViewDTO(
            name=str(project.name),
            status=project.status.value,
            expires_at=project.expires_at,
            file=await self._public_file(attachment),
            client_feedback=(latest.comment or None) if latest else None,
        )

    async def _record_view(self, project_id: UUID, dto: GetPublicViewInputDTO) -> None:
        try:
            async with self._uow:
                await AuditTrailRecorder(self._uow).record(
                    project_id,
                    LogAction.CLIENT_VIEWED,
                    ActorRole.CLIENT,
                    ip_address=dto.ip_address,
                    user_agent=dto.user_agent,
                )
        except Exception:
            logger.warning("Failed to record client view for project %s", project_id, exc_info=True)

    async def _public_file(self, attachment: Optional[Attachment]) -> Optional[PublicFileDTO]:
        if attachment is None:
            return None
        url = None
        try:
            capability = await self._storage.get_capability(
                key=attachment.storage_key,
                download_filename=None,
                expires_in=self._download_expires_in,
            )
            url = capability.url
        except StorageFailure:
            logger.warning("Could not sign client read URL for attachment %s", attachment.id, exc_info=True)
        return attachment_to_public_file_dto(attachment, url)
