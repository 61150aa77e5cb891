from __future__ import annotations

import logging
from typing import Optional

from signoff.backend.app.application.common.auth import require_admin
from signoff.backend.app.application.files.dto import AttachmentDTO
from signoff.backend.app.application.files.mappers import attachment_domain_to_dto
from signoff.backend.app.application.projects.dto import AdminProjectViewDTO, GetAdminViewInputDTO
from signoff.backend.app.application.projects.mappers import (
    audit_entry_to_dto,
    project_domain_to_output_dto,
)
from signoff.backend.app.domain.common.errors import StorageFailure
from signoff.backend.app.domain.common.uow import UnitOfWork
from signoff.backend.app.domain.files import Attachment
from signoff.backend.app.domain.files.interfaces import ObjectStorage
from signoff.backend.app.domain.projects.errors import ProjectNotFound

logger = logging.getLogger(__name__)


class GetAdminViewUseCase:
    def __init__(self, uow: UnitOfWork, storage: ObjectStorage, *, download_expires_in: int) -> None:
        self._uow = uow
        self._storage = storage
        self._download_expires_in = download_expires_in

    async def execute(self, dto: GetAdminViewInputDTO) -> AdminProjectViewDTO:
        require_admin(dto.identity)
        async with self._uow:
            project = await self._uow.project_repo.get_by_id(dto.identity.project_id)
            if project is None:
                raise ProjectNotFound(str(dto.identity.project_id))
            attachment = await self._uow.attachment_repo.get_by_project(project.id)
            logs = await self._uow.audit_repo.list_by_project(project.id)
            latest = await self._uow.decision_repo.get_latest(project.id)

        return AdminProjectViewDTO(
            project=project_domain_to_output_dto(project),
            file=await self._file_with_url(attachment),
            logs=[audit_entry_to_dto(entry) for entry in logs],
            latest_comment=latest.comment if latest else None,
        )

    async def _file_with_url(self, attachment: Optional[Attachment]) -> Optional[AttachmentDTO]:
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
            logger.warning("Could not sign read URL for attachment %s", attachment.id, exc_info=True)
        return attachment_domain_to_dto(attachment, url=url)
