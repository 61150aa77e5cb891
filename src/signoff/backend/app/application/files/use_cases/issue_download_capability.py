from __future__ import annotations

from signoff.backend.app.application.common.auth import require_admin
from signoff.backend.app.application.files.dto import DownloadCapabilityDTO, IssueDownloadCapabilityInputDTO
from signoff.backend.app.domain.common.uow import UnitOfWork
from signoff.backend.app.domain.files import AttachmentNotFound
from signoff.backend.app.domain.files.interfaces import ObjectStorage


class IssueDownloadCapabilityUseCase:
    def __init__(self, uow: UnitOfWork, storage: ObjectStorage, *, download_expires_in: int) -> None:
        self._uow = uow
        self._storage = storage
        self._download_expires_in = download_expires_in

    async def execute(self, dto: IssueDownloadCapabilityInputDTO) -> DownloadCapabilityDTO:
        require_admin(dto.identity)
        async with self._uow:
            attachment = await self._uow.attachment_repo.get_by_id_and_project(
                dto.file_id, dto.identity.project_id
            )
        if attachment is None:
            # also the answer for another project's file
            raise AttachmentNotFound(str(dto.file_id))

        capability = await self._storage.get_capability(
            key=attachment.storage_key,
            download_filename=attachment.original_filename,
            expires_in=self._download_expires_in,
        )
        return DownloadCapabilityDTO(url=capability.url, filename=attachment.original_filename)
