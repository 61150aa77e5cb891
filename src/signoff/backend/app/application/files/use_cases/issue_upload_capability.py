from __future__ import annotations

from signoff.backend.app.application.common.auth import require_admin
from signoff.backend.app.application.files.dto import IssueUploadCapabilityInputDTO, UploadCapabilityDTO
from signoff.backend.app.application.files.upload_policy import UploadPolicy
from signoff.backend.app.domain.files.interfaces import ObjectStorage


class IssueUploadCapabilityUseCase:
    """
    Hands out a short-lived presigned PUT for a fresh key under the project's
    prefix. Nothing is written to the metadata store until confirmation.
    """

    def __init__(self, storage: ObjectStorage, policy: UploadPolicy, *, upload_expires_in: int) -> None:
        self._storage = storage
        self._policy = policy
        self._upload_expires_in = upload_expires_in

    async def execute(self, dto: IssueUploadCapabilityInputDTO) -> UploadCapabilityDTO:
        require_admin(dto.identity)
        self._policy.validate(mime_type=dto.mime_type, size=dto.size)
        key = self._policy.build_key(dto.identity.project_id, dto.filename)
        capability = await self._storage.put_capability(
            key=key,
            content_type=dto.mime_type,
            expires_in=self._upload_expires_in,
        )
        return UploadCapabilityDTO(upload_url=capability.url, key=capability.key)
