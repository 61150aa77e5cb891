from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import delete as sa_delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from signoff.backend.app.domain.files import Attachment, InvalidUpload
from signoff.backend.app.infrastructure.db.models.file import AttachmentModel
from signoff.backend.app.infrastructure.files.mappers import (
    attachment_domain_to_model,
    attachment_model_to_domain,
)


class SqlAlchemyAttachmentRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, attachment: Attachment) -> Attachment:
        model = attachment_domain_to_model(attachment)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            # UNIQUE(project_id) or UNIQUE(storage_key)
            raise InvalidUpload("Project already has a file or the key is already in use") from e
        return attachment_model_to_domain(model)

    async def get_by_project(self, project_id: UUID) -> Optional[Attachment]:
        stmt = select(AttachmentModel).where(AttachmentModel.project_id == project_id)
        model = (await self._session.execute(stmt)).scalar_one_or_none()
        return attachment_model_to_domain(model) if model else None

    async def get_by_id_and_project(self, attachment_id: UUID, project_id: UUID) -> Optional[Attachment]:
        stmt = (
            select(AttachmentModel)
            .where(AttachmentModel.id == attachment_id)
            .where(AttachmentModel.project_id == project_id)
        )
        model = (await self._session.execute(stmt)).scalar_one_or_none()
        return attachment_model_to_domain(model) if model else None

    async def delete(self, attachment_id: UUID) -> None:
        await self._session.execute(
            sa_delete(AttachmentModel).where(AttachmentModel.id == attachment_id)
        )
        await self._session.flush()
