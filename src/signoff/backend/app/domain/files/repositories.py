from __future__ import annotations

from typing import Protocol, Optional
from uuid import UUID

from .entities import Attachment


class AttachmentRepository(Protocol):
    async def add(self, attachment: Attachment) -> Attachment:
        ...

    async def get_by_project(self, project_id: UUID) -> Optional[Attachment]:
        ...

    async def get_by_id_and_project(self, attachment_id: UUID, project_id: UUID) -> Optional[Attachment]:
        ...

    async def delete(self, attachment_id: UUID) -> None:
        ...
