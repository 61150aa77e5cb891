from __future__ import annotations

from typing import Protocol, Sequence
from uuid import UUID

from .entities import AuditLogEntry


class AuditLogRepository(Protocol):
    async def add(self, entry: AuditLogEntry) -> AuditLogEntry:
        ...

    async def list_by_project(self, project_id: UUID) -> Sequence[AuditLogEntry]:
        """Newest first."""
        ...
