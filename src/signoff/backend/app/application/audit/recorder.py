from __future__ import annotations

from typing import Optional
from uuid import UUID

from signoff.backend.app.domain.audit import AuditLogEntry, LogAction
from signoff.backend.app.domain.common.enums import ActorRole
from signoff.backend.app.domain.common.uow import UnitOfWork


class AuditTrailRecorder:
    """
    Appends audit entries through the caller's unit of work, so an entry
    commits or rolls back together with the change it documents.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def record(
            self,
            project_id: UUID,
            action: LogAction,
            actor_role: ActorRole,
            *,
            ip_address: Optional[str] = None,
            user_agent: Optional[str] = None,
    ) -> AuditLogEntry:
        entry = AuditLogEntry(
            project_id=project_id,
            action=action,
            actor_role=actor_role,
            ip_address=ip_address,
            user_agent=user_agent,
        )
        return await self._uow.audit_repo.add(entry)
