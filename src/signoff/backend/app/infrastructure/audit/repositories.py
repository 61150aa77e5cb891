from __future__ import annotations

from typing import Sequence
from uuid import UUID

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from signoff.backend.app.domain.audit import AuditLogEntry
from signoff.backend.app.infrastructure.audit.mappers import audit_domain_to_model, audit_model_to_domain
from signoff.backend.app.infrastructure.db.models.audit import AuditLogModel


class SqlAlchemyAuditLogRepository:
    """Append-only: there is deliberately no update or delete here."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, entry: AuditLogEntry) -> AuditLogEntry:
        model = audit_domain_to_model(entry)
        self._session.add(model)
        await self._session.flush()
        return audit_model_to_domain(model)

    async def list_by_project(self, project_id: UUID) -> Sequence[AuditLogEntry]:
        stmt = (
            select(AuditLogModel)
            .where(AuditLogModel.project_id == project_id)
            .order_by(desc(AuditLogModel.created_at))
        )
        res = await self._session.execute(stmt)
        return [audit_model_to_domain(m) for m in res.scalars().all()]
