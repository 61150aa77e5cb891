# signoff/backend/app/infrastructure/db/uow.py
from sqlalchemy.ext.asyncio import AsyncSession

from signoff.backend.app.domain.common.uow import UnitOfWork
from signoff.backend.app.infrastructure.audit.repositories import SqlAlchemyAuditLogRepository
from signoff.backend.app.infrastructure.files.repositories import SqlAlchemyAttachmentRepository
from signoff.backend.app.infrastructure.projects.repositories import (
    SqlAlchemyDecisionRepository,
    SqlAlchemyProjectRepository,
)


class SqlAlchemyUnitOfWork:
    def __init__(self, session: AsyncSession):
        self._session = session
        self.project_repo = SqlAlchemyProjectRepository(session)
        self.decision_repo = SqlAlchemyDecisionRepository(session)
        self.attachment_repo = SqlAlchemyAttachmentRepository(session)
        self.audit_repo = SqlAlchemyAuditLogRepository(session)

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()

    async def __aenter__(self) -> "SqlAlchemyUnitOfWork":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc:
            await self.rollback()
        else:
            await self.commit()


__all__ = ["SqlAlchemyUnitOfWork", "UnitOfWork"]
