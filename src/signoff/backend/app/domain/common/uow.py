from types import TracebackType
from typing import Protocol, Optional

from signoff.backend.app.domain.audit.repositories import AuditLogRepository
from signoff.backend.app.domain.files.repositories import AttachmentRepository
from signoff.backend.app.domain.projects.repositories import ProjectRepository, DecisionRepository


class UnitOfWork(Protocol):
    project_repo: ProjectRepository
    decision_repo: DecisionRepository
    attachment_repo: AttachmentRepository
    audit_repo: AuditLogRepository

    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...

    async def __aenter__(self) -> "UnitOfWork": ...

    async def __aexit__(
            self,
            exc_type: Optional[type[BaseException]],
            exc: Optional[BaseException],
            tb: Optional[TracebackType],
    ) -> None: ...
