from __future__ import annotations

from signoff.backend.app.application.audit import AuditTrailRecorder
from signoff.backend.app.application.projects.dto import CreateProjectInputDTO, ProjectDTO
from signoff.backend.app.application.projects.expiration import ExpirationPolicy
from signoff.backend.app.application.projects.interfaces import TokenGenerator
from signoff.backend.app.application.projects.mappers import project_domain_to_output_dto
from signoff.backend.app.domain.audit import LogAction
from signoff.backend.app.domain.common import utcnow
from signoff.backend.app.domain.common.enums import ActorRole
from signoff.backend.app.domain.common.uow import UnitOfWork
from signoff.backend.app.domain.projects import Project, ProjectName


class CreateProjectUseCase:
    def __init__(self, uow: UnitOfWork, tokens: TokenGenerator, expiration: ExpirationPolicy) -> None:
        self._uow = uow
        self._tokens = tokens
        self._expiration = expiration

    async def execute(self, dto: CreateProjectInputDTO) -> ProjectDTO:
        name = ProjectName(dto.name)
        admin_token = self._tokens.generate()
        public_token = self._tokens.generate()
        while public_token == admin_token:
            public_token = self._tokens.generate()

        now = utcnow()
        project = Project(
            name=name,
            admin_token=admin_token,
            public_token=public_token,
            expires_at=self._expiration.default_expiry(now),
            created_at=now,
            updated_at=now,
        )

        async with self._uow:
            saved = await self._uow.project_repo.add(project)
            await AuditTrailRecorder(self._uow).record(
                saved.id, LogAction.PROJECT_CREATED, ActorRole.ADMIN
            )
            return project_domain_to_output_dto(saved)
