from __future__ import annotations

import secrets
from typing import Optional

from signoff.backend.app.domain.common.enums import ActorRole
from signoff.backend.app.domain.common.uow import UnitOfWork
from signoff.backend.app.domain.projects import ProjectIdentity


class ResolveProjectTokenUseCase:
    """
    Maps an opaque token to the project it unlocks and the role it grants.
    Returns None rather than raising: callers turn a miss into an
    authorization failure without revealing which kind of token was tried.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def execute(self, token: str) -> Optional[ProjectIdentity]:
        if not token:
            return None
        async with self._uow:
            project = await self._uow.project_repo.get_by_any_token(token)
        if project is None:
            return None
        if secrets.compare_digest(token, project.admin_token):
            role = ActorRole.ADMIN
        else:
            role = ActorRole.CLIENT
        return ProjectIdentity(project_id=project.id, role=role)
