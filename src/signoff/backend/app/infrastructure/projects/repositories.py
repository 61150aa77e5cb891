from __future__ import annotations

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import delete as sa_delete, desc, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from signoff.backend.app.domain.projects import Project, Decision
from signoff.backend.app.infrastructure.db.models.project import ProjectModel, DecisionModel
from signoff.backend.app.infrastructure.projects.mappers import (
    decision_domain_to_model,
    decision_model_to_domain,
    project_domain_to_model,
    project_model_to_domain,
)


class SqlAlchemyProjectRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, project: Project) -> Project:
        pm = project_domain_to_model(project)
        self._session.add(pm)
        await self._session.flush()
        await self._session.refresh(pm)
        return project_model_to_domain(pm)

    async def get_by_id(self, project_id: UUID, *, for_update: bool = False) -> Optional[Project]:
        stmt = select(ProjectModel).where(ProjectModel.id == project_id)
        return await self._one(stmt, for_update=for_update)

    async def get_by_admin_token(self, token: str) -> Optional[Project]:
        stmt = select(ProjectModel).where(ProjectModel.admin_token == token)
        return await self._one(stmt)

    async def get_by_public_token(self, token: str, *, for_update: bool = False) -> Optional[Project]:
        stmt = select(ProjectModel).where(ProjectModel.public_token == token)
        return await self._one(stmt, for_update=for_update)

    async def get_by_any_token(self, token: str) -> Optional[Project]:
        stmt = select(ProjectModel).where(
            or_(ProjectModel.admin_token == token, ProjectModel.public_token == token)
        )
        return await self._one(stmt)

    async def update(self, project: Project) -> Project:
        """
        Persists the mutable fields (status, expiry, timestamps).
        Tokens, name and creation time never change after creation.
        """
        res = await self._session.execute(
            update(ProjectModel)
            .where(ProjectModel.id == project.id)
            .values(
                status=project.status,
                expires_at=project.expires_at,
                updated_at=project.updated_at,
            )
        )
        if res.rowcount == 0:
            raise ValueError(f"Project {project.id} not found")
        await self._session.flush()
        loaded = await self.get_by_id(project.id)
        if loaded is None:
            raise ValueError(f"Project {project.id} not found")
        return loaded

    async def delete(self, project_id: UUID) -> None:
        await self._session.execute(
            sa_delete(ProjectModel).where(ProjectModel.id == project_id)
        )
        await self._session.flush()

    async def _one(self, stmt, *, for_update: bool = False) -> Optional[Project]:
        if for_update:
            stmt = stmt.with_for_update()
        # bypass the identity map so a locked read sees the committed row
        stmt = stmt.execution_options(populate_existing=True)
        pm = (await self._session.execute(stmt)).scalar_one_or_none()
        return project_model_to_domain(pm) if pm else None


class SqlAlchemyDecisionRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, decision: Decision) -> Decision:
        dm = decision_domain_to_model(decision)
        self._session.add(dm)
        await self._session.flush()
        return decision_model_to_domain(dm)

    async def get_latest(self, project_id: UUID) -> Optional[Decision]:
        stmt = (
            select(DecisionModel)
            .where(DecisionModel.project_id == project_id)
            .order_by(desc(DecisionModel.created_at))
            .limit(1)
        )
        dm = (await self._session.execute(stmt)).scalar_one_or_none()
        return decision_model_to_domain(dm) if dm else None

    async def list_by_project(self, project_id: UUID) -> Sequence[Decision]:
        stmt = (
            select(DecisionModel)
            .where(DecisionModel.project_id == project_id)
            .order_by(DecisionModel.created_at)
        )
        res = await self._session.execute(stmt)
        return [decision_model_to_domain(dm) for dm in res.scalars().all()]
