from __future__ import annotations

from typing import Protocol, Optional, Sequence
from uuid import UUID

from .entities import Project, Decision


class ProjectRepository(Protocol):
    async def add(self, project: Project) -> Project:
        ...

    async def get_by_id(self, project_id: UUID, *, for_update: bool = False) -> Optional[Project]:
        ...

    async def get_by_admin_token(self, token: str) -> Optional[Project]:
        ...

    async def get_by_public_token(self, token: str, *, for_update: bool = False) -> Optional[Project]:
        """
        for_update=True holds a row lock until the surrounding transaction ends,
        so concurrent decisions on one project run one after the other.
        """
        ...

    async def get_by_any_token(self, token: str) -> Optional[Project]:
        ...

    async def update(self, project: Project) -> Project:
        ...

    async def delete(self, project_id: UUID) -> None:
        ...


class DecisionRepository(Protocol):
    async def add(self, decision: Decision) -> Decision:
        ...

    async def get_latest(self, project_id: UUID) -> Optional[Decision]:
        ...

    async def list_by_project(self, project_id: UUID) -> Sequence[Decision]:
        ...
