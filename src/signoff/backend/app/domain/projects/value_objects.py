# signoff/backend/app/domain/projects/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from ..common.enums import ActorRole
from .errors import InvalidProjectName


@dataclass(frozen=True)
class ProjectName:
    value: str

    def __post_init__(self) -> None:
        name = self.value.strip()

        if not name:
            raise InvalidProjectName("Project name cannot be empty.")

        if len(name) > 200:
            raise InvalidProjectName("Project name must be at most 200 characters.")

        # normalize stored value
        object.__setattr__(self, "value", name)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ProjectIdentity:
    """Who is calling, as established from an opaque project token."""
    project_id: UUID
    role: ActorRole

    @property
    def is_admin(self) -> bool:
        return self.role is ActorRole.ADMIN
